import pytest

from eddi_server import env_detector


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    return tmp_path


def test_get_port(clean_env, monkeypatch):
    monkeypatch.setenv("PORT", "1234")
    assert env_detector.get_port() == "1234"


def test_get_host(clean_env, monkeypatch):
    monkeypatch.setenv("HOST", "0.0.0.0")
    assert env_detector.get_host() == "0.0.0.0"


def test_get_bind_address(clean_env, monkeypatch):
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "1234")
    assert env_detector.get_bind_address() == "0.0.0.0:1234"


def test_get_bind_address_from_env_file(clean_env):
    (clean_env / ".env").write_text("HOST=0.0.0.0\nPORT=1234\n")
    assert env_detector.get_bind_address() == "0.0.0.0:1234"


def test_environment_overrides_env_file(clean_env, monkeypatch):
    (clean_env / ".env").write_text("HOST=0.0.0.0\nPORT=1234\n")
    monkeypatch.setenv("PORT", "4321")
    assert env_detector.get_bind_address() == "0.0.0.0:4321"


def test_get_bind_address_missing(clean_env):
    assert env_detector.get_bind_address() is None


def test_get_bind_address_missing_port(clean_env, monkeypatch):
    monkeypatch.setenv("HOST", "127.0.0.1")
    assert env_detector.get_bind_address() is None


def test_get_var_unset(clean_env, monkeypatch):
    monkeypatch.delenv("EDDI_SERVER_UNSET_KEY", raising=False)
    assert env_detector.get_var("EDDI_SERVER_UNSET_KEY") is None