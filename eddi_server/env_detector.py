"""Server settings read from the environment, with a ``.env`` file as fallback."""

from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv


def _load_env_file() -> None:
    # Variables already present in the environment take precedence over the file.
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path, override=False)


def get_var(key: str) -> str | None:
    """Return the value of ``key`` or None when it is not set."""
    _load_env_file()
    return os.environ.get(key)


def get_host() -> str | None:
    """Return the ``HOST`` setting."""
    return get_var("HOST")


def get_port() -> str | None:
    """Return the ``PORT`` setting."""
    return get_var("PORT")


def get_bind_address() -> str | None:
    """Return ``"HOST:PORT"``, or None unless both are set."""
    host = get_host()
    port = get_port()
    if host is None or port is None:
        return None
    return f"{host}:{port}"