import socket

import pytest

from eddi_server.client_socket import AcceptedClientSocket, ClientSocketRepository


@pytest.mark.asyncio
async def test_accepted_client_socket_creation():
    server_side, client_side = socket.socketpair()
    client_side.sendall(b"hello")

    client = await AcceptedClientSocket.from_socket(server_side)
    try:
        assert client.id >= 1
        assert client.user_token is None
        assert not client.is_authenticated

        client.user_token = "token"
        assert client.user_token == "token"
        assert client.is_authenticated

        data = await client.reader.read(10)
        assert data == b"hello"
    finally:
        await client.close()
        client_side.close()


@pytest.mark.asyncio
async def test_unique_ids_for_multiple_clients():
    pairs = [socket.socketpair() for _ in range(5)]
    clients = [await AcceptedClientSocket.from_socket(a) for a, _ in pairs]
    try:
        ids = [c.id for c in clients]
        assert len(set(ids)) == len(ids)
    finally:
        for c in clients:
            await c.close()
        for _, b in pairs:
            b.close()


@pytest.mark.asyncio
async def test_ids_increase():
    pairs = [socket.socketpair() for _ in range(2)]
    first = await AcceptedClientSocket.from_socket(pairs[0][0])
    second = await AcceptedClientSocket.from_socket(pairs[1][0])
    try:
        assert second.id > first.id
    finally:
        await first.close()
        await second.close()
        for _, b in pairs:
            b.close()


@pytest.mark.asyncio
async def test_register_adds_client_to_repository():
    repo = ClientSocketRepository()
    server_side, client_side = socket.socketpair()
    client = await AcceptedClientSocket.from_socket(server_side)
    try:
        await repo.register(client)
        assert client.id in repo
        assert repo.get(client.id) is client
        assert len(repo) == 1
    finally:
        await client.close()
        client_side.close()


@pytest.mark.asyncio
async def test_register_multiple_clients():
    repo = ClientSocketRepository()
    pairs = [socket.socketpair() for _ in range(5)]
    clients = []
    try:
        for a, _ in pairs:
            client = await AcceptedClientSocket.from_socket(a)
            clients.append(client)
            await repo.register(client)

        ids = [c.id for c in clients]
        assert len(set(ids)) == 5
        assert len(repo) == 5
        for client_id in ids:
            assert client_id in repo
    finally:
        for c in clients:
            await c.close()
        for _, b in pairs:
            b.close()


def test_get_missing_returns_none():
    repo = ClientSocketRepository()
    assert repo.get(123456) is None
    assert 123456 not in repo
    assert len(repo) == 0