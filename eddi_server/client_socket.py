"""Accepted client connections and the registry that keeps them."""

from __future__ import annotations

import asyncio
import contextlib
import itertools
import logging
import socket
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

_client_ids = itertools.count(1)


@dataclass
class AcceptedClientSocket:
    """A connected client with a unique identifier and an optional user token."""

    reader: asyncio.StreamReader
    writer: asyncio.StreamWriter
    user_token: str | None = None
    id: int = field(default_factory=lambda: next(_client_ids))

    @classmethod
    async def from_socket(cls, sock: socket.socket) -> AcceptedClientSocket:
        """Wrap a connected socket in stream reader and writer halves."""
        reader, writer = await asyncio.open_connection(sock=sock)
        return cls(reader, writer)

    @property
    def is_authenticated(self) -> bool:
        """True once a user token has been set."""
        return self.user_token is not None

    async def close(self) -> None:
        """Close the connection, ignoring errors from a peer that already left."""
        self.writer.close()
        with contextlib.suppress(OSError):
            await self.writer.wait_closed()


class ClientSocketRepository:
    """Stores accepted clients by identifier."""

    def __init__(self) -> None:
        self._clients: dict[int, AcceptedClientSocket] = {}
        self._lock = asyncio.Lock()

    async def register(self, client: AcceptedClientSocket) -> None:
        """Store ``client`` under its identifier."""
        async with self._lock:
            self._clients[client.id] = client
        logger.info("registered client: %s", client.id)

    def get(self, client_id: int) -> AcceptedClientSocket | None:
        """Return the client stored under ``client_id``, or None."""
        return self._clients.get(client_id)

    def __contains__(self, client_id: object) -> bool:
        return client_id in self._clients

    def __len__(self) -> int:
        return len(self._clients)