"""Accepting TCP connections and the service that runs the accept loop."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import socket

from eddi_server.client_socket import AcceptedClientSocket, ClientSocketRepository
from eddi_server.env_detector import get_bind_address
from eddi_server.server_socket import ServerSocket, bind
from eddi_server.task_registry import TaskEntity, TaskRegistry

logger = logging.getLogger(__name__)

ACCEPT_LOOP_ID = 0


async def accept(server: ServerSocket) -> socket.socket:
    """Wait for the next connection on ``server`` and return its socket.

    Raises OSError when the listening socket cannot accept.
    """
    loop = asyncio.get_running_loop()
    try:
        sock, _ = await loop.sock_accept(server.sock)
    except OSError as exc:
        logger.error("accept failed: %s", exc)
        raise
    logger.info("accepted connection")
    return sock


class AcceptorService:
    """Binds to the configured address and registers every client that connects."""

    def __init__(
        self,
        clients: ClientSocketRepository | None = None,
        tasks: TaskRegistry | None = None,
    ) -> None:
        self.clients = ClientSocketRepository() if clients is None else clients
        self.tasks = TaskRegistry() if tasks is None else tasks
        self.server: ServerSocket | None = None
        self._handlers: set[asyncio.Task] = set()

    async def run(self) -> TaskEntity:
        """Bind to ``HOST:PORT`` from the environment and start the accept loop.

        Returns the entity of the background accept task. Raises RuntimeError
        when the bind address is not configured, and ValueError or OSError
        when it cannot be bound.
        """
        bind_address = get_bind_address()
        if bind_address is None:
            logger.error("failed to get bind address from the environment")
            raise RuntimeError("HOST and PORT must be set to start the acceptor")
        self.server = bind(bind_address)
        logger.info("bind success at %s, starting accept loop", bind_address)
        return await self.tasks.spawn(ACCEPT_LOOP_ID, self._accept_loop(self.server))

    async def _accept_loop(self, server: ServerSocket) -> None:
        while True:
            try:
                sock = await accept(server)
            except OSError:
                if server.sock.fileno() == -1:
                    logger.info("listening socket closed, accept loop ends")
                    return
                continue
            handler = asyncio.create_task(self._register(sock))
            self._handlers.add(handler)
            handler.add_done_callback(self._handlers.discard)

    async def _register(self, sock: socket.socket) -> None:
        try:
            client = await AcceptedClientSocket.from_socket(sock)
        except OSError as exc:
            logger.error("failed to set up connection: %s", exc)
            with contextlib.suppress(OSError):
                sock.close()
            return
        logger.info("handling connection %s", client.id)
        await self.clients.register(client)