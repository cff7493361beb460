"""Listening TCP sockets."""

from __future__ import annotations

import logging
import re
import socket
import sys
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_BACKLOG = 1024
_NUMERIC_HOST = re.compile(r"[0-9.]+|.*:.*")


@dataclass
class ServerSocket:
    """A bound, listening, non-blocking TCP socket."""

    sock: socket.socket

    def local_address(self) -> tuple[str, int]:
        """Return the ``(host, port)`` the socket is bound to."""
        host, port = self.sock.getsockname()[:2]
        return host, port

    def close(self) -> None:
        """Stop listening."""
        self.sock.close()

    def __enter__(self) -> ServerSocket:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _split_address(addr: str) -> tuple[str, int]:
    if addr.startswith("["):
        host, _, rest = addr[1:].partition("]")
        if not rest.startswith(":"):
            raise ValueError(f"invalid socket address: {addr!r}")
        port_text = rest[1:]
    else:
        host, sep, port_text = addr.rpartition(":")
        if not sep:
            raise ValueError(f"invalid socket address: {addr!r}")
    if not host:
        raise ValueError(f"invalid socket address: {addr!r}")
    try:
        port = int(port_text)
    except ValueError:
        raise ValueError(f"invalid port in socket address: {addr!r}") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"port out of range in socket address: {addr!r}")
    return host, port


def bind(addr: str) -> ServerSocket:
    """Bind a listening socket to ``"host:port"``.

    Raises ValueError for a malformed address and OSError when the address
    cannot be resolved or bound.
    """
    host, port = _split_address(addr)
    flags = socket.AI_PASSIVE
    if _NUMERIC_HOST.fullmatch(host):
        flags |= socket.AI_NUMERICHOST
    try:
        family, sock_type, proto, _, sockaddr = socket.getaddrinfo(
            host, port, type=socket.SOCK_STREAM, flags=flags
        )[0]
    except OSError as exc:
        logger.error("failed to resolve %s: %s", addr, exc)
        raise

    sock = socket.socket(family, sock_type, proto)
    try:
        if sys.platform != "win32":
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(sockaddr)
        sock.listen(_BACKLOG)
        sock.setblocking(False)
    except OSError as exc:
        sock.close()
        logger.error("failed to bind %s: %s", addr, exc)
        raise
    logger.info("bound to %s", addr)
    return ServerSocket(sock)