"""Sending fixed-size datagrams and greeting connected clients."""

from __future__ import annotations

import asyncio
import ipaddress
import logging

from eddi_server.client_socket import AcceptedClientSocket
from eddi_server.transmit_data import TransmitData

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = b"Hello from server"


def _split_host_port(text: str) -> tuple[str, str, bool]:
    """Split ``host:port`` or ``[host]:port``; the flag tells whether brackets were used."""
    if text.startswith("["):
        host, _, rest = text[1:].partition("]")
        if not rest.startswith(":"):
            raise ValueError(f"invalid socket address: {text!r}")
        return host, rest[1:], True
    host, sep, port = text.rpartition(":")
    if not sep:
        raise ValueError(f"invalid socket address: {text!r}")
    return host, port, False


def _parse_port(text: str, original: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"invalid port in socket address: {original!r}")
    port = int(text)
    if port > 65535:
        raise ValueError(f"port out of range in socket address: {original!r}")
    return port


def _parse_socket_address(text: str) -> tuple[str, int]:
    """Parse a literal IP socket address; host names are rejected."""
    host, port_text, bracketed = _split_host_port(text)
    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        raise ValueError(f"invalid socket address: {text!r}") from None
    if (ip.version == 6) != bracketed:
        raise ValueError(f"invalid socket address: {text!r}")
    return str(ip), _parse_port(port_text, text)


class UdpTransmitter:
    """A bound UDP endpoint that sends ``TransmitData`` buffers."""

    def __init__(self, transport: asyncio.DatagramTransport) -> None:
        self._transport = transport

    @classmethod
    async def open(cls, bind_addr: str) -> UdpTransmitter:
        """Bind a UDP socket to ``bind_addr`` (``"host:port"``)."""
        host, port_text, _ = _split_host_port(bind_addr)
        port = _parse_port(port_text, bind_addr)
        loop = asyncio.get_running_loop()
        transport, _ = await loop.create_datagram_endpoint(
            asyncio.DatagramProtocol, local_addr=(host, port)
        )
        return cls(transport)

    async def send(self, target_addr: str, data: TransmitData) -> None:
        """Send the full buffer to ``target_addr``; raise ValueError for a malformed address."""
        addr = _parse_socket_address(target_addr)
        self._transport.sendto(bytes(data), addr)
        logger.info("sent %d bytes to %s", len(data.content), target_addr)

    def close(self) -> None:
        """Release the socket."""
        self._transport.close()

    async def __aenter__(self) -> UdpTransmitter:
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.close()


class TransmitterService:
    """Writes messages to connected clients."""

    def __init__(self, welcome: bytes = WELCOME_MESSAGE) -> None:
        self.welcome = welcome

    async def send_welcome_message(self, client: AcceptedClientSocket) -> None:
        """Write the welcome message to ``client`` and wait until it is flushed."""
        client.writer.write(self.welcome)
        await client.writer.drain()
        logger.info("welcome message sent to client %s", client.id)