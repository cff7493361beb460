"""Single-exchange connection handling: read one request, answer, close."""

from __future__ import annotations

import asyncio
import contextlib
import logging

logger = logging.getLogger(__name__)

READ_SIZE = 1024
RESPONSE = b"Hello from server"


async def receive(reader: asyncio.StreamReader) -> bytes | None:
    """Read one chunk of at most ``READ_SIZE`` bytes; None when the peer has closed."""
    data = await reader.read(READ_SIZE)
    if not data:
        return None
    logger.debug("received %r", data)
    return data


async def transmit(writer: asyncio.StreamWriter, request: bytes) -> None:
    """Answer ``request`` with the fixed server response."""
    writer.write(RESPONSE)
    await writer.drain()
    logger.debug("response sent")


async def handle_connection(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
    """Serve one request on the connection and close it."""
    try:
        request = await receive(reader)
        if request is not None:
            await transmit(writer, request)
    except OSError as exc:
        logger.error("connection error: %s", exc)
    finally:
        writer.close()
        with contextlib.suppress(OSError):
            await writer.wait_closed()