"""Discovery of the address of the interface used for outbound traffic."""

from __future__ import annotations

import socket

_PROBE_ADDRESS = ("8.8.8.8", 80)


def get_local_ip() -> str | None:
    """Return the local IP address routed towards the internet, or None.

    A UDP socket is connected to a public address; no packet is sent, the
    connect only selects the outgoing interface.
    """
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.bind(("0.0.0.0", 0))
            sock.connect(_PROBE_ADDRESS)
            return sock.getsockname()[0]
    except OSError:
        return None