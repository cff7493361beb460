"""Fixed-size datagram payload."""

from __future__ import annotations

from dataclasses import dataclass, field

SIZE = 1024


@dataclass
class TransmitData:
    """A zero-padded buffer of exactly ``SIZE`` bytes."""

    content: bytearray = field(default_factory=lambda: bytearray(SIZE))

    def __post_init__(self) -> None:
        if len(self.content) != SIZE:
            raise ValueError(f"content must be exactly {SIZE} bytes, got {len(self.content)}")
        self.content = bytearray(self.content)

    def write(self, payload: bytes) -> None:
        """Copy ``payload`` to the start of the buffer."""
        if len(payload) > SIZE:
            raise ValueError(f"payload of {len(payload)} bytes exceeds {SIZE}")
        self.content[: len(payload)] = payload

    def __bytes__(self) -> bytes:
        return bytes(self.content)