"""Timestamp of a hardware signal recorded by the DAQ."""

from __future__ import annotations

from dataclasses import dataclass

INVALID_CHANNEL = 0xFFFFFFFF
RAW_NAME_LENGTH = 8


@dataclass
class DAQTimestamp:
    """A DAQ timestamp; ``timestamp`` and ``offset`` in ns.

    ``name`` may be given as an 8-byte raw field, in which case every byte,
    padding included, becomes one character of the name.
    """

    channel: int = INVALID_CHANNEL
    timestamp: int = 0
    offset: int = 0
    name: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.name, (bytes, bytearray)):
            if len(self.name) != RAW_NAME_LENGTH:
                raise ValueError(
                    f"raw name must be {RAW_NAME_LENGTH} bytes, got {len(self.name)}"
                )
            self.name = bytes(self.name).decode("latin-1")