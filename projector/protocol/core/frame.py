from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .checksum import length_bytes, payload_checksum
from .defs import MAX_PAYLOAD, CommandKind, coerce_kind
from .header import build_header


@dataclass
class Frame:
    """One protocol message: command kind plus 0..65535 payload bytes."""

    command: Union[CommandKind, int]
    payload: bytes = b""

    def __post_init__(self) -> None:
        self.command = coerce_kind(int(self.command))
        if not 0 <= int(self.command) <= 0xFF:
            raise ValueError(f"Invalid command byte {int(self.command)}")

        self.payload = bytes(self.payload)
        if len(self.payload) > MAX_PAYLOAD:
            raise ValueError(f"Payload too long: {len(self.payload)} > {MAX_PAYLOAD}")

    @property
    def length_bytes(self) -> bytes:
        return length_bytes(len(self.payload))

    @property
    def checksum(self) -> int:
        return payload_checksum(self.payload)

    def encode(self) -> bytes:
        """Wire layout: command, 0x14 0x00, length LE, payload, checksum."""
        return (
            build_header(self.command, len(self.payload))
            + self.payload
            + bytes([self.checksum])
        )

    @property
    def kind_name(self) -> str:
        if isinstance(self.command, CommandKind):
            return self.command.name
        return f"KIND_{int(self.command)}"

    # ---------------- Device request builders ----------------
    @classmethod
    def read_request(cls, module: int, field: int, reply_size: int = 0) -> "Frame":
        """Read-request payload: [module, 0x00, 0x00, field, reply_size]."""
        return cls(CommandKind.READ, bytes([module, 0x00, 0x00, field, reply_size]))

    @classmethod
    def write_request(cls, module: int, field: int, value: int) -> "Frame":
        """Write-request payload: [module, field, value, 0x00]."""
        return cls(CommandKind.WRITE, bytes([module, field, value, 0x00]))


def encode(frame: Frame) -> bytes:
    return frame.encode()
