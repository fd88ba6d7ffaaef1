# projector/protocol/core/defs.py
from __future__ import annotations

from enum import IntEnum
from typing import Union


class CommandKind(IntEnum):
    """Role of a frame, carried as the first byte on the wire."""

    EXCEPTION = 0
    ACK = 3
    RESPONSE = 5
    WRITE = 6
    READ = 7


# Fixed sub-header emitted after the command byte (little-endian 0x0014).
MAGIC = 0x0014
CHECKSUM_SEED = 0x14

HEADER_SIZE = 5          # command + magic(2) + length(2)
CHECKSUM_SIZE = 1
FRAME_OVERHEAD = HEADER_SIZE + CHECKSUM_SIZE
MAX_PAYLOAD = 0xFFFF


def coerce_kind(value: int) -> Union[CommandKind, int]:
    """Map a wire byte to CommandKind, keeping unknown values as plain ints."""
    try:
        return CommandKind(value)
    except ValueError:
        return int(value)
