import struct
from typing import Tuple, Union

from .defs import HEADER_SIZE, MAGIC, CommandKind, coerce_kind

# command(u8), magic(u16 LE), length(u16 LE)
HEADER_STRUCT = struct.Struct("<BHH")


def parse_header(raw: bytes) -> Tuple[Union[CommandKind, int], int]:
    """Return (command kind, payload length). The magic bytes are not checked."""
    if len(raw) != HEADER_SIZE:
        raise ValueError(f"Header size mismatch: {len(raw)} != {HEADER_SIZE}")
    command, _magic, length = HEADER_STRUCT.unpack(raw)
    return coerce_kind(command), length


def build_header(command: int, length: int) -> bytes:
    return HEADER_STRUCT.pack(int(command), MAGIC, length)
