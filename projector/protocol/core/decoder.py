from __future__ import annotations

from struct import calcsize, unpack
from typing import Any

from projector.core.errors import DecodeError

FIELD_TO_STRUCT: dict[str, str] = {
    "bool": "B",
    "uint8": "B",
    "uint16": "H",
    "uint32": "I",
}


def decode_field(payload: bytes, ftype: str, offset: int) -> Any:
    """Decode one little-endian field at ``offset`` in a response payload."""
    if ftype not in FIELD_TO_STRUCT:
        raise DecodeError(f"Unknown field type '{ftype}'")

    fmt = "<" + FIELD_TO_STRUCT[ftype]
    size = calcsize(fmt)
    if offset < 0 or offset + size > len(payload):
        raise DecodeError(
            f"Payload too short for {ftype} at offset {offset}",
            details={"payload": bytes(payload).hex(), "offset": offset, "size": size},
        )

    (value,) = unpack(fmt, payload[offset: offset + size])
    if ftype == "bool":
        return value > 0
    return value
