from __future__ import annotations

import pytest

from projector.core.errors import DecodeError, ErrorKind
from projector.protocol.core.decoder import decode_field


def test_decode_bool_nonzero_is_true():
    assert decode_field(b"\x00\x00\x01", "bool", 2) is True
    assert decode_field(b"\x00\x00\x00", "bool", 2) is False


def test_decode_uint32_little_endian():
    payload = b"\x34\x00" + (1234).to_bytes(4, "little")
    assert decode_field(payload, "uint32", 2) == 1234


def test_decode_uint16_and_uint8():
    assert decode_field(b"\x01\x02", "uint16", 0) == 0x0201
    assert decode_field(b"\x01\x02", "uint8", 1) == 0x02


def test_decode_short_payload_raises():
    with pytest.raises(DecodeError) as ei:
        decode_field(b"\x00\x00\x01\x02", "uint32", 2)
    assert ei.value.kind is ErrorKind.DECODE_ERROR


def test_decode_unknown_type_raises():
    with pytest.raises(DecodeError):
        decode_field(b"\x00", "float", 0)
