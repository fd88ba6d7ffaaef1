from typing import Iterable

from .defs import CHECKSUM_SEED, MAX_PAYLOAD


def checksum(len_lo: int, len_hi: int, payload: Iterable[int]) -> int:
    """8-bit sum of both length bytes and every payload byte, plus 0x14."""
    total = (len_lo + len_hi) & 0xFF
    for b in payload:
        total = (total + b) & 0xFF
    return (total + CHECKSUM_SEED) & 0xFF


def length_bytes(n: int) -> bytes:
    if not 0 <= n <= MAX_PAYLOAD:
        raise ValueError(f"Payload length {n} outside [0, {MAX_PAYLOAD}]")
    return n.to_bytes(2, "little")


def payload_checksum(payload: bytes) -> int:
    lo, hi = length_bytes(len(payload))
    return checksum(lo, hi, payload)
