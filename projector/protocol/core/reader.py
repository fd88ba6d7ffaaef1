from __future__ import annotations

import logging
from typing import Optional, Protocol as TypingProtocol

from projector.core.errors import ChecksumError, IncompleteFrameError
from projector.transport.errors import TransportIOError

from .checksum import checksum
from .defs import CHECKSUM_SIZE, HEADER_SIZE
from .frame import Frame
from .header import parse_header


class ByteReader(TypingProtocol):
    def read(self, n: int) -> bytes: ...


class FrameReader:
    """
    Assembles one response frame from a channel that may deliver it in pieces.

    Every part (header, payload, checksum byte) is collected with the same
    loop: keep reading the missing remainder, tolerate up to ``max_idle_reads``
    consecutive empty reads, and raise IncompleteFrameError when the channel
    stays idle before the part is complete.
    """

    def __init__(self, channel: ByteReader, *, max_idle_reads: int = 3, logger: Optional[logging.Logger] = None):
        if max_idle_reads < 1:
            raise ValueError(f"max_idle_reads must be >= 1, got {max_idle_reads}")
        self.channel = channel
        self.max_idle_reads = int(max_idle_reads)
        self._log = logger or logging.getLogger(__name__)

    def read_up_to(self, n: int) -> bytes:
        """Collect up to ``n`` bytes; stops early once the channel goes idle."""
        buf = bytearray()
        idle = 0
        while len(buf) < n:
            chunk = self.channel.read(n - len(buf))
            if not chunk:
                idle += 1
                if idle >= self.max_idle_reads:
                    break
                continue
            if len(chunk) > n - len(buf):
                raise TransportIOError(
                    f"Channel returned {len(chunk)} bytes for a {n - len(buf)}-byte read",
                    details={"requested": n - len(buf), "received": len(chunk)},
                )
            idle = 0
            buf.extend(chunk)
        return bytes(buf)

    def read_exact(self, n: int, part: str) -> bytes:
        data = self.read_up_to(n)
        if len(data) < n:
            raise IncompleteFrameError(part, expected=n, received=len(data))
        return data

    def receive_frame(self) -> Frame:
        raw_header = self.read_exact(HEADER_SIZE, "header")
        command, length = parse_header(raw_header)

        payload = self.read_exact(length, "payload") if length > 0 else b""
        # Uses the bounded idle loop too: a missing checksum byte is an incomplete frame.
        (rx_sum,) = self.read_exact(CHECKSUM_SIZE, "checksum")

        # Checksum is computed over the declared length, not the bytes received.
        calc_sum = checksum(raw_header[3], raw_header[4], payload)
        if calc_sum != rx_sum:
            raise ChecksumError(expected=calc_sum, received=rx_sum)

        frame = Frame(command, payload)
        self._log.debug(
            "RECEIVED_FRAME kind=%s payload_len=%d raw=%s",
            frame.kind_name,
            length,
            (raw_header + payload + bytes([rx_sum])).hex(),
        )
        return frame
