# projector/core/errors.py
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds callers can branch on."""

    UNKNOWN = "unknown"
    NOT_OPEN = "not_open"
    CHANNEL_OPEN = "channel_open"
    CHANNEL_IO = "channel_io"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    INCOMPLETE_FRAME = "incomplete_frame"
    DEVICE_EXCEPTION = "device_exception"
    DECODE_ERROR = "decode_error"
    CONFIG_ERROR = "config_error"


class ProjectorError(Exception):
    """
    Base class for all expected operational errors.
    """

    #: Stable machine-readable kind (for CLI exit mapping, retries in callers, etc.)
    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Session lifecycle
# ---------------------------------------------------------------------------

class NotOpenError(ProjectorError):
    """A transaction was attempted on a session without an open channel."""
    kind = ErrorKind.NOT_OPEN

    def __init__(self, message: str = "Port not open", **kwargs):
        super().__init__(message, **kwargs)


# ---------------------------------------------------------------------------
# Framing / integrity
# ---------------------------------------------------------------------------

class ChecksumError(ProjectorError):
    """Received frame failed its trailing checksum; the frame is discarded."""
    kind = ErrorKind.CHECKSUM_MISMATCH

    def __init__(self, expected: int, received: int):
        super().__init__(
            f"Checksum failed: calc={expected:02X} rx={received:02X}",
            details={"expected": expected, "received": received},
        )
        self.expected = expected
        self.received = received


class IncompleteFrameError(ProjectorError):
    """
    The channel went idle before a frame part was fully received.

    ``part`` is one of ``"header"``, ``"payload"`` or ``"checksum"``.
    """
    kind = ErrorKind.INCOMPLETE_FRAME

    def __init__(self, part: str, expected: int, received: int):
        super().__init__(
            f"Incomplete {part}: got {received} of {expected} bytes",
            hint="Device stopped sending; check cabling and the read timeout.",
            details={"part": part, "expected": expected, "received": received},
        )
        self.part = part
        self.expected = expected
        self.received = received


# ---------------------------------------------------------------------------
# Device semantics
# ---------------------------------------------------------------------------

class DeviceExceptionError(ProjectorError):
    """Device answered a request with an exception-kind frame."""
    kind = ErrorKind.DEVICE_EXCEPTION

    def __init__(self, frame, message: str = "Projector returned exception"):
        super().__init__(message, details={"payload": bytes(frame.payload).hex()})
        self.frame = frame


class DecodeError(ProjectorError):
    """A response payload could not be decoded into the requested field."""
    kind = ErrorKind.DECODE_ERROR


class ConfigError(ProjectorError):
    """
    Configuration or metadata is invalid.

    Examples:
      - unknown key in serial.yml
      - command referencing an undefined module
      - unsupported response field type
    """
    kind = ErrorKind.CONFIG_ERROR
