# projector/transport/errors.py
from __future__ import annotations

from projector.core.errors import ErrorKind, ProjectorError


class TransportError(ProjectorError):
    """Base class for transport-layer failures."""
    kind = ErrorKind.CHANNEL_IO


class TransportOpenError(TransportError):
    kind = ErrorKind.CHANNEL_OPEN


class TransportIOError(TransportError):
    kind = ErrorKind.CHANNEL_IO
