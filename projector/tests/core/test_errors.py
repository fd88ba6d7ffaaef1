from __future__ import annotations

import pytest

from projector.core.errors import (
    ChecksumError,
    ConfigError,
    ErrorKind,
    IncompleteFrameError,
    NotOpenError,
    ProjectorError,
)
from projector.transport.errors import TransportError, TransportIOError, TransportOpenError


def test_base_error_kind_is_unknown():
    err = ProjectorError("something odd", hint="check it")

    assert err.kind is ErrorKind.UNKNOWN
    assert str(err) == "something odd"
    assert err.hint == "check it"
    assert err.details == {}


@pytest.mark.parametrize(
    "err, kind",
    [
        (NotOpenError(), ErrorKind.NOT_OPEN),
        (ChecksumError(expected=0x18, received=0xE7), ErrorKind.CHECKSUM_MISMATCH),
        (IncompleteFrameError("payload", expected=4, received=2), ErrorKind.INCOMPLETE_FRAME),
        (ConfigError("bad"), ErrorKind.CONFIG_ERROR),
        (TransportError("x"), ErrorKind.CHANNEL_IO),
        (TransportIOError("x"), ErrorKind.CHANNEL_IO),
        (TransportOpenError("x"), ErrorKind.CHANNEL_OPEN),
    ],
)
def test_subclasses_carry_their_own_kind(err, kind):
    assert isinstance(err, ProjectorError)
    assert err.kind is kind
