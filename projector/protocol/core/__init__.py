# protocol/core/__init__.py

from .defs import CommandKind, HEADER_SIZE, MAGIC, MAX_PAYLOAD
from .header import parse_header, build_header
from .frame import Frame, encode
from .reader import FrameReader

__all__ = [
    "CommandKind", "HEADER_SIZE", "MAGIC", "MAX_PAYLOAD",
    "parse_header", "build_header",
    "Frame", "encode",
    "FrameReader",
]
