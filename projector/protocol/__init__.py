# protocol/__init__.py

from .core import CommandKind, Frame, FrameReader
from .session import Session
from .client import ProjectorClient

__all__ = [
    "CommandKind", "Frame", "FrameReader",
    "Session",
    "ProjectorClient"]
