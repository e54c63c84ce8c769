"""Filesystem abstractions the backup engine walks.

This package provides:
- The ``FS`` / ``File`` protocols
- ``ReaderFS``, a virtual filesystem exposing a single byte stream
- Inert handles and metadata models shared by filesystem implementations
"""

from .errors import (
    EmptySourceError,
    InvalidArgumentError,
    NotFoundError,
    NotSupportedError,
    PathError,
    SourceConsumedError,
)
from .fake import FakeDir, FakeFile, ReaderFile
from .models import ExtendedFileInfo, FileInfo, Node, build_basic_node
from .protocol import FS, O_NOFOLLOW, O_RDONLY, File
from .reader import ReaderFS

__all__ = [
    "FS",
    "File",
    "O_RDONLY",
    "O_NOFOLLOW",
    "ReaderFS",
    "FakeFile",
    "FakeDir",
    "ReaderFile",
    "FileInfo",
    "ExtendedFileInfo",
    "Node",
    "build_basic_node",
    "PathError",
    "NotFoundError",
    "InvalidArgumentError",
    "SourceConsumedError",
    "EmptySourceError",
    "NotSupportedError",
]
