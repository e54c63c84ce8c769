"""Protocol definitions for filesystems the backup engine can walk.

The engine's traversal code is written against ``FS`` only, so a real
on-disk filesystem and a synthetic one (see ``ReaderFS``) are
interchangeable. Paths are always slash-separated.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import ExtendedFileInfo, FileInfo, Node

O_RDONLY = os.O_RDONLY
# Not available on Windows; zero keeps flag checks meaningful there.
O_NOFOLLOW = getattr(os, "O_NOFOLLOW", 0)

ALLOWED_OPEN_FLAGS = O_RDONLY | O_NOFOLLOW


@runtime_checkable
class File(Protocol):
    """Handle returned by ``FS.open_file``."""

    def read(self, size: int = -1) -> bytes:
        """Read up to size bytes; ``b""`` signals end of file."""
        ...

    def readdirnames(self, n: int = -1) -> list[str]:
        """Return names of directory entries.

        Args:
            n: Maximum number of names; ``n <= 0`` returns all of them.
        """
        ...

    def stat(self) -> FileInfo:
        ...

    def close(self) -> None:
        ...


@runtime_checkable
class FS(Protocol):
    """Filesystem capability interface consumed by the backup engine."""

    separator: str

    def open_file(self, name: str, flags: int) -> File:
        """Open name for reading.

        Implementations must reject any flag outside
        ``O_RDONLY | O_NOFOLLOW`` with ``InvalidArgumentError``.
        """
        ...

    def stat(self, name: str) -> FileInfo:
        ...

    def lstat(self, name: str) -> FileInfo:
        ...

    def join(self, *elems: str) -> str:
        ...

    def clean(self, path: str) -> str:
        ...

    def base(self, path: str) -> str:
        ...

    def dir(self, path: str) -> str:
        ...

    def is_abs(self, path: str) -> bool:
        ...

    def abs(self, path: str) -> str:
        ...

    def volume_name(self, path: str) -> str:
        ...

    def device_id(self, fi: FileInfo) -> int:
        ...

    def extended_stat(self, fi: FileInfo) -> ExtendedFileInfo:
        ...

    def node_from_fileinfo(self, path: str, fi: FileInfo) -> Node:
        ...
