"""Errors raised by virtual filesystem operations.

All of them are ``OSError`` subclasses with ``errno`` and ``filename`` set,
so generic traversal code can keep using ordinary ``except OSError`` /
``except FileNotFoundError`` clauses.
"""

from __future__ import annotations

import errno
import os


class PathError(OSError):
    """An OSError that also records the operation that failed."""

    def __init__(self, op: str, path: str, code: int, message: str | None = None):
        super().__init__(code, message or os.strerror(code), path)
        self.op = op

    def __str__(self) -> str:
        return f"{self.op} {self.filename}: {self.strerror}"


class NotFoundError(PathError, FileNotFoundError):
    """The path names nothing in the virtual tree."""

    def __init__(self, op: str, path: str):
        super().__init__(op, path, errno.ENOENT)


class InvalidArgumentError(PathError):
    """Bad open flags, or a data operation on an inert handle."""

    def __init__(self, op: str, path: str, message: str | None = None):
        super().__init__(op, path, errno.EINVAL, message)


class SourceConsumedError(PathError):
    """The one-shot source was already handed out to another caller."""

    def __init__(self, op: str, path: str):
        super().__init__(op, path, errno.EIO)


class EmptySourceError(PathError):
    """End of stream was reached without a single byte being read."""

    def __init__(self, op: str, path: str):
        super().__init__(op, path, errno.EIO, "no data read")


class NotSupportedError(PathError):
    def __init__(self, op: str, path: str, message: str = "not implemented"):
        super().__init__(op, path, errno.ENOTSUP, message)
