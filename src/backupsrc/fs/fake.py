"""Inert and one-shot file handles for synthetic filesystems."""

from __future__ import annotations

import logging
from typing import BinaryIO

from .errors import EmptySourceError, InvalidArgumentError, NotSupportedError
from .models import FileInfo

logger = logging.getLogger(__name__)


class FakeFile:
    """A handle that answers ``stat()`` and ``close()`` and nothing else.

    Every data operation raises ``InvalidArgumentError``.
    """

    def __init__(self, name: str, info: FileInfo):
        self.name = name
        self._info = info

    def read(self, size: int = -1) -> bytes:
        raise InvalidArgumentError("read", self.name)

    def readinto(self, buffer: bytearray | memoryview) -> int:
        raise InvalidArgumentError("read", self.name)

    def readdirnames(self, n: int = -1) -> list[str]:
        raise InvalidArgumentError("readdirnames", self.name)

    def stat(self) -> FileInfo:
        return self._info

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class FakeDir(FakeFile):
    """A synthetic directory with a fixed list of entries."""

    def __init__(self, name: str, info: FileInfo, entries: list[FileInfo]):
        super().__init__(name, info)
        self._entries = list(entries)

    def readdirnames(self, n: int = -1) -> list[str]:
        if n > 0:
            raise NotSupportedError("readdirnames", self.name)
        return [entry.name for entry in self._entries]


class ReaderFile(FakeFile):
    """Readable handle over an externally supplied byte stream.

    Reaching end of stream without having read a single byte is an error
    unless ``allow_empty_file`` is set, so an upstream failure that shows up
    as an empty pipe is not recorded as a valid zero-byte file.
    """

    def __init__(self, stream: BinaryIO, info: FileInfo, allow_empty_file: bool = False):
        super().__init__(info.name, info)
        self._stream = stream
        self.allow_empty_file = allow_empty_file
        self._bytes_read = False

    def read(self, size: int = -1) -> bytes | None:
        data = self._stream.read(size)
        if data is None:
            # Non-blocking stream with nothing ready yet; not end of stream.
            return data
        if data:
            self._bytes_read = True
        elif size != 0 and not self.allow_empty_file and not self._bytes_read:
            logger.warning("No data read from %s", self.name)
            raise EmptySourceError("read", self.name)
        return data

    def readinto(self, buffer: bytearray | memoryview) -> int | None:
        data = self.read(len(buffer))
        if data is None:
            return None
        n = len(data)
        buffer[:n] = data
        return n

    def close(self) -> None:
        self._stream.close()
