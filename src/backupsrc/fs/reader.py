"""ReaderFS — a filesystem with a single file backed by a byte stream.

Lets the generic backup walk ingest piped input: the stream appears as one
file at a logical path, every ancestor of that path appears as an empty
synthetic directory, and nothing else exists.
"""

from __future__ import annotations

import errno
import logging
import os
import stat
import threading
from datetime import datetime, timezone
from typing import BinaryIO

from . import paths
from .errors import InvalidArgumentError, NotFoundError, SourceConsumedError
from .fake import FakeDir, FakeFile, ReaderFile
from .models import ExtendedFileInfo, FileInfo, Node, build_basic_node
from .protocol import ALLOWED_OPEN_FLAGS

logger = logging.getLogger(__name__)

ROOT_NAMES = ("/", ".")
DIR_MODE = stat.S_IFDIR | 0o755
DEFAULT_FILE_MODE = stat.S_IFREG | 0o644


class ReaderFS:
    """Filesystem exposing one stream as the file ``name``.

    The stream can be opened exactly once. Every later ``open_file`` on the
    logical path raises ``SourceConsumedError`` (EIO), never
    ``FileNotFoundError``, so callers can tell "already consumed" from
    "never existed".

    Example:
        fs = ReaderFS("/stdin", sys.stdin.buffer)
        with fs.open_file("/stdin", O_RDONLY) as f:
            data = f.read()
    """

    separator = paths.SEPARATOR

    def __init__(
        self,
        name: str,
        stream: BinaryIO,
        mode: int = DEFAULT_FILE_MODE,
        mod_time: datetime | None = None,
        size: int = 0,
        allow_empty_file: bool = False,
    ):
        self.name = name
        self.mode = mode
        self.mod_time = mod_time or datetime.now(timezone.utc)
        self.size = size
        self.allow_empty_file = allow_empty_file
        self._stream: BinaryIO | None = stream
        # Guards only the hand-over of the stream, never a read.
        self._gate = threading.Lock()

    def _file_info(self) -> FileInfo:
        return FileInfo(
            name=paths.base(self.name),
            size=self.size,
            mode=self.mode,
            mod_time=self.mod_time,
        )

    def _dir_info(self, name: str) -> FileInfo:
        return FileInfo(
            name=paths.base(name),
            size=0,
            mode=DIR_MODE,
            mod_time=datetime.now(timezone.utc),
        )

    def _take_stream(self) -> BinaryIO | None:
        with self._gate:
            stream, self._stream = self._stream, None
        return stream

    @property
    def opened(self) -> bool:
        """Whether the stream has been handed out."""
        return self._stream is None

    def open_file(self, name: str, flags: int) -> FakeFile:
        if flags & ~ALLOWED_OPEN_FLAGS:
            raise InvalidArgumentError(
                "open", name, f"invalid combination of flags {flags:#x}"
            )

        if name == self.name:
            stream = self._take_stream()
            if stream is None:
                logger.debug("Rejecting second open of %s", name)
                raise SourceConsumedError("open", name)
            logger.debug("Handing out stream for %s", name)
            return ReaderFile(stream, self._file_info(), self.allow_empty_file)

        if name in ROOT_NAMES:
            return FakeDir(name, self._dir_info(name), [self._file_info()])

        raise NotFoundError("open", name)

    def stat(self, name: str) -> FileInfo:
        return self.lstat(name)

    def lstat(self, name: str) -> FileInfo:
        if name == self.name:
            return self._file_info()
        if name in ROOT_NAMES:
            return self._dir_info(name)

        ancestor = paths.dir(self.name)
        while ancestor not in ROOT_NAMES:
            if name == ancestor:
                return self._dir_info(name)
            ancestor = paths.dir(ancestor)

        raise NotFoundError("lstat", name)

    def ancestors(self) -> list[str]:
        """Proper ancestor directories of the logical path, root excluded, outermost first."""
        found: list[str] = []
        ancestor = paths.dir(self.name)
        while ancestor not in ROOT_NAMES:
            found.append(ancestor)
            ancestor = paths.dir(ancestor)
        return list(reversed(found))

    # --- Path helpers ---

    def join(self, *elems: str) -> str:
        return paths.join(*elems)

    def clean(self, path: str) -> str:
        return paths.clean(path)

    def base(self, path: str) -> str:
        return paths.base(path)

    def dir(self, path: str) -> str:
        return paths.dir(path)

    def is_abs(self, path: str) -> bool:
        return True

    def abs(self, path: str) -> str:
        return paths.clean(path)

    def volume_name(self, path: str) -> str:
        return ""

    # --- Metadata ---

    def device_id(self, fi: FileInfo) -> int:
        raise OSError(errno.ENOTSUP, "device IDs are not supported")

    def extended_stat(self, fi: FileInfo) -> ExtendedFileInfo:
        return ExtendedFileInfo(file_info=fi)

    def node_from_fileinfo(self, path: str, fi: FileInfo) -> Node:
        node = build_basic_node(path, fi)
        # No real owner exists; record the current process's identity.
        node.uid = os.geteuid() if hasattr(os, "geteuid") else 0
        node.gid = os.getegid() if hasattr(os, "getegid") else 0
        node.change_time = node.mod_time
        return node
