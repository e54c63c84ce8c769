"""Data models for filesystem metadata and backup nodes."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from datetime import datetime

from .paths import base


@dataclass(frozen=True)
class FileInfo:
    """Bare minimum of file metadata: name, size, mode bits and mtime."""

    name: str
    size: int
    mode: int
    mod_time: datetime

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)


@dataclass
class ExtendedFileInfo:
    """FileInfo plus the fields only a real filesystem can provide."""

    file_info: FileInfo
    device_id: int | None = None
    inode: int | None = None
    links: int | None = None
    uid: int | None = None
    gid: int | None = None
    size: int | None = None
    block_size: int | None = None
    blocks: int | None = None
    access_time: datetime | None = None
    mod_time: datetime | None = None
    change_time: datetime | None = None


@dataclass
class Node:
    """A filesystem entry as the backup engine records it."""

    name: str
    type: str  # "file", "dir", "symlink", "dev", "chardev", "fifo", "socket", "irregular"
    mode: int
    mod_time: datetime
    access_time: datetime
    change_time: datetime | None = None
    uid: int = 0
    gid: int = 0
    size: int = 0

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.type,
            "mode": oct(self.mode),
            "size": self.size,
            "mtime": self.mod_time.isoformat(),
            "atime": self.access_time.isoformat(),
            "ctime": self.change_time.isoformat() if self.change_time else None,
            "uid": self.uid,
            "gid": self.gid,
        }


def node_type(mode: int) -> str:
    if stat.S_ISREG(mode):
        return "file"
    if stat.S_ISDIR(mode):
        return "dir"
    if stat.S_ISLNK(mode):
        return "symlink"
    if stat.S_ISBLK(mode):
        return "dev"
    if stat.S_ISCHR(mode):
        return "chardev"
    if stat.S_ISFIFO(mode):
        return "fifo"
    if stat.S_ISSOCK(mode):
        return "socket"
    return "irregular"


def build_basic_node(path: str, fi: FileInfo) -> Node:
    """Build a Node from the metadata every FS can provide.

    Ownership and change time are left for the FS to fill in.
    """
    kind = node_type(fi.mode)
    return Node(
        name=base(path),
        type=kind,
        mode=stat.S_IMODE(fi.mode),
        mod_time=fi.mod_time,
        access_time=fi.mod_time,
        size=fi.size if kind == "file" else 0,
    )
