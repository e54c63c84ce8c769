"""Tests for the FS / File protocols and metadata models."""

import io
import stat

from backupsrc.fs import FS, FakeDir, FakeFile, File, FileInfo, ReaderFile, build_basic_node
from backupsrc.fs.models import node_type


class TestFileProtocol:
    def test_fake_handles_satisfy_protocol(self, mod_time):
        info = FileInfo(name="x", size=0, mode=stat.S_IFREG, mod_time=mod_time)
        assert isinstance(FakeFile("x", info), File)
        assert isinstance(FakeDir("/", info, []), File)
        assert isinstance(ReaderFile(io.BytesIO(), info), File)

    def test_class_without_methods_fails_protocol(self):
        class Incomplete:
            def read(self, size=-1):
                return b""

        assert not isinstance(Incomplete(), File)
        assert not isinstance(Incomplete(), FS)


class TestFileInfo:
    def test_is_dir_follows_mode(self, mod_time):
        assert FileInfo("d", 0, stat.S_IFDIR | 0o700, mod_time).is_dir
        assert not FileInfo("f", 0, stat.S_IFREG | 0o700, mod_time).is_dir
        assert not FileInfo("p", 0, 0o755, mod_time).is_dir


class TestNode:
    def test_node_type_by_mode(self):
        assert node_type(stat.S_IFREG) == "file"
        assert node_type(stat.S_IFDIR) == "dir"
        assert node_type(stat.S_IFLNK) == "symlink"
        assert node_type(stat.S_IFIFO) == "fifo"
        assert node_type(stat.S_IFSOCK) == "socket"
        assert node_type(stat.S_IFCHR) == "chardev"
        assert node_type(stat.S_IFBLK) == "dev"
        assert node_type(0) == "irregular"

    def test_basic_node(self, mod_time):
        fi = FileInfo("ignored", 42, stat.S_IFREG | 0o640, mod_time)
        node = build_basic_node("/data/file.bin", fi)
        assert node.name == "file.bin"
        assert node.mode == 0o640
        assert node.size == 42
        assert node.access_time == mod_time
        assert node.change_time is None

    def test_to_dict(self, mod_time):
        fi = FileInfo("f", 1, stat.S_IFREG | 0o644, mod_time)
        data = build_basic_node("/f", fi).to_dict()
        assert data["type"] == "file"
        assert data["mode"] == "0o644"
        assert data["mtime"] == mod_time.isoformat()
        assert data["ctime"] is None
