"""Pytest configuration and shared fixtures."""

import io
import stat
from datetime import datetime, timezone

import pytest

from backupsrc.backends import default_registry
from backupsrc.backends.rest import ENV_PASSWORD, ENV_PASSWORD_FILE, ENV_USERNAME
from backupsrc.fs import ReaderFS

MOD_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class TrackingStream(io.BytesIO):
    """BytesIO that counts close() calls."""

    def __init__(self, data: bytes = b""):
        super().__init__(data)
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        super().close()


@pytest.fixture
def make_reader_fs():
    """Build a ReaderFS over an in-memory stream."""

    def _make(name="/stdin", data=b"hello world", allow_empty_file=False):
        stream = TrackingStream(data)
        fs = ReaderFS(
            name,
            stream,
            mode=stat.S_IFREG | 0o600,
            mod_time=MOD_TIME,
            size=len(data),
            allow_empty_file=allow_empty_file,
        )
        return fs, stream

    return _make


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def clean_rest_env(monkeypatch):
    """Remove every REST credential variable, bare and TEST_-prefixed."""
    for prefix in ("", "TEST_"):
        for name in (ENV_USERNAME, ENV_PASSWORD, ENV_PASSWORD_FILE):
            monkeypatch.delenv(prefix + name, raising=False)
    return monkeypatch


@pytest.fixture
def mod_time() -> datetime:
    return MOD_TIME
