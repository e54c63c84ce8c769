"""backupsrc - stream sources and backend configuration for backups."""

__version__ = "0.1.0"

from .backends import (
    BackendRegistry,
    RestConfig,
    default_registry,
    parse_config,
    strip_password,
)
from .config import Settings
from .fs import FS, ReaderFS

__all__ = [
    "Settings",
    "FS",
    "ReaderFS",
    "RestConfig",
    "parse_config",
    "strip_password",
    "BackendRegistry",
    "default_registry",
]
