"""Backend configuration: location parsing, credentials and redaction."""

from .errors import (
    BackendConfigError,
    DuplicateBackendError,
    InvalidSpecificationError,
    UnknownBackendError,
    UnknownOptionError,
    URLParseError,
)
from .protocol import EnvironmentApplier
from .registry import BackendRegistry, BackendSpec, OptionInfo, default_registry
from .rest import RestConfig, parse_config, strip_password
from .url import URL, parse_url

__all__ = [
    "URL",
    "parse_url",
    "RestConfig",
    "parse_config",
    "strip_password",
    "EnvironmentApplier",
    "BackendRegistry",
    "BackendSpec",
    "OptionInfo",
    "default_registry",
    "BackendConfigError",
    "InvalidSpecificationError",
    "URLParseError",
    "UnknownBackendError",
    "UnknownOptionError",
    "DuplicateBackendError",
]
