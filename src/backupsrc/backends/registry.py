"""Explicit registry of backend types and their options.

Built once at startup by ``default_registry()`` and passed to whatever
needs to parse locations, redact them, or enumerate options.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from . import rest
from .errors import (
    BackendConfigError,
    DuplicateBackendError,
    UnknownBackendError,
    UnknownOptionError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackendSpec:
    """How to parse and redact locations of one backend type."""

    name: str
    config_model: type[BaseModel]
    parse: Callable[[str], BaseModel]
    strip_password: Callable[[str], str]

    @property
    def prefix(self) -> str:
        return self.name + ":"


@dataclass(frozen=True)
class OptionInfo:
    namespace: str
    name: str
    help: str
    default: Any = None

    @property
    def key(self) -> str:
        return f"{self.namespace}.{self.name}"


class BackendRegistry:
    """Backend types keyed by scheme name."""

    def __init__(self) -> None:
        self._specs: dict[str, BackendSpec] = {}

    def register(self, spec: BackendSpec) -> None:
        if spec.name in self._specs:
            raise DuplicateBackendError(f"backend {spec.name!r} already registered")
        self._specs[spec.name] = spec
        logger.debug("Registered backend %s", spec.name)

    def names(self) -> list[str]:
        return sorted(self._specs)

    def get(self, name: str) -> BackendSpec:
        try:
            return self._specs[name]
        except KeyError:
            raise UnknownBackendError(f"unknown backend {name!r}") from None

    def lookup(self, location: str) -> BackendSpec | None:
        """Find the backend whose ``<name>:`` prefix starts location."""
        for spec in self._specs.values():
            if location.startswith(spec.prefix):
                return spec
        return None

    def parse(self, location: str) -> BaseModel:
        spec = self.lookup(location)
        if spec is None:
            raise UnknownBackendError("no backend registered for location")
        return spec.parse(location)

    def strip_password(self, location: str) -> str:
        """Redact location for display; unknown schemes pass through."""
        spec = self.lookup(location)
        if spec is None:
            return location
        return spec.strip_password(location)

    def options(self) -> list[OptionInfo]:
        """All documented options, sorted by ``namespace.name``.

        Only fields with a description are user-settable options.
        """
        found = []
        for spec in self._specs.values():
            for field_name, field in spec.config_model.model_fields.items():
                if not field.description:
                    continue
                found.append(
                    OptionInfo(
                        namespace=spec.name,
                        name=field_name,
                        help=field.description,
                        default=field.default,
                    )
                )
        return sorted(found, key=lambda o: o.key)

    def apply_options(self, config: BaseModel, namespace: str, values: dict[str, str]) -> BaseModel:
        """Return a copy of config with ``namespace.name=value`` overrides applied.

        Keys for other namespaces are ignored.
        """
        self.get(namespace)
        known = {o.name for o in self.options() if o.namespace == namespace}

        updates: dict[str, str] = {}
        for key, value in values.items():
            ns, _, name = key.partition(".")
            if ns != namespace:
                continue
            if name not in known:
                raise UnknownOptionError(f"unknown option {key!r}")
            updates[name] = value

        if not updates:
            return config

        updated = config.model_copy()
        try:
            for name, value in updates.items():
                setattr(updated, name, value)
        except ValidationError as e:
            raise BackendConfigError(f"invalid {namespace} options: {e}") from e
        logger.debug("Applied options %s to %s config", sorted(updates), namespace)
        return updated


def default_registry() -> BackendRegistry:
    """Registry with every built-in backend."""
    registry = BackendRegistry()
    registry.register(
        BackendSpec(
            name="rest",
            config_model=rest.RestConfig,
            parse=rest.parse_config,
            strip_password=rest.strip_password,
        )
    )
    return registry
