"""Protocol definitions for backend configuration objects."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class EnvironmentApplier(Protocol):
    """A backend config that can merge values from the environment."""

    def apply_environment(self, prefix: str = "") -> None:
        """Read prefix-qualified environment variables into the config.

        Args:
            prefix: Prepended to every variable name; ``""`` uses bare names.
        """
        ...
