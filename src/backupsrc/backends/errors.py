"""Errors raised while building backend configuration."""


class BackendConfigError(ValueError):
    """Base class for malformed backend locations and options."""


class InvalidSpecificationError(BackendConfigError):
    """The location does not start with the backend's scheme tag."""


class URLParseError(BackendConfigError):
    """The part after the scheme tag is not a valid URL."""


class UnknownBackendError(BackendConfigError):
    pass


class DuplicateBackendError(BackendConfigError):
    pass


class UnknownOptionError(BackendConfigError):
    pass
