"""Configuration for the REST server backend.

A location looks like ``rest:<url>``, where the URL may embed
``user:password@``. Credentials missing from the URL can be supplied
through the environment (see ``RestConfig.apply_environment``).
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .errors import InvalidSpecificationError, URLParseError
from .url import URL, parse_url

logger = logging.getLogger(__name__)

SCHEME_PREFIX = "rest:"

ENV_USERNAME = "BACKUP_REST_USERNAME"
# Password for the REST server when it is not embedded in the URL.
ENV_PASSWORD = "BACKUP_REST_PASSWORD"
# Path of a file holding that password; ignored if ENV_PASSWORD is set.
ENV_PASSWORD_FILE = "BACKUP_REST_PASSWORD_FILE"

MAX_PASSWORD_FILE_SIZE = 1024


class RestConfig(BaseModel):
    """Everything needed to connect to a REST server."""

    model_config = ConfigDict(validate_assignment=True)

    url: URL
    connections: int = Field(
        default=5,
        ge=0,
        description="set a limit for the number of concurrent connections (default: 5)",
    )

    _environment_applied: bool = PrivateAttr(default=False)

    def apply_environment(self, prefix: str = "") -> None:
        """Fill in credentials from the environment.

        Only acts when the URL carries neither a username nor a password;
        credentials in the location always win. The cleartext password
        variable takes precedence over the password file. Once applied, the
        URL's credentials are replaced even if both resolve to empty.
        """
        if self._environment_applied:
            logger.debug("Environment already applied to REST config, skipping")
            return
        self._environment_applied = True

        if self.url.username or self.url.password_set:
            logger.debug("REST location carries credentials, ignoring environment")
            return

        username = os.environ.get(prefix + ENV_USERNAME, "")
        password = os.environ.get(prefix + ENV_PASSWORD)
        if password is not None:
            logger.debug("Using REST password from %s", prefix + ENV_PASSWORD)
        else:
            password_file = os.environ.get(prefix + ENV_PASSWORD_FILE)
            if password_file is not None:
                logger.debug("Using REST password from file %s", password_file)
                password = read_password_file(password_file)

        self.url = self.url.with_credentials(username, password or "")


def read_password_file(path: str) -> str:
    """Read at most MAX_PASSWORD_FILE_SIZE bytes of path.

    An unreadable file yields an empty password and a warning.
    """
    try:
        with open(path, "rb") as f:
            data = f.read(MAX_PASSWORD_FILE_SIZE)
    except OSError as e:
        logger.warning("Could not read REST password file %s: %s", path, e.strerror or e)
        return ""
    return data.decode("utf-8", errors="surrogateescape")


def _prepare_url(location: str) -> str:
    s = location[len(SCHEME_PREFIX):]
    if not s.endswith("/"):
        s += "/"
    return s


def parse_config(location: str) -> RestConfig:
    """Parse a ``rest:`` location into a RestConfig.

    Raises:
        InvalidSpecificationError: location lacks the ``rest:`` prefix.
        URLParseError: the remainder is not a valid URL.
    """
    if not location.startswith(SCHEME_PREFIX):
        raise InvalidSpecificationError("invalid REST backend specification")

    try:
        url = parse_url(_prepare_url(location))
    except URLParseError as e:
        raise URLParseError(f"invalid REST URL: {e}") from e

    return RestConfig(url=url)


def strip_password(location: str) -> str:
    """Return location with an embedded password masked as ``***``.

    Meant for logs and error messages, so it never raises: a location that
    cannot be parsed, or has no password, is returned unchanged.
    """
    if not location.startswith(SCHEME_PREFIX):
        return location
    try:
        url = parse_url(_prepare_url(location))
    except URLParseError:
        return location
    if not url.password_set:
        return location
    return SCHEME_PREFIX + url.redacted()
