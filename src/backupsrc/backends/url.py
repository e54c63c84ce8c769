"""URL value type for backend endpoints.

``urllib.parse`` cannot tell a password that is set but empty from one that
is absent, and it drops the ``//`` of authority-less URLs such as
``http+unix:///tmp/rest.socket:/repo/`` when re-assembling. Credential
precedence depends on the first and round-tripping on the second, so URLs
are split and rendered here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from urllib.parse import quote, unquote

from .errors import URLParseError

_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
_PORT_RE = re.compile(r"^[0-9]*$")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Characters left unescaped in user info, besides unreserved ones.
_USERINFO_SAFE = "$&+,;="


@dataclass(frozen=True)
class URL:
    """A parsed URL.

    ``username`` and ``password`` are ``None`` when absent; an empty string
    means present but empty (``http://user:@host``).
    """

    scheme: str = ""
    username: str | None = None
    password: str | None = None
    host: str = ""
    path: str = ""
    query: str | None = None
    fragment: str | None = None
    has_authority: bool = False

    @property
    def has_user(self) -> bool:
        return self.username is not None or self.password is not None

    @property
    def password_set(self) -> bool:
        return self.password is not None

    def userinfo(self) -> str:
        """Escaped ``user[:password]`` as it appears before the ``@``."""
        if not self.has_user:
            return ""
        text = _quote_userinfo(self.username or "")
        if self.password is not None:
            text += ":" + _quote_userinfo(self.password)
        return text

    def with_credentials(self, username: str, password: str) -> URL:
        return replace(self, username=username, password=password)

    def __str__(self) -> str:
        out = ""
        if self.scheme:
            out += self.scheme + ":"
        if self.has_authority or self.host or self.has_user:
            out += "//"
            if self.has_user:
                out += self.userinfo() + "@"
            out += self.host
            if self.path and not self.path.startswith("/"):
                out += "/"
        out += self.path
        if self.query is not None:
            out += "?" + self.query
        if self.fragment is not None:
            out += "#" + self.fragment
        return out

    def redacted(self) -> str:
        """Render with the password, if any, replaced by ``***``."""
        text = str(self)
        if self.password is None:
            return text
        masked = _quote_userinfo(self.username or "") + ":***@"
        return text.replace(self.userinfo() + "@", masked, 1)


def _quote_userinfo(text: str) -> str:
    # surrogateescape keeps non-UTF-8 bytes from password files intact.
    return quote(text, safe=_USERINFO_SAFE, errors="surrogateescape")


def _unquote_userinfo(text: str) -> str:
    if _BAD_ESCAPE_RE.search(text):
        raise URLParseError("invalid URL escape in user info")
    return unquote(text, errors="surrogateescape")


def _check_host(host: str) -> None:
    if host.startswith("["):
        end = host.find("]")
        if end < 0:
            raise URLParseError("missing ']' in host")
        port = host[end + 1:]
        if port and not (port.startswith(":") and _PORT_RE.match(port[1:])):
            raise URLParseError(f"invalid port {port!r} after host")
        return
    if ":" in host:
        port = host.rpartition(":")[2]
        if not _PORT_RE.match(port):
            raise URLParseError(f"invalid port {':' + port!r} after host")


def parse_url(raw: str) -> URL:
    """Split raw into a URL.

    Raises:
        URLParseError: raw contains whitespace or control characters, has an
            empty scheme, carries a malformed host/port, or has an invalid
            percent escape in its user info.
    """
    if any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in raw):
        raise URLParseError("invalid character in URL")
    if raw.startswith(":"):
        raise URLParseError("missing protocol scheme")

    scheme = ""
    rest = raw
    match = _SCHEME_RE.match(raw)
    if match:
        scheme = match.group(1).lower()
        rest = raw[match.end():]

    fragment = None
    if "#" in rest:
        rest, _, fragment = rest.partition("#")
    query = None
    if "?" in rest:
        rest, _, query = rest.partition("?")

    username = password = None
    host = ""
    has_authority = rest.startswith("//")
    if has_authority:
        authority, slash, tail = rest[2:].partition("/")
        path = slash + tail
        if "@" in authority:
            userinfo, _, host = authority.rpartition("@")
            user, sep, secret = userinfo.partition(":")
            username = _unquote_userinfo(user)
            if sep:
                password = _unquote_userinfo(secret)
        else:
            host = authority
        _check_host(host)
    else:
        path = rest
        if not scheme and ":" in path.partition("/")[0]:
            raise URLParseError("first path segment in URL cannot contain colon")

    return URL(
        scheme=scheme,
        username=username,
        password=password,
        host=host,
        path=path,
        query=query,
        fragment=fragment,
        has_authority=has_authority,
    )
