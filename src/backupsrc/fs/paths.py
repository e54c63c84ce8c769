"""Slash-separated path helpers for virtual filesystems.

These never touch the real filesystem. Unlike ``posixpath`` they follow
lexical cleaning rules throughout: a leading ``//`` collapses to ``/``,
``join`` never discards earlier elements for an absolute later one, and
``dir`` of a bare name is ``"."``.
"""

from __future__ import annotations

import posixpath

SEPARATOR = "/"


def clean(path: str) -> str:
    """Return the shortest equivalent path ("" cleans to ".")."""
    cleaned = posixpath.normpath(path)
    if cleaned.startswith("//"):
        cleaned = SEPARATOR + cleaned.lstrip(SEPARATOR)
    return cleaned


def join(*elems: str) -> str:
    """Join non-empty elements with the separator and clean the result."""
    parts = [e for e in elems if e]
    if not parts:
        return ""
    return clean(SEPARATOR.join(parts))


def base(path: str) -> str:
    """Last element of path, trailing separators ignored."""
    if path == "":
        return "."
    stripped = path.rstrip(SEPARATOR)
    if stripped == "":
        return SEPARATOR
    return stripped[stripped.rfind(SEPARATOR) + 1:]


def dir(path: str) -> str:  # noqa: A001
    """Everything but the last element, cleaned."""
    return clean(path[: path.rfind(SEPARATOR) + 1])
