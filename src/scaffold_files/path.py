"""Cross platform path tokens.

Hardcoded string paths may use either directory separator. These helpers
split on both and rejoin with the host separator, so the memory adapter
sees the same segments whatever the caller's convention.

Example:
    >>> join("path", ["to", ["nested", "file"]])  # on POSIX
    'path/to/nested/file'
    >>> join("path\\\\to\\\\file")  # on POSIX
    'path/to/file'
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from typing import Any, Union

SEPARATOR = os.sep

_SEPARATOR_MATCHER = re.compile(r"[\\/]")

PathToken = Union[str, "os.PathLike[str]", Iterable[Any]]


def _flatten(tokens: Iterable[PathToken]) -> Iterator[str]:
    for token in tokens:
        if isinstance(token, (str, os.PathLike)):
            yield os.fspath(token)
        else:
            yield from _flatten(token)


def split(path: str | os.PathLike[str]) -> list[str]:
    """Split a path on either directory separator.

    Empty pieces are kept: ``split("/")`` is ``["", ""]``.
    """
    return _SEPARATOR_MATCHER.split(os.fspath(path))


def segments(path: str | os.PathLike[str]) -> list[str]:
    """Split a path into segments, dropping empty and ``.`` pieces."""
    return [segment for segment in split(path) if segment not in ("", ".")]


def join(*tokens: PathToken) -> str:
    """Join path tokens with the host separator.

    Args:
        *tokens: Strings, path-like objects or (nested) iterables of them.
            Every token is split on both separator conventions first.

    Returns:
        The joined path. A leading separator is kept when the first token
        is absolute.
    """
    pieces = [piece for token in _flatten(tokens) for piece in split(token)]
    if not pieces:
        return ""

    body = SEPARATOR.join(piece for piece in pieces if piece)
    if pieces[0] == "" and len(pieces) > 1:
        return SEPARATOR + body
    return body


def is_absolute(path: str | os.PathLike[str]) -> bool:
    """Check whether a path starts at the filesystem root."""
    raw = os.fspath(path)
    return _SEPARATOR_MATCHER.match(raw) is not None or os.path.isabs(raw)


def dirname(path: str | os.PathLike[str]) -> str:
    """Return the parent directory of a path.

    ``dirname("/")`` and ``dirname("/foo")`` are both the root, and a bare
    relative name has ``"."`` as parent.
    """
    parents = [piece for piece in split(path) if piece][:-1]
    if is_absolute(path):
        return SEPARATOR + SEPARATOR.join(parents)
    return SEPARATOR.join(parents) or "."


def normalize(path: str | os.PathLike[str]) -> str:
    """Resolve ``.`` and ``..`` segments lexically.

    ``..`` never climbs above the root of an absolute path.
    """
    absolute = is_absolute(path)
    resolved: list[str] = []
    for segment in segments(path):
        if segment != "..":
            resolved.append(segment)
        elif resolved and resolved[-1] != "..":
            resolved.pop()
        elif not absolute:
            resolved.append(segment)

    body = SEPARATOR.join(resolved)
    if absolute:
        return SEPARATOR + body
    return body or "."
