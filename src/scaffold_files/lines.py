"""Line splitting and joining shared by the adapters and the engine.

Lines keep their terminator, like ``io.IOBase.readlines``, so joining a line
list with ``""`` rebuilds the original content byte for byte.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

DEFAULT_NEWLINE = "\n"

_TERMINATOR = re.compile(r"\r\n|\r|\n")

Contents = str | Iterable[str]


def split_lines(content: str, newline: str = DEFAULT_NEWLINE) -> list[str]:
    """Split content into terminated lines.

    A trailing terminator does not produce a trailing empty line, and empty
    content gives an empty list.
    """
    pieces = content.split(newline)
    lines = [piece + newline for piece in pieces[:-1]]
    if pieces[-1]:
        lines.append(pieces[-1])
    return lines


def detect_newline(lines: Iterable[str], default: str = DEFAULT_NEWLINE) -> str:
    """Return the terminator used by the first terminated line."""
    for line in lines:
        if line.endswith("\r\n"):
            return "\r\n"
        if line.endswith("\n"):
            return "\n"
        if line.endswith("\r"):
            return "\r"
    return default


def is_terminated(line: str) -> bool:
    return line.endswith(("\n", "\r"))


def expand(contents: Contents, newline: str = DEFAULT_NEWLINE) -> list[str]:
    """Expand insertion contents into terminated lines.

    Args:
        contents: A single (possibly multi-line) string or a sequence of them.
        newline: Terminator appended to every produced line.

    Returns:
        One terminated line per logical line. An empty string yields one
        empty line.
    """
    if isinstance(contents, str):
        contents = [contents]

    result: list[str] = []
    for text in contents:
        pieces = _TERMINATOR.split(text)
        if len(pieces) > 1 and pieces[-1] == "":
            pieces.pop()
        result.extend(piece + newline for piece in pieces)
    return result


def indentation(line: str) -> str:
    """Return the leading whitespace of a line, terminator excluded."""
    stripped = line.rstrip("\r\n")
    return stripped[: len(stripped) - len(stripped.lstrip())]


def indent(lines: Iterable[str], offset: str) -> list[str]:
    """Prefix every non-blank line with ``offset``."""
    return [offset + line if line.strip() else line for line in lines]
