"""Error types raised by scaffold-files.

Two kinds of failures reach callers: storage failures (`FilesIOError`),
raised identically by the real and the in-memory adapters, and content-shape
failures (`MissingTargetError`), raised by the line mutation engine when a
line or block cannot be located.
"""

from __future__ import annotations

import os
import re
from typing import Any

__all__ = [
    "FilesError",
    "FilesIOError",
    "MissingTargetError",
    "NotMemoryFileError",
    "UnknownMemoryNodeError",
]


class FilesError(Exception):
    """Base error for scaffold-files."""

    pass


class FilesIOError(FilesError):
    """Wraps a low level I/O error.

    Attributes:
        cause: The original OSError.
        path: The offending path.
    """

    def __init__(self, cause: OSError, path: str | os.PathLike[str] | None = None) -> None:
        """Initialize from the wrapped OSError.

        Args:
            cause: The low level error.
            path: Offending path. Defaults to the error's filename.
        """
        self.cause = cause
        self.path = os.fspath(path) if path is not None else cause.filename
        message = str(cause)
        if self.path is not None and str(self.path) not in message:
            message = f"{message}: {self.path}"
        super().__init__(message)

    @classmethod
    def from_errno(cls, code: int, path: str | os.PathLike[str]) -> FilesIOError:
        """Build an error around the OSError subclass matching an errno code.

        OSError picks the subclass from the code, so ENOENT gives
        FileNotFoundError, EISDIR gives IsADirectoryError and so on.
        """
        cause = OSError(code, os.strerror(code), os.fspath(path))
        error = cls(cause, path)
        error.__cause__ = cause
        return error


class MissingTargetError(FilesError):
    """A line or block could not be found in a file."""

    def __init__(self, target: Any, path: str | os.PathLike[str]) -> None:
        self.target = target
        self.path = path
        label = target.pattern if isinstance(target, re.Pattern) else target
        super().__init__(f"cannot find `{label}' in `{os.fspath(path)}'")


class UnknownMemoryNodeError(FilesError):
    """A memory node was asked to detach a child it doesn't have."""

    def __init__(self, segment: str) -> None:
        self.segment = segment
        super().__init__(f"unknown memory node `{segment}'")


class NotMemoryFileError(FilesError):
    """A memory node was read as a file while being a directory."""

    def __init__(self, segment: str) -> None:
        self.segment = segment
        super().__init__(f"not a memory file `{segment}'")
