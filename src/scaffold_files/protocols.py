"""Protocol definitions for core abstractions.

This module defines the filesystem interface shared by the real-disk and the
in-memory adapters. Callers depend on the Protocol only, so either adapter
(or a test double) can be injected without inheritance.

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

import os
from contextlib import AbstractContextManager
from typing import Protocol, runtime_checkable

from scaffold_files.path import PathToken

PathLike = str | os.PathLike[str]


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Every failure to resolve, read, write or manipulate a path is raised as
    `scaffold_files.errors.FilesIOError` wrapping the underlying OSError, so
    callers never branch on the adapter in use.
    """

    def touch(self, path: PathLike) -> None:
        """Create an empty file, leaving an existing one untouched.

        Intermediate directories are created.

        Args:
            path: Path to the file.

        Raises:
            FilesIOError: If path is a directory.
        """
        ...

    def read(self, path: PathLike) -> str:
        """Read the full content of a file.

        Args:
            path: Path to the file.

        Returns:
            File content.

        Raises:
            FilesIOError: If path is missing or is a directory.
        """
        ...

    def readlines(self, path: PathLike) -> list[str]:
        """Read a file as lines, each keeping its terminator.

        Args:
            path: Path to the file.

        Returns:
            Lines of the file; empty for an empty file.

        Raises:
            FilesIOError: If path is missing or is a directory.
        """
        ...

    def write(self, path: PathLike, content: str) -> None:
        """Create or overwrite a file, creating intermediate directories.

        Args:
            path: Path to the file.
            content: Content to write.
        """
        ...

    def cp(self, source: PathLike, destination: PathLike) -> None:
        """Copy a file's content to another path.

        Args:
            source: File to copy.
            destination: Target file; its directories are created.

        Raises:
            FilesIOError: If source is missing.
        """
        ...

    def mkdir(self, path: PathLike) -> None:
        """Create a directory and all its parents.

        Args:
            path: Directory to create.
        """
        ...

    def mkdir_p(self, path: PathLike) -> None:
        """Create the parent directories of a future file.

        Args:
            path: File path; nothing is created at the path itself.
        """
        ...

    def rm(self, path: PathLike) -> None:
        """Remove a file.

        Args:
            path: File to remove.

        Raises:
            FilesIOError: If path is missing or is a directory.
        """
        ...

    def rm_rf(self, path: PathLike) -> None:
        """Remove a file or a directory with all its descendants.

        Args:
            path: Entry to remove.

        Raises:
            FilesIOError: If path is missing.
        """
        ...

    def chdir(self, path: PathLike) -> AbstractContextManager[None]:
        """Change the working directory for the duration of a ``with`` block.

        The previous working directory is restored on every exit path.

        Args:
            path: Target directory.

        Raises:
            FilesIOError: If path is missing or is a file.
        """
        ...

    def pwd(self) -> str:
        """Return the current working directory."""
        ...

    def join(self, *tokens: PathToken) -> str:
        """Join path tokens with the host separator."""
        ...

    def expand_path(self, path: PathLike, base: PathLike | None = None) -> str:
        """Convert a path to an absolute path.

        Args:
            path: Path to expand.
            base: Directory relative paths are resolved against.
                Defaults to the working directory.

        Returns:
            The absolute path.
        """
        ...

    def chmod(self, path: PathLike, mode: int) -> None:
        """Set permission bits.

        Raises:
            FilesIOError: If path is missing.
        """
        ...

    def mode(self, path: PathLike) -> int:
        """Return permission bits.

        Raises:
            FilesIOError: If path is missing.
        """
        ...

    def entries(self, path: PathLike) -> list[str]:
        """List the entry names of a directory, sorted.

        Raises:
            FilesIOError: If path is missing or is a file.
        """
        ...

    def exists(self, path: PathLike) -> bool:
        """Check if a path exists."""
        ...

    def is_dir(self, path: PathLike) -> bool:
        """Check if a path is a directory."""
        ...

    def is_executable(self, path: PathLike) -> bool:
        """Check if a path is executable by its owner."""
        ...
