"""Real filesystem adapter.

RealFileSystem wraps standard library Path, os and shutil operations.
Every OSError is re-raised as FilesIOError chained from the original, so
callers handle the real and the memory adapters the same way.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
import stat
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from scaffold_files.errors import FilesIOError
from scaffold_files.lines import split_lines
from scaffold_files.path import PathToken, dirname, join
from scaffold_files.protocols import PathLike
from scaffold_files.settings import FilesSettings

logger = logging.getLogger(__name__)


@contextmanager
def _with_error_handling(path: PathLike) -> Iterator[None]:
    """Re-raise OSError as FilesIOError.

    The error's own filename wins over ``path``, so a two-path operation
    like ``cp`` reports the side that actually failed.
    """
    try:
        yield
    except OSError as e:
        raise FilesIOError(e, e.filename if e.filename is not None else path) from e


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def __init__(self, settings: FilesSettings | None = None) -> None:
        """Initialize the real filesystem.

        Args:
            settings: Settings providing encoding and line terminator.
        """
        self.settings = settings or FilesSettings()

    @classmethod
    def create(cls, settings: FilesSettings | None = None) -> RealFileSystem:
        """Create a real filesystem adapter.

        Args:
            settings: Optional settings. Defaults are used when omitted.

        Returns:
            Configured RealFileSystem instance.
        """
        return cls(settings=settings)

    def touch(self, path: PathLike) -> None:
        """Create an empty file, leaving an existing one untouched."""
        if self.is_dir(path):
            raise FilesIOError.from_errno(errno.EISDIR, path)

        self.mkdir_p(path)
        with _with_error_handling(path):
            Path(path).touch(exist_ok=True)

    def read(self, path: PathLike) -> str:
        """Read text content from a file, without newline translation."""
        with _with_error_handling(path):
            with Path(path).open(encoding=self.settings.encoding, newline="") as f:
                return f.read()

    def readlines(self, path: PathLike) -> list[str]:
        """Read a file as terminated lines."""
        return split_lines(self.read(path), self.settings.newline)

    def write(self, path: PathLike, content: str) -> None:
        """Write text content to a file, creating parent directories."""
        self.mkdir_p(path)
        with _with_error_handling(path):
            with Path(path).open("w", encoding=self.settings.encoding, newline="") as f:
                f.write(content)
        logger.debug("Wrote %d characters to %s", len(content), path)

    def cp(self, source: PathLike, destination: PathLike) -> None:
        """Copy a file's content, creating the destination's directories."""
        if not self.exists(source):
            raise FilesIOError.from_errno(errno.ENOENT, source)

        self.mkdir_p(destination)
        with _with_error_handling(source):
            shutil.copyfile(source, destination)

    def mkdir(self, path: PathLike) -> None:
        """Create a directory and all its parents."""
        with _with_error_handling(path):
            Path(path).mkdir(parents=True, exist_ok=True)

    def mkdir_p(self, path: PathLike) -> None:
        """Create the parent directories of a future file."""
        self.mkdir(dirname(path))

    def rm(self, path: PathLike) -> None:
        """Remove a file."""
        with _with_error_handling(path):
            Path(path).unlink()
        logger.debug("Removed %s", path)

    def rm_rf(self, path: PathLike) -> None:
        """Remove a file or a directory tree."""
        target = Path(path)
        with _with_error_handling(path):
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()
        logger.debug("Removed %s recursively", path)

    @contextmanager
    def chdir(self, path: PathLike) -> Iterator[None]:
        """Change the process working directory for a ``with`` block."""
        previous = os.getcwd()
        with _with_error_handling(path):
            os.chdir(path)
        try:
            yield
        finally:
            os.chdir(previous)

    def pwd(self) -> str:
        return os.getcwd()

    def join(self, *tokens: PathToken) -> str:
        return join(*tokens)

    def expand_path(self, path: PathLike, base: PathLike | None = None) -> str:
        """Convert a path to an absolute path."""
        directory = os.getcwd() if base is None else os.fspath(base)
        return os.path.abspath(os.path.join(directory, path))

    def chmod(self, path: PathLike, mode: int) -> None:
        with _with_error_handling(path):
            os.chmod(path, mode)

    def mode(self, path: PathLike) -> int:
        with _with_error_handling(path):
            return stat.S_IMODE(os.stat(path).st_mode)

    def entries(self, path: PathLike) -> list[str]:
        """List the entry names of a directory, sorted."""
        with _with_error_handling(path):
            return sorted(os.listdir(path))

    def exists(self, path: PathLike) -> bool:
        """Check if a path exists."""
        return Path(path).exists()

    def is_dir(self, path: PathLike) -> bool:
        """Check if a path is a directory."""
        return Path(path).is_dir()

    def is_executable(self, path: PathLike) -> bool:
        """Check if a path is executable."""
        return os.access(path, os.X_OK)
