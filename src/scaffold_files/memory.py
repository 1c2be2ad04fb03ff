"""In-memory filesystem.

MemoryFileSystem emulates the real filesystem adapter on top of a tree of
`Node` objects, for tests and dry runs that must not touch the disk.
Errors mimic the OS: each failure is a FilesIOError wrapping the OSError
subclass the real adapter would have produced.
"""

from __future__ import annotations

import errno
import logging
from collections.abc import Iterator
from contextlib import contextmanager

from scaffold_files.errors import FilesIOError
from scaffold_files.node import Node
from scaffold_files.path import (
    SEPARATOR,
    PathToken,
    dirname,
    is_absolute,
    join,
    normalize,
    segments,
)
from scaffold_files.protocols import PathLike
from scaffold_files.settings import FilesSettings

logger = logging.getLogger(__name__)


class MemoryFileSystem:
    """Filesystem adapter backed by an in-memory tree.

    Relative paths are resolved from the current node, which `chdir`
    rebinds for the duration of a ``with`` block. Satisfies the FileSystem
    protocol structurally.
    """

    def __init__(self, root: Node | None = None, settings: FilesSettings | None = None) -> None:
        """Initialize the memory filesystem.

        Args:
            root: Root node of the tree. Defaults to an empty root.
            settings: Settings providing the line terminator.

        Note:
            Prefer using factory method `create()` for construction.
        """
        self._root = root or Node.root()
        self._current = self._root
        self._cwd: tuple[str, ...] = ()
        self.settings = settings or FilesSettings()

    @classmethod
    def create(cls, settings: FilesSettings | None = None) -> MemoryFileSystem:
        """Create an empty memory filesystem.

        Args:
            settings: Optional settings. Defaults are used when omitted.

        Returns:
            Configured MemoryFileSystem instance.
        """
        return cls(settings=settings)

    def touch(self, path: PathLike) -> None:
        """Create an empty file, leaving an existing one untouched."""
        if self.is_dir(path):
            raise FilesIOError.from_errno(errno.EISDIR, path)

        if self._find(path) is None:
            self.write(path, "")

    def read(self, path: PathLike) -> str:
        """Read the full content of a file."""
        return self._find_file(path).read()

    def readlines(self, path: PathLike) -> list[str]:
        """Read a file as terminated lines."""
        return self._find_file(path).readlines(self.settings.newline)

    def write(self, path: PathLike, content: str) -> None:
        """Create or overwrite a file, creating intermediate directories.

        Raises:
            FilesIOError: If an intermediate segment is a file, or if path is
                a directory holding entries.
        """
        node = self._make(path)
        if node is self._root or node is self._current or node.has_children:
            raise FilesIOError.from_errno(errno.EISDIR, path)

        node.write(content)
        logger.debug("Wrote %d characters to %s", len(content), path)

    def cp(self, source: PathLike, destination: PathLike) -> None:
        """Copy a file's content to another path."""
        self.write(destination, self.read(source))

    def mkdir(self, path: PathLike) -> None:
        """Create a directory and all its parents."""
        if self._make(path).is_file:
            raise FilesIOError.from_errno(errno.EEXIST, path)

    def mkdir_p(self, path: PathLike) -> None:
        """Create the parent directories of a future file."""
        self.mkdir(dirname(path))

    def rm(self, path: PathLike) -> None:
        """Remove a file.

        Raises:
            FilesIOError: If path is missing, or a directory (EPERM).
        """
        parent, segment = self._find_parent(path)
        node = self._find(path)
        if node is None:
            raise FilesIOError.from_errno(errno.ENOENT, path)
        if node.is_directory or parent is None or segment is None:
            raise FilesIOError.from_errno(errno.EPERM, path)

        parent.unset(segment)
        logger.debug("Removed %s", path)

    def rm_rf(self, path: PathLike) -> None:
        """Remove a file or a directory with its whole subtree."""
        parent, segment = self._find_parent(path)
        if self._find(path) is None:
            raise FilesIOError.from_errno(errno.ENOENT, path)
        if parent is None or segment is None:
            raise FilesIOError.from_errno(errno.EPERM, path)

        parent.unset(segment)
        logger.debug("Removed %s recursively", path)

    @contextmanager
    def chdir(self, path: PathLike) -> Iterator[None]:
        """Change the current directory for the duration of a ``with`` block.

        Raises:
            FilesIOError: If path is missing or is a file.
        """
        node = self._find(path)
        if node is None:
            raise FilesIOError.from_errno(errno.ENOENT, path)
        if not node.is_directory:
            raise FilesIOError.from_errno(errno.ENOTDIR, path)

        previous = (self._current, self._cwd)
        self._current, self._cwd = node, self._absolute_segments(path)
        try:
            yield
        finally:
            self._current, self._cwd = previous

    def pwd(self) -> str:
        """Return the absolute path of the current directory."""
        return SEPARATOR + SEPARATOR.join(self._cwd)

    def join(self, *tokens: PathToken) -> str:
        return join(*tokens)

    def expand_path(self, path: PathLike, base: PathLike | None = None) -> str:
        """Convert a path to an absolute path.

        Relative paths are resolved against ``base``, or the current
        directory when omitted.
        """
        if is_absolute(path):
            return normalize(path)

        directory = self.pwd() if base is None else self.expand_path(base)
        return normalize(join(directory, path))

    def chmod(self, path: PathLike, mode: int) -> None:
        self._find_existing(path).chmod(mode)

    def mode(self, path: PathLike) -> int:
        return self._find_existing(path).mode

    def entries(self, path: PathLike) -> list[str]:
        """List the entry names of a directory, sorted."""
        node = self._find_existing(path)
        if not node.is_directory:
            raise FilesIOError.from_errno(errno.ENOTDIR, path)
        return node.children()

    def exists(self, path: PathLike) -> bool:
        return self._find(path) is not None

    def is_dir(self, path: PathLike) -> bool:
        node = self._find(path)
        return node is not None and node.is_directory

    def is_executable(self, path: PathLike) -> bool:
        node = self._find(path)
        return node is not None and node.is_executable

    def _absolute_segments(self, path: PathLike) -> tuple[str, ...]:
        if is_absolute(path):
            return tuple(segments(normalize(path)))
        return tuple(segments(normalize(join(self.pwd(), path))))

    def _plan(self, path: PathLike) -> tuple[Node, list[str]]:
        """Return the node to walk from and the segments to walk.

        Plain relative paths start at the current node and absolute ones at
        the root. Paths climbing with ``..`` are made absolute first.
        """
        walk = segments(path)
        if ".." in walk:
            return self._root, list(self._absolute_segments(path))
        if is_absolute(path):
            return self._root, walk
        return self._current, walk

    def _find(self, path: PathLike) -> Node | None:
        node, walk = self._plan(path)
        return self._walk(node, walk)

    @staticmethod
    def _walk(node: Node | None, walk: list[str]) -> Node | None:
        for segment in walk:
            if node is None:
                return None
            node = node.get(segment)
        return node

    def _find_parent(self, path: PathLike) -> tuple[Node | None, str | None]:
        node, walk = self._plan(path)
        if not walk:
            return None, None
        return self._walk(node, walk[:-1]), walk[-1]

    def _find_existing(self, path: PathLike) -> Node:
        node = self._find(path)
        if node is None:
            raise FilesIOError.from_errno(errno.ENOENT, path)
        return node

    def _find_file(self, path: PathLike) -> Node:
        node = self._find_existing(path)
        if node.is_directory:
            raise FilesIOError.from_errno(errno.EISDIR, path)
        return node

    def _make(self, path: PathLike) -> Node:
        """Walk the path, creating missing directories along the way."""
        node, walk = self._plan(path)
        for segment in walk:
            if node.is_file:
                raise FilesIOError.from_errno(errno.ENOTDIR, path)
            node = node.set(segment)
        return node
