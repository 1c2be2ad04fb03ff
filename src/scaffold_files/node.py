"""Node of the in-memory file tree.

A node is a directory until it receives content. Parents own their
children exclusively and no node points back to its parent, so detaching
a child drops its whole subtree.
"""

from __future__ import annotations

import stat

from scaffold_files.errors import NotMemoryFileError, UnknownMemoryNodeError
from scaffold_files.lines import DEFAULT_NEWLINE, split_lines
from scaffold_files.path import SEPARATOR

# rwxr-xr-x
DEFAULT_DIRECTORY_MODE = (
    stat.S_IRWXU | stat.S_IRGRP | stat.S_IXGRP | stat.S_IROTH | stat.S_IXOTH
)

# rw-r--r--
DEFAULT_FILE_MODE = stat.S_IRUSR | stat.S_IWUSR | stat.S_IRGRP | stat.S_IROTH

# Permission bits a mode may carry
MODE_MASK = 0o777


class Node:
    """A directory or file entry of the memory filesystem."""

    __slots__ = ("segment", "mode", "_children", "_content")

    def __init__(self, segment: str, mode: int = DEFAULT_DIRECTORY_MODE) -> None:
        """Initialize a node.

        Args:
            segment: Path component naming this node.
            mode: Permission bits. Defaults to the directory mode.
        """
        self.segment = segment
        self.mode = mode
        self._children: dict[str, Node] | None = None
        self._content: str | None = None

    @classmethod
    def root(cls) -> Node:
        """Create a root node."""
        return cls(SEPARATOR)

    def get(self, segment: str) -> Node | None:
        """Return the child named ``segment``, if any."""
        if self._children is None:
            return None
        return self._children.get(segment)

    def set(self, segment: str) -> Node:
        """Return the child named ``segment``, creating it when missing."""
        if self._children is None:
            self._children = {}
        child = self._children.get(segment)
        if child is None:
            child = self._children[segment] = Node(segment)
        return child

    def unset(self, segment: str) -> Node:
        """Detach and return the child named ``segment``.

        Raises:
            UnknownMemoryNodeError: If there is no such child.
        """
        if not self._children or segment not in self._children:
            raise UnknownMemoryNodeError(segment)
        return self._children.pop(segment)

    def children(self) -> list[str]:
        """Return the child segments, sorted."""
        return sorted(self._children or ())

    @property
    def has_children(self) -> bool:
        return bool(self._children)

    @property
    def is_file(self) -> bool:
        return self._content is not None

    @property
    def is_directory(self) -> bool:
        return not self.is_file

    @property
    def is_executable(self) -> bool:
        """Whether the owner execute bit is set."""
        return bool(self.mode & stat.S_IXUSR)

    def write(self, content: str) -> None:
        """Turn this node into a file holding ``content``."""
        self._content = content
        self.mode = DEFAULT_FILE_MODE

    def read(self) -> str:
        """Return the file content.

        Raises:
            NotMemoryFileError: If this node is a directory.
        """
        if self._content is None:
            raise NotMemoryFileError(self.segment)
        return self._content

    def readlines(self, newline: str = DEFAULT_NEWLINE) -> list[str]:
        """Return the file content as terminated lines."""
        return split_lines(self.read(), newline)

    def chmod(self, mode: int) -> None:
        self.mode = mode & MODE_MASK

    def __repr__(self) -> str:
        kind = "file" if self.is_file else "directory"
        return f"Node({self.segment!r}, {kind}, mode={oct(self.mode)})"
