"""Construction-time selection of the filesystem adapter."""

from __future__ import annotations

from scaffold_files.filesystem import RealFileSystem
from scaffold_files.memory import MemoryFileSystem
from scaffold_files.protocols import FileSystem
from scaffold_files.settings import FilesSettings


def create_adapter(memory: bool = False, settings: FilesSettings | None = None) -> FileSystem:
    """Create the filesystem adapter.

    Args:
        memory: Use the in-memory adapter instead of the real disk.
        settings: Optional settings passed to the adapter.

    Returns:
        A MemoryFileSystem or a RealFileSystem.
    """
    if memory:
        return MemoryFileSystem.create(settings)
    return RealFileSystem.create(settings)
