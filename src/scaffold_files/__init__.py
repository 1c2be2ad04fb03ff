"""File tree manipulation and structural line edits for scaffolding tools."""

__version__ = "0.1.0"

# Export the public API for callers and dependency injection
from scaffold_files.errors import (
    FilesError,
    FilesIOError,
    MissingTargetError,
)
from scaffold_files.files import Files
from scaffold_files.filesystem import RealFileSystem
from scaffold_files.memory import MemoryFileSystem
from scaffold_files.mutation import LineMutationEngine
from scaffold_files.protocols import FileSystem
from scaffold_files.scanner import BlockScanner, Delimiter
from scaffold_files.settings import FilesSettings

__all__ = [
    "__version__",
    "BlockScanner",
    "Delimiter",
    "FileSystem",
    "Files",
    "FilesError",
    "FilesIOError",
    "FilesSettings",
    "LineMutationEngine",
    "MemoryFileSystem",
    "MissingTargetError",
    "RealFileSystem",
]
