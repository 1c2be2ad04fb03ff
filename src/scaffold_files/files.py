"""Single entry point for file tree manipulation and line edits.

Example:
    >>> files = Files.create(memory=True)
    >>> files.write("app/settings.rb", "class Settings\\nend\\n")
    >>> files.inject_line_at_class_bottom("app/settings.rb", "Settings", "setting :url")
    >>> print(files.read("app/settings.rb"), end="")
    class Settings
      setting :url
    end
"""

from __future__ import annotations

from contextlib import AbstractContextManager

from scaffold_files.adapter import create_adapter
from scaffold_files.lines import Contents
from scaffold_files.memory import MemoryFileSystem
from scaffold_files.mutation import LineMutationEngine
from scaffold_files.path import PathToken
from scaffold_files.protocols import FileSystem, PathLike
from scaffold_files.scanner import BlockScanner, Target
from scaffold_files.settings import FilesSettings


class Files:
    """Filesystem operations and structural line edits over one adapter.

    Use `Files.create()` to pick the adapter at construction time.
    """

    def __init__(self, adapter: FileSystem, engine: LineMutationEngine) -> None:
        """Initialize with an adapter and an engine bound to it.

        Args:
            adapter: Filesystem adapter.
            engine: Line mutation engine writing through ``adapter``.
        """
        self.adapter = adapter
        self.engine = engine

    @classmethod
    def create(cls, memory: bool = False, settings: FilesSettings | None = None) -> Files:
        """Create a Files instance.

        Args:
            memory: Work on an in-memory tree instead of the real disk.
            settings: Optional settings shared by adapter and engine.

        Returns:
            Configured Files instance.
        """
        settings = settings or FilesSettings()
        adapter = create_adapter(memory=memory, settings=settings)
        engine = LineMutationEngine(adapter, BlockScanner(), settings)
        return cls(adapter, engine)

    @property
    def memory(self) -> bool:
        """Whether the adapter is the in-memory one."""
        return isinstance(self.adapter, MemoryFileSystem)

    # Filesystem operations

    def touch(self, path: PathLike) -> None:
        self.adapter.touch(path)

    def read(self, path: PathLike) -> str:
        return self.adapter.read(path)

    def readlines(self, path: PathLike) -> list[str]:
        return self.adapter.readlines(path)

    def write(self, path: PathLike, content: str) -> None:
        self.adapter.write(path, content)

    def cp(self, source: PathLike, destination: PathLike) -> None:
        self.adapter.cp(source, destination)

    def mkdir(self, path: PathLike) -> None:
        self.adapter.mkdir(path)

    def mkdir_p(self, path: PathLike) -> None:
        self.adapter.mkdir_p(path)

    def rm(self, path: PathLike) -> None:
        self.adapter.rm(path)

    def rm_rf(self, path: PathLike) -> None:
        self.adapter.rm_rf(path)

    def chdir(self, path: PathLike) -> AbstractContextManager[None]:
        return self.adapter.chdir(path)

    def pwd(self) -> str:
        return self.adapter.pwd()

    def join(self, *tokens: PathToken) -> str:
        return self.adapter.join(*tokens)

    def expand_path(self, path: PathLike, base: PathLike | None = None) -> str:
        return self.adapter.expand_path(path, base)

    def chmod(self, path: PathLike, mode: int) -> None:
        self.adapter.chmod(path, mode)

    def mode(self, path: PathLike) -> int:
        return self.adapter.mode(path)

    def entries(self, path: PathLike) -> list[str]:
        return self.adapter.entries(path)

    def exists(self, path: PathLike) -> bool:
        return self.adapter.exists(path)

    def is_dir(self, path: PathLike) -> bool:
        return self.adapter.is_dir(path)

    def is_executable(self, path: PathLike) -> bool:
        return self.adapter.is_executable(path)

    # Line edits

    def unshift(self, path: PathLike, line: Contents) -> None:
        self.engine.unshift(path, line)

    def append(self, path: PathLike, contents: Contents) -> None:
        self.engine.append(path, contents)

    def replace_first_line(self, path: PathLike, target: Target, replacement: Contents) -> None:
        self.engine.replace_first_line(path, target, replacement)

    def replace_last_line(self, path: PathLike, target: Target, replacement: Contents) -> None:
        self.engine.replace_last_line(path, target, replacement)

    def inject_line_before(self, path: PathLike, target: Target, contents: Contents) -> None:
        self.engine.inject_line_before(path, target, contents)

    def inject_line_before_last(self, path: PathLike, target: Target, contents: Contents) -> None:
        self.engine.inject_line_before_last(path, target, contents)

    def inject_line_after(self, path: PathLike, target: Target, contents: Contents) -> None:
        self.engine.inject_line_after(path, target, contents)

    def inject_line_after_last(self, path: PathLike, target: Target, contents: Contents) -> None:
        self.engine.inject_line_after_last(path, target, contents)

    def remove_line(self, path: PathLike, target: Target) -> None:
        self.engine.remove_line(path, target)

    def inject_line_at_block_top(self, path: PathLike, target: Target, contents: Contents) -> None:
        self.engine.inject_line_at_block_top(path, target, contents)

    def inject_line_at_block_bottom(self, path: PathLike, target: Target, contents: Contents) -> None:
        self.engine.inject_line_at_block_bottom(path, target, contents)

    def remove_block(self, path: PathLike, target: Target) -> None:
        self.engine.remove_block(path, target)

    def inject_line_at_class_bottom(self, path: PathLike, target: Target, contents: Contents) -> None:
        self.engine.inject_line_at_class_bottom(path, target, contents)
