"""Structural line edits of text source files.

Every operation reads the whole file through the filesystem adapter, locates
a target line or block with the BlockScanner, splices a new line list and
writes it back through the same adapter. When the target cannot be found a
MissingTargetError is raised before anything is written.
"""

from __future__ import annotations

import logging

from scaffold_files.errors import MissingTargetError
from scaffold_files.lines import (
    Contents,
    detect_newline,
    expand,
    indent,
    indentation,
    is_terminated,
)
from scaffold_files.protocols import FileSystem, PathLike
from scaffold_files.scanner import CLASS_DELIMITER, BlockScanner, Target
from scaffold_files.settings import FilesSettings

logger = logging.getLogger(__name__)


class LineMutationEngine:
    """Inserts, replaces and removes lines and blocks in files.

    Follows Separate Use from Creation: constructor requires all dependencies.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(
        self,
        filesystem: FileSystem,
        scanner: BlockScanner,
        settings: FilesSettings,
    ) -> None:
        """Initialize the engine with required dependencies.

        Args:
            filesystem: Adapter used to read and write files.
            scanner: Locates target lines and block boundaries.
            settings: Line terminator and indentation settings.
        """
        self.fs = filesystem
        self.scanner = scanner
        self.settings = settings

    @classmethod
    def create(
        cls,
        filesystem: FileSystem | None = None,
        scanner: BlockScanner | None = None,
        settings: FilesSettings | None = None,
    ) -> LineMutationEngine:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional adapter (real filesystem if not provided).
            scanner: Optional scanner (created if not provided).
            settings: Optional settings (defaults if not provided).

        Returns:
            Configured LineMutationEngine instance.
        """
        settings = settings or FilesSettings()
        if filesystem is None:
            from scaffold_files.filesystem import RealFileSystem

            filesystem = RealFileSystem(settings)
        return cls(
            filesystem=filesystem,
            scanner=scanner or BlockScanner(),
            settings=settings,
        )

    # ------------------------------------------------------------------
    # Whole file edges
    # ------------------------------------------------------------------

    def unshift(self, path: PathLike, line: Contents) -> None:
        """Add line(s) at the top of a file."""
        lines = self.fs.readlines(path)
        lines[0:0] = expand(line, self._newline(lines))
        self._write(path, lines)

    def append(self, path: PathLike, contents: Contents) -> None:
        """Add line(s) at the bottom of a file, creating it when missing.

        An unterminated last line is terminated first. When the file already
        ends with a terminator, a leading empty line in ``contents`` is
        dropped, so appending never doubles the separator between them.
        """
        self.fs.touch(path)
        lines = self.fs.readlines(path)
        newline = self._newline(lines)
        addition = expand(contents, newline)

        if lines and not is_terminated(lines[-1]):
            lines[-1] += newline
        elif lines and addition and addition[0] == newline:
            addition = addition[1:]

        lines.extend(addition)
        self._write(path, lines)

    # ------------------------------------------------------------------
    # Single line edits
    # ------------------------------------------------------------------

    def replace_first_line(self, path: PathLike, target: Target, replacement: Contents) -> None:
        """Replace the first line containing ``target``."""
        self._replace(path, target, replacement, last=False)

    def replace_last_line(self, path: PathLike, target: Target, replacement: Contents) -> None:
        """Replace the last line containing ``target``."""
        self._replace(path, target, replacement, last=True)

    def inject_line_before(self, path: PathLike, target: Target, contents: Contents) -> None:
        """Insert line(s) before the first line containing ``target``."""
        self._inject(path, target, contents, last=False, after=False)

    def inject_line_before_last(self, path: PathLike, target: Target, contents: Contents) -> None:
        """Insert line(s) before the last line containing ``target``."""
        self._inject(path, target, contents, last=True, after=False)

    def inject_line_after(self, path: PathLike, target: Target, contents: Contents) -> None:
        """Insert line(s) after the first line containing ``target``."""
        self._inject(path, target, contents, last=False, after=True)

    def inject_line_after_last(self, path: PathLike, target: Target, contents: Contents) -> None:
        """Insert line(s) after the last line containing ``target``."""
        self._inject(path, target, contents, last=True, after=True)

    def remove_line(self, path: PathLike, target: Target) -> None:
        """Remove the first line containing ``target``."""
        lines = self.fs.readlines(path)
        index = self._find(lines, path, target, last=False)
        del lines[index]
        self._write(path, lines)

    # ------------------------------------------------------------------
    # Block edits
    # ------------------------------------------------------------------

    def inject_line_at_block_top(self, path: PathLike, target: Target, contents: Contents) -> None:
        """Insert line(s) as the first lines of the block opened by ``target``.

        Inserted lines are indented one level deeper than the opening line.

        Example:
            Injecting ``load_path.unshift("dir")`` at the top of ``configure``::

                configure do                      configure do
                  root __dir__           ->         load_path.unshift("dir")
                end                                 root __dir__
                                                  end
        """
        lines = self.fs.readlines(path)
        start, _ = self._find_block(lines, path, target)
        offset = indentation(lines[start]) + self._indent_unit
        lines[start + 1 : start + 1] = indent(expand(contents, self._newline(lines)), offset)
        logger.debug("Injected at top of block %r in %s", target, path)
        self._write(path, lines)

    def inject_line_at_block_bottom(self, path: PathLike, target: Target, contents: Contents) -> None:
        """Insert line(s) as the last lines of the block opened by ``target``.

        The closing line is found by depth counting, so nested blocks of the
        same kind are kept inside. Inserted lines are indented one level
        deeper than the closing line.
        """
        lines = self.fs.readlines(path)
        _, end = self._find_block(lines, path, target)
        offset = indentation(lines[end]) + self._indent_unit
        lines[end:end] = indent(expand(contents, self._newline(lines)), offset)
        logger.debug("Injected at bottom of block %r in %s", target, path)
        self._write(path, lines)

    def remove_block(self, path: PathLike, target: Target) -> None:
        """Remove the block opened by ``target``, nested content included."""
        lines = self.fs.readlines(path)
        start, end = self._find_block(lines, path, target, allow_inline=True)
        del lines[start : end + 1]
        logger.debug("Removed block %r (lines %d-%d) from %s", target, start, end, path)
        self._write(path, lines)

    def inject_line_at_class_bottom(self, path: PathLike, target: Target, contents: Contents) -> None:
        """Insert line(s) as the last lines of the class or module named by ``target``.

        Methods and blocks inside the class are counted as nested
        constructs, so their closing lines are not taken for the class end.
        """
        lines = self.fs.readlines(path)
        start = self.scanner.find_class_start(lines, target)
        if start is None:
            raise MissingTargetError(target, path)

        end = self.scanner.matching_block_end(lines, start, CLASS_DELIMITER)
        if end is None or end == start:
            raise MissingTargetError(target, path)

        offset = indentation(lines[end]) + self._indent_unit
        lines[end:end] = indent(expand(contents, self._newline(lines)), offset)
        logger.debug("Injected at bottom of class %r in %s", target, path)
        self._write(path, lines)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def _indent_unit(self) -> str:
        return " " * self.settings.indentation

    def _newline(self, lines: list[str]) -> str:
        return detect_newline(lines, self.settings.newline)

    def _find(self, lines: list[str], path: PathLike, target: Target, last: bool) -> int:
        finder = self.scanner.find_last if last else self.scanner.find_first
        index = finder(lines, target)
        if index is None:
            raise MissingTargetError(target, path)
        return index

    def _find_block(
        self,
        lines: list[str],
        path: PathLike,
        target: Target,
        allow_inline: bool = False,
    ) -> tuple[int, int]:
        """Return the opening and closing line indexes of a block.

        A block opened and closed on its opening line has no body to inject
        into, so it only counts when ``allow_inline`` is set.
        """
        start = self.scanner.find_block_start(lines, target)
        if start is None:
            raise MissingTargetError(target, path)

        end = self.scanner.matching_block_end(lines, start)
        if end is None or (end == start and not allow_inline):
            raise MissingTargetError(target, path)
        return start, end

    def _replace(self, path: PathLike, target: Target, replacement: Contents, last: bool) -> None:
        lines = self.fs.readlines(path)
        index = self._find(lines, path, target, last)
        lines[index : index + 1] = expand(replacement, self._newline(lines))
        self._write(path, lines)

    def _inject(
        self,
        path: PathLike,
        target: Target,
        contents: Contents,
        last: bool,
        after: bool,
    ) -> None:
        lines = self.fs.readlines(path)
        newline = self._newline(lines)
        index = self._find(lines, path, target, last)
        if after:
            if not is_terminated(lines[index]):
                lines[index] += newline
            index += 1
        lines[index:index] = expand(contents, newline)
        self._write(path, lines)

    def _write(self, path: PathLike, lines: list[str]) -> None:
        self.fs.write(path, "".join(lines))
