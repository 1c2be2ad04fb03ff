"""Block scanning over a list of lines.

The scanner finds lines by substring or pattern and computes block
boundaries by counting open and close markers line by line. Markers are
counted without any knowledge of strings or comments: a marker-looking
token inside a string literal or a comment is counted like any other.
Scaffolding tools edit generated, predictable source, where this
approximation holds.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

Target = str | re.Pattern[str]


@dataclass(frozen=True)
class Delimiter:
    """Open and close markers of a kind of block.

    Attributes:
        name: Human readable name.
        opening: Pattern matching one open marker.
        closing: Pattern matching one close marker.
    """

    name: str
    opening: re.Pattern[str]
    closing: re.Pattern[str]

    def opens(self, line: str) -> int:
        """Count open markers on a line."""
        return len(self.opening.findall(line))

    def closes(self, line: str) -> int:
        """Count close markers on a line."""
        return len(self.closing.findall(line))


# `do ... end` and `{ ... }` blocks
BLOCK_DELIMITER = Delimiter(
    name="block",
    opening=re.compile(r"\bdo\b|\{"),
    closing=re.compile(r"\bend\b|\}"),
)

# Class and module bodies, with the method, control flow and block constructs
# they may nest. Keyword openers only count at the start of a statement (or
# right after an assignment), so `x if y` and `self.class` open nothing.
CLASS_DELIMITER = Delimiter(
    name="class",
    opening=re.compile(
        r"^\s*(?:class|module|def)\b"
        r"|(?:^|=)\s*(?:if|unless|case|while|until|begin)\b"
        r"|\bdo\b|\{"
    ),
    closing=re.compile(r"\bend\b|\}"),
)

CLASS_HEADER = re.compile(r"^\s*(?:class|module)\b")


class BlockScanner:
    """Locates target lines and block boundaries."""

    def matches(self, line: str, target: Target) -> bool:
        """Check whether a line contains the target.

        A string target is a plain substring; a compiled pattern is searched
        anywhere in the line.
        """
        if isinstance(target, re.Pattern):
            return target.search(line) is not None
        return target in line

    def find_first(self, lines: Sequence[str], target: Target) -> int | None:
        """Return the index of the first line containing the target."""
        for index, line in enumerate(lines):
            if self.matches(line, target):
                return index
        return None

    def find_last(self, lines: Sequence[str], target: Target) -> int | None:
        """Return the index of the last line containing the target."""
        for index in range(len(lines) - 1, -1, -1):
            if self.matches(lines[index], target):
                return index
        return None

    def find_block_start(
        self,
        lines: Sequence[str],
        target: Target,
        delimiter: Delimiter = BLOCK_DELIMITER,
    ) -> int | None:
        """Return the first line containing the target that opens a block."""
        for index, line in enumerate(lines):
            if self.matches(line, target) and delimiter.opens(line):
                return index
        return None

    def matching_block_end(
        self,
        lines: Sequence[str],
        start_index: int,
        delimiter: Delimiter = BLOCK_DELIMITER,
    ) -> int | None:
        """Find the closing line of the block opened at ``start_index``.

        Scans forward keeping a depth counter: every open marker on a line
        adds one, every close marker removes one, all in the same step. The
        first line where the depth is back to zero closes the block, so a
        block opened and closed on a single line ends where it starts, and
        nested blocks of the same kind don't end the scan early.

        Args:
            lines: Lines to scan.
            start_index: Index of the line opening the block.
            delimiter: Markers to count.

        Returns:
            Index of the closing line, or None if the block never closes.

        Raises:
            ValueError: If the start line has no open marker.
        """
        if not delimiter.opens(lines[start_index]):
            raise ValueError(
                f"line {start_index} doesn't open a {delimiter.name}: {lines[start_index]!r}"
            )

        depth = 0
        for index in range(start_index, len(lines)):
            line = lines[index]
            depth += delimiter.opens(line) - delimiter.closes(line)
            if depth <= 0:
                return index
        return None

    def enclosing_block_start(
        self,
        lines: Sequence[str],
        inner_index: int,
        header_pattern: re.Pattern[str] = CLASS_HEADER,
    ) -> int | None:
        """Return the nearest line at or before ``inner_index`` matching the header."""
        for index in range(inner_index, -1, -1):
            if header_pattern.search(lines[index]):
                return index
        return None

    def find_class_start(
        self,
        lines: Sequence[str],
        target: Target,
        header_pattern: re.Pattern[str] = CLASS_HEADER,
    ) -> int | None:
        """Locate the class or module header a target refers to.

        A header line containing the target wins. Otherwise the first line
        containing the target is taken as inner line and the nearest header
        above it is returned.
        """
        for index, line in enumerate(lines):
            if header_pattern.search(line) and self.matches(line, target):
                return index

        inner = self.find_first(lines, target)
        if inner is None:
            return None
        return self.enclosing_block_start(lines, inner, header_pattern)
