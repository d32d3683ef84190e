"""Offset to line-number lookup for source text."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from dataclasses import dataclass

from .constants import LINE_BREAK


def build_line_starts(source: str) -> list[int]:
    """Compute the offset at which every line of `source` begins.

    Entry ``0`` is always ``0``; each further entry is the offset right after a
    ``"\\n"``. Only ``"\\n"`` counts as a line break, so ``"\\r\\n"`` ends a
    line once and a lone ``"\\r"`` does not end one.

    Args:
        source: Text to index.

    Returns:
        list[int]: Strictly increasing line start offsets, one per line.

    Examples:
        build_line_starts("")  # [0]
        build_line_starts("a {\\n}\\n")  # [0, 4, 6]
    """
    line_starts = [0]
    position = source.find(LINE_BREAK)
    while position != -1:
        line_starts.append(position + 1)
        position = source.find(LINE_BREAK, position + 1)
    return line_starts


def line_number_at(line_starts: Sequence[int], offset: int) -> int:
    """Return the zero-based line containing `offset`.

    Binary search for the last line start that is ``<= offset``.

    Args:
        line_starts: Table produced by `build_line_starts`.
        offset: Zero-based character offset into the indexed source.

    Returns:
        int: Zero-based line number.

    Examples:
        line_number_at([0, 4, 6], 4)  # 1
    """
    return bisect_right(line_starts, offset) - 1


@dataclass(frozen=True)
class LineIndex:
    """Line start table for one source, built once and then only read.

    Attributes:
        line_starts: Offsets of the first character of every line.
    """

    line_starts: tuple[int, ...]

    @classmethod
    def from_source(cls, source: str) -> LineIndex:
        return cls(tuple(build_line_starts(source)))

    @property
    def line_count(self) -> int:
        return len(self.line_starts)

    def line_of(self, offset: int) -> int:
        return line_number_at(self.line_starts, offset)
