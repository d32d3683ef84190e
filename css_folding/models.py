"""Data models for css-folding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FoldingRangeKind(Enum):
    """Standard folding range kinds understood by editors.

    The brace scanner never assigns a kind; the enum exists so that other
    producers of `FoldingRange` can categorize their ranges.

    Attributes:
        COMMENT: Range covering a comment.
        IMPORTS: Range covering a group of imports.
        REGION: Range covering an explicit region.
    """

    COMMENT = "comment"
    IMPORTS = "imports"
    REGION = "region"


@dataclass(frozen=True)
class BraceFrame:
    """An open brace waiting for its match.

    Attributes:
        offset: Zero-based character offset of the ``{``.
        line: Zero-based line number of the ``{``.
    """

    offset: int
    line: int


@dataclass(frozen=True)
class FoldingRange:
    """A span of lines an editor can collapse.

    Attributes:
        start_line: Zero-based line where the range starts.
        end_line: Zero-based line where the range ends (inclusive).
        start_character: Optional character offset on the start line.
        end_character: Optional character offset on the end line.
        kind: Optional category of the range.
        collapsed_text: Optional label shown while the range is collapsed.
    """

    start_line: int
    end_line: int
    start_character: int | None = None
    end_character: int | None = None
    kind: FoldingRangeKind | None = None
    collapsed_text: str | None = None

    def to_lsp(self) -> dict[str, Any]:
        """Return the language server protocol shape of the range.

        Unset optional fields are omitted.

        Examples:
            FoldingRange(0, 3).to_lsp()  # {"startLine": 0, "endLine": 3}
        """
        payload: dict[str, Any] = {"startLine": self.start_line}
        if self.start_character is not None:
            payload["startCharacter"] = self.start_character
        payload["endLine"] = self.end_line
        if self.end_character is not None:
            payload["endCharacter"] = self.end_character
        if self.kind is not None:
            payload["kind"] = self.kind.value
        if self.collapsed_text is not None:
            payload["collapsedText"] = self.collapsed_text
        return payload


class FoldingRangeView:
    """Read-only accessor view over a `FoldingRange`.

    Exposes one property per field for callers that consume ranges through
    accessors rather than the dataclass itself. `kind` is reported as its
    plain string value.
    """

    __slots__ = ("_range",)

    def __init__(self, folding_range: FoldingRange):
        object.__setattr__(self, "_range", folding_range)

    @classmethod
    def from_range(cls, folding_range: FoldingRange) -> FoldingRangeView:
        return cls(folding_range)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FoldingRangeView):
            return NotImplemented
        return self._range == other._range

    def __hash__(self) -> int:
        return hash(self._range)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(start_line={self.start_line}, end_line={self.end_line})"
        )

    @property
    def start_line(self) -> int:
        return self._range.start_line

    @property
    def start_character(self) -> int | None:
        return self._range.start_character

    @property
    def end_line(self) -> int:
        return self._range.end_line

    @property
    def end_character(self) -> int | None:
        return self._range.end_character

    @property
    def kind(self) -> str | None:
        kind = self._range.kind
        return kind.value if kind is not None else None

    @property
    def collapsed_text(self) -> str | None:
        return self._range.collapsed_text
