"""Rendering of folding ranges for output."""

from __future__ import annotations

import json
from collections.abc import Iterable

from .models import FoldingRange


def format_text(ranges: Iterable[FoldingRange]) -> list[str]:
    """Render one ``start-end`` line per range, keeping the given order.

    Examples:
        format_text([FoldingRange(0, 3)])  # ["0-3\\n"]
    """
    return [f"{folding_range.start_line}-{folding_range.end_line}\n" for folding_range in ranges]


def format_json(ranges: Iterable[FoldingRange], indent: int | None = 2) -> str:
    """Render ranges as a JSON array in language server protocol shape.

    Args:
        ranges: Ranges to render.
        indent: Indentation passed to `json.dumps`; None for compact output.

    Returns:
        str: JSON text terminated by a newline.

    Examples:
        format_json([FoldingRange(0, 3)], indent=None)  # '[{"startLine": 0, "endLine": 3}]\\n'
    """
    return json.dumps([folding_range.to_lsp() for folding_range in ranges], indent=indent) + "\n"


def render_ranges(ranges: Iterable[FoldingRange], output_format: str) -> str:
    """Render ranges in the requested output format.

    Args:
        ranges: Ranges to render.
        output_format: Either ``"text"`` or ``"json"``.

    Returns:
        str: Rendered output, empty for text output without ranges.

    Raises:
        ValueError: If `output_format` is not supported.
    """
    if output_format == "text":
        return "".join(format_text(ranges))
    if output_format == "json":
        return format_json(ranges)
    raise ValueError(f"Unsupported output format: {output_format}")
