"""Brace-based folding range computation for stylesheets."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .config import FoldingConfig, validate_config
from .constants import CLOSE_BRACE, OPEN_BRACE
from .exceptions import FoldingFileError
from .filesystem import read_stylesheet
from .line_index import LineIndex
from .models import BraceFrame, FoldingRange, FoldingRangeView

logger = logging.getLogger(__name__)


def get_folding_ranges(source: str) -> list[FoldingRange]:
    """Compute folding ranges for every multi-line brace block in `source`.

    Walks the text once, pushing each ``{`` on a stack and popping it at the
    next ``}``. A pair produces a range only when the two braces sit on
    different lines. A ``}`` with nothing to match and a ``{`` that is never
    closed are both ignored, so half-typed stylesheets fold as far as they can.

    Braces are counted wherever they appear, including inside comments and
    string literals.

    Args:
        source: Stylesheet text.

    Returns:
        list[FoldingRange]: Ranges in the order their closing braces were
            found (inner blocks before the blocks that contain them). The
            optional range fields are left unset.

    Examples:
        get_folding_ranges("a {\\n  color: red;\\n}\\n")  # [FoldingRange(0, 2)]
        get_folding_ranges("h1 { color: blue; }\\n")  # []
    """
    index = LineIndex.from_source(source)
    stack: list[BraceFrame] = []
    folding_ranges: list[FoldingRange] = []
    unmatched_closes = 0

    for offset, character in enumerate(source):
        if character == OPEN_BRACE:
            stack.append(BraceFrame(offset=offset, line=index.line_of(offset)))
        elif character == CLOSE_BRACE:
            end_line = index.line_of(offset)
            if not stack:
                unmatched_closes += 1
                continue
            frame = stack.pop()
            if end_line > frame.line:
                folding_ranges.append(FoldingRange(start_line=frame.line, end_line=end_line))

    logger.debug(
        "Found %d folding ranges across %d lines (%d unclosed '{', %d unmatched '}')",
        len(folding_ranges),
        index.line_count,
        len(stack),
        unmatched_closes,
    )
    return folding_ranges


def sort_folding_ranges(ranges: Iterable[FoldingRange]) -> list[FoldingRange]:
    """Return `ranges` ordered by start line, then end line."""
    return sorted(ranges, key=lambda item: (item.start_line, item.end_line))


def get_folding_range_views(source: str) -> list[FoldingRangeView]:
    """Compute folding ranges wrapped as read-only accessor views.

    Same ranges, in the same order, as `get_folding_ranges`.
    """
    return [FoldingRangeView.from_range(item) for item in get_folding_ranges(source)]


def fold_file(filepath: Path, config: FoldingConfig | None = None) -> list[FoldingRange]:
    """Read a stylesheet from disk and compute its folding ranges.

    Args:
        filepath: Path to the stylesheet.
        config: Configuration controlling the size limit and ordering; defaults
            to a new `FoldingConfig` when omitted.

    Returns:
        list[FoldingRange]: Ranges for the file, sorted by start line when
            `config.sort` is true, otherwise in discovery order.

    Raises:
        ConfigError: If `config` fails validation.
        FoldingFileError: If the file is too large, or cannot be read or decoded
            as UTF-8.

    Examples:
        ranges = fold_file(Path("site.css"), FoldingConfig(sort=False))
    """
    config = config or FoldingConfig()
    validate_config(config)

    try:
        source = read_stylesheet(filepath, config.max_file_size)
    except UnicodeDecodeError as error:
        error_message = f"Invalid UTF-8 sequence in {filepath}: {error}"
        raise FoldingFileError(error_message) from error
    except IOError as error:
        raise FoldingFileError(str(error)) from error

    logger.debug("Read %d characters from %s", len(source), filepath)
    folding_ranges = get_folding_ranges(source)
    if config.sort:
        folding_ranges = sort_folding_ranges(folding_ranges)
    return folding_ranges
