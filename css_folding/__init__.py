"""
css-folding: folding ranges for stylesheet source text.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    css-folding site.css --format json

Library Usage:
    from css_folding import get_folding_ranges, sort_folding_ranges

    ranges = sort_folding_ranges(get_folding_ranges("a {\\n  color: red;\\n}\\n"))
    payload = [folding_range.to_lsp() for folding_range in ranges]
"""

from .config import ConfigError, FoldingConfig
from .exceptions import FileTooLargeError, FoldingFileError
from .folding import fold_file, get_folding_range_views, get_folding_ranges, sort_folding_ranges
from .formatting import format_json, format_text, render_ranges
from .line_index import LineIndex, build_line_starts, line_number_at
from .models import BraceFrame, FoldingRange, FoldingRangeKind, FoldingRangeView

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "get_folding_ranges",
    "get_folding_range_views",
    "sort_folding_ranges",
    "fold_file",
    # Line lookup
    "LineIndex",
    "build_line_starts",
    "line_number_at",
    # Data models
    "BraceFrame",
    "FoldingRange",
    "FoldingRangeKind",
    "FoldingRangeView",
    # Rendering
    "format_json",
    "format_text",
    "render_ranges",
    # Configuration
    "FoldingConfig",
    # Exceptions
    "ConfigError",
    "FileTooLargeError",
    "FoldingFileError",
    # Version
    "__version__",
]
