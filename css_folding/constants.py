"""Constants used across the css-folding package."""

from __future__ import annotations

from .config import FoldingConfig

DEFAULT_CONFIG = FoldingConfig()

# Characters the brace scanner reacts to
OPEN_BRACE = "{"
CLOSE_BRACE = "}"
LINE_BREAK = "\n"

# File handling defaults
STYLESHEET_EXTENSIONS = DEFAULT_CONFIG.extensions
DEFAULT_MAX_FILE_SIZE = DEFAULT_CONFIG.max_file_size
OUTPUT_FORMATS = ("text", "json")
