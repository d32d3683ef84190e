"""Package-specific exception types."""

from __future__ import annotations

from pathlib import Path


class FoldingFileError(Exception):
    """Raised when a stylesheet file cannot be read for folding.

    Folding source text never fails; only getting the text off disk can.
    """


class FileTooLargeError(FoldingFileError):
    """Raised when a stylesheet exceeds the configured maximum size.

    Args:
        filepath: Path of the offending file.
        max_size: Maximum allowed size in bytes.
    """

    def __init__(self, filepath: Path, max_size: int):
        self.filepath = filepath
        self.max_size = max_size
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return f"{self.filepath} exceeds the maximum allowed size of {self.max_size} bytes."
