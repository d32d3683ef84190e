"""Filesystem helpers for css-folding."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable
from pathlib import Path

from .constants import DEFAULT_MAX_FILE_SIZE, STYLESHEET_EXTENSIONS
from .exceptions import FileTooLargeError

MAX_FILE_SIZE_ENV_VAR = "CSS_FOLDING_MAX_FILE_SIZE"


def get_max_file_size(default: int = DEFAULT_MAX_FILE_SIZE) -> int:
    """Return the size limit from ``CSS_FOLDING_MAX_FILE_SIZE``, or `default` when unset.

    Raises:
        ValueError: If the variable is set to anything but a positive integer.
    """
    raw_limit = os.environ.get(MAX_FILE_SIZE_ENV_VAR)
    if raw_limit is None:
        return default

    try:
        limit = int(raw_limit)
    except ValueError as error:
        raise ValueError(
            f"Invalid value for {MAX_FILE_SIZE_ENV_VAR}: {raw_limit} (expected positive integer)"
        ) from error
    if limit <= 0:
        raise ValueError(f"{MAX_FILE_SIZE_ENV_VAR} must be a positive integer, got {limit}.")
    return limit


def contains_symlink(path: Path) -> bool:
    """True when `path` or one of its parents is a symlink."""
    for candidate in (path, *path.parents):
        try:
            if candidate.is_symlink():
                return True
        except OSError:
            continue
    return False


def normalize_filepath(raw_path: str, base_dir: Path) -> Path:
    """Resolve `raw_path` to a regular file inside `base_dir`.

    Only the location is checked here; nothing next to the file is read, so
    it is safe to run before configuration discovery.

    Raises:
        ValueError: If the path traverses a symlink, does not exist, is not a
            regular file, or lies outside `base_dir`.

    Examples:
        normalize_filepath("styles/site.css", Path.cwd())
    """
    path = Path(raw_path).expanduser()
    if contains_symlink(path):
        raise ValueError(f"Symlinks are not supported for security reasons: {path}")

    try:
        resolved = path.resolve(strict=True)
    except FileNotFoundError as error:
        raise ValueError(f"{path} does not exist.") from error
    except OSError as error:
        raise ValueError(f"Error resolving {path}: {error}") from error

    if not resolved.is_file():
        raise ValueError(f"{resolved} is not a regular file.")

    try:
        resolved.relative_to(base_dir)
    except ValueError as error:
        raise ValueError(f"{resolved} is outside of the working directory {base_dir}.") from error

    return resolved


def ensure_stylesheet_extension(
    path: Path, extensions: Iterable[str] = STYLESHEET_EXTENSIONS
) -> None:
    """Reject `path` unless its lower-cased suffix is one of `extensions`.

    Raises:
        ValueError: If the suffix is not accepted.
    """
    extensions = tuple(extensions)
    if path.suffix.lower() not in extensions:
        raise ValueError(
            f"{path} is not a stylesheet.\nSupported extensions are: {', '.join(extensions)}"
        )


def collect_file_stat(filepath: Path) -> os.stat_result:
    """Stat `filepath` without following symlinks.

    Raises:
        IOError: If the path is inaccessible, a symlink, or not a regular file.
    """
    try:
        stat_result = os.stat(filepath, follow_symlinks=False)
    except OSError as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error

    if stat.S_ISLNK(stat_result.st_mode):
        raise IOError(f"Symlinks are not supported: {filepath}.")
    if not stat.S_ISREG(stat_result.st_mode):
        raise IOError(f"{filepath} is not a regular file.")
    return stat_result


def enforce_file_size(stat_result: os.stat_result, max_size: int, filepath: Path):
    if stat_result.st_size > max_size:
        raise FileTooLargeError(filepath, max_size)


def read_stylesheet(filepath: Path, max_size: int = DEFAULT_MAX_FILE_SIZE) -> str:
    """Return the UTF-8 text of `filepath` with line endings left untranslated.

    Args:
        filepath: Stylesheet to read.
        max_size: Largest accepted file size in bytes.

    Raises:
        FileTooLargeError: If the file is larger than `max_size`.
        IOError: If the file cannot be stat'ed or opened.
        UnicodeDecodeError: If the content is not valid UTF-8.
    """
    enforce_file_size(collect_file_stat(filepath), max_size, filepath)
    try:
        with open(filepath, "r", encoding="UTF-8", newline="") as stream:
            return stream.read()
    except (PermissionError, IsADirectoryError, NotADirectoryError, FileNotFoundError) as error:
        raise IOError(f"Error accessing {filepath}: {error}") from error
