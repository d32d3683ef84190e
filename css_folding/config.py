"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

_FORMAT_ALIASES = {"plain": "text", "lsp": "json"}
_VALID_FORMATS = ("text", "json")


@dataclass
class FoldingConfig:
    """Configuration for folding stylesheet files from the command line.

    Attributes:
        output_format: Rendering used for the ranges (``"text"`` or ``"json"``,
            or the aliases ``"plain"``/``"lsp"``).
        sort: Whether ranges are ordered by start line before rendering.
        extensions: File suffixes accepted as stylesheets.
        max_file_size: Maximum file size in bytes that will be processed.

    Examples:
        FoldingConfig(output_format="json", sort=False)
    """

    # Output
    output_format: str = "text"
    sort: bool = True

    # Input
    extensions: tuple[str, ...] = (".css", ".scss", ".less")

    # Limits
    max_file_size: int = 10 * 1024 * 1024


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`output_format` must be one of: text, json")
    """


def load_config(search_path: Path) -> FoldingConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.css-folding]`` table from `pyproject.toml` and the
    ``[css-folding]`` or ``[tool.css-folding]`` table from `.css-folding.toml`
    when present. Returns default values when no configuration is found. TOML
    files that cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        FoldingConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If a matching table is present but is not a mapping or
            contains unsupported keys.

    Examples:
        load_config(Path("styles"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "css-folding")]
        )
        if pyproject_config is not None:
            return normalize_config(pyproject_config)

        dotfile_config = _load_from_file(
            current / ".css-folding.toml",
            table_paths=[("css-folding",), ("tool", "css-folding")],
        )
        if dotfile_config is not None:
            return normalize_config(dotfile_config)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return FoldingConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> FoldingConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> FoldingConfig:
    table_display = ".".join(table_path)

    if raw_config is None:
        return FoldingConfig()

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return FoldingConfig()

    try:
        return FoldingConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def normalize_config(config: FoldingConfig) -> FoldingConfig:
    output_format = config.output_format
    if isinstance(output_format, str):
        output_format = _FORMAT_ALIASES.get(output_format.lower(), output_format.lower())

    extensions = config.extensions
    if isinstance(extensions, str):
        extensions = (extensions,)
    if isinstance(extensions, (list, tuple)):
        extensions = tuple(_normalize_extension(suffix) for suffix in extensions)

    return replace(config, output_format=output_format, extensions=extensions)


def _normalize_extension(suffix: object) -> object:
    if not isinstance(suffix, str) or not suffix:
        return suffix
    suffix = suffix.lower()
    return suffix if suffix.startswith(".") else f".{suffix}"


def validate_config(config: FoldingConfig) -> None:
    """Validate a `FoldingConfig` instance.

    Args:
        config: Configuration to validate.

    Returns:
        None.

    Raises:
        ConfigError: If the output format is unsupported, `sort` is not a
            boolean, the extension list is empty or malformed, or the size
            limit is not a positive integer.

    Examples:
        validate_config(FoldingConfig(output_format="json"))
    """
    config = normalize_config(config)

    if config.output_format not in _VALID_FORMATS:
        raise ConfigError("`output_format` must be one of: text, json, plain, lsp")
    if not isinstance(config.sort, bool):
        raise ConfigError("`sort` must be a boolean")

    if not isinstance(config.extensions, tuple) or not config.extensions:
        raise ConfigError("`extensions` must be a non-empty list of file suffixes")
    for suffix in config.extensions:
        if not isinstance(suffix, str) or suffix in ("", "."):
            raise ConfigError("`extensions` entries must be non-empty strings")

    _ensure_integers({"max_file_size": config.max_file_size})
    _ensure_positive({"max_file_size": config.max_file_size})


def apply_overrides(config: FoldingConfig, **overrides: object) -> FoldingConfig:
    """Apply override values to a `FoldingConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        FoldingConfig: New configuration with the provided overrides applied. The
        original configuration is returned when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `FoldingConfig`.

    Examples:
        updated = apply_overrides(config, output_format="json", sort=None)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> FoldingConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None values
            are ignored.

    Returns:
        FoldingConfig: Validated configuration ready for folding.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), output_format="json")
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    config = normalize_config(config)
    validate_config(config)
    return config


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
