"""
Prints the folding ranges of a stylesheet.
Each brace block spanning more than one line becomes one range.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from .config import ConfigError, apply_overrides, build_config
from .constants import OUTPUT_FORMATS
from .exceptions import FoldingFileError
from .filesystem import ensure_stylesheet_extension, get_max_file_size, normalize_filepath
from .folding import fold_file
from .formatting import render_ranges

__all__ = ["cli"]


@click.command()
@click.version_option(package_name="css-folding")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    help="Output format (text or json)",
)
@click.option("--sort/--no-sort", default=None, help="Order ranges by start line")
@click.option("--max-file-size", type=int, help="Maximum file size in bytes")
@click.option("--verbose", "-v", is_flag=True, help="Log debug details to stderr")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    output_format: str | None = None,
    sort: bool | None = None,
    max_file_size: int | None = None,
    verbose: bool = False,
):
    """
    Entry point for printing the folding ranges of a stylesheet.

    Args:
        filepath: Path to the stylesheet to fold.
        output_format: Override for the output format.
        sort: Override for ordering ranges by start line.
        max_file_size: Override for the maximum file size in bytes.
        verbose: Whether to log debug details to stderr.

    Returns:
        None.

    Raises:
        click.BadParameter: If the path is rejected or the configuration is
            invalid.
        click.ClickException: If the size limit cannot be resolved or the
            file cannot be read.

    Examples:
        css-folding styles/site.css --format json --no-sort
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    base_dir = Path.cwd().resolve()
    try:
        path = normalize_filepath(filepath, base_dir)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error

    try:
        config = build_config(
            path.parent,
            output_format=output_format,
            sort=sort,
            max_file_size=max_file_size,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        ensure_stylesheet_extension(path, config.extensions)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error

    if max_file_size is None:
        try:
            env_max_file_size = get_max_file_size(default=config.max_file_size)
        except ValueError as error:
            raise click.ClickException(str(error)) from error
        config = apply_overrides(config, max_file_size=env_max_file_size)

    try:
        folding_ranges = fold_file(path, config)
    except FoldingFileError as error:
        raise click.ClickException(str(error)) from error

    click.echo(render_ranges(folding_ranges, config.output_format), nl=False)


if __name__ == "__main__":
    cli()
