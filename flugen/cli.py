"""flugen command line.

Usage:
    flugen
    flugen --path 'lib/models/**/*.dart' --workers 4
    python -m flugen --dry-run -v
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from . import __version__
from .config import load_config
from .driver import run
from .errors import ConfigError, PatternError
from .logging import configure_logging


@click.command()
@click.version_option(version=__version__, prog_name="flugen")
@click.option(
    "--path",
    "-p",
    "pattern",
    default=None,
    help="Glob of Dart sources (default: lib/**/*.dart).",
)
@click.option(
    "--workers",
    "-w",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of units processed in parallel.",
)
@click.option("--dry-run", is_flag=True, help="Parse and render without writing files.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--quiet", "-q", is_flag=True, help="Only log warnings and errors.")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to pyproject.toml holding [tool.flugen] (default: ./pyproject.toml).",
)
def cli(
    pattern: str | None,
    workers: int | None,
    dry_run: bool,
    verbose: bool,
    quiet: bool,
    config_path: Path | None,
) -> None:
    """Generate .flu.dart implementations for // @flu model declarations."""
    configure_logging(verbose=verbose, quiet=quiet)

    try:
        config = load_config(config_path)
    except ConfigError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        sys.exit(1)

    config = config.override(pattern=pattern, workers=workers, dry_run=dry_run or None)

    try:
        report = run(config)
    except PatternError as exc:
        raise click.UsageError(str(exc)) from exc

    verb = "Would generate" if config.dry_run else "Generated"
    click.echo(
        f"{verb} {report.generated} files"
        f" ({report.skipped} without models, {report.failed} failed)"
    )


def main() -> None:
    cli()
