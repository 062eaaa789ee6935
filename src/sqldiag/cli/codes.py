"""The `codes` and `explain` commands: document the diagnostic catalog."""

from __future__ import annotations

from pathlib import Path

import click

from sqldiag.cli._output import format_catalog, format_reporter
from sqldiag.config import ConfigError, load_config
from sqldiag.diagnostics import build_catalog

_FORMAT = click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="text",
    help="Output format.",
)


@click.command()
@_FORMAT
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.sqldiag/config.toml).",
)
def codes(output_format: str, config_path: Path | None) -> None:
    """List every diagnostic code the validator can report."""
    catalog = build_catalog()
    try:
        config = load_config(config_path, catalog=catalog)
    except ConfigError as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1) from e
    click.echo(format_catalog(catalog, suppressed=config.suppressed, output_format=output_format))


@click.command()
@click.argument("code")
@_FORMAT
def explain(code: str, output_format: str) -> None:
    """Show the catalog entry for CODE (e.g. SQL00001)."""
    catalog = build_catalog()
    try:
        reporter = catalog.by_code(code)
    except (KeyError, ValueError):
        click.echo(f"error: unknown diagnostic code '{code}'", err=True)
        raise SystemExit(1) from None
    click.echo(format_reporter(reporter, output_format=output_format))
