"""CLI entry point for `sqldiag`."""

from __future__ import annotations

import click

from sqldiag.cli.codes import codes, explain


@click.group()
@click.version_option(package_name="sqldiag")
def main() -> None:
    """sqldiag: browse the SQL validator's diagnostic codes."""


main.add_command(codes)
main.add_command(explain)
