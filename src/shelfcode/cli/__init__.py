# ABOUTME: CLI package for Shelfcode, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.logging import RichHandler

from shelfcode.cli.commands import (
    classify_cmd,
    explain_cmd,
    generate_cmd,
    genres_cmd,
    lookup_cmd,
    qr_cmd,
)


def _configure_logging(verbose: bool) -> None:
    """Route log records through Rich; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(package_name="shelfcode")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Shelfcode - library shelf code generator and catalog helper."""
    _configure_logging(verbose)


cli.add_command(generate_cmd.generate)
cli.add_command(explain_cmd.explain)
cli.add_command(genres_cmd.genres)
cli.add_command(lookup_cmd.lookup)
cli.add_command(classify_cmd.classify)
cli.add_command(qr_cmd.qr)
