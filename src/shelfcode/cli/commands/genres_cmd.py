# ABOUTME: The `shelfcode genres` command listing the shelf genre vocabulary.
# ABOUTME: Prints category names and theme codes in their declared order.

import click
from rich.console import Console
from rich.table import Table

from shelfcode.codes import GENRE_MAPPINGS

console = Console()


@click.command()
def genres() -> None:
    """List the genre categories and their theme codes."""
    table = Table()
    table.add_column("Category", style="bold")
    table.add_column("Code")

    for name, code in GENRE_MAPPINGS.items():
        table.add_row(name, code)

    console.print(table)
    console.print(f"\n[dim]{len(GENRE_MAPPINGS)} genre(s)[/dim]")
