# ABOUTME: The `shelfcode lookup` command for cataloging a book by ISBN.
# ABOUTME: Fetches Open Library metadata and shows it with the generated library code.

import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shelfcode.cli.options import copy_option
from shelfcode.codes import generate_library_code
from shelfcode.metadata.http import ShelfcodeHttpClient
from shelfcode.metadata.openlibrary import OpenLibraryLookup

logger = logging.getLogger(__name__)

console = Console()


def _create_lookup() -> OpenLibraryLookup:
    """Create the default book lookup (Open Library)."""
    return OpenLibraryLookup(http_client=ShelfcodeHttpClient())


@click.command()
@click.argument("isbn")
@copy_option
def lookup(isbn: str, copy_number: int) -> None:
    """Look up a book by ISBN and generate its library code."""
    record = _create_lookup().lookup_isbn(isbn)
    if record is None:
        console.print(f"[red]Error:[/red] No book found for ISBN {escape(isbn)}.")
        raise SystemExit(1)

    descriptor = record.to_descriptor()
    code = generate_library_code(descriptor, copy_number)
    logger.debug("Generated %s for ISBN %s", code, isbn)

    table = Table(title=escape(record.title or isbn), show_header=False, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Title", escape(record.title) or "[dim]unknown[/dim]")
    table.add_row("Author", escape(record.author) or "[dim]unknown[/dim]")
    if record.publishers:
        table.add_row("Publisher", escape(", ".join(record.publishers)))
    if record.published_date:
        table.add_row("Published", escape(record.published_date))
    table.add_row("Categories", escape(", ".join(record.subjects)) or "[dim]none[/dim]")
    if record.identifiers:
        ids_str = ", ".join(f"{k}={v}" for k, v in record.identifiers.items())
        table.add_row("Identifiers", escape(ids_str))
    if record.cover_url:
        table.add_row("Cover", escape(record.cover_url))
    table.add_row("Library Code", f"[bold green]{escape(code)}[/bold green]")

    console.print(table)
