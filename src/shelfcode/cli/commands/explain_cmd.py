# ABOUTME: The `shelfcode explain` command for decoding a library code.
# ABOUTME: Shows theme, author code, ISBN digits, and copy number in a table.

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shelfcode.cli.options import author_option
from shelfcode.codes import CodeError, describe_for_author, explain_library_code

console = Console()


@click.command()
@click.argument("code")
@author_option
def explain(code: str, author: str | None) -> None:
    """Explain the parts of a library code such as FAN-JRO-2699-001."""
    result = explain_library_code(code)
    if isinstance(result, CodeError):
        console.print(f"[red]Error:[/red] {result.error}: {escape(code)}")
        raise SystemExit(1)

    table = Table(title=escape(code), show_header=False, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Theme", f"{escape(result.theme_name)} ({escape(result.theme_code)})")
    table.add_row("Author Code", escape(result.author_code))
    table.add_row("ISBN Digits", escape(result.isbn_digits))
    table.add_row("Copy", escape(result.copy_number))

    console.print(table)

    sentence = result.explanation
    if author:
        sentence = describe_for_author(sentence, author)
    console.print(escape(sentence))
