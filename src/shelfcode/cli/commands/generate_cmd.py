# ABOUTME: The `shelfcode generate` command for building a book's library code.
# ABOUTME: Reads categories, author, and ISBN from flags or a JSON book document.

import json
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.markup import escape

from shelfcode.cli.options import author_option, copy_option
from shelfcode.codes import explain_library_code, generate_library_code
from shelfcode.codes.explainer import CodeExplanation

console = Console()


def _load_descriptor(path: Path) -> dict[str, Any]:
    """Read a JSON book document; the top level must be an object."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise click.ClickException(f"Cannot read book document {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise click.ClickException(f"Book document {path} must contain a JSON object")
    return data


@click.command()
@click.option(
    "--category",
    "categories",
    multiple=True,
    help="Book category or subject (repeatable, in priority order).",
)
@author_option
@click.option("--isbn", default=None, help="ISBN-10 or ISBN-13, hyphens allowed.")
@copy_option
@click.option(
    "--from-json",
    "json_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON book document to read fields from; flags override its values.",
)
def generate(
    categories: tuple[str, ...],
    author: str | None,
    isbn: str | None,
    copy_number: int,
    json_path: Path | None,
) -> None:
    """Generate the library code for a book."""
    book_data: dict[str, Any] = _load_descriptor(json_path) if json_path else {}
    if categories:
        book_data["categories"] = list(categories)
    if author:
        book_data["author"] = author
    if isbn:
        book_data["isbn"] = isbn

    code = generate_library_code(book_data, copy_number)
    console.print(f"[bold green]{escape(code)}[/bold green]")

    explanation = explain_library_code(code)
    if isinstance(explanation, CodeExplanation):
        console.print(f"[dim]{escape(explanation.explanation)}[/dim]")
