# ABOUTME: The `shelfcode classify` command for AI-assisted genre suggestions.
# ABOUTME: Asks a chat-completion model to pick a vocabulary genre for an ISBN.

import click
from rich.console import Console
from rich.markup import escape

from shelfcode.codes import theme_name_for
from shelfcode.codes.vocabulary import UNKNOWN_THEME_NAME
from shelfcode.metadata.advisor import DEFAULT_MODEL, GenreAdvisor, GenreAdvisorError
from shelfcode.metadata.http import ShelfcodeHttpClient

console = Console()


def _create_advisor(api_key: str, model: str) -> GenreAdvisor:
    """Create the default genre advisor backed by the chat completions API."""
    return GenreAdvisor(ShelfcodeHttpClient(), api_key, model=model)


@click.command()
@click.argument("isbn")
@click.option(
    "--api-key",
    envvar="SHELFCODE_AI_API_KEY",
    required=True,
    help="API key for the chat completions service.",
)
@click.option(
    "--model",
    envvar="SHELFCODE_AI_MODEL",
    default=DEFAULT_MODEL,
    show_default=True,
    help="Chat model used to classify the book.",
)
def classify(isbn: str, api_key: str, model: str) -> None:
    """Suggest a theme code for a book using an AI model."""
    advisor = _create_advisor(api_key, model)
    try:
        theme = advisor.suggest_theme(isbn)
    except GenreAdvisorError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1) from exc

    theme_name = theme_name_for(theme) or UNKNOWN_THEME_NAME
    console.print(f"[bold]{escape(theme)}[/bold] {escape(theme_name)}")
