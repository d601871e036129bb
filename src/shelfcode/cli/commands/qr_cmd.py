# ABOUTME: The `shelfcode qr` command printing a shelf label's QR payload.
# ABOUTME: Outputs the JSON text to encode; rendering the image is left to other tools.

import click

from shelfcode.cli.options import author_option
from shelfcode.codes import qr_payload


@click.command()
@click.argument("book_id")
@click.argument("code")
@click.option("--title", default=None, help="Book title.")
@author_option
def qr(book_id: str, code: str, title: str | None, author: str | None) -> None:
    """Print the QR label payload for a cataloged book."""
    click.echo(qr_payload(book_id, title=title, author=author, library_code=code))
