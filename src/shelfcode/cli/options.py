# ABOUTME: Shared Click options for Shelfcode CLI commands.
# ABOUTME: Provides reusable decorators for common flags like --copy and --author.

import click

copy_option = click.option(
    "--copy",
    "copy_number",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Physical copy number of the book.",
)

author_option = click.option(
    "--author",
    default=None,
    help='Author display name, e.g. "J.K. Rowling".',
)
