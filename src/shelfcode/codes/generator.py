# ABOUTME: Library code assembler producing THEME-AUTHOR-NNNN-CCC shelf location strings.
# ABOUTME: Resolves categories, author, and ISBN from loosely-shaped book data with safe defaults.

import logging
import re
from collections.abc import Mapping
from typing import Any

from shelfcode.codes.classifier import analyze_categories

logger = logging.getLogger(__name__)

DEFAULT_AUTHOR_CODE = "XXX"
DEFAULT_ISBN_DIGITS = "0000"

_ISBN_SEPARATOR_RE = re.compile(r"[-\s]")
_ISBN_DIGIT_COUNT = 4
_COPY_NUMBER_WIDTH = 3


def get_author_code(author: Any) -> str:
    """Derive a shelf author code from an author display name.

    Uses the first initial plus the first two letters of the last name
    ("J.K. Rowling" -> "JRO"). A single-token name contributes its first
    three letters instead. Short names yield short codes; nothing is padded.
    Missing or non-string input yields "XXX".
    """
    if not author:
        return DEFAULT_AUTHOR_CODE
    if not isinstance(author, str):
        logger.debug("Author is not a string (%s), using default code", type(author).__name__)
        return DEFAULT_AUTHOR_CODE

    name_parts = author.split(" ")
    if len(name_parts) == 1:
        return author[:3].upper()

    first_initial = name_parts[0][:1]
    last_name_prefix = name_parts[-1][:2]
    return (first_initial + last_name_prefix).upper()


def get_isbn_digits(isbn: Any) -> str:
    """Return the last four characters of an ISBN with hyphens and whitespace removed.

    Shorter values are left-padded with zeros. Characters are not validated,
    so an "X" check character passes through.
    """
    if not isbn:
        return DEFAULT_ISBN_DIGITS

    clean_isbn = _ISBN_SEPARATOR_RE.sub("", str(isbn))
    if len(clean_isbn) >= _ISBN_DIGIT_COUNT:
        return clean_isbn[-_ISBN_DIGIT_COUNT:]
    return clean_isbn.rjust(_ISBN_DIGIT_COUNT, "0")


def format_copy_number(copy_number: Any) -> str:
    """Zero-pad a copy number to three characters ("7" -> "007"); longer values are kept whole."""
    return str(copy_number).rjust(_COPY_NUMBER_WIDTH, "0")


def _resolve_author(book_data: Mapping[str, Any]) -> Any:
    """Return `author`, else the first entry of `book_info.authors` as-is."""
    author = book_data.get("author")
    if author:
        return author

    book_info = book_data.get("book_info")
    if isinstance(book_info, Mapping):
        authors = book_info.get("authors")
        if isinstance(authors, (list, tuple)) and authors:
            return authors[0]
    return ""


def _resolve_isbn(book_data: Mapping[str, Any]) -> Any:
    """Return `isbn`, else `identifiers.isbn_13`, else `identifiers.isbn_10`."""
    isbn = book_data.get("isbn")
    if isbn:
        return isbn

    identifiers = book_data.get("identifiers")
    if isinstance(identifiers, Mapping):
        return identifiers.get("isbn_13") or identifiers.get("isbn_10") or ""
    return ""


def generate_library_code(book_data: Mapping[str, Any], copy_number: int = 1) -> str:
    """Generate the library code for a book.

    Args:
        book_data: Book descriptor with optional `categories`, `author`
            (or `book_info.authors`), and `isbn` (or `identifiers.isbn_13` /
            `identifiers.isbn_10`). Never modified.
        copy_number: 1-based physical copy number.

    Returns:
        A code of the form THEME-AUTHOR-NNNN-CCC, e.g. "FAN-JRO-2699-001".
        Missing data degrades to "GEN", "XXX", and "0000".

    The `book_info.authors` fallback passes the first entry through
    unchanged. Stored records keep authors as {"name": ...} objects, which
    yield "XXX"; callers should supply a string `author` for a real code.
    """
    if not isinstance(book_data, Mapping):
        logger.debug("Book data is not a mapping (%s), using defaults", type(book_data).__name__)
        book_data = {}

    categories = book_data.get("categories") or []
    author = _resolve_author(book_data)
    isbn = _resolve_isbn(book_data)

    theme_code = analyze_categories(categories)
    author_code = get_author_code(author)
    isbn_digits = get_isbn_digits(isbn)

    return f"{theme_code}-{author_code}-{isbn_digits}-{format_copy_number(copy_number)}"
