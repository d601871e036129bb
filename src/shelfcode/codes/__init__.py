# ABOUTME: Library code package: genre vocabulary, classifier, generator, and explainer.
# ABOUTME: Exports the public functions used by book creation and display flows.

from shelfcode.codes.classifier import analyze_categories, score_categories
from shelfcode.codes.explainer import (
    CodeError,
    CodeExplanation,
    copy_number_of,
    describe_for_author,
    explain_library_code,
)
from shelfcode.codes.generator import (
    format_copy_number,
    generate_library_code,
    get_author_code,
    get_isbn_digits,
)
from shelfcode.codes.labels import qr_payload
from shelfcode.codes.vocabulary import GENRE_MAPPINGS, genre_names, theme_name_for

__all__ = [
    "GENRE_MAPPINGS",
    "CodeError",
    "CodeExplanation",
    "analyze_categories",
    "copy_number_of",
    "describe_for_author",
    "explain_library_code",
    "format_copy_number",
    "generate_library_code",
    "genre_names",
    "get_author_code",
    "get_isbn_digits",
    "qr_payload",
    "score_categories",
    "theme_name_for",
]
