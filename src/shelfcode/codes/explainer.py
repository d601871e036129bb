# ABOUTME: Parses library codes back into labeled components with a readable sentence.
# ABOUTME: Malformed input yields a CodeError record instead of raising.

from dataclasses import asdict, dataclass
from typing import Any

from shelfcode.codes.generator import format_copy_number
from shelfcode.codes.vocabulary import UNKNOWN_THEME_NAME, theme_name_for

_SEGMENT_COUNT = 4


@dataclass(frozen=True)
class CodeExplanation:
    """Components of a library code.

    `copy_number` is the raw fourth segment; `explanation` shows it
    zero-padded to three digits.
    """

    theme_code: str
    theme_name: str
    author_code: str
    isbn_digits: str
    copy_number: str
    explanation: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class CodeError:
    """Error record returned for input that cannot be read as a library code."""

    error: str

    def to_dict(self) -> dict[str, str]:
        return {"error": self.error}


def explain_library_code(code: Any) -> CodeExplanation | CodeError:
    """Explain a library code such as "FAN-JRO-2699-001".

    Returns CodeError("Invalid code") for empty or non-string input and
    CodeError("Invalid code format") unless the code has exactly four
    dash-separated segments. Segment contents are not validated. An unknown
    theme code is reported as "Unknown".
    """
    if not code or not isinstance(code, str):
        return CodeError("Invalid code")

    parts = code.split("-")
    if len(parts) != _SEGMENT_COUNT:
        return CodeError("Invalid code format")

    theme_code, author_code, isbn_digits, copy_number = parts
    theme_name = theme_name_for(theme_code) or UNKNOWN_THEME_NAME

    explanation = (
        f"{theme_name} section ({theme_code}), "
        f'Author code "{author_code}", '
        f'ISBN ending in "{isbn_digits}", '
        f"Copy #{format_copy_number(copy_number)}"
    )
    return CodeExplanation(
        theme_code=theme_code,
        theme_name=theme_name,
        author_code=author_code,
        isbn_digits=isbn_digits,
        copy_number=copy_number,
        explanation=explanation,
    )


def copy_number_of(code: Any) -> str | None:
    """Return the copy-number segment of a well-formed code, or None."""
    result = explain_library_code(code)
    if isinstance(result, CodeError):
        return None
    return result.copy_number


def describe_for_author(explanation: str, author: str) -> str:
    """Swap the "Author code" label in an explanation for the author's name."""
    return explanation.replace("Author code", f"Author ({author})", 1)
