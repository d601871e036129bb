# ABOUTME: Genre classifier that maps free-text book categories to a shelf theme code.
# ABOUTME: Scores exact and partial vocabulary matches, falling back to a category prefix.

import logging
from typing import Any

from shelfcode.codes.vocabulary import DEFAULT_THEME_CODE, GENRE_MAPPINGS

logger = logging.getLogger(__name__)

_EXACT_MATCH_SCORE = 10
_PARTIAL_MATCH_SCORE = 5
_FALLBACK_PREFIX_LENGTH = 3


def _as_category_list(categories: Any) -> list[Any] | None:
    """Return categories as a list, or None if it is missing, empty, or not a list/tuple."""
    if not categories or not isinstance(categories, (list, tuple)):
        return None
    return list(categories)


def score_categories(categories: Any) -> dict[str, int]:
    """Build the classifier's scoring table for a list of categories.

    Two accumulation passes share one table:
    1. Exact pass: a category that is a vocabulary key scores 10, keyed by
       the category text.
    2. Partial pass: for each category and each vocabulary key, if either
       string contains the other, the vocabulary key scores 5.

    A category equal to a vocabulary key therefore collects 10 + 5 under
    the same key. Non-string categories are ignored. Insertion order of the
    returned dict is the order in which entries were first scored.
    """
    items = _as_category_list(categories)
    if items is None:
        return {}

    scores: dict[str, int] = {}

    for category in items:
        if isinstance(category, str) and category in GENRE_MAPPINGS:
            scores[category] = scores.get(category, 0) + _EXACT_MATCH_SCORE

    for category in items:
        if not isinstance(category, str):
            continue
        for key in GENRE_MAPPINGS:
            if key in category or category in key:
                scores[key] = scores.get(key, 0) + _PARTIAL_MATCH_SCORE

    return scores


def analyze_categories(categories: Any) -> str:
    """Determine the shelf theme code for a book's categories.

    Picks the highest-scoring vocabulary entry (first scored wins ties).
    With no matches at all, uses the first category's first three letters
    upper-cased, or "GEN" if that category is shorter than three characters.
    Never raises: missing or malformed input yields "GEN".
    """
    items = _as_category_list(categories)
    if items is None:
        return DEFAULT_THEME_CODE

    scores = score_categories(items)
    if scores:
        # max() keeps the first entry among equals, matching a stable descending sort
        top_category = max(scores.items(), key=lambda entry: entry[1])[0]
        return GENRE_MAPPINGS.get(top_category, DEFAULT_THEME_CODE)

    first = items[0]
    if isinstance(first, str) and len(first) >= _FALLBACK_PREFIX_LENGTH:
        logger.debug("No vocabulary match for %r, using its prefix", first)
        return first[:_FALLBACK_PREFIX_LENGTH].upper()
    return DEFAULT_THEME_CODE
