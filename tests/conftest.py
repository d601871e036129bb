# ABOUTME: Shared pytest fixtures for Shelfcode tests.
# ABOUTME: Provides sample book descriptors in the shapes the generator accepts.

import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def rowling_book() -> dict[str, Any]:
    """Descriptor for a well-described fantasy novel."""
    return {
        "title": "Harry Potter and the Philosopher's Stone",
        "categories": ["Fantasy"],
        "author": "J.K. Rowling",
        "isbn": "978-0-7475-3269-9",
    }


@pytest.fixture
def stored_book() -> dict[str, Any]:
    """Descriptor shaped like a stored catalog record (no top-level author or isbn)."""
    return {
        "categories": ["Science Fiction", "Classics"],
        "book_info": {
            "title": "Dune",
            "authors": [{"name": "Frank Herbert", "openLibrary_id": "OL79034A"}],
        },
        "identifiers": {"isbn_13": "9780441013593", "isbn_10": "0441013597"},
    }


@pytest.fixture
def book_json(tmp_path: Path, rowling_book: dict[str, Any]) -> Path:
    """Write the Rowling descriptor to a JSON file."""
    filepath = tmp_path / "book.json"
    filepath.write_text(json.dumps(rowling_book), encoding="utf-8")
    return filepath
