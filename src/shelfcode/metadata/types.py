# ABOUTME: Book record data structures returned by the Open Library lookup.
# ABOUTME: BookRecord converts to the descriptor shape the library code generator reads.

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AuthorRef:
    """An author name with its Open Library author id (e.g. "OL7115219A"), if known."""

    name: str
    openlibrary_id: str = ""


@dataclass
class BookRecord:
    """Bibliographic data for one edition, as fetched for cataloging.

    `identifiers` holds the first value of each identifier list
    (isbn_13, isbn_10, openlibrary, ...). `covers` maps
    cover_small/cover_medium/cover_large to image URLs.
    """

    title: str
    full_title: str = ""
    authors: list[AuthorRef] = field(default_factory=list)
    publishers: list[str] = field(default_factory=list)
    published_date: str = ""
    publish_places: list[str] = field(default_factory=list)
    page_count: int | None = None
    subjects: list[str] = field(default_factory=list)
    identifiers: dict[str, str] = field(default_factory=dict)
    covers: dict[str, str] = field(default_factory=dict)
    openlibrary_url: str = ""
    work_key: str = ""
    series: list[str] = field(default_factory=list)
    description: str = ""

    @property
    def author(self) -> str:
        """Joined author names for display."""
        return ", ".join(a.name for a in self.authors)

    @property
    def cover_url(self) -> str | None:
        """Best available cover image, preferring medium size."""
        return (
            self.covers.get("cover_medium")
            or self.covers.get("cover_large")
            or self.covers.get("cover_small")
            or None
        )

    def to_descriptor(self) -> dict[str, Any]:
        """Return the book descriptor consumed by generate_library_code.

        Subjects become `categories`. No `isbn` key is set, so the
        generator reads `identifiers.isbn_13` or `identifiers.isbn_10`.
        """
        return {
            "title": self.title,
            "full_title": self.full_title,
            "author": self.author,
            "authors": [
                {"name": a.name, "openLibrary_id": a.openlibrary_id} for a in self.authors
            ],
            "categories": list(self.subjects),
            "identifiers": dict(self.identifiers),
            "publisher": list(self.publishers),
            "published_date": self.published_date,
            "page_count": self.page_count,
            "image_url": self.cover_url,
            "description": self.description,
        }
