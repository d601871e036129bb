# ABOUTME: Parsing functions for Open Library API JSON responses.
# ABOUTME: Converts brief-volumes records into BookRecord instances.

import re
from typing import Any

from shelfcode.metadata.types import AuthorRef, BookRecord

# Author URLs look like http://openlibrary.org/authors/OL7115219A/Sarah_J._Maas
_AUTHOR_ID_RE = re.compile(r"/authors/(OL\w+)")

_COVER_SIZES = ("small", "medium", "large")


def parse_author_id(url: Any) -> str:
    """Extract the Open Library author id from an author URL, or "" if absent."""
    if not isinstance(url, str):
        return ""
    match = _AUTHOR_ID_RE.search(url)
    return match.group(1) if match else ""


def _names(entries: list[dict[str, Any]] | None) -> list[str]:
    return [entry["name"] for entry in entries or [] if entry.get("name")]


def parse_brief_record(record: dict[str, Any]) -> BookRecord:
    """Parse one record of a brief-volumes response into a BookRecord.

    Edition data lives under "data"; work and series info under
    "details.details". Identifier lists collapse to their first value.
    """
    data = record.get("data") or {}
    details = (record.get("details") or {}).get("details") or {}

    authors = [
        AuthorRef(name=entry.get("name", ""), openlibrary_id=parse_author_id(entry.get("url")))
        for entry in data.get("authors", [])
    ]

    identifiers = {
        key: values[0] for key, values in (data.get("identifiers") or {}).items() if values
    }

    cover = data.get("cover") or {}
    covers = {f"cover_{size}": cover[size] for size in _COVER_SIZES if cover.get(size)}

    publish_dates = record.get("publishDates") or []
    published_date = data.get("publish_date") or (publish_dates[0] if publish_dates else "")

    works = details.get("works") or []
    work_key = works[0].get("key", "") if works else ""

    return BookRecord(
        title=data.get("title", ""),
        full_title=details.get("full_title", ""),
        authors=authors,
        publishers=_names(data.get("publishers")),
        published_date=published_date,
        publish_places=_names(data.get("publish_places")),
        page_count=data.get("number_of_pages"),
        subjects=_names(data.get("subjects")),
        identifiers=identifiers,
        covers=covers,
        openlibrary_url=record.get("recordURL") or data.get("url", ""),
        work_key=work_key,
        series=list(details.get("series") or []),
    )


def parse_brief_response(data: dict[str, Any]) -> BookRecord | None:
    """Parse the first record of a brief-volumes response, or None if there are none."""
    records = data.get("records") or {}
    if not records:
        return None
    first_key = next(iter(records))
    return parse_brief_record(records[first_key])


def parse_works_response(data: dict[str, Any]) -> str | None:
    """Extract the description from an Open Library Works response.

    Handles the OL quirk where description can be either a plain string
    or a dict with {"type": ..., "value": "actual text"}.
    """
    desc = data.get("description")
    if desc is None:
        return None
    if isinstance(desc, str):
        return desc
    if isinstance(desc, dict):
        return desc.get("value")
    return None
