# ABOUTME: Open Library book lookup used when cataloging a scanned or typed ISBN.
# ABOUTME: Fetches the brief edition record, then enriches it with the work description.

import logging

from shelfcode.metadata.http import HttpClient, MetadataFetchError
from shelfcode.metadata.openlibrary_parser import parse_brief_response, parse_works_response
from shelfcode.metadata.types import BookRecord

logger = logging.getLogger(__name__)

_OL_BASE = "https://openlibrary.org"
_BRIEF_VOLUMES_URL = f"{_OL_BASE}/api/volumes/brief"


class OpenLibraryLookup:
    """Book lookup backed by the Open Library brief volumes API.

    Uses dependency-injected HttpClient for testability.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "openlibrary"

    def lookup_isbn(self, isbn: str) -> BookRecord | None:
        """Look up a book by ISBN (or a barcode carrying one).

        Returns None when Open Library has no record or the request fails.
        """
        clean_isbn = isbn.replace("-", "").strip()
        return self.lookup_identifier("isbn", clean_isbn)

    def lookup_identifier(self, id_type: str, identifier: str) -> BookRecord | None:
        """Look up a book by any brief-volumes identifier type (isbn, lccn, oclc, olid)."""
        url = f"{_BRIEF_VOLUMES_URL}/{id_type}/{identifier}.json"
        try:
            data = self._http.get(url)
        except MetadataFetchError as exc:
            logger.warning("Lookup failed for %s %s: %s", id_type, identifier, exc)
            return None

        record = parse_brief_response(data)
        if record is None:
            logger.info("No Open Library record for %s %s", id_type, identifier)
            return None
        return self._enrich_description(record)

    def _enrich_description(self, record: BookRecord) -> BookRecord:
        """Fetch the description from the works endpoint if a work key is known."""
        if not record.work_key:
            return record
        try:
            works_data = self._http.get(f"{_OL_BASE}{record.work_key}.json")
        except MetadataFetchError:
            return record

        description = parse_works_response(works_data)
        if description:
            record.description = description
        return record
