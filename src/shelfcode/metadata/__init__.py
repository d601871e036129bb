# ABOUTME: Metadata package for book lookup and AI-assisted genre suggestions.
# ABOUTME: Exports the BookRecord type and the Open Library and genre advisor clients.

from shelfcode.metadata.advisor import GenreAdvisor, GenreAdvisorError
from shelfcode.metadata.http import HttpClient, MetadataFetchError, ShelfcodeHttpClient
from shelfcode.metadata.openlibrary import OpenLibraryLookup
from shelfcode.metadata.types import AuthorRef, BookRecord

__all__ = [
    "AuthorRef",
    "BookRecord",
    "GenreAdvisor",
    "GenreAdvisorError",
    "HttpClient",
    "MetadataFetchError",
    "OpenLibraryLookup",
    "ShelfcodeHttpClient",
]
