"""libindex - catalog of published and installed IDE libraries."""

from .errors import InvalidLibraryError, LibraryIndexError, MalformedIndexError, NotInitializedError
from .indexer import LibrariesIndexer
from .scanner import LibraryScanner, ScanResult

__all__ = [
    "InvalidLibraryError",
    "LibrariesIndexer",
    "LibraryIndexError",
    "LibraryScanner",
    "MalformedIndexError",
    "NotInitializedError",
    "ScanResult",
]
