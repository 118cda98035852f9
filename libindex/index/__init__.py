"""Library index - published catalog entries and their install status."""

from .decoder import parse_index
from .models import UNCATEGORIZED, ContributedLibrary, LibrariesIndex, LibraryReference
from .status import InstallStatus, InstallStatusTable

__all__ = [
    "ContributedLibrary",
    "InstallStatus",
    "InstallStatusTable",
    "LibrariesIndex",
    "LibraryReference",
    "UNCATEGORIZED",
    "parse_index",
]
