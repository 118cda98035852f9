"""Errors raised while loading the index and scanning library folders."""

from pathlib import Path


class LibraryIndexError(Exception):
    """Base class for libindex errors."""


class MalformedIndexError(LibraryIndexError):
    """The index file is missing, unreadable or does not match the schema."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Malformed library index {path}: {reason}")
        self.path = path
        self.reason = reason


class NotInitializedError(LibraryIndexError):
    """A rescan was requested before any index was loaded."""


class InvalidLibraryError(LibraryIndexError):
    """A single library folder could not be read as a library.

    Raised while parsing a manifest; the scanner reports it as a warning and
    moves on to the next folder.
    """

    def __init__(self, folder: Path, reason: str) -> None:
        super().__init__(reason)
        self.folder = folder
        self.reason = reason
