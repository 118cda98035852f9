"""Installed libraries - on-disk folders, their manifests and names."""

from .collection import LibraryList
from .manifest import MANIFEST_FILENAME, LibraryManifest, SourceLayout, has_manifest, parse_manifest
from .models import InstalledLibrary, LegacyLibrary, LibraryLayout, UserLibrary
from .names import is_sanitary_name, sanitize_name

__all__ = [
    "InstalledLibrary",
    "LegacyLibrary",
    "LibraryLayout",
    "LibraryList",
    "LibraryManifest",
    "MANIFEST_FILENAME",
    "SourceLayout",
    "UserLibrary",
    "has_manifest",
    "is_sanitary_name",
    "parse_manifest",
    "sanitize_name",
]
