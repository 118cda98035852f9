"""Libraries found on disk.

An installed library is either legacy (no manifest, only a folder name) or
modern (fields declared in library.properties). Both variants share the
same read interface: name, version, folder, read_only and layout.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from libindex.index.models import UNCATEGORIZED

from .manifest import SourceLayout, parse_manifest


class LibraryLayout(Enum):
    LEGACY = "legacy"
    MODERN = "modern"


@dataclass(frozen=True)
class LegacyLibrary:
    """A library folder without a manifest."""

    folder: Path
    read_only: bool = True
    layout: LibraryLayout = field(default=LibraryLayout.LEGACY, init=False)

    @property
    def name(self) -> str:
        return self.folder.name

    @property
    def version(self) -> str | None:
        return None

    @classmethod
    def create(cls, folder: Path, read_only: bool) -> "LegacyLibrary":
        return cls(folder=folder, read_only=read_only)


@dataclass(frozen=True)
class UserLibrary:
    """A library folder described by library.properties."""

    folder: Path
    name: str
    version: str
    author: str
    maintainer: str
    sentence: str
    paragraph: str
    url: str
    read_only: bool = True
    category: str = UNCATEGORIZED
    license: str = ""
    architectures: tuple[str, ...] = ("*",)
    types: tuple[str, ...] = ("Contributed",)
    source_layout: SourceLayout = SourceLayout.FLAT
    layout: LibraryLayout = field(default=LibraryLayout.MODERN, init=False)

    @classmethod
    def create(cls, folder: Path, read_only: bool) -> "UserLibrary":
        """Build a library from the manifest in folder.

        Raises:
            InvalidLibraryError: if the manifest cannot be used.
        """
        manifest = parse_manifest(folder)
        return cls(
            folder=folder,
            name=manifest.name,
            version=manifest.version,
            author=manifest.author,
            maintainer=manifest.maintainer,
            sentence=manifest.sentence,
            paragraph=manifest.paragraph,
            url=manifest.url,
            read_only=read_only,
            category=manifest.category,
            license=manifest.license,
            architectures=tuple(manifest.architectures),
            types=tuple(manifest.types),
            source_layout=manifest.source_layout,
        )


InstalledLibrary = LegacyLibrary | UserLibrary
