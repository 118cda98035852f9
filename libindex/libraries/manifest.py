"""Parser for the library.properties manifest of modern libraries."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from libindex.errors import InvalidLibraryError
from libindex.index.models import UNCATEGORIZED

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "library.properties"

REQUIRED_KEYS = ("name", "version", "author", "maintainer", "sentence", "paragraph", "url")

CATEGORIES = (
    "Display",
    "Communication",
    "Signal Input/Output",
    "Sensors",
    "Device Control",
    "Timing",
    "Data Storage",
    "Data Processing",
    "Other",
    UNCATEGORIZED,
)


class SourceLayout(Enum):
    """How a modern library lays out its sources."""

    FLAT = "flat"  # sources in the root folder, helpers in utility/
    RECURSIVE = "recursive"  # everything under src/


@dataclass
class LibraryManifest:
    """Fields declared in a library.properties file."""

    name: str
    version: str
    author: str
    maintainer: str
    sentence: str
    paragraph: str
    url: str
    category: str = UNCATEGORIZED
    license: str = ""
    architectures: list[str] = field(default_factory=lambda: ["*"])
    types: list[str] = field(default_factory=lambda: ["Contributed"])
    source_layout: SourceLayout = SourceLayout.FLAT


def has_manifest(folder: Path) -> bool:
    """A folder holds a modern library iff its manifest is a regular file."""
    return (folder / MANIFEST_FILENAME).is_file()


def read_properties(path: Path) -> dict[str, str]:
    """Read a key=value properties file.

    Lines starting with '#' are comments and lines without '=' are
    ignored. Later keys override earlier ones.
    """
    properties: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        key, sep, value = line.partition("=")
        key = key.strip()
        if sep and key:
            properties[key] = value.strip()
    return properties


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_manifest(folder: Path) -> LibraryManifest:
    """Parse and validate the manifest of a library folder.

    Raises:
        InvalidLibraryError: if the manifest is unreadable, lacks a required
            key, or the folder layout is not supported.
    """
    try:
        properties = read_properties(folder / MANIFEST_FILENAME)
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidLibraryError(folder, f"cannot read {MANIFEST_FILENAME}: {e}") from e

    for key in REQUIRED_KEYS:
        if key not in properties:
            raise InvalidLibraryError(folder, f"Missing '{key}' from library")

    if (folder / "arch").is_dir():
        raise InvalidLibraryError(
            folder, "This library uses the 'arch' folder, which is no longer supported"
        )

    layout = SourceLayout.FLAT
    if (folder / "src").is_dir():
        if (folder / "utility").is_dir():
            raise InvalidLibraryError(
                folder, "Library can't use both 'src' and 'utility' folders."
            )
        layout = SourceLayout.RECURSIVE

    category = properties.get("category", "").strip() or UNCATEGORIZED
    if category not in CATEGORIES:
        logger.warning(
            f"Category '{category}' in library {properties['name']} is not valid. "
            f"Setting to '{UNCATEGORIZED}'"
        )
        category = UNCATEGORIZED

    architectures = _split_list(properties.get("architectures", "")) or ["*"]
    types = _split_list(properties.get("types", "")) or ["Contributed"]

    return LibraryManifest(
        name=properties["name"],
        version=properties["version"],
        author=properties["author"],
        maintainer=properties["maintainer"],
        sentence=properties["sentence"],
        paragraph=properties["paragraph"],
        url=properties["url"],
        category=category,
        license=properties.get("license", ""),
        architectures=architectures,
        types=types,
        source_layout=layout,
    )
