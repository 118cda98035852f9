"""Index entries and the index document decoded from library_index.json."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PrivateAttr
from pydantic.alias_generators import to_camel

UNCATEGORIZED = "Uncategorized"


def _single_as_list(value: Any) -> Any:
    """Accept a lone value where the schema expects an array."""
    if isinstance(value, list):
        return value
    return [value]


class _IndexModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )


class LibraryReference(_IndexModel):
    """A dependency declared by an index entry."""

    name: str
    version: str | None = None


StrList = Annotated[list[str], BeforeValidator(_single_as_list)]
ReferenceList = Annotated[list[LibraryReference], BeforeValidator(_single_as_list)]


class ContributedLibrary(_IndexModel):
    """A single library release published in the index.

    Entries are immutable; whether a release is installed is tracked by
    InstallStatusTable, keyed by (name, version).
    """

    name: str
    version: str
    maintainer: str | None = None
    author: str | None = None
    website: str | None = None
    category: str | None = None
    license: str | None = None
    paragraph: str | None = None
    sentence: str | None = None
    url: str | None = None
    archive_file_name: str | None = None
    size: int | None = None
    checksum: str | None = None
    architectures: StrList = []
    types: StrList = []
    dependencies: ReferenceList = []

    @property
    def key(self) -> tuple[str, str]:
        return (self.name, self.version)

    @property
    def category_name(self) -> str:
        return self.category or UNCATEGORIZED


class LibrariesIndex(_IndexModel):
    """The full catalog of published libraries."""

    model_config = ConfigDict(frozen=False)

    libraries: Annotated[list[ContributedLibrary], BeforeValidator(_single_as_list)] = []

    _categories: list[str] = PrivateAttr(default_factory=list)

    @property
    def categories(self) -> list[str]:
        """Categories collected by fill_categories()."""
        return list(self._categories)

    def fill_categories(self) -> None:
        """Collect the sorted set of categories used by the entries."""
        self._categories = sorted({lib.category_name for lib in self.libraries})

    def find(self, name: str, version: str | None) -> ContributedLibrary | None:
        """Find the entry matching both name and version exactly."""
        for lib in self.libraries:
            if lib.name == name and lib.version == version:
                return lib
        return None

    def find_all(self, name: str) -> list[ContributedLibrary]:
        """Find every published version of a library."""
        return [lib for lib in self.libraries if lib.name == name]

    def libraries_in(self, category: str) -> list[ContributedLibrary]:
        """List entries belonging to a category."""
        return [lib for lib in self.libraries if lib.category_name == category]
