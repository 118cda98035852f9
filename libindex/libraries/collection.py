"""The set of installed libraries, keyed by name."""

from collections.abc import Iterator

from .models import InstalledLibrary


class LibraryList:
    """Installed libraries in scan order, at most one per name."""

    def __init__(self, libraries: list[InstalledLibrary] | None = None) -> None:
        self._libraries: dict[str, InstalledLibrary] = {}
        for lib in libraries or []:
            self.add_or_replace(lib)

    def add_or_replace(self, lib: InstalledLibrary) -> InstalledLibrary | None:
        """Add a library, replacing any with the same name.

        Returns the replaced library, if any.
        """
        previous = self._libraries.get(lib.name)
        self._libraries[lib.name] = lib
        return previous

    def get(self, name: str) -> InstalledLibrary | None:
        return self._libraries.get(name)

    def clear(self) -> None:
        self._libraries.clear()

    def names(self) -> list[str]:
        return list(self._libraries)

    def sorted(self) -> list[InstalledLibrary]:
        """Libraries ordered by case-insensitive name."""
        return sorted(self._libraries.values(), key=lambda lib: lib.name.lower())

    def snapshot(self) -> tuple[InstalledLibrary, ...]:
        return tuple(self._libraries.values())

    def __iter__(self) -> Iterator[InstalledLibrary]:
        return iter(list(self._libraries.values()))

    def __len__(self) -> int:
        return len(self._libraries)

    def __contains__(self, name: object) -> bool:
        return name in self._libraries
