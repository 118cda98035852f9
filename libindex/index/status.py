"""Installed state of index entries, kept apart from the entries themselves."""

from dataclasses import dataclass
from pathlib import Path

from .models import ContributedLibrary


@dataclass(frozen=True)
class InstallStatus:
    """Where an index entry is installed and whether it may be modified."""

    installed_folder: Path
    read_only: bool


class InstallStatusTable:
    """Side table of install status keyed by (name, version).

    An entry is installed iff the table holds a row for its key.
    """

    def __init__(self) -> None:
        self._rows: dict[tuple[str, str], InstallStatus] = {}

    def clear(self) -> None:
        self._rows.clear()

    def mark(self, entry: ContributedLibrary, folder: Path, read_only: bool) -> InstallStatus:
        """Record that an entry is installed in a folder."""
        status = InstallStatus(installed_folder=folder, read_only=read_only)
        self._rows[entry.key] = status
        return status

    def get(self, entry: ContributedLibrary) -> InstallStatus | None:
        return self._rows.get(entry.key)

    def is_installed(self, entry: ContributedLibrary) -> bool:
        return entry.key in self._rows

    def installed_keys(self) -> list[tuple[str, str]]:
        return list(self._rows)

    def snapshot(self) -> dict[tuple[str, str], InstallStatus]:
        """Return a copy of the table for comparison or display."""
        return dict(self._rows)

    def __len__(self) -> int:
        return len(self._rows)
