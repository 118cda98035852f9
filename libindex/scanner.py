"""Library scanner - reconciles library folders on disk with the index."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from libindex.errors import InvalidLibraryError
from libindex.index import InstallStatusTable, LibrariesIndex
from libindex.libraries import LegacyLibrary, LibraryList, UserLibrary, has_manifest, is_sanitary_name
from libindex.messages import (
    BAD_NAME_MESSAGE,
    BAD_NAME_TITLE,
    INVALID_LIBRARY_MESSAGE,
    INVALID_LIBRARY_TITLE,
    LoggingMessageSink,
    MessageSink,
    _,
    format_message,
)

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Installed libraries and index install status from one scan."""

    libraries: LibraryList = field(default_factory=LibraryList)
    status: InstallStatusTable = field(default_factory=InstallStatusTable)


def is_subdirectory(base: Path | None, folder: Path) -> bool:
    """Check whether folder is base itself or lies somewhere below it."""
    if base is None:
        return False
    return folder.resolve().is_relative_to(base.resolve())


def list_subfolders(folder: Path) -> list[Path]:
    """List the immediate subdirectories of folder, sorted by name.

    A missing or unreadable folder yields no subfolders.
    """
    try:
        entries = list(folder.iterdir())
    except OSError as e:
        logger.debug(f"Skipping libraries folder {folder}: {e}")
        return []
    return sorted((p for p in entries if _is_dir(p)), key=lambda p: p.name)


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError as e:
        logger.debug(f"Skipping {path}: {e}")
        return False


class LibraryScanner:
    """Scans library folders and marks matching index entries as installed."""

    def __init__(self, sink: MessageSink | None = None) -> None:
        self.sink = sink if sink is not None else LoggingMessageSink()

    def scan(
        self,
        folders: Iterable[Path],
        index: LibrariesIndex,
        primary_folder: Path | None,
    ) -> ScanResult:
        """Scan folders into a fresh ScanResult."""
        result = ScanResult()
        self.rescan(folders, index, primary_folder, result.libraries, result.status)
        return result

    def rescan(
        self,
        folders: Iterable[Path],
        index: LibrariesIndex,
        primary_folder: Path | None,
        libraries: LibraryList,
        status: InstallStatusTable,
    ) -> None:
        """Rebuild libraries and status in place from the current disk state.

        Args:
            folders: Root folders, scanned in order; later folders win on
                name clashes.
            index: Index used to find entries matching modern libraries.
            primary_folder: The user's writable libraries folder. Libraries
                outside it are read-only.
            libraries: Installed set to clear and refill.
            status: Install status table to clear and refill.
        """
        status.clear()
        libraries.clear()

        for folder in folders:
            self._scan_folder(folder, index, primary_folder, libraries, status)

        logger.info(
            f"Found {len(libraries)} installed libraries, "
            f"{len(status)} matching the index"
        )

    def _scan_folder(
        self,
        folder: Path,
        index: LibrariesIndex,
        primary_folder: Path | None,
        libraries: LibraryList,
        status: InstallStatusTable,
    ) -> None:
        for subfolder in list_subfolders(folder):
            if not is_sanitary_name(subfolder.name):
                self.sink.warn(_(BAD_NAME_TITLE), format_message(BAD_NAME_MESSAGE, subfolder.name))
                continue

            try:
                self._scan_library(subfolder, index, primary_folder, libraries, status)
            except InvalidLibraryError as e:
                self._warn_invalid(subfolder, e.reason)
            except OSError as e:
                self._warn_invalid(subfolder, str(e))

    def _warn_invalid(self, folder: Path, reason: str) -> None:
        self.sink.warn(
            _(INVALID_LIBRARY_TITLE),
            format_message(INVALID_LIBRARY_MESSAGE, folder, reason),
        )

    def _scan_library(
        self,
        folder: Path,
        index: LibrariesIndex,
        primary_folder: Path | None,
        libraries: LibraryList,
        status: InstallStatusTable,
    ) -> None:
        read_only = not is_subdirectory(primary_folder, folder)

        if not has_manifest(folder):
            libraries.add_or_replace(LegacyLibrary.create(folder, read_only))
            logger.debug(f"Legacy library {folder.name} in {folder}")
            return

        lib = UserLibrary.create(folder, read_only)
        libraries.add_or_replace(lib)
        logger.debug(f"Library {lib.name} {lib.version} in {folder}")

        # Matched on the folder name, not the name declared in the manifest
        entry = index.find(folder.name, lib.version)
        if entry is not None:
            status.mark(entry, folder, read_only)
