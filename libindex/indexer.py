"""Libraries indexer - owns the index, the installed set and folder config."""

import logging
import threading
from collections.abc import Iterable
from pathlib import Path

from libindex.config import Settings
from libindex.errors import NotInitializedError
from libindex.index import ContributedLibrary, InstallStatus, InstallStatusTable, LibrariesIndex, parse_index
from libindex.libraries import LibraryList
from libindex.messages import MessageSink
from libindex.scanner import LibraryScanner

logger = logging.getLogger(__name__)

INDEX_FILENAME = "library_index.json"


class LibrariesIndexer:
    """Loads the library index and keeps it in sync with installed folders.

    All public methods are serialized on one lock, so the indexer can be
    shared between threads.
    """

    def __init__(self, preferences_folder: Path, sink: MessageSink | None = None) -> None:
        self._index_file = preferences_folder / INDEX_FILENAME
        self._staging_folder = preferences_folder / "staging" / "libraries"
        self._index: LibrariesIndex | None = None
        self._installed = LibraryList()
        self._status = InstallStatusTable()
        self._folders: list[Path] = []
        self._sketchbook_folder: Path | None = None
        self._scanner = LibraryScanner(sink)
        self._lock = threading.RLock()

    @classmethod
    def from_settings(cls, settings: Settings, sink: MessageSink | None = None) -> "LibrariesIndexer":
        """Create an indexer configured from settings (folders not scanned yet)."""
        indexer = cls(settings.preferences_path, sink)
        indexer.set_sketchbook_libraries_folder(settings.sketchbook_libraries_path)
        return indexer

    def load_index(self) -> LibrariesIndex:
        """Parse the index file and derive its categories.

        The current index is replaced only if parsing succeeds.

        Raises:
            MalformedIndexError: if the index file cannot be used.
        """
        with self._lock:
            index = parse_index(self._index_file)
            index.fill_categories()
            self._index = index
            return index

    def set_libraries_folders(self, folders: Iterable[Path]) -> None:
        """Replace the folders to scan and rescan them."""
        with self._lock:
            self._folders = list(folders)
            self.rescan_libraries()

    def rescan_libraries(self) -> None:
        """Rebuild installed libraries and index install status from disk.

        Raises:
            NotInitializedError: if no index has been loaded yet.
        """
        with self._lock:
            if self._index is None:
                raise NotInitializedError("Library index must be loaded before scanning libraries")
            logger.info(f"Scanning {len(self._folders)} libraries folders")
            self._scanner.rescan(
                self._folders,
                self._index,
                self._sketchbook_folder,
                self._installed,
                self._status,
            )

    def set_sketchbook_libraries_folder(self, folder: Path | None) -> None:
        """Set the folder where new libraries are installed.

        Libraries found outside this folder are marked read-only on the
        next scan.
        """
        with self._lock:
            self._sketchbook_folder = folder

    @property
    def index(self) -> LibrariesIndex | None:
        with self._lock:
            return self._index

    @property
    def installed_libraries(self) -> LibraryList:
        """A copy of the installed set; later rescans do not change it."""
        with self._lock:
            return LibraryList(list(self._installed.snapshot()))

    @property
    def libraries_folders(self) -> list[Path]:
        with self._lock:
            return list(self._folders)

    @property
    def staging_folder(self) -> Path:
        return self._staging_folder

    @property
    def sketchbook_libraries_folder(self) -> Path | None:
        with self._lock:
            return self._sketchbook_folder

    @property
    def index_file(self) -> Path:
        return self._index_file

    def status_of(self, entry: ContributedLibrary) -> InstallStatus | None:
        """Install status of an index entry after the last scan."""
        with self._lock:
            return self._status.get(entry)

    def is_installed(self, entry: ContributedLibrary) -> bool:
        with self._lock:
            return self._status.is_installed(entry)

    def installed_entries(self) -> list[ContributedLibrary]:
        """Index entries matched by an installed library in the last scan."""
        with self._lock:
            if self._index is None:
                return []
            return [lib for lib in self._index.libraries if self._status.is_installed(lib)]

    def status_snapshot(self) -> dict[tuple[str, str], InstallStatus]:
        with self._lock:
            return self._status.snapshot()
