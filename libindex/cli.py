"""CLI interface for libindex - inspect installed and published libraries."""

import argparse
import logging
import sys

from libindex.config import get_settings
from libindex.errors import LibraryIndexError
from libindex.indexer import LibrariesIndexer
from libindex.libraries import LibraryLayout
from libindex.messages import CollectingMessageSink


class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    CYAN = "\033[36m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for CLI."""
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper(), logging.INFO),
    )


def print_installed(indexer: LibrariesIndexer) -> None:
    """Print installed libraries."""
    libraries = indexer.installed_libraries.sorted()
    if not libraries:
        print(f"{Colors.DIM}No libraries installed.{Colors.RESET}")
        return

    for lib in libraries:
        version = lib.version or "-"
        ro = f" {Colors.DIM}(read-only){Colors.RESET}" if lib.read_only else ""
        legacy = f" {Colors.YELLOW}[legacy]{Colors.RESET}" if lib.layout is LibraryLayout.LEGACY else ""
        print(f"{Colors.BOLD}{lib.name}{Colors.RESET} {version}{legacy}{ro}")
        print(f"  {Colors.DIM}{lib.folder}{Colors.RESET}")


def print_index(
    indexer: LibrariesIndexer, category: str | None = None, name: str | None = None
) -> None:
    """Print index entries, marking the installed ones."""
    index = indexer.index
    entries = index.find_all(name) if name else index.libraries
    if category:
        entries = [entry for entry in entries if entry.category_name == category]
    for entry in entries:
        status = indexer.status_of(entry)
        if status is None:
            print(f"  {entry.name} {entry.version}")
            continue
        ro = " read-only" if status.read_only else ""
        print(
            f"{Colors.GREEN}* {entry.name} {entry.version}{Colors.RESET} "
            f"{Colors.DIM}(installed{ro} in {status.installed_folder}){Colors.RESET}"
        )


def print_categories(indexer: LibrariesIndexer) -> None:
    """Print index categories with entry counts."""
    index = indexer.index
    for category in index.categories:
        print(f"{category} {Colors.DIM}({len(index.libraries_in(category))}){Colors.RESET}")


def cli() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="libindex-cli",
        description="List published libraries and the ones installed locally.",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--installed",
        action="store_true",
        help="List installed libraries (default)",
    )
    group.add_argument(
        "--index",
        action="store_true",
        help="List index entries, marking installed ones",
    )
    group.add_argument(
        "--categories",
        action="store_true",
        help="List index categories",
    )
    parser.add_argument(
        "--category",
        type=str,
        help="With --index, only show entries in this category",
    )
    parser.add_argument(
        "--library",
        type=str,
        help="With --index, only show versions of this library",
    )

    args = parser.parse_args()

    try:
        settings = get_settings()
    except Exception as e:
        setup_logging()
        logging.getLogger(__name__).error(f"{Colors.RED}Failed to load settings: {e}{Colors.RESET}")
        logging.getLogger(__name__).error(
            f"{Colors.RED}Make sure LIBINDEX_PREFERENCES_PATH is set.{Colors.RESET}"
        )
        sys.exit(1)

    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    sink = CollectingMessageSink()
    indexer = LibrariesIndexer.from_settings(settings, sink)

    try:
        indexer.load_index()
        indexer.set_libraries_folders(settings.libraries_folders)
    except LibraryIndexError as e:
        logger.error(f"{Colors.RED}{e}{Colors.RESET}")
        sys.exit(1)

    if args.index:
        print_index(indexer, args.category, args.library)
    elif args.categories:
        print_categories(indexer)
    else:
        print_installed(indexer)

    if sink.messages:
        print(f"\n{Colors.YELLOW}Warnings:{Colors.RESET}")
        for title, message in sink.messages:
            print(f"  {Colors.BOLD}{title}{Colors.RESET}: {message}")


if __name__ == "__main__":
    cli()
