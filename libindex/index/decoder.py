"""Decode library_index.json into a LibrariesIndex."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from libindex.errors import MalformedIndexError

from .models import LibrariesIndex

logger = logging.getLogger(__name__)


def parse_index(index_file: Path) -> LibrariesIndex:
    """Read and validate an index file.

    Unknown keys are rejected and single values are accepted where arrays
    are expected. Categories are not filled here; call
    LibrariesIndex.fill_categories() afterwards.

    Raises:
        MalformedIndexError: if the file cannot be read or does not match
            the index schema.
    """
    try:
        content = index_file.read_text(encoding="utf-8")
    except OSError as e:
        raise MalformedIndexError(index_file, f"cannot read file: {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedIndexError(index_file, f"invalid JSON: {e}") from e

    try:
        index = LibrariesIndex.model_validate(data)
    except ValidationError as e:
        raise MalformedIndexError(index_file, str(e)) from e

    logger.info(f"Loaded library index {index_file} ({len(index.libraries)} entries)")
    return index
