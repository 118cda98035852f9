"""Library folder name validation."""

import re

MAX_NAME_LENGTH = 63

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_]")


def sanitize_name(name: str) -> str:
    """Turn an arbitrary string into a name usable as a library folder."""
    sanitized = _UNSAFE_CHARS.sub("_", name)
    if sanitized and sanitized[0].isdigit():
        sanitized = "_" + sanitized
    return sanitized[:MAX_NAME_LENGTH]


def is_sanitary_name(name: str) -> bool:
    """Check that a folder name survives sanitizing unchanged.

    ASCII letters, digits and underscores only, no leading digit.
    """
    return bool(name) and sanitize_name(name) == name
