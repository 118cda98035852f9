"""User-facing warning messages and the sinks that present them."""

import gettext
import logging
from typing import Protocol

logger = logging.getLogger(__name__)

_translation = gettext.translation("libindex", fallback=True)


def _(message: str) -> str:
    """Translate a message template."""
    return _translation.gettext(message)


def format_message(template: str, *args: object) -> str:
    """Translate a template and fill its {0}-style placeholders."""
    return _(template).format(*args)


BAD_NAME_TITLE = "Ignoring bad library name"
BAD_NAME_MESSAGE = (
    'The library "{0}" cannot be used.\n'
    "Library names must contain only basic letters and numbers.\n"
    "(ASCII only and no spaces, and it cannot start with a number)"
)
INVALID_LIBRARY_TITLE = "Invalid library"
INVALID_LIBRARY_MESSAGE = "Invalid library found in {0}: {1}"


class MessageSink(Protocol):
    """Receives warnings produced during a scan."""

    def warn(self, title: str, message: str) -> None: ...


class LoggingMessageSink:
    """Default sink: sends warnings to the log."""

    def warn(self, title: str, message: str) -> None:
        logger.warning(f"{title}: {message}")


class CollectingMessageSink:
    """Keeps warnings in memory so callers can show them later."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def warn(self, title: str, message: str) -> None:
        self.messages.append((title, message))

    def clear(self) -> None:
        self.messages.clear()

    def __len__(self) -> int:
        return len(self.messages)
