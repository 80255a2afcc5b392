# topmark:header:start
#
#   project      : Autoexec
#   file         : messages.py
#   file_relpath : src/autoexec/core/messages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Localized message lookup used for the script's header comments."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from autoexec.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = get_logger(__name__)

MSG_AUTOGENERATED: Final[str] = "AUTOEXEC_BAT_AUTOGENERATED"
MSG_CONFIG_SECTION: Final[str] = "AUTOEXEC_BAT_CONFIG_SECTION"

DEFAULT_MESSAGES: Final[Mapping[str, str]] = {
    MSG_AUTOGENERATED: "autogenerated",
    MSG_CONFIG_SECTION: "from [autoexec] section",
}


class MessageCatalog:
    """Key-to-text message table.

    The first definition of a key wins, so translations loaded before the
    built-in defaults take precedence.
    """

    def __init__(self, messages: Mapping[str, str] | None = None) -> None:
        self._messages: dict[str, str] = dict(messages or {})

    @classmethod
    def with_defaults(cls) -> MessageCatalog:
        """Return a catalog holding the built-in English messages."""
        catalog = cls()
        catalog.add_defaults()
        return catalog

    def add(self, key: str, text: str) -> None:
        """Define ``key`` unless it is already defined."""
        if key in self._messages:
            logger.trace("Message %s already defined, keeping existing text", key)
            return
        self._messages[key] = text

    def add_defaults(self) -> None:
        """Define the built-in messages used by the script generator."""
        for key, text in DEFAULT_MESSAGES.items():
            self.add(key, text)

    def get(self, key: str) -> str:
        """Return the text for ``key``, or a placeholder naming the missing key."""
        text: str | None = self._messages.get(key)
        if text is None:
            logger.warning("Message '%s' not found", key)
            return f"Message '{key}' not found"
        return text
