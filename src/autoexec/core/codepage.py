# topmark:header:start
#
#   project      : Autoexec
#   file         : codepage.py
#   file_relpath : src/autoexec/core/codepage.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keep the DOS-encoded ``AUTOEXEC.BAT`` in sync with the active code page.

The canonical script is Unicode text. What the runtime reads from its virtual
drive is a single-byte encoding selected by the active DOS code page. The
synchronizer caches the code page used for the last encoding and re-encodes
only when a notification reports a different one.
"""

from __future__ import annotations

import codecs
from typing import TYPE_CHECKING

from autoexec.config.logging import get_logger
from autoexec.constants import AUTOEXEC_FILE_NAME, DEFAULT_CODE_PAGE

if TYPE_CHECKING:
    from collections.abc import Callable

    from autoexec.core.vfile import VirtualFileStoreLike

logger = get_logger(__name__)


def codec_name_for(code_page: int) -> str:
    """Return the Python codec name for a DOS code page.

    Unknown code pages map to the codec of code page 437.
    """
    name: str = f"cp{code_page}"
    try:
        codecs.lookup(name)
    except LookupError:
        logger.warning(
            "No codec for code page %d, using code page %d", code_page, DEFAULT_CODE_PAGE
        )
        return f"cp{DEFAULT_CODE_PAGE}"
    return name


def utf8_to_dos(text: str, code_page: int) -> bytes:
    """Encode canonical text for the given DOS code page.

    Characters the code page cannot represent are replaced with ``?``.
    """
    return text.encode(codec_name_for(code_page), errors="replace")


class CodePageSynchronizer:
    """Owns the exposed file and the code page it was encoded with.

    Args:
        store (VirtualFileStoreLike): Virtual drive receiving the file.
        encoder (Callable[[str, int], bytes]): Canonical-to-DOS conversion.
        file_name (str): Name of the exposed file.
    """

    def __init__(
        self,
        store: VirtualFileStoreLike,
        *,
        encoder: Callable[[str, int], bytes] = utf8_to_dos,
        file_name: str = AUTOEXEC_FILE_NAME,
    ) -> None:
        self.store = store
        self.encoder = encoder
        self.file_name = file_name
        self._registered: bool = False
        self._code_page: int | None = None
        self._canonical_text: str = ""

    @property
    def is_registered(self) -> bool:
        """True once the file exists on the virtual drive."""
        return self._registered

    @property
    def code_page(self) -> int | None:
        """Code page used for the last encoding, None before the first one."""
        return self._code_page

    @property
    def canonical_text(self) -> str:
        """Canonical text of the last synced script."""
        return self._canonical_text

    def sync(self, canonical_text: str, code_page: int) -> None:
        """Encode ``canonical_text`` and register or update the exposed file."""
        data: bytes = self.encoder(canonical_text, code_page)

        if self._registered:
            self.store.update(self.file_name, data)
        else:
            self.store.register(self.file_name, data)
            self._registered = True

        self._canonical_text = canonical_text
        self._code_page = code_page
        logger.trace("%s synced for code page %d", self.file_name, code_page)

    def notify_code_page_changed(self, code_page: int, *, shutting_down: bool = False) -> bool:
        """Re-encode the last script if ``code_page`` differs from the cached one.

        Returns:
            bool: True if the file was re-encoded.
        """
        if shutting_down or not self._registered:
            return False
        if code_page == self._code_page:
            return False

        logger.debug(
            "Code page changed from %s to %d, re-encoding %s",
            self._code_page,
            code_page,
            self.file_name,
        )
        self.sync(self._canonical_text, code_page)
        return True
