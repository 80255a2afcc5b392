# topmark:header:start
#
#   project      : Autoexec
#   file         : vfile.py
#   file_relpath : src/autoexec/core/vfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Virtual files exposed on the runtime's ``Z:`` drive.

`VirtualFileStoreLike` is the register/update primitive the generator relies
on; `VirtualFileStore` is the in-memory implementation used by the CLI and
the tests. File names are case-insensitive, as on DOS.
"""

from __future__ import annotations

from typing import Protocol

from autoexec.config.logging import get_logger
from autoexec.core.errors import VirtualFileError

logger = get_logger(__name__)


class VirtualFileStoreLike(Protocol):
    """Minimal interface of a virtual drive."""

    def register(self, name: str, data: bytes) -> None:
        """Create the file ``name`` with ``data``."""
        ...

    def update(self, name: str, data: bytes) -> None:
        """Replace the content of the existing file ``name``."""
        ...


class VirtualFileStore(VirtualFileStoreLike):
    """In-memory virtual drive."""

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}
        self.writes: int = 0

    @staticmethod
    def _key(name: str) -> str:
        return name.upper()

    def register(self, name: str, data: bytes) -> None:
        """Create the file ``name``.

        Raises:
            VirtualFileError: If the file already exists.
        """
        key: str = self._key(name)
        if key in self._files:
            raise VirtualFileError(f"Virtual file {key} is already registered")
        self._files[key] = bytes(data)
        self.writes += 1
        logger.debug("Registered Z:\\%s (%d bytes)", key, len(data))

    def update(self, name: str, data: bytes) -> None:
        """Replace the content of ``name``.

        Raises:
            VirtualFileError: If the file was never registered.
        """
        key: str = self._key(name)
        if key not in self._files:
            raise VirtualFileError(f"Virtual file {key} is not registered")
        self._files[key] = bytes(data)
        self.writes += 1
        logger.debug("Updated Z:\\%s (%d bytes)", key, len(data))

    def exists(self, name: str) -> bool:
        """Return True if ``name`` is registered."""
        return self._key(name) in self._files

    def read(self, name: str) -> bytes:
        """Return the content of ``name``.

        Raises:
            VirtualFileError: If the file was never registered.
        """
        try:
            return self._files[self._key(name)]
        except KeyError:
            raise VirtualFileError(f"Virtual file {self._key(name)} is not registered") from None
