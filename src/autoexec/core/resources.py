# topmark:header:start
#
#   project      : Autoexec
#   file         : resources.py
#   file_relpath : src/autoexec/core/resources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve resource paths such as ``drives/c`` against a list of search directories."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from autoexec.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = get_logger(__name__)


def simplify_path(path: Path) -> Path:
    """Return ``path`` with ``.`` and ``..`` segments collapsed, without touching the disk."""
    return Path(os.path.normpath(path))


class ResourceLocator:
    """Looks resources up in an ordered list of directories.

    Args:
        search_dirs (Iterable[Path]): Directories in priority order. Defaults
            to the current working directory.
    """

    def __init__(self, search_dirs: Iterable[Path] | None = None) -> None:
        dirs: list[Path] = [Path(d) for d in search_dirs] if search_dirs is not None else []
        self.search_dirs: tuple[Path, ...] = tuple(dirs) or (Path.cwd(),)

    def resource_path(self, subdir: str, name: str) -> Path:
        """Return the first existing ``<dir>/<subdir>/<name>``.

        When none exists, the candidate under the first search directory is
        returned so callers can still report or create it.
        """
        candidates: list[Path] = [d / subdir / name for d in self.search_dirs]
        for candidate in candidates:
            if candidate.exists():
                logger.trace("Resource %s/%s found at %s", subdir, name, candidate)
                return candidate
        return candidates[0]
