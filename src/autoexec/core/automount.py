# topmark:header:start
#
#   project      : Autoexec
#   file         : automount.py
#   file_relpath : src/autoexec/core/automount.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Auto-mount drives found under the ``drives`` resource directory.

For every letter ``a``..``z``, an existing ``drives/<letter>`` directory is
mounted before the ``[autoexec]`` content. An optional sibling
``drives/<letter>.conf`` (TOML) tunes the mount:

```toml
[drive]
type = "cdrom"          # passed as -t
label = "GAMES"         # passed as -label
readonly = true         # adds -ro
override_drive = "e"    # mount under another letter
path = "C:\\;C:\\UTILS" # exported as PATH
```

A missing or unreadable conf file only means "use the defaults".
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

from autoexec.config.io import get_bool_value, get_string_value, get_table_value, load_toml_dict
from autoexec.config.keys import Toml
from autoexec.config.logging import get_logger
from autoexec.constants import DRIVE_CONF_SUFFIX, DRIVES_RESOURCE_DIR
from autoexec.core.generator import format_set_command
from autoexec.core.resources import simplify_path

if TYPE_CHECKING:
    from collections.abc import Callable

    from autoexec.config.io import TomlTable
    from autoexec.core.resources import ResourceLocator
    from autoexec.core.sections import SectionBuffer

logger = get_logger(__name__)

DRIVE_LETTERS: Final[str] = string.ascii_lowercase


@dataclass(frozen=True)
class DriveConfig:
    """Resolved mount settings of one drive.

    Attributes:
        drive_letter (str): Letter to mount under.
        mount_args (str): Extra ``MOUNT`` arguments, each with a leading space.
        path (str): ``PATH`` value to export, empty for none.
    """

    drive_letter: str
    mount_args: str = ""
    path: str = ""


def parse_drive_conf(drive_letter: str, conf_path: Path) -> DriveConfig:
    """Read the ``[drive]`` table of ``conf_path``.

    Args:
        drive_letter (str): Letter derived from the drive directory name.
        conf_path (Path): Location of the optional conf file.

    Returns:
        DriveConfig: The settings; defaults when the file is missing or unreadable.
    """
    if not conf_path.is_file():
        return DriveConfig(drive_letter)

    settings: TomlTable = get_table_value(load_toml_dict(conf_path), Toml.SECTION_DRIVE)
    if not settings:
        logger.debug("No [%s] settings in %s", Toml.SECTION_DRIVE, conf_path)
        return DriveConfig(drive_letter)

    override: str = get_string_value(settings, Toml.KEY_DRIVE_OVERRIDE).strip().lower()
    if override:
        if len(override) == 1 and override in DRIVE_LETTERS:
            drive_letter = override
        else:
            logger.warning("Ignoring invalid override_drive %r in %s", override, conf_path)

    mount_args: str = ""
    drive_type: str = get_string_value(settings, Toml.KEY_DRIVE_TYPE).strip()
    if drive_type:
        mount_args += f" -t {drive_type}"
    label: str = get_string_value(settings, Toml.KEY_DRIVE_LABEL).strip()
    if label:
        mount_args += f" -label {label}"
    if get_bool_value(settings, Toml.KEY_DRIVE_READONLY):
        mount_args += " -ro"

    path: str = get_string_value(settings, Toml.KEY_DRIVE_PATH).strip()
    return DriveConfig(drive_letter, mount_args, path)


def mount_drive_command(drive_letter: str, drive_path: Path, mount_args: str = "") -> str:
    """Return the ``MOUNT`` command for a host directory."""
    return f'@Z:\\MOUNT.COM {drive_letter} "{simplify_path(drive_path)}"{mount_args}'


def automount_drive(
    dir_letter: str,
    sections: SectionBuffer,
    locator: ResourceLocator,
    *,
    exists: Callable[[Path], bool] = Path.exists,
) -> bool:
    """Mount ``drives/<dir_letter>`` if it exists.

    Returns:
        bool: True if a mount command was queued.
    """
    drive_path: Path = locator.resource_path(DRIVES_RESOURCE_DIR, dir_letter)
    if not exists(drive_path):
        return False

    conf_path = Path(f"{drive_path}{DRIVE_CONF_SUFFIX}")
    drive: DriveConfig = parse_drive_conf(dir_letter, conf_path)

    sections.add_command_before(mount_drive_command(drive.drive_letter, drive_path, drive.mount_args))
    if drive.path:
        sections.add_command_before(format_set_command("PATH", drive.path))

    logger.info("Auto-mounting %s as drive %s", drive_path, drive.drive_letter.upper())
    return True


def automount_drives(
    sections: SectionBuffer,
    locator: ResourceLocator,
    *,
    exists: Callable[[Path], bool] = Path.exists,
) -> list[str]:
    """Scan ``drives/a`` .. ``drives/z`` in order.

    Returns:
        list[str]: Directory letters that were mounted.
    """
    return [
        letter
        for letter in DRIVE_LETTERS
        if automount_drive(letter, sections, locator, exists=exists)
    ]
