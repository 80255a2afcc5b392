# topmark:header:start
#
#   project      : Autoexec
#   file         : launch.py
#   file_relpath : src/autoexec/core/launch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn the runtime's launch arguments into synthesized ``AUTOEXEC.BAT`` commands.

Launch arguments follow the DOSBox command-line conventions:

- ``-c <command>`` (repeatable): run ``<command>`` before anything else;
  ``-c exit`` requests an ``@EXIT`` at the very end instead;
- ``-exit``: append ``@EXIT`` at the very end;
- ``-securemode``: disable mounting once the launch target is set up;
- ``-noautoexec``: ignore the ``[autoexec]`` configuration section;
- positional arguments: the launch target.

The first positional argument is classified by an ordered rule chain; the
first matching rule wins:

1. an existing directory is mounted as ``C:``;
2. a ``.BAT`` file is ``CALL``-ed;
3. a ``.IMG``/``.IMA`` floppy or hard-disk image is booted;
4. ``.ISO``/``.CUE`` CD images are collected and scanning continues with
   the next positional argument;
5. anything else is run as a literal command.

CD images collected so far are mounted as ``D:`` right before the dispatched
target. Rule 3 never injects the secure-mode command since enabling secure
mode disables ``BOOT``.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Final, NamedTuple

from autoexec.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from autoexec.core.sections import SectionBuffer

logger = get_logger(__name__)

# Launch switches
SWITCH_COMMAND: Final[str] = "-c"
SWITCH_EXIT: Final[str] = "-exit"
SWITCH_SECURE_MODE: Final[str] = "-securemode"
SWITCH_NO_AUTOEXEC: Final[str] = "-noautoexec"

# Synthesized commands
SECURE_MODE_COMMAND: Final[str] = "@Z:\\CONFIG.COM -securemode"
EXIT_COMMAND: Final[str] = "@EXIT"
QUOTE: Final[str] = '"'

BATCH_SUFFIXES: Final[tuple[str, ...]] = (".BAT",)
BOOT_IMAGE_SUFFIXES: Final[tuple[str, ...]] = (".IMG", ".IMA")
CDROM_IMAGE_SUFFIXES: Final[tuple[str, ...]] = (".ISO", ".CUE")


def quoted(text: str) -> str:
    """Return ``text`` wrapped in double quotes."""
    return f"{QUOTE}{text}{QUOTE}"


def mount_cdrom_command(targets: str) -> str:
    """Return the command mounting the space-joined, quoted ``targets`` as ``D:``."""
    return f"@Z:\\IMGMOUNT.COM D {targets} -t iso"


def mount_directory_commands(target: str) -> tuple[str, str]:
    """Return the commands mounting directory ``target`` as ``C:`` and switching to it."""
    return f"@Z:\\MOUNT.COM C {quoted(target)}", "@C:"


class CommandLine:
    """Accessor over the runtime's launch arguments.

    Switch names are matched case-insensitively. Removing a switch makes it
    invisible to later lookups, which is how repeated ``-c`` options are
    consumed one at a time.

    Args:
        args (Iterable[str]): Launch arguments without the program name.
    """

    def __init__(self, args: Iterable[str] = ()) -> None:
        self._args: list[str] = list(args)

    @property
    def args(self) -> tuple[str, ...]:
        """Remaining (not yet removed) arguments."""
        return tuple(self._args)

    def _index_of(self, name: str) -> int | None:
        wanted: str = name.lower()
        for i, arg in enumerate(self._args):
            if arg.lower() == wanted:
                return i
        return None

    def find_exist(self, name: str, *, remove: bool = False) -> bool:
        """Return True if switch ``name`` is present, optionally removing it."""
        index: int | None = self._index_of(name)
        if index is None:
            return False
        if remove:
            del self._args[index]
        return True

    def find_string(self, name: str, *, remove: bool = False) -> str | None:
        """Return the value following switch ``name``.

        A switch without a value is treated as absent. With ``remove``, both
        the switch and its value are removed.
        """
        index: int | None = self._index_of(name)
        if index is None or index + 1 >= len(self._args):
            return None
        value: str = self._args[index + 1]
        if remove:
            del self._args[index : index + 2]
        return value

    def commands(self) -> list[str]:
        """Return the positional (non-switch) arguments in order."""
        return [arg for arg in self._args if not arg.startswith("-")]

    def find_command(self, index: int) -> str | None:
        """Return the ``index``-th (1-based) positional argument, or None."""
        commands: list[str] = self.commands()
        if 1 <= index <= len(commands):
            return commands[index - 1]
        return None

    def has_executable_name(self) -> bool:
        """Return True if a launch target was given."""
        return self.find_command(1) is not None

    def __repr__(self) -> str:
        return f"CommandLine({self._args!r})"


@dataclass
class LaunchPlan:
    """Outcome of interpreting the launch arguments.

    Attributes:
        found_dir_or_command (bool): A positional argument was dispatched
            (directory, batch file, boot image or literal command).
        cdrom_images (list[str]): Quoted CD images not yet mounted.
        secure (bool): ``-securemode`` was requested.
        should_add_exit (bool): ``@EXIT`` must end the script.
        autoexec_allowed (bool): ``-noautoexec`` was not given.
    """

    found_dir_or_command: bool = False
    cdrom_images: list[str] = field(default_factory=lambda: [])
    secure: bool = False
    should_add_exit: bool = False
    autoexec_allowed: bool = True

    def finalize(self, sections: SectionBuffer) -> None:
        """Add the trailing commands; call once the user content is in place.

        Without a dispatched launch target, pending CD images are mounted and
        the secure-mode command seals the environment after the user content.
        ``@EXIT`` always comes last.
        """
        if not self.found_dir_or_command:
            _flush_cdrom_images(self, sections)
            if self.secure:
                sections.add_command_after(SECURE_MODE_COMMAND)
        if self.should_add_exit:
            sections.add_command_after(EXIT_COMMAND)


def _flush_cdrom_images(plan: LaunchPlan, sections: SectionBuffer) -> None:
    if plan.cdrom_images:
        sections.add_command_before(mount_cdrom_command(" ".join(plan.cdrom_images)))
        plan.cdrom_images.clear()


def _add_secure_before(plan: LaunchPlan, sections: SectionBuffer) -> None:
    if plan.secure:
        sections.add_command_before(SECURE_MODE_COMMAND)


# --- Positional argument rules ---


@dataclass(frozen=True)
class _ScanContext:
    plan: LaunchPlan
    sections: SectionBuffer
    cwd: Path
    is_dir: Callable[[Path], bool]

    def is_directory(self, argument: str) -> bool:
        path = Path(argument)
        return self.is_dir(path) or self.is_dir(self.cwd / path)


def _has_suffix(argument: str, suffixes: Sequence[str]) -> bool:
    return argument.upper().endswith(tuple(suffixes))


def _mount_directory(argument: str, ctx: _ScanContext) -> bool:
    _flush_cdrom_images(ctx.plan, ctx.sections)
    for command in mount_directory_commands(argument):
        ctx.sections.add_command_before(command)
    _add_secure_before(ctx.plan, ctx.sections)
    return True


def _call_batch(argument: str, ctx: _ScanContext) -> bool:
    _flush_cdrom_images(ctx.plan, ctx.sections)
    _add_secure_before(ctx.plan, ctx.sections)
    # CALL keeps a trailing @EXIT reachable
    ctx.sections.add_command_before(f"CALL {argument}")
    return True


def _boot_image(argument: str, ctx: _ScanContext) -> bool:
    _flush_cdrom_images(ctx.plan, ctx.sections)
    ctx.sections.add_command_before(f"BOOT {quoted(argument)}")
    return True


def _collect_cdrom_image(argument: str, ctx: _ScanContext) -> bool:
    ctx.plan.cdrom_images.append(quoted(argument))
    return False


def _run_command(argument: str, ctx: _ScanContext) -> bool:
    _flush_cdrom_images(ctx.plan, ctx.sections)
    _add_secure_before(ctx.plan, ctx.sections)
    ctx.sections.add_command_before(argument)
    return True


class LaunchRule(NamedTuple):
    """A positional-argument rule: when ``matches`` holds, ``action`` runs.

    ``action`` returns True when it dispatched the argument, which stops the scan.
    """

    name: str
    matches: Callable[[str, _ScanContext], bool]
    action: Callable[[str, _ScanContext], bool]


LAUNCH_RULES: Final[tuple[LaunchRule, ...]] = (
    LaunchRule("directory", lambda arg, ctx: ctx.is_directory(arg), _mount_directory),
    LaunchRule("batch", lambda arg, _ctx: _has_suffix(arg, BATCH_SUFFIXES), _call_batch),
    LaunchRule(
        "boot-image", lambda arg, _ctx: _has_suffix(arg, BOOT_IMAGE_SUFFIXES), _boot_image
    ),
    LaunchRule(
        "cdrom-image",
        lambda arg, _ctx: _has_suffix(arg, CDROM_IMAGE_SUFFIXES),
        _collect_cdrom_image,
    ),
    LaunchRule("command", lambda _arg, _ctx: True, _run_command),
)


def normalize_inline_command(command: str, *, platform: str) -> str:
    """Prepare a ``-c`` value for the script.

    On Windows, single quotes become double quotes so that mount commands
    can carry paths with spaces.
    """
    if platform == "win32":
        return command.replace("'", QUOTE)
    return command


def is_exit_command(command: str) -> bool:
    """Return True for ``exit`` or ``"exit"``."""
    return command in ("exit", quoted("exit"))


def interpret_launch_arguments(
    cmdline: CommandLine,
    sections: SectionBuffer,
    *,
    instant_launch: bool = False,
    cwd: Path | None = None,
    is_dir: Callable[[Path], bool] = Path.is_dir,
    platform: str = sys.platform,
) -> LaunchPlan:
    """Queue the commands derived from ``cmdline`` into ``sections``.

    Args:
        cmdline (CommandLine): Launch arguments; ``-c``, ``-securemode`` and
            ``-noautoexec`` are consumed.
        sections (SectionBuffer): Receives the ``BEFORE`` commands.
        instant_launch (bool): The runtime starts in instant-launch mode.
        cwd (Path | None): Base for relative directory arguments; defaults
            to the process working directory.
        is_dir (Callable[[Path], bool]): Directory existence check.
        platform (str): Platform identifier, as in ``sys.platform``.

    Returns:
        LaunchPlan: State needed by [`LaunchPlan.finalize`][autoexec.core.launch.LaunchPlan.finalize].
    """
    plan = LaunchPlan(
        secure=cmdline.find_exist(SWITCH_SECURE_MODE, remove=True),
        autoexec_allowed=not cmdline.find_exist(SWITCH_NO_AUTOEXEC, remove=True),
    )

    exit_call_exists: bool = False
    while (command := cmdline.find_string(SWITCH_COMMAND, remove=True)) is not None:
        command = normalize_inline_command(command, platform=platform)
        # Queued at the end; an early exit would skip the [autoexec] content
        if is_exit_command(command):
            exit_call_exists = True
            continue
        sections.add_command_before(command)

    exit_arg_exists: bool = cmdline.find_exist(SWITCH_EXIT)
    instant_launch_with_executable: bool = instant_launch and cmdline.has_executable_name()
    plan.should_add_exit = exit_call_exists or exit_arg_exists or instant_launch_with_executable

    ctx = _ScanContext(
        plan=plan,
        sections=sections,
        cwd=cwd if cwd is not None else Path.cwd(),
        is_dir=is_dir,
    )

    index: int = 1
    while (argument := cmdline.find_command(index)) is not None:
        index += 1
        for rule in LAUNCH_RULES:
            if not rule.matches(argument, ctx):
                continue
            logger.debug("Launch argument %r matched rule '%s'", argument, rule.name)
            plan.found_dir_or_command = rule.action(argument, ctx)
            break
        if plan.found_dir_or_command:
            break

    return plan
