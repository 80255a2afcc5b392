# topmark:header:start
#
#   project      : Autoexec
#   file         : module.py
#   file_relpath : src/autoexec/core/module.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Owned context assembling, rendering and exposing ``AUTOEXEC.BAT``.

`AutoexecModule` is the single owner of the mutable generation state:

- the section buffer (``BEFORE``, ``USER_CONTENT``, ``AFTER``);
- the variable registry;
- the echo-off flag;
- the code-page synchronizer (canonical text, registration flag, last code page);
- the attached shell and the shutdown flag.

All mutation goes through its methods. Collaborators (virtual file store,
encoder, code-page provider, resource locator, message catalog, filesystem
checks) are injected so that the module can run outside an emulator.

Typical use:

```python
module = AutoexecModule(code_page_provider=lambda: 850)
module.initialize(config, CommandLine(["-c", "dir", "game.bat"]))
text = module.render()
```
"""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from autoexec.config.logging import get_logger
from autoexec.constants import AUTOEXEC_FILE_NAME, DEFAULT_CODE_PAGE
from autoexec.core.automount import automount_drives
from autoexec.core.codepage import CodePageSynchronizer, utf8_to_dos
from autoexec.core.errors import AutoexecStateError
from autoexec.core.generator import render
from autoexec.core.launch import interpret_launch_arguments
from autoexec.core.messages import MessageCatalog
from autoexec.core.resources import ResourceLocator
from autoexec.core.sections import SectionBuffer
from autoexec.core.variables import VariableRegistry
from autoexec.core.vfile import VirtualFileStore

if TYPE_CHECKING:
    from collections.abc import Callable

    from autoexec.config.logging import AutoexecLogger
    from autoexec.config.model import Config
    from autoexec.core.launch import CommandLine, LaunchPlan
    from autoexec.core.shell import ShellEnvironment
    from autoexec.core.vfile import VirtualFileStoreLike

logger: AutoexecLogger = get_logger(__name__)

JOINED_SECTIONS_SOURCE = "one or more joined sections"

_ECHO_OFF_RE: re.Pattern[str] = re.compile(r"echo\s*off", re.IGNORECASE)
_ECHO_OFF_MIN_LENGTH = 8


def is_echo_off(line: str) -> bool:
    """Return True if ``line`` is an ``echo off`` directive.

    A single leading ``@`` is allowed. Only whitespace may separate ``echo``
    from ``off``, and nothing may follow ``off``.
    """
    command: str = line[1:] if line.startswith("@") else line
    if len(command) < _ECHO_OFF_MIN_LENGTH:
        return False
    return _ECHO_OFF_RE.fullmatch(command) is not None


def _default_code_page() -> int:
    return DEFAULT_CODE_PAGE


class AutoexecModule:
    """Single owner of the ``AUTOEXEC.BAT`` generation state.

    Args:
        store (VirtualFileStoreLike | None): Virtual drive receiving the file.
        encoder (Callable[[str, int], bytes]): Canonical-to-DOS conversion.
        code_page_provider (Callable[[], int]): Returns the active code page.
        locator (ResourceLocator | None): Resolves ``drives/<letter>``.
        messages (MessageCatalog | None): Header comment texts.
        is_dir (Callable[[Path], bool]): Directory check for launch arguments.
        exists (Callable[[Path], bool]): Existence check for drive directories.
        validate_variables (bool): Enforce printable-ASCII variables.
        cwd (Path | None): Base for relative launch directories.
        platform (str): Platform identifier, as in ``sys.platform``.
    """

    def __init__(
        self,
        *,
        store: VirtualFileStoreLike | None = None,
        encoder: Callable[[str, int], bytes] = utf8_to_dos,
        code_page_provider: Callable[[], int] = _default_code_page,
        locator: ResourceLocator | None = None,
        messages: MessageCatalog | None = None,
        is_dir: Callable[[Path], bool] = Path.is_dir,
        exists: Callable[[Path], bool] = Path.exists,
        validate_variables: bool = __debug__,
        cwd: Path | None = None,
        platform: str = sys.platform,
    ) -> None:
        self.store: VirtualFileStoreLike = store if store is not None else VirtualFileStore()
        self.code_page_provider = code_page_provider
        self.locator: ResourceLocator = locator if locator is not None else ResourceLocator()
        self.messages: MessageCatalog = (
            messages if messages is not None else MessageCatalog.with_defaults()
        )
        self.is_dir = is_dir
        self.exists = exists
        self.cwd = cwd
        self.platform = platform

        self._sections = SectionBuffer()
        self._variables = VariableRegistry(validate=validate_variables)
        self._echo_off: bool = False
        self._synchronizer = CodePageSynchronizer(
            self.store, encoder=encoder, file_name=AUTOEXEC_FILE_NAME
        )
        self._shell: ShellEnvironment | None = None
        self._initialized: bool = False
        self._shutting_down: bool = False

    # --- read-only views ---

    @property
    def sections(self) -> SectionBuffer:
        """The section buffer; mutate it only through this module."""
        return self._sections

    @property
    def variables(self) -> VariableRegistry:
        """The variable registry; mutate it only through `set_variable`."""
        return self._variables

    @property
    def echo_off(self) -> bool:
        return self._echo_off

    @property
    def is_registered(self) -> bool:
        """True once ``AUTOEXEC.BAT`` exists on the virtual drive."""
        return self._synchronizer.is_registered

    @property
    def code_page(self) -> int | None:
        """Code page of the exposed bytes, None before registration."""
        return self._synchronizer.code_page

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    # --- lifecycle ---

    def initialize(self, config: Config, cmdline: CommandLine) -> None:
        """Assemble the script from ``config`` and ``cmdline`` and expose it.

        Raises:
            AutoexecStateError: When called more than once.
        """
        if self._initialized:
            raise AutoexecStateError("AUTOEXEC: Module is already initialized")
        self._initialized = True

        if config.automount:
            mounted: list[str] = automount_drives(self._sections, self.locator, exists=self.exists)
            logger.debug("Auto-mounted drives: %s", ", ".join(mounted) or "none")

        plan: LaunchPlan = interpret_launch_arguments(
            cmdline,
            self._sections,
            instant_launch=config.instant_launch,
            cwd=self.cwd,
            is_dir=self.is_dir,
            platform=self.platform,
        )

        if not plan.autoexec_allowed:
            logger.info("AUTOEXEC: Skipping the [autoexec] section")
        elif config.should_join_autoexecs:
            self.process_config_section(config.joined_autoexec, JOINED_SECTIONS_SOURCE)
        elif plan.found_dir_or_command:
            logger.info("AUTOEXEC: Using commands provided on the command line")
        else:
            self.process_config_section(config.overwritten_autoexec, config.overwritten_source)

        plan.finalize(self._sections)
        self.register_file()

    def process_config_section(self, text: str, source_name: str) -> None:
        """Append the lines of an ``[autoexec]`` section as user content."""
        if not text:
            return

        logger.info("AUTOEXEC: Using autoexec from %s", source_name)

        # LF is the only line break; CR goes with the per-line strip
        raw_lines: list[str] = text.split("\n")
        if raw_lines[-1] == "":
            raw_lines.pop()

        is_first_line: bool = True
        for raw_line in raw_lines:
            line: str = raw_line.strip()
            if is_first_line:
                is_first_line = False
                if is_echo_off(line):
                    self._echo_off = True
                    continue
            self._sections.add_autoexec_line(line)

    def set_variable(self, name: str, value: str) -> None:
        """Set (or, with an empty value, remove) a ``@SET`` variable.

        The pair is also pushed to the attached shell, if any; its result is
        ignored. An already registered file is re-rendered.

        Raises:
            FatalValidationError: When validation is on and ``name`` or
                ``value`` is not printable ASCII.
        """
        key: str = self._variables.set(name, value)

        if self._shell is not None and not self._shell.set_env(key, value):
            logger.debug("Shell did not accept variable %s", key)

        if self.is_registered:
            self.register_file()

    def register_file(self) -> None:
        """Render the script and expose it encoded for the active code page."""
        self._synchronizer.sync(self.render(), self.code_page_provider())

    def notify_code_page_changed(self, code_page: int | None = None) -> bool:
        """Re-encode the exposed file if the active code page changed.

        Args:
            code_page (int | None): New code page; read from the provider when None.

        Returns:
            bool: True if the file was re-encoded.
        """
        if code_page is None:
            code_page = self.code_page_provider()
        return self._synchronizer.notify_code_page_changed(
            code_page, shutting_down=self._shutting_down
        )

    def request_shutdown(self) -> None:
        """Stop reacting to code-page notifications."""
        self._shutting_down = True

    def attach_shell(self, shell: ShellEnvironment | None) -> None:
        """Attach (or, with None, detach) the running command shell."""
        self._shell = shell

    def render(self) -> str:
        """Return the current canonical script text."""
        return render(
            self._sections,
            self._variables.snapshot(),
            echo_off=self._echo_off,
            messages=self.messages,
        )

    def exposed_bytes(self) -> bytes:
        """Return the bytes currently exposed on the virtual drive.

        Raises:
            AutoexecStateError: When the file is not registered yet, or the
                store cannot be read back.
        """
        if not self.is_registered:
            raise AutoexecStateError(f"AUTOEXEC: {AUTOEXEC_FILE_NAME} is not registered")
        reader: Callable[[str], bytes] | None = getattr(self.store, "read", None)
        if reader is None:
            raise AutoexecStateError("AUTOEXEC: Virtual file store is write-only")
        return reader(AUTOEXEC_FILE_NAME)
