# topmark:header:start
#
#   project      : Autoexec
#   file         : model.py
#   file_relpath : src/autoexec/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot consumed by
      [`AutoexecModule.initialize`][autoexec.core.module.AutoexecModule.initialize].
    - `MutableConfig`: a mutable builder used while merging config layers; it
      can be frozen into `Config`.

Layering:
    Defaults come first, then each TOML file in order. Scalar ``[dosbox]``
    options from later files override earlier ones. ``[autoexec]`` sections
    are tracked twice: *joined* (all non-empty sections concatenated in
    order) and *overwritten* (only the last non-empty section, with its
    source). The ``autoexec_section`` option selects which one is used.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from autoexec.config.io import (
    get_bool_value_or_none_checked,
    get_enum_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from autoexec.config.keys import Toml
from autoexec.config.logging import get_logger
from autoexec.config.types import AutoexecSectionMode, StartupVerbosity
from autoexec.constants import DEFAULT_CONFIG_FILE_NAME
from autoexec.core.diagnostics import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable

    from autoexec.config.io import TomlTable
    from autoexec.config.logging import AutoexecLogger

logger: AutoexecLogger = get_logger(__name__)

DEFAULTS_SOURCE = "<defaults>"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Autoexec.

    Attributes:
        automount (bool): Whether ``drives/<letter>`` directories are mounted.
        autoexec_section (AutoexecSectionMode): How ``[autoexec]`` sections
            of several config files are combined.
        startup_verbosity (StartupVerbosity): Startup mode of the runtime.
        joined_autoexec (str): All ``[autoexec]`` sections, concatenated.
        overwritten_autoexec (str): The last non-empty ``[autoexec]`` section.
        overwritten_source (str): Where ``overwritten_autoexec`` comes from.
        config_files (tuple[Path | str, ...]): Config sources, in merge order.
        diagnostics (tuple[Diagnostic, ...]): Warnings encountered while loading.
    """

    automount: bool
    autoexec_section: AutoexecSectionMode
    startup_verbosity: StartupVerbosity
    joined_autoexec: str
    overwritten_autoexec: str
    overwritten_source: str
    config_files: tuple[Path | str, ...]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def should_join_autoexecs(self) -> bool:
        """True when ``[autoexec]`` sections are joined rather than overwritten."""
        return self.autoexec_section is AutoexecSectionMode.JOIN

    @property
    def instant_launch(self) -> bool:
        """True when the runtime starts in instant-launch mode."""
        return self.startup_verbosity is StartupVerbosity.INSTANT_LAUNCH

    def to_toml_dict(self) -> TomlTable:
        """Convert this Config into a TOML-serializable dict.

        The effective ``[autoexec]`` text is the one selected by
        ``autoexec_section`` (assuming no command-line launch target).
        """
        text: str = self.joined_autoexec if self.should_join_autoexecs else self.overwritten_autoexec
        return {
            Toml.SECTION_DOSBOX: {
                Toml.KEY_AUTOMOUNT: self.automount,
                Toml.KEY_AUTOEXEC_SECTION: self.autoexec_section.value,
                Toml.KEY_STARTUP_VERBOSITY: self.startup_verbosity.value,
            },
            Toml.SECTION_AUTOEXEC: {
                Toml.KEY_TEXT: text,
            },
        }


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while merging layers.

    Attributes:
        automount (bool): See `Config.automount`.
        autoexec_section (AutoexecSectionMode): See `Config.autoexec_section`.
        startup_verbosity (StartupVerbosity): See `Config.startup_verbosity`.
        autoexec_sections (list[tuple[str, str]]): ``(source, text)`` of every
            non-empty ``[autoexec]`` section, in merge order.
        config_files (list[Path | str]): Sources merged so far.
        diagnostics (DiagnosticLog): Warnings collected while merging.
    """

    automount: bool = True
    autoexec_section: AutoexecSectionMode = AutoexecSectionMode.JOIN
    startup_verbosity: StartupVerbosity = StartupVerbosity.AUTO
    autoexec_sections: list[tuple[str, str]] = field(default_factory=lambda: [])
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the runtime defaults."""
        draft = cls()
        draft.apply_toml_dict(load_defaults_dict(), source=DEFAULTS_SOURCE)
        return draft

    @classmethod
    def load_merged(
        cls,
        config_paths: Iterable[Path] = (),
        *,
        no_config: bool = False,
        cwd: Path | None = None,
    ) -> MutableConfig:
        """Build a configuration from defaults and TOML files.

        Args:
            config_paths (Iterable[Path]): Files merged in order. When empty,
                ``autoexec.toml`` in ``cwd`` is used if present.
            no_config (bool): Skip file discovery and explicit files.
            cwd (Path | None): Discovery directory; defaults to the process CWD.

        Returns:
            MutableConfig: The merged draft; call `freeze()` for a runtime snapshot.
        """
        draft: MutableConfig = cls.from_defaults()
        if no_config:
            return draft

        paths: list[Path] = list(config_paths)
        if not paths:
            discovered: Path = (cwd or Path.cwd()) / DEFAULT_CONFIG_FILE_NAME
            if discovered.is_file():
                logger.debug("Discovered config file %s", discovered)
                paths.append(discovered)

        for path in paths:
            draft.merge_file(path)
        return draft

    def merge_file(self, path: Path) -> None:
        """Merge the TOML file at ``path`` on top of this draft."""
        if not path.is_file():
            logger.warning("Config file not found: %s", path)
            self.diagnostics.add_warning(f"Config file not found: {path}")
            return
        self.apply_toml_dict(load_toml_dict(path), source=str(path))

    def apply_toml_dict(self, data: TomlTable, *, source: str) -> None:
        """Apply one parsed TOML layer.

        Args:
            data (TomlTable): Parsed TOML document.
            source (str): Name of the layer, recorded in ``config_files``.
        """
        dosbox: TomlTable = get_table_value(data, Toml.SECTION_DOSBOX)
        where: str = f"{source}:{Toml.SECTION_DOSBOX}"

        automount: bool | None = get_bool_value_or_none_checked(
            dosbox, Toml.KEY_AUTOMOUNT, where=where, diagnostics=self.diagnostics
        )
        if automount is not None:
            self.automount = automount

        section_mode: AutoexecSectionMode | None = get_enum_value_or_none_checked(
            dosbox,
            Toml.KEY_AUTOEXEC_SECTION,
            parse=AutoexecSectionMode.from_name,
            where=where,
            diagnostics=self.diagnostics,
        )
        if section_mode is not None:
            self.autoexec_section = section_mode

        verbosity: StartupVerbosity | None = get_enum_value_or_none_checked(
            dosbox,
            Toml.KEY_STARTUP_VERBOSITY,
            parse=StartupVerbosity.from_name,
            where=where,
            diagnostics=self.diagnostics,
        )
        if verbosity is not None:
            self.startup_verbosity = verbosity

        autoexec: TomlTable = get_table_value(data, Toml.SECTION_AUTOEXEC)
        text: str | None = get_string_value_or_none_checked(
            autoexec,
            Toml.KEY_TEXT,
            where=f"{source}:{Toml.SECTION_AUTOEXEC}",
            diagnostics=self.diagnostics,
        )
        if text and text.strip():
            self.autoexec_sections.append((source, text))

        self.config_files.append(source)
        logger.trace("Merged config layer %s", source)

    def freeze(self) -> Config:
        """Return an immutable snapshot of this draft."""
        if self.autoexec_sections:
            overwritten_source, overwritten_text = self.autoexec_sections[-1]
        else:
            overwritten_source, overwritten_text = "", ""

        joined: str = "\n".join(text.rstrip("\r\n") for _, text in self.autoexec_sections)

        return Config(
            automount=self.automount,
            autoexec_section=self.autoexec_section,
            startup_verbosity=self.startup_verbosity,
            joined_autoexec=joined,
            overwritten_autoexec=overwritten_text,
            overwritten_source=overwritten_source,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics.items),
        )
