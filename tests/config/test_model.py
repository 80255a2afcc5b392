# topmark:header:start
#
#   project      : Autoexec
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for config layering and the frozen runtime snapshot."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

import pytest

from autoexec.config.model import DEFAULTS_SOURCE, Config, MutableConfig
from autoexec.config.types import AutoexecSectionMode, StartupVerbosity
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path


def write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    config: Config = MutableConfig.from_defaults().freeze()

    assert config.automount is True
    assert config.autoexec_section is AutoexecSectionMode.JOIN
    assert config.startup_verbosity is StartupVerbosity.AUTO
    assert config.joined_autoexec == ""
    assert config.overwritten_autoexec == ""
    assert config.config_files == (DEFAULTS_SOURCE,)
    assert config.diagnostics == ()
    assert config.should_join_autoexecs
    assert not config.instant_launch


def test_config_is_frozen() -> None:
    config: Config = MutableConfig.from_defaults().freeze()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.automount = False  # type: ignore[misc]


def test_later_files_override_scalars_and_sections_are_tracked(tmp_path: Path) -> None:
    first = write(
        tmp_path / "first.toml",
        '[dosbox]\nautomount = false\n\n[autoexec]\ntext = "mount c .\\nc:\\n"\n',
    )
    second = write(
        tmp_path / "second.toml",
        '[dosbox]\nautoexec_section = "overwrite"\nstartup_verbosity = "instant-launch"\n'
        '\n[autoexec]\ntext = "game.exe"\n',
    )

    config: Config = MutableConfig.load_merged([first, second]).freeze()

    assert config.automount is False
    assert config.autoexec_section is AutoexecSectionMode.OVERWRITE
    assert config.instant_launch
    assert config.joined_autoexec == "mount c .\nc:\ngame.exe"
    assert config.overwritten_autoexec == "game.exe"
    assert config.overwritten_source == str(second)
    assert config.config_files == (DEFAULTS_SOURCE, str(first), str(second))


def test_empty_sections_do_not_overwrite(tmp_path: Path) -> None:
    first = write(tmp_path / "first.toml", '[autoexec]\ntext = "dir"\n')
    second = write(tmp_path / "second.toml", '[autoexec]\ntext = "   "\n')

    config: Config = MutableConfig.load_merged([first, second]).freeze()

    assert config.overwritten_autoexec == "dir"
    assert config.overwritten_source == str(first)
    assert config.joined_autoexec == "dir"


def test_discovers_autoexec_toml_in_cwd(tmp_path: Path) -> None:
    write(tmp_path / "autoexec.toml", '[autoexec]\ntext = "ver"\n')

    config: Config = MutableConfig.load_merged(cwd=tmp_path).freeze()

    assert config.joined_autoexec == "ver"
    assert config.config_files[-1] == str(tmp_path / "autoexec.toml")


def test_explicit_files_disable_discovery(tmp_path: Path) -> None:
    write(tmp_path / "autoexec.toml", '[autoexec]\ntext = "ver"\n')
    other = write(tmp_path / "other.toml", '[autoexec]\ntext = "dir"\n')

    config: Config = MutableConfig.load_merged([other], cwd=tmp_path).freeze()

    assert config.joined_autoexec == "dir"


def test_no_config_uses_defaults_only(tmp_path: Path) -> None:
    other = write(tmp_path / "other.toml", '[autoexec]\ntext = "dir"\n')
    write(tmp_path / "autoexec.toml", '[autoexec]\ntext = "ver"\n')

    config: Config = MutableConfig.load_merged([other], no_config=True, cwd=tmp_path).freeze()

    assert config.joined_autoexec == ""
    assert config.config_files == (DEFAULTS_SOURCE,)


def test_missing_file_is_a_warning(tmp_path: Path) -> None:
    config: Config = MutableConfig.load_merged([tmp_path / "missing.toml"]).freeze()

    assert len(config.diagnostics) == 1
    assert "Config file not found" in config.diagnostics[0].message


@parametrize(
    ("snippet", "expected_fragment"),
    [
        ('autoexec_section = "merge"', "dosbox.autoexec_section"),
        ('startup_verbosity = "loud"', "dosbox.startup_verbosity"),
        ('automount = "yes"', "dosbox.automount"),
    ],
)
def test_invalid_values_fall_back_with_a_warning(
    tmp_path: Path, snippet: str, expected_fragment: str
) -> None:
    path = write(tmp_path / "bad.toml", f"[dosbox]\n{snippet}\n")

    config: Config = MutableConfig.load_merged([path]).freeze()

    assert config.automount is True
    assert config.autoexec_section is AutoexecSectionMode.JOIN
    assert config.startup_verbosity is StartupVerbosity.AUTO
    assert len(config.diagnostics) == 1
    assert expected_fragment in config.diagnostics[0].message


def test_to_toml_dict_uses_the_selected_section() -> None:
    draft = MutableConfig.from_defaults()
    draft.apply_toml_dict({"autoexec": {"text": "one"}}, source="a")
    draft.apply_toml_dict({"autoexec": {"text": "two"}}, source="b")

    joined = draft.freeze().to_toml_dict()
    draft.autoexec_section = AutoexecSectionMode.OVERWRITE
    overwritten = draft.freeze().to_toml_dict()

    assert joined["autoexec"]["text"] == "one\ntwo"
    assert overwritten["autoexec"]["text"] == "two"
    assert overwritten["dosbox"] == {
        "automount": True,
        "autoexec_section": "overwrite",
        "startup_verbosity": "auto",
    }
