# topmark:header:start
#
#   project      : Autoexec
#   file         : test_module.py
#   file_relpath : tests/core/test_module.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the owned ``AUTOEXEC.BAT`` generation context."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from autoexec.config.types import AutoexecSectionMode, StartupVerbosity
from autoexec.core.codepage import utf8_to_dos
from autoexec.core.errors import AutoexecStateError, FatalValidationError
from autoexec.core.launch import SECURE_MODE_COMMAND, CommandLine
from autoexec.core.module import AutoexecModule, is_echo_off
from autoexec.core.resources import ResourceLocator
from autoexec.core.sections import Location
from autoexec.core.shell import DictShellEnvironment
from autoexec.core.vfile import VirtualFileStore
from tests.conftest import initialized_module, make_config, make_module, parametrize

CRLF = "\r\n"
GENERATED = ":: autogenerated"
CONFIG = ":: from [autoexec] section"
MOUNT_GAMES = '@Z:\\MOUNT.COM C "games"'


def dos(*lines: str) -> str:
    return "".join(line + CRLF for line in lines)


class RefusingShell:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def set_env(self, name: str, value: str) -> bool:
        self.calls.append((name, value))
        return False


# --- echo off ---


@parametrize(
    ("line", "expected"),
    [
        ("@echo off", True),
        ("ECHO OFF", True),
        ("@Echo   Off", True),
        ("echo\toff", True),
        ("echo off now", False),
        ("echooff", False),
        ("@echooff", False),
        ("echo of", False),
        ("@@echo off", False),
        ("", False),
    ],
)
def test_is_echo_off(line: str, expected: bool) -> None:
    assert is_echo_off(line) is expected


def test_leading_echo_off_sets_the_flag_and_is_dropped() -> None:
    module = initialized_module([], "@echo off\ndir")

    assert module.echo_off
    assert module.sections.lines(Location.USER_CONTENT) == ("dir",)
    assert module.render() == dos(GENERATED, "", "@ECHO OFF", "", "", CONFIG, "", "dir")


def test_echo_off_with_trailing_words_is_kept_verbatim() -> None:
    module = initialized_module([], "echo off now\ndir")

    assert not module.echo_off
    assert module.sections.lines(Location.USER_CONTENT) == ("echo off now", "dir")


def test_echo_off_is_only_recognized_on_the_first_line() -> None:
    module = initialized_module([], "dir\n@echo off")

    assert not module.echo_off
    assert module.sections.lines(Location.USER_CONTENT) == ("dir", "@echo off")


def test_user_lines_are_stripped_and_blank_lines_kept() -> None:
    module = initialized_module([], "  dir  \n\n\tver\r\n")

    assert module.sections.lines(Location.USER_CONTENT) == ("dir", "", "ver")


def test_user_lines_split_on_line_feed_only() -> None:
    module = make_module()

    module.process_config_section("echo a\x0cb\necho c\u2028d\nver\x85x\n\n", "autoexec.toml")

    assert module.sections.lines(Location.USER_CONTENT) == (
        "echo a\x0cb",
        "echo c\u2028d",
        "ver\x85x",
        "",
    )


# --- join / overwrite / -noautoexec ---


def test_join_processes_every_section_even_with_a_launch_target(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.INFO):
        module = initialized_module(["game.exe"], "one", "two")

    assert module.sections.lines(Location.BEFORE) == ("game.exe",)
    assert module.sections.lines(Location.USER_CONTENT) == ("one", "two")
    assert "Using autoexec from one or more joined sections" in caplog.text


def test_overwrite_uses_the_last_section_without_launch_target(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.INFO):
        module = initialized_module([], "one", "two", mode=AutoexecSectionMode.OVERWRITE)

    assert module.sections.lines(Location.USER_CONTENT) == ("two",)
    assert "Using autoexec from conf2.toml" in caplog.text


def test_overwrite_prefers_the_command_line(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        module = initialized_module(["game.exe"], "one", mode=AutoexecSectionMode.OVERWRITE)

    assert module.sections.lines(Location.USER_CONTENT) == ()
    assert "Using commands provided on the command line" in caplog.text


def test_overwrite_with_only_cdrom_images_still_uses_the_config() -> None:
    module = initialized_module(["game.iso"], "one", mode=AutoexecSectionMode.OVERWRITE)

    assert module.sections.lines(Location.USER_CONTENT) == ("one",)
    assert module.sections.lines(Location.BEFORE) == ('@Z:\\IMGMOUNT.COM D "game.iso" -t iso',)


@parametrize("mode", list(AutoexecSectionMode))
def test_noautoexec_skips_the_config_section(mode: AutoexecSectionMode) -> None:
    module = initialized_module(["-noautoexec", "-exit"], "@echo off\ndir", mode=mode)

    assert not module.echo_off
    assert module.sections.lines(Location.USER_CONTENT) == ()
    assert module.render() == dos(GENERATED, "", "@EXIT")


def test_empty_configuration_renders_nothing() -> None:
    module = initialized_module([])

    assert module.render() == ""
    assert module.is_registered
    assert module.exposed_bytes() == b""


# --- full assembly ---


def test_full_script() -> None:
    module = initialized_module(
        ["-c", "mount d .", "-securemode", "-exit", "games"],
        "@ECHO OFF\ndir",
        directories=["games"],
    )

    assert module.render() == dos(
        GENERATED,
        "",
        "@ECHO OFF",
        "",
        "mount d .",
        MOUNT_GAMES,
        "@C:",
        SECURE_MODE_COMMAND,
        "",
        CONFIG,
        "",
        "dir",
        "",
        GENERATED,
        "",
        "@EXIT",
    )


def test_instant_launch_appends_exit() -> None:
    module = initialized_module(
        ["game.exe"], verbosity=StartupVerbosity.INSTANT_LAUNCH
    )

    assert module.sections.lines(Location.AFTER) == ("@EXIT",)


def test_automount_runs_first(tmp_path: Path) -> None:
    drive: Path = tmp_path / "drives" / "c"
    drive.mkdir(parents=True)
    module = AutoexecModule(
        locator=ResourceLocator([tmp_path]),
        is_dir=lambda path: False,
        platform="linux",
    )

    module.initialize(make_config(automount=True), CommandLine(["-c", "dir"]))

    assert module.sections.lines(Location.BEFORE) == (f'@Z:\\MOUNT.COM c "{drive}"', "dir")


# --- lifecycle ---


def test_initialize_runs_only_once() -> None:
    module = initialized_module([])

    with pytest.raises(AutoexecStateError, match="already initialized"):
        module.initialize(make_config(), CommandLine([]))


def test_initialize_registers_the_encoded_file() -> None:
    store = VirtualFileStore()
    module = make_module(store=store, code_page=850)
    module.initialize(make_config("echo ø"), CommandLine([]))

    assert module.is_initialized
    assert module.code_page == 850
    assert store.read("AUTOEXEC.BAT") == utf8_to_dos(module.render(), 850)
    assert store.read("AUTOEXEC.BAT").endswith(b"echo \x9b\r\n")


def test_register_file_is_idempotent() -> None:
    store = VirtualFileStore()
    module = make_module(store=store)
    module.initialize(make_config("dir"), CommandLine([]))
    first: bytes = store.read("AUTOEXEC.BAT")

    module.register_file()
    module.register_file()

    assert store.read("AUTOEXEC.BAT") == first
    assert store.writes == 3


def test_exposed_bytes_before_registration() -> None:
    with pytest.raises(AutoexecStateError, match="not registered"):
        make_module().exposed_bytes()


# --- variables ---


def test_path_round_trip() -> None:
    module = initialized_module([], "dir")

    module.set_variable("PATH", "C:\\")
    assert "@SET PATH=C:\\\r\n" in module.render()
    assert b"@SET PATH=C:\\\r\n" in module.exposed_bytes()

    module.set_variable("PATH", "")
    assert "PATH" not in module.variables
    assert module.render() == dos(CONFIG, "", "dir")
    assert module.exposed_bytes() == dos(CONFIG, "", "dir").encode("ascii")


def test_variables_render_sorted() -> None:
    module = initialized_module([])
    module.set_variable("B", "2")
    module.set_variable("a", "1")

    assert module.render() == dos(GENERATED, "", "@SET A=1", "@SET B=2", "")


def test_set_variable_before_registration_does_not_register() -> None:
    store = VirtualFileStore()
    module = make_module(store=store)

    module.set_variable("BLASTER", "A220")

    assert not module.is_registered
    assert not store.exists("AUTOEXEC.BAT")

    module.initialize(make_config(), CommandLine([]))
    assert b"@SET BLASTER=A220" in store.read("AUTOEXEC.BAT")


def test_set_variable_pushes_to_the_attached_shell() -> None:
    module = initialized_module([])
    shell = DictShellEnvironment()
    module.attach_shell(shell)

    module.set_variable("path", "C:\\")
    assert shell.variables == {"PATH": "C:\\"}

    module.set_variable("PATH", "")
    assert shell.variables == {}


def test_shell_failures_are_ignored() -> None:
    module = initialized_module([])
    shell = RefusingShell()
    module.attach_shell(shell)

    module.set_variable("x", "1")

    assert shell.calls == [("X", "1")]
    assert module.variables.get("X") == "1"


def test_invalid_variable_is_fatal() -> None:
    module = initialized_module([])

    with pytest.raises(FatalValidationError):
        module.set_variable("NAME", "caf\u00e9")
    assert "NAME" not in module.variables


# --- code page ---


def test_code_page_notifications() -> None:
    active: list[int] = [437]
    store = VirtualFileStore()
    module = AutoexecModule(
        store=store,
        code_page_provider=lambda: active[0],
        is_dir=lambda path: False,
        exists=lambda path: False,
    )
    module.initialize(make_config("echo ж"), CommandLine([]))
    stale: bytes = store.read("AUTOEXEC.BAT")
    assert stale.endswith(b"echo ?\r\n")

    assert module.notify_code_page_changed() is False
    assert store.read("AUTOEXEC.BAT") == stale

    active[0] = 866
    assert module.notify_code_page_changed() is True
    assert store.read("AUTOEXEC.BAT").endswith(b"echo \xa6\r\n")

    assert module.notify_code_page_changed(866) is False
    assert module.notify_code_page_changed(437) is True
    assert store.read("AUTOEXEC.BAT") == stale


def test_no_re_encoding_after_shutdown() -> None:
    module = initialized_module([], "dir")
    module.request_shutdown()

    assert module.notify_code_page_changed(850) is False
    assert module.code_page == 437
