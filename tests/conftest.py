# topmark:header:start
#
#   project      : Autoexec
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Autoexec test suite.

Sets up TRACE logging for test runs and provides helpers shared by the core,
config and CLI tests.

Notes:
    Build configs with `autoexec.config.model.MutableConfig`, then `freeze()`
    them into an immutable `Config` before handing them to
    `AutoexecModule.initialize`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from autoexec.config import logging
from autoexec.config.model import MutableConfig
from autoexec.config.types import AutoexecSectionMode, StartupVerbosity
from autoexec.core.launch import CommandLine
from autoexec.core.module import AutoexecModule
from autoexec.core.resources import ResourceLocator
from autoexec.core.vfile import VirtualFileStore

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from autoexec.config.model import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_autoexec_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove ``AUTOEXEC_LOG_LEVEL``.
    """
    monkeypatch.delenv("AUTOEXEC_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an empty working directory.

    Keeps ``autoexec.toml`` discovery and relative launch directories
    predictable.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(
    *sections: str,
    automount: bool = False,
    mode: AutoexecSectionMode = AutoexecSectionMode.JOIN,
    verbosity: StartupVerbosity = StartupVerbosity.AUTO,
) -> Config:
    """Return a frozen `Config` with the given ``[autoexec]`` sections.

    Each section is applied as if it came from its own config file, named
    ``conf<N>.toml``. Automount is off by default to keep tests hermetic.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.automount = automount
    draft.autoexec_section = mode
    draft.startup_verbosity = verbosity
    for index, text in enumerate(sections, start=1):
        draft.apply_toml_dict({"autoexec": {"text": text}}, source=f"conf{index}.toml")
    return draft.freeze()


def make_module(
    *,
    directories: Sequence[str] = (),
    code_page: int = 437,
    locator: ResourceLocator | None = None,
    store: VirtualFileStore | None = None,
    platform: str = "linux",
) -> AutoexecModule:
    """Return a module whose directory check only knows ``directories``."""
    known: frozenset[str] = frozenset(directories)
    return AutoexecModule(
        store=store if store is not None else VirtualFileStore(),
        code_page_provider=lambda: code_page,
        locator=locator,
        is_dir=lambda path: str(path) in known,
        exists=lambda path: False,
        validate_variables=True,
        platform=platform,
    )


def initialized_module(
    args: Sequence[str] = (),
    *sections: str,
    directories: Sequence[str] = (),
    mode: AutoexecSectionMode = AutoexecSectionMode.JOIN,
    verbosity: StartupVerbosity = StartupVerbosity.AUTO,
) -> AutoexecModule:
    """Return a module initialized from ``args`` and ``sections``."""
    module: AutoexecModule = make_module(directories=directories)
    module.initialize(make_config(*sections, mode=mode, verbosity=verbosity), CommandLine(args))
    return module
