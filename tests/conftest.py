"""Shared pytest fixtures for CLI, printer, and module-entry tests.

All shared fixtures live here and read as plain English at the call site.
"""

from __future__ import annotations

import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from glitcha.adapters.memory.glitch import GlitchSpy
    from glitcha.composition import AppServices


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory."""
    if "COVERAGE_FILE" not in os.environ:
        os.environ["COVERAGE_FILE"] = str(Path(tempfile.gettempdir()) / ".coverage.glitcha")


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when asserting on glitch lines so log records on
    stderr cannot leak into the comparison.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from glitcha.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test."""
    from glitcha.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts, without file I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a factory that wires production services around an injected Config.

    Only the I/O boundary (``get_config``) is replaced; the real printer,
    display, and logging adapters stay in place.

    Example:
        def test_config_display(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"glitch": {"seed": 3}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
            assert "seed" in result.output
    """
    from glitcha.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            load_glitch_settings=prod.load_glitch_settings,
            run_glitch_printer=prod.run_glitch_printer,
            run_glitch_streams=prod.run_glitch_streams,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every profile it is asked for."""
    from glitcha.composition import AppServices, build_production, build_testing

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        base = build_testing()
        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            display_config=base.display_config,
            load_glitch_settings=base.load_glitch_settings,
            run_glitch_printer=base.run_glitch_printer,
            run_glitch_streams=base.run_glitch_streams,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _inject


@dataclass
class GlitchCliContext:
    """Services factory bundled with the spy that captures glitch runs.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: GlitchSpy for asserting on printer/streams calls.
    """

    factory: Callable[[], Any]
    spy: GlitchSpy


@pytest.fixture
def glitch_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], GlitchCliContext]:
    """Create an in-memory CLI context with a ``[glitch]`` section and a spy.

    Example:
        def test_run_uses_seed(cli_runner, glitch_cli_context) -> None:
            ctx = glitch_cli_context({"seed": 5})
            cli_runner.invoke(cli, ["run"], obj=ctx.factory)
            assert ctx.spy.printer_calls[0]["settings"].seed == 5
    """
    from glitcha.adapters.memory.glitch import GlitchSpy as GlitchSpyImpl
    from glitcha.composition import AppServices, build_production, build_testing

    def _create(glitch_data: dict[str, Any]) -> GlitchCliContext:
        spy = GlitchSpyImpl()
        config = Config({"glitch": glitch_data}, {})
        base = build_testing(spy=spy)
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=base.display_config,
            load_glitch_settings=base.load_glitch_settings,
            run_glitch_printer=base.run_glitch_printer,
            run_glitch_streams=base.run_glitch_streams,
            init_logging=prod.init_logging,
        )
        return GlitchCliContext(factory=lambda: test_services, spy=spy)

    return _create
