"""Module entry stories ensuring `python -m glitcha` mirrors the CLI."""

from __future__ import annotations

import os
import runpy
import signal
import subprocess
import sys
import threading
import time
from collections.abc import Callable

import lib_cli_exit_tools
import pytest

from glitcha import __init__conf__, composition, entry
from glitcha.adapters import cli as cli_mod
from glitcha.domain.glyphs import GLYPH_SET

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="sends POSIX signals to a child process")

#: Long enough for the interpreter to reach the entry point, well short of
#: the time the CLI stack takes to import.
STARTUP_SIGNAL_DELAY_SECONDS = 0.25


def _spawn_glitcha(*args: str) -> subprocess.Popen[str]:
    """Start ``python -m glitcha`` with UTF-8 pipes and a discarded stderr."""
    env = {**os.environ, "PYTHONIOENCODING": "utf-8"}
    return subprocess.Popen(  # noqa: S603
        [sys.executable, "-m", "glitcha", *args],
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        env=env,
        encoding="utf-8",
        errors="replace",
    )


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m invocation with no args shows help and exits 0."""
    monkeypatch.setattr(sys, "argv", ["glitcha"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("glitcha.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_module_entry_maps_errors_to_exit_codes(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """An unknown config section exits 22 through the module entry."""
    monkeypatch.setattr(sys, "argv", ["glitcha", "config", "--section", "no_such_section"], raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("glitcha.__main__", run_name="__main__")

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exc.value.code == 22
    assert "not found" in plain_err


@pytest.mark.os_agnostic
def test_module_entry_sample_prints_glyph_lines(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """sample through the module entry prints glyph set members."""
    monkeypatch.setattr(
        sys, "argv", ["glitcha", "sample", "--count", "3", "--min-length", "1", "--max-length", "1"], raising=False
    )

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("glitcha.__main__", run_name="__main__")

    lines = capsys.readouterr().out.splitlines()
    assert exc.value.code == 0
    assert len(lines) == 3
    assert all(line in GLYPH_SET for line in lines)


@pytest.mark.os_agnostic
def test_module_entry_cli_exports_all_registered_commands() -> None:
    """The CLI facade exports every registered command."""
    expected_commands = {"cli_config", "cli_info", "cli_run", "cli_sample", "cli_streams"}
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}
    assert expected_commands.issubset(exported)


@pytest.mark.os_agnostic
def test_module_entry_subprocess_help() -> None:
    """`python -m glitcha --help` works in a real process."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "glitcha", "--help"],
        capture_output=True,
        timeout=30,
        check=False,
        # rich-click writes Unicode that cp1252 cannot decode
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert "Usage:" in result.stdout
    assert __init__conf__.shell_command in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    """`python -m glitcha --version` outputs the version."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "glitcha", "--version"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_entry_main_invokes_cli_with_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """entry.main() wires production services and invokes the CLI."""
    monkeypatch.setattr(sys, "argv", ["glitcha", "--help"])

    exit_code = entry.main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Usage:" in captured.out


@pytest.mark.os_agnostic
def test_entry_main_returns_config_error_for_invalid_settings(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    clear_config_cache: None,
) -> None:
    """An invalid --set value for [glitch] exits 78 before printing."""
    monkeypatch.setattr(sys, "argv", ["glitcha", "--set", "glitch.interval_ms=0", "run"])

    exit_code = entry.main()

    captured = capsys.readouterr()
    assert exit_code == 78
    assert captured.out == ""


# ======================== real signals ========================


@posix_only
@pytest.mark.posix_only
@pytest.mark.parametrize("signum", [signal.SIGTERM, signal.SIGINT])
def test_signal_after_first_line_exits_zero(signum: signal.Signals) -> None:
    """The printer stops promptly on SIGINT or SIGTERM and exits 0."""
    proc = _spawn_glitcha("run", "--interval-ms", "50")
    try:
        assert proc.stdout is not None
        first = proc.stdout.readline()
        assert first.strip()

        sent_at = time.monotonic()
        proc.send_signal(signum)
        proc.stdout.read()
        returncode = proc.wait(timeout=10)
        elapsed = time.monotonic() - sent_at
    finally:
        if proc.poll() is None:
            proc.kill()
            proc.wait()

    assert returncode == 0
    assert elapsed < 5.0


@posix_only
@pytest.mark.posix_only
@pytest.mark.parametrize("signum", [signal.SIGTERM, signal.SIGINT])
def test_termination_during_startup_exits_zero(signum: signal.Signals) -> None:
    """A signal while the CLI stack is still importing ends the process with 0."""
    proc = _spawn_glitcha("run")
    try:
        time.sleep(STARTUP_SIGNAL_DELAY_SECONDS)
        proc.send_signal(signum)
        proc.communicate(timeout=15)
    finally:
        if proc.poll() is None:
            proc.kill()
            proc.wait()

    assert proc.returncode == 0


@posix_only
@pytest.mark.posix_only
def test_startup_guard_routes_signals_into_its_event_and_restores_handlers() -> None:
    """While the guard is active SIGTERM only sets the event; afterwards the old handler is back."""
    before = signal.getsignal(signal.SIGTERM)

    with entry.startup_termination_guard() as stop:
        os.kill(os.getpid(), signal.SIGTERM)
        assert stop.wait(2.0)

    assert signal.getsignal(signal.SIGTERM) == before


@posix_only
@pytest.mark.posix_only
def test_entry_main_signal_during_startup_prints_nothing_and_exits_zero(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    clear_config_cache: None,
) -> None:
    """SIGTERM before the printer starts means no lines and exit code 0."""
    real_build = composition.build_production

    def _build_after_signal(*, stop: threading.Event | None = None) -> composition.AppServices:
        os.kill(os.getpid(), signal.SIGTERM)
        return real_build(stop=stop)

    monkeypatch.setattr(composition, "build_production", _build_after_signal)
    monkeypatch.setattr(sys, "argv", ["glitcha", "run"])
    before = signal.getsignal(signal.SIGTERM)

    exit_code = entry.main()

    assert exit_code == 0
    assert capsys.readouterr().out == ""
    assert signal.getsignal(signal.SIGTERM) == before
