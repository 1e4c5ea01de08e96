"""Command line coverage for ``info``, ``emit``, and ``prepare``."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from lib_log_sink import __init__conf__
from lib_log_sink import cli as cli_mod
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


@pytest.fixture
def quiet_transports(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_SINK_EMAIL_ENABLED", "0")
    monkeypatch.setenv("LOG_SINK_WEBHOOK_ENABLED", "0")


def run_cli(args: list[str]) -> tuple[int, str]:
    result = CliRunner().invoke(cli_mod.cli, args, prog_name=__init__conf__.shell_command)
    return result.exit_code, result.output


def test_bare_invocation_prints_the_banner() -> None:
    code, output = run_cli([])
    assert code == 0
    assert output.startswith("Info for lib_log_sink:")


def test_info_lists_the_version() -> None:
    code, output = run_cli(["info"])
    assert code == 0
    assert __init__conf__.version in output


def test_version_flag_prints_only_the_version() -> None:
    code, output = run_cli(["--version"])
    assert code == 0
    assert output.strip() == __init__conf__.version


def test_emit_writes_the_named_severity(tmp_path: Path, quiet_transports: None) -> None:
    code, _ = run_cli(["emit", "error", "disk full", "--id", "db1", "--logs-dir", str(tmp_path)])
    assert code == 0
    line = (tmp_path / "error-db1.log").read_text(encoding="utf-8")
    assert line.startswith("ERROR ")
    assert line.endswith(": disk full\n")


def test_emit_accepts_an_explicit_file(tmp_path: Path, quiet_transports: None) -> None:
    run_cli(["emit", "SUCCESS", "deployed", "--file", "releases", "--logs-dir", str(tmp_path)])
    assert (tmp_path / "releases.log").read_text(encoding="utf-8").startswith("Success ")


def test_emit_respects_the_enabled_switch(tmp_path: Path, quiet_transports: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_SINK_ENABLED", "off")
    code, _ = run_cli(["emit", "info", "hidden", "--logs-dir", str(tmp_path)])
    assert code == 0
    assert list(tmp_path.iterdir()) == []


def test_emit_rejects_unknown_severities() -> None:
    code, output = run_cli(["emit", "loud", "x"])
    assert code == 2
    assert "loud" in output


def test_prepare_creates_then_leaves_directory(tmp_path: Path) -> None:
    target = tmp_path / "wp-logs"
    first = run_cli(["prepare", str(target)])
    second = run_cli(["prepare", str(target)])
    assert first == (0, f"created {target}\n")
    assert second == (0, f"{target} already exists; left untouched\n")
    assert (target / ".htaccess").is_file()


def test_main_returns_exit_codes(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    assert cli_mod.main(["info"]) == 0
    assert "Info for lib_log_sink" in capsys.readouterr().out
    assert cli_mod.main(["emit"]) != 0


def test_no_traceback_option_switches_tracebacks_off(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    code, _ = run_cli(["--no-traceback", "info"])

    assert code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_omitted_traceback_option_keeps_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)

    run_cli(["info"])

    assert lib_cli_exit_tools.config.traceback is True


def test_main_delegates_to_run_cli_and_restores_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)
    recorded: dict[str, object] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        result = CliRunner().invoke(command, argv or [])
        if result.exception is not None:
            raise result.exception
        recorded["prog_name"] = prog_name
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    assert cli_mod.main(["--traceback", "info"]) == 0
    assert recorded == {"prog_name": __init__conf__.shell_command, "traceback": True}
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_main_consumes_sys_argv(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "--version"], raising=False)

    assert cli_mod.main() == 0
    assert capsys.readouterr().out.strip() == __init__conf__.version


def test_use_dotenv_flag_loads_the_nearest_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, quiet_transports: None
) -> None:
    from lib_log_sink import config

    logs = tmp_path / "logs"
    (tmp_path / ".env").write_text(f"LOG_SINK_DIR={logs}\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    config._reset_dotenv_state_for_testing()
    try:
        code, _ = run_cli(["--use-dotenv", "emit", "notice", "from dotenv"])
    finally:
        config._reset_dotenv_state_for_testing()
    assert code == 0
    assert (logs / "notice.log").is_file()
