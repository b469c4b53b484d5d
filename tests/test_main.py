"""Tests for the command-line entry point (console modes only, the GUI needs a display)."""

import pytest

import main
from Calculator import Console
from Calculator import __main__ as entry


def test_parse_args_defaults_to_gui():
    args = entry.parse_args([])
    assert not args.console and not args.once


def test_console_and_once_are_exclusive():
    with pytest.raises(SystemExit):
        entry.parse_args(["--console", "--once"])


def test_main_runs_console(monkeypatch):
    calls = []
    monkeypatch.setattr(Console, "run", lambda: calls.append("run") or 0)
    assert entry.main(["--console"]) == 0
    assert calls == ["run"]


def test_main_runs_once(monkeypatch):
    calls = []
    monkeypatch.setattr(Console, "run_once", lambda: calls.append("once") or 0)
    assert entry.main(["--once"]) == 0
    assert calls == ["once"]


def test_cli_exits_with_main_status(monkeypatch):
    monkeypatch.setattr(Console, "run_once", lambda: 0)
    monkeypatch.setattr("sys.argv", ["expression-calculator", "--once"])
    with pytest.raises(SystemExit) as excinfo:
        entry.cli()
    assert excinfo.value.code == 0


def test_console_script_targets_package_entry_point():
    pyproject = (main.PROJECT_ROOT / "pyproject.toml").read_text(encoding="utf-8")
    assert 'expression-calculator = "Calculator.__main__:cli"' in pyproject
    assert "py-modules" not in pyproject


def test_check_files_exist_passes_in_repository():
    main.check_files_exist()
