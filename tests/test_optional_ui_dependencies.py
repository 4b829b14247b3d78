"""Regression tests for the optional Rich UI dependency.

These tests verify bootstrap commands and every output path keep working
with plain text when Rich cannot be imported.
"""

from __future__ import annotations

import json
import sys

import pytest

from layerconf.cli import exit_codes
from layerconf.cli.app import cli, main
from layerconf.cli.console import get_rich_console, strip_markup
from layerconf.exceptions import MissingDependencyError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("rich", "rich.console", "rich.table", "rich.text", "rich.markup", "rich.logging"):
        monkeypatch.setitem(sys.modules, name, None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_get_rich_console_raises_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(MissingDependencyError, match="rich is not installed"):
        get_rich_console()


def test_show_plain_table_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)

    assert main(["show"]) == exit_codes.SUCCESS
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == ["Key", "Value", "Source"]
    assert any(line.split() == ["environment", "development", "default"] for line in lines)


def test_show_json_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)

    assert main(["show", "--json"]) == exit_codes.SUCCESS
    assert json.loads(capsys.readouterr().out)["pager"]["value"] == "less"


def test_get_plain_output_has_no_markup(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)

    main(["get", "editor"])
    assert capsys.readouterr().out.strip() == "vi  (from default)"


def test_errors_render_plain_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        cli(["--color", "--no-color", "show"])
    assert exc_info.value.code == exit_codes.USAGE_ERROR
    err = capsys.readouterr().err
    assert err.startswith("Error: ")
    assert "[bold red]" not in err


def test_strip_markup() -> None:
    assert strip_markup("[bold red]Error:[/bold red] boom") == "Error: boom"
