"""Tests for the rendering helpers (cli/show.py)."""

from __future__ import annotations

import json
from typing import Any

import pytest

from layerconf.cli.show import (
    config_as_dict,
    format_value,
    render_color_decision,
    render_config,
    render_explanation,
)
from layerconf.core.models import Explanation, ResolvedConfig


def _config() -> ResolvedConfig:
    return ResolvedConfig(
        values={"pager": "less", "color": False, "server": {"port": 80}},
        provenance={"pager": "default", "color": "flag", "server": "user-config"},
    )


class TestFormatValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "true"),
            (False, "false"),
            (None, "null"),
            ("vim", "vim"),
            (3, "3"),
            ({"b": 1, "a": 2}, '{"a": 2, "b": 1}'),
            (["x", "y"], '["x", "y"]'),
        ],
    )
    def test_rendering(self, value: Any, expected: str) -> None:
        assert format_value(value) == expected


class TestConfigAsDict:
    def test_sorted_with_sources(self) -> None:
        data = config_as_dict(_config())
        assert list(data) == ["color", "pager", "server"]
        assert data["server"] == {"value": {"port": 80}, "source": "user-config"}


class TestRenderConfig:
    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_config(_config(), as_json=True)
        data = json.loads(capsys.readouterr().out)
        assert data["color"] == {"value": False, "source": "flag"}

    def test_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_config(_config())
        out = capsys.readouterr().out
        assert "pager" in out
        assert "less" in out
        assert "user-config" in out

    def test_markup_in_values_is_literal(self, capsys: pytest.CaptureFixture[str]) -> None:
        config = ResolvedConfig(values={"prompt": "[bold]>"}, provenance={"prompt": "flag"})
        render_config(config)
        assert "[bold]>" in capsys.readouterr().out


class TestRenderExplanation:
    def test_value_and_source(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_explanation(Explanation(key="editor", value="vim", source="env"))
        out = capsys.readouterr().out
        assert "vim" in out
        assert "from env" in out

    def test_markup_in_value_is_escaped(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_explanation(Explanation(key="prompt", value="[red]$", source="flag"))
        assert "[red]$" in capsys.readouterr().out


class TestRenderColorDecision:
    def test_on(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_color_decision(True, "output is a terminal")
        out = capsys.readouterr().out
        assert "on" in out
        assert "output is a terminal" in out

    def test_off(self, capsys: pytest.CaptureFixture[str]) -> None:
        render_color_decision(False, "TERM is 'dumb'")
        assert "off" in capsys.readouterr().out
