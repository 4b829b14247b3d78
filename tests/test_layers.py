"""Tests for the pure layer builders (core/layers.py)."""

from __future__ import annotations

import pytest

from layerconf.core.layers import (
    StaticLayerProvider,
    build_default_layer,
    build_env_layer,
    build_flag_layer,
    coerce_scalar,
    env_name_to_key,
    resolve_env_alias,
)
from layerconf.core.models import EnvAlias, LayerSource

EDITOR = EnvAlias("editor", ("EDITOR", "VISUAL"))


# ---------------------------------------------------------------------------
# Flags and defaults
# ---------------------------------------------------------------------------

class TestBuildFlagLayer:
    def test_drops_unset_options(self) -> None:
        layer = build_flag_layer({"--color": None, "environment": "qa"})
        assert dict(layer.values) == {"environment": "qa"}
        assert layer.source is LayerSource.FLAG

    def test_keeps_falsy_values(self) -> None:
        layer = build_flag_layer({"retries": 0, "name": ""})
        assert dict(layer.values) == {"retries": 0, "name": ""}


class TestBuildDefaultLayer:
    def test_source(self) -> None:
        layer = build_default_layer({"pager": "less"})
        assert layer.source is LayerSource.DEFAULT
        assert layer.values["pager"] == "less"


# ---------------------------------------------------------------------------
# Env aliases
# ---------------------------------------------------------------------------

class TestResolveEnvAlias:
    def test_later_alias_used_when_first_missing(self) -> None:
        assert resolve_env_alias({"VISUAL": "vim"}, EDITOR) == "vim"

    def test_first_alias_wins(self) -> None:
        assert resolve_env_alias({"EDITOR": "nano", "VISUAL": "vim"}, EDITOR) == "nano"

    def test_none_present(self) -> None:
        assert resolve_env_alias({}, EDITOR) is None

    def test_empty_string_counts_as_present(self) -> None:
        assert resolve_env_alias({"EDITOR": "", "VISUAL": "vim"}, EDITOR) == ""


class TestBuildEnvLayer:
    def test_alias_fallback(self) -> None:
        layer = build_env_layer({"VISUAL": "vim"}, [EDITOR])
        assert layer.values["editor"] == "vim"
        assert layer.source is LayerSource.ENV

    def test_absent_alias_leaves_key_out(self) -> None:
        layer = build_env_layer({"HOME": "/home/u"}, [EDITOR])
        assert "editor" not in layer.values

    def test_unrelated_variables_ignored_without_prefix(self) -> None:
        layer = build_env_layer({"LAYERCONF_REGION": "eu"}, [EDITOR])
        assert dict(layer.values) == {}

    def test_prefix_maps_to_kebab_keys(self) -> None:
        layer = build_env_layer({"LAYERCONF_LOG_LEVEL": "debug"}, prefix="LAYERCONF_")
        assert layer.values["log-level"] == "debug"

    def test_prefix_values_are_coerced(self) -> None:
        layer = build_env_layer(
            {"LAYERCONF_RETRIES": "5", "LAYERCONF_COLOR": "TRUE"},
            prefix="LAYERCONF_",
        )
        assert layer.values["retries"] == 5
        assert layer.values["color"] is True

    def test_prefix_never_overrides_alias_key(self) -> None:
        layer = build_env_layer(
            {"LAYERCONF_EDITOR": "emacs"},
            [EDITOR],
            prefix="LAYERCONF_",
        )
        assert "editor" not in layer.values

    def test_alias_names_not_rescanned_by_prefix(self) -> None:
        env_alias = EnvAlias("environment", ("LAYERCONF_ENV",))
        layer = build_env_layer({"LAYERCONF_ENV": "staging"}, [env_alias], prefix="LAYERCONF_")
        assert dict(layer.values) == {"environment": "staging"}

    def test_bare_prefix_ignored(self) -> None:
        layer = build_env_layer({"LAYERCONF_": "x"}, prefix="LAYERCONF_")
        assert dict(layer.values) == {}


class TestCoerceScalar:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("true", True),
            ("False", False),
            ("42", 42),
            ("-7", -7),
            (" spaced ", "spaced"),
            ("1.5", "1.5"),
            ("", ""),
        ],
    )
    def test_coercion(self, raw: str, expected: object) -> None:
        assert coerce_scalar(raw) == expected

    def test_env_name_to_key(self) -> None:
        assert env_name_to_key("LAYERCONF_LOG_LEVEL", "LAYERCONF_") == "log-level"


class TestStaticLayerProvider:
    def test_returns_its_layer(self) -> None:
        layer = build_default_layer({"a": 1})
        provider = StaticLayerProvider(layer)
        assert provider.source is LayerSource.DEFAULT
        assert provider.load() is layer
