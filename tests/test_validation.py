"""Tests for structural validation of token documents."""

import logging

import pytest

from tokenpress.services.validation import ValidationResult, validate_token_structure


def _leaf(token_type, value):
    return {"$type": token_type, "$value": value}


def _shadow(**overrides):
    shadow = {
        "x": "0px",
        "y": "2px",
        "blur": "4px",
        "spread": "0px",
        "color": "#000000",
        "type": "dropShadow",
    }
    shadow.update(overrides)
    return {key: value for key, value in shadow.items() if value is not None}


class TestValidStructures:
    def test_standard_tokens(self):
        tokens = {
            "color": _leaf("color", "#000000"),
            "padding": {
                "x": _leaf("spacing", "0.75rem"),
                "y": _leaf("spacing", "0.5rem"),
            },
        }

        result = validate_token_structure(tokens)

        assert result
        assert result == ValidationResult.ok()

    def test_shadow_values(self):
        tokens = {
            "shadow": {
                "sm": _leaf("boxShadow", _shadow()),
                "lg": _leaf("boxShadow", _shadow(y="4px", blur="8px", spread="2px")),
            }
        }

        assert validate_token_structure(tokens)

    def test_shadow_collections(self):
        tokens = {
            "overlay": _leaf("boxShadow", [_shadow(), _shadow(y="4px")]),
            "popover": _leaf("shadow", {"0": _shadow(), "1": _shadow()}),
        }

        assert validate_token_structure(tokens)

    def test_nested_tokens(self, border_radius_tokens):
        assert validate_token_structure(border_radius_tokens)

    def test_container_tokens_without_value(self, primary_tokens):
        assert validate_token_structure(primary_tokens)

    def test_themes_container_is_skipped(self):
        tokens = {"$themes": [], "broken": {"$type": "color"}}

        assert validate_token_structure(tokens)

    def test_numeric_keys_are_skipped(self):
        tokens = {"surface": {"0": "not a token", "50": _leaf("color", "#fafafa")}}

        assert validate_token_structure(tokens)

    def test_lists_are_accepted(self):
        assert validate_token_structure({"tokenSetOrder": ["aura/primitive"]})

    def test_sample_document(self, token_document):
        assert validate_token_structure(token_document)


class TestInvalidStructures:
    def test_rejects_tokens_without_value(self):
        tokens = {
            "color": _leaf("color", "#000000"),
            "padding": {"x": {"$type": "spacing"}},
        }

        result = validate_token_structure(tokens)

        assert not result
        assert result.path == ("padding", "x")
        assert result.location == "padding.x"
        assert "$value" in result.reason

    def test_rejects_tokens_without_type(self):
        tokens = {
            "color": {"$value": "#000000"},
            "padding": {"y": {"$value": "0.5rem"}},
        }

        result = validate_token_structure(tokens)

        assert not result
        assert result.path == ("color",)
        assert "$type" in result.reason

    @pytest.mark.parametrize(
        "value",
        [
            {"x": "0px", "blur": "4px", "color": "#000000"},
            {"y": "4px", "blur": "8px", "color": "#000000"},
            _shadow(type="innerShadow"),
            "0 0 4px #000",
            [_shadow(), {"x": "0", "y": "0"}],
            [],
            {},
        ],
    )
    def test_rejects_malformed_shadows(self, value):
        tokens = {"shadow": {"sm": _leaf("boxShadow", value)}}

        result = validate_token_structure(tokens)

        assert not result
        assert result.path == ("shadow", "sm")

    def test_rejects_scalar_where_object_expected(self):
        result = validate_token_structure({"primary": "#000"})

        assert not result
        assert result.path == ("primary",)
        assert result.reason == "not an object"

    def test_rejects_non_object_document(self):
        result = validate_token_structure("tokens")

        assert not result
        assert result.location == "<root>"

    def test_failure_is_logged(self, capsys, caplog):
        with caplog.at_level(logging.WARNING):
            validate_token_structure({"padding": {"x": {"$type": "spacing"}}})

        captured = capsys.readouterr()
        all_output = captured.out + captured.err + caplog.text
        assert "token_structure_invalid" in all_output
        assert "padding.x" in all_output
