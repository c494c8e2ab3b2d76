"""Tests for theme assembly from document sections."""

import logging

from tokenpress.config import Settings
from tokenpress.domain.theme import ColorScheme, ThemeStructure
from tokenpress.services.theme import (
    create_theme_structure,
    process_color_scheme,
    process_primitive_tokens,
    process_semantic_tokens,
)


def _leaf(value):
    return {"$type": "color", "$value": value}


PRIMITIVE = {
    "aura/primitive": {
        "color": {"primary": _leaf("#000000"), "secondary": _leaf("#ffffff")},
    }
}
PRIMITIVE_PROCESSED = {"color": {"primary": "#000000", "secondary": "#ffffff"}}

PRIMARY = {"primary": {"color": _leaf("#000000"), "contrast": {"color": _leaf("#ffffff")}}}
PRIMARY_PROCESSED = {"primary": {"color": "#000000", "contrastColor": "#ffffff"}}

SEMANTIC = {"aura/semantic": PRIMARY}
COLOR_SCHEME = {"aura/semantic/light": PRIMARY, "aura/semantic/dark": PRIMARY}


class TestProcessSections:
    def test_primitive_tokens(self, settings):
        result = process_primitive_tokens(PRIMITIVE, settings)

        assert result == PRIMITIVE_PROCESSED

    def test_semantic_tokens(self, settings):
        result = process_semantic_tokens(SEMANTIC, PRIMITIVE_PROCESSED, settings)

        assert result == PRIMARY_PROCESSED

    def test_color_scheme(self, settings):
        result = process_color_scheme(COLOR_SCHEME, PRIMITIVE_PROCESSED, settings)

        assert result == ColorScheme(light=PRIMARY_PROCESSED, dark=PRIMARY_PROCESSED)
        assert result.to_dict() == {"light": PRIMARY_PROCESSED, "dark": PRIMARY_PROCESSED}

    def test_light_and_dark_are_independent(self, settings):
        tokens = {"aura/semantic/dark": {"surface": {"0": _leaf("#09090b")}}}

        result = process_color_scheme(tokens, {}, settings)

        assert result.light == {}
        assert result.dark == {"surface": {"0": "#09090b"}}

    def test_missing_section_is_empty(self, settings):
        assert process_semantic_tokens({}, {}, settings) == {}

    def test_non_container_section_is_empty_and_logged(self, settings, capsys, caplog):
        tokens = {"aura/semantic": "not a section"}

        with caplog.at_level(logging.WARNING):
            result = process_semantic_tokens(tokens, {}, settings)

        assert result == {}
        captured = capsys.readouterr()
        assert "section_not_a_container" in captured.out + captured.err + caplog.text

    def test_token_format_selects_section_prefix(self):
        settings = Settings(token_format="lara")
        tokens = {
            "aura/semantic": PRIMARY,
            "lara/semantic": {"accent": _leaf("#123456")},
        }

        result = process_semantic_tokens(tokens, {}, settings)

        assert result == {"accent": "#123456"}


class TestCreateThemeStructure:
    def test_complete_theme(self, settings):
        tokens = {**PRIMITIVE, **SEMANTIC, **COLOR_SCHEME}

        theme = create_theme_structure(tokens, settings)

        assert isinstance(theme, ThemeStructure)
        assert theme.to_dict() == {
            "primitive": PRIMITIVE_PROCESSED,
            "semantic": {
                **PRIMARY_PROCESSED,
                "colorScheme": {"light": PRIMARY_PROCESSED, "dark": PRIMARY_PROCESSED},
            },
        }

    def test_empty_document(self, settings):
        theme = create_theme_structure({}, settings)

        assert theme.to_dict() == {
            "primitive": {},
            "semantic": {"colorScheme": {"light": {}, "dark": {}}},
        }

    def test_sample_document(self, token_document, settings):
        theme = create_theme_structure(token_document, settings)

        assert theme.primitive == {
            "color": {"primary": "#000000", "secondary": "#ffffff"},
            "borderRadius": {"md": "6px"},
        }
        assert theme.semantic == {
            "primary": {"color": "#000000", "contrastColor": "#ffffff"},
            "transitionDuration": "0.2s",
            "focusRing": {
                "width": "1px",
                "style": "solid",
                "shadow": "0 0 0 0 rgba(0, 0, 0, 0)",
            },
            "formField": {
                "paddingX": "0.75rem",
                "paddingY": "0.5rem",
                "focusBorderColor": "{primary.color}",
            },
        }
        assert theme.color_scheme.light == {"surface": {"0": "#ffffff"}}
        assert theme.color_scheme.dark == {"surface": {"0": "#09090b"}}

    def test_metadata_sections_are_ignored(self, token_document, settings):
        theme = create_theme_structure(token_document, settings)

        assert "tokenSetOrder" not in theme.to_dict()["semantic"]
        assert "$metadata" not in theme.to_dict()
