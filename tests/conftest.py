import json
from pathlib import Path
from typing import Any

import pytest

from tokenpress.config import Settings


def leaf(token_type: str, value: Any) -> dict[str, Any]:
    return {"$type": token_type, "$value": value}


def drop_shadow(
    x: str = "0px",
    y: str = "2px",
    blur: str = "4px",
    spread: str = "0px",
    color: str = "#000000",
) -> dict[str, str]:
    return {
        "x": x,
        "y": y,
        "blur": blur,
        "spread": spread,
        "color": color,
        "type": "dropShadow",
    }


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def border_radius_tokens() -> dict[str, Any]:
    return {
        "border": {
            "radius": {
                "none": leaf("borderRadius", "0"),
                "xs": leaf("borderRadius", "2px"),
                "sm": leaf("borderRadius", "4px"),
                "md": leaf("borderRadius", "6px"),
                "lg": leaf("borderRadius", "8px"),
                "xl": leaf("borderRadius", "12px"),
            }
        }
    }


@pytest.fixture
def primary_tokens() -> dict[str, Any]:
    return {
        "primary": {
            "color": leaf("color", "#000000"),
            "contrast": {"color": leaf("color", "#ffffff")},
        }
    }


@pytest.fixture
def token_document(primary_tokens: dict[str, Any]) -> dict[str, Any]:
    """A small but complete Tokens Studio export."""
    return {
        "aura/primitive": {
            "color": {
                "primary": leaf("color", "#000000"),
                "secondary": leaf("color", "#ffffff"),
            },
            "border": {"radius": {"md": leaf("borderRadius", "6px")}},
        },
        "aura/semantic": {
            **primary_tokens,
            "transition": {"duration": leaf("duration", "0.2s")},
            "focus": {
                "ring": {
                    "width": leaf("borderWidth", "1px"),
                    "style": leaf("string", "solid"),
                    "shadow": leaf("boxShadow", drop_shadow("0", "0", "0", "0", "rgba(0, 0, 0, 0)")),
                }
            },
            "form": {
                "field": {
                    "padding": {
                        "x": leaf("spacing", "0.75rem"),
                        "y": leaf("spacing", "0.5rem"),
                    },
                    "focus": {"border": {"color": leaf("color", "{primary.color}")}},
                }
            },
        },
        "aura/semantic/light": {
            "surface": {"0": leaf("color", "#ffffff")},
        },
        "aura/semantic/dark": {
            "surface": {"0": leaf("color", "#09090b")},
        },
        "$metadata": {"tokenSetOrder": ["aura/primitive", "aura/semantic"]},
    }


@pytest.fixture
def token_file(tmp_path: Path, token_document: dict[str, Any]) -> Path:
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps(token_document), encoding="utf-8")
    return path


@pytest.fixture
def invalid_token_file(tmp_path: Path) -> Path:
    path = tmp_path / "invalid-tokens.json"
    document = {
        "aura/semantic": {
            "padding": {"x": {"$type": "spacing"}},
        }
    }
    path.write_text(json.dumps(document), encoding="utf-8")
    return path
