"""Theme structure assembled from the processed document sections."""

from dataclasses import dataclass, field
from typing import Any

ProcessedTokens = dict[str, Any]


@dataclass(frozen=True)
class ColorScheme:
    """Light and dark overlays applied on top of the semantic tokens."""

    light: ProcessedTokens = field(default_factory=dict)
    dark: ProcessedTokens = field(default_factory=dict)

    def to_dict(self) -> ProcessedTokens:
        return {"light": self.light, "dark": self.dark}


@dataclass(frozen=True)
class ThemeStructure:
    """The final theme handed to the serializer.

    Shape:
        {"primitive": {...}, "semantic": {..., "colorScheme": {"light", "dark"}}}
    """

    primitive: ProcessedTokens = field(default_factory=dict)
    semantic: ProcessedTokens = field(default_factory=dict)
    color_scheme: ColorScheme = field(default_factory=ColorScheme)

    def to_dict(self) -> ProcessedTokens:
        """Return the merged plain-dict form of the theme."""
        return {
            "primitive": self.primitive,
            "semantic": {**self.semantic, "colorScheme": self.color_scheme.to_dict()},
        }
