"""Rename rules that flatten nested token paths into camelCase keys.

Design tokens are authored with hierarchical paths (``hover.border.color``)
while the theming engine expects flat properties (``hoverBorderColor``).
TOKEN_TRANSFORMATIONS is a priority list: the first rule whose segments
match the tail of a path wins, so longer, more specific rules come first.
"""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class TransformRule:
    """A dotted path suffix and the flat key it is renamed to."""

    pattern: tuple[str, ...]
    name: str

    @classmethod
    def parse(cls, dotted: str, name: str) -> "TransformRule":
        return cls(pattern=tuple(dotted.split(".")), name=name)

    @property
    def depth(self) -> int:
        return len(self.pattern)

    @property
    def dotted(self) -> str:
        return ".".join(self.pattern)

    def matches(self, path: Sequence[str]) -> bool:
        """Check whether the trailing segments of path equal the pattern."""
        if len(path) < self.depth:
            return False
        return tuple(path[-self.depth :]) == self.pattern


TOKEN_TRANSFORMATIONS: tuple[TransformRule, ...] = tuple(
    TransformRule.parse(dotted, name)
    for dotted, name in (
        ("hover.border.color", "hoverBorderColor"),
        ("filled.focus.background", "filledFocusBackground"),
        ("filled.hover.background", "filledHoverBackground"),
        ("float.label.active.color", "floatLabelActiveColor"),
        ("float.label.color", "floatLabelColor"),
        ("float.label.focus.color", "floatLabelFocusColor"),
        ("float.label.invalid.color", "floatLabelInvalidColor"),
        ("focus.border.color", "focusBorderColor"),
        ("invalid.border.color", "invalidBorderColor"),
        ("invalid.placeholder.color", "invalidPlaceholderColor"),
        ("selected.focus.background", "selectedFocusBackground"),
        ("selected.focus.color", "selectedFocusColor"),
        ("active.background", "activeBackground"),
        ("active.color", "activeColor"),
        ("anchor.gutter", "anchorGutter"),
        ("border.color", "borderColor"),
        ("border.radius", "borderRadius"),
        ("contrast.color", "contrastColor"),
        ("disabled.background", "disabledBackground"),
        ("disabled.color", "disabledColor"),
        ("disabled.opacity", "disabledOpacity"),
        ("filled.background", "filledBackground"),
        ("focus.background", "focusBackground"),
        ("focus.color", "focusColor"),
        ("focus.ring", "focusRing"),
        ("font.size", "fontSize"),
        ("font.weight", "fontWeight"),
        ("form.field", "formField"),
        ("hover.background", "hoverBackground"),
        ("hover.color", "hoverColor"),
        ("hover.muted.color", "hoverMutedColor"),
        ("icon.size", "iconSize"),
        ("icon.color", "iconColor"),
        ("muted.color", "mutedColor"),
        ("option.group", "optionGroup"),
        ("placeholder.color", "placeholderColor"),
        ("selected.background", "selectedBackground"),
        ("selected.color", "selectedColor"),
        ("submenu.icon", "submenuIcon"),
        ("submenu.label", "submenuLabel"),
        ("transition.duration", "transitionDuration"),
    )
)

# Parent keys whose container values are expanded instead of nested as-is.
TRANSFORM_PARENTS: frozenset[str] = frozenset(
    {
        "active",
        "anchor",
        "border",
        "contrast",
        "disabled",
        "filled",
        "float",
        "focus",
        "font",
        "form",
        "hover",
        "icon",
        "invalid",
        "muted",
        "option",
        "placeholder",
        "selected",
        "submenu",
        "transition",
    }
)


def find_transformation(path: Sequence[str]) -> TransformRule | None:
    """Return the highest-priority rule matching path, if any."""
    for rule in TOKEN_TRANSFORMATIONS:
        if rule.matches(path):
            return rule
    return None


def should_transform(path: Sequence[str]) -> bool:
    return find_transformation(path) is not None


def get_transformed_key(path: Sequence[str]) -> str:
    """Return the flat key for path, or its last segment when no rule matches."""
    rule = find_transformation(path)
    if rule is not None:
        return rule.name
    return path[-1]
