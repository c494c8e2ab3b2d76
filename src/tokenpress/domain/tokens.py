"""Token tree domain models.

A parsed token document is a tree of three node kinds:

- TokenLeaf: a typed value (``{"$type": ..., "$value": ...}`` in the input)
- TokenContainer: a named grouping of further nodes
- MalformedNode: anything that is neither, kept so the engine can report
  where it sits instead of silently guessing

Plain scalars (str, int, float, bool) are already-resolved values and are
not wrapped.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

TYPE_KEY = "$type"
VALUE_KEY = "$value"
THEMES_KEY = "$themes"

SHADOW_TYPES = frozenset({"boxShadow", "shadow"})
DROP_SHADOW = "dropShadow"

PlainValue = Union[str, int, float, bool]


class TokenType(str, Enum):
    """Common Tokens Studio token types.

    The engine only special-cases box shadows; the other members exist so
    callers can compare against names instead of string literals.
    """

    COLOR = "color"
    DIMENSION = "dimension"
    SPACING = "spacing"
    SIZING = "sizing"
    BORDER_RADIUS = "borderRadius"
    FONT_SIZES = "fontSizes"
    FONT_WEIGHTS = "fontWeights"
    STRING = "string"
    BOX_SHADOW = "boxShadow"
    SHADOW = "shadow"


@dataclass(frozen=True)
class ShadowDescriptor:
    """A single drop shadow as exported by Tokens Studio."""

    x: str | None = None
    y: str | None = None
    blur: str | None = None
    spread: str | None = None
    color: str | None = None
    type: str = DROP_SHADOW

    FIELDS = ("x", "y", "blur", "spread", "color")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "ShadowDescriptor":
        return cls(
            x=_as_text(raw.get("x")),
            y=_as_text(raw.get("y")),
            blur=_as_text(raw.get("blur")),
            spread=_as_text(raw.get("spread")),
            color=_as_text(raw.get("color")),
            type=str(raw.get("type", "")),
        )

    @staticmethod
    def is_descriptor(raw: Any) -> bool:
        """Check whether a raw value carries the dropShadow discriminant."""
        return isinstance(raw, Mapping) and raw.get("type") == DROP_SHADOW

    @staticmethod
    def looks_like_descriptor(raw: Any) -> bool:
        """Check the minimal shape the validator requires of a shadow."""
        return (
            isinstance(raw, Mapping)
            and "x" in raw
            and "y" in raw
            and raw.get("type") == DROP_SHADOW
        )

    def to_css(self) -> str:
        """Render as ``"{x} {y} {blur} {spread} {color}"``.

        Fields that are absent are left out rather than rendered as a
        placeholder.
        """
        parts = [getattr(self, name) for name in self.FIELDS]
        return " ".join(part for part in parts if part is not None)


@dataclass(frozen=True)
class TokenLeaf:
    """A typed token value."""

    type: str
    value: Any

    @property
    def is_shadow(self) -> bool:
        return self.type == TokenType.BOX_SHADOW.value


@dataclass(frozen=True)
class TokenContainer:
    """A named grouping of token nodes, in document order."""

    children: dict[str, "TokenNode"] = field(default_factory=dict)

    def get(self, key: str) -> "TokenNode | None":
        return self.children.get(key)

    def without(self, *keys: str) -> "TokenContainer":
        """Return a copy of this container with the given children removed."""
        return TokenContainer(
            {k: v for k, v in self.children.items() if k not in keys}
        )

    def __bool__(self) -> bool:
        return bool(self.children)


@dataclass(frozen=True)
class MalformedNode:
    """A node that is neither a leaf, a container, nor a plain value."""

    raw: Any
    reason: str


TokenNode = Union[TokenLeaf, TokenContainer, MalformedNode, PlainValue]


def is_leaf_mapping(raw: Any) -> bool:
    """Check whether a raw mapping is a well-formed leaf."""
    return isinstance(raw, Mapping) and TYPE_KEY in raw and VALUE_KEY in raw


def parse_node(raw: Any) -> TokenNode:
    """Convert parsed JSON into the token tree model.

    Args:
        raw: A value produced by json.load, or an already-parsed node.

    Returns:
        The corresponding TokenNode. Input that cannot be classified becomes
        a MalformedNode carrying the reason.
    """
    if isinstance(raw, (TokenLeaf, TokenContainer, MalformedNode)):
        return raw
    if isinstance(raw, (str, int, float, bool)):
        return raw
    if isinstance(raw, Mapping):
        if is_leaf_mapping(raw):
            return TokenLeaf(type=str(raw[TYPE_KEY]), value=raw[VALUE_KEY])
        if VALUE_KEY in raw:
            return MalformedNode(raw, f"token has {VALUE_KEY} but no {TYPE_KEY}")
        if TYPE_KEY in raw:
            return MalformedNode(raw, f"token has {TYPE_KEY} but no {VALUE_KEY}")
        return TokenContainer({str(k): parse_node(v) for k, v in raw.items()})
    if raw is None:
        return MalformedNode(raw, "token is null")
    return MalformedNode(raw, f"unexpected {type(raw).__name__} in token tree")


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)
