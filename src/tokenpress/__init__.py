from tokenpress.domain.theme import ColorScheme, ThemeStructure
from tokenpress.domain.tokens import (
    MalformedNode,
    ShadowDescriptor,
    TokenContainer,
    TokenLeaf,
    parse_node,
)

__all__ = [
    "ColorScheme",
    "MalformedNode",
    "ShadowDescriptor",
    "ThemeStructure",
    "TokenContainer",
    "TokenLeaf",
    "parse_node",
]

__version__ = "0.1.0"
