"""Domain models for token documents and generated themes."""

from tokenpress.domain.theme import ColorScheme, ProcessedTokens, ThemeStructure
from tokenpress.domain.tokens import (
    MalformedNode,
    ShadowDescriptor,
    TokenContainer,
    TokenLeaf,
    TokenNode,
    TokenType,
    parse_node,
)

__all__ = [
    "ColorScheme",
    "MalformedNode",
    "ProcessedTokens",
    "ShadowDescriptor",
    "ThemeStructure",
    "TokenContainer",
    "TokenLeaf",
    "TokenNode",
    "TokenType",
    "parse_node",
]
