"""File parsers for importing design-token documents."""

from tokenpress.parsers.token_file import TokenFileParser

__all__ = [
    "TokenFileParser",
]
