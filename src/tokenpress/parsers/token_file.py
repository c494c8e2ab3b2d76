"""Token document parser for Tokens Studio JSON exports."""

import json
from pathlib import Path
from typing import Any

from tokenpress.exceptions import InvalidTokenJSONError, TokenFileNotFoundError


class TokenFileParser:
    """Parser for design-token JSON documents.

    Reads the whole document in one pass and returns the parsed mapping,
    keyed by section identifier (``aura/primitive``, ``aura/semantic``, ...).
    """

    ENCODING = "utf-8"

    def parse(self, file_path: str | Path) -> dict[str, Any]:
        """Parse a token document.

        Args:
            file_path: Path to the JSON file.

        Returns:
            The parsed top-level mapping.

        Raises:
            TokenFileNotFoundError: If the file does not exist.
            InvalidTokenJSONError: If the file is not valid JSON, or its top
                level is not an object.
        """
        path = Path(file_path)
        if not path.is_file():
            raise TokenFileNotFoundError(path)

        return self.parse_text(path.read_text(encoding=self.ENCODING), source=path)

    def parse_text(self, content: str, source: str | Path = "<string>") -> dict[str, Any]:
        """Parse a token document already read into memory."""
        try:
            document = json.loads(content)
        except json.JSONDecodeError as e:
            raise InvalidTokenJSONError(source, str(e)) from e

        if not isinstance(document, dict):
            raise InvalidTokenJSONError(
                source, f"expected an object at the top level, got {type(document).__name__}"
            )
        return document
