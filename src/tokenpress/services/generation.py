"""Theme generation service: token document in, preset module out.

This service:
- Parses the token document using TokenFileParser
- Validates its structure, failing with the offending path
- Builds the theme structure from the four document sections
- Renders the preset module and writes it to disk
"""

from dataclasses import dataclass
from pathlib import Path

from tokenpress.config import Settings, get_settings
from tokenpress.domain.theme import ThemeStructure
from tokenpress.exceptions import InvalidTokenStructureError, OutputExistsError
from tokenpress.logging_config import LogContext, get_logger
from tokenpress.parsers.token_file import TokenFileParser
from tokenpress.services.emitter import render_preset_module
from tokenpress.services.theme import create_theme_structure
from tokenpress.services.validation import ValidationResult, validate_token_structure

logger = get_logger(__name__)


@dataclass
class GenerationResult:
    """Result summary from a generation run."""

    input_path: Path
    output_path: Path
    theme: ThemeStructure
    content: str

    @property
    def bytes_written(self) -> int:
        return len(self.content.encode("utf-8"))


class ThemeGenerationService:
    """Service for compiling a token document into a preset module."""

    def __init__(
        self,
        settings: Settings | None = None,
        parser: TokenFileParser | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._parser = parser or TokenFileParser()

    def validate_file(self, input_path: Path) -> ValidationResult:
        """Parse and validate a token document without generating anything.

        Raises:
            TokenFileNotFoundError: If the file does not exist.
            InvalidTokenJSONError: If the file is not valid JSON.
        """
        tokens = self._parser.parse(input_path)
        return validate_token_structure(tokens)

    def build_theme(self, input_path: Path) -> ThemeStructure:
        """Parse, validate and transform a token document.

        Raises:
            TokenFileNotFoundError: If the file does not exist.
            InvalidTokenJSONError: If the file is not valid JSON.
            InvalidTokenStructureError: If structural validation fails.
        """
        tokens = self._parser.parse(input_path)
        validation = validate_token_structure(tokens)
        if not validation:
            raise InvalidTokenStructureError(validation.path, validation.reason)
        return create_theme_structure(tokens, self._settings)

    def generate(
        self, input_path: Path, output_path: Path, force: bool = False
    ) -> GenerationResult:
        """Compile input_path and write the preset module to output_path.

        Args:
            input_path: Token document to read.
            output_path: Module file to write; parent directories are created.
            force: Overwrite output_path if it already exists.

        Returns:
            GenerationResult with the theme and rendered module.

        Raises:
            OutputExistsError: If output_path exists and force is False.
            TokenPressError: For any input error, see build_theme.
        """
        if output_path.exists() and not force:
            raise OutputExistsError(output_path)

        with LogContext(input_file=str(input_path)):
            theme = self.build_theme(input_path)
            content = render_preset_module(theme, input_path.name, self._settings)

            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content, encoding="utf-8")

            result = GenerationResult(
                input_path=input_path,
                output_path=output_path,
                theme=theme,
                content=content,
            )
            logger.info(
                "theme_generated",
                output_file=str(output_path),
                bytes_written=result.bytes_written,
            )
        return result
