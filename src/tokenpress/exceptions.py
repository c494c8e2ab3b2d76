"""Exception hierarchy for tokenpress.

All tokenpress exceptions inherit from TokenPressError. This allows catching
every application error with a single base class at the CLI boundary while
preserving specificity for individual error types.

Only boundary conditions raise: anomalies inside the token tree are logged
and recovered by the engine instead.
"""

from pathlib import Path
from typing import Any


class TokenPressError(Exception):
    """Base exception for all tokenpress errors.

    Includes an error_code for machine-readable output and extra context.
    """

    error_code: str = "TOKENPRESS_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for structured output."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Token File Errors
# =============================================================================


class TokenFileError(TokenPressError):
    """Base exception for errors reading a token document."""

    error_code = "TOKEN_FILE_ERROR"


class TokenFileNotFoundError(TokenFileError):
    """Raised when the token document does not exist."""

    error_code = "TOKEN_FILE_NOT_FOUND"

    def __init__(self, path: Path | str) -> None:
        super().__init__(
            f"Tokens file not found at: {path}",
            context={"path": str(path)},
        )


class InvalidTokenJSONError(TokenFileError):
    """Raised when the token document is not valid JSON."""

    error_code = "INVALID_TOKEN_JSON"

    def __init__(self, path: Path | str, detail: str) -> None:
        super().__init__(
            f"Invalid JSON in tokens file: {detail}",
            context={"path": str(path), "detail": detail},
        )


# =============================================================================
# Validation Errors
# =============================================================================


class TokenValidationError(TokenPressError):
    """Base exception for token validation errors."""

    error_code = "TOKEN_VALIDATION_ERROR"


class InvalidTokenStructureError(TokenValidationError):
    """Raised when a token document fails structural validation."""

    error_code = "INVALID_TOKEN_STRUCTURE"

    def __init__(self, path: tuple[str, ...], reason: str) -> None:
        location = ".".join(path) or "<root>"
        super().__init__(
            f"Invalid token structure at {location}: {reason}",
            context={"path": location, "reason": reason},
        )
        self.path = path
        self.reason = reason


# =============================================================================
# Output Errors
# =============================================================================


class OutputError(TokenPressError):
    """Base exception for errors writing generated output."""

    error_code = "OUTPUT_ERROR"


class OutputExistsError(OutputError):
    """Raised when the output file exists and overwriting was not forced."""

    error_code = "OUTPUT_EXISTS"

    def __init__(self, path: Path | str) -> None:
        super().__init__(
            f"Output file {path} already exists. Use --force to overwrite.",
            context={"path": str(path)},
        )
