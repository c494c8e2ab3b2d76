"""Token transformation engine and generation services."""

from tokenpress.services.generation import GenerationResult, ThemeGenerationService
from tokenpress.services.processors import (
    process_form_field,
    process_list,
    process_navigation,
    process_transformable_token,
    resolve_token_value,
)
from tokenpress.services.serializer import format_object
from tokenpress.services.shadows import process_box_shadow
from tokenpress.services.theme import create_theme_structure
from tokenpress.services.validation import ValidationResult, validate_token_structure

__all__ = [
    "GenerationResult",
    "ThemeGenerationService",
    "ValidationResult",
    "create_theme_structure",
    "format_object",
    "process_box_shadow",
    "process_form_field",
    "process_list",
    "process_navigation",
    "process_transformable_token",
    "resolve_token_value",
    "validate_token_structure",
]
