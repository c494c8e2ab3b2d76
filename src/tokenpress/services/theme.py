"""Theme assembly from the sections of a token document.

Four independent passes run over the document: primitive, semantic, and
the light and dark color-scheme overlays. The primitive pass is its own
reference context; every other pass receives the processed primitive
tokens. Results are merged into a ThemeStructure.
"""

from collections.abc import Mapping
from typing import Any

from tokenpress.config import Settings, get_settings
from tokenpress.domain.theme import ColorScheme, ProcessedTokens, ThemeStructure
from tokenpress.domain.tokens import TokenContainer, parse_node
from tokenpress.logging_config import LogContext, get_logger
from tokenpress.services.processors import PrimitiveTokens, resolve_token_value

logger = get_logger(__name__)

PRIMITIVE_PATH = ("primitive",)
SEMANTIC_PATH = ("semantic",)
LIGHT_PATH = ("semantic", "light")
DARK_PATH = ("semantic", "dark")


def _process_section(
    tokens: Mapping[str, Any],
    section_key: str,
    primitive_tokens: PrimitiveTokens,
    seed_path: tuple[str, ...],
) -> ProcessedTokens:
    section = tokens.get(section_key)
    if section is None:
        logger.debug("section_missing", section=section_key)
        return {}

    node = parse_node(section)
    if not isinstance(node, TokenContainer):
        logger.warning("section_not_a_container", section=section_key)
        return {}

    with LogContext(section=section_key):
        processed = resolve_token_value(node, primitive_tokens, seed_path)
        logger.debug("section_processed", keys=len(processed))
    return processed


def process_primitive_tokens(
    tokens: Mapping[str, Any], settings: Settings | None = None
) -> ProcessedTokens:
    """Process the ``<format>/primitive`` section.

    The raw primitive section is passed as its own reference context.
    """
    settings = settings or get_settings()
    key = settings.section_key("primitive")
    return _process_section(tokens, key, tokens.get(key), PRIMITIVE_PATH)


def process_semantic_tokens(
    tokens: Mapping[str, Any],
    primitive_tokens: ProcessedTokens,
    settings: Settings | None = None,
) -> ProcessedTokens:
    """Process the ``<format>/semantic`` section."""
    settings = settings or get_settings()
    return _process_section(
        tokens, settings.section_key("semantic"), primitive_tokens, SEMANTIC_PATH
    )


def process_color_scheme(
    tokens: Mapping[str, Any],
    primitive_tokens: ProcessedTokens,
    settings: Settings | None = None,
) -> ColorScheme:
    """Process the light and dark overlays independently of each other."""
    settings = settings or get_settings()
    return ColorScheme(
        light=_process_section(
            tokens, settings.section_key("semantic", "light"), primitive_tokens, LIGHT_PATH
        ),
        dark=_process_section(
            tokens, settings.section_key("semantic", "dark"), primitive_tokens, DARK_PATH
        ),
    )


def create_theme_structure(
    tokens: Mapping[str, Any], settings: Settings | None = None
) -> ThemeStructure:
    """Build the complete theme from a parsed token document.

    Args:
        tokens: The parsed JSON document, keyed by section identifier.
        settings: Settings providing the section prefix. Defaults to the
            cached application settings.

    Returns:
        ThemeStructure with primitive, semantic and colorScheme trees.
    """
    settings = settings or get_settings()
    primitive = process_primitive_tokens(tokens, settings)
    semantic = process_semantic_tokens(tokens, primitive, settings)
    color_scheme = process_color_scheme(tokens, primitive, settings)

    logger.info(
        "theme_structure_created",
        token_format=settings.token_format,
        primitive_keys=len(primitive),
        semantic_keys=len(semantic),
    )
    return ThemeStructure(
        primitive=primitive, semantic=semantic, color_scheme=color_scheme
    )
