"""Structural validation of raw token documents.

Runs before transformation, on the parsed JSON rather than the token model,
so that malformed leaves are reported instead of being recovered from.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from tokenpress.domain.tokens import (
    SHADOW_TYPES,
    THEMES_KEY,
    TYPE_KEY,
    VALUE_KEY,
    ShadowDescriptor,
)
from tokenpress.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a structural validation.

    Truthy when the document is valid. On failure, ``path`` holds the keys
    leading to the offending node and ``reason`` describes the problem.
    """

    valid: bool
    path: tuple[str, ...] = ()
    reason: str = ""

    def __bool__(self) -> bool:
        return self.valid

    @property
    def location(self) -> str:
        return ".".join(self.path) or "<root>"

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def failure(cls, path: tuple[str, ...], reason: str) -> "ValidationResult":
        return cls(valid=False, path=path, reason=reason)


def validate_token_structure(token: Any) -> ValidationResult:
    """Validate that every node is a container or a well-formed leaf.

    Containers carrying ``$themes`` are skipped entirely, as are children
    with numeric keys (collection indices). Shadow-typed leaves must carry a
    dropShadow descriptor, or a collection of them.

    Args:
        token: The parsed JSON document or any subtree of it.

    Returns:
        A ValidationResult; a warning naming the failing path is also logged.
    """
    result = _validate(token, ())
    if not result:
        logger.warning(
            "token_structure_invalid", path=result.location, reason=result.reason
        )
    return result


def _validate(token: Any, path: tuple[str, ...]) -> ValidationResult:
    if isinstance(token, Sequence) and not isinstance(token, (str, bytes)):
        # Lists only carry index keys, which are not validated as tokens.
        return ValidationResult.ok()

    if not isinstance(token, Mapping):
        return ValidationResult.failure(path, "not an object")

    if THEMES_KEY in token:
        return ValidationResult.ok()

    has_type = TYPE_KEY in token
    has_value = VALUE_KEY in token
    if has_value and not has_type:
        return ValidationResult.failure(path, f"token has {VALUE_KEY} but no {TYPE_KEY}")
    if has_type and not has_value:
        return ValidationResult.failure(path, f"token has {TYPE_KEY} but no {VALUE_KEY}")
    if has_type and has_value:
        if token[TYPE_KEY] in SHADOW_TYPES and not _is_valid_shadow(token[VALUE_KEY]):
            return ValidationResult.failure(
                path, "shadow value must have x, y and type 'dropShadow'"
            )
        return ValidationResult.ok()

    for key, value in token.items():
        key = str(key)
        if key.isdigit():
            continue
        result = _validate(value, (*path, key))
        if not result:
            return result

    return ValidationResult.ok()


def _is_valid_shadow(value: Any) -> bool:
    if ShadowDescriptor.looks_like_descriptor(value):
        return True
    if isinstance(value, Mapping):
        members = list(value.values())
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        members = list(value)
    else:
        return False
    return bool(members) and all(
        ShadowDescriptor.looks_like_descriptor(member) for member in members
    )
