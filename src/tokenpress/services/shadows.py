"""Box shadow normalization into CSS shadow syntax."""

from collections.abc import Mapping, Sequence
from typing import Any

from tokenpress.domain.tokens import ShadowDescriptor


def process_box_shadow(value: Any) -> str | None:
    """Convert a boxShadow token value into a CSS shadow string.

    Args:
        value: One shadow descriptor, a list of descriptors, or a mapping of
            descriptors keyed by position or name.

    Returns:
        Descriptors rendered as ``"{x} {y} {blur} {spread} {color}"`` and
        joined with ``", "`` in collection order. A collection without any
        dropShadow descriptor gives ``""``. Anything else gives None.
    """
    if isinstance(value, ShadowDescriptor):
        return value.to_css()

    if isinstance(value, Mapping):
        # A bare descriptor is trusted: validation has already run upstream.
        if "x" in value or "y" in value or ShadowDescriptor.is_descriptor(value):
            return ShadowDescriptor.from_mapping(value).to_css()
        return _join(value.values())

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return _join(value)

    return None


def _join(items: Any) -> str:
    return ", ".join(
        ShadowDescriptor.from_mapping(item).to_css()
        for item in items
        if ShadowDescriptor.is_descriptor(item)
    )
