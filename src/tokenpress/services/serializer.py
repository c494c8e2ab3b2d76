"""Render processed token trees as JavaScript object literals.

Output is deterministic: entries are written in dict insertion order with
two-space indentation, so generated files diff cleanly and snapshot tests
stay stable.
"""

import re
from collections.abc import Mapping
from typing import Any

INDENT = 2

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_INTEGER = re.compile(r"^(0|[1-9][0-9]*)$")


def format_key(key: str) -> str:
    """Return key unquoted when it is a valid identifier or integer literal."""
    key = str(key)
    if _IDENTIFIER.match(key) or _INTEGER.match(key):
        return key
    return format_string(key)


def format_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"


def format_value(value: Any, indent: int = 0) -> str:
    """Render a single value at the given indentation level."""
    if isinstance(value, Mapping):
        return format_object(value, indent)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, (list, tuple)):
        items = [format_value(item, indent) for item in value if item is not None]
        return f"[{', '.join(items)}]"
    return format_string(str(value))


def format_object(obj: Mapping[str, Any] | None, indent: int = 0) -> str:
    """Render a mapping as an indented object literal.

    Args:
        obj: The processed tree. None entries are omitted entirely.
        indent: Current indentation in spaces; nested objects add two.

    Returns:
        The object literal. Empty mappings render as ``{}``.

    Example:
        >>> print(format_object({"primary": {"color": "#000"}}))
        {
          primary: {
            color: '#000'
          }
        }
    """
    if not obj:
        return "{}"

    spaces = " " * indent
    inner_spaces = " " * (indent + INDENT)

    entries = [
        f"{inner_spaces}{format_key(key)}: {format_value(value, indent + INDENT)}"
        for key, value in obj.items()
        if value is not None
    ]
    if not entries:
        return "{}"

    body = ",\n".join(entries)
    return f"{{\n{body}\n{spaces}}}"
