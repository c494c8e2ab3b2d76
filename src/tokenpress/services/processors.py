"""Token transformation engine.

Walks a token tree and produces the flat, plain-valued structure the
PrimeUIX theming engine expects:

- resolve_token_value: unwraps leaves and recurses into containers
- process_form_field / process_list / process_navigation: hand-curated
  rewrites for the three sections whose flat names do not follow the
  suffix rules
- process_transformable_token: the general suffix-rename expansion

Containers are resolved through DISPATCH_RULES, an ordered list of
(matcher, handler) pairs evaluated first-match-wins: section rewrites,
then transformable parents, then generic recursion. Every handler returns
a fresh dict of entries that the caller merges into its own result.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from tokenpress.domain.tokens import (
    MalformedNode,
    TokenContainer,
    TokenLeaf,
    TokenNode,
    parse_node,
)
from tokenpress.logging_config import get_logger
from tokenpress.services.shadows import process_box_shadow
from tokenpress.services.transformations import TRANSFORM_PARENTS, find_transformation

logger = get_logger(__name__)

TokenPath = tuple[str, ...]
PrimitiveTokens = Mapping[str, Any] | TokenContainer | None
ProcessedToken = dict[str, Any]

# Section roots under which form/list/navigation get their dedicated rewrites.
SECTION_ROOTS: frozenset[TokenPath] = frozenset(
    {("semantic",), ("semantic", "light"), ("semantic", "dark")}
)


def resolve_token_value(
    token: Any,
    primitive_tokens: PrimitiveTokens = None,
    current_path: TokenPath = (),
) -> Any | None:
    """Resolve a token node into its plain value.

    Args:
        token: A TokenNode, or raw parsed JSON for one.
        primitive_tokens: Reference context. Threaded through every call so
            reference resolution can be added later; references such as
            ``"{primary.500}"`` are currently returned unchanged.
        current_path: Keys traversed from the section root.

    Returns:
        A plain value for leaves and scalars, a dict for containers, or None
        when the node is missing (None or an empty string) or cannot be
        resolved. Zero and False are values, not missing nodes.
    """
    if token is None or token == "":
        return None

    node = parse_node(token)

    if isinstance(node, TokenLeaf):
        if node.is_shadow:
            return process_box_shadow(node.value)
        return node.value

    if isinstance(node, TokenContainer):
        return _resolve_container(node, primitive_tokens, tuple(current_path))

    if isinstance(node, MalformedNode):
        logger.warning(
            "token_unresolvable",
            path=_dotted(current_path),
            reason=node.reason,
        )
        return None

    return node


def _resolve_container(
    container: TokenContainer,
    primitive_tokens: PrimitiveTokens,
    current_path: TokenPath,
) -> ProcessedToken:
    result: ProcessedToken = {}
    for key, value in container.children.items():
        if key.startswith("$"):
            continue
        path = (*current_path, key)
        rule = next(r for r in DISPATCH_RULES if r.matches(key, value, path))
        result.update(rule.handler(key, value, primitive_tokens, path))
    return result


# =============================================================================
# Transformable-token expansion
# =============================================================================


@dataclass
class Expansion:
    """Entries produced by expanding one transformable parent.

    ``flattened`` entries land next to the parent key; ``nested`` entries
    stay under it.
    """

    flattened: ProcessedToken = field(default_factory=dict)
    nested: ProcessedToken = field(default_factory=dict)

    def merge(self, other: "Expansion") -> None:
        self.flattened.update(other.flattened)
        self.nested.update(other.nested)

    def to_entries(self, parent_key: str) -> ProcessedToken:
        """Return the entries to merge into the parent's result.

        The parent key is only emitted when something stayed nested under it.
        """
        entries: ProcessedToken = {}
        if self.nested:
            entries[parent_key] = self.nested
        entries.update(self.flattened)
        return entries


def process_transformable_token(
    token_key: str,
    token_value: Any,
    current_path: TokenPath,
    primitive_tokens: PrimitiveTokens = None,
) -> Expansion:
    """Expand a transformable parent into flat camelCase keys.

    For each child, a matching rename rule decides the flat key. Results of
    rules with three or more segments, or found directly below the parent,
    are flattened next to it; deeper two-segment matches stay nested under
    the parent. Unmatched leaves keep their key under the parent, and
    unmatched containers are searched recursively.

    Args:
        token_key: The transformable parent key, e.g. ``"hover"``.
        token_value: The parent's container.
        current_path: Path to the parent, ending with token_key.
        primitive_tokens: Reference context passed to the resolver.

    Returns:
        An Expansion; call ``to_entries(token_key)`` to merge it.

    Example:
        >>> process_transformable_token("hover", hover, ("hover",)).to_entries("hover")
        {'hoverBackground': '...', 'hoverColor': '...'}
    """
    expansion = Expansion()
    node = parse_node(token_value)
    if not isinstance(node, TokenContainer):
        return expansion

    for key, value in node.children.items():
        if key.startswith("$"):
            continue
        path = (*current_path, key)
        rule = find_transformation(path)

        if rule is not None:
            processed = resolve_token_value(value, primitive_tokens, path)
            if processed is None or processed == {}:
                continue
            if rule.depth >= 3 or path[-2] == token_key:
                expansion.flattened[rule.name] = processed
            else:
                expansion.nested[rule.name] = processed
        elif isinstance(value, TokenContainer):
            expansion.merge(
                process_transformable_token(token_key, value, path, primitive_tokens)
            )
        else:
            processed = resolve_token_value(value, primitive_tokens, path)
            if processed is not None:
                expansion.nested[key] = processed

    return expansion


# =============================================================================
# Section rewriters
# =============================================================================


def process_form_field(
    field_tokens: Any,
    primitive_tokens: PrimitiveTokens = None,
    current_path: TokenPath = (),
) -> ProcessedToken:
    """Rewrite a ``form.field`` subtree into PrimeUIX formField properties.

    ``padding`` becomes ``paddingX``/``paddingY``; ``sm`` and ``lg`` become
    ``{fontSize, paddingX, paddingY}``; transformable parents are expanded;
    everything else resolves generically.
    """
    node = parse_node(field_tokens) if field_tokens is not None else None
    result: ProcessedToken = {}
    if not isinstance(node, TokenContainer):
        return result

    for key, value in node.children.items():
        if key.startswith("$"):
            continue
        path = (*current_path, key)

        if key == "padding" and isinstance(value, TokenContainer):
            result.update(_padding(value, primitive_tokens, path))
        elif key in ("sm", "lg") and isinstance(value, TokenContainer):
            result[key] = _omit_none(
                {
                    "fontSize": _resolve_at(value, ("font", "size"), primitive_tokens, path),
                    **_padding(value.get("padding"), primitive_tokens, (*path, "padding")),
                }
            )
        elif key in TRANSFORM_PARENTS and isinstance(value, TokenContainer):
            expansion = process_transformable_token(key, value, path, primitive_tokens)
            result.update(expansion.to_entries(key))
        else:
            processed = resolve_token_value(value, primitive_tokens, path)
            if processed is not None:
                result[key] = processed

    return result


def process_list(
    list_tokens: Any,
    primitive_tokens: PrimitiveTokens = None,
    current_path: TokenPath = (),
) -> ProcessedToken:
    """Rewrite a ``list`` subtree.

    ``option.group`` is lifted out as the sibling ``optionGroup`` and
    ``option.icon`` is re-attached as ``{color, focusColor}``.
    """
    node = parse_node(list_tokens) if list_tokens is not None else None
    result: ProcessedToken = {}
    if not isinstance(node, TokenContainer):
        return result

    for key, value in node.children.items():
        if key.startswith("$"):
            continue
        path = (*current_path, key)

        if key == "option" and isinstance(value, TokenContainer):
            option = resolve_token_value(
                value.without("group", "icon"), primitive_tokens, path
            )
            if option is not None:
                icon = _icon_colors(
                    value.get("icon"), ("color", "focusColor"), primitive_tokens, path
                )
                if icon:
                    option = {**option, "icon": icon}
                result["option"] = option

            group = resolve_token_value(
                value.get("group"), primitive_tokens, (*path, "group")
            )
            if group is not None:
                result["optionGroup"] = group
        else:
            processed = resolve_token_value(value, primitive_tokens, path)
            if processed is not None:
                result[key] = processed

    return result


def process_navigation(
    navigation_tokens: Any,
    primitive_tokens: PrimitiveTokens = None,
    current_path: TokenPath = (),
) -> ProcessedToken:
    """Rewrite a ``navigation`` subtree.

    ``submenu`` splits into ``submenuLabel`` and ``submenuIcon``;
    ``item.icon`` is re-attached as ``{color, focusColor, activeColor}``.
    """
    node = parse_node(navigation_tokens) if navigation_tokens is not None else None
    result: ProcessedToken = {}
    if not isinstance(node, TokenContainer):
        return result

    for key, value in node.children.items():
        if key.startswith("$"):
            continue
        path = (*current_path, key)

        if key == "submenu" and isinstance(value, TokenContainer):
            label = resolve_token_value(
                value.get("label"), primitive_tokens, (*path, "label")
            )
            if label is not None:
                result["submenuLabel"] = label
            icon = resolve_token_value(
                value.get("icon"), primitive_tokens, (*path, "icon")
            )
            if icon is not None:
                result["submenuIcon"] = icon
        elif key == "item" and isinstance(value, TokenContainer):
            item = resolve_token_value(value.without("icon"), primitive_tokens, path)
            if item is not None:
                icon = _icon_colors(
                    value.get("icon"),
                    ("color", "focusColor", "activeColor"),
                    primitive_tokens,
                    path,
                )
                if icon:
                    item = {**item, "icon": icon}
                result["item"] = item
        else:
            processed = resolve_token_value(value, primitive_tokens, path)
            if processed is not None:
                result[key] = processed

    return result


_ICON_PATHS: dict[str, tuple[str, ...]] = {
    "color": ("color",),
    "focusColor": ("focus", "color"),
    "activeColor": ("active", "color"),
}


def _icon_colors(
    icon: TokenNode | None,
    names: tuple[str, ...],
    primitive_tokens: PrimitiveTokens,
    current_path: TokenPath,
) -> ProcessedToken:
    if not isinstance(icon, TokenContainer):
        return {}
    path = (*current_path, "icon")
    return _omit_none(
        {name: _resolve_at(icon, _ICON_PATHS[name], primitive_tokens, path) for name in names}
    )


def _padding(
    padding: TokenNode | None,
    primitive_tokens: PrimitiveTokens,
    current_path: TokenPath,
) -> ProcessedToken:
    if not isinstance(padding, TokenContainer):
        return {}
    return _omit_none(
        {
            "paddingX": _resolve_at(padding, ("x",), primitive_tokens, current_path),
            "paddingY": _resolve_at(padding, ("y",), primitive_tokens, current_path),
        }
    )


def _resolve_at(
    container: TokenContainer,
    keys: tuple[str, ...],
    primitive_tokens: PrimitiveTokens,
    current_path: TokenPath,
) -> Any | None:
    """Resolve the node at a relative key path, or None if it is absent."""
    node: TokenNode | None = container
    for key in keys:
        if not isinstance(node, TokenContainer):
            return None
        node = node.get(key)
    return resolve_token_value(node, primitive_tokens, (*current_path, *keys))


def _omit_none(values: dict[str, Any]) -> ProcessedToken:
    return {k: v for k, v in values.items() if v is not None}


def _dotted(path: TokenPath) -> str:
    return ".".join(path) or "<root>"


# =============================================================================
# Dispatch table
# =============================================================================


Matcher = Callable[[str, TokenNode, TokenPath], bool]
Handler = Callable[[str, TokenNode, PrimitiveTokens, TokenPath], ProcessedToken]


@dataclass(frozen=True)
class DispatchRule:
    """One entry of the container dispatch table."""

    name: str
    matcher: Matcher
    handler: Handler

    def matches(self, key: str, value: TokenNode, path: TokenPath) -> bool:
        return self.matcher(key, value, path)


def _section_match(section: str) -> Matcher:
    def matcher(key: str, value: TokenNode, path: TokenPath) -> bool:
        return (
            key == section
            and isinstance(value, TokenContainer)
            and path[:-1] in SECTION_ROOTS
        )

    return matcher


def _handle_form(
    key: str, value: TokenNode, primitive_tokens: PrimitiveTokens, path: TokenPath
) -> ProcessedToken:
    if not isinstance(value, TokenContainer):
        return {}
    ignored = [k for k in value.children if k != "field" and not k.startswith("$")]
    if ignored:
        logger.debug("form_siblings_ignored", path=_dotted(path), keys=ignored)
    return {
        "formField": process_form_field(
            value.get("field"), primitive_tokens, (*path, "field")
        )
    }


def _handle_list(
    key: str, value: TokenNode, primitive_tokens: PrimitiveTokens, path: TokenPath
) -> ProcessedToken:
    return {"list": process_list(value, primitive_tokens, path)}


def _handle_navigation(
    key: str, value: TokenNode, primitive_tokens: PrimitiveTokens, path: TokenPath
) -> ProcessedToken:
    return {"navigation": process_navigation(value, primitive_tokens, path)}


def _is_transformable(key: str, value: TokenNode, path: TokenPath) -> bool:
    return key in TRANSFORM_PARENTS and isinstance(value, TokenContainer)


def _handle_transformable(
    key: str, value: TokenNode, primitive_tokens: PrimitiveTokens, path: TokenPath
) -> ProcessedToken:
    return process_transformable_token(key, value, path, primitive_tokens).to_entries(key)


def _handle_generic(
    key: str, value: TokenNode, primitive_tokens: PrimitiveTokens, path: TokenPath
) -> ProcessedToken:
    processed = resolve_token_value(value, primitive_tokens, path)
    if processed is None:
        return {}
    return {key: processed}


DISPATCH_RULES: tuple[DispatchRule, ...] = (
    DispatchRule("form", _section_match("form"), _handle_form),
    DispatchRule("list", _section_match("list"), _handle_list),
    DispatchRule("navigation", _section_match("navigation"), _handle_navigation),
    DispatchRule("transformable", _is_transformable, _handle_transformable),
    DispatchRule("generic", lambda key, value, path: True, _handle_generic),
)
