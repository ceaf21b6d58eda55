"""Flatten skins and derived token sets into CSS custom property maps.

Every emitted key is ``<prefix>-<kebab path>``; values are strings. Keys may
be camelCase or snake_case (both lower to the same kebab form) and dots in
keys such as spacing stop ``0.5`` become dashes (``--dt-spacing-0-5``).

Value lowering:
 - str: verbatim
 - bool: ``true`` / ``false``
 - int / float: decimal text, at most 5 fractional digits
 - list / tuple: items lowered and joined with ``", "``
 - None: entry skipped
 - mapping / dataclass: recursed into, path segments joined with ``-``
"""

from __future__ import annotations

import dataclasses
import re
from typing import TYPE_CHECKING, Any, Dict, Iterable, Mapping, Tuple

from skins.catalog.schema import get_palette
from skins.config.settings import COMPONENT_TOKEN_PREFIX, DESIGN_TOKEN_PREFIX, SKIN_VAR_PREFIX

if TYPE_CHECKING:  # pragma: no cover
    from .components import ComponentTokens
    from .tokens import DesignTokens

__all__ = [
    "to_kebab_case",
    "format_number",
    "format_value",
    "flatten_to_css_variables",
    "colors_to_css_variables",
    "skin_to_css_variables",
    "design_tokens_to_css_variables",
    "component_tokens_to_css_variables",
]

_CAMEL_RE = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATOR_RE = re.compile(r"[\s_.]+")


def to_kebab_case(key: str) -> str:
    """``buttonPrimaryBg`` / ``button_primary_bg`` -> ``button-primary-bg``."""
    text = _CAMEL_RE.sub(r"\1-\2", str(key))
    text = _SEPARATOR_RE.sub("-", text)
    return text.strip("-").lower()


def format_number(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    text = str(round(value, 5))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, (list, tuple)):
        return ", ".join(format_value(item) for item in value if item is not None)
    return str(value)


def _items(node: Any) -> Iterable[Tuple[str, Any]]:
    if dataclasses.is_dataclass(node) and not isinstance(node, type):
        return ((f.name, getattr(node, f.name)) for f in dataclasses.fields(node))
    return node.items()


def _is_branch(node: Any) -> bool:
    return isinstance(node, Mapping) or (dataclasses.is_dataclass(node) and not isinstance(node, type))


def flatten_to_css_variables(tree: Any, prefix: str) -> Dict[str, str]:
    """Flatten a nested mapping/dataclass tree into ``{--prefix-path: value}``."""
    out: Dict[str, str] = {}
    for key, value in _items(tree):
        if value is None:
            continue
        name = f"{prefix}-{to_kebab_case(key)}"
        if _is_branch(value):
            out.update(flatten_to_css_variables(value, name))
        else:
            out[name] = format_value(value)
    return out


def colors_to_css_variables(colors: Mapping[str, str], prefix: str = SKIN_VAR_PREFIX) -> Dict[str, str]:
    return flatten_to_css_variables(colors, prefix)


def skin_to_css_variables(
    skin: Mapping[str, Any], is_dark_mode: bool = False, prefix: str = SKIN_VAR_PREFIX
) -> Dict[str, str]:
    """Lower a visual skin to its flat variable map.

    Emits the active palette (``<prefix>-primary``), typography
    (``<prefix>-font-size-base``), spacing (``<prefix>-sidebar-width``) and
    radius (``<prefix>-radius-md``) entries. Icons and component style
    choices are not part of the variable surface.
    """
    out = colors_to_css_variables(get_palette(skin, is_dark_mode), prefix)
    out.update(flatten_to_css_variables(skin.get("typography") or {}, prefix))
    out.update(flatten_to_css_variables(skin.get("spacing") or {}, prefix))
    out.update(flatten_to_css_variables(skin.get("border_radius") or {}, f"{prefix}-radius"))
    return out


def design_tokens_to_css_variables(
    tokens: "DesignTokens", prefix: str = DESIGN_TOKEN_PREFIX
) -> Dict[str, str]:
    sections: Tuple[Tuple[str, Any], ...] = (
        ("spacing", tokens.spacing),
        ("type", tokens.type_scale),
        ("type-alias", tokens.type_aliases),
        ("color", tokens.colors),
        ("shadow", tokens.shadows),
        ("duration", tokens.transitions.durations),
        ("easing", tokens.transitions.easings),
        ("z", tokens.z_index),
        ("radius", tokens.border_radius),
        ("font", tokens.typography),
    )
    out: Dict[str, str] = {}
    for category, tree in sections:
        out.update(flatten_to_css_variables(tree, f"{prefix}-{category}"))
    return out


def component_tokens_to_css_variables(
    tokens: "ComponentTokens", prefix: str = COMPONENT_TOKEN_PREFIX
) -> Dict[str, str]:
    return flatten_to_css_variables(tokens, prefix)
