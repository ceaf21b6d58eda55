"""Design token deriver.

Lowers a resolved visual skin into the flat, semantically named token set the
rest of the front end consumes: spacing scale, type scale and aliases,
semantic color aliases, elevation shadows, transitions, z-index layers, plus
the skin's border radius and typography globals passed through.

Everything here is a pure function of ``(skin, is_dark_mode)``. Token sets are
recomputed on every call and never cached.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from skins.catalog.schema import get_palette
from skins.catalog.visual_skins import VISUAL_SKINS
from skins.config.settings import DEFAULT_SKIN_ID

from .contrast import with_alpha
from .css_vars import format_number

__all__ = [
    "SPACING_STOPS",
    "TYPE_SCALE_STOPS",
    "TYPE_ALIASES",
    "Z_INDEX_LAYERS",
    "TypeScaleEntry",
    "TransitionTokens",
    "DesignTokens",
    "parse_px",
    "build_spacing_scale",
    "build_type_scale",
    "build_type_aliases",
    "build_color_aliases",
    "build_shadow_scale",
    "build_transition_tokens",
    "build_z_index_scale",
    "get_design_tokens",
]

# stop -> pixels
SPACING_STOPS: Tuple[Tuple[str, int], ...] = (
    ("0", 0),
    ("px", 1),
    ("0.5", 2),
    ("1", 4),
    ("1.5", 6),
    ("2", 8),
    ("2.5", 10),
    ("3", 12),
    ("4", 16),
    ("5", 20),
    ("6", 24),
    ("8", 32),
    ("10", 40),
    ("12", 48),
    ("16", 64),
    ("20", 80),
    ("24", 96),
    ("32", 128),
    ("40", 160),
    ("48", 192),
    ("56", 224),
    ("64", 256),
)

# stop -> (source, offset from base). Source is either the skin typography
# field read verbatim or a multiplier applied to the base size.
TYPE_SCALE_STOPS: Tuple[Tuple[str, Any, int], ...] = (
    ("xs", 0.786, -2),
    ("sm", "font_size_sm", -1),
    ("base", "font_size_base", 0),
    ("lg", "font_size_lg", 1),
    ("xl", "font_size_xl", 2),
    ("2xl", 1.714, 3),
    ("3xl", 2.143, 4),
    ("4xl", 2.571, 5),
    ("5xl", 3.429, 6),
)

_LETTER_SPACING: Dict[str, Optional[str]] = {
    "xs": "0.02em",
    "sm": "0.01em",
    "base": None,  # skin letter_spacing
    "lg": "-0.005em",
    "xl": "-0.01em",
    "2xl": "-0.015em",
    "3xl": "-0.02em",
    "4xl": "-0.025em",
    "5xl": "-0.03em",
}

_LINE_HEIGHT_STEP = 0.05
_LINE_HEIGHT_FLOOR = 1.0

TYPE_ALIASES: Tuple[Tuple[str, str], ...] = (
    ("caption", "xs"),
    ("body", "base"),
    ("body_large", "lg"),
    ("heading_sm", "lg"),
    ("heading_md", "xl"),
    ("heading_lg", "2xl"),
    ("heading_xl", "3xl"),
    ("display", "4xl"),
)

Z_INDEX_LAYERS: Tuple[Tuple[str, int], ...] = (
    ("hide", -1),
    ("base", 0),
    ("raised", 1),
    ("dropdown", 1000),
    ("sticky", 1100),
    ("overlay", 1200),
    ("modal", 1300),
    ("popover", 1400),
    ("toast", 1500),
    ("tooltip", 1600),
    ("max", 9999),
)

# (name, [(y, blur, opacity), ...]); spread is always 0 and omitted.
_SHADOW_LAYERS: Tuple[Tuple[str, Tuple[Tuple[int, int, float], ...]], ...] = (
    ("xs", ((1, 2, 0.05),)),
    ("sm", ((1, 3, 0.1), (1, 2, 0.06))),
    ("md", ((4, 6, 0.07), (2, 4, 0.06))),
    ("lg", ((10, 15, 0.1), (4, 6, 0.05))),
    ("xl", ((20, 25, 0.1), (10, 10, 0.04))),
)
_DARK_SHADOW_FACTOR = 4.0

_PX_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*px\s*$")


@dataclass(frozen=True)
class TypeScaleEntry:
    font_size: str
    line_height: str
    letter_spacing: str


@dataclass(frozen=True)
class TransitionTokens:
    durations: Mapping[str, str]
    easings: Mapping[str, str]


@dataclass(frozen=True)
class DesignTokens:
    """Flat design token set derived from one skin in one color mode."""

    skin_id: str
    is_dark_mode: bool
    spacing: Mapping[str, str]
    type_scale: Mapping[str, TypeScaleEntry]
    type_aliases: Mapping[str, TypeScaleEntry]
    colors: Mapping[str, str]
    shadows: Mapping[str, str]
    transitions: TransitionTokens
    z_index: Mapping[str, int]
    border_radius: Mapping[str, str]
    typography: Mapping[str, Any]


def parse_px(value: Any) -> float:
    match = _PX_RE.match(str(value))
    if match is None:
        raise ValueError(f"Expected a pixel length like '14px': {value!r}")
    return float(match.group(1))


def build_spacing_scale() -> Dict[str, str]:
    return {stop: f"{px}px" for stop, px in SPACING_STOPS}


def build_type_scale(skin: Mapping[str, Any]) -> Dict[str, TypeScaleEntry]:
    """Nine-stop type scale anchored on the skin's base size and line height.

    ``sm``/``base``/``lg``/``xl`` are taken from the skin verbatim; the other
    stops are rounded multiples of the base size. Line height shrinks by 0.05
    per stop above base and grows by 0.05 per stop below it.
    """
    typography = skin["typography"]
    base_px = parse_px(typography["font_size_base"])
    base_line_height = float(typography["line_height"])
    scale: Dict[str, TypeScaleEntry] = {}
    for stop, source, offset in TYPE_SCALE_STOPS:
        if isinstance(source, str):
            font_size = str(typography[source])
        else:
            font_size = f"{round(base_px * source)}px"
        if offset == 0:
            line_height = format_number(typography["line_height"])
        else:
            lh = max(base_line_height - _LINE_HEIGHT_STEP * offset, _LINE_HEIGHT_FLOOR)
            line_height = format_number(lh)
        letter_spacing = _LETTER_SPACING[stop] or str(typography["letter_spacing"])
        scale[stop] = TypeScaleEntry(font_size, line_height, letter_spacing)
    return scale


def build_type_aliases(type_scale: Mapping[str, TypeScaleEntry]) -> Dict[str, TypeScaleEntry]:
    return {alias: type_scale[stop] for alias, stop in TYPE_ALIASES}


def build_color_aliases(colors: Mapping[str, str]) -> Dict[str, str]:
    primary = colors["primary"]
    return {
        "bg_app": colors["background"],
        "bg_surface": colors["surface"],
        "bg_overlay": with_alpha("#000000", 0.5),
        "text_primary": colors["text"],
        "text_secondary": colors["text_secondary"],
        "text_muted": colors["muted"],
        "text_inverse": colors["background"],
        "interactive_primary": colors["button_primary_bg"],
        "interactive_primary_text": colors["button_primary_text"],
        "interactive_secondary": colors["button_secondary_bg"],
        "interactive_secondary_text": colors["button_secondary_text"],
        "interactive_hover": with_alpha(primary, 0.06),
        "interactive_focus": with_alpha(primary, 0.08),
        "interactive_active": with_alpha(primary, 0.10),
        "interactive_selected": with_alpha(primary, 0.12),
        "border_default": colors["border"],
        "border_subtle": with_alpha(colors["border"], 0.5),
        "border_focus": primary,
        "status_success": colors["success"],
        "status_warning": colors["warning"],
        "status_error": colors["error"],
        "status_info": colors["info"],
        "status_success_bg": with_alpha(colors["success"], 0.12),
        "status_warning_bg": with_alpha(colors["warning"], 0.12),
        "status_error_bg": with_alpha(colors["error"], 0.12),
        "status_info_bg": with_alpha(colors["info"], 0.12),
        "brand_primary": primary,
        "brand_secondary": colors["secondary"],
        "brand_accent": colors["accent"],
    }


def build_shadow_scale(is_dark_mode: bool = False) -> Dict[str, str]:
    factor = _DARK_SHADOW_FACTOR if is_dark_mode else 1.0
    shadows: Dict[str, str] = {"none": "none"}
    for name, layers in _SHADOW_LAYERS:
        parts = []
        for y, blur, opacity in layers:
            alpha = format_number(min(round(opacity * factor, 3), 1.0))
            parts.append(f"0 {y}px {blur}px rgba(0, 0, 0, {alpha})")
        shadows[name] = ", ".join(parts)
    return shadows


def build_transition_tokens() -> TransitionTokens:
    return TransitionTokens(
        durations={
            "instant": "0ms",
            "fast": "100ms",
            "normal": "200ms",
            "slow": "300ms",
            "slower": "500ms",
        },
        easings={
            "standard": "cubic-bezier(0.4, 0, 0.2, 1)",
            "linear": "cubic-bezier(0, 0, 1, 1)",
            "ease_in": "cubic-bezier(0.4, 0, 1, 1)",
            "ease_out": "cubic-bezier(0, 0, 0.2, 1)",
            "ease_in_out": "cubic-bezier(0.45, 0, 0.55, 1)",
            "spring": "cubic-bezier(0.34, 1.56, 0.64, 1)",
        },
    )


def build_z_index_scale() -> Dict[str, int]:
    return dict(Z_INDEX_LAYERS)


def _typography_globals(skin: Mapping[str, Any]) -> Dict[str, Any]:
    typography = skin["typography"]
    return {
        "family": typography["font_family"],
        "family_mono": typography["font_family_mono"],
        "weight_normal": typography["font_weight_normal"],
        "weight_medium": typography["font_weight_medium"],
        "weight_bold": typography["font_weight_bold"],
        "line_height": typography["line_height"],
        "letter_spacing": typography["letter_spacing"],
    }


def get_design_tokens(
    skin: Optional[Mapping[str, Any]] = None, is_dark_mode: bool = False
) -> DesignTokens:
    """Derive the full design token set for ``skin`` (default: the nChat skin)."""
    if skin is None:
        skin = VISUAL_SKINS[DEFAULT_SKIN_ID]
    type_scale = build_type_scale(skin)
    return DesignTokens(
        skin_id=str(skin.get("id", "")),
        is_dark_mode=is_dark_mode,
        spacing=build_spacing_scale(),
        type_scale=type_scale,
        type_aliases=build_type_aliases(type_scale),
        colors=build_color_aliases(get_palette(skin, is_dark_mode)),
        shadows=build_shadow_scale(is_dark_mode),
        transitions=build_transition_tokens(),
        z_index=build_z_index_scale(),
        border_radius=dict(skin["border_radius"]),
        typography=_typography_globals(skin),
    )
