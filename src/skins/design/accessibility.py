"""Accessibility token deriver.

Builds focus rings, high-contrast overrides, touch target sizes, screen-reader
utility styles and keyboard navigation affordances from a skin palette, and
precomputes the contrast ratios of the palette's key pairings.

Focus ring variants
-------------------
 - default: 2px ring in the primary color, 2px gap filled with the background
 - inset: ring drawn inside the element (negative offset)
 - error: default geometry in the error color
 - high_contrast: wider 3px ring in the text color

Every variant exposes both an ``outline`` declaration and an equivalent
double ``box_shadow`` (gap ring + colored ring) for elements that clip
outlines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from skins.catalog.schema import get_palette
from skins.catalog.visual_skins import VISUAL_SKINS
from skins.config.settings import ACCESSIBILITY_PREFIX, DEFAULT_SKIN_ID

from .contrast import contrast_ratio
from .css_vars import flatten_to_css_variables

__all__ = [
    "FocusRingToken",
    "FocusRingTokens",
    "HighContrastOverrides",
    "TouchTargetTokens",
    "KeyboardNavigationTokens",
    "ContrastRatios",
    "AccessibilityTokens",
    "build_focus_ring_tokens",
    "build_high_contrast_overrides",
    "build_touch_target_tokens",
    "build_keyboard_navigation_tokens",
    "get_screen_reader_only_style",
    "get_screen_reader_focusable_style",
    "get_accessibility_tokens",
    "accessibility_tokens_to_css_variables",
]


@dataclass(frozen=True)
class FocusRingToken:
    width: str
    offset: str
    color: str
    outline: str
    box_shadow: str


@dataclass(frozen=True)
class FocusRingTokens:
    default: FocusRingToken
    inset: FocusRingToken
    error: FocusRingToken
    high_contrast: FocusRingToken


@dataclass(frozen=True)
class HighContrastOverrides:
    background: str
    text: str
    border: str
    link: str
    focus: str
    button_bg: str
    button_text: str
    min_border_width: str
    underline_links: bool


@dataclass(frozen=True)
class TouchTargetTokens:
    minimum_size: str
    comfortable_size: str
    enhanced_size: str
    minimum_gap: str
    inline_target_size: str


@dataclass(frozen=True)
class KeyboardNavigationTokens:
    skip_link_background: str
    skip_link_text: str
    skip_link_padding: str
    skip_link_z_index: int
    focus_trap_border: str
    focus_visible_only: bool


@dataclass(frozen=True)
class ContrastRatios:
    text_on_background: float
    text_on_surface: float
    primary_on_background: float
    button_primary_text_on_bg: float


@dataclass(frozen=True)
class AccessibilityTokens:
    focus_rings: FocusRingTokens
    high_contrast: HighContrastOverrides
    touch_targets: TouchTargetTokens
    keyboard: KeyboardNavigationTokens
    screen_reader_only: Mapping[str, str]
    screen_reader_focusable: Mapping[str, str]
    contrast: ContrastRatios


def _ring(color: str, gap_color: str, width: int, offset: int) -> FocusRingToken:
    if offset < 0:
        box_shadow = f"inset 0 0 0 {width}px {color}"
    else:
        box_shadow = f"0 0 0 {offset}px {gap_color}, 0 0 0 {offset + width}px {color}"
    return FocusRingToken(
        width=f"{width}px",
        offset=f"{offset}px",
        color=color,
        outline=f"{width}px solid {color}",
        box_shadow=box_shadow,
    )


def build_focus_ring_tokens(colors: Mapping[str, str]) -> FocusRingTokens:
    background = colors["background"]
    return FocusRingTokens(
        default=_ring(colors["primary"], background, width=2, offset=2),
        inset=_ring(colors["primary"], background, width=2, offset=-2),
        error=_ring(colors["error"], background, width=2, offset=2),
        high_contrast=_ring(colors["text"], background, width=3, offset=2),
    )


def build_high_contrast_overrides(
    colors: Mapping[str, str], is_dark_mode: bool = False
) -> HighContrastOverrides:
    """Pure black/white surfaces (inverted in dark mode) with underlined links."""
    background, text = ("#000000", "#FFFFFF") if is_dark_mode else ("#FFFFFF", "#000000")
    return HighContrastOverrides(
        background=background,
        text=text,
        border=text,
        link=colors["primary"],
        focus=text,
        button_bg=text,
        button_text=background,
        min_border_width="2px",
        underline_links=True,
    )


def build_touch_target_tokens() -> TouchTargetTokens:
    return TouchTargetTokens(
        minimum_size="44px",
        comfortable_size="48px",
        enhanced_size="48px",
        minimum_gap="8px",
        inline_target_size="32px",
    )


def build_keyboard_navigation_tokens(colors: Mapping[str, str]) -> KeyboardNavigationTokens:
    return KeyboardNavigationTokens(
        skip_link_background=colors["primary"],
        skip_link_text=colors["button_primary_text"],
        skip_link_padding="8px 16px",
        skip_link_z_index=9999,
        focus_trap_border=f"2px solid {colors['primary']}",
        focus_visible_only=True,
    )


def get_screen_reader_only_style() -> Dict[str, str]:
    """Visually hidden but still announced by assistive technology."""
    return {
        "position": "absolute",
        "width": "1px",
        "height": "1px",
        "padding": "0",
        "margin": "-1px",
        "overflow": "hidden",
        "clip": "rect(0, 0, 0, 0)",
        "white_space": "nowrap",
        "border": "0",
    }


def get_screen_reader_focusable_style() -> Dict[str, str]:
    """Undo of :func:`get_screen_reader_only_style` applied while focused."""
    return {
        "position": "static",
        "width": "auto",
        "height": "auto",
        "padding": "0",
        "margin": "0",
        "overflow": "visible",
        "clip": "auto",
        "white_space": "normal",
        "border": "0",
    }


def get_accessibility_tokens(
    skin: Optional[Mapping[str, Any]] = None, is_dark_mode: bool = False
) -> AccessibilityTokens:
    if skin is None:
        skin = VISUAL_SKINS[DEFAULT_SKIN_ID]
    colors = get_palette(skin, is_dark_mode)
    return AccessibilityTokens(
        focus_rings=build_focus_ring_tokens(colors),
        high_contrast=build_high_contrast_overrides(colors, is_dark_mode),
        touch_targets=build_touch_target_tokens(),
        keyboard=build_keyboard_navigation_tokens(colors),
        screen_reader_only=get_screen_reader_only_style(),
        screen_reader_focusable=get_screen_reader_focusable_style(),
        contrast=ContrastRatios(
            text_on_background=contrast_ratio(colors["text"], colors["background"]),
            text_on_surface=contrast_ratio(colors["text"], colors["surface"]),
            primary_on_background=contrast_ratio(colors["primary"], colors["background"]),
            button_primary_text_on_bg=contrast_ratio(
                colors["button_primary_text"], colors["button_primary_bg"]
            ),
        ),
    )


def accessibility_tokens_to_css_variables(
    tokens: AccessibilityTokens, prefix: str = ACCESSIBILITY_PREFIX
) -> Dict[str, str]:
    # Contrast ratios and the screen-reader style blocks are not style values.
    return flatten_to_css_variables(
        {
            "focus_ring": tokens.focus_rings,
            "high_contrast": tokens.high_contrast,
            "touch_target": tokens.touch_targets,
            "keyboard": tokens.keyboard,
        },
        prefix,
    )
