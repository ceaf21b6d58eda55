"""Record shapes for visual skins, behavior presets and composite profiles.

Records travel as plain nested dicts so the merge engine can treat every kind
uniformly. The ``TypedDict`` classes below document the expected keys; the
tuples are the allowed enum values and are what the validator checks against.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, TypedDict

__all__ = [
    "COLOR_SLOTS",
    "TYPOGRAPHY_FIELDS",
    "SPACING_SLOTS",
    "RADIUS_STOPS",
    "COMPONENT_STYLE_VALUES",
    "ICON_STYLES",
    "BEHAVIOR_GROUPS",
    "REACTION_STYLES",
    "THREADING_MODELS",
    "CHANNEL_TYPES",
    "PRESENCE_STATES",
    "NOTIFICATION_LEVELS",
    "MENTION_RULES",
    "PROFILE_VISIBILITY",
    "SkinColors",
    "SkinTypography",
    "SkinSpacing",
    "SkinBorderRadius",
    "SkinIcons",
    "SkinComponents",
    "VisualSkin",
    "BehaviorPreset",
    "CompositeProfile",
    "DeepPartial",
    "get_palette",
]

COLOR_SLOTS: tuple[str, ...] = (
    "primary",
    "secondary",
    "accent",
    "background",
    "surface",
    "text",
    "text_secondary",
    "muted",
    "border",
    "success",
    "warning",
    "error",
    "info",
    "button_primary_bg",
    "button_primary_text",
    "button_secondary_bg",
    "button_secondary_text",
)

TYPOGRAPHY_FIELDS: tuple[str, ...] = (
    "font_family",
    "font_family_mono",
    "font_size_sm",
    "font_size_base",
    "font_size_lg",
    "font_size_xl",
    "font_weight_normal",
    "font_weight_medium",
    "font_weight_bold",
    "line_height",
    "letter_spacing",
)

SPACING_SLOTS: tuple[str, ...] = (
    "message_gap",
    "message_padding",
    "sidebar_width",
    "header_height",
    "input_height",
    "avatar_size",
    "avatar_size_sm",
    "avatar_size_lg",
)

RADIUS_STOPS: tuple[str, ...] = ("none", "sm", "md", "lg", "xl", "full")

COMPONENT_STYLE_VALUES: Dict[str, tuple[str, ...]] = {
    "message_layout": ("default", "compact", "cozy", "bubbles"),
    "avatar_shape": ("circle", "rounded", "square"),
    "button_style": ("default", "rounded", "pill", "square"),
    "input_style": ("default", "outline", "filled", "underline"),
    "sidebar_style": ("default", "compact", "floating"),
    "header_style": ("default", "compact", "prominent"),
    "scrollbar_style": ("default", "thin", "hidden"),
}

ICON_STYLES: tuple[str, ...] = ("outline", "filled")

BEHAVIOR_GROUPS: tuple[str, ...] = (
    "messaging",
    "channels",
    "presence",
    "calls",
    "notifications",
    "moderation",
    "privacy",
    "features",
)

REACTION_STYLES: tuple[str, ...] = ("none", "quick-reactions", "full-picker")
THREADING_MODELS: tuple[str, ...] = ("none", "inline", "side-panel", "reply-chain")
CHANNEL_TYPES: tuple[str, ...] = (
    "public",
    "private",
    "dm",
    "group-dm",
    "broadcast",
    "voice",
    "stage",
    "forum",
    "announcement",
    "secret",
)
PRESENCE_STATES: tuple[str, ...] = ("online", "away", "idle", "dnd", "invisible", "offline")
NOTIFICATION_LEVELS: tuple[str, ...] = ("all", "mentions", "none")
MENTION_RULES: tuple[str, ...] = ("user", "channel", "here", "everyone", "role")
PROFILE_VISIBILITY: tuple[str, ...] = ("everyone", "contacts", "nobody")

# A partial record: any subset of keys at any depth.
DeepPartial = Mapping[str, Any]


class SkinColors(TypedDict):
    primary: str
    secondary: str
    accent: str
    background: str
    surface: str
    text: str
    text_secondary: str
    muted: str
    border: str
    success: str
    warning: str
    error: str
    info: str
    button_primary_bg: str
    button_primary_text: str
    button_secondary_bg: str
    button_secondary_text: str


class SkinTypography(TypedDict):
    font_family: str
    font_family_mono: str
    font_size_sm: str
    font_size_base: str
    font_size_lg: str
    font_size_xl: str
    font_weight_normal: int
    font_weight_medium: int
    font_weight_bold: int
    line_height: float
    letter_spacing: str


class SkinSpacing(TypedDict):
    message_gap: str
    message_padding: str
    sidebar_width: str
    header_height: str
    input_height: str
    avatar_size: str
    avatar_size_sm: str
    avatar_size_lg: str


class SkinBorderRadius(TypedDict):
    none: str
    sm: str
    md: str
    lg: str
    xl: str
    full: str


class SkinIcons(TypedDict):
    style: str
    set: str
    stroke_width: float


class SkinComponents(TypedDict):
    message_layout: str
    avatar_shape: str
    button_style: str
    input_style: str
    sidebar_style: str
    header_style: str
    scrollbar_style: str


class _DarkMode(TypedDict):
    colors: SkinColors


class VisualSkin(TypedDict):
    id: str
    name: str
    description: str
    version: str
    colors: SkinColors
    dark_mode: _DarkMode
    typography: SkinTypography
    spacing: SkinSpacing
    border_radius: SkinBorderRadius
    icons: SkinIcons
    components: SkinComponents


class BehaviorPreset(TypedDict):
    id: str
    name: str
    description: str
    version: str
    messaging: Dict[str, Any]
    channels: Dict[str, Any]
    presence: Dict[str, Any]
    calls: Dict[str, Any]
    notifications: Dict[str, Any]
    moderation: Dict[str, Any]
    privacy: Dict[str, Any]
    features: Dict[str, bool]


class _ProfileOverrides(TypedDict, total=False):
    skin: Dict[str, Any]
    behavior: Dict[str, Any]


class _CompositeProfileBase(TypedDict):
    id: str
    name: str
    description: str
    skin_id: str
    behavior_id: str


class CompositeProfile(_CompositeProfileBase, total=False):
    overrides: _ProfileOverrides



def get_palette(skin: Mapping[str, Any], is_dark_mode: bool = False) -> Dict[str, str]:
    """Return a copy of the light or dark palette of ``skin``.

    A skin without a dark palette falls back to its light colors.
    """
    if is_dark_mode:
        dark = (skin.get("dark_mode") or {}).get("colors")
        if dark:
            return dict(dark)
    return dict(skin.get("colors") or {})
