"""Component token deriver.

Produces one frozen token bundle per UI component from a resolved skin, its
active palette and a behavior preset. Skins decide the geometry and colors
(bubble layout, avatar shape, button and input styles); behavior presets
decide which affordances a component exposes (edited indicator, reactions,
call buttons, scheduling, voice messages).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from skins.catalog.behavior_presets import BEHAVIOR_PRESETS
from skins.catalog.schema import get_palette
from skins.catalog.visual_skins import VISUAL_SKINS
from skins.config.settings import DEFAULT_BEHAVIOR_ID, DEFAULT_SKIN_ID

from .contrast import with_alpha
from .tokens import build_shadow_scale, build_type_scale

__all__ = [
    "COMPONENT_NAMES",
    "MessageBubbleTokens",
    "SidebarTokens",
    "HeaderTokens",
    "ComposerTokens",
    "ModalTokens",
    "TooltipTokens",
    "DropdownTokens",
    "AvatarTokens",
    "BadgeTokens",
    "ButtonTokens",
    "InputTokens",
    "ComponentTokens",
    "build_message_bubble_tokens",
    "build_sidebar_tokens",
    "build_header_tokens",
    "build_composer_tokens",
    "build_modal_tokens",
    "build_tooltip_tokens",
    "build_dropdown_tokens",
    "build_avatar_tokens",
    "build_badge_tokens",
    "build_button_tokens",
    "build_input_tokens",
    "get_component_tokens",
]

COMPONENT_NAMES: tuple[str, ...] = (
    "message_bubble",
    "sidebar",
    "header",
    "composer",
    "modal",
    "tooltip",
    "dropdown",
    "avatar",
    "badge",
    "button",
    "input",
)

_AVATAR_RADIUS = {"circle": "full", "rounded": "md", "square": "none"}
_BUTTON_RADIUS = {"pill": "full", "square": "none", "rounded": "lg", "default": "md"}


@dataclass(frozen=True)
class MessageBubbleTokens:
    layout: str
    padding: str
    gap: str
    border_radius: str
    own_bg: str
    own_text: str
    other_bg: str
    other_text: str
    font_size: str
    line_height: str
    timestamp_font_size: str
    timestamp_color: str
    code_font_family: str
    code_bg: str
    show_edited_indicator: bool
    reaction_style: str
    threading_model: str


@dataclass(frozen=True)
class SidebarTokens:
    style: str
    width: str
    background: str
    text: str
    hover_bg: str
    active_item_bg: str
    active_item_text: str
    section_header_color: str
    unread_indicator_bg: str
    border_color: str
    item_height: str
    show_presence: bool
    show_categories: bool


@dataclass(frozen=True)
class HeaderTokens:
    style: str
    height: str
    background: str
    text: str
    border_color: str
    shadow: str
    title_font_size: str
    title_font_weight: int
    show_call_buttons: bool
    show_thread_button: bool


@dataclass(frozen=True)
class ComposerTokens:
    min_height: str
    max_height: str
    background: str
    input_bg: str
    text: str
    placeholder: str
    border_color: str
    border_radius: str
    padding: str
    send_button_bg: str
    send_button_text: str
    max_length: int
    show_scheduling: bool
    show_voice_messages: bool
    show_slash_commands: bool
    show_formatting: bool


@dataclass(frozen=True)
class ModalTokens:
    overlay_bg: str
    background: str
    text: str
    border_radius: str
    shadow: str
    padding: str
    max_width: str
    title_font_size: str


@dataclass(frozen=True)
class TooltipTokens:
    background: str
    text: str
    font_size: str
    border_radius: str
    padding: str
    shadow: str
    max_width: str


@dataclass(frozen=True)
class DropdownTokens:
    background: str
    text: str
    border_color: str
    border_radius: str
    shadow: str
    min_width: str
    item_height: str
    item_hover_bg: str


@dataclass(frozen=True)
class AvatarTokens:
    shape: str
    border_radius: str
    size: str
    size_sm: str
    size_lg: str
    status_online: str
    status_away: str
    status_dnd: str
    status_offline: str
    status_ring_color: str
    show_presence: bool


@dataclass(frozen=True)
class BadgeTokens:
    background: str
    text: str
    success_bg: str
    error_bg: str
    neutral_bg: str
    neutral_text: str
    border_radius: str
    font_size: str
    height: str
    min_width: str
    padding: str


@dataclass(frozen=True)
class ButtonTokens:
    style: str
    border_radius: str
    height: str
    padding: str
    font_weight: int
    primary_bg: str
    primary_text: str
    primary_hover_bg: str
    secondary_bg: str
    secondary_text: str
    secondary_border: str
    destructive_bg: str
    destructive_text: str
    focus_ring: str


@dataclass(frozen=True)
class InputTokens:
    style: str
    background: str
    text: str
    placeholder: str
    border_color: str
    border_color_focus: str
    border_color_error: str
    border_width: str
    border_radius: str
    height: str
    padding: str


@dataclass(frozen=True)
class ComponentTokens:
    message_bubble: MessageBubbleTokens
    sidebar: SidebarTokens
    header: HeaderTokens
    composer: ComposerTokens
    modal: ModalTokens
    tooltip: TooltipTokens
    dropdown: DropdownTokens
    avatar: AvatarTokens
    badge: BadgeTokens
    button: ButtonTokens
    input: InputTokens


def build_message_bubble_tokens(
    skin: Mapping[str, Any],
    colors: Mapping[str, str],
    behavior: Mapping[str, Any],
    is_dark_mode: bool = False,
) -> MessageBubbleTokens:
    layout = skin["components"]["message_layout"]
    radius = skin["border_radius"]
    scale = build_type_scale(skin)
    messaging = behavior["messaging"]
    if layout == "bubbles":
        own_bg = with_alpha(colors["primary"], 0.24 if is_dark_mode else 0.12)
        other_bg = colors["surface"]
        bubble_radius = radius["lg"]
    else:
        own_bg = other_bg = "transparent"
        bubble_radius = radius["none"] if layout == "compact" else radius["sm"]
    return MessageBubbleTokens(
        layout=layout,
        padding=skin["spacing"]["message_padding"],
        gap=skin["spacing"]["message_gap"],
        border_radius=bubble_radius,
        own_bg=own_bg,
        own_text=colors["text"],
        other_bg=other_bg,
        other_text=colors["text"],
        font_size=scale["base"].font_size,
        line_height=scale["base"].line_height,
        timestamp_font_size=scale["xs"].font_size,
        timestamp_color=colors["muted"],
        code_font_family=skin["typography"]["font_family_mono"],
        code_bg=colors["surface"],
        show_edited_indicator=bool(messaging["show_edited_indicator"]),
        reaction_style=messaging["reaction_style"],
        threading_model=messaging["threading_model"],
    )


def build_sidebar_tokens(
    skin: Mapping[str, Any], colors: Mapping[str, str], behavior: Mapping[str, Any]
) -> SidebarTokens:
    style = skin["components"]["sidebar_style"]
    return SidebarTokens(
        style=style,
        width=skin["spacing"]["sidebar_width"],
        background=colors["surface"],
        text=colors["text_secondary"],
        hover_bg=with_alpha(colors["primary"], 0.06),
        active_item_bg=with_alpha(colors["primary"], 0.12),
        active_item_text=colors["primary"],
        section_header_color=colors["muted"],
        unread_indicator_bg=colors["primary"],
        border_color=colors["border"],
        item_height="28px" if style == "compact" else "32px",
        show_presence=len(behavior["presence"]["states"]) > 2,
        show_categories=bool(behavior["channels"]["categories"]),
    )


def build_header_tokens(
    skin: Mapping[str, Any], colors: Mapping[str, str], behavior: Mapping[str, Any], is_dark_mode: bool = False
) -> HeaderTokens:
    style = skin["components"]["header_style"]
    scale = build_type_scale(skin)
    return HeaderTokens(
        style=style,
        height=skin["spacing"]["header_height"],
        background=colors["background"],
        text=colors["text"],
        border_color=colors["border"],
        shadow=build_shadow_scale(is_dark_mode)["sm"] if style == "prominent" else "none",
        title_font_size=(scale["base"] if style == "compact" else scale["lg"]).font_size,
        title_font_weight=skin["typography"]["font_weight_bold"],
        show_call_buttons=bool(behavior["calls"]["supported"]),
        show_thread_button=behavior["messaging"]["threading_model"] == "side-panel",
    )


def build_composer_tokens(
    skin: Mapping[str, Any], colors: Mapping[str, str], behavior: Mapping[str, Any]
) -> ComposerTokens:
    input_style = skin["components"]["input_style"]
    features = behavior["features"]
    return ComposerTokens(
        min_height=skin["spacing"]["input_height"],
        max_height="50vh",
        background=colors["background"],
        input_bg=colors["surface"] if input_style == "filled" else colors["background"],
        text=colors["text"],
        placeholder=colors["muted"],
        border_color="transparent" if input_style == "filled" else colors["border"],
        border_radius=skin["border_radius"]["lg" if input_style == "filled" else "md"],
        padding="8px 12px",
        send_button_bg=colors["primary"],
        send_button_text=colors["button_primary_text"],
        max_length=int(behavior["messaging"]["max_message_length"]),
        show_scheduling=bool(behavior["messaging"]["scheduling"]),
        show_voice_messages=bool(features.get("voice_messages", False)),
        show_slash_commands=bool(features.get("slash_commands", False)),
        show_formatting=bool(features.get("rich_text", False)),
    )


def build_modal_tokens(
    skin: Mapping[str, Any], colors: Mapping[str, str], is_dark_mode: bool = False
) -> ModalTokens:
    return ModalTokens(
        overlay_bg=with_alpha("#000000", 0.7 if is_dark_mode else 0.5),
        background=colors["background"],
        text=colors["text"],
        border_radius=skin["border_radius"]["xl"],
        shadow=build_shadow_scale(is_dark_mode)["xl"],
        padding="24px",
        max_width="560px",
        title_font_size=build_type_scale(skin)["xl"].font_size,
    )


def build_tooltip_tokens(
    skin: Mapping[str, Any], colors: Mapping[str, str], is_dark_mode: bool = False
) -> TooltipTokens:
    return TooltipTokens(
        background=colors["text"],
        text=colors["background"],
        font_size=skin["typography"]["font_size_sm"],
        border_radius=skin["border_radius"]["sm"],
        padding="4px 8px",
        shadow=build_shadow_scale(is_dark_mode)["md"],
        max_width="240px",
    )


def build_dropdown_tokens(
    skin: Mapping[str, Any], colors: Mapping[str, str], is_dark_mode: bool = False
) -> DropdownTokens:
    return DropdownTokens(
        background=colors["background"],
        text=colors["text"],
        border_color=colors["border"],
        border_radius=skin["border_radius"]["md"],
        shadow=build_shadow_scale(is_dark_mode)["lg"],
        min_width="160px",
        item_height="32px",
        item_hover_bg=with_alpha(colors["primary"], 0.06),
    )


def build_avatar_tokens(
    skin: Mapping[str, Any], colors: Mapping[str, str], behavior: Mapping[str, Any]
) -> AvatarTokens:
    shape = skin["components"]["avatar_shape"]
    spacing = skin["spacing"]
    return AvatarTokens(
        shape=shape,
        border_radius=skin["border_radius"][_AVATAR_RADIUS.get(shape, "full")],
        size=spacing["avatar_size"],
        size_sm=spacing["avatar_size_sm"],
        size_lg=spacing["avatar_size_lg"],
        status_online=colors["success"],
        status_away=colors["warning"],
        status_dnd=colors["error"],
        status_offline=colors["muted"],
        status_ring_color=colors["background"],
        show_presence=bool(behavior["privacy"]["online_status_visible"]),
    )


def build_badge_tokens(skin: Mapping[str, Any], colors: Mapping[str, str]) -> BadgeTokens:
    return BadgeTokens(
        background=colors["primary"],
        text=colors["button_primary_text"],
        success_bg=colors["success"],
        error_bg=colors["error"],
        neutral_bg=colors["surface"],
        neutral_text=colors["text_secondary"],
        border_radius=skin["border_radius"]["full"],
        font_size=build_type_scale(skin)["xs"].font_size,
        height="18px",
        min_width="18px",
        padding="0 6px",
    )


def _button_radius(skin: Mapping[str, Any], style: str) -> str:
    return skin["border_radius"][_BUTTON_RADIUS.get(style, "md")]


def build_button_tokens(skin: Mapping[str, Any], colors: Mapping[str, str]) -> ButtonTokens:
    style = skin["components"]["button_style"]
    return ButtonTokens(
        style=style,
        border_radius=_button_radius(skin, style),
        height="36px",
        padding="0 16px",
        font_weight=skin["typography"]["font_weight_medium"],
        primary_bg=colors["button_primary_bg"],
        primary_text=colors["button_primary_text"],
        primary_hover_bg=with_alpha(colors["button_primary_bg"], 0.9),
        secondary_bg=colors["button_secondary_bg"],
        secondary_text=colors["button_secondary_text"],
        secondary_border=colors["border"],
        destructive_bg=colors["error"],
        destructive_text="#FFFFFF",
        focus_ring=f"0 0 0 2px {colors['background']}, 0 0 0 4px {colors['primary']}",
    )


def build_input_tokens(skin: Mapping[str, Any], colors: Mapping[str, str]) -> InputTokens:
    style = skin["components"]["input_style"]
    filled = style == "filled"
    return InputTokens(
        style=style,
        background=colors["surface"] if filled else colors["background"],
        text=colors["text"],
        placeholder=colors["muted"],
        border_color="transparent" if filled else colors["border"],
        border_color_focus=colors["primary"],
        border_color_error=colors["error"],
        border_width="0px" if filled else "1px",
        border_radius=skin["border_radius"]["none" if style == "underline" else "md"],
        height=skin["spacing"]["input_height"],
        padding="8px 12px",
    )


def get_component_tokens(
    skin: Optional[Mapping[str, Any]] = None,
    behavior: Optional[Mapping[str, Any]] = None,
    is_dark_mode: bool = False,
) -> ComponentTokens:
    """Derive every component bundle for ``skin`` + ``behavior``.

    Missing arguments fall back to the default skin and behavior preset.
    """
    if skin is None:
        skin = VISUAL_SKINS[DEFAULT_SKIN_ID]
    if behavior is None:
        behavior = BEHAVIOR_PRESETS[DEFAULT_BEHAVIOR_ID]
    colors: Dict[str, str] = get_palette(skin, is_dark_mode)
    return ComponentTokens(
        message_bubble=build_message_bubble_tokens(skin, colors, behavior, is_dark_mode),
        sidebar=build_sidebar_tokens(skin, colors, behavior),
        header=build_header_tokens(skin, colors, behavior, is_dark_mode),
        composer=build_composer_tokens(skin, colors, behavior),
        modal=build_modal_tokens(skin, colors, is_dark_mode),
        tooltip=build_tooltip_tokens(skin, colors, is_dark_mode),
        dropdown=build_dropdown_tokens(skin, colors, is_dark_mode),
        avatar=build_avatar_tokens(skin, colors, behavior),
        badge=build_badge_tokens(skin, colors),
        button=build_button_tokens(skin, colors),
        input=build_input_tokens(skin, colors),
    )
