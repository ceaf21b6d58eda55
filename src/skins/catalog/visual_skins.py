"""Built-in visual skins.

Each skin is a complete record: both palettes carry every color slot, and the
typography/spacing/radius/icon/component sections are fully populated. The
registry stores deep copies, so the constants here are never handed out for
mutation.
"""

from __future__ import annotations

from typing import Dict, List

from skins.config.settings import CATALOG_VERSION

from .schema import VisualSkin

__all__ = [
    "NCHAT_SKIN",
    "WHATSAPP_SKIN",
    "TELEGRAM_SKIN",
    "DISCORD_SKIN",
    "SLACK_SKIN",
    "SIGNAL_SKIN",
    "VISUAL_SKINS",
    "list_visual_skin_ids",
]


NCHAT_SKIN: VisualSkin = {
    "id": "nchat",
    "name": "nChat",
    "description": "Native nChat identity: neutral zinc surfaces with a cyan accent.",
    "version": CATALOG_VERSION,
    "colors": {
        "primary": "#00D4FF",
        "secondary": "#0EA5E9",
        "accent": "#38BDF8",
        "background": "#FFFFFF",
        "surface": "#F4F4F5",
        "text": "#18181B",
        "text_secondary": "#52525B",
        "muted": "#71717A",
        "border": "#E4E4E7",
        "success": "#16A34A",
        "warning": "#D97706",
        "error": "#DC2626",
        "info": "#0284C7",
        "button_primary_bg": "#18181B",
        "button_primary_text": "#FFFFFF",
        "button_secondary_bg": "#F4F4F5",
        "button_secondary_text": "#18181B",
    },
    "dark_mode": {
        "colors": {
            "primary": "#00D4FF",
            "secondary": "#38BDF8",
            "accent": "#7DD3FC",
            "background": "#18181B",
            "surface": "#27272A",
            "text": "#FAFAFA",
            "text_secondary": "#A1A1AA",
            "muted": "#71717A",
            "border": "#3F3F46",
            "success": "#22C55E",
            "warning": "#F59E0B",
            "error": "#EF4444",
            "info": "#38BDF8",
            "button_primary_bg": "#00D4FF",
            "button_primary_text": "#18181B",
            "button_secondary_bg": "#27272A",
            "button_secondary_text": "#FAFAFA",
        }
    },
    "typography": {
        "font_family": "Inter, system-ui, -apple-system, Segoe UI, sans-serif",
        "font_family_mono": "JetBrains Mono, Menlo, Consolas, monospace",
        "font_size_sm": "12px",
        "font_size_base": "14px",
        "font_size_lg": "16px",
        "font_size_xl": "20px",
        "font_weight_normal": 400,
        "font_weight_medium": 500,
        "font_weight_bold": 600,
        "line_height": 1.5,
        "letter_spacing": "normal",
    },
    "spacing": {
        "message_gap": "4px",
        "message_padding": "8px 16px",
        "sidebar_width": "260px",
        "header_height": "56px",
        "input_height": "44px",
        "avatar_size": "36px",
        "avatar_size_sm": "24px",
        "avatar_size_lg": "48px",
    },
    "border_radius": {
        "none": "0px",
        "sm": "4px",
        "md": "8px",
        "lg": "12px",
        "xl": "16px",
        "full": "9999px",
    },
    "icons": {"style": "outline", "set": "lucide", "stroke_width": 1.5},
    "components": {
        "message_layout": "default",
        "avatar_shape": "circle",
        "button_style": "default",
        "input_style": "outline",
        "sidebar_style": "default",
        "header_style": "default",
        "scrollbar_style": "thin",
    },
}


WHATSAPP_SKIN: VisualSkin = {
    "id": "whatsapp",
    "name": "WhatsApp",
    "description": "Green chat bubbles over a soft gray canvas with a wide chat list.",
    "version": CATALOG_VERSION,
    "colors": {
        "primary": "#25D366",
        "secondary": "#128C7E",
        "accent": "#34B7F1",
        "background": "#FFFFFF",
        "surface": "#F0F2F5",
        "text": "#111B21",
        "text_secondary": "#667781",
        "muted": "#8696A0",
        "border": "#E9EDEF",
        "success": "#25D366",
        "warning": "#FFB02E",
        "error": "#EA0038",
        "info": "#027EB5",
        "button_primary_bg": "#008069",
        "button_primary_text": "#FFFFFF",
        "button_secondary_bg": "#FFFFFF",
        "button_secondary_text": "#008069",
    },
    "dark_mode": {
        "colors": {
            "primary": "#00A884",
            "secondary": "#005C4B",
            "accent": "#53BDEB",
            "background": "#111B21",
            "surface": "#202C33",
            "text": "#E9EDEF",
            "text_secondary": "#8696A0",
            "muted": "#667781",
            "border": "#2A3942",
            "success": "#00A884",
            "warning": "#FFB02E",
            "error": "#F15C6D",
            "info": "#53BDEB",
            "button_primary_bg": "#00A884",
            "button_primary_text": "#111B21",
            "button_secondary_bg": "#202C33",
            "button_secondary_text": "#00A884",
        }
    },
    "typography": {
        "font_family": "Segoe UI, Helvetica Neue, Helvetica, Lucida Grande, Arial, sans-serif",
        "font_family_mono": "Menlo, Consolas, monospace",
        "font_size_sm": "13px",
        "font_size_base": "14px",
        "font_size_lg": "16px",
        "font_size_xl": "19px",
        "font_weight_normal": 400,
        "font_weight_medium": 500,
        "font_weight_bold": 600,
        "line_height": 1.4,
        "letter_spacing": "normal",
    },
    "spacing": {
        "message_gap": "2px",
        "message_padding": "6px 7px 8px 9px",
        "sidebar_width": "340px",
        "header_height": "59px",
        "input_height": "42px",
        "avatar_size": "40px",
        "avatar_size_sm": "28px",
        "avatar_size_lg": "49px",
    },
    "border_radius": {
        "none": "0px",
        "sm": "4px",
        "md": "7.5px",
        "lg": "8px",
        "xl": "12px",
        "full": "9999px",
    },
    "icons": {"style": "outline", "set": "lucide", "stroke_width": 2},
    "components": {
        "message_layout": "bubbles",
        "avatar_shape": "circle",
        "button_style": "pill",
        "input_style": "filled",
        "sidebar_style": "default",
        "header_style": "default",
        "scrollbar_style": "thin",
    },
}


TELEGRAM_SKIN: VisualSkin = {
    "id": "telegram",
    "name": "Telegram",
    "description": "Airy blue bubbles, rounded corners and large avatars.",
    "version": CATALOG_VERSION,
    "colors": {
        "primary": "#2AABEE",
        "secondary": "#229ED9",
        "accent": "#3390EC",
        "background": "#FFFFFF",
        "surface": "#F4F4F5",
        "text": "#000000",
        "text_secondary": "#707579",
        "muted": "#A2ACB0",
        "border": "#DADCE0",
        "success": "#4FAE4E",
        "warning": "#E5A54B",
        "error": "#E53935",
        "info": "#3390EC",
        "button_primary_bg": "#3390EC",
        "button_primary_text": "#FFFFFF",
        "button_secondary_bg": "#FFFFFF",
        "button_secondary_text": "#3390EC",
    },
    "dark_mode": {
        "colors": {
            "primary": "#2AABEE",
            "secondary": "#229ED9",
            "accent": "#8774E1",
            "background": "#212121",
            "surface": "#181818",
            "text": "#FFFFFF",
            "text_secondary": "#AAAAAA",
            "muted": "#707579",
            "border": "#303030",
            "success": "#5CC85A",
            "warning": "#E5A54B",
            "error": "#FF595A",
            "info": "#2AABEE",
            "button_primary_bg": "#2AABEE",
            "button_primary_text": "#FFFFFF",
            "button_secondary_bg": "#2C2C2C",
            "button_secondary_text": "#2AABEE",
        }
    },
    "typography": {
        "font_family": "Roboto, -apple-system, Apple Color Emoji, Helvetica, sans-serif",
        "font_family_mono": "Menlo, Consolas, Roboto Mono, monospace",
        "font_size_sm": "14px",
        "font_size_base": "16px",
        "font_size_lg": "18px",
        "font_size_xl": "20px",
        "font_weight_normal": 400,
        "font_weight_medium": 500,
        "font_weight_bold": 600,
        "line_height": 1.3125,
        "letter_spacing": "normal",
    },
    "spacing": {
        "message_gap": "6px",
        "message_padding": "5px 8px 6px",
        "sidebar_width": "420px",
        "header_height": "56px",
        "input_height": "56px",
        "avatar_size": "42px",
        "avatar_size_sm": "24px",
        "avatar_size_lg": "54px",
    },
    "border_radius": {
        "none": "0px",
        "sm": "6px",
        "md": "12px",
        "lg": "15px",
        "xl": "20px",
        "full": "9999px",
    },
    "icons": {"style": "outline", "set": "lucide", "stroke_width": 1.75},
    "components": {
        "message_layout": "bubbles",
        "avatar_shape": "circle",
        "button_style": "rounded",
        "input_style": "default",
        "sidebar_style": "default",
        "header_style": "default",
        "scrollbar_style": "thin",
    },
}


DISCORD_SKIN: VisualSkin = {
    "id": "discord",
    "name": "Discord",
    "description": "Blurple accents, cozy message groups and a narrow channel rail.",
    "version": CATALOG_VERSION,
    "colors": {
        "primary": "#5865F2",
        "secondary": "#4752C4",
        "accent": "#EB459E",
        "background": "#FFFFFF",
        "surface": "#F2F3F5",
        "text": "#313338",
        "text_secondary": "#4E5058",
        "muted": "#5C5E66",
        "border": "#E3E5E8",
        "success": "#23A55A",
        "warning": "#F0B232",
        "error": "#F23F43",
        "info": "#00A8FC",
        "button_primary_bg": "#5865F2",
        "button_primary_text": "#FFFFFF",
        "button_secondary_bg": "#4E5058",
        "button_secondary_text": "#FFFFFF",
    },
    "dark_mode": {
        "colors": {
            "primary": "#5865F2",
            "secondary": "#4752C4",
            "accent": "#EB459E",
            "background": "#313338",
            "surface": "#2B2D31",
            "text": "#DBDEE1",
            "text_secondary": "#B5BAC1",
            "muted": "#949BA4",
            "border": "#1E1F22",
            "success": "#23A55A",
            "warning": "#F0B232",
            "error": "#F23F43",
            "info": "#00A8FC",
            "button_primary_bg": "#5865F2",
            "button_primary_text": "#FFFFFF",
            "button_secondary_bg": "#4E5058",
            "button_secondary_text": "#FFFFFF",
        }
    },
    "typography": {
        "font_family": "gg sans, Noto Sans, Helvetica Neue, Helvetica, Arial, sans-serif",
        "font_family_mono": "Consolas, Andale Mono WT, Andale Mono, Lucida Console, monospace",
        "font_size_sm": "14px",
        "font_size_base": "16px",
        "font_size_lg": "20px",
        "font_size_xl": "24px",
        "font_weight_normal": 400,
        "font_weight_medium": 500,
        "font_weight_bold": 700,
        "line_height": 1.375,
        "letter_spacing": "normal",
    },
    "spacing": {
        "message_gap": "17px",
        "message_padding": "2px 48px 2px 72px",
        "sidebar_width": "240px",
        "header_height": "48px",
        "input_height": "44px",
        "avatar_size": "40px",
        "avatar_size_sm": "16px",
        "avatar_size_lg": "80px",
    },
    "border_radius": {
        "none": "0px",
        "sm": "3px",
        "md": "4px",
        "lg": "8px",
        "xl": "16px",
        "full": "9999px",
    },
    "icons": {"style": "filled", "set": "lucide", "stroke_width": 2},
    "components": {
        "message_layout": "cozy",
        "avatar_shape": "rounded",
        "button_style": "default",
        "input_style": "filled",
        "sidebar_style": "compact",
        "header_style": "compact",
        "scrollbar_style": "thin",
    },
}


SLACK_SKIN: VisualSkin = {
    "id": "slack",
    "name": "Slack",
    "description": "Aubergine workspace sidebar, flat message rows and Lato type.",
    "version": CATALOG_VERSION,
    "colors": {
        "primary": "#611F69",
        "secondary": "#4A154B",
        "accent": "#ECB22E",
        "background": "#FFFFFF",
        "surface": "#F8F8F8",
        "text": "#1D1C1D",
        "text_secondary": "#616061",
        "muted": "#696969",
        "border": "#DDDDDC",
        "success": "#007A5A",
        "warning": "#ECB22E",
        "error": "#E01E5A",
        "info": "#1264A3",
        "button_primary_bg": "#007A5A",
        "button_primary_text": "#FFFFFF",
        "button_secondary_bg": "#FFFFFF",
        "button_secondary_text": "#1D1C1D",
    },
    "dark_mode": {
        "colors": {
            "primary": "#D1B3D3",
            "secondary": "#350D36",
            "accent": "#ECB22E",
            "background": "#1A1D21",
            "surface": "#222529",
            "text": "#D1D2D3",
            "text_secondary": "#ABABAD",
            "muted": "#9A9B9E",
            "border": "#35383C",
            "success": "#2BAC76",
            "warning": "#ECB22E",
            "error": "#E01E5A",
            "info": "#36C5F0",
            "button_primary_bg": "#2BAC76",
            "button_primary_text": "#FFFFFF",
            "button_secondary_bg": "#222529",
            "button_secondary_text": "#D1D2D3",
        }
    },
    "typography": {
        "font_family": "Slack-Lato, Lato, appleLogo, sans-serif",
        "font_family_mono": "Monaco, Menlo, Consolas, Courier New, monospace",
        "font_size_sm": "12px",
        "font_size_base": "15px",
        "font_size_lg": "18px",
        "font_size_xl": "22px",
        "font_weight_normal": 400,
        "font_weight_medium": 700,
        "font_weight_bold": 900,
        "line_height": 1.46668,
        "letter_spacing": "normal",
    },
    "spacing": {
        "message_gap": "0px",
        "message_padding": "4px 20px",
        "sidebar_width": "260px",
        "header_height": "49px",
        "input_height": "42px",
        "avatar_size": "36px",
        "avatar_size_sm": "20px",
        "avatar_size_lg": "48px",
    },
    "border_radius": {
        "none": "0px",
        "sm": "4px",
        "md": "6px",
        "lg": "8px",
        "xl": "12px",
        "full": "9999px",
    },
    "icons": {"style": "outline", "set": "lucide", "stroke_width": 1.5},
    "components": {
        "message_layout": "default",
        "avatar_shape": "rounded",
        "button_style": "default",
        "input_style": "outline",
        "sidebar_style": "default",
        "header_style": "default",
        "scrollbar_style": "default",
    },
}


SIGNAL_SKIN: VisualSkin = {
    "id": "signal",
    "name": "Signal",
    "description": "Clean monochrome surfaces with Signal blue bubbles.",
    "version": CATALOG_VERSION,
    "colors": {
        "primary": "#3A76F0",
        "secondary": "#2C6BED",
        "accent": "#2C58C3",
        "background": "#FFFFFF",
        "surface": "#F6F6F6",
        "text": "#1B1B1B",
        "text_secondary": "#5E5E5E",
        "muted": "#848484",
        "border": "#E9E9E9",
        "success": "#2E7D32",
        "warning": "#F5A623",
        "error": "#D00B0B",
        "info": "#2C6BED",
        "button_primary_bg": "#3A76F0",
        "button_primary_text": "#FFFFFF",
        "button_secondary_bg": "#E9E9E9",
        "button_secondary_text": "#1B1B1B",
    },
    "dark_mode": {
        "colors": {
            "primary": "#3A76F0",
            "secondary": "#2C6BED",
            "accent": "#6191F3",
            "background": "#121212",
            "surface": "#1B1C1F",
            "text": "#E9E9E9",
            "text_secondary": "#B9B9B9",
            "muted": "#848484",
            "border": "#2E2E2E",
            "success": "#4CAF50",
            "warning": "#F5A623",
            "error": "#F6716E",
            "info": "#6191F3",
            "button_primary_bg": "#3A76F0",
            "button_primary_text": "#FFFFFF",
            "button_secondary_bg": "#2E2E2E",
            "button_secondary_text": "#E9E9E9",
        }
    },
    "typography": {
        "font_family": "Inter, -apple-system, BlinkMacSystemFont, Segoe UI, Helvetica Neue, sans-serif",
        "font_family_mono": "SF Mono, Menlo, Consolas, monospace",
        "font_size_sm": "13px",
        "font_size_base": "15px",
        "font_size_lg": "18px",
        "font_size_xl": "20px",
        "font_weight_normal": 400,
        "font_weight_medium": 500,
        "font_weight_bold": 600,
        "line_height": 1.4,
        "letter_spacing": "normal",
    },
    "spacing": {
        "message_gap": "2px",
        "message_padding": "7px 12px",
        "sidebar_width": "320px",
        "header_height": "52px",
        "input_height": "40px",
        "avatar_size": "36px",
        "avatar_size_sm": "28px",
        "avatar_size_lg": "80px",
    },
    "border_radius": {
        "none": "0px",
        "sm": "4px",
        "md": "8px",
        "lg": "18px",
        "xl": "20px",
        "full": "9999px",
    },
    "icons": {"style": "outline", "set": "lucide", "stroke_width": 1.5},
    "components": {
        "message_layout": "bubbles",
        "avatar_shape": "circle",
        "button_style": "pill",
        "input_style": "filled",
        "sidebar_style": "default",
        "header_style": "default",
        "scrollbar_style": "thin",
    },
}


VISUAL_SKINS: Dict[str, VisualSkin] = {
    skin["id"]: skin
    for skin in (
        NCHAT_SKIN,
        WHATSAPP_SKIN,
        TELEGRAM_SKIN,
        DISCORD_SKIN,
        SLACK_SKIN,
        SIGNAL_SKIN,
    )
}


def list_visual_skin_ids() -> List[str]:
    return list(VISUAL_SKINS.keys())
