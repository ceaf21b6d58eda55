"""Platform-specific extras layered on top of the core catalog records.

The core skin and behavior records only carry the fields every platform
shares. Details that exist for a single platform (Slack's aubergine sidebar,
Discord's guild limits, WhatsApp's status updates) live in the side tables
below, keyed by the same platform id, and are composed with the core record
as ``{base, extended}`` rather than by widening the core schema.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .behavior_presets import BEHAVIOR_PRESETS
from .schema import BehaviorPreset, VisualSkin
from .visual_skins import VISUAL_SKINS

__all__ = [
    "EXTENDED_VISUALS",
    "EXTENDED_BEHAVIORS",
    "PlatformVisual",
    "PlatformBehavior",
    "get_platform_visual",
    "get_platform_behavior",
    "get_extended_colors",
]


def _shadows(border: str, dropdown: str, modal: str) -> Dict[str, str]:
    return {
        "header": "none",
        "dropdown": dropdown,
        "modal": modal,
        "message_action_bar": f"0 0 0 1px {border}, 0 1px 3px rgba(0, 0, 0, 0.08)",
        "thread_panel": f"-1px 0 0 {border}",
    }


EXTENDED_VISUALS: Dict[str, Dict[str, Any]] = {
    "nchat": {
        "extended_colors": {
            "light": {
                "sidebar_bg": "#FAFAFA",
                "sidebar_text": "#3F3F46",
                "sidebar_selected_bg": "#E4E4E7",
                "link_color": "#0284C7",
                "mention_badge_bg": "#DC2626",
                "mention_highlight_bg": "#ECFEFF",
                "presence_online": "#16A34A",
            },
            "dark": {
                "sidebar_bg": "#09090B",
                "sidebar_text": "#D4D4D8",
                "sidebar_selected_bg": "#27272A",
                "link_color": "#38BDF8",
                "mention_badge_bg": "#EF4444",
                "mention_highlight_bg": "#083344",
                "presence_online": "#22C55E",
            },
        },
        "shadows": {
            "light": _shadows("#E4E4E7", "0 4px 12px rgba(0, 0, 0, 0.08)", "0 16px 48px rgba(0, 0, 0, 0.16)"),
            "dark": _shadows("#3F3F46", "0 4px 12px rgba(0, 0, 0, 0.4)", "0 16px 48px rgba(0, 0, 0, 0.6)"),
        },
    },
    "whatsapp": {
        "extended_colors": {
            "light": {
                "chat_bg": "#EFEAE2",
                "outgoing_bubble_bg": "#D9FDD3",
                "incoming_bubble_bg": "#FFFFFF",
                "read_receipt": "#53BDEB",
                "unread_badge_bg": "#25D366",
                "header_bg": "#F0F2F5",
                "link_color": "#027EB5",
            },
            "dark": {
                "chat_bg": "#0B141A",
                "outgoing_bubble_bg": "#005C4B",
                "incoming_bubble_bg": "#202C33",
                "read_receipt": "#53BDEB",
                "unread_badge_bg": "#00A884",
                "header_bg": "#202C33",
                "link_color": "#53BDEB",
            },
        },
        "shadows": {
            "light": _shadows("#E9EDEF", "0 2px 5px rgba(11, 20, 26, 0.26)", "0 17px 50px rgba(11, 20, 26, 0.19)"),
            "dark": _shadows("#2A3942", "0 2px 5px rgba(0, 0, 0, 0.5)", "0 17px 50px rgba(0, 0, 0, 0.6)"),
        },
    },
    "telegram": {
        "extended_colors": {
            "light": {
                "chat_bg": "#A2C48A",
                "outgoing_bubble_bg": "#EEFFDE",
                "incoming_bubble_bg": "#FFFFFF",
                "read_receipt": "#4FAE4E",
                "unread_badge_bg": "#2AABEE",
                "muted_badge_bg": "#A2ACB0",
                "link_color": "#3390EC",
            },
            "dark": {
                "chat_bg": "#0F0F0F",
                "outgoing_bubble_bg": "#766AC8",
                "incoming_bubble_bg": "#212121",
                "read_receipt": "#FFFFFF",
                "unread_badge_bg": "#2AABEE",
                "muted_badge_bg": "#707579",
                "link_color": "#8774E1",
            },
        },
        "shadows": {
            "light": _shadows("#DADCE0", "0 4px 16px rgba(0, 0, 0, 0.12)", "0 8px 32px rgba(0, 0, 0, 0.2)"),
            "dark": _shadows("#303030", "0 4px 16px rgba(0, 0, 0, 0.5)", "0 8px 32px rgba(0, 0, 0, 0.7)"),
        },
    },
    "discord": {
        "extended_colors": {
            "light": {
                "server_rail_bg": "#E3E5E8",
                "channel_list_bg": "#F2F3F5",
                "mention_highlight_bg": "#FEF8E9",
                "mention_badge_bg": "#F23F43",
                "link_color": "#006CE7",
                "presence_online": "#23A55A",
                "presence_idle": "#F0B232",
            },
            "dark": {
                "server_rail_bg": "#1E1F22",
                "channel_list_bg": "#2B2D31",
                "mention_highlight_bg": "#444037",
                "mention_badge_bg": "#F23F43",
                "link_color": "#00A8FC",
                "presence_online": "#23A55A",
                "presence_idle": "#F0B232",
            },
        },
        "shadows": {
            "light": _shadows("#E3E5E8", "0 8px 16px rgba(0, 0, 0, 0.16)", "0 0 0 1px rgba(6, 6, 7, 0.08), 0 2px 10px rgba(0, 0, 0, 0.2)"),
            "dark": _shadows("#1E1F22", "0 8px 16px rgba(0, 0, 0, 0.24)", "0 0 0 1px rgba(0, 0, 0, 0.3), 0 2px 10px rgba(0, 0, 0, 0.5)"),
        },
    },
    "slack": {
        "extended_colors": {
            "light": {
                "sidebar_bg": "#4A154B",
                "sidebar_text": "#FFFFFF",
                "sidebar_selected_bg": "#1264A3",
                "mention_badge_bg": "#E01E5A",
                "link_color": "#1264A3",
                "star_color": "#ECB22E",
                "presence_online": "#2BAC76",
                "presence_away": "#ECB22E",
                "presence_dnd": "#E01E5A",
                "huddle_active_text": "#007A5A",
                "workspace_switcher_bg": "#350D36",
                "mention_highlight_bg": "#FCE8B2",
                "header_bg": "#FFFFFF",
                "header_border": "#DDDDDC",
            },
            "dark": {
                "sidebar_bg": "#1A1D21",
                "sidebar_text": "#D1D2D3",
                "sidebar_selected_bg": "#1164A3",
                "mention_badge_bg": "#E01E5A",
                "link_color": "#36C5F0",
                "star_color": "#ECB22E",
                "presence_online": "#2BAC76",
                "presence_away": "#ECB22E",
                "presence_dnd": "#E01E5A",
                "huddle_active_text": "#2BAC76",
                "workspace_switcher_bg": "#121016",
                "mention_highlight_bg": "#3D3A2E",
                "header_bg": "#1A1D21",
                "header_border": "#35383C",
            },
        },
        "shadows": {
            "light": _shadows("#DDDDDC", "0 4px 12px rgba(0, 0, 0, 0.12)", "0 18px 48px rgba(0, 0, 0, 0.35)"),
            "dark": _shadows("#35383C", "0 4px 12px rgba(0, 0, 0, 0.5)", "0 18px 48px rgba(0, 0, 0, 0.7)"),
        },
    },
    "signal": {
        "extended_colors": {
            "light": {
                "outgoing_bubble_bg": "#3A76F0",
                "outgoing_bubble_text": "#FFFFFF",
                "incoming_bubble_bg": "#E9E9E9",
                "safety_number_bg": "#F6F6F6",
                "link_color": "#2C6BED",
                "unread_badge_bg": "#3A76F0",
            },
            "dark": {
                "outgoing_bubble_bg": "#3A76F0",
                "outgoing_bubble_text": "#FFFFFF",
                "incoming_bubble_bg": "#3B3B3B",
                "safety_number_bg": "#1B1C1F",
                "link_color": "#6191F3",
                "unread_badge_bg": "#3A76F0",
            },
        },
        "shadows": {
            "light": _shadows("#E9E9E9", "0 2px 12px rgba(0, 0, 0, 0.1)", "0 8px 28px rgba(0, 0, 0, 0.2)"),
            "dark": _shadows("#2E2E2E", "0 2px 12px rgba(0, 0, 0, 0.4)", "0 8px 28px rgba(0, 0, 0, 0.6)"),
        },
    },
}


EXTENDED_BEHAVIORS: Dict[str, Dict[str, Any]] = {
    "nchat": {
        "workspace": {"multi_workspace": True, "max_members": 10000, "guest_accounts": True},
        "bots": {"enabled": True, "slash_commands": True, "webhooks": True},
    },
    "whatsapp": {
        "status": {"enabled": True, "expires_after_hours": 24, "max_video_seconds": 60},
        "communities": {"enabled": True, "max_groups": 100, "announcement_group": True},
        "broadcast_lists": {"enabled": True, "max_recipients": 256},
    },
    "telegram": {
        "channels": {"enabled": True, "max_subscribers": 0, "signed_posts": True},
        "bots": {"enabled": True, "inline_mode": True, "mini_apps": True},
        "secret_chats": {"enabled": True, "self_destruct_timer": True, "device_bound": True},
    },
    "discord": {
        "guild": {
            "enabled": True,
            "max_servers_per_user": 100,
            "max_members_per_server": 500000,
            "max_roles_per_server": 250,
            "max_emoji": 50,
        },
        "threads": {
            "public_threads": True,
            "private_threads": True,
            "auto_archive_durations": [60, 1440, 4320, 10080],
            "default_auto_archive_duration": 1440,
        },
        "stage": {"enabled": True, "request_to_speak": True, "max_speakers": 50},
        "roles": {"hierarchical": True, "role_colors": True, "channel_overrides": True},
    },
    "slack": {
        "workspace": {
            "multi_workspace": True,
            "max_members": 500000,
            "default_notify_level": "mentions",
            "custom_emoji_creation": True,
            "retention_policies": True,
            "analytics": True,
        },
        "sections": {
            "enabled": True,
            "max_sections": 100,
            "collapsible": True,
            "reorderable": True,
            "starred_section": True,
            "dms_section": True,
            "default_sections": ["Starred", "Channels", "Direct messages", "Apps"],
        },
        "huddles": {
            "enabled": True,
            "max_participants": 50,
            "video": True,
            "screen_share": True,
            "threads": True,
            "in_channel": True,
            "in_dm": True,
            "live_captions": True,
        },
        "canvas": {"enabled": True, "channel_canvas": True, "templates": True},
        "workflows": {"enabled": True, "triggers": ["shortcut", "schedule", "emoji", "webhook"]},
    },
    "signal": {
        "safety_numbers": {"enabled": True, "verification_qr": True},
        "sealed_sender": {"enabled": True},
        "usernames": {"enabled": True, "phone_number_privacy": True},
    },
}


@dataclass(frozen=True)
class PlatformVisual:
    """Core visual skin plus the platform's extended color and shadow tables."""

    base: VisualSkin
    extended: Mapping[str, Any]

    def colors(self, is_dark_mode: bool = False) -> Dict[str, str]:
        mode = "dark" if is_dark_mode else "light"
        return dict(self.extended.get("extended_colors", {}).get(mode, {}))

    def shadows(self, is_dark_mode: bool = False) -> Dict[str, str]:
        mode = "dark" if is_dark_mode else "light"
        return dict(self.extended.get("shadows", {}).get(mode, {}))


@dataclass(frozen=True)
class PlatformBehavior:
    base: BehaviorPreset
    extended: Mapping[str, Any]


def get_platform_visual(platform_id: str) -> Optional[PlatformVisual]:
    skin = VISUAL_SKINS.get(platform_id)
    if skin is None:
        return None
    return PlatformVisual(
        base=copy.deepcopy(skin),
        extended=copy.deepcopy(EXTENDED_VISUALS.get(platform_id, {})),
    )


def get_platform_behavior(platform_id: str) -> Optional[PlatformBehavior]:
    preset = BEHAVIOR_PRESETS.get(platform_id)
    if preset is None:
        return None
    return PlatformBehavior(
        base=copy.deepcopy(preset),
        extended=copy.deepcopy(EXTENDED_BEHAVIORS.get(platform_id, {})),
    )


def get_extended_colors(platform_id: str, is_dark_mode: bool = False) -> Dict[str, str]:
    """Return the extended palette for ``platform_id`` (empty when unknown)."""
    visual = get_platform_visual(platform_id)
    if visual is None:
        return {}
    return visual.colors(is_dark_mode)
