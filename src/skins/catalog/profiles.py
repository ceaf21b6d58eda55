"""Built-in composite profiles.

A profile pairs one visual skin with one behavior preset by id. Same-platform
profiles exist for every built-in platform; the hybrids demonstrate mixing a
look from one platform with the behavior of another, optionally adjusted by
embedded overrides.
"""

from __future__ import annotations

from typing import Dict, List

from .behavior_presets import BEHAVIOR_PRESETS
from .schema import CompositeProfile
from .visual_skins import VISUAL_SKINS

__all__ = ["COMPOSITE_PROFILES", "HYBRID_PROFILES", "list_profile_ids"]


def _same_platform(platform_id: str) -> CompositeProfile:
    skin = VISUAL_SKINS[platform_id]
    return {
        "id": platform_id,
        "name": skin["name"],
        "description": f"{skin['name']} look with {BEHAVIOR_PRESETS[platform_id]['name']} behavior.",
        "skin_id": platform_id,
        "behavior_id": platform_id,
    }


HYBRID_PROFILES: List[CompositeProfile] = [
    {
        "id": "discord-look-slack-behavior",
        "name": "Discord Look, Slack Behavior",
        "description": "Gaming-style visuals with side-panel threads and workspace conventions.",
        "skin_id": "discord",
        "behavior_id": "slack",
    },
    {
        "id": "slack-look-discord-behavior",
        "name": "Slack Look, Discord Behavior",
        "description": "Workspace visuals with servers, roles and inline threads.",
        "skin_id": "slack",
        "behavior_id": "discord",
    },
    {
        "id": "whatsapp-look-telegram-behavior",
        "name": "WhatsApp Look, Telegram Behavior",
        "description": "Familiar bubbles with large groups, channels and long edit windows.",
        "skin_id": "whatsapp",
        "behavior_id": "telegram",
    },
    {
        "id": "signal-look-whatsapp-behavior",
        "name": "Signal Look, WhatsApp Behavior",
        "description": "Minimal Signal visuals with WhatsApp messaging rules.",
        "skin_id": "signal",
        "behavior_id": "whatsapp",
    },
    {
        "id": "privacy-team",
        "name": "Privacy Team",
        "description": "Signal privacy defaults tuned for team collaboration.",
        "skin_id": "signal",
        "behavior_id": "signal",
        "overrides": {
            "behavior": {
                "messaging": {
                    "threading_model": "side-panel",
                    "pinning": True,
                },
            },
        },
    },
]


COMPOSITE_PROFILES: Dict[str, CompositeProfile] = {
    platform_id: _same_platform(platform_id) for platform_id in VISUAL_SKINS
}
COMPOSITE_PROFILES.update({profile["id"]: profile for profile in HYBRID_PROFILES})


def list_profile_ids() -> List[str]:
    return list(COMPOSITE_PROFILES.keys())
