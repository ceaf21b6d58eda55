"""Built-in behavior presets.

A behavior preset describes how a platform *acts* (edit windows, threading,
presence, calls, privacy defaults) independently of how it looks. Time values
are milliseconds; numeric limits use ``0`` for "unlimited".
"""

from __future__ import annotations

from typing import Dict, List

from skins.config.settings import CATALOG_VERSION

from .schema import BehaviorPreset

__all__ = [
    "NCHAT_BEHAVIOR",
    "WHATSAPP_BEHAVIOR",
    "TELEGRAM_BEHAVIOR",
    "DISCORD_BEHAVIOR",
    "SLACK_BEHAVIOR",
    "SIGNAL_BEHAVIOR",
    "BEHAVIOR_PRESETS",
    "list_behavior_ids",
]

_MINUTE = 60 * 1000
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR


NCHAT_BEHAVIOR: BehaviorPreset = {
    "id": "nchat",
    "name": "nChat",
    "description": "Balanced defaults: side-panel threads, full reactions, optional receipts.",
    "version": CATALOG_VERSION,
    "messaging": {
        "edit_window": 0,
        "delete_window": 0,
        "delete_for_everyone": True,
        "show_edited_indicator": True,
        "reaction_style": "full-picker",
        "max_reactions_per_message": 0,
        "threading_model": "side-panel",
        "max_message_length": 10000,
        "forwarding": True,
        "forward_limit": 0,
        "pinning": True,
        "bookmarking": True,
        "scheduling": True,
        "link_previews": True,
    },
    "channels": {
        "types": ["public", "private", "dm", "group-dm", "broadcast"],
        "hierarchy": False,
        "categories": True,
        "forums": False,
        "max_group_dm_members": 50,
        "max_group_members": 10000,
        "archiving": True,
        "slow_mode": True,
    },
    "presence": {
        "states": ["online", "away", "dnd", "invisible", "offline"],
        "show_last_seen": True,
        "custom_status": True,
        "activity_status": False,
        "typing_indicator": True,
        "auto_away_timeout": 10 * _MINUTE,
        "invisible_mode": True,
    },
    "calls": {
        "supported": True,
        "voice_calls": True,
        "video_calls": True,
        "group_calls": True,
        "group_max": 50,
        "screen_share": True,
        "recording": False,
        "huddles": False,
    },
    "notifications": {
        "default_level": "all",
        "mention_rules": ["user", "channel", "here", "everyone"],
        "quiet_hours": True,
        "thread_notifications": True,
        "sound_enabled": True,
        "badge_count": True,
        "email_digest": False,
    },
    "moderation": {
        "profanity_filter": False,
        "spam_detection": True,
        "automod": False,
        "report_system": True,
        "user_blocking": True,
    },
    "privacy": {
        "read_receipts": True,
        "read_receipts_optional": True,
        "last_seen": True,
        "profile_visibility": "everyone",
        "online_status_visible": True,
        "e2ee_default": False,
        "disappearing_messages": True,
        "disappearing_options": [86400, 604800, 7776000],
    },
    "features": {
        "rich_text": True,
        "markdown": True,
        "code_blocks": True,
        "mentions": True,
        "custom_emoji": True,
        "gifs": True,
        "stickers": True,
        "polls": True,
        "voice_messages": True,
        "file_uploads": True,
        "location_sharing": False,
        "contact_sharing": False,
        "stories": False,
        "huddles": False,
        "canvas": False,
        "workflows": False,
        "slash_commands": True,
        "scheduled_messages": True,
        "reminders": True,
        "keyword_alerts": True,
    },
}


WHATSAPP_BEHAVIOR: BehaviorPreset = {
    "id": "whatsapp",
    "name": "WhatsApp",
    "description": "Phone-first messaging: short edit window, reply chains, E2EE on by default.",
    "version": CATALOG_VERSION,
    "messaging": {
        "edit_window": 15 * _MINUTE,
        "delete_window": 2 * _DAY + 12 * _HOUR,
        "delete_for_everyone": True,
        "show_edited_indicator": True,
        "reaction_style": "quick-reactions",
        "max_reactions_per_message": 1,
        "threading_model": "reply-chain",
        "max_message_length": 65536,
        "forwarding": True,
        "forward_limit": 5,
        "pinning": True,
        "bookmarking": True,
        "scheduling": False,
        "link_previews": True,
    },
    "channels": {
        "types": ["dm", "group-dm", "broadcast", "announcement"],
        "hierarchy": False,
        "categories": False,
        "forums": False,
        "max_group_dm_members": 1024,
        "max_group_members": 1024,
        "archiving": True,
        "slow_mode": False,
    },
    "presence": {
        "states": ["online", "offline"],
        "show_last_seen": True,
        "custom_status": False,
        "activity_status": False,
        "typing_indicator": True,
        "auto_away_timeout": 0,
        "invisible_mode": False,
    },
    "calls": {
        "supported": True,
        "voice_calls": True,
        "video_calls": True,
        "group_calls": True,
        "group_max": 32,
        "screen_share": True,
        "recording": False,
        "huddles": False,
    },
    "notifications": {
        "default_level": "all",
        "mention_rules": ["user", "everyone"],
        "quiet_hours": False,
        "thread_notifications": False,
        "sound_enabled": True,
        "badge_count": True,
        "email_digest": False,
    },
    "moderation": {
        "profanity_filter": False,
        "spam_detection": True,
        "automod": False,
        "report_system": True,
        "user_blocking": True,
    },
    "privacy": {
        "read_receipts": True,
        "read_receipts_optional": True,
        "last_seen": True,
        "profile_visibility": "contacts",
        "online_status_visible": True,
        "e2ee_default": True,
        "disappearing_messages": True,
        "disappearing_options": [86400, 604800, 7776000],
    },
    "features": {
        "rich_text": True,
        "markdown": False,
        "code_blocks": True,
        "mentions": True,
        "custom_emoji": False,
        "gifs": True,
        "stickers": True,
        "polls": True,
        "voice_messages": True,
        "file_uploads": True,
        "location_sharing": True,
        "contact_sharing": True,
        "stories": True,
        "huddles": False,
        "canvas": False,
        "workflows": False,
        "slash_commands": False,
        "scheduled_messages": False,
        "reminders": False,
        "keyword_alerts": False,
    },
}


TELEGRAM_BEHAVIOR: BehaviorPreset = {
    "id": "telegram",
    "name": "Telegram",
    "description": "Cloud chats with huge groups, channels, bots and unlimited edits.",
    "version": CATALOG_VERSION,
    "messaging": {
        "edit_window": 2 * _DAY,
        "delete_window": 0,
        "delete_for_everyone": True,
        "show_edited_indicator": True,
        "reaction_style": "quick-reactions",
        "max_reactions_per_message": 3,
        "threading_model": "reply-chain",
        "max_message_length": 4096,
        "forwarding": True,
        "forward_limit": 100,
        "pinning": True,
        "bookmarking": True,
        "scheduling": True,
        "link_previews": True,
    },
    "channels": {
        "types": ["dm", "group-dm", "broadcast", "forum", "secret"],
        "hierarchy": False,
        "categories": True,
        "forums": True,
        "max_group_dm_members": 200000,
        "max_group_members": 200000,
        "archiving": True,
        "slow_mode": True,
    },
    "presence": {
        "states": ["online", "offline"],
        "show_last_seen": True,
        "custom_status": True,
        "activity_status": False,
        "typing_indicator": True,
        "auto_away_timeout": 0,
        "invisible_mode": False,
    },
    "calls": {
        "supported": True,
        "voice_calls": True,
        "video_calls": True,
        "group_calls": True,
        "group_max": 1000,
        "screen_share": True,
        "recording": True,
        "huddles": False,
    },
    "notifications": {
        "default_level": "all",
        "mention_rules": ["user", "everyone"],
        "quiet_hours": True,
        "thread_notifications": True,
        "sound_enabled": True,
        "badge_count": True,
        "email_digest": False,
    },
    "moderation": {
        "profanity_filter": False,
        "spam_detection": True,
        "automod": True,
        "report_system": True,
        "user_blocking": True,
    },
    "privacy": {
        "read_receipts": True,
        "read_receipts_optional": False,
        "last_seen": True,
        "profile_visibility": "everyone",
        "online_status_visible": True,
        "e2ee_default": False,
        "disappearing_messages": True,
        "disappearing_options": [86400, 604800, 2592000],
    },
    "features": {
        "rich_text": True,
        "markdown": True,
        "code_blocks": True,
        "mentions": True,
        "custom_emoji": True,
        "gifs": True,
        "stickers": True,
        "polls": True,
        "voice_messages": True,
        "file_uploads": True,
        "location_sharing": True,
        "contact_sharing": True,
        "stories": True,
        "huddles": False,
        "canvas": False,
        "workflows": False,
        "slash_commands": True,
        "scheduled_messages": True,
        "reminders": True,
        "keyword_alerts": False,
    },
}


DISCORD_BEHAVIOR: BehaviorPreset = {
    "id": "discord",
    "name": "Discord",
    "description": "Servers with categories, inline threads, voice channels, no receipts.",
    "version": CATALOG_VERSION,
    "messaging": {
        "edit_window": 0,
        "delete_window": 0,
        "delete_for_everyone": True,
        "show_edited_indicator": True,
        "reaction_style": "full-picker",
        "max_reactions_per_message": 20,
        "threading_model": "inline",
        "max_message_length": 2000,
        "forwarding": True,
        "forward_limit": 5,
        "pinning": True,
        "bookmarking": False,
        "scheduling": False,
        "link_previews": True,
    },
    "channels": {
        "types": ["public", "private", "dm", "group-dm", "voice", "stage", "forum", "announcement"],
        "hierarchy": True,
        "categories": True,
        "forums": True,
        "max_group_dm_members": 10,
        "max_group_members": 500000,
        "archiving": True,
        "slow_mode": True,
    },
    "presence": {
        "states": ["online", "idle", "dnd", "invisible", "offline"],
        "show_last_seen": False,
        "custom_status": True,
        "activity_status": True,
        "typing_indicator": True,
        "auto_away_timeout": 10 * _MINUTE,
        "invisible_mode": True,
    },
    "calls": {
        "supported": True,
        "voice_calls": True,
        "video_calls": True,
        "group_calls": True,
        "group_max": 25,
        "screen_share": True,
        "recording": False,
        "huddles": False,
    },
    "notifications": {
        "default_level": "mentions",
        "mention_rules": ["user", "role", "here", "everyone"],
        "quiet_hours": False,
        "thread_notifications": True,
        "sound_enabled": True,
        "badge_count": True,
        "email_digest": False,
    },
    "moderation": {
        "profanity_filter": True,
        "spam_detection": True,
        "automod": True,
        "report_system": True,
        "user_blocking": True,
    },
    "privacy": {
        "read_receipts": False,
        "read_receipts_optional": False,
        "last_seen": False,
        "profile_visibility": "everyone",
        "online_status_visible": True,
        "e2ee_default": False,
        "disappearing_messages": False,
        "disappearing_options": [],
    },
    "features": {
        "rich_text": True,
        "markdown": True,
        "code_blocks": True,
        "mentions": True,
        "custom_emoji": True,
        "gifs": True,
        "stickers": True,
        "polls": True,
        "voice_messages": True,
        "file_uploads": True,
        "location_sharing": False,
        "contact_sharing": False,
        "stories": False,
        "huddles": False,
        "canvas": False,
        "workflows": False,
        "slash_commands": True,
        "scheduled_messages": False,
        "reminders": False,
        "keyword_alerts": False,
    },
}


SLACK_BEHAVIOR: BehaviorPreset = {
    "id": "slack",
    "name": "Slack",
    "description": "Workspace channels, side-panel threads, huddles and workflows.",
    "version": CATALOG_VERSION,
    "messaging": {
        "edit_window": 0,
        "delete_window": 0,
        "delete_for_everyone": False,
        "show_edited_indicator": True,
        "reaction_style": "full-picker",
        "max_reactions_per_message": 23,
        "threading_model": "side-panel",
        "max_message_length": 40000,
        "forwarding": True,
        "forward_limit": 0,
        "pinning": True,
        "bookmarking": True,
        "scheduling": True,
        "link_previews": True,
    },
    "channels": {
        "types": ["public", "private", "dm", "group-dm"],
        "hierarchy": False,
        "categories": True,
        "forums": False,
        "max_group_dm_members": 9,
        "max_group_members": 500000,
        "archiving": True,
        "slow_mode": False,
    },
    "presence": {
        "states": ["online", "away", "dnd", "offline"],
        "show_last_seen": False,
        "custom_status": True,
        "activity_status": False,
        "typing_indicator": True,
        "auto_away_timeout": 30 * _MINUTE,
        "invisible_mode": False,
    },
    "calls": {
        "supported": True,
        "voice_calls": True,
        "video_calls": True,
        "group_calls": True,
        "group_max": 50,
        "screen_share": True,
        "recording": True,
        "huddles": True,
    },
    "notifications": {
        "default_level": "mentions",
        "mention_rules": ["user", "channel", "here", "everyone"],
        "quiet_hours": True,
        "thread_notifications": True,
        "sound_enabled": True,
        "badge_count": True,
        "email_digest": True,
    },
    "moderation": {
        "profanity_filter": False,
        "spam_detection": True,
        "automod": False,
        "report_system": True,
        "user_blocking": False,
    },
    "privacy": {
        "read_receipts": True,
        "read_receipts_optional": False,
        "last_seen": False,
        "profile_visibility": "everyone",
        "online_status_visible": True,
        "e2ee_default": False,
        "disappearing_messages": False,
        "disappearing_options": [],
    },
    "features": {
        "rich_text": True,
        "markdown": True,
        "code_blocks": True,
        "mentions": True,
        "custom_emoji": True,
        "gifs": True,
        "stickers": False,
        "polls": True,
        "voice_messages": True,
        "file_uploads": True,
        "location_sharing": False,
        "contact_sharing": False,
        "stories": False,
        "huddles": True,
        "canvas": True,
        "workflows": True,
        "slash_commands": True,
        "scheduled_messages": True,
        "reminders": True,
        "keyword_alerts": True,
    },
}


SIGNAL_BEHAVIOR: BehaviorPreset = {
    "id": "signal",
    "name": "Signal",
    "description": "Private by default: E2EE everywhere, minimal presence, disappearing messages.",
    "version": CATALOG_VERSION,
    "messaging": {
        "edit_window": 24 * _HOUR,
        "delete_window": 24 * _HOUR,
        "delete_for_everyone": True,
        "show_edited_indicator": True,
        "reaction_style": "quick-reactions",
        "max_reactions_per_message": 1,
        "threading_model": "reply-chain",
        "max_message_length": 2000,
        "forwarding": True,
        "forward_limit": 5,
        "pinning": False,
        "bookmarking": False,
        "scheduling": False,
        "link_previews": True,
    },
    "channels": {
        "types": ["dm", "group-dm"],
        "hierarchy": False,
        "categories": False,
        "forums": False,
        "max_group_dm_members": 1000,
        "max_group_members": 1000,
        "archiving": True,
        "slow_mode": False,
    },
    "presence": {
        "states": ["online", "offline"],
        "show_last_seen": False,
        "custom_status": False,
        "activity_status": False,
        "typing_indicator": True,
        "auto_away_timeout": 0,
        "invisible_mode": False,
    },
    "calls": {
        "supported": True,
        "voice_calls": True,
        "video_calls": True,
        "group_calls": True,
        "group_max": 50,
        "screen_share": True,
        "recording": False,
        "huddles": False,
    },
    "notifications": {
        "default_level": "all",
        "mention_rules": ["user"],
        "quiet_hours": False,
        "thread_notifications": False,
        "sound_enabled": True,
        "badge_count": True,
        "email_digest": False,
    },
    "moderation": {
        "profanity_filter": False,
        "spam_detection": True,
        "automod": False,
        "report_system": True,
        "user_blocking": True,
    },
    "privacy": {
        "read_receipts": True,
        "read_receipts_optional": True,
        "last_seen": False,
        "profile_visibility": "contacts",
        "online_status_visible": False,
        "e2ee_default": True,
        "disappearing_messages": True,
        "disappearing_options": [30, 300, 3600, 28800, 86400, 604800, 2419200],
    },
    "features": {
        "rich_text": True,
        "markdown": False,
        "code_blocks": False,
        "mentions": True,
        "custom_emoji": False,
        "gifs": True,
        "stickers": True,
        "polls": True,
        "voice_messages": True,
        "file_uploads": True,
        "location_sharing": False,
        "contact_sharing": True,
        "stories": True,
        "huddles": False,
        "canvas": False,
        "workflows": False,
        "slash_commands": False,
        "scheduled_messages": False,
        "reminders": False,
        "keyword_alerts": False,
    },
}


BEHAVIOR_PRESETS: Dict[str, BehaviorPreset] = {
    preset["id"]: preset
    for preset in (
        NCHAT_BEHAVIOR,
        WHATSAPP_BEHAVIOR,
        TELEGRAM_BEHAVIOR,
        DISCORD_BEHAVIOR,
        SLACK_BEHAVIOR,
        SIGNAL_BEHAVIOR,
    )
}


def list_behavior_ids() -> List[str]:
    return list(BEHAVIOR_PRESETS.keys())
