"""Per-platform parity checklists.

Each checklist enumerates the features a platform skin + behavior preset must
reproduce to pass as that platform. Items point at the config value that
controls the feature with a dotted path into a *platform config*::

    {"skin": <visual skin>, "behavior": <behavior preset>, "extended": <side table>}

so ``behavior.messaging.max_message_length`` or ``extended.huddles.enabled``.
Status and priority counts are bookkeeping; :func:`verify_config_parity`
actually resolves every implemented item against a config and reports the
values that drifted.
"""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .behavior_presets import BEHAVIOR_PRESETS
from .extended import EXTENDED_BEHAVIORS
from .visual_skins import VISUAL_SKINS

__all__ = [
    "PARITY_PRIORITIES",
    "PARITY_STATUSES",
    "ParityItem",
    "ParityMismatch",
    "ParityReport",
    "ParityChecklist",
    "PARITY_CHECKLISTS",
    "calculate_parity_percentage",
    "resolve_config_path",
    "platform_config",
    "verify_config_parity",
    "get_parity_checklist",
    "list_parity_platforms",
]

PARITY_PRIORITIES: Tuple[str, ...] = ("critical", "high", "medium", "low")
PARITY_STATUSES: Tuple[str, ...] = ("implemented", "partial", "not-implemented", "not-applicable")


@dataclass(frozen=True)
class ParityItem:
    id: str
    description: str
    category: str
    priority: str
    status: str
    config_path: Optional[str]
    expected_value: Any
    notes: Optional[str] = None


@dataclass(frozen=True)
class ParityMismatch:
    """An implemented item whose config value differs from the expected one.

    ``missing`` is True when the path does not resolve at all (``actual`` is
    then ``None``).
    """

    item: ParityItem
    actual: Any
    missing: bool = False


@dataclass(frozen=True)
class ParityReport:
    passed: bool
    failed_items: Tuple[ParityItem, ...]


def calculate_parity_percentage(items: Iterable[ParityItem]) -> int:
    """Implemented share of the applicable items, rounded half up (0 when none apply)."""
    applicable = [i for i in items if i.status != "not-applicable"]
    if not applicable:
        return 0
    implemented = sum(1 for i in applicable if i.status == "implemented")
    return int(math.floor(implemented * 100 / len(applicable) + 0.5))


@dataclass(frozen=True)
class ParityChecklist:
    platform_id: str
    platform: str
    target_version: str
    assessment_date: str
    categories: Tuple[str, ...]
    items: Tuple[ParityItem, ...]

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def parity_percentage(self) -> int:
        return calculate_parity_percentage(self.items)

    def status_counts(self) -> Dict[str, int]:
        counts = {status: 0 for status in PARITY_STATUSES}
        for item in self.items:
            counts[item.status] += 1
        return counts

    def priority_counts(self) -> Dict[str, int]:
        counts = {priority: 0 for priority in PARITY_PRIORITIES}
        for item in self.items:
            counts[item.priority] += 1
        return counts

    def by_category(self, category: str) -> List[ParityItem]:
        return [i for i in self.items if i.category == category]

    def by_priority(self, priority: str) -> List[ParityItem]:
        return [i for i in self.items if i.priority == priority]

    def by_status(self, status: str) -> List[ParityItem]:
        return [i for i in self.items if i.status == status]

    def get_item(self, item_id: str) -> Optional[ParityItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def category_percentage(self, category: str) -> int:
        return calculate_parity_percentage(self.by_category(category))

    def verify_critical(self) -> ParityReport:
        """Every critical item must be implemented (or not applicable)."""
        failed = tuple(
            i
            for i in self.by_priority("critical")
            if i.status not in ("implemented", "not-applicable")
        )
        return ParityReport(passed=not failed, failed_items=failed)


def resolve_config_path(config: Mapping[str, Any], path: str) -> Any:
    """Follow a dotted ``path`` through nested mappings.

    Raises ``KeyError`` naming the full path when any segment is absent.
    """
    node: Any = config
    for part in path.split("."):
        if not isinstance(node, Mapping) or part not in node:
            raise KeyError(path)
        node = node[part]
    return node


def platform_config(
    platform_id: str,
    skin: Optional[Mapping[str, Any]] = None,
    behavior: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Build the config a checklist is verified against.

    ``skin`` / ``behavior`` default to the built-in records for
    ``platform_id``; pass resolved (merged) records to check a customised
    setup instead.
    """
    return {
        "skin": copy.deepcopy(dict(skin if skin is not None else VISUAL_SKINS.get(platform_id, {}))),
        "behavior": copy.deepcopy(
            dict(behavior if behavior is not None else BEHAVIOR_PRESETS.get(platform_id, {}))
        ),
        "extended": copy.deepcopy(EXTENDED_BEHAVIORS.get(platform_id, {})),
    }


def verify_config_parity(
    checklist: ParityChecklist, config: Mapping[str, Any]
) -> List[ParityMismatch]:
    """Check every implemented item's ``config_path`` holds its expected value."""
    mismatches: List[ParityMismatch] = []
    for item in checklist.items:
        if item.status != "implemented" or not item.config_path:
            continue
        try:
            actual = resolve_config_path(config, item.config_path)
        except KeyError:
            mismatches.append(ParityMismatch(item, None, missing=True))
            continue
        if isinstance(item.expected_value, (list, tuple)) and isinstance(actual, (list, tuple)):
            equal = list(actual) == list(item.expected_value)
        else:
            equal = actual == item.expected_value
        if not equal:
            mismatches.append(ParityMismatch(item, actual))
    return mismatches


def _items(category: str, rows: Sequence[Tuple[str, str, str, Any, str]]) -> List[ParityItem]:
    return [
        ParityItem(
            id=item_id,
            description=description,
            category=category,
            priority=priority,
            status="implemented",
            config_path=path,
            expected_value=expected,
        )
        for item_id, priority, path, expected, description in rows
    ]


_DISCORD_ITEMS: List[ParityItem] = [
    *_items("servers", [
        ("srv-001", "critical", "extended.guild.enabled", True, "Server/guild system with create, join and settings"),
        ("srv-002", "medium", "extended.guild.max_servers_per_user", 100, "Up to 100 servers per user"),
        ("srv-003", "high", "behavior.channels.max_group_members", 500000, "Servers with up to 500k members"),
    ]),
    *_items("channels", [
        ("ch-001", "critical", "behavior.channels.categories", True, "Channels grouped into collapsible categories"),
        (
            "ch-002",
            "high",
            "behavior.channels.types",
            ["public", "private", "dm", "group-dm", "voice", "stage", "forum", "announcement"],
            "Text, voice, stage, forum and announcement channel types",
        ),
        ("ch-003", "medium", "behavior.channels.slow_mode", True, "Per-channel slow mode"),
    ]),
    *_items("messaging", [
        ("msg-001", "critical", "behavior.messaging.max_message_length", 2000, "2000 character message limit"),
        ("msg-002", "high", "behavior.messaging.edit_window", 0, "Messages editable without a time limit"),
        ("msg-003", "high", "behavior.messaging.reaction_style", "full-picker", "Full emoji picker reactions"),
        ("msg-004", "high", "behavior.features.markdown", True, "Markdown formatting"),
        ("msg-005", "critical", "behavior.messaging.threading_model", "inline", "Threads started inline from a message"),
    ]),
    *_items("voice", [
        ("vc-001", "critical", "behavior.calls.voice_calls", True, "Drop-in voice channels"),
        ("vc-002", "high", "behavior.calls.screen_share", True, "Screen sharing in voice"),
        ("vc-003", "medium", "behavior.calls.group_max", 25, "Video calls with up to 25 participants"),
    ]),
    *_items("stage", [
        ("stg-001", "high", "extended.stage.enabled", True, "Stage channels for audience events"),
        ("stg-002", "medium", "extended.stage.request_to_speak", True, "Audience request-to-speak"),
    ]),
    *_items("forum", [
        ("frm-001", "high", "behavior.channels.forums", True, "Forum channels with posts"),
        (
            "frm-002",
            "low",
            "extended.threads.default_auto_archive_duration",
            1440,
            "Threads auto-archive after 24 hours by default",
        ),
    ]),
    *_items("permissions", [
        ("perm-001", "critical", "extended.roles.hierarchical", True, "Hierarchical role system"),
        ("perm-002", "high", "extended.roles.channel_overrides", True, "Per-channel permission overrides"),
        ("perm-003", "medium", "extended.roles.role_colors", True, "Role colors on member names"),
    ]),
    *_items("moderation", [
        ("mod-001", "high", "behavior.moderation.automod", True, "AutoMod keyword and spam filtering"),
        (
            "mod-002",
            "high",
            "behavior.notifications.mention_rules",
            ["user", "role", "here", "everyone"],
            "@user, @role, @here and @everyone mentions",
        ),
    ]),
    ParityItem(
        id="ntr-001",
        description="Nitro subscription perks",
        category="nitro",
        priority="low",
        status="not-applicable",
        config_path=None,
        expected_value=None,
        notes="Subscriptions and billing are handled outside the client skin.",
    ),
    *_items("bots", [
        ("bot-001", "high", "behavior.features.slash_commands", True, "Bots with slash commands"),
    ]),
    *_items("ui", [
        ("ui-001", "critical", "skin.colors.primary", "#5865F2", "Blurple brand color"),
        ("ui-002", "high", "skin.components.avatar_shape", "rounded", "Rounded-square avatars"),
        ("ui-003", "high", "skin.components.message_layout", "cozy", "Cozy message layout"),
        (
            "ui-004",
            "high",
            "behavior.presence.states",
            ["online", "idle", "dnd", "invisible", "offline"],
            "Online, idle, do-not-disturb, invisible and offline states",
        ),
        ("ui-005", "medium", "skin.spacing.sidebar_width", "240px", "240px channel sidebar"),
    ]),
]

_SLACK_ITEMS: List[ParityItem] = [
    *_items("workspace", [
        ("ws-001", "critical", "extended.workspace.multi_workspace", True, "Switching between multiple workspaces"),
        ("ws-002", "medium", "behavior.features.custom_emoji", True, "Workspace custom emoji"),
    ]),
    *_items("channels", [
        (
            "ch-001",
            "critical",
            "behavior.channels.types",
            ["public", "private", "dm", "group-dm"],
            "Public and private channels, DMs and group DMs",
        ),
        ("ch-002", "high", "extended.sections.enabled", True, "Custom sidebar sections"),
        ("ch-003", "medium", "behavior.channels.max_group_dm_members", 9, "Group DMs limited to 9 people"),
    ]),
    *_items("messaging", [
        ("msg-001", "high", "behavior.messaging.max_message_length", 40000, "40,000 character messages"),
        ("msg-002", "medium", "behavior.features.scheduled_messages", True, "Scheduled messages"),
        ("msg-003", "medium", "behavior.features.reminders", True, "Message reminders"),
    ]),
    *_items("threads", [
        ("thr-001", "critical", "behavior.messaging.threading_model", "side-panel", "Threads open in a side panel"),
        ("thr-002", "high", "behavior.notifications.thread_notifications", True, "Thread reply notifications"),
    ]),
    *_items("huddles", [
        ("hdl-001", "critical", "behavior.calls.huddles", True, "Huddles from any channel or DM"),
        ("hdl-002", "medium", "extended.huddles.max_participants", 50, "Huddles with up to 50 people"),
        ("hdl-003", "high", "extended.huddles.screen_share", True, "Screen sharing in huddles"),
    ]),
    *_items("notifications", [
        ("ntf-001", "high", "behavior.notifications.default_level", "mentions", "Notify on mentions by default"),
        (
            "ntf-002",
            "high",
            "behavior.notifications.mention_rules",
            ["user", "channel", "here", "everyone"],
            "@channel, @here and @everyone mentions",
        ),
        ("ntf-003", "medium", "behavior.features.keyword_alerts", True, "Keyword alerts"),
        ("ntf-004", "low", "behavior.notifications.email_digest", True, "Email digest of missed activity"),
    ]),
    *_items("presence", [
        (
            "prs-001",
            "high",
            "behavior.presence.states",
            ["online", "away", "dnd", "offline"],
            "Active, away and do-not-disturb states",
        ),
        ("prs-002", "medium", "behavior.presence.auto_away_timeout", 30 * 60 * 1000, "Auto-away after 30 minutes"),
        ("prs-003", "high", "behavior.presence.custom_status", True, "Custom status with emoji"),
    ]),
    *_items("canvas", [
        ("cnv-001", "medium", "extended.canvas.enabled", True, "Canvases in channels"),
    ]),
    *_items("integrations", [
        ("int-001", "medium", "extended.workflows.enabled", True, "Workflow builder"),
        ("int-002", "high", "behavior.features.slash_commands", True, "Slash commands"),
    ]),
    *_items("visual", [
        ("vis-001", "critical", "skin.colors.primary", "#611F69", "Aubergine brand color"),
        ("vis-002", "medium", "skin.typography.font_family", "Slack-Lato, Lato, appleLogo, sans-serif", "Lato type"),
        ("vis-003", "high", "skin.components.avatar_shape", "rounded", "Rounded-square avatars"),
    ]),
]

_TELEGRAM_ITEMS: List[ParityItem] = [
    *_items("chat-management", [
        ("cm-001", "high", "behavior.channels.archiving", True, "Archived chats"),
        ("cm-002", "medium", "behavior.messaging.pinning", True, "Pinned messages"),
    ]),
    *_items("messaging", [
        ("msg-001", "critical", "behavior.messaging.max_message_length", 4096, "4096 character messages"),
        ("msg-002", "high", "behavior.messaging.edit_window", 2 * 24 * 60 * 60 * 1000, "Edits allowed for 48 hours"),
        ("msg-003", "critical", "behavior.messaging.threading_model", "reply-chain", "Reply chains"),
        ("msg-004", "medium", "behavior.messaging.scheduling", True, "Scheduled messages"),
        ("msg-005", "low", "behavior.messaging.forward_limit", 100, "Forward to up to 100 chats"),
    ]),
    *_items("secret-chats", [
        ("sc-001", "critical", "extended.secret_chats.enabled", True, "End-to-end encrypted secret chats"),
        ("sc-002", "high", "extended.secret_chats.self_destruct_timer", True, "Self-destruct timers"),
        ("sc-003", "high", "behavior.privacy.e2ee_default", False, "Cloud chats are not E2EE by default"),
    ]),
    *_items("channels", [
        ("chn-001", "critical", "extended.channels.enabled", True, "Broadcast channels"),
        ("chn-002", "medium", "extended.channels.max_subscribers", 0, "Unlimited channel subscribers"),
        ("chn-003", "low", "extended.channels.signed_posts", True, "Signed channel posts"),
    ]),
    *_items("groups-supergroups", [
        ("grp-001", "high", "behavior.channels.max_group_members", 200000, "Supergroups with 200k members"),
        ("grp-002", "medium", "behavior.channels.forums", True, "Forum topics in groups"),
        ("grp-003", "medium", "behavior.channels.slow_mode", True, "Slow mode"),
    ]),
    *_items("bots", [
        ("bot-001", "high", "extended.bots.enabled", True, "Bot platform"),
        ("bot-002", "medium", "extended.bots.inline_mode", True, "Inline bots"),
        ("bot-003", "low", "extended.bots.mini_apps", True, "Mini apps"),
    ]),
    *_items("calls", [
        ("call-001", "medium", "behavior.calls.group_max", 1000, "Group calls with up to 1000 participants"),
        ("call-002", "low", "behavior.calls.recording", True, "Call recording"),
    ]),
    *_items("media", [
        ("med-001", "high", "behavior.features.stickers", True, "Stickers"),
        ("med-002", "high", "behavior.features.voice_messages", True, "Voice messages"),
    ]),
    *_items("privacy", [
        ("prv-001", "high", "behavior.privacy.last_seen", True, "Last seen with privacy controls"),
        (
            "prv-002",
            "medium",
            "behavior.privacy.disappearing_options",
            [86400, 604800, 2592000],
            "Auto-delete after a day, a week or a month",
        ),
    ]),
    *_items("notifications", [
        ("ntf-001", "medium", "behavior.notifications.default_level", "all", "Notify on every message by default"),
    ]),
    *_items("theme", [
        ("thm-001", "critical", "skin.colors.primary", "#2AABEE", "Telegram blue"),
        ("thm-002", "high", "skin.components.message_layout", "bubbles", "Bubble message layout"),
        ("thm-003", "low", "skin.spacing.sidebar_width", "420px", "Wide chat list"),
    ]),
]

_WHATSAPP_ITEMS: List[ParityItem] = [
    *_items("navigation", [
        ("nav-001", "medium", "behavior.channels.archiving", True, "Archived chats"),
    ]),
    *_items("messaging", [
        ("msg-001", "critical", "behavior.messaging.edit_window", 15 * 60 * 1000, "Edits allowed for 15 minutes"),
        ("msg-002", "high", "behavior.messaging.delete_for_everyone", True, "Delete for everyone"),
        ("msg-003", "medium", "behavior.messaging.delete_window", 216000000, "Delete for everyone within 60 hours"),
        ("msg-004", "high", "behavior.messaging.max_reactions_per_message", 1, "One reaction per person"),
        ("msg-005", "critical", "behavior.messaging.threading_model", "reply-chain", "Quoted replies"),
        ("msg-006", "high", "behavior.messaging.forward_limit", 5, "Forward to at most 5 chats"),
    ]),
    *_items("media", [
        ("med-001", "critical", "behavior.features.voice_messages", True, "Voice messages"),
        ("med-002", "medium", "behavior.features.location_sharing", True, "Location sharing"),
        ("med-003", "low", "behavior.features.contact_sharing", True, "Contact cards"),
    ]),
    *_items("calls", [
        ("call-001", "high", "behavior.calls.group_max", 32, "Group calls with up to 32 people"),
    ]),
    *_items("status", [
        ("sts-001", "high", "extended.status.enabled", True, "Status updates"),
        ("sts-002", "medium", "extended.status.expires_after_hours", 24, "Status expires after 24 hours"),
    ]),
    *_items("communities", [
        ("com-001", "medium", "extended.communities.enabled", True, "Communities"),
        ("com-002", "low", "extended.communities.announcement_group", True, "Community announcement group"),
    ]),
    *_items("groups", [
        ("grp-001", "high", "behavior.channels.max_group_members", 1024, "Groups of up to 1024 members"),
        ("grp-002", "low", "extended.broadcast_lists.max_recipients", 256, "Broadcast lists of 256 recipients"),
    ]),
    *_items("privacy", [
        ("prv-001", "critical", "behavior.privacy.e2ee_default", True, "End-to-end encryption by default"),
        ("prv-002", "high", "behavior.privacy.read_receipts_optional", True, "Read receipts can be turned off"),
        (
            "prv-003",
            "medium",
            "behavior.privacy.disappearing_options",
            [86400, 604800, 7776000],
            "Disappearing messages after 24 hours, 7 days or 90 days",
        ),
        ("prv-004", "medium", "behavior.privacy.profile_visibility", "contacts", "Profile visible to contacts"),
    ]),
    *_items("visual", [
        ("vis-001", "critical", "skin.colors.primary", "#25D366", "WhatsApp green"),
        ("vis-002", "critical", "skin.components.message_layout", "bubbles", "Chat bubbles"),
        ("vis-003", "high", "skin.components.avatar_shape", "circle", "Circular avatars"),
    ]),
    *_items("composer", [
        ("cmp-001", "low", "skin.components.button_style", "pill", "Pill-shaped send button"),
        ("cmp-002", "medium", "skin.components.input_style", "filled", "Filled composer input"),
    ]),
    *_items("notifications", [
        ("ntf-001", "medium", "behavior.notifications.default_level", "all", "Notify on every message by default"),
    ]),
]


def _checklist(
    platform_id: str, platform: str, target_version: str, items: List[ParityItem]
) -> ParityChecklist:
    categories = tuple(dict.fromkeys(item.category for item in items))
    return ParityChecklist(
        platform_id=platform_id,
        platform=platform,
        target_version=target_version,
        assessment_date="2026-02-09",
        categories=categories,
        items=tuple(items),
    )


PARITY_CHECKLISTS: Dict[str, ParityChecklist] = {
    "discord": _checklist("discord", "Discord", "Discord 2024.x (2026)", _DISCORD_ITEMS),
    "slack": _checklist("slack", "Slack", "Slack 4.x (2026)", _SLACK_ITEMS),
    "telegram": _checklist("telegram", "Telegram", "Telegram 10.x (2026)", _TELEGRAM_ITEMS),
    "whatsapp": _checklist("whatsapp", "WhatsApp", "WhatsApp 2.24.x (2026)", _WHATSAPP_ITEMS),
}


def get_parity_checklist(platform_id: str) -> Optional[ParityChecklist]:
    return PARITY_CHECKLISTS.get(platform_id)


def list_parity_platforms() -> List[str]:
    return list(PARITY_CHECKLISTS.keys())
