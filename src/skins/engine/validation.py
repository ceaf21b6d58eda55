"""Structural validation of skins, behavior presets and composite profiles.

Validators never raise: they collect every problem into a
:class:`ValidationResult` so callers can surface all errors at once.
``errors`` make a record unusable; ``warnings`` are informational (a missing
version string, for instance) and do not affect ``valid``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, List, Mapping, Optional

from skins.catalog.schema import (
    BEHAVIOR_GROUPS,
    CHANNEL_TYPES,
    COLOR_SLOTS,
    COMPONENT_STYLE_VALUES,
    ICON_STYLES,
    MENTION_RULES,
    NOTIFICATION_LEVELS,
    PRESENCE_STATES,
    PROFILE_VISIBILITY,
    RADIUS_STOPS,
    REACTION_STYLES,
    SPACING_SLOTS,
    THREADING_MODELS,
    TYPOGRAPHY_FIELDS,
)
from skins.design.contrast import is_hex_color
from skins.design.merge import deep_merge
from skins.design.tokens import parse_px

if TYPE_CHECKING:  # pragma: no cover
    from .registry import SkinRegistry

__all__ = [
    "ValidationResult",
    "validate_skin",
    "validate_behavior",
    "validate_profile",
]

_FONT_SIZE_FIELDS = ("font_size_sm", "font_size_base", "font_size_lg", "font_size_xl")
_FONT_WEIGHT_FIELDS = ("font_weight_normal", "font_weight_medium", "font_weight_bold")

_NUMERIC_LIMITS = {
    "messaging": (
        "edit_window",
        "delete_window",
        "max_reactions_per_message",
        "max_message_length",
        "forward_limit",
    ),
    "channels": ("max_group_dm_members", "max_group_members"),
    "presence": ("auto_away_timeout",),
    "calls": ("group_max",),
}


@dataclass
class ValidationResult:
    valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def error(self, message: str) -> None:
        self.errors.append(message)
        self.valid = False

    def warn(self, message: str) -> None:
        self.warnings.append(message)


def _is_non_negative_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_non_negative_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value >= 0


def _is_pixel_length(value: Any) -> bool:
    try:
        return parse_px(value) >= 0
    except ValueError:
        return False


def _check_identity(record: Mapping[str, Any], kind: str, result: ValidationResult) -> None:
    if not record.get("id"):
        result.error(f"{kind} must have an id")
    if not record.get("name"):
        result.error(f"{kind} must have a name")
    if not record.get("version"):
        result.warn(f"{kind} is missing a version string")


def _check_palette(colors: Any, mode: str, result: ValidationResult) -> None:
    if not isinstance(colors, Mapping) or not colors:
        result.error(f"Skin must have {mode} mode colors")
        return
    for slot in COLOR_SLOTS:
        value = colors.get(slot)
        if value is None or value == "":
            result.error(f"Missing {mode} mode color: {slot}")
        elif not is_hex_color(value):
            result.error(f"Invalid {mode} mode color {slot}: {value!r}")


def validate_skin(skin: Any) -> ValidationResult:
    result = ValidationResult()
    if not isinstance(skin, Mapping):
        result.error("Skin must be a mapping")
        return result
    _check_identity(skin, "Skin", result)

    _check_palette(skin.get("colors"), "light", result)
    dark = skin.get("dark_mode")
    _check_palette(dark.get("colors") if isinstance(dark, Mapping) else None, "dark", result)

    typography = skin.get("typography")
    if not isinstance(typography, Mapping) or not typography:
        result.error("Skin must have typography settings")
    else:
        for name in TYPOGRAPHY_FIELDS:
            if typography.get(name) in (None, ""):
                result.error(f"Missing typography setting: {name}")
        for name in _FONT_SIZE_FIELDS:
            value = typography.get(name)
            if value not in (None, "") and not _is_pixel_length(value):
                result.error(f"Invalid font size {name}: {value!r}")
        for name in _FONT_WEIGHT_FIELDS:
            value = typography.get(name)
            if value not in (None, "") and not _is_non_negative_number(value):
                result.error(f"Invalid font weight {name}: {value!r}")
        line_height = typography.get("line_height")
        if line_height is not None and (
            isinstance(line_height, bool)
            or not isinstance(line_height, (int, float))
            or line_height <= 0
        ):
            result.error(f"Invalid line height: {line_height!r}")

    spacing = skin.get("spacing")
    if not isinstance(spacing, Mapping) or not spacing:
        result.error("Skin must have spacing settings")
    else:
        for slot in SPACING_SLOTS:
            if not spacing.get(slot):
                result.error(f"Missing spacing value: {slot}")

    radius = skin.get("border_radius")
    if not isinstance(radius, Mapping) or not radius:
        result.error("Skin must have border radius settings")
    else:
        for stop in RADIUS_STOPS:
            if not radius.get(stop):
                result.error(f"Missing border radius: {stop}")

    icons = skin.get("icons")
    if not isinstance(icons, Mapping) or not icons:
        result.error("Skin must have icon settings")
    else:
        if icons.get("style") not in ICON_STYLES:
            result.error(f"Invalid icon style: {icons.get('style')!r}")
        stroke_width = icons.get("stroke_width")
        if stroke_width is not None and not _is_non_negative_number(stroke_width):
            result.error(f"Invalid icon stroke width: {stroke_width!r}")

    components = skin.get("components")
    if not isinstance(components, Mapping) or not components:
        result.error("Skin must have component settings")
    else:
        for name, allowed in COMPONENT_STYLE_VALUES.items():
            if components.get(name) not in allowed:
                result.error(f"Invalid component setting {name}: {components.get(name)!r}")
    return result


def _check_subset(values: Any, allowed: tuple[str, ...], label: str, result: ValidationResult) -> None:
    if not isinstance(values, (list, tuple)):
        result.error(f"{label} must be a list")
        return
    for value in values:
        if value not in allowed:
            result.error(f"Unknown {label.lower()} value: {value!r}")


def validate_behavior(behavior: Any) -> ValidationResult:
    result = ValidationResult()
    if not isinstance(behavior, Mapping):
        result.error("Behavior must be a mapping")
        return result
    _check_identity(behavior, "Behavior", result)

    missing = [group for group in BEHAVIOR_GROUPS if not isinstance(behavior.get(group), Mapping)]
    for group in missing:
        result.error(f"Behavior must have {group} section")
    if missing:
        return result

    for group, names in _NUMERIC_LIMITS.items():
        section = behavior[group]
        for name in names:
            if not _is_non_negative_int(section.get(name)):
                result.error(f"{group}.{name} must be a non-negative integer")

    messaging = behavior["messaging"]
    if _is_non_negative_int(messaging.get("max_message_length")) and messaging["max_message_length"] == 0:
        result.error("messaging.max_message_length must be greater than zero")
    if messaging.get("reaction_style") not in REACTION_STYLES:
        result.error(f"Invalid reaction style: {messaging.get('reaction_style')!r}")
    if messaging.get("threading_model") not in THREADING_MODELS:
        result.error(f"Invalid threading model: {messaging.get('threading_model')!r}")

    channel_types = behavior["channels"].get("types")
    if not channel_types:
        result.error("Behavior must support at least one channel type")
    else:
        _check_subset(channel_types, CHANNEL_TYPES, "Channel types", result)

    _check_subset(behavior["presence"].get("states", []), PRESENCE_STATES, "Presence states", result)

    notifications = behavior["notifications"]
    if notifications.get("default_level") not in NOTIFICATION_LEVELS:
        result.error(f"Invalid notification level: {notifications.get('default_level')!r}")
    _check_subset(notifications.get("mention_rules", []), MENTION_RULES, "Mention rules", result)

    privacy = behavior["privacy"]
    if privacy.get("profile_visibility") not in PROFILE_VISIBILITY:
        result.error(f"Invalid profile visibility: {privacy.get('profile_visibility')!r}")
    options = privacy.get("disappearing_options", [])
    if not isinstance(options, (list, tuple)) or not all(_is_non_negative_int(o) for o in options):
        result.error("privacy.disappearing_options must be a list of non-negative integers")

    for name, value in behavior["features"].items():
        if not isinstance(value, bool):
            result.error(f"Feature flag {name} must be a boolean")
    return result


def validate_profile(profile: Any, registry: Optional["SkinRegistry"] = None) -> ValidationResult:
    """Validate a composite profile and check its references resolve.

    References are checked against ``registry`` (the default registry when
    omitted). Skin and behavior overrides are merged onto the referenced
    records and the results validated, so a profile that registers also
    resolves to usable records.
    """
    from .registry import default_registry

    result = ValidationResult()
    if not isinstance(profile, Mapping):
        result.error("Profile must be a mapping")
        return result
    if not profile.get("id"):
        result.error("Profile must have an id")
    if not profile.get("name"):
        result.error("Profile must have a name")
    overrides = profile.get("overrides")
    if overrides is not None and not isinstance(overrides, Mapping):
        result.error("Profile overrides must be a mapping")
        overrides = None
    overrides = overrides or {}

    reg = registry if registry is not None else default_registry()
    skin_id = profile.get("skin_id")
    behavior_id = profile.get("behavior_id")
    skin = reg.get_skin(skin_id) if skin_id else None
    behavior = reg.get_behavior(behavior_id) if behavior_id else None
    if not skin_id:
        result.error("Profile must reference a skin")
    elif skin is None:
        result.error(f"Profile references unknown skin: {skin_id}")
    else:
        _check_override(skin, overrides.get("skin"), "skin", validate_skin, result)
    if not behavior_id:
        result.error("Profile must reference a behavior")
    elif behavior is None:
        result.error(f"Profile references unknown behavior: {behavior_id}")
    else:
        _check_override(behavior, overrides.get("behavior"), "behavior", validate_behavior, result)
    return result


def _check_override(
    record: Mapping[str, Any],
    override: Any,
    kind: str,
    validator: Callable[[Any], ValidationResult],
    result: ValidationResult,
) -> None:
    if override is None:
        return
    if not isinstance(override, Mapping):
        result.error(f"Profile {kind} overrides must be a mapping")
        return
    for message in validator(deep_merge(record, override)).errors:
        result.error(f"Profile {kind} override: {message}")
