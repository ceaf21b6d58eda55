import copy

import pytest

from skins.catalog import BEHAVIOR_PRESETS, VISUAL_SKINS
from skins.catalog.schema import COLOR_SLOTS
from skins.engine.registry import SkinValidationError
from skins.engine.validation import validate_behavior, validate_profile, validate_skin


@pytest.fixture
def skin():
    return copy.deepcopy(VISUAL_SKINS["nchat"])


@pytest.fixture
def behavior():
    return copy.deepcopy(BEHAVIOR_PRESETS["slack"])


def test_missing_identity(skin):
    skin["id"] = ""
    del skin["name"]
    result = validate_skin(skin)
    assert not result.valid
    assert "Skin must have an id" in result.errors
    assert "Skin must have a name" in result.errors


def test_missing_light_color(skin):
    del skin["colors"]["primary"]
    result = validate_skin(skin)
    assert result.errors == ["Missing light mode color: primary"]


def test_missing_dark_palette(skin):
    del skin["dark_mode"]
    result = validate_skin(skin)
    assert "Skin must have dark mode colors" in result.errors


@pytest.mark.parametrize("bad", ["#GGG", "red", "#12345", "00D4FF"])
def test_malformed_hex_detected(skin, bad):
    skin["dark_mode"]["colors"]["accent"] = bad
    result = validate_skin(skin)
    assert not result.valid
    assert any("accent" in e and "Invalid dark mode color" in e for e in result.errors)


def test_all_hex_forms_accepted(skin):
    skin["colors"]["accent"] = "#abc"
    skin["colors"]["muted"] = "#71717A80"
    assert validate_skin(skin).valid


def test_missing_version_is_only_a_warning(skin):
    del skin["version"]
    result = validate_skin(skin)
    assert result.valid
    assert result.warnings == ["Skin is missing a version string"]


def test_structure_sections(skin):
    del skin["typography"]
    skin["components"]["avatar_shape"] = "hexagon"
    skin["icons"]["style"] = "duotone"
    del skin["border_radius"]["full"]
    errors = validate_skin(skin).errors
    assert "Skin must have typography settings" in errors
    assert "Invalid component setting avatar_shape: 'hexagon'" in errors
    assert "Invalid icon style: 'duotone'" in errors
    assert "Missing border radius: full" in errors


def test_non_mapping_skin():
    result = validate_skin(["not", "a", "skin"])
    assert result.errors == ["Skin must be a mapping"]


def test_behavior_missing_group(behavior):
    del behavior["calls"]
    result = validate_behavior(behavior)
    assert result.errors == ["Behavior must have calls section"]


def test_behavior_negative_limits(behavior):
    behavior["messaging"]["edit_window"] = -1
    behavior["channels"]["max_group_members"] = 2.5
    errors = validate_behavior(behavior).errors
    assert "messaging.edit_window must be a non-negative integer" in errors
    assert "channels.max_group_members must be a non-negative integer" in errors


def test_behavior_zero_means_unlimited(behavior):
    behavior["messaging"]["edit_window"] = 0
    behavior["channels"]["max_group_members"] = 0
    assert validate_behavior(behavior).valid


def test_behavior_message_length_must_be_positive(behavior):
    behavior["messaging"]["max_message_length"] = 0
    assert "messaging.max_message_length must be greater than zero" in validate_behavior(behavior).errors


def test_behavior_channel_types(behavior):
    behavior["channels"]["types"] = []
    assert "Behavior must support at least one channel type" in validate_behavior(behavior).errors
    behavior["channels"]["types"] = ["public", "voice-stage"]
    assert not validate_behavior(behavior).valid


def test_behavior_enums_and_flags(behavior):
    behavior["messaging"]["threading_model"] = "nested"
    behavior["notifications"]["default_level"] = "loud"
    behavior["features"]["huddles"] = "yes"
    errors = validate_behavior(behavior).errors
    assert "Invalid threading model: 'nested'" in errors
    assert "Invalid notification level: 'loud'" in errors
    assert "Feature flag huddles must be a boolean" in errors


def test_profile_references(registry):
    profile = {"id": "p", "name": "P", "skin_id": "myspace", "behavior_id": "icq"}
    errors = validate_profile(profile, registry).errors
    assert "Profile references unknown skin: myspace" in errors
    assert "Profile references unknown behavior: icq" in errors


def test_profile_uses_default_registry_when_omitted():
    profile = {"id": "p", "name": "P", "skin_id": "slack", "behavior_id": "whatsapp"}
    assert validate_profile(profile).valid


@pytest.mark.parametrize("mode", ["light", "dark"])
@pytest.mark.parametrize("slot", COLOR_SLOTS)
def test_every_color_slot_rejects_non_hex(skin, slot, mode):
    palette = skin["colors"] if mode == "light" else skin["dark_mode"]["colors"]
    palette[slot] = "not-a-color"
    result = validate_skin(skin)
    assert not result.valid
    assert f"Invalid {mode} mode color {slot}: 'not-a-color'" in result.errors


@pytest.mark.parametrize("bad", ["1rem", "-2px", "large", 14])
def test_font_size_must_be_pixel_length(skin, bad):
    skin["typography"]["font_size_base"] = bad
    result = validate_skin(skin)
    assert result.errors == [f"Invalid font size font_size_base: {bad!r}"]


def test_fractional_font_size_accepted(skin):
    skin["typography"]["font_size_sm"] = "12.5px"
    assert validate_skin(skin).valid


@pytest.mark.parametrize("bad", [-100, "bold", True])
def test_font_weight_must_be_non_negative_number(skin, bad):
    skin["typography"]["font_weight_bold"] = bad
    result = validate_skin(skin)
    assert result.errors == [f"Invalid font weight font_weight_bold: {bad!r}"]


def test_icon_stroke_width(skin):
    skin["icons"]["stroke_width"] = -3
    assert validate_skin(skin).errors == ["Invalid icon stroke width: -3"]
    skin["icons"]["stroke_width"] = "thin"
    assert not validate_skin(skin).valid
    del skin["icons"]["stroke_width"]
    assert validate_skin(skin).valid


def test_registry_refuses_bad_typography(registry, skin):
    skin["id"] = "rem-based"
    skin["typography"]["font_size_lg"] = "1rem"
    with pytest.raises(SkinValidationError) as info:
        registry.register_skin(skin)
    assert "Invalid font size font_size_lg: '1rem'" in info.value.errors
    assert registry.get_skin("rem-based") is None


def test_profile_overrides_are_validated_merged(registry):
    profile = {
        "id": "p",
        "name": "P",
        "skin_id": "nchat",
        "behavior_id": "discord",
        "overrides": {
            "skin": {"colors": {"primary": "not-a-color"}},
            "behavior": {"messaging": {"threading_model": "nested"}},
        },
    }
    errors = validate_profile(profile, registry).errors
    assert "Profile skin override: Invalid light mode color primary: 'not-a-color'" in errors
    assert "Profile behavior override: Invalid threading model: 'nested'" in errors


def test_profile_override_sections_must_be_mappings(registry):
    profile = {"id": "p", "name": "P", "skin_id": "nchat", "behavior_id": "discord", "overrides": {"skin": "dark"}}
    assert validate_profile(profile, registry).errors == ["Profile skin overrides must be a mapping"]
    profile["overrides"] = ["skin"]
    assert validate_profile(profile, registry).errors == ["Profile overrides must be a mapping"]


def test_shipped_profiles_validate(registry):
    for profile_id in registry.list_profiles():
        assert validate_profile(registry.get_profile(profile_id), registry).valid, profile_id
