"""Built-in catalog consistency."""

import pytest

from skins.catalog import (
    BEHAVIOR_PRESETS,
    COMPOSITE_PROFILES,
    VISUAL_SKINS,
    list_behavior_ids,
    list_profile_ids,
    list_visual_skin_ids,
)
from skins.catalog.schema import COLOR_SLOTS, get_palette
from skins.config.settings import CATALOG_VERSION
from skins.engine.validation import validate_behavior, validate_profile, validate_skin

PLATFORMS = ["nchat", "whatsapp", "telegram", "discord", "slack", "signal"]


def test_platform_ids():
    assert list_visual_skin_ids() == PLATFORMS
    assert list_behavior_ids() == PLATFORMS
    for platform_id in PLATFORMS:
        assert platform_id in list_profile_ids()


@pytest.mark.parametrize("skin_id", PLATFORMS)
def test_skin_palettes_complete(skin_id):
    skin = VISUAL_SKINS[skin_id]
    assert skin["id"] == skin_id
    assert skin["version"] == CATALOG_VERSION
    for dark in (False, True):
        assert set(get_palette(skin, dark)) == set(COLOR_SLOTS)


@pytest.mark.parametrize("skin_id", PLATFORMS)
def test_builtin_skins_validate(skin_id):
    result = validate_skin(VISUAL_SKINS[skin_id])
    assert result.valid, result.errors
    assert result.warnings == []


@pytest.mark.parametrize("behavior_id", PLATFORMS)
def test_builtin_behaviors_validate(behavior_id):
    result = validate_behavior(BEHAVIOR_PRESETS[behavior_id])
    assert result.valid, result.errors


@pytest.mark.parametrize("profile_id", sorted(COMPOSITE_PROFILES))
def test_builtin_profiles_validate(profile_id, registry):
    result = validate_profile(COMPOSITE_PROFILES[profile_id], registry)
    assert result.valid, result.errors


def test_platform_signatures():
    assert VISUAL_SKINS["slack"]["colors"]["primary"] == "#611F69"
    assert VISUAL_SKINS["slack"]["typography"]["line_height"] == 1.46668
    assert VISUAL_SKINS["telegram"]["spacing"]["sidebar_width"] == "420px"
    assert VISUAL_SKINS["whatsapp"]["components"]["message_layout"] == "bubbles"
    assert VISUAL_SKINS["discord"]["components"]["avatar_shape"] == "rounded"
    assert BEHAVIOR_PRESETS["slack"]["messaging"]["threading_model"] == "side-panel"
    assert BEHAVIOR_PRESETS["discord"]["messaging"]["threading_model"] == "inline"
    assert BEHAVIOR_PRESETS["whatsapp"]["privacy"]["e2ee_default"] is True
    assert BEHAVIOR_PRESETS["slack"]["calls"]["huddles"] is True


def test_hybrid_profiles_cross_platforms():
    profile = COMPOSITE_PROFILES["discord-look-slack-behavior"]
    assert (profile["skin_id"], profile["behavior_id"]) == ("discord", "slack")
    assert "overrides" in COMPOSITE_PROFILES["privacy-team"]
