import dataclasses

import pytest

from skins.catalog import BEHAVIOR_PRESETS, VISUAL_SKINS
from skins.design.components import COMPONENT_NAMES, ComponentTokens, get_component_tokens
from skins.design.contrast import with_alpha


def _tokens(skin_id, behavior_id=None, dark=False):
    behavior = BEHAVIOR_PRESETS[behavior_id] if behavior_id else None
    return get_component_tokens(VISUAL_SKINS[skin_id], behavior, dark)


def test_every_component_present():
    tokens = get_component_tokens()
    assert isinstance(tokens, ComponentTokens)
    assert tuple(f.name for f in dataclasses.fields(tokens)) == COMPONENT_NAMES


@pytest.mark.parametrize(
    "skin_id,stop", [("nchat", "full"), ("discord", "md"), ("slack", "md"), ("whatsapp", "full")]
)
def test_avatar_radius_follows_shape(skin_id, stop):
    assert _tokens(skin_id).avatar.border_radius == VISUAL_SKINS[skin_id]["border_radius"][stop]


@pytest.mark.parametrize(
    "skin_id,stop", [("whatsapp", "full"), ("signal", "full"), ("telegram", "lg"), ("nchat", "md")]
)
def test_button_radius_follows_style(skin_id, stop):
    assert _tokens(skin_id).button.border_radius == VISUAL_SKINS[skin_id]["border_radius"][stop]


def test_filled_input_uses_surface():
    colors = VISUAL_SKINS["whatsapp"]["colors"]
    tokens = _tokens("whatsapp")
    assert tokens.input.background == colors["surface"]
    assert tokens.input.border_color == "transparent"
    assert tokens.composer.border_radius == VISUAL_SKINS["whatsapp"]["border_radius"]["lg"]


def test_outline_input_uses_background():
    colors = VISUAL_SKINS["nchat"]["colors"]
    tokens = _tokens("nchat")
    assert tokens.input.background == colors["background"]
    assert tokens.input.border_color == colors["border"]


def test_bubble_layout_colors():
    wa = VISUAL_SKINS["whatsapp"]
    light = _tokens("whatsapp")
    dark = _tokens("whatsapp", dark=True)
    assert light.message_bubble.own_bg == with_alpha(wa["colors"]["primary"], 0.12)
    assert light.message_bubble.other_bg == wa["colors"]["surface"]
    assert dark.message_bubble.own_bg == with_alpha(wa["dark_mode"]["colors"]["primary"], 0.24)
    discord = _tokens("discord")
    assert discord.message_bubble.own_bg == "transparent"
    assert discord.message_bubble.other_bg == "transparent"


def test_modal_overlay_darker_in_dark_mode():
    assert _tokens("nchat").modal.overlay_bg == "#00000080"
    assert _tokens("nchat", dark=True).modal.overlay_bg == with_alpha("#000000", 0.7)
    assert _tokens("nchat").modal.border_radius == VISUAL_SKINS["nchat"]["border_radius"]["xl"]


def test_tooltip_inverts_palette():
    colors = VISUAL_SKINS["telegram"]["colors"]
    tooltip = _tokens("telegram").tooltip
    assert tooltip.background == colors["text"]
    assert tooltip.text == colors["background"]


def test_behavior_drives_affordances():
    slack = _tokens("discord", "slack")
    discord = _tokens("slack", "discord")
    assert slack.header.show_thread_button is True
    assert discord.header.show_thread_button is False
    assert slack.composer.max_length == 40000
    assert slack.header.show_call_buttons is True
    assert discord.message_bubble.threading_model == "inline"


def test_default_behavior_is_nchat():
    assert _tokens("slack").composer.max_length == BEHAVIOR_PRESETS["nchat"]["messaging"]["max_message_length"]


def test_skin_drives_geometry_not_behavior():
    a = _tokens("telegram", "slack")
    b = _tokens("telegram", "whatsapp")
    assert a.sidebar.width == b.sidebar.width == "420px"
    assert a.button == b.button


@pytest.mark.parametrize("skin_id", ["nchat", "slack", "telegram"])
def test_sidebar_active_item_uses_primary(skin_id):
    tokens = _tokens(skin_id)
    primary = VISUAL_SKINS[skin_id]["colors"]["primary"]
    assert tokens.sidebar.active_item_text == primary
    assert tokens.sidebar.unread_indicator_bg == primary


def test_composer_send_button_uses_primary():
    assert _tokens("nchat").composer.send_button_bg == VISUAL_SKINS["nchat"]["colors"]["primary"]
    dark = _tokens("slack", dark=True)
    assert dark.composer.send_button_bg == VISUAL_SKINS["slack"]["dark_mode"]["colors"]["primary"]
