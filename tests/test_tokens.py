import copy

from skins.catalog import VISUAL_SKINS
from skins.design.contrast import with_alpha
from skins.design.tokens import (
    DesignTokens,
    build_color_aliases,
    build_shadow_scale,
    build_spacing_scale,
    build_transition_tokens,
    build_type_scale,
    build_z_index_scale,
    get_design_tokens,
)


def test_default_skin_is_nchat():
    tokens = get_design_tokens()
    assert isinstance(tokens, DesignTokens)
    assert tokens.skin_id == "nchat"
    assert tokens.colors["brand_primary"] == "#00D4FF"


def test_spacing_scale():
    spacing = build_spacing_scale()
    assert len(spacing) == 22
    assert spacing["0"] == "0px"
    assert spacing["px"] == "1px"
    assert spacing["0.5"] == "2px"
    assert spacing["4"] == "16px"
    assert spacing["64"] == "256px"


def test_type_scale_from_slack_skin():
    scale = build_type_scale(VISUAL_SKINS["slack"])
    assert scale["base"].font_size == "15px"
    assert scale["base"].line_height == "1.46668"


def test_type_scale_derived_stops():
    scale = build_type_scale(VISUAL_SKINS["nchat"])
    assert list(scale) == ["xs", "sm", "base", "lg", "xl", "2xl", "3xl", "4xl", "5xl"]
    assert scale["xs"].font_size == "11px"
    assert scale["sm"].font_size == "12px"
    assert scale["2xl"].font_size == "24px"
    assert scale["5xl"].font_size == "48px"
    assert scale["xs"].line_height == "1.6"
    assert scale["lg"].line_height == "1.45"
    assert scale["5xl"].line_height == "1.2"
    assert scale["base"].letter_spacing == "normal"
    assert scale["5xl"].letter_spacing == "-0.03em"


def test_type_scale_line_height_floor():
    skin = copy.deepcopy(VISUAL_SKINS["nchat"])
    skin["typography"]["line_height"] = 1.1
    scale = build_type_scale(skin)
    assert scale["2xl"].line_height == "1"
    assert scale["5xl"].line_height == "1"


def test_type_aliases():
    tokens = get_design_tokens(VISUAL_SKINS["discord"])
    assert tokens.type_aliases["body"] == tokens.type_scale["base"]
    assert tokens.type_aliases["caption"] == tokens.type_scale["xs"]
    assert tokens.type_aliases["display"] == tokens.type_scale["4xl"]


def test_color_aliases():
    colors = VISUAL_SKINS["slack"]["colors"]
    aliases = build_color_aliases(colors)
    assert len(aliases) == 29
    assert aliases["bg_app"] == colors["background"]
    assert aliases["interactive_hover"] == with_alpha(colors["primary"], 0.06)
    assert aliases["interactive_selected"] == "#611F691F"
    assert aliases["border_subtle"] == with_alpha(colors["border"], 0.5)
    assert aliases["status_error_bg"] == with_alpha(colors["error"], 0.12)


def test_dark_mode_uses_dark_palette():
    light = get_design_tokens(VISUAL_SKINS["nchat"], is_dark_mode=False)
    dark = get_design_tokens(VISUAL_SKINS["nchat"], is_dark_mode=True)
    assert light.colors["bg_app"] == "#FFFFFF"
    assert dark.colors["bg_app"] == "#18181B"


def test_shadow_scale_darker_in_dark_mode():
    light = build_shadow_scale(False)
    dark = build_shadow_scale(True)
    assert list(light) == ["none", "xs", "sm", "md", "lg", "xl"]
    assert light["none"] == "none"
    assert light["xs"] == "0 1px 2px rgba(0, 0, 0, 0.05)"
    assert dark["xs"] == "0 1px 2px rgba(0, 0, 0, 0.2)"


def test_transitions_and_z_index():
    transitions = build_transition_tokens()
    assert transitions.durations == {
        "instant": "0ms",
        "fast": "100ms",
        "normal": "200ms",
        "slow": "300ms",
        "slower": "500ms",
    }
    assert all(e.startswith("cubic-bezier(") for e in transitions.easings.values())
    z = build_z_index_scale()
    assert z["hide"] == -1
    assert z["modal"] == 1300
    assert z["tooltip"] == 1600
    assert z["max"] == 9999


def test_radius_and_typography_passed_through():
    skin = VISUAL_SKINS["telegram"]
    tokens = get_design_tokens(skin)
    assert tokens.border_radius == skin["border_radius"]
    assert tokens.typography["family"] == skin["typography"]["font_family"]
    assert tokens.typography["weight_bold"] == skin["typography"]["font_weight_bold"]


def test_tokens_recomputed_each_call():
    assert get_design_tokens() is not get_design_tokens()
    assert get_design_tokens() == get_design_tokens()
