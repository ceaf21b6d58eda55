import pytest

from skins.catalog import VISUAL_SKINS
from skins.catalog.schema import get_palette
from skins.design.contrast import (
    RGB,
    contrast_ratio,
    is_hex_color,
    meets_contrast_requirement,
    parse_hex_color,
    relative_luminance,
    with_alpha,
)


def test_parse_hex_forms():
    assert parse_hex_color("#fff") == RGB(255, 255, 255)
    assert parse_hex_color("#00D4FF") == RGB(0, 212, 255)
    # Alpha pair ignored
    assert parse_hex_color("#00D4FF80") == RGB(0, 212, 255)


@pytest.mark.parametrize("value", ["", "fff", "#ff", "#GGGGGG", "#12345", "#1234567", None, 123])
def test_parse_hex_rejects_malformed(value):
    assert parse_hex_color(value) is None
    assert not is_hex_color(value)


def test_relative_luminance_extremes_and_order():
    assert relative_luminance("#FFFFFF") == pytest.approx(1.0)
    assert relative_luminance("#000000") == 0.0
    assert relative_luminance("#ffffff") > relative_luminance("#777777") > relative_luminance("#000000")


def test_relative_luminance_malformed_raises():
    with pytest.raises(ValueError):
        relative_luminance("#XYZ")


def test_contrast_ratio_black_white_is_exactly_21():
    assert contrast_ratio("#FFFFFF", "#000000") == 21
    assert contrast_ratio("#000", "#fff") == 21


def test_contrast_ratio_same_color_is_one():
    assert contrast_ratio("#5865F2", "#5865F2") == 1


@pytest.mark.parametrize(
    "fg,bg", [("#00D4FF", "#18181B"), ("#611F69", "#FFFFFF"), ("#777777", "#FAFAFA")]
)
def test_contrast_ratio_symmetric_and_bounded(fg, bg):
    ratio = contrast_ratio(fg, bg)
    assert ratio == contrast_ratio(bg, fg)
    assert 1 <= ratio <= 21


def test_meets_contrast_thresholds():
    # #767676 on white is the classic 4.54:1 gray; #777777 falls just short
    assert meets_contrast_requirement("#767676", "#FFFFFF")
    assert not meets_contrast_requirement("#777777", "#FFFFFF")
    assert meets_contrast_requirement("#777777", "#FFFFFF", is_large_text=True)
    assert not meets_contrast_requirement("#767676", "#FFFFFF", level="AAA")
    assert meets_contrast_requirement("#000000", "#FFFFFF", level="AAA")


def test_meets_contrast_unknown_level():
    with pytest.raises(ValueError):
        meets_contrast_requirement("#000000", "#FFFFFF", level="A")


@pytest.mark.parametrize("skin_id", sorted(VISUAL_SKINS))
@pytest.mark.parametrize("dark", [False, True])
def test_shipped_palettes_meet_aa(skin_id, dark):
    colors = get_palette(VISUAL_SKINS[skin_id], dark)
    assert meets_contrast_requirement(colors["text"], colors["background"], "AA", False)


def test_with_alpha():
    assert with_alpha("#00D4FF", 0.12) == "#00D4FF1F"
    assert with_alpha("#abc", 1) == "#AABBCCFF"
    assert with_alpha("#000000", 0) == "#00000000"
    with pytest.raises(ValueError):
        with_alpha("red", 0.5)
    with pytest.raises(ValueError):
        with_alpha("#000000", 1.5)
