"""Responsive breakpoints and per-breakpoint layout adaptations."""

import pytest

from skins.catalog import VISUAL_SKINS
from skins.design.responsive import (
    BREAKPOINT_ORDER,
    classify_width,
    get_responsive_config,
    responsive_config_to_css_variables,
)


def test_breakpoints_defined_and_ordered():
    config = get_responsive_config()
    assert tuple(config.breakpoints) == BREAKPOINT_ORDER
    mins = [bp.min_width for bp in config.breakpoints.values()]
    assert mins == [0, 640, 768, 1024, 1280, 1536]
    assert config.breakpoints["md"].query == "(min-width: 768px)"


def test_classify_width_edges():
    # Inclusive lower bounds
    assert classify_width(0) == "xs"
    assert classify_width(639) == "xs"
    assert classify_width(640) == "sm"
    assert classify_width(767) == "sm"
    assert classify_width(768) == "md"
    assert classify_width(1024) == "lg"
    assert classify_width(1535) == "xl"
    assert classify_width(5000) == "2xl"


def test_negative_width_rejected():
    with pytest.raises(ValueError):
        classify_width(-1)


def test_semantic_queries():
    semantic = get_responsive_config().semantic_breakpoints
    assert semantic["mobile"] == "(max-width: 767px)"
    assert semantic["desktop"] == "(min-width: 1024px)"
    assert semantic["touch"] == "(hover: none)"
    assert semantic["reduced_motion"] == "(prefers-reduced-motion: reduce)"


def test_layouts_use_skin_sidebar_width():
    layouts = get_responsive_config(VISUAL_SKINS["telegram"]).layouts
    assert layouts["xs"].sidebar_mode == "hidden"
    assert layouts["xs"].bottom_nav is True
    assert layouts["sm"].sidebar_mode == "overlay"
    assert layouts["md"].sidebar_mode == "compact"
    assert layouts["md"].sidebar_width == "72px"
    assert layouts["lg"].sidebar_width == "420px"
    assert layouts["2xl"].sidebar_width == "420px"
    assert layouts["lg"].max_content_width is None
    assert layouts["xl"].max_content_width is not None


def test_responsive_css_variables():
    variables = responsive_config_to_css_variables(get_responsive_config(VISUAL_SKINS["discord"]))
    assert variables["--rs-breakpoint-md"] == "768px"
    assert variables["--rs-sidebar-width-lg"] == "240px"
    assert variables["--rs-touch-minimum"] == "44px"
    assert variables["--rs-safe-area-top"] == "env(safe-area-inset-top, 0px)"
