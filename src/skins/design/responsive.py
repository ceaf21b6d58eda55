"""Responsive configuration derived from a skin.

Breakpoint Scale (mobile-first, inclusive lower bound):
 - xs:  >= 0px     (phones; sidebar hidden behind bottom navigation)
 - sm:  >= 640px   (large phones; sidebar slides over content)
 - md:  >= 768px   (tablets; compact icon sidebar)
 - lg:  >= 1024px  (desktop; full sidebar at the skin's width)
 - xl:  >= 1280px  (wide desktop; content width capped)
 - 2xl: >= 1536px  (ultra wide)

Layout adaptations only read ``skin.spacing.sidebar_width``; everything else
is platform independent so switching skins never changes breakpoint logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from skins.catalog.visual_skins import VISUAL_SKINS
from skins.config.settings import DEFAULT_SKIN_ID, RESPONSIVE_PREFIX

from .css_vars import flatten_to_css_variables

__all__ = [
    "BREAKPOINT_ORDER",
    "Breakpoint",
    "LayoutAdaptation",
    "ResponsiveTouchTargets",
    "ContainerQueries",
    "ResponsiveConfig",
    "build_breakpoints",
    "build_semantic_breakpoints",
    "build_layout_adaptations",
    "classify_width",
    "get_responsive_config",
    "responsive_config_to_css_variables",
]

BREAKPOINT_ORDER: tuple[str, ...] = ("xs", "sm", "md", "lg", "xl", "2xl")

_MIN_WIDTHS: Dict[str, int] = {"xs": 0, "sm": 640, "md": 768, "lg": 1024, "xl": 1280, "2xl": 1536}


@dataclass(frozen=True)
class Breakpoint:
    id: str
    min_width: int

    @property
    def query(self) -> str:
        return f"(min-width: {self.min_width}px)"


@dataclass(frozen=True)
class LayoutAdaptation:
    sidebar_visible: bool
    sidebar_mode: str  # hidden | overlay | compact | full
    sidebar_width: str
    bottom_nav: bool
    compact_messages: bool
    full_screen_modals: bool
    grid_columns: int
    max_content_width: Optional[str] = None


@dataclass(frozen=True)
class ResponsiveTouchTargets:
    minimum: str
    comfortable: str
    large: str
    spacing: str


@dataclass(frozen=True)
class ContainerQueries:
    sidebar_expanded: str
    message_inline_reactions: str
    composer_full_toolbar: str
    header_show_actions: str


@dataclass(frozen=True)
class ResponsiveConfig:
    breakpoints: Mapping[str, Breakpoint]
    semantic_breakpoints: Mapping[str, str]
    touch_targets: ResponsiveTouchTargets
    layouts: Mapping[str, LayoutAdaptation]
    container_queries: ContainerQueries
    safe_area: Mapping[str, str]


def build_breakpoints() -> Dict[str, Breakpoint]:
    return {bp_id: Breakpoint(bp_id, _MIN_WIDTHS[bp_id]) for bp_id in BREAKPOINT_ORDER}


def build_semantic_breakpoints() -> Dict[str, str]:
    return {
        "mobile": f"(max-width: {_MIN_WIDTHS['md'] - 1}px)",
        "tablet": f"(min-width: {_MIN_WIDTHS['md']}px) and (max-width: {_MIN_WIDTHS['lg'] - 1}px)",
        "desktop": f"(min-width: {_MIN_WIDTHS['lg']}px)",
        "touch": "(hover: none)",
        "pointer_fine": "(pointer: fine)",
        "reduced_motion": "(prefers-reduced-motion: reduce)",
        "dark_scheme": "(prefers-color-scheme: dark)",
    }


def build_layout_adaptations(skin: Mapping[str, Any]) -> Dict[str, LayoutAdaptation]:
    width = skin["spacing"]["sidebar_width"]
    return {
        "xs": LayoutAdaptation(False, "hidden", "0px", True, True, True, 1),
        "sm": LayoutAdaptation(False, "overlay", width, True, True, True, 2),
        "md": LayoutAdaptation(True, "compact", "72px", False, False, False, 2),
        "lg": LayoutAdaptation(True, "full", width, False, False, False, 3),
        "xl": LayoutAdaptation(True, "full", width, False, False, False, 4, "1200px"),
        "2xl": LayoutAdaptation(True, "full", width, False, False, False, 4, "1440px"),
    }


def classify_width(width: int) -> str:
    """Return the id of the widest breakpoint whose lower bound ``width`` meets."""
    if width < 0:
        raise ValueError("width must be >= 0")
    current = BREAKPOINT_ORDER[0]
    for bp_id in BREAKPOINT_ORDER:
        if width >= _MIN_WIDTHS[bp_id]:
            current = bp_id
    return current


def get_responsive_config(skin: Optional[Mapping[str, Any]] = None) -> ResponsiveConfig:
    if skin is None:
        skin = VISUAL_SKINS[DEFAULT_SKIN_ID]
    return ResponsiveConfig(
        breakpoints=build_breakpoints(),
        semantic_breakpoints=build_semantic_breakpoints(),
        touch_targets=ResponsiveTouchTargets(
            minimum="44px", comfortable="48px", large="56px", spacing="8px"
        ),
        layouts=build_layout_adaptations(skin),
        container_queries=ContainerQueries(
            sidebar_expanded="200px",
            message_inline_reactions="480px",
            composer_full_toolbar="560px",
            header_show_actions="420px",
        ),
        safe_area={
            "top": "env(safe-area-inset-top, 0px)",
            "right": "env(safe-area-inset-right, 0px)",
            "bottom": "env(safe-area-inset-bottom, 0px)",
            "left": "env(safe-area-inset-left, 0px)",
        },
    )


def responsive_config_to_css_variables(
    config: ResponsiveConfig, prefix: str = RESPONSIVE_PREFIX
) -> Dict[str, str]:
    # Media query strings cannot be used inside var(); only lengths are exported.
    tree = {
        "breakpoint": {bp_id: f"{bp.min_width}px" for bp_id, bp in config.breakpoints.items()},
        "touch": config.touch_targets,
        "sidebar_width": {bp_id: layout.sidebar_width for bp_id, layout in config.layouts.items()},
        "container": config.container_queries,
        "safe_area": config.safe_area,
    }
    return flatten_to_css_variables(tree, prefix)
