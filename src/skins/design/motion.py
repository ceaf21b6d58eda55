"""Motion tokens: named animations, keyframes, stagger and spring presets.

Every named animation comes in two variants: ``full`` and ``reduced``. The
reduced variant replaces movement with a short fade, or with no animation at
all for purely decorative loops (spin, pulse, bounce, shake), and is what
:func:`resolve_animation` returns when the user prefers reduced motion.

Durations and easings reuse the transition tokens of the design token set so
animations and transitions stay in step.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from .tokens import TransitionTokens, build_transition_tokens

__all__ = [
    "ANIMATION_NAMES",
    "AnimationSpec",
    "NamedAnimation",
    "KeyframeDefinition",
    "StaggerConfig",
    "SpringPreset",
    "MotionTokens",
    "build_keyframes",
    "build_animations",
    "build_stagger_config",
    "get_stagger_delay",
    "build_spring_presets",
    "resolve_animation",
    "get_motion_tokens",
]

ANIMATION_NAMES: tuple[str, ...] = (
    "fade_in",
    "fade_out",
    "slide_up",
    "slide_down",
    "slide_left",
    "slide_right",
    "scale_in",
    "scale_out",
    "collapse_down",
    "collapse_up",
    "spin",
    "pulse",
    "bounce",
    "shake",
)

_MS_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*ms\s*$")


@dataclass(frozen=True)
class AnimationSpec:
    keyframes: str
    duration: str
    easing: str
    iterations: str = "1"
    fill_mode: str = "both"

    @property
    def value(self) -> str:
        """CSS ``animation`` shorthand."""
        if self.keyframes == "none":
            return "none"
        return f"{self.keyframes} {self.duration} {self.easing} {self.iterations} {self.fill_mode}"


@dataclass(frozen=True)
class NamedAnimation:
    full: AnimationSpec
    reduced: AnimationSpec


@dataclass(frozen=True)
class KeyframeDefinition:
    name: str
    frames: Mapping[str, Mapping[str, str]]


@dataclass(frozen=True)
class StaggerConfig:
    delay: str
    max_delay: str
    max_items: int


@dataclass(frozen=True)
class SpringPreset:
    stiffness: float
    damping: float
    mass: float
    css_approximation: str


@dataclass(frozen=True)
class MotionTokens:
    transitions: TransitionTokens
    animations: Mapping[str, NamedAnimation]
    keyframes: List[KeyframeDefinition]
    stagger: StaggerConfig
    springs: Mapping[str, SpringPreset]


def _ms(value: str) -> float:
    match = _MS_RE.match(value)
    if match is None:
        raise ValueError(f"Expected a millisecond duration like '200ms': {value!r}")
    return float(match.group(1))


def build_keyframes() -> List[KeyframeDefinition]:
    def fade(start: str, end: str) -> Dict[str, Dict[str, str]]:
        return {"from": {"opacity": start}, "to": {"opacity": end}}

    def enter(transform_from: str, transform_to: str) -> Dict[str, Dict[str, str]]:
        return {
            "from": {"opacity": "0", "transform": transform_from},
            "to": {"opacity": "1", "transform": transform_to},
        }

    frames: List[Tuple[str, Mapping[str, Mapping[str, str]]]] = [
        ("fade-in", fade("0", "1")),
        ("fade-out", fade("1", "0")),
        ("slide-up", enter("translateY(8px)", "translateY(0)")),
        ("slide-down", enter("translateY(-8px)", "translateY(0)")),
        ("slide-left", enter("translateX(8px)", "translateX(0)")),
        ("slide-right", enter("translateX(-8px)", "translateX(0)")),
        ("scale-in", enter("scale(0.95)", "scale(1)")),
        (
            "scale-out",
            {
                "from": {"opacity": "1", "transform": "scale(1)"},
                "to": {"opacity": "0", "transform": "scale(0.95)"},
            },
        ),
        (
            "collapse-down",
            {
                "from": {"height": "0", "opacity": "0"},
                "to": {"height": "var(--dt-collapse-height, auto)", "opacity": "1"},
            },
        ),
        (
            "collapse-up",
            {
                "from": {"height": "var(--dt-collapse-height, auto)", "opacity": "1"},
                "to": {"height": "0", "opacity": "0"},
            },
        ),
        ("spin", {"from": {"transform": "rotate(0deg)"}, "to": {"transform": "rotate(360deg)"}}),
        ("pulse", {"0%": {"opacity": "1"}, "50%": {"opacity": "0.5"}, "100%": {"opacity": "1"}}),
        (
            "bounce",
            {
                "0%": {"transform": "translateY(0)"},
                "50%": {"transform": "translateY(-25%)"},
                "100%": {"transform": "translateY(0)"},
            },
        ),
        (
            "shake",
            {
                "0%": {"transform": "translateX(0)"},
                "25%": {"transform": "translateX(-4px)"},
                "75%": {"transform": "translateX(4px)"},
                "100%": {"transform": "translateX(0)"},
            },
        ),
    ]
    return [KeyframeDefinition(name=f"dt-{name}", frames=f) for name, f in frames]


def build_animations(transitions: Optional[TransitionTokens] = None) -> Dict[str, NamedAnimation]:
    t = transitions or build_transition_tokens()
    d, e = t.durations, t.easings
    no_motion = AnimationSpec(keyframes="none", duration=d["instant"], easing=e["linear"])

    def fade(keyframes: str) -> AnimationSpec:
        return AnimationSpec(keyframes=keyframes, duration=d["fast"], easing=e["linear"])

    return {
        "fade_in": NamedAnimation(AnimationSpec("dt-fade-in", d["normal"], e["ease_out"]), fade("dt-fade-in")),
        "fade_out": NamedAnimation(AnimationSpec("dt-fade-out", d["fast"], e["ease_in"]), fade("dt-fade-out")),
        "slide_up": NamedAnimation(AnimationSpec("dt-slide-up", d["normal"], e["ease_out"]), fade("dt-fade-in")),
        "slide_down": NamedAnimation(AnimationSpec("dt-slide-down", d["normal"], e["ease_out"]), fade("dt-fade-in")),
        "slide_left": NamedAnimation(AnimationSpec("dt-slide-left", d["normal"], e["ease_out"]), fade("dt-fade-in")),
        "slide_right": NamedAnimation(AnimationSpec("dt-slide-right", d["normal"], e["ease_out"]), fade("dt-fade-in")),
        "scale_in": NamedAnimation(AnimationSpec("dt-scale-in", d["fast"], e["spring"]), fade("dt-fade-in")),
        "scale_out": NamedAnimation(AnimationSpec("dt-scale-out", d["fast"], e["ease_in"]), fade("dt-fade-out")),
        "collapse_down": NamedAnimation(AnimationSpec("dt-collapse-down", d["slow"], e["standard"]), fade("dt-fade-in")),
        "collapse_up": NamedAnimation(AnimationSpec("dt-collapse-up", d["slow"], e["standard"]), fade("dt-fade-out")),
        "spin": NamedAnimation(AnimationSpec("dt-spin", "1000ms", e["linear"], iterations="infinite", fill_mode="none"), no_motion),
        "pulse": NamedAnimation(AnimationSpec("dt-pulse", "2000ms", e["ease_in_out"], iterations="infinite", fill_mode="none"), no_motion),
        "bounce": NamedAnimation(AnimationSpec("dt-bounce", "1000ms", e["ease_in_out"], iterations="infinite", fill_mode="none"), no_motion),
        "shake": NamedAnimation(AnimationSpec("dt-shake", d["slower"], e["ease_in_out"]), no_motion),
    }


def build_stagger_config() -> StaggerConfig:
    return StaggerConfig(delay="50ms", max_delay="500ms", max_items=10)


def get_stagger_delay(index: int, config: Optional[StaggerConfig] = None) -> str:
    """Entrance delay for the ``index``-th item of a list.

    Items past ``max_items`` share the last item's delay, and no delay
    exceeds ``max_delay``.
    """
    cfg = config or build_stagger_config()
    if index <= 0:
        return "0ms"
    steps = min(index, cfg.max_items)
    delay = min(_ms(cfg.delay) * steps, _ms(cfg.max_delay))
    return f"{delay:g}ms"


def build_spring_presets() -> Dict[str, SpringPreset]:
    return {
        "gentle": SpringPreset(120.0, 14.0, 1.0, "cubic-bezier(0.25, 0.1, 0.25, 1)"),
        "snappy": SpringPreset(300.0, 30.0, 1.0, "cubic-bezier(0.2, 0, 0, 1)"),
        "bouncy": SpringPreset(180.0, 12.0, 1.0, "cubic-bezier(0.34, 1.56, 0.64, 1)"),
        "stiff": SpringPreset(400.0, 40.0, 1.0, "cubic-bezier(0.4, 0, 0.2, 1)"),
    }


def resolve_animation(animation: NamedAnimation, prefers_reduced_motion: bool) -> AnimationSpec:
    return animation.reduced if prefers_reduced_motion else animation.full


def get_motion_tokens() -> MotionTokens:
    transitions = build_transition_tokens()
    return MotionTokens(
        transitions=transitions,
        animations=build_animations(transitions),
        keyframes=build_keyframes(),
        stagger=build_stagger_config(),
        springs=build_spring_presets(),
    )
