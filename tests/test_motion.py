import pytest

from skins.design.motion import (
    ANIMATION_NAMES,
    StaggerConfig,
    build_keyframes,
    build_spring_presets,
    get_motion_tokens,
    get_stagger_delay,
    resolve_animation,
)


def test_every_animation_has_both_variants():
    tokens = get_motion_tokens()
    assert tuple(tokens.animations) == ANIMATION_NAMES
    assert len(ANIMATION_NAMES) == 14


def test_reduced_motion_variants():
    animations = get_motion_tokens().animations
    assert animations["slide_up"].reduced.keyframes == "dt-fade-in"
    for name in ("spin", "pulse", "bounce", "shake"):
        assert animations[name].reduced.value == "none"
    assert resolve_animation(animations["slide_up"], True) is animations["slide_up"].reduced
    assert resolve_animation(animations["slide_up"], False) is animations["slide_up"].full


def test_animation_shorthand():
    spin = get_motion_tokens().animations["spin"].full
    assert spin.value == "dt-spin 1000ms cubic-bezier(0, 0, 1, 1) infinite none"


def test_keyframes_referenced_by_animations_exist():
    names = {kf.name for kf in build_keyframes()}
    assert all(name.startswith("dt-") for name in names)
    for animation in get_motion_tokens().animations.values():
        for spec in (animation.full, animation.reduced):
            assert spec.keyframes == "none" or spec.keyframes in names


@pytest.mark.parametrize("index,expected", [(-1, "0ms"), (0, "0ms"), (1, "50ms"), (3, "150ms"), (10, "500ms"), (40, "500ms")])
def test_stagger_delay_is_capped(index, expected):
    assert get_stagger_delay(index) == expected


def test_stagger_custom_config():
    config = StaggerConfig(delay="30ms", max_delay="100ms", max_items=5)
    assert get_stagger_delay(2, config) == "60ms"
    assert get_stagger_delay(9, config) == "100ms"


def test_stagger_stops_growing_after_max_items():
    config = StaggerConfig(delay="20ms", max_delay="1000ms", max_items=4)
    assert get_stagger_delay(4, config) == "80ms"
    assert get_stagger_delay(5, config) == "80ms"
    assert get_stagger_delay(100, config) == "80ms"


def test_easings_and_springs_are_css_curves():
    tokens = get_motion_tokens()
    for easing in tokens.transitions.easings.values():
        assert easing.startswith("cubic-bezier(")
    springs = build_spring_presets()
    assert set(springs) == {"gentle", "snappy", "bouncy", "stiff"}
    for spring in springs.values():
        assert spring.css_approximation.startswith("cubic-bezier(")
        assert spring.stiffness > 0 and spring.damping > 0
