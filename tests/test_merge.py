import copy

from skins.catalog import BEHAVIOR_PRESETS, VISUAL_SKINS
from skins.design.merge import deep_merge


def test_empty_override_is_identity():
    base = VISUAL_SKINS["nchat"]
    assert deep_merge(base, {}) == base
    assert deep_merge(base, None) == base


def test_override_wins_at_depth():
    merged = deep_merge({"a": {"b": {"c": 1, "d": 2}}}, {"a": {"b": {"c": 9}}})
    assert merged == {"a": {"b": {"c": 9, "d": 2}}}


def test_none_never_clobbers():
    merged = deep_merge({"colors": {"primary": "#000000"}}, {"colors": {"primary": None}})
    assert merged["colors"]["primary"] == "#000000"


def test_new_keys_are_added():
    assert deep_merge({"a": 1}, {"b": {"c": 2}}) == {"a": 1, "b": {"c": 2}}


def test_lists_are_replaced_not_merged():
    base = {"channels": {"types": ["public", "private", "dm"]}}
    merged = deep_merge(base, {"channels": {"types": ["dm"]}})
    assert merged["channels"]["types"] == ["dm"]


def test_scalar_replaces_mapping_and_back():
    assert deep_merge({"a": {"b": 1}}, {"a": 5}) == {"a": 5}
    assert deep_merge({"a": 5}, {"a": {"b": 1}}) == {"a": {"b": 1}}


def test_inputs_untouched_and_result_is_fresh():
    base = {"a": {"b": [1, 2]}, "c": 1}
    override = {"a": {"x": [3]}}
    base_before = copy.deepcopy(base)
    override_before = copy.deepcopy(override)
    merged = deep_merge(base, override)
    assert base == base_before
    assert override == override_before
    merged["a"]["b"].append(99)
    merged["a"]["x"].append(99)
    assert base["a"]["b"] == [1, 2]
    assert override["a"]["x"] == [3]


def test_self_merge_identity():
    for record in list(VISUAL_SKINS.values()) + list(BEHAVIOR_PRESETS.values()):
        merged = deep_merge(record, record)
        assert merged == record
        assert merged is not record
