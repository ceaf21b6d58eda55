import copy

import pytest

from skins.catalog import BEHAVIOR_PRESETS, VISUAL_SKINS
from skins.catalog.parity import (
    PARITY_PRIORITIES,
    PARITY_STATUSES,
    ParityChecklist,
    ParityItem,
    calculate_parity_percentage,
    get_parity_checklist,
    list_parity_platforms,
    platform_config,
    resolve_config_path,
    verify_config_parity,
)
from skins.engine.registry import resolve_independent


def _item(item_id, status="implemented", priority="high", category="messaging"):
    return ParityItem(
        id=item_id,
        description=item_id,
        category=category,
        priority=priority,
        status=status,
        config_path=None,
        expected_value=None,
    )


def test_platforms_listed():
    assert list_parity_platforms() == ["discord", "slack", "telegram", "whatsapp"]
    assert get_parity_checklist("myspace") is None


@pytest.mark.parametrize("platform_id", ["discord", "slack", "telegram", "whatsapp"])
def test_shipped_configs_match_their_checklist(platform_id):
    checklist = get_parity_checklist(platform_id)
    assert verify_config_parity(checklist, platform_config(platform_id)) == []
    assert checklist.verify_critical().passed
    assert checklist.parity_percentage == 100


@pytest.mark.parametrize("platform_id", ["discord", "slack", "telegram", "whatsapp"])
def test_checklist_bookkeeping(platform_id):
    checklist = get_parity_checklist(platform_id)
    assert sum(checklist.status_counts().values()) == checklist.total_items
    assert sum(checklist.priority_counts().values()) == checklist.total_items
    assert all(item.status in PARITY_STATUSES for item in checklist.items)
    assert all(item.priority in PARITY_PRIORITIES for item in checklist.items)
    assert sum(len(checklist.by_category(c)) for c in checklist.categories) == checklist.total_items
    ids = [item.id for item in checklist.items]
    assert len(ids) == len(set(ids))
    for item in checklist.by_status("implemented"):
        assert item.config_path


def test_discord_nitro_is_not_applicable():
    checklist = get_parity_checklist("discord")
    nitro = checklist.get_item("ntr-001")
    assert nitro.status == "not-applicable"
    assert nitro.config_path is None
    assert checklist.by_status("not-applicable") == [nitro]
    assert checklist.status_counts()["not-applicable"] == 1
    assert checklist.parity_percentage == 100
    assert checklist.get_item("nope") is None


def test_lookup_helpers():
    checklist = get_parity_checklist("slack")
    assert checklist.categories[0] == "workspace"
    assert [i.id for i in checklist.by_category("huddles")] == ["hdl-001", "hdl-002", "hdl-003"]
    assert checklist.get_item("vis-001").expected_value == "#611F69"
    assert all(i.priority == "critical" for i in checklist.by_priority("critical"))
    assert checklist.category_percentage("huddles") == 100
    assert checklist.category_percentage("no-such-category") == 0


def test_overridden_behavior_drifts():
    behavior = copy.deepcopy(BEHAVIOR_PRESETS["discord"])
    behavior["messaging"]["max_message_length"] = 4000
    checklist = get_parity_checklist("discord")
    mismatches = verify_config_parity(checklist, platform_config("discord", behavior=behavior))
    assert [(m.item.id, m.actual, m.missing) for m in mismatches] == [("msg-001", 4000, False)]


def test_another_platforms_skin_drifts():
    checklist = get_parity_checklist("whatsapp")
    mismatches = verify_config_parity(checklist, platform_config("whatsapp", skin=VISUAL_SKINS["slack"]))
    failed = {m.item.id for m in mismatches}
    assert "vis-001" in failed
    assert "vis-003" in failed


def test_missing_path_is_flagged():
    config = platform_config("telegram")
    del config["extended"]["secret_chats"]
    mismatches = verify_config_parity(get_parity_checklist("telegram"), config)
    assert {m.item.id for m in mismatches} == {"sc-001", "sc-002"}
    assert all(m.missing and m.actual is None for m in mismatches)


def test_resolved_state_can_be_verified(registry):
    state = resolve_independent("slack", "slack", registry=registry)
    config = platform_config("slack", skin=state.skin, behavior=state.behavior)
    assert verify_config_parity(get_parity_checklist("slack"), config) == []


def test_platform_config_is_a_copy():
    config = platform_config("discord")
    config["skin"]["colors"]["primary"] = "#000000"
    config["extended"]["guild"]["enabled"] = False
    fresh = platform_config("discord")
    assert fresh["skin"]["colors"]["primary"] == "#5865F2"
    assert fresh["extended"]["guild"]["enabled"] is True


def test_resolve_config_path():
    config = {"behavior": {"messaging": {"edit_window": 0}}}
    assert resolve_config_path(config, "behavior.messaging.edit_window") == 0
    with pytest.raises(KeyError):
        resolve_config_path(config, "behavior.messaging.pinning")
    with pytest.raises(KeyError):
        resolve_config_path(config, "behavior.messaging.edit_window.ms")


def test_parity_percentage():
    assert calculate_parity_percentage([]) == 0
    assert calculate_parity_percentage([_item("a", "not-applicable")]) == 0
    items = [_item("a"), _item("b", "partial"), _item("c", "not-applicable")]
    assert calculate_parity_percentage(items) == 50
    # 1 of 8 is 12.5%, rounded half up
    items = [_item("a")] + [_item(f"x{n}", "not-implemented") for n in range(7)]
    assert calculate_parity_percentage(items) == 13


def test_critical_partial_item_fails_verification():
    checklist = ParityChecklist(
        platform_id="acme",
        platform="Acme",
        target_version="1.0",
        assessment_date="2026-02-09",
        categories=("messaging",),
        items=(
            _item("ok", priority="critical"),
            _item("half", status="partial", priority="critical"),
            _item("later", status="not-implemented", priority="low"),
        ),
    )
    report = checklist.verify_critical()
    assert not report.passed
    assert [i.id for i in report.failed_items] == ["half"]
    assert checklist.parity_percentage == 33
