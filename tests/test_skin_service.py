import copy
import logging

import pytest

from skins.catalog import VISUAL_SKINS
from skins.engine.registry import SkinValidationError
from skins.services import skin_service as skin_service_module
from skins.services.event_bus import SkinEvent
from skins.services.skin_service import SkinDiff, SkinService, get_skin_service, reset_skin_service
from skins.services.style_root import InMemoryStyleRoot


class FlakyRoot(InMemoryStyleRoot):
    """Fails once, on the n-th property write (or removal) after arming."""

    def __init__(self):
        super().__init__()
        self.fail_at = None
        self.fail_remove_at = None
        self.writes = 0
        self.removals = 0

    def set_property(self, name, value):
        if self.fail_at is not None:
            self.writes += 1
            if self.writes == self.fail_at:
                self.fail_at = None
                raise RuntimeError("root unavailable")
        super().set_property(name, value)

    def remove_property(self, name):
        if self.fail_remove_at is not None:
            self.removals += 1
            if self.removals == self.fail_remove_at:
                self.fail_remove_at = None
                raise RuntimeError("root unavailable")
        super().remove_property(name)


@pytest.fixture
def root():
    return InMemoryStyleRoot()


@pytest.fixture
def service(registry, root, bus):
    return SkinService(registry=registry, root=root, bus=bus)


def _events(bus, event):
    received = []
    bus.subscribe(event, lambda evt: received.append(evt.payload))
    return received


def test_apply_writes_all_layers(service, root):
    applied = service.apply_skin(VISUAL_SKINS["slack"])
    assert root.snapshot() == applied
    assert applied["--skin-primary"] == "#611F69"
    assert applied["--dt-type-base-font-size"] == "15px"
    assert "--ct-button-border-radius" in applied
    assert service.active_skin()["id"] == "slack"
    assert service.applied_variables() == applied


def test_apply_is_idempotent(service, root):
    first = service.apply_skin(VISUAL_SKINS["nchat"])
    second = service.apply_skin(VISUAL_SKINS["nchat"])
    assert first == second
    assert root.snapshot() == second


def test_invalid_skin_is_rejected_before_writing(service, root):
    bad = copy.deepcopy(VISUAL_SKINS["nchat"])
    bad["colors"]["primary"] = "#GGGGGG"
    with pytest.raises(SkinValidationError) as info:
        service.apply_skin(bad)
    assert "Invalid light mode color primary: '#GGGGGG'" in info.value.errors
    assert len(root) == 0
    assert service.active_skin() is None


def test_stale_variables_removed(service, root):
    custom = copy.deepcopy(VISUAL_SKINS["nchat"])
    custom["spacing"]["composer_gap"] = "4px"
    service.apply_skin(custom)
    assert root.get_property("--skin-composer-gap") == "4px"
    service.apply_skin(VISUAL_SKINS["nchat"])
    assert "--skin-composer-gap" not in root


def test_switch_skin_by_id_with_dark_mode(service, root):
    skin = service.switch_skin("nchat", True)
    assert skin["id"] == "nchat"
    assert root.get_property("--skin-background") == "#18181B"
    assert service.is_dark_mode is True


def test_switch_skin_applies_overrides(service, root):
    skin = service.switch_skin("nchat", False, {"colors": {"primary": "#ABC"}})
    assert skin["colors"]["primary"] == "#ABC"
    assert root.get_property("--skin-primary") == "#ABC"
    assert service.registry.get_skin("nchat")["colors"]["primary"] == "#00D4FF"


def test_switch_skin_accepts_a_record(service, root):
    skin = service.switch_skin(VISUAL_SKINS["discord"], overrides={"spacing": {"sidebar_width": "300px"}})
    assert skin["spacing"]["sidebar_width"] == "300px"
    assert root.get_property("--skin-sidebar-width") == "300px"


def test_switch_unknown_skin_keeps_state(service, root):
    service.switch_skin("discord")
    before = root.snapshot()
    assert service.switch_skin("myspace") is None
    assert root.snapshot() == before
    assert service.active_skin()["id"] == "discord"


def test_switch_then_remove_leaves_nothing(service, root):
    service.switch_skin("telegram")
    removed = service.remove_skin_variables()
    assert removed > 42
    assert not any(name.startswith("--skin-") for name in root.names())
    assert len(root) == 0
    assert service.applied_variables() == {}
    assert service.remove_skin_variables() == 0


def test_remove_only_touches_own_keys(service, root):
    root.set_property("--app-foreign", "1")
    service.switch_skin("signal")
    service.remove_skin_variables()
    assert root.snapshot() == {"--app-foreign": "1"}


def test_failed_write_restores_previous_skin(registry):
    root = FlakyRoot()
    service = SkinService(registry=registry, root=root)
    nchat = service.apply_skin(VISUAL_SKINS["nchat"])
    root.fail_at = 20
    with pytest.raises(RuntimeError):
        service.switch_skin("discord")
    assert root.snapshot() == nchat
    assert service.applied_variables() == nchat
    assert service.active_skin()["id"] == "nchat"


def test_failed_profile_switch_keeps_behavior(registry):
    root = FlakyRoot()
    service = SkinService(registry=registry, root=root)
    service.apply_profile("nchat")
    before = root.snapshot()
    root.fail_at = 5
    with pytest.raises(RuntimeError):
        service.apply_profile("discord")
    assert service.active_skin()["id"] == "nchat"
    assert service.active_behavior()["id"] == "nchat"
    assert root.snapshot() == before


def test_failed_behavior_switch_keeps_behavior(registry):
    root = FlakyRoot()
    service = SkinService(registry=registry, root=root)
    service.apply_profile("nchat")
    before = root.snapshot()
    root.fail_at = 1
    with pytest.raises(RuntimeError):
        service.apply_behavior("slack")
    assert service.active_behavior()["id"] == "nchat"
    assert root.snapshot() == before
    # the next attempt goes through
    assert service.apply_behavior("slack")["id"] == "slack"
    assert root.get_property("--ct-composer-max-length") == "40000"


def test_failed_removal_forgets_removed_keys(registry):
    root = FlakyRoot()
    service = SkinService(registry=registry, root=root)
    service.switch_skin("telegram")
    applied = service.applied_variables()
    root.fail_remove_at = 3
    with pytest.raises(RuntimeError):
        service.remove_skin_variables()
    assert service.applied_variables() == root.snapshot()
    assert len(service.applied_variables()) == len(applied) - 2
    assert service.active_skin()["id"] == "telegram"
    assert service.remove_skin_variables() == len(applied) - 2
    assert len(root) == 0
    assert service.active_skin() is None


def test_apply_behavior_feeds_component_tokens(service, root):
    service.switch_skin("discord")
    assert root.get_property("--ct-composer-max-length") == "10000"
    behavior = service.apply_behavior("slack")
    assert behavior["id"] == "slack"
    assert behavior["calls"]["huddles"] is True
    assert root.get_property("--ct-composer-max-length") == "40000"
    assert service.active_behavior()["id"] == "slack"


def test_apply_behavior_overrides_and_unknown(service):
    behavior = service.apply_behavior("slack", {"calls": {"huddles": False}})
    assert behavior["calls"]["huddles"] is False
    assert service.apply_behavior("icq") is None
    assert service.active_behavior()["id"] == "slack"


def test_apply_profile(service, root):
    state = service.apply_profile("privacy-team")
    assert state.profile_id == "privacy-team"
    assert root.get_property("--ct-header-show-thread-button") == "true"
    assert service.apply_profile("nope") is None


def test_reset_skin(service, root):
    service.switch_skin("slack", True)
    state = service.reset_skin()
    assert state.skin["id"] == "nchat"
    assert state.behavior["id"] == "nchat"
    assert root.get_property("--skin-primary") == "#00D4FF"
    assert service.is_dark_mode is False


def test_events_published(service, bus):
    changed = _events(bus, SkinEvent.SKIN_CHANGED)
    removed = _events(bus, SkinEvent.SKIN_REMOVED)
    behavior = _events(bus, SkinEvent.BEHAVIOR_CHANGED)
    service.switch_skin("whatsapp")
    assert changed[-1]["skin_id"] == "whatsapp"
    assert changed[-1]["count"] == len(service.applied_variables())
    assert len(changed[-1]["changed"]) <= 15
    service.switch_skin("whatsapp")
    assert len(changed) == 1  # nothing changed, nothing published
    service.apply_behavior("telegram")
    assert behavior == [{"behavior_id": "telegram"}]
    service.remove_skin_variables()
    assert removed[-1]["count"] > 0


def test_slow_apply_logged(service, bus, caplog, monkeypatch):
    monkeypatch.setattr(skin_service_module, "STYLE_APPLY_WARN_THRESHOLD_MS", 0.0)
    slow = _events(bus, SkinEvent.SKIN_APPLY_SLOW)
    with caplog.at_level(logging.WARNING, logger="skins.services.skin_service"):
        service.switch_skin("slack")
    assert any("skin application slow" in r.getMessage() for r in caplog.records)
    assert slow[-1]["skin_id"] == "slack"


def test_service_without_bus(registry):
    service = SkinService(registry=registry)
    assert service.bus is None
    assert service.switch_skin("nchat") is not None
    assert service.remove_skin_variables() > 0


def test_skin_diff():
    diff = SkinDiff.between({"a": "1", "b": "2"}, {"b": "3", "c": "4"})
    assert diff.changed == {"a": ("1", None), "b": ("2", "3"), "c": (None, "4")}
    assert not diff.no_changes
    assert SkinDiff.between({"a": "1"}, {"a": "1"}).no_changes
    assert diff.summary() == {"changed": ["a", "b", "c"], "count": 3}


def test_get_skin_service_is_shared():
    svc = get_skin_service()
    assert get_skin_service() is svc
    assert svc.bus is not None
    received = _events(svc.bus, SkinEvent.SKIN_CHANGED)
    svc.switch_skin("signal")
    assert received[-1]["skin_id"] == "signal"
    reset_skin_service()
    assert get_skin_service() is not svc
