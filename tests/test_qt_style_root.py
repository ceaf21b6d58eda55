import pytest

pytest.importorskip("PyQt6.QtWidgets")

from PyQt6.QtCore import QObject  # noqa: E402

from skins.services.qt_style_root import QtStyleRoot  # noqa: E402
from skins.services.skin_service import SkinService  # noqa: E402


def test_set_get_remove_property():
    root = QtStyleRoot(QObject())
    root.set_property("--skin-primary", "#611F69")
    assert root.get_property("--skin-primary") == "#611F69"
    assert "--skin-primary" in root.names()
    root.remove_property("--skin-primary")
    assert root.get_property("--skin-primary") is None
    assert "--skin-primary" not in root.names()


def test_defaults_to_running_application(qapp):
    root = QtStyleRoot()
    assert root.target is qapp


def test_skin_service_drives_qt_object(registry):
    target = QObject()
    service = SkinService(registry=registry, root=QtStyleRoot(target))
    applied = service.switch_skin("discord")
    assert target.property("--skin-primary") == "#5865F2"
    assert service.applied_variables()["--skin-primary"] == applied["colors"]["primary"]
    service.remove_skin_variables()
    assert target.property("--skin-primary") is None
