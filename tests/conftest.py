# Shared fixtures. Qt always runs on the offscreen platform so the Qt root
# tests work on headless CI; they skip entirely when PyQt6 is missing.

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from skins.engine.registry import create_registry, reset_default_registry  # noqa: E402
from skins.services.event_bus import EventBus  # noqa: E402
from skins.services.skin_service import reset_skin_service  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_defaults():
    reset_default_registry()
    reset_skin_service()
    yield
    reset_skin_service()
    reset_default_registry()


@pytest.fixture
def registry():
    return create_registry()


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def qapp():
    widgets = pytest.importorskip("PyQt6.QtWidgets")
    return widgets.QApplication.instance() or widgets.QApplication([])
