"""Qt presentation root.

Writes each variable as a dynamic property on a ``QObject``, usually the
running ``QApplication``, so widgets and style builders can read the active
skin with ``app.property("--skin-primary")``.
"""

from __future__ import annotations

from typing import List, Optional

from PyQt6.QtCore import QObject
from PyQt6.QtWidgets import QApplication

__all__ = ["QtStyleRoot"]


class QtStyleRoot:
    def __init__(self, target: Optional[QObject] = None) -> None:
        if target is None:
            target = QApplication.instance()
        if target is None:
            raise RuntimeError("QtStyleRoot needs a QObject or a running QApplication")
        self._target = target

    @property
    def target(self) -> QObject:
        return self._target

    def set_property(self, name: str, value: str) -> None:
        self._target.setProperty(name, value)

    def remove_property(self, name: str) -> None:
        # An invalid variant removes a dynamic property.
        self._target.setProperty(name, None)

    def get_property(self, name: str) -> Optional[str]:
        value = self._target.property(name)
        return None if value is None else str(value)

    def names(self) -> List[str]:
        return [bytes(raw).decode("utf-8") for raw in self._target.dynamicPropertyNames()]
