"""Presentation roots: the surface a variable map is written to.

A root only needs to set and remove named string properties. ``SkinService``
talks to roots through the :class:`StyleRoot` protocol so the same binder can
drive a headless dict (tests, server-side rendering) or a Qt application
(:mod:`skins.services.qt_style_root`).
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Protocol, runtime_checkable

__all__ = ["StyleRoot", "InMemoryStyleRoot"]


@runtime_checkable
class StyleRoot(Protocol):
    def set_property(self, name: str, value: str) -> None: ...  # pragma: no cover - structural

    def remove_property(self, name: str) -> None: ...  # pragma: no cover - structural


class InMemoryStyleRoot:
    """Dict-backed root. Also the default when ``SkinService`` gets no root."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self._props: Dict[str, str] = dict(initial or {})

    def set_property(self, name: str, value: str) -> None:
        self._props[name] = value

    def remove_property(self, name: str) -> None:
        self._props.pop(name, None)

    def get_property(self, name: str) -> Optional[str]:
        return self._props.get(name)

    def names(self) -> Iterable[str]:
        return list(self._props.keys())

    def snapshot(self) -> Dict[str, str]:
        return dict(self._props)

    def __len__(self) -> int:
        return len(self._props)

    def __contains__(self, name: object) -> bool:
        return name in self._props
