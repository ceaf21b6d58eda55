"""Service layer exports.

Responsibilities:
 - The synchronous `EventBus` and its `SkinEvent` names
 - `SkinService`, which writes resolved skins to a presentation root

`QtStyleRoot` lives in `skins.services.qt_style_root` and is not imported
here so headless callers never load Qt.
"""

from .event_bus import EventBus, SkinEvent  # noqa: F401
from .style_root import InMemoryStyleRoot, StyleRoot  # noqa: F401
from .skin_service import (  # noqa: F401
    SkinDiff,
    SkinService,
    build_skin_variables,
    get_skin_service,
    reset_skin_service,
)

__all__ = [
    "EventBus",
    "SkinEvent",
    "InMemoryStyleRoot",
    "StyleRoot",
    "SkinDiff",
    "SkinService",
    "build_skin_variables",
    "get_skin_service",
    "reset_skin_service",
]
