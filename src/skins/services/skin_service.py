"""Skin service: binds resolved skins to a presentation root.

Turns a visual skin (plus the active behavior preset) into one flat variable
map (``--skin-*`` palette/typography/spacing/radius, ``--dt-*`` design tokens
and ``--ct-*`` component tokens) and writes it to a :class:`StyleRoot`.

 - The map is derived completely before anything is written; the write itself
   happens under the service lock so concurrent switches never interleave.
 - Keys from the previous application that are absent from the new map are
   removed, unchanged keys are not rewritten.
 - If the root fails mid-write the previous map is restored and the error
   propagates; the service keeps reporting the previous state.
 - Changes are announced on the service's ``EventBus`` (when one is given)
   as ``SkinEvent.SKIN_CHANGED`` / ``BEHAVIOR_CHANGED`` / ``SKIN_REMOVED``
   with a short diff summary.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from threading import RLock
from time import perf_counter
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from skins.config.settings import (
    DEFAULT_BEHAVIOR_ID,
    DEFAULT_PROFILE_ID,
    DEFAULT_SKIN_ID,
    STYLE_APPLY_WARN_THRESHOLD_MS,
)
from skins.design.components import get_component_tokens
from skins.design.css_vars import (
    component_tokens_to_css_variables,
    design_tokens_to_css_variables,
    skin_to_css_variables,
)
from skins.design.merge import deep_merge
from skins.design.tokens import get_design_tokens
from skins.engine.registry import (
    ResolvedSkinState,
    SkinRegistry,
    SkinValidationError,
    default_registry,
)
from skins.engine.validation import validate_behavior, validate_skin

from .event_bus import EventBus, SkinEvent
from .style_root import InMemoryStyleRoot, StyleRoot

_logger = logging.getLogger(__name__)

__all__ = [
    "SkinDiff",
    "SkinService",
    "build_skin_variables",
    "get_skin_service",
    "reset_skin_service",
]

_SUMMARY_LIMIT = 15


@dataclass
class SkinDiff:
    """Changes between two applied variable maps.

    ``changed`` maps variable name -> (old_value, new_value); ``None`` on either
    side means the variable was added or removed.
    """

    changed: Dict[str, Tuple[Optional[str], Optional[str]]]

    @property
    def no_changes(self) -> bool:
        return not self.changed

    def summary(self) -> Dict[str, Any]:
        keys = list(self.changed.keys())
        return {"changed": keys[:_SUMMARY_LIMIT], "count": len(keys)}

    @classmethod
    def between(cls, old: Mapping[str, str], new: Mapping[str, str]) -> "SkinDiff":
        changed: Dict[str, Tuple[Optional[str], Optional[str]]] = {}
        for name in set(old) | set(new):
            before, after = old.get(name), new.get(name)
            if before != after:
                changed[name] = (before, after)
        return cls(dict(sorted(changed.items())))


def build_skin_variables(
    skin: Mapping[str, Any],
    is_dark_mode: bool = False,
    behavior: Optional[Mapping[str, Any]] = None,
) -> Dict[str, str]:
    """Full variable map for ``skin``: skin, design token and component token entries."""
    variables = skin_to_css_variables(skin, is_dark_mode)
    variables.update(design_tokens_to_css_variables(get_design_tokens(skin, is_dark_mode)))
    variables.update(
        component_tokens_to_css_variables(get_component_tokens(skin, behavior, is_dark_mode))
    )
    return variables


class SkinService:
    def __init__(
        self,
        registry: Optional[SkinRegistry] = None,
        root: Optional[StyleRoot] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        self._registry = registry
        self._root: StyleRoot = root if root is not None else InMemoryStyleRoot()
        self._bus = bus
        self._lock = RLock()
        self._applied: Dict[str, str] = {}
        self._skin: Optional[Dict[str, Any]] = None
        self._behavior: Optional[Dict[str, Any]] = None
        self._is_dark_mode = False

    # Accessors ---------------------------------------------------------
    @property
    def registry(self) -> SkinRegistry:
        return self._registry if self._registry is not None else default_registry()

    @property
    def root(self) -> StyleRoot:
        return self._root

    @property
    def bus(self) -> Optional[EventBus]:
        return self._bus

    @property
    def is_dark_mode(self) -> bool:
        return self._is_dark_mode

    def applied_variables(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._applied)

    def active_skin(self) -> Optional[Dict[str, Any]]:
        with self._lock:
            return copy.deepcopy(self._skin)

    def active_behavior(self) -> Optional[Dict[str, Any]]:
        with self._lock:
            return copy.deepcopy(self._behavior)

    # Apply / remove ----------------------------------------------------
    def apply_skin(self, skin: Mapping[str, Any], is_dark_mode: bool = False) -> Dict[str, str]:
        """Validate ``skin`` and write its variable map to the root.

        Returns the applied map. Raises ``SkinValidationError`` (nothing is
        written) when the skin is invalid.
        """
        start_t = perf_counter()
        result = validate_skin(skin)
        if not result.valid:
            _logger.warning("Refusing to apply skin %r: %s", skin.get("id"), "; ".join(result.errors))
            raise SkinValidationError("skin", skin.get("id"), result.errors)
        with self._lock:
            behavior = self._behavior
        variables = build_skin_variables(skin, is_dark_mode, behavior)
        with self._lock:
            previous = self._applied
            self._write(previous, variables)
            self._applied = variables
            self._skin = copy.deepcopy(dict(skin))
            self._is_dark_mode = is_dark_mode
        diff = SkinDiff.between(previous, variables)
        elapsed_ms = (perf_counter() - start_t) * 1000.0
        self._maybe_log_slow(str(skin.get("id")), elapsed_ms, diff)
        if not diff.no_changes:
            payload = {"skin_id": skin.get("id"), "is_dark_mode": is_dark_mode}
            payload.update(diff.summary())
            self._publish(SkinEvent.SKIN_CHANGED, payload)
        return dict(variables)

    def remove_skin_variables(self) -> int:
        """Remove every variable the last application wrote. Returns how many.

        If the root fails partway the error propagates and
        ``applied_variables()`` lists only the variables still present.
        """
        removed = 0
        with self._lock:
            try:
                for name in list(self._applied):
                    self._root.remove_property(name)
                    del self._applied[name]
                    removed += 1
            finally:
                if not self._applied:
                    self._skin = None
        if removed:
            _logger.debug("Removed %d skin variables", removed)
            self._publish(SkinEvent.SKIN_REMOVED, {"count": removed})
        return removed

    # Resolution + apply ------------------------------------------------
    def switch_skin(
        self,
        skin_or_id: Union[str, Mapping[str, Any]],
        is_dark_mode: bool = False,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Dict[str, Any]]:
        """Look up (or take) a skin, merge ``overrides``, apply it.

        Returns the resolved skin, or ``None`` for an unknown id, in which
        case the current state is kept.
        """
        if isinstance(skin_or_id, str):
            skin = self.registry.get_skin(skin_or_id, overrides)
            if skin is None:
                _logger.warning("Unknown skin '%s'; keeping the current skin", skin_or_id)
                return None
        else:
            skin = deep_merge(skin_or_id, overrides)
        self.apply_skin(skin, is_dark_mode)
        return skin

    def apply_behavior(
        self, behavior_id: str, overrides: Optional[Mapping[str, Any]] = None
    ) -> Optional[Dict[str, Any]]:
        """Activate a behavior preset; re-applies the current skin so component tokens follow."""
        behavior = self.registry.get_behavior(behavior_id, overrides)
        if behavior is None:
            _logger.warning("Unknown behavior '%s'; keeping the current behavior", behavior_id)
            return None
        result = validate_behavior(behavior)
        if not result.valid:
            raise SkinValidationError("behavior", behavior_id, result.errors)
        with self._lock:
            skin, is_dark_mode = self._skin, self._is_dark_mode
        self._apply_with_behavior(behavior, skin, is_dark_mode)
        self._publish(SkinEvent.BEHAVIOR_CHANGED, {"behavior_id": behavior_id})
        return behavior

    def apply_profile(self, profile_id: str, is_dark_mode: bool = False) -> Optional[ResolvedSkinState]:
        state = self.registry.resolve_profile(profile_id, is_dark_mode)
        if state is None:
            _logger.warning("Unknown profile '%s'", profile_id)
            return None
        self._activate(state)
        return state

    def reset_skin(self) -> Optional[ResolvedSkinState]:
        """Return to the default profile (light mode)."""
        state = self.apply_profile(DEFAULT_PROFILE_ID)
        if state is None:
            state = self.registry.resolve_independent(DEFAULT_SKIN_ID, DEFAULT_BEHAVIOR_ID)
            self._activate(state)
        return state

    # Internal ----------------------------------------------------------
    def _activate(self, state: ResolvedSkinState) -> None:
        # Both records are checked before anything changes.
        result = validate_behavior(state.behavior)
        if not result.valid:
            raise SkinValidationError("behavior", state.behavior.get("id"), result.errors)
        result = validate_skin(state.skin)
        if not result.valid:
            _logger.warning(
                "Refusing to activate skin %r: %s", state.skin.get("id"), "; ".join(result.errors)
            )
            raise SkinValidationError("skin", state.skin.get("id"), result.errors)
        self._apply_with_behavior(state.behavior, state.skin, state.is_dark_mode)
        self._publish(SkinEvent.BEHAVIOR_CHANGED, {"behavior_id": state.behavior.get("id")})

    def _apply_with_behavior(
        self, behavior: Mapping[str, Any], skin: Optional[Mapping[str, Any]], is_dark_mode: bool
    ) -> None:
        """Switch the active behavior and re-apply ``skin``; the old behavior returns on failure."""
        with self._lock:
            previous = self._behavior
            self._behavior = copy.deepcopy(dict(behavior))
        if skin is None:
            return
        try:
            self.apply_skin(skin, is_dark_mode)
        except Exception:
            with self._lock:
                self._behavior = previous
            raise

    def _write(self, previous: Mapping[str, str], variables: Mapping[str, str]) -> None:
        written: List[str] = []
        try:
            for name in previous:
                if name not in variables:
                    self._root.remove_property(name)
                    written.append(name)
            for name, value in variables.items():
                if previous.get(name) != value:
                    self._root.set_property(name, value)
                    written.append(name)
        except Exception:
            _logger.error("Style root failed after %d writes; restoring previous skin", len(written))
            self._restore(previous, written)
            raise

    def _restore(self, previous: Mapping[str, str], touched: List[str]) -> None:
        try:
            for name in touched:
                if name in previous:
                    self._root.set_property(name, previous[name])
                else:
                    self._root.remove_property(name)
        except Exception:  # noqa: BLE001 - the original failure is re-raised by the caller
            _logger.exception("Restoring previous skin variables failed")

    def _maybe_log_slow(self, skin_id: str, elapsed_ms: float, diff: SkinDiff) -> None:
        _logger.debug(
            "skin applied: skin=%s time=%.2fms changed=%d", skin_id, elapsed_ms, len(diff.changed)
        )
        if elapsed_ms >= STYLE_APPLY_WARN_THRESHOLD_MS and not diff.no_changes:
            _logger.warning(
                "skin application slow: skin=%s time=%.2fms changed=%d",
                skin_id,
                elapsed_ms,
                len(diff.changed),
            )
            self._publish(
                SkinEvent.SKIN_APPLY_SLOW,
                {"skin_id": skin_id, "elapsed_ms": elapsed_ms, "count": len(diff.changed)},
            )

    def _publish(self, event: SkinEvent, payload: Dict[str, Any]) -> None:
        if self._bus is not None:
            self._bus.publish(event, payload)


_default_service: Optional[SkinService] = None
_default_lock = RLock()


def get_skin_service() -> SkinService:
    """Process-wide service over the default registry, created on first use.

    It owns its own :class:`EventBus`; subscribe through ``get_skin_service().bus``.
    """
    global _default_service
    with _default_lock:
        if _default_service is None:
            _default_service = SkinService(bus=EventBus())
        return _default_service


def reset_skin_service() -> None:
    """Forget the process-wide service (tests, re-initialisation)."""
    global _default_service
    with _default_lock:
        _default_service = None
