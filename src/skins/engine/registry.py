"""Skin / behavior / profile registry and independent resolution.

The registry holds three id-keyed namespaces (visual skins, behavior presets,
composite profiles). ``create_registry()`` returns an isolated instance
seeded with deep copies of the built-in catalog; ``default_registry()``
lazily creates one process-wide instance that the module level helpers
operate on when no explicit registry is passed.

Contracts:
 - Every ``register_*`` validates first. Invalid records raise
   ``SkinValidationError`` and leave the registry untouched.
 - Lookups return ``None`` for unknown ids and always hand out fresh copies,
   so callers can never mutate registry state through a returned record.
 - ``resolve_independent`` reports every missing id in one
   ``SkinNotFoundError``; it never returns a partial result.

Thread-safety: the namespaces are guarded by a re-entrant lock; concurrent
registrations of the same id are last-writer-wins.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from threading import RLock
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from skins.catalog.behavior_presets import BEHAVIOR_PRESETS
from skins.catalog.profiles import COMPOSITE_PROFILES
from skins.catalog.visual_skins import VISUAL_SKINS
from skins.design.merge import deep_merge

from .validation import ValidationResult, validate_behavior, validate_profile, validate_skin

_logger = logging.getLogger(__name__)

__all__ = [
    "SkinNotFoundError",
    "SkinValidationError",
    "ResolvedSkinState",
    "SkinRegistry",
    "create_registry",
    "default_registry",
    "reset_default_registry",
    "register_skin",
    "register_behavior",
    "register_profile",
    "unregister_skin",
    "unregister_behavior",
    "unregister_profile",
    "get_skin",
    "get_behavior",
    "get_profile",
    "resolve_profile",
    "resolve_independent",
]


class SkinNotFoundError(KeyError):
    """Raised when one or more requested skin/behavior ids are not registered.

    ``missing`` lists ``(kind, id)`` pairs for every id that failed.
    """

    def __init__(self, missing: Sequence[Tuple[str, str]]) -> None:
        self.missing: List[Tuple[str, str]] = list(missing)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return "; ".join(f"Unknown {kind}: '{item_id}'" for kind, item_id in self.missing)

    @property
    def missing_ids(self) -> List[str]:
        return [item_id for _, item_id in self.missing]

    def __str__(self) -> str:  # KeyError would repr() the message
        return self.message


class SkinValidationError(RuntimeError):
    """Raised when a record fails validation on registration or apply."""

    def __init__(self, kind: str, record_id: Any, errors: Sequence[str]) -> None:
        self.kind = kind
        self.record_id = record_id
        self.errors: List[str] = list(errors)
        super().__init__(f"Invalid {kind} '{record_id}': " + "; ".join(self.errors))


@dataclass(frozen=True)
class ResolvedSkinState:
    skin: Dict[str, Any]
    behavior: Dict[str, Any]
    is_dark_mode: bool = False
    profile_id: Optional[str] = None


class SkinRegistry:
    """Thread-safe id -> record store for skins, behaviors and profiles."""

    def __init__(self, *, seed: bool = True) -> None:
        self._lock = RLock()
        self._skins: Dict[str, Dict[str, Any]] = {}
        self._behaviors: Dict[str, Dict[str, Any]] = {}
        self._profiles: Dict[str, Dict[str, Any]] = {}
        if seed:
            # Built-ins are trusted; they are covered by the catalog tests.
            self._skins.update(copy.deepcopy(VISUAL_SKINS))
            self._behaviors.update(copy.deepcopy(BEHAVIOR_PRESETS))
            self._profiles.update(copy.deepcopy(COMPOSITE_PROFILES))

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def _store(
        self,
        namespace: Dict[str, Dict[str, Any]],
        kind: str,
        record: Mapping[str, Any],
        result: ValidationResult,
    ) -> None:
        record_id = record.get("id") if isinstance(record, Mapping) else None
        if not result.valid:
            _logger.warning("Rejected %s %r: %s", kind, record_id, "; ".join(result.errors))
            raise SkinValidationError(kind, record_id, result.errors)
        for warning in result.warnings:
            _logger.debug("%s %r: %s", kind, record_id, warning)
        with self._lock:
            replaced = record_id in namespace
            namespace[record_id] = copy.deepcopy(dict(record))
        if replaced:
            _logger.info("Replaced %s '%s'", kind, record_id)
        else:
            _logger.debug("Registered %s '%s'", kind, record_id)

    def register_skin(self, skin: Mapping[str, Any]) -> None:
        self._store(self._skins, "skin", skin, validate_skin(skin))

    def register_behavior(self, behavior: Mapping[str, Any]) -> None:
        self._store(self._behaviors, "behavior", behavior, validate_behavior(behavior))

    def register_profile(self, profile: Mapping[str, Any]) -> None:
        # Hold the lock across validation so referenced records cannot vanish in between.
        with self._lock:
            self._store(self._profiles, "profile", profile, validate_profile(profile, self))

    def _remove(self, namespace: Dict[str, Dict[str, Any]], kind: str, record_id: str) -> bool:
        with self._lock:
            removed = namespace.pop(record_id, None) is not None
        if removed:
            _logger.debug("Unregistered %s '%s'", kind, record_id)
        return removed

    def unregister_skin(self, skin_id: str) -> bool:
        return self._remove(self._skins, "skin", skin_id)

    def unregister_behavior(self, behavior_id: str) -> bool:
        return self._remove(self._behaviors, "behavior", behavior_id)

    def unregister_profile(self, profile_id: str) -> bool:
        return self._remove(self._profiles, "profile", profile_id)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def _lookup(
        self,
        namespace: Dict[str, Dict[str, Any]],
        record_id: str,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Dict[str, Any]]:
        with self._lock:
            record = namespace.get(record_id)
        if record is None:
            return None
        return deep_merge(record, overrides)

    def get_skin(
        self, skin_id: str, overrides: Optional[Mapping[str, Any]] = None
    ) -> Optional[Dict[str, Any]]:
        return self._lookup(self._skins, skin_id, overrides)

    def get_behavior(
        self, behavior_id: str, overrides: Optional[Mapping[str, Any]] = None
    ) -> Optional[Dict[str, Any]]:
        return self._lookup(self._behaviors, behavior_id, overrides)

    def get_profile(self, profile_id: str) -> Optional[Dict[str, Any]]:
        return self._lookup(self._profiles, profile_id)

    def list_skins(self) -> List[str]:
        with self._lock:
            return list(self._skins.keys())

    def list_behaviors(self) -> List[str]:
        with self._lock:
            return list(self._behaviors.keys())

    def list_profiles(self) -> List[str]:
        with self._lock:
            return list(self._profiles.keys())

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------
    def resolve_independent(
        self,
        skin_id: str,
        behavior_id: str,
        skin_overrides: Optional[Mapping[str, Any]] = None,
        behavior_overrides: Optional[Mapping[str, Any]] = None,
        is_dark_mode: bool = False,
    ) -> ResolvedSkinState:
        """Resolve a skin and a behavior by id, each with optional overrides.

        Raises
        ------
        SkinNotFoundError
            If either id is unknown; lists every id that failed.
        """
        skin = self.get_skin(skin_id, skin_overrides)
        behavior = self.get_behavior(behavior_id, behavior_overrides)
        missing: List[Tuple[str, str]] = []
        if skin is None:
            missing.append(("skin", skin_id))
        if behavior is None:
            missing.append(("behavior", behavior_id))
        if missing:
            raise SkinNotFoundError(missing)
        return ResolvedSkinState(skin=skin, behavior=behavior, is_dark_mode=is_dark_mode)  # type: ignore[arg-type]

    def resolve_profile(
        self, profile_id: str, is_dark_mode: bool = False
    ) -> Optional[ResolvedSkinState]:
        """Resolve a composite profile, applying its embedded overrides.

        Returns ``None`` when the profile id is unknown. A profile whose skin
        or behavior has since been unregistered raises ``SkinNotFoundError``.
        """
        profile = self.get_profile(profile_id)
        if profile is None:
            return None
        overrides = profile.get("overrides") or {}
        state = self.resolve_independent(
            profile["skin_id"],
            profile["behavior_id"],
            skin_overrides=overrides.get("skin"),
            behavior_overrides=overrides.get("behavior"),
            is_dark_mode=is_dark_mode,
        )
        return ResolvedSkinState(
            skin=state.skin,
            behavior=state.behavior,
            is_dark_mode=is_dark_mode,
            profile_id=profile_id,
        )


def create_registry() -> SkinRegistry:
    """Return a fresh registry seeded with the built-in catalog."""
    return SkinRegistry(seed=True)


_default_lock = RLock()
_default: Optional[SkinRegistry] = None


def default_registry() -> SkinRegistry:
    global _default
    with _default_lock:
        if _default is None:
            _default = create_registry()
        return _default


def reset_default_registry() -> None:
    """Drop the process-wide registry; the next access re-seeds it."""
    global _default
    with _default_lock:
        _default = None


def _reg(registry: Optional[SkinRegistry]) -> SkinRegistry:
    return registry if registry is not None else default_registry()


# Convenience functions (operate on the default registry unless one is given)


def register_skin(skin: Mapping[str, Any], registry: Optional[SkinRegistry] = None) -> None:
    _reg(registry).register_skin(skin)


def register_behavior(behavior: Mapping[str, Any], registry: Optional[SkinRegistry] = None) -> None:
    _reg(registry).register_behavior(behavior)


def register_profile(profile: Mapping[str, Any], registry: Optional[SkinRegistry] = None) -> None:
    _reg(registry).register_profile(profile)


def unregister_skin(skin_id: str, registry: Optional[SkinRegistry] = None) -> bool:
    return _reg(registry).unregister_skin(skin_id)


def unregister_behavior(behavior_id: str, registry: Optional[SkinRegistry] = None) -> bool:
    return _reg(registry).unregister_behavior(behavior_id)


def unregister_profile(profile_id: str, registry: Optional[SkinRegistry] = None) -> bool:
    return _reg(registry).unregister_profile(profile_id)


def get_skin(
    skin_id: str,
    overrides: Optional[Mapping[str, Any]] = None,
    registry: Optional[SkinRegistry] = None,
) -> Optional[Dict[str, Any]]:
    return _reg(registry).get_skin(skin_id, overrides)


def get_behavior(
    behavior_id: str,
    overrides: Optional[Mapping[str, Any]] = None,
    registry: Optional[SkinRegistry] = None,
) -> Optional[Dict[str, Any]]:
    return _reg(registry).get_behavior(behavior_id, overrides)


def get_profile(profile_id: str, registry: Optional[SkinRegistry] = None) -> Optional[Dict[str, Any]]:
    return _reg(registry).get_profile(profile_id)


def resolve_profile(
    profile_id: str, is_dark_mode: bool = False, registry: Optional[SkinRegistry] = None
) -> Optional[ResolvedSkinState]:
    return _reg(registry).resolve_profile(profile_id, is_dark_mode)


def resolve_independent(
    skin_id: str,
    behavior_id: str,
    skin_overrides: Optional[Mapping[str, Any]] = None,
    behavior_overrides: Optional[Mapping[str, Any]] = None,
    is_dark_mode: bool = False,
    registry: Optional[SkinRegistry] = None,
) -> ResolvedSkinState:
    return _reg(registry).resolve_independent(
        skin_id, behavior_id, skin_overrides, behavior_overrides, is_dark_mode
    )
