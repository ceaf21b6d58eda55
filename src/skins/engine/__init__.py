"""Registry, resolution and validation of skins, behaviors and profiles."""

from .validation import ValidationResult, validate_behavior, validate_profile, validate_skin  # noqa: F401
from .registry import (  # noqa: F401
    ResolvedSkinState,
    SkinNotFoundError,
    SkinRegistry,
    SkinValidationError,
    create_registry,
    default_registry,
    get_behavior,
    get_profile,
    get_skin,
    register_behavior,
    register_profile,
    register_skin,
    resolve_independent,
    resolve_profile,
)
