"""Skin resolution for a chat client.

Curated top-level surface: the registry/resolution API, the token derivers
and the skin service. Prefer namespaced access for everything else
(``skins.design.tokens``, ``skins.catalog.extended`` ...).

Importing this package has no side effects: the default registry is created
on first use and Qt is never loaded.
"""

from __future__ import annotations

from skins.config.settings import CATALOG_VERSION

from .engine import (  # noqa: F401
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
    validate_behavior,
    validate_profile,
    validate_skin,
)
from .design import (  # noqa: F401
    deep_merge,
    get_accessibility_tokens,
    get_component_tokens,
    get_design_tokens,
    skin_to_css_variables,
)
from .services import SkinService  # noqa: F401

__version__ = CATALOG_VERSION

__all__ = [
    "__version__",
    "ResolvedSkinState",
    "SkinNotFoundError",
    "SkinRegistry",
    "SkinValidationError",
    "SkinService",
    "create_registry",
    "default_registry",
    "deep_merge",
    "get_accessibility_tokens",
    "get_behavior",
    "get_component_tokens",
    "get_design_tokens",
    "get_profile",
    "get_skin",
    "register_behavior",
    "register_profile",
    "register_skin",
    "resolve_independent",
    "resolve_profile",
    "skin_to_css_variables",
    "validate_behavior",
    "validate_profile",
    "validate_skin",
]
