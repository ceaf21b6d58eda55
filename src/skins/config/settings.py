"""Global configuration and constants for skin resolution."""

from __future__ import annotations

import os
from typing import Final

CATALOG_VERSION: Final = "0.9.1"

DEFAULT_SKIN_ID: Final = "nchat"
DEFAULT_BEHAVIOR_ID: Final = "nchat"
DEFAULT_PROFILE_ID: Final = os.environ.get("SKINS_DEFAULT_PROFILE", "nchat")

# Variable name prefixes used by the serializer
SKIN_VAR_PREFIX: Final = "--skin"
DESIGN_TOKEN_PREFIX: Final = "--dt"
COMPONENT_TOKEN_PREFIX: Final = "--ct"
ACCESSIBILITY_PREFIX: Final = "--a11y"
RESPONSIVE_PREFIX: Final = "--rs"

# Applying a full variable map slower than this is logged as a warning
STYLE_APPLY_WARN_THRESHOLD_MS: Final = float(os.environ.get("SKINS_APPLY_WARN_MS", "50"))
