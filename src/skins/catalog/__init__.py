"""Built-in catalog: visual skins, behavior presets and composite profiles."""

from .visual_skins import VISUAL_SKINS, list_visual_skin_ids  # noqa: F401
from .behavior_presets import BEHAVIOR_PRESETS, list_behavior_ids  # noqa: F401
from .profiles import COMPOSITE_PROFILES, list_profile_ids  # noqa: F401
from .extended import (  # noqa: F401
    PlatformVisual,
    PlatformBehavior,
    get_platform_visual,
    get_platform_behavior,
    get_extended_colors,
)
from .parity import (  # noqa: F401
    ParityChecklist,
    ParityItem,
    get_parity_checklist,
    platform_config,
    verify_config_parity,
)
