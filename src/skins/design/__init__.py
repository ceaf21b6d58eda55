"""Design layer: color math, merge engine, token derivers and serializer.

Every function here is pure; nothing in this package holds state.
"""

from .merge import deep_merge  # noqa: F401
from .contrast import (  # noqa: F401
    parse_hex_color,
    relative_luminance,
    contrast_ratio,
    meets_contrast_requirement,
    with_alpha,
)
from .tokens import DesignTokens, get_design_tokens  # noqa: F401
from .accessibility import AccessibilityTokens, get_accessibility_tokens  # noqa: F401
from .components import COMPONENT_NAMES, ComponentTokens, get_component_tokens  # noqa: F401
from .motion import MotionTokens, get_motion_tokens, get_stagger_delay, resolve_animation  # noqa: F401
from .responsive import ResponsiveConfig, classify_width, get_responsive_config  # noqa: F401
from .css_vars import (  # noqa: F401
    to_kebab_case,
    flatten_to_css_variables,
    colors_to_css_variables,
    skin_to_css_variables,
    design_tokens_to_css_variables,
    component_tokens_to_css_variables,
)
