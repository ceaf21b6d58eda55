"""Color parsing and WCAG 2.1 contrast math.

Public API:
- parse_hex_color(value) -> RGB | None
- is_hex_color(value) -> bool
- with_alpha(color, alpha) -> str
- relative_luminance(color) -> float
- contrast_ratio(fg, bg) -> float
- meets_contrast_requirement(fg, bg, level="AA", is_large_text=False) -> bool

Accepted color forms are ``#RGB``, ``#RRGGBB`` and ``#RRGGBBAA``. An alpha
channel is dropped when computing luminance; contrast is always evaluated on
the opaque color.
"""

from __future__ import annotations

import re
from typing import Dict, NamedTuple, Optional, Tuple

__all__ = [
    "RGB",
    "WCAG_THRESHOLDS",
    "parse_hex_color",
    "is_hex_color",
    "to_hex",
    "with_alpha",
    "relative_luminance",
    "contrast_ratio",
    "meets_contrast_requirement",
]

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_HEX_ERR = "Color must be a #RGB, #RRGGBB or #RRGGBBAA hex string: {value}"

# (level, is_large_text) -> minimum ratio
WCAG_THRESHOLDS: Dict[Tuple[str, bool], float] = {
    ("AA", False): 4.5,
    ("AA", True): 3.0,
    ("AAA", False): 7.0,
    ("AAA", True): 4.5,
}


class RGB(NamedTuple):
    r: int
    g: int
    b: int


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and bool(_HEX_RE.match(value))


def parse_hex_color(value: object) -> Optional[RGB]:
    """Parse a hex color string into an ``RGB`` triple.

    Returns ``None`` for anything that is not a well-formed 3, 6 or 8 digit
    hex color. For the 8 digit form the trailing alpha pair is ignored.
    """
    if not is_hex_color(value):
        return None
    digits = value[1:]  # type: ignore[index]
    if len(digits) == 3:
        r, g, b = (int(ch * 2, 16) for ch in digits)
        return RGB(r, g, b)
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def to_hex(rgb: Tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


def with_alpha(color: str, alpha: float) -> str:
    """Return ``color`` as ``#RRGGBBAA`` with the given 0..1 opacity.

    Raises ValueError for malformed colors or an alpha outside 0..1.
    """
    rgb = parse_hex_color(color)
    if rgb is None:
        raise ValueError(_HEX_ERR.format(value=color))
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"alpha must be within 0..1: {alpha}")
    return f"{to_hex(rgb)}{round(alpha * 255):02X}"


def _linear_channel(c: float) -> float:
    c = c / 255.0
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    rgb = parse_hex_color(color)
    if rgb is None:
        raise ValueError(_HEX_ERR.format(value=color))
    # Rec. 709 coefficients used by WCAG
    return (
        0.2126 * _linear_channel(rgb.r)
        + 0.7152 * _linear_channel(rgb.g)
        + 0.0722 * _linear_channel(rgb.b)
    )


def contrast_ratio(fg: str, bg: str) -> float:
    """WCAG contrast ratio between two colors, in the closed range [1, 21].

    Symmetric in its arguments. Rounded to 10 decimals so the extremes come out
    as exactly 1 and 21.
    """
    l1 = relative_luminance(fg)
    l2 = relative_luminance(bg)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    ratio = round((lighter + 0.05) / (darker + 0.05), 10)
    return min(max(ratio, 1.0), 21.0)


def meets_contrast_requirement(
    fg: str, bg: str, level: str = "AA", is_large_text: bool = False
) -> bool:
    key = (level.upper(), bool(is_large_text))
    if key not in WCAG_THRESHOLDS:
        raise ValueError(f"Unknown WCAG level: {level}")
    return contrast_ratio(fg, bg) >= WCAG_THRESHOLDS[key]
