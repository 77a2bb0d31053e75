"""WCAG 2.1 luminance and contrast helpers."""
import math
from enum import Enum
from typing import Any

from ..colors.color import Color
from ..colors.parse import parse_color

# WCAG keeps the older 0.03928 knee rather than the sRGB 0.04045
WCAG_LINEAR_THRESHOLD = 0.03928
LIGHT_BRIGHTNESS_THRESHOLD = 127.5


class WCAGLevel(str, Enum):
    AA = "AA"
    AAA = "AAA"


class TextSize(str, Enum):
    NORMAL = "normal"
    LARGE = "large"


REQUIRED_CONTRAST = {
    (WCAGLevel.AA, TextSize.NORMAL): 4.5,
    (WCAGLevel.AA, TextSize.LARGE): 3.0,
    (WCAGLevel.AAA, TextSize.NORMAL): 7.0,
    (WCAGLevel.AAA, TextSize.LARGE): 4.5,
}


def _linear(channel: int) -> float:
    c = channel / 255
    if c <= WCAG_LINEAR_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Any) -> float:
    """Relative luminance in [0, 1] (black 0, white 1)."""
    r, g, b = parse_color(color).rgb
    return 0.2126 * _linear(r) + 0.7152 * _linear(g) + 0.0722 * _linear(b)


def contrast_ratio(color1: Any, color2: Any) -> float:
    """Contrast ratio in [1, 21]; order of the arguments does not matter."""
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def required_contrast(level: WCAGLevel | str = WCAGLevel.AA, size: TextSize | str = TextSize.NORMAL) -> float:
    return REQUIRED_CONTRAST[(WCAGLevel(level), TextSize(size))]


def is_wcag_compliant(
    foreground: Any,
    background: Any,
    level: WCAGLevel | str = WCAGLevel.AA,
    size: TextSize | str = TextSize.NORMAL,
) -> bool:
    return contrast_ratio(foreground, background) >= required_contrast(level, size)


def perceived_brightness(color: Any) -> float:
    """HSP brightness on the 0-255 scale."""
    r, g, b = parse_color(color).rgb
    return math.sqrt(0.299 * r * r + 0.587 * g * g + 0.114 * b * b)


def is_light(color: Any) -> bool:
    return perceived_brightness(color) > LIGHT_BRIGHTNESS_THRESHOLD


def best_text_color(background: Any) -> Color:
    """Black on light backgrounds, white on dark ones."""
    return Color(0, 0, 0) if is_light(background) else Color(255, 255, 255)
