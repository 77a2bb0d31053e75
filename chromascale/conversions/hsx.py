"""
Cylindrical sRGB models: HSL, HSV and HWB.

RGB channels are floats in [0, 255]; hue is in degrees [0, 360);
saturation, lightness, value, whiteness and blackness are percentages
[0, 100]. Nothing here rounds, so chains of conversions stay lossless up to
float error. Achromatic inputs get hue 0 and saturation 0.
"""
from typing import Tuple

from ..utils.num_utils import normalize_hue

Triple = Tuple[float, float, float]


def _hue_from_rgb(r: float, g: float, b: float, max_c: float, delta: float) -> float:
    """Hue of unit RGB given its max channel and chroma (delta != 0)."""
    if max_c == r:
        h = ((g - b) / delta) % 6
    elif max_c == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return normalize_hue(h * 60)


def rgb_to_hsl(r: float, g: float, b: float) -> Triple:
    r, g, b = r / 255, g / 255, b / 255
    max_c, min_c = max(r, g, b), min(r, g, b)
    delta = max_c - min_c
    l = (max_c + min_c) / 2

    if delta == 0:
        return 0.0, 0.0, l * 100

    s = delta / (1 - abs(2 * l - 1))
    return _hue_from_rgb(r, g, b, max_c, delta), min(s, 1.0) * 100, l * 100


def hsl_to_rgb(h: float, s: float, l: float) -> Triple:
    h = normalize_hue(h)
    s, l = s / 100, l / 100

    if s == 0:
        gray = l * 255
        return gray, gray, gray

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2
    r, g, b = _sector(h, c, x)
    return (r + m) * 255, (g + m) * 255, (b + m) * 255


def rgb_to_hsv(r: float, g: float, b: float) -> Triple:
    r, g, b = r / 255, g / 255, b / 255
    max_c, min_c = max(r, g, b), min(r, g, b)
    delta = max_c - min_c

    if delta == 0:
        return 0.0, 0.0, max_c * 100

    s = delta / max_c
    return _hue_from_rgb(r, g, b, max_c, delta), s * 100, max_c * 100


def hsv_to_rgb(h: float, s: float, v: float) -> Triple:
    h = normalize_hue(h)
    s, v = s / 100, v / 100

    c = v * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = v - c
    r, g, b = _sector(h, c, x)
    return (r + m) * 255, (g + m) * 255, (b + m) * 255


def _sector(h: float, c: float, x: float) -> Triple:
    if h < 60:
        return c, x, 0.0
    if h < 120:
        return x, c, 0.0
    if h < 180:
        return 0.0, c, x
    if h < 240:
        return 0.0, x, c
    if h < 300:
        return x, 0.0, c
    return c, 0.0, x


def rgb_to_hwb(r: float, g: float, b: float) -> Triple:
    h, _, _ = rgb_to_hsv(r, g, b)
    white = min(r, g, b) / 255
    black = 1 - max(r, g, b) / 255
    return h, white * 100, black * 100


def hwb_to_rgb(h: float, w: float, b: float) -> Triple:
    w, b = w / 100, b / 100
    total = w + b
    # w + b >= 1 collapses to a gray of relative whiteness
    if total >= 1:
        gray = w / total * 255
        return gray, gray, gray

    v = 1 - b
    s = 1 - w / v
    return hsv_to_rgb(h, s * 100, v * 100)


def hsl_to_hsv(h: float, s: float, l: float) -> Triple:
    s, l = s / 100, l / 100
    v = l + s * min(l, 1 - l)
    s_v = 0.0 if v == 0 else 2 * (1 - l / v)
    return normalize_hue(h), s_v * 100, v * 100


def hsv_to_hsl(h: float, s: float, v: float) -> Triple:
    s, v = s / 100, v / 100
    l = v * (1 - s / 2)
    s_l = 0.0 if l in (0, 1) else (v - l) / min(l, 1 - l)
    return normalize_hue(h), s_l * 100, l * 100
