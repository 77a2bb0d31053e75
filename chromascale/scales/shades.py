"""
Scales driven by fixed lightness tables.

Each table maps a shade name to an HSL lightness. The seed's hue and
saturation are held while the lightness is swapped for the table value;
``adjust_saturation`` additionally softens saturation and nudges hue at the
extremes so very light and very dark shades look less synthetic.
"""
from __future__ import annotations
from typing import Any, Tuple

from ..colors.color import Color
from ..colors.parse import parse_color
from ..utils.num_utils import normalize_hue
from .palette import Palette
from .stepped import closest_index, hsl_nudges, separate_from_seed

ShadeTable = Tuple[Tuple[str, float], ...]

TAILWIND_SHADES: ShadeTable = (
    ("50", 98), ("100", 95), ("200", 90), ("300", 82), ("400", 64), ("500", 46),
    ("600", 35), ("700", 27), ("800", 20), ("900", 15), ("950", 10), ("1000", 7),
)

TAILWIND_GRAY_SHADES: ShadeTable = (
    ("50", 98), ("100", 95), ("150", 93), ("200", 88), ("300", 80), ("400", 71), ("500", 60),
    ("600", 48), ("700", 37), ("800", 27), ("850", 20), ("900", 14), ("950", 9), ("1000", 5),
)

NATURAL_SHADES: ShadeTable = (
    ("50", 98), ("100", 95), ("200", 90), ("300", 82), ("400", 71), ("500", 60),
    ("600", 48), ("700", 37), ("800", 27), ("900", 18), ("950", 10), ("1000", 4),
)

GRAY_SHADES: ShadeTable = (
    ("50", 98), ("100", 96), ("150", 93), ("200", 88), ("300", 80), ("400", 71), ("500", 60),
    ("600", 48), ("700", 37), ("800", 27), ("850", 20), ("900", 14), ("950", 8), ("1000", 3),
)

MATERIAL_SHADES: ShadeTable = (
    ("50", 97), ("100", 93), ("200", 85), ("300", 74), ("400", 63), ("500", 52),
    ("600", 42), ("700", 33), ("800", 25), ("900", 17), ("A400", 10), ("A700", 5),
)

ANTD_SHADES: ShadeTable = (
    ("1", 97), ("2", 91), ("3", 82), ("4", 72), ("5", 62), ("6", 52),
    ("7", 42), ("8", 32), ("9", 22), ("10", 13), ("11", 7), ("12", 3),
)


def natural_adjustment(h: float, s: float, lightness: float) -> Tuple[float, float]:
    """Saturation damping and hue nudge for a shade at ``lightness``."""
    if lightness > 90:
        s *= 0.3 + (100 - lightness) * 0.07
    elif lightness > 70:
        s *= 0.7 + (90 - lightness) * 0.015
    elif lightness < 20:
        s *= 0.8 + lightness * 0.01
    elif lightness < 40:
        s *= 0.9 + (lightness - 20) * 0.005

    if lightness > 85:
        h = normalize_hue(h + 2)
    elif lightness < 15:
        h = normalize_hue(h - 2)
    return h, min(s, 100.0)


def generate_shade_scale(
    seed: Any,
    shades: ShadeTable = TAILWIND_SHADES,
    preserve: bool = True,
    adjust_saturation: bool = False,
) -> Palette:
    """
    Apply a lightness table to ``seed``.

    With ``preserve`` the shade whose table lightness is closest to the
    seed's HSL lightness (first one on ties) is replaced by the exact seed.
    """
    if not shades:
        raise ValueError("Shade table is empty")
    color = parse_color(seed)
    h, s, l = color.to_hsl()

    targets = []
    for _, lightness in shades:
        shade_h, shade_s = natural_adjustment(h, s, lightness) if adjust_saturation else (h, s)
        targets.append((shade_h, shade_s, lightness))
    colors = [Color.from_hsl(*target) for target in targets]

    center = None
    if preserve:
        index = closest_index([lightness for _, lightness in shades], l)
        colors[index] = color.with_alpha(1.0)
        separate_from_seed(colors, index, lambda i, lighter: hsl_nudges(*targets[i], lighter))
        center = shades[index][0]
    return Palette(zip([name for name, _ in shades], colors), center=center)


def generate_tailwind_scale(seed: Any, preserve: bool = True) -> Palette:
    return generate_shade_scale(seed, TAILWIND_SHADES, preserve=preserve)


def generate_natural_scale(
    seed: Any,
    shades: ShadeTable = NATURAL_SHADES,
    preserve: bool = True,
    adjust_saturation: bool = True,
) -> Palette:
    return generate_shade_scale(seed, shades, preserve=preserve, adjust_saturation=adjust_saturation)


def generate_neutral_scale(shades: ShadeTable = TAILWIND_GRAY_SHADES, hue: float = 0.0, saturation: float = 0.0) -> Palette:
    """Gray table with a fixed (by default absent) tint."""
    return Palette((name, Color.from_hsl(hue, saturation, lightness)) for name, lightness in shades)
