"""
Semantic role colors derived from a primary seed.

The seed's hue selects a target hue for each role from a table of disjoint
hue buckets; saturation and lightness are nudged from the seed's and then
clamped into the role's band. All arithmetic runs on the seed's HSL rounded
to integers.

Role bands (saturation, lightness after the nudge):
    success   s-5 in [55, 70],   l+5 in [45, 60]
    warning   s+5 in [80, 100],  l+15 in [55, 65]
    danger    s in [75, 85],     l+5 in [45, 55]
    info      s-10 in [60, 75],  l in [45, 60]
    gray      s*ratio*0.3 in [3, 8] at l = 50 (hue 0, s 0 when unmixed)
"""
from __future__ import annotations
import warnings
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from boundednumbers.functions import clamp

from ..colors.color import Color
from ..colors.parse import parse_color
from ..utils.num_utils import round_half_up

# ((lo, hi), target): lo <= h < hi maps to target, None keeps the seed hue
HueBuckets = Tuple[Tuple[Tuple[float, float], Optional[float]], ...]

SUCCESS_HUES: HueBuckets = (
    ((0, 25), 120),
    ((335, 360), 120),
    ((25, 75), 80),
    ((75, 150), None),
    ((150, 210), 90),
    ((210, 285), 100),
    ((285, 335), 130),
)

WARNING_HUES: HueBuckets = (
    ((240, 360), 42),
    ((0, 60), 42),
    ((60, 140), 40),
    ((140, 240), 38),
)

DANGER_HUES: HueBuckets = (
    ((15, 60), 5),
    ((60, 140), 10),
    ((140, 190), 357),
    ((190, 240), 0),
    ((240, 350), 355),
    ((0, 15), None),
    ((350, 360), None),
)

INFO_HUES: HueBuckets = (
    ((180, 240), None),
    ((0, 60), 210),
    ((300, 360), 210),
    ((60, 180), 200),
    ((240, 300), 220),
)

GRAY_LIGHTNESS = 50
GRAY_SATURATION_RANGE = (3, 8)
GRAY_MIX_FACTOR = 0.3


def map_hue(hue: float, buckets: HueBuckets) -> float:
    """Target hue for ``hue`` (in [0, 360)) according to ``buckets``."""
    for (lo, hi), target in buckets:
        if lo <= hue < hi:
            return hue if target is None else target
    return hue


@dataclass(frozen=True)
class SemanticColors:
    primary: Color
    success: Color
    warning: Color
    danger: Color
    gray: Color
    info: Optional[Color] = None

    def as_dict(self) -> Dict[str, Color]:
        roles = {
            "primary": self.primary,
            "success": self.success,
            "warning": self.warning,
            "danger": self.danger,
            "gray": self.gray,
        }
        if self.info is not None:
            roles["info"] = self.info
        return roles

    def to_hex(self) -> Dict[str, str]:
        return {role: color.to_hex() for role, color in self.as_dict().items()}


def rounded_hsl(color: Color) -> Tuple[int, int, int]:
    h, s, l = (round_half_up(v) for v in color.to_hsl())
    return h % 360, s, l


def derive_success(h: int, s: int, l: int) -> Color:
    return Color.from_hsl(map_hue(h, SUCCESS_HUES), clamp(s - 5, 55, 70), clamp(l + 5, 45, 60))


def derive_warning(h: int, s: int, l: int) -> Color:
    return Color.from_hsl(map_hue(h, WARNING_HUES), clamp(s + 5, 80, 100), clamp(l + 15, 55, 65))


def derive_danger(h: int, s: int, l: int) -> Color:
    return Color.from_hsl(map_hue(h, DANGER_HUES), clamp(s, 75, 85), clamp(l + 5, 45, 55))


def derive_info(h: int, s: int, l: int) -> Color:
    return Color.from_hsl(map_hue(h, INFO_HUES), clamp(s - 10, 60, 75), clamp(l, 45, 60))


def check_mix_ratio(ratio: float) -> float:
    if not 0 <= ratio <= 1:
        warnings.warn(f"Gray mix ratio {ratio} is outside [0, 1]; clamping")
    return float(clamp(ratio, 0.0, 1.0))


def derive_gray(h: int, s: int, mix_primary: bool = True, mix_ratio: float = 0.2) -> Color:
    if not mix_primary:
        return Color.from_hsl(0, 0, GRAY_LIGHTNESS)
    ratio = check_mix_ratio(mix_ratio)
    saturation = clamp(s * ratio * GRAY_MIX_FACTOR, *GRAY_SATURATION_RANGE)
    return Color.from_hsl(h, saturation, GRAY_LIGHTNESS)


def derive_semantic_colors(
    primary: Any,
    gray_mix_primary: bool = True,
    gray_mix_ratio: float = 0.2,
    include_info: bool = False,
) -> SemanticColors:
    """
    Derive the success/warning/danger/gray (and optionally info) roles.

    Args:
        primary: seed color, any input ``parse_color`` accepts
        gray_mix_primary: tint the gray with the seed hue
        gray_mix_ratio: share of the seed saturation carried into the gray
        include_info: also derive the info role
    """
    color = parse_color(primary)
    h, s, l = rounded_hsl(color)
    return SemanticColors(
        primary=color,
        success=derive_success(h, s, l),
        warning=derive_warning(h, s, l),
        danger=derive_danger(h, s, l),
        gray=derive_gray(h, s, gray_mix_primary, gray_mix_ratio),
        info=derive_info(h, s, l) if include_info else None,
    )
