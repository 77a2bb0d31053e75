"""
OKLAB and OKLCH (Björn Ottosson's perceptual space).

L is in [0, 1], a/b roughly in [-0.4, 0.4]; OKLCH hue is in degrees.
"""
import math
from typing import Tuple

from boundednumbers.functions import clamp

from .constants import OKLAB_M1, OKLAB_M2, OKLAB_M1_INV, OKLAB_M2_INV, mat3_mul
from .cie import srgb_to_linear, linear_to_srgb
from ..utils.num_utils import normalize_hue

Triple = Tuple[float, float, float]


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1 / 3), x)


def rgb_to_oklab(r: float, g: float, b: float) -> Triple:
    lr, lg, lb = (srgb_to_linear(c / 255) for c in (r, g, b))
    lms = mat3_mul(OKLAB_M1, lr, lg, lb)
    return mat3_mul(OKLAB_M2, *(_cbrt(v) for v in lms))


def oklab_to_rgb(l: float, a: float, b: float) -> Triple:
    """OKLAB to 8-bit RGB floats; out-of-gamut channels are clamped to [0, 255]."""
    l_, m_, s_ = mat3_mul(OKLAB_M2_INV, l, a, b)
    lr, lg, lb = mat3_mul(OKLAB_M1_INV, l_ ** 3, m_ ** 3, s_ ** 3)
    return tuple(float(clamp(linear_to_srgb(c) * 255, 0.0, 255.0)) for c in (lr, lg, lb))


def oklab_to_oklch(l: float, a: float, b: float) -> Triple:
    return l, math.hypot(a, b), normalize_hue(math.degrees(math.atan2(b, a)))


def oklch_to_oklab(l: float, c: float, h: float) -> Triple:
    h_rad = math.radians(h)
    return l, c * math.cos(h_rad), c * math.sin(h_rad)


def rgb_to_oklch(r: float, g: float, b: float) -> Triple:
    return oklab_to_oklch(*rgb_to_oklab(r, g, b))


def oklch_to_rgb(l: float, c: float, h: float) -> Triple:
    return oklab_to_rgb(*oklch_to_oklab(l, c, h))
