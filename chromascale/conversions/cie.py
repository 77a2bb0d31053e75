"""
CIE conversions: linear light, XYZ (D65), CIELAB and its polar form LCH.

RGB channels are 8-bit floats in [0, 255]; XYZ is scaled so Y(white) = 100.
LAB produced from RGB clamps L* to [0, 100] and a*/b* to [-128, 127].
"""
import math
from typing import Tuple

from boundednumbers.functions import clamp

from .constants import (
    SRGB_ENCODE_THRESHOLD,
    SRGB_DECODE_THRESHOLD,
    SRGB_GAMMA,
    SRGB_OFFSET,
    SRGB_SCALE,
    SRGB_SLOPE,
    D65_WHITE,
    LAB_EPSILON,
    LAB_KAPPA,
    LAB_L_RANGE,
    LAB_AB_RANGE,
    SRGB_TO_XYZ,
    XYZ_TO_SRGB,
    mat3_mul,
)
from ..utils.num_utils import normalize_hue

Triple = Tuple[float, float, float]


def srgb_to_linear(c: float) -> float:
    """Decode a gamma-encoded unit channel to linear light."""
    if c <= SRGB_ENCODE_THRESHOLD:
        return c / SRGB_SLOPE
    return ((c + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA


def linear_to_srgb(c: float) -> float:
    """Encode a linear unit channel with the sRGB transfer curve."""
    if c <= SRGB_DECODE_THRESHOLD:
        return c * SRGB_SLOPE
    return SRGB_SCALE * c ** (1 / SRGB_GAMMA) - SRGB_OFFSET


def rgb_to_xyz(r: float, g: float, b: float) -> Triple:
    lr, lg, lb = (srgb_to_linear(c / 255) for c in (r, g, b))
    x, y, z = mat3_mul(SRGB_TO_XYZ, lr, lg, lb)
    return x * 100, y * 100, z * 100


def xyz_to_rgb(x: float, y: float, z: float) -> Triple:
    """XYZ to 8-bit RGB floats; out-of-gamut channels are clamped to [0, 255]."""
    lr, lg, lb = mat3_mul(XYZ_TO_SRGB, x / 100, y / 100, z / 100)
    return tuple(float(clamp(linear_to_srgb(c) * 255, 0.0, 255.0)) for c in (lr, lg, lb))


def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return math.copysign(abs(t) ** (1 / 3), t)
    return (LAB_KAPPA * t + 16) / 116


def _lab_f_inv(t: float) -> float:
    t3 = t * t * t
    if t3 > LAB_EPSILON:
        return t3
    return (116 * t - 16) / LAB_KAPPA


def xyz_to_lab(x: float, y: float, z: float) -> Triple:
    fx = _lab_f(x / D65_WHITE[0])
    fy = _lab_f(y / D65_WHITE[1])
    fz = _lab_f(z / D65_WHITE[2])

    l = 116 * fy - 16
    a = 500 * (fx - fy)
    b = 200 * (fy - fz)
    return (
        float(clamp(l, *LAB_L_RANGE)),
        float(clamp(a, *LAB_AB_RANGE)),
        float(clamp(b, *LAB_AB_RANGE)),
    )


def lab_to_xyz(l: float, a: float, b: float) -> Triple:
    fy = (l + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200
    return (
        _lab_f_inv(fx) * D65_WHITE[0],
        _lab_f_inv(fy) * D65_WHITE[1],
        _lab_f_inv(fz) * D65_WHITE[2],
    )


def lab_to_lch(l: float, a: float, b: float) -> Triple:
    c = math.hypot(a, b)
    h = normalize_hue(math.degrees(math.atan2(b, a)))
    return l, c, h


def lch_to_lab(l: float, c: float, h: float) -> Triple:
    h_rad = math.radians(h)
    return l, c * math.cos(h_rad), c * math.sin(h_rad)


def rgb_to_lab(r: float, g: float, b: float) -> Triple:
    return xyz_to_lab(*rgb_to_xyz(r, g, b))


def lab_to_rgb(l: float, a: float, b: float) -> Triple:
    return xyz_to_rgb(*lab_to_xyz(l, a, b))


def rgb_to_lch(r: float, g: float, b: float) -> Triple:
    return lab_to_lch(*rgb_to_lab(r, g, b))


def lch_to_rgb(l: float, c: float, h: float) -> Triple:
    return lab_to_rgb(*lch_to_lab(l, c, h))
