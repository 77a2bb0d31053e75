"""
Numpy forms of the HSL, CIE and OKLAB conversions for batch work.

Every function takes an array whose last axis holds three channels and
returns an array of the same shape. RGB arrays are 8-bit scaled ([0, 255]).
"""
import numpy as np

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
    OKLAB_M1,
    OKLAB_M2,
)

_SRGB_TO_XYZ = np.array(SRGB_TO_XYZ)
_XYZ_TO_SRGB = np.array(XYZ_TO_SRGB)
_OKLAB_M1 = np.array(OKLAB_M1)
_OKLAB_M2 = np.array(OKLAB_M2)
_D65 = np.array(D65_WHITE)


def _as_channels(arr) -> np.ndarray:
    arr = np.asarray(arr, dtype=float)
    if arr.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {arr.shape}")
    return arr


def np_srgb_to_linear(unit: np.ndarray) -> np.ndarray:
    unit = np.asarray(unit, dtype=float)
    return np.where(
        unit <= SRGB_ENCODE_THRESHOLD,
        unit / SRGB_SLOPE,
        ((unit + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA,
    )


def np_linear_to_srgb(linear: np.ndarray) -> np.ndarray:
    linear = np.asarray(linear, dtype=float)
    safe = np.maximum(linear, 0.0)
    return np.where(
        linear <= SRGB_DECODE_THRESHOLD,
        linear * SRGB_SLOPE,
        SRGB_SCALE * safe ** (1 / SRGB_GAMMA) - SRGB_OFFSET,
    )


def np_rgb_to_xyz(rgb: np.ndarray) -> np.ndarray:
    linear = np_srgb_to_linear(_as_channels(rgb) / 255.0)
    return linear @ _SRGB_TO_XYZ.T * 100.0


def np_xyz_to_rgb(xyz: np.ndarray) -> np.ndarray:
    linear = (_as_channels(xyz) / 100.0) @ _XYZ_TO_SRGB.T
    return np.clip(np_linear_to_srgb(linear) * 255.0, 0.0, 255.0)


def np_xyz_to_lab(xyz: np.ndarray) -> np.ndarray:
    t = _as_channels(xyz) / _D65
    f = np.where(t > LAB_EPSILON, np.cbrt(t), (LAB_KAPPA * t + 16) / 116)
    l = 116 * f[..., 1] - 16
    a = 500 * (f[..., 0] - f[..., 1])
    b = 200 * (f[..., 1] - f[..., 2])
    return np.stack([
        np.clip(l, *LAB_L_RANGE),
        np.clip(a, *LAB_AB_RANGE),
        np.clip(b, *LAB_AB_RANGE),
    ], axis=-1)


def np_rgb_to_lab(rgb: np.ndarray) -> np.ndarray:
    return np_xyz_to_lab(np_rgb_to_xyz(rgb))


def np_lab_to_lch(lab: np.ndarray) -> np.ndarray:
    lab = _as_channels(lab)
    c = np.hypot(lab[..., 1], lab[..., 2])
    h = np.degrees(np.arctan2(lab[..., 2], lab[..., 1])) % 360
    return np.stack([lab[..., 0], c, h], axis=-1)


def np_rgb_to_oklab(rgb: np.ndarray) -> np.ndarray:
    linear = np_srgb_to_linear(_as_channels(rgb) / 255.0)
    lms = np.cbrt(linear @ _OKLAB_M1.T)
    return lms @ _OKLAB_M2.T


def np_rgb_to_hsl(rgb: np.ndarray) -> np.ndarray:
    """
    Vectorized ``rgb_to_hsl``.

    Args:
        rgb: array of shape (..., 3), channels in [0, 255]
    Returns:
        array of shape (..., 3): hue [0, 360), saturation and lightness [0, 100]
    """
    unit = _as_channels(rgb) / 255.0
    r, g, b = unit[..., 0], unit[..., 1], unit[..., 2]
    max_c = unit.max(axis=-1)
    min_c = unit.min(axis=-1)
    delta = max_c - min_c
    l = (max_c + min_c) / 2

    gray = delta == 0
    safe_delta = np.where(gray, 1.0, delta)
    denom = 1 - np.abs(2 * l - 1)
    s = np.where(gray, 0.0, delta / np.where(denom == 0, 1.0, denom))

    h = np.select(
        [max_c == r, max_c == g],
        [((g - b) / safe_delta) % 6, (b - r) / safe_delta + 2],
        (r - g) / safe_delta + 4,
    )
    h = np.where(gray, 0.0, (h * 60) % 360)
    return np.stack([h, np.minimum(s, 1.0) * 100, l * 100], axis=-1)
