"""
Numeric constants shared by the conversion functions.

All matrices are row-major 3x3 tuples; XYZ values are scaled so that the
D65 white point has Y = 100.
"""
from typing import Tuple

Matrix3 = Tuple[Tuple[float, float, float], Tuple[float, float, float], Tuple[float, float, float]]

# sRGB transfer function
SRGB_ENCODE_THRESHOLD = 0.04045
SRGB_DECODE_THRESHOLD = 0.0031308
SRGB_GAMMA = 2.4
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055
SRGB_SLOPE = 12.92

# D65 reference white
D65_WHITE: Tuple[float, float, float] = (95.047, 100.0, 108.883)

# CIE LAB
LAB_EPSILON = 216 / 24389
LAB_KAPPA = 24389 / 27
LAB_L_RANGE = (0.0, 100.0)
LAB_AB_RANGE = (-128.0, 127.0)

SRGB_TO_XYZ: Matrix3 = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

XYZ_TO_SRGB: Matrix3 = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)

# OKLAB (Ottosson): linear sRGB -> LMS, cube-rooted LMS -> Lab, and inverses
OKLAB_M1: Matrix3 = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

OKLAB_M2: Matrix3 = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

OKLAB_M2_INV: Matrix3 = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

OKLAB_M1_INV: Matrix3 = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)


def mat3_mul(m: Matrix3, x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Multiply a 3x3 matrix with the column vector (x, y, z)."""
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    )
