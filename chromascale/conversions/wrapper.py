from typing import Callable, Dict, Tuple

from . import hsx, cie, oklab
from ..types.color_types import COLOR_SPACES, ColorSpace, ScalarTriple

Triple = Tuple[float, float, float]
ConvertFn = Callable[[float, float, float], Triple]


def _identity(a: float, b: float, c: float) -> Triple:
    return a, b, c


# Every space knows how to reach and leave 8-bit RGB floats
TO_RGB: Dict[str, ConvertFn] = {
    "rgb": _identity,
    "hsl": hsx.hsl_to_rgb,
    "hsv": hsx.hsv_to_rgb,
    "hwb": hsx.hwb_to_rgb,
    "xyz": cie.xyz_to_rgb,
    "lab": cie.lab_to_rgb,
    "lch": cie.lch_to_rgb,
    "oklab": oklab.oklab_to_rgb,
    "oklch": oklab.oklch_to_rgb,
}

FROM_RGB: Dict[str, ConvertFn] = {
    "rgb": _identity,
    "hsl": hsx.rgb_to_hsl,
    "hsv": hsx.rgb_to_hsv,
    "hwb": hsx.rgb_to_hwb,
    "xyz": cie.rgb_to_xyz,
    "lab": cie.rgb_to_lab,
    "lch": cie.rgb_to_lch,
    "oklab": oklab.rgb_to_oklab,
    "oklch": oklab.rgb_to_oklch,
}

# Pairs that skip the RGB round trip (and its gamut clamp)
CONVERT_DIRECT: Dict[Tuple[str, str], ConvertFn] = {
    ("hsl", "hsv"): hsx.hsl_to_hsv,
    ("hsv", "hsl"): hsx.hsv_to_hsl,
    ("xyz", "lab"): cie.xyz_to_lab,
    ("lab", "xyz"): cie.lab_to_xyz,
    ("lab", "lch"): cie.lab_to_lch,
    ("lch", "lab"): cie.lch_to_lab,
    ("oklab", "oklch"): oklab.oklab_to_oklch,
    ("oklch", "oklab"): oklab.oklch_to_oklab,
}


def get_converter(from_space: ColorSpace, to_space: ColorSpace) -> ConvertFn:
    fs, ts = from_space.lower(), to_space.lower()
    for space in (fs, ts):
        if space not in COLOR_SPACES:
            raise ValueError(f"Unknown color space: {space}")
    if fs == ts:
        return _identity
    if (fs, ts) in CONVERT_DIRECT:
        return CONVERT_DIRECT[(fs, ts)]
    to_rgb, from_rgb = TO_RGB[fs], FROM_RGB[ts]
    return lambda a, b, c: from_rgb(*to_rgb(a, b, c))


def convert(
    value: ScalarTriple,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> Triple:
    """
    Convert a three-channel value between any two supported color spaces.

    RGB is the hub; HSL/HSV, XYZ/LAB/LCH and OKLAB/OKLCH neighbours convert
    directly. Returned values are unrounded floats.
    """
    if len(value) != 3:
        raise ValueError(f"Expected 3 channels, got {len(value)}")
    a, b, c = (float(v) for v in value)
    return get_converter(from_space, to_space)(a, b, c)
