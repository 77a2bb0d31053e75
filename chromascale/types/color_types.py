from __future__ import annotations
from typing import Any, Literal, Mapping, Sequence, Tuple, Union

Scalar = int | float
IntTriple = Tuple[int, int, int]
ScalarTriple = Tuple[Scalar, Scalar, Scalar]
ColorSpace = Literal["rgb", "hsl", "hsv", "hwb", "xyz", "lab", "lch", "oklab", "oklch"]
COLOR_SPACES: Tuple[str, ...] = ("rgb", "hsl", "hsv", "hwb", "xyz", "lab", "lch", "oklab", "oklch")
HUE_SPACES = {"hsl", "hsv", "hwb", "lch", "oklch"}

# Anything parse_color understands: strings, numeric sequences, channel mappings
# and already-built Color / space values.
ColorInput = Union[str, Sequence[Scalar], Mapping[str, Any], Any]


def is_hue_space(color_space: str) -> bool:
    """
    Check if the given color space carries a hue channel.

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES
