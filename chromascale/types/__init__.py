from .color_types import (
    ColorSpace,
    COLOR_SPACES,
    HUE_SPACES,
    Scalar,
    ScalarTriple,
    IntTriple,
    ColorInput,
    is_hue_space,
)
from .format_type import ColorFormat

__all__ = [
    'ColorSpace',
    'COLOR_SPACES',
    'HUE_SPACES',
    'Scalar',
    'ScalarTriple',
    'IntTriple',
    'ColorInput',
    'is_hue_space',
    'ColorFormat',
]
