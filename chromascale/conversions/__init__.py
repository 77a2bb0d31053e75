from .hsx import (
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hsv,
    hsv_to_rgb,
    rgb_to_hwb,
    hwb_to_rgb,
    hsl_to_hsv,
    hsv_to_hsl,
)
from .cie import (
    srgb_to_linear,
    linear_to_srgb,
    rgb_to_xyz,
    xyz_to_rgb,
    xyz_to_lab,
    lab_to_xyz,
    lab_to_lch,
    lch_to_lab,
    rgb_to_lab,
    lab_to_rgb,
    rgb_to_lch,
    lch_to_rgb,
)
from .oklab import (
    rgb_to_oklab,
    oklab_to_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    rgb_to_oklch,
    oklch_to_rgb,
)
from .strings import rgb_to_hex, hex_to_rgb, is_hex_color, format_rgb_string, format_hsl_string
from .vectorized import (
    np_srgb_to_linear,
    np_linear_to_srgb,
    np_rgb_to_xyz,
    np_xyz_to_rgb,
    np_xyz_to_lab,
    np_rgb_to_lab,
    np_lab_to_lch,
    np_rgb_to_oklab,
    np_rgb_to_hsl,
)
from .wrapper import convert, get_converter

__all__ = [
    'rgb_to_hsl', 'hsl_to_rgb', 'rgb_to_hsv', 'hsv_to_rgb', 'rgb_to_hwb', 'hwb_to_rgb',
    'hsl_to_hsv', 'hsv_to_hsl',
    'srgb_to_linear', 'linear_to_srgb', 'rgb_to_xyz', 'xyz_to_rgb', 'xyz_to_lab', 'lab_to_xyz',
    'lab_to_lch', 'lch_to_lab', 'rgb_to_lab', 'lab_to_rgb', 'rgb_to_lch', 'lch_to_rgb',
    'rgb_to_oklab', 'oklab_to_rgb', 'oklab_to_oklch', 'oklch_to_oklab', 'rgb_to_oklch', 'oklch_to_rgb',
    'rgb_to_hex', 'hex_to_rgb', 'is_hex_color', 'format_rgb_string', 'format_hsl_string',
    'np_srgb_to_linear', 'np_linear_to_srgb', 'np_rgb_to_xyz', 'np_xyz_to_rgb', 'np_xyz_to_lab',
    'np_rgb_to_lab', 'np_lab_to_lch', 'np_rgb_to_oklab', 'np_rgb_to_hsl',
    'convert', 'get_converter',
]
