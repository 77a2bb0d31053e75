from .palette import Palette, ThemePalettes
from .stepped import (
    ChromaticBounds,
    GrayCurve,
    LIGHT_BOUNDS,
    DARK_BOUNDS,
    LIGHT_GRAY,
    DARK_GRAY,
    ARCO_HUE_STEP,
    center_step,
    closest_index,
    generate_scale,
    generate_gray_scale,
)
from .shades import (
    ShadeTable,
    TAILWIND_SHADES,
    TAILWIND_GRAY_SHADES,
    NATURAL_SHADES,
    GRAY_SHADES,
    MATERIAL_SHADES,
    ANTD_SHADES,
    generate_shade_scale,
    generate_tailwind_scale,
    generate_natural_scale,
    generate_neutral_scale,
)
from .theme import generate_theme_palettes, generate_tailwind_theme, tailwind_semantic_bases

__all__ = [
    'Palette', 'ThemePalettes',
    'ChromaticBounds', 'GrayCurve', 'LIGHT_BOUNDS', 'DARK_BOUNDS', 'LIGHT_GRAY', 'DARK_GRAY',
    'ARCO_HUE_STEP', 'center_step', 'closest_index', 'generate_scale', 'generate_gray_scale',
    'ShadeTable', 'TAILWIND_SHADES', 'TAILWIND_GRAY_SHADES', 'NATURAL_SHADES', 'GRAY_SHADES',
    'MATERIAL_SHADES', 'ANTD_SHADES',
    'generate_shade_scale', 'generate_tailwind_scale', 'generate_natural_scale', 'generate_neutral_scale',
    'generate_theme_palettes', 'generate_tailwind_theme', 'tailwind_semantic_bases',
]
