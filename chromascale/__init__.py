"""Chromascale: color conversions, perceptual difference, semantic roles, palette scales and extraction."""

from .errors import InvalidColorInput, ArgumentError
from .types import ColorFormat, ColorSpace
from .colors import (
    Color,
    RGB,
    HSL,
    HSV,
    HWB,
    XYZ,
    LAB,
    LCH,
    OKLAB,
    OKLCH,
    ColorInputKind,
    classify_input,
    parse_rgba,
    parse_color,
    is_valid_color,
)
from .conversions import convert, rgb_to_hex, hex_to_rgb
from .difference import (
    DeltaEAlgorithm,
    Application,
    delta_e,
    delta_e_76,
    delta_e_94,
    delta_e_2000,
    delta_e_cmc,
    delta_e_ok,
    interpret_delta_e,
    color_similarity,
    find_nearest_color,
    find_nearest_colors,
    are_colors_distinguishable,
    color_distance_matrix,
    analyze_palette_diversity,
    relative_luminance,
    contrast_ratio,
    is_wcag_compliant,
    best_text_color,
)
from .semantic import SemanticColors, derive_semantic_colors
from .scales import (
    Palette,
    ThemePalettes,
    TAILWIND_SHADES,
    generate_scale,
    generate_gray_scale,
    generate_shade_scale,
    generate_tailwind_scale,
    generate_natural_scale,
    generate_theme_palettes,
    generate_tailwind_theme,
)
from .clustering import (
    Cluster,
    kmeans_palette,
    extract_palette,
    pixels_from_rgba_buffer,
    ColorStatistics,
    ColorDistribution,
    find_dominant_colors,
    analyze_color_distribution,
)
from .cache import memoize

__all__ = [
    # errors
    'InvalidColorInput',
    'ArgumentError',
    # model
    'ColorFormat',
    'ColorSpace',
    'Color',
    'RGB',
    'HSL',
    'HSV',
    'HWB',
    'XYZ',
    'LAB',
    'LCH',
    'OKLAB',
    'OKLCH',
    'ColorInputKind',
    'classify_input',
    'parse_rgba',
    'parse_color',
    'is_valid_color',
    'convert',
    'rgb_to_hex',
    'hex_to_rgb',
    # difference
    'DeltaEAlgorithm',
    'Application',
    'delta_e',
    'delta_e_76',
    'delta_e_94',
    'delta_e_2000',
    'delta_e_cmc',
    'delta_e_ok',
    'interpret_delta_e',
    'color_similarity',
    'find_nearest_color',
    'find_nearest_colors',
    'are_colors_distinguishable',
    'color_distance_matrix',
    'analyze_palette_diversity',
    'relative_luminance',
    'contrast_ratio',
    'is_wcag_compliant',
    'best_text_color',
    # semantic / scales
    'SemanticColors',
    'derive_semantic_colors',
    'Palette',
    'ThemePalettes',
    'TAILWIND_SHADES',
    'generate_scale',
    'generate_gray_scale',
    'generate_shade_scale',
    'generate_tailwind_scale',
    'generate_natural_scale',
    'generate_theme_palettes',
    'generate_tailwind_theme',
    # clustering
    'Cluster',
    'kmeans_palette',
    'extract_palette',
    'pixels_from_rgba_buffer',
    'ColorStatistics',
    'ColorDistribution',
    'find_dominant_colors',
    'analyze_color_distribution',
    # caching
    'memoize',
]
