from .delta_e import (
    DeltaEAlgorithm,
    Application,
    JND_THRESHOLDS,
    delta_e,
    delta_e_76,
    delta_e_94,
    delta_e_2000,
    delta_e_cmc,
    delta_e_ok,
    interpret_delta_e,
)
from .analysis import (
    ColorSimilarity,
    NearestColor,
    PaletteDiversity,
    color_similarity,
    find_nearest_color,
    find_nearest_colors,
    are_colors_distinguishable,
    color_distance_matrix,
    analyze_palette_diversity,
)
from .contrast import (
    WCAGLevel,
    TextSize,
    relative_luminance,
    contrast_ratio,
    required_contrast,
    is_wcag_compliant,
    perceived_brightness,
    is_light,
    best_text_color,
)

__all__ = [
    'DeltaEAlgorithm', 'Application', 'JND_THRESHOLDS',
    'delta_e', 'delta_e_76', 'delta_e_94', 'delta_e_2000', 'delta_e_cmc', 'delta_e_ok',
    'interpret_delta_e',
    'ColorSimilarity', 'NearestColor', 'PaletteDiversity',
    'color_similarity', 'find_nearest_color', 'find_nearest_colors',
    'are_colors_distinguishable', 'color_distance_matrix', 'analyze_palette_diversity',
    'WCAGLevel', 'TextSize', 'relative_luminance', 'contrast_ratio', 'required_contrast',
    'is_wcag_compliant', 'perceived_brightness', 'is_light', 'best_text_color',
]
