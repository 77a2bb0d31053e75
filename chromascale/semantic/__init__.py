from .deriver import (
    SemanticColors,
    SUCCESS_HUES,
    WARNING_HUES,
    DANGER_HUES,
    INFO_HUES,
    map_hue,
    derive_success,
    derive_warning,
    derive_danger,
    derive_info,
    derive_gray,
    derive_semantic_colors,
)

__all__ = [
    'SemanticColors',
    'SUCCESS_HUES',
    'WARNING_HUES',
    'DANGER_HUES',
    'INFO_HUES',
    'map_hue',
    'derive_success',
    'derive_warning',
    'derive_danger',
    'derive_info',
    'derive_gray',
    'derive_semantic_colors',
]
