from .kmeans import (
    Cluster,
    redmean_distance,
    as_samples,
    pixels_from_rgba_buffer,
    kmeans_plus_plus,
    kmeans_palette,
    extract_palette,
)
from .frequency import (
    ColorStatistics,
    ColorDistribution,
    quantize_pixels,
    prominence,
    find_dominant_colors,
    find_peaks,
    analyze_color_distribution,
)

__all__ = [
    'Cluster',
    'redmean_distance',
    'as_samples',
    'pixels_from_rgba_buffer',
    'kmeans_plus_plus',
    'kmeans_palette',
    'extract_palette',
    'ColorStatistics',
    'ColorDistribution',
    'quantize_pixels',
    'prominence',
    'find_dominant_colors',
    'find_peaks',
    'analyze_color_distribution',
]
