"""
Frequency-based color statistics for pixel samples.

A lighter alternative to K-means when only counting is needed.

Functions:
    quantize_pixels: snap channels to a grid so near-identical pixels share a bucket
    prominence: saturation and mid-lightness weighted share of a color
    find_dominant_colors: most prominent quantized colors with their counts
    find_peaks: strict local maxima of a histogram
    analyze_color_distribution: normalized H/S/L histograms and averages
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List

import numpy as np

from ..colors.color import Color
from ..conversions.vectorized import np_rgb_to_hsl
from ..errors import ArgumentError
from .kmeans import as_samples

DEFAULT_THRESHOLD = 10
HUE_BINS = 360
PERCENT_BINS = 101


@dataclass(frozen=True)
class ColorStatistics:
    color: Color
    count: int
    percentage: float
    prominence: float

    @property
    def hex(self) -> str:
        return self.color.to_hex()


@dataclass(frozen=True)
class ColorDistribution:
    hue: np.ndarray
    saturation: np.ndarray
    lightness: np.ndarray
    dominant_hues: List[int]
    average_saturation: float
    average_lightness: float


def quantize_pixels(samples: np.ndarray, threshold: float = DEFAULT_THRESHOLD) -> np.ndarray:
    """Round every channel half up to the nearest multiple of ``max(1, threshold)``."""
    factor = max(1.0, float(threshold))
    return np.clip(np.floor(samples / factor + 0.5) * factor, 0, 255)


def prominence(color: Color, percentage: float) -> float:
    """
    Weight a color's share by how saturated and how mid-toned it is.

    Grays and colors near black or white score close to zero whatever
    their share.
    """
    _, s, l = color.to_hsl()
    return s / 100 * (1 - abs(l - 50) / 50) * percentage


def find_dominant_colors(
    pixels: Any,
    count: int = 3,
    threshold: float = DEFAULT_THRESHOLD,
) -> List[ColorStatistics]:
    """
    Most prominent colors of ``pixels`` after quantization.

    Args:
        pixels: (N, 3) or (N, 4) array-like of 8-bit channels; alpha is ignored
        count: how many colors to return
        threshold: quantization step in channel units (values below 1 mean 1)
    Returns:
        Up to ``count`` statistics, most prominent first; ties go to the
        more frequent color.
    Raises:
        ArgumentError: count < 1
    """
    if count < 1:
        raise ArgumentError(f"count must be at least 1, got {count}")
    samples = as_samples(pixels)
    total = len(samples)
    if total == 0:
        return []

    buckets, counts = np.unique(quantize_pixels(samples, threshold), axis=0, return_counts=True)
    stats = []
    for bucket, n in zip(buckets, counts):
        color = Color(*bucket)
        percentage = n / total * 100
        stats.append(ColorStatistics(color, int(n), float(percentage), float(prominence(color, percentage))))
    stats.sort(key=lambda stat: (-stat.prominence, -stat.count))
    return stats[:count]


def find_peaks(histogram: np.ndarray, count: int = 3) -> List[int]:
    """Indices of interior strict local maxima, highest first (lowest index on ties)."""
    values = np.asarray(histogram, dtype=float)
    peaks = [
        i for i in range(1, len(values) - 1)
        if values[i] > values[i - 1] and values[i] > values[i + 1]
    ]
    peaks.sort(key=lambda i: -values[i])
    return peaks[:count]


def _normalized(histogram: np.ndarray) -> np.ndarray:
    peak = histogram.max()
    return histogram / peak if peak > 0 else histogram.astype(float)


def analyze_color_distribution(pixels: Any) -> ColorDistribution:
    """
    Hue, saturation and lightness histograms of ``pixels``.

    Hue has 360 one-degree bins, saturation and lightness 101 one-percent
    bins; values are rounded half up and hue 359.5 and above wraps to bin 0.
    Each histogram is scaled so its tallest bin is 1. ``dominant_hues``
    holds up to three hue peaks. Empty input gives all-zero histograms.
    """
    samples = as_samples(pixels)
    if len(samples) == 0:
        return ColorDistribution(
            hue=np.zeros(HUE_BINS),
            saturation=np.zeros(PERCENT_BINS),
            lightness=np.zeros(PERCENT_BINS),
            dominant_hues=[],
            average_saturation=0.0,
            average_lightness=0.0,
        )

    hsl = np_rgb_to_hsl(samples)
    bins = np.floor(hsl + 0.5).astype(int)
    hue = np.bincount(bins[:, 0] % HUE_BINS, minlength=HUE_BINS)
    saturation = np.bincount(np.clip(bins[:, 1], 0, 100), minlength=PERCENT_BINS)
    lightness = np.bincount(np.clip(bins[:, 2], 0, 100), minlength=PERCENT_BINS)

    return ColorDistribution(
        hue=_normalized(hue),
        saturation=_normalized(saturation),
        lightness=_normalized(lightness),
        dominant_hues=find_peaks(hue, 3),
        average_saturation=float(hsl[:, 1].mean()),
        average_lightness=float(hsl[:, 2].mean()),
    )
