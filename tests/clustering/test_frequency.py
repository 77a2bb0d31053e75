import numpy as np
import pytest

from chromascale import ArgumentError, Color, analyze_color_distribution, find_dominant_colors
from chromascale.clustering import find_peaks, prominence, quantize_pixels


def sample_pixels():
    return np.array(
        [(250, 10, 10)] * 6 + [(128, 128, 128)] * 10 + [(12, 200, 98)] * 3,
        dtype=np.uint8,
    )


def test_quantize_pixels():
    quantized = quantize_pixels(np.array([[250.0, 10, 98], [4, 5, 255]]), 10)
    assert quantized.tolist() == [[255, 10, 100], [0, 10, 255]]
    # thresholds below 1 leave channels alone
    assert quantize_pixels(np.array([[7.0, 8, 9]]), 0).tolist() == [[7, 8, 9]]


def test_prominence_favours_saturated_mid_tones():
    assert prominence(Color.from_hex("#808080"), 50) == 0
    assert prominence(Color.from_hex("#FF0000"), 50) == pytest.approx(50)
    assert prominence(Color.from_hex("#FF0000"), 10) > prominence(Color.from_hex("#FFCCCC"), 10)


def test_find_dominant_colors_orders_by_prominence():
    stats = find_dominant_colors(sample_pixels())
    assert [s.hex for s in stats] == ["#FF0A0A", "#0AC864", "#828282"]
    assert [s.count for s in stats] == [6, 3, 10]
    assert abs(sum(s.percentage for s in stats) - 100) < 1e-9
    assert stats[2].prominence == 0
    assert stats[0].prominence > stats[1].prominence > 0


def test_find_dominant_colors_options():
    pixels = sample_pixels()
    assert len(find_dominant_colors(pixels, count=1)) == 1
    assert find_dominant_colors(pixels, count=1, threshold=0)[0].hex == "#FA0A0A"
    rgba = np.hstack([pixels, np.full((len(pixels), 1), 255, dtype=np.uint8)])
    assert [s.hex for s in find_dominant_colors(rgba)] == [s.hex for s in find_dominant_colors(pixels)]
    assert find_dominant_colors(np.empty((0, 3))) == []
    with pytest.raises(ArgumentError):
        find_dominant_colors(pixels, count=0)


def test_find_peaks():
    histogram = [0, 3, 1, 5, 5, 2, 4, 0]
    assert find_peaks(histogram) == [6, 1]
    assert find_peaks(histogram, 1) == [6]
    assert find_peaks([1, 2]) == []


def test_analyze_color_distribution():
    pixels = [(255, 0, 0)] * 4 + [(0, 255, 0)] * 2 + [(0, 0, 255)]
    distribution = analyze_color_distribution(pixels)
    assert distribution.hue.shape == (360,)
    assert distribution.saturation.shape == distribution.lightness.shape == (101,)
    assert distribution.hue[0] == 1
    assert distribution.hue[120] == 0.5
    assert distribution.hue[240] == 0.25
    assert distribution.saturation[100] == 1
    assert distribution.lightness[50] == 1
    # bin 0 is an edge, never a peak
    assert distribution.dominant_hues == [120, 240]
    assert abs(distribution.average_saturation - 100) < 1e-9
    assert abs(distribution.average_lightness - 50) < 1e-9


def test_distribution_hue_wraps_and_empty_input():
    # hue 359.76 rounds into bin 0
    assert analyze_color_distribution([(255, 0, 1)]).hue[0] == 1
    empty = analyze_color_distribution(np.empty((0, 3)))
    assert not empty.hue.any()
    assert empty.dominant_hues == []
    assert empty.average_lightness == 0.0
