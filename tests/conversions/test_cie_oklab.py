import numpy as np
import pytest

from chromascale.conversions import (
    rgb_to_xyz, xyz_to_rgb, rgb_to_lab, lab_to_rgb, rgb_to_lch, lab_to_lch, lch_to_lab,
    rgb_to_oklab, oklab_to_rgb, rgb_to_oklch, srgb_to_linear, linear_to_srgb,
    np_rgb_to_lab, np_rgb_to_xyz, np_xyz_to_rgb, np_rgb_to_oklab, np_lab_to_lch,
)

samples_rgb = [
    (255, 0, 0), (0, 255, 0), (0, 0, 255), (24, 144, 255),
    (250, 173, 20), (128, 128, 128), (12, 34, 56), (255, 255, 255),
]


def test_white_point():
    x, y, z = rgb_to_xyz(255, 255, 255)
    assert abs(x - 95.047) < 0.05
    assert abs(y - 100.0) < 0.05
    assert abs(z - 108.883) < 0.05
    l, a, b = rgb_to_lab(255, 255, 255)
    assert abs(l - 100) < 0.01 and abs(a) < 0.05 and abs(b) < 0.05


def test_known_lab_values():
    l, a, b = rgb_to_lab(255, 0, 0)
    assert abs(l - 53.24) < 0.05
    assert abs(a - 80.09) < 0.1
    assert abs(b - 67.20) < 0.1


def test_transfer_curve_round_trip():
    for c in (0.0, 0.02, 0.04045, 0.2, 0.5, 1.0):
        assert abs(linear_to_srgb(srgb_to_linear(c)) - c) < 1e-9


def test_round_trip_xyz_lab():
    for rgb in samples_rgb:
        for out, exp in zip(xyz_to_rgb(*rgb_to_xyz(*rgb)), rgb):
            assert abs(out - exp) < 1e-3
        for out, exp in zip(lab_to_rgb(*rgb_to_lab(*rgb)), rgb):
            assert abs(out - exp) < 1e-2


def test_round_trip_oklab():
    for rgb in samples_rgb:
        for out, exp in zip(oklab_to_rgb(*rgb_to_oklab(*rgb)), rgb):
            assert abs(out - exp) < 1e-2


def test_oklab_white_and_black():
    l, a, b = rgb_to_oklab(255, 255, 255)
    assert abs(l - 1.0) < 1e-3 and abs(a) < 1e-3 and abs(b) < 1e-3
    l, a, b = rgb_to_oklab(0, 0, 0)
    assert abs(l) < 1e-9


def test_lch_polar_form():
    l, c, h = lab_to_lch(50, 0, 20)
    assert (l, c) == (50, 20)
    assert abs(h - 90) < 1e-9
    l, a, b = lch_to_lab(l, c, h)
    assert abs(a) < 1e-9 and abs(b - 20) < 1e-9
    assert 0 <= rgb_to_lch(0, 0, 255)[2] < 360
    assert 0 <= rgb_to_oklch(0, 0, 255)[2] < 360


def test_out_of_gamut_is_clamped():
    r, g, b = lab_to_rgb(50, 127, -127)
    for c in (r, g, b):
        assert 0 <= c <= 255


def test_numpy_matches_scalar():
    arr = np.array(samples_rgb, dtype=float)
    lab = np_rgb_to_lab(arr)
    expected = np.array([rgb_to_lab(*rgb) for rgb in samples_rgb])
    assert np.allclose(lab, expected, atol=1e-6)

    oklab = np_rgb_to_oklab(arr)
    expected = np.array([rgb_to_oklab(*rgb) for rgb in samples_rgb])
    assert np.allclose(oklab, expected, atol=1e-9)

    lch = np_lab_to_lch(lab)
    expected = np.array([rgb_to_lch(*rgb) for rgb in samples_rgb])
    assert np.allclose(lch[..., :2], expected[..., :2], atol=1e-6)


def test_numpy_xyz_round_trip():
    arr = np.array(samples_rgb, dtype=float).reshape(2, 4, 3)
    out = np_xyz_to_rgb(np_rgb_to_xyz(arr))
    assert out.shape == (2, 4, 3)
    assert np.allclose(out, arr, atol=1e-3)


def test_numpy_rejects_wrong_channel_count():
    with pytest.raises(ValueError):
        np_rgb_to_lab(np.zeros((4, 2)))
