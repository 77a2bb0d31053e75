import pytest

from chromascale import ArgumentError
from chromascale.difference import (
    DeltaEAlgorithm, delta_e, delta_e_76, delta_e_94, delta_e_2000, delta_e_cmc, delta_e_ok,
    interpret_delta_e,
)

palette = ["#1890FF", "#52C41A", "#FAAD14", "#F5222D", "#808080", "#000000", "#FFFFFF", "#663399"]
all_functions = [delta_e_76, delta_e_94, delta_e_2000, delta_e_cmc, delta_e_ok]


def test_identical_colors_have_zero_distance():
    for color in palette:
        for fn in all_functions:
            assert fn(color, color) == 0


def test_delta_e_2000_is_symmetric():
    for a in palette:
        for b in palette:
            assert abs(delta_e_2000(a, b) - delta_e_2000(b, a)) < 1e-9


def test_distances_are_non_negative():
    for a in palette:
        for b in palette:
            for fn in all_functions:
                assert fn(a, b) >= 0


def test_black_white():
    assert abs(delta_e_76("black", "white") - 100) < 0.01
    assert abs(delta_e_94("black", "white") - 100) < 0.01
    assert abs(delta_e_2000("black", "white") - 100) < 0.01
    assert abs(delta_e_ok("black", "white") - 1) < 1e-3


def test_close_colors_are_close():
    assert delta_e_2000("#1890FF", "#1991FF") < 1
    assert delta_e_2000("#1890FF", "#F5222D") > 10


def test_cmc_uses_first_color_as_reference():
    forward = delta_e_cmc("#1890FF", "#FAAD14")
    backward = delta_e_cmc("#FAAD14", "#1890FF")
    assert forward > 0 and backward > 0
    assert forward != backward
    # perceptibility form weighs lightness more heavily
    assert delta_e_cmc("#101010", "#909090", l=1) > delta_e_cmc("#101010", "#909090", l=2)


def test_cie94_applications():
    graphic = delta_e_94("#1890FF", "#52C41A", "graphic-arts")
    textiles = delta_e_94("#1890FF", "#52C41A", "textiles")
    assert graphic != textiles
    with pytest.raises(ArgumentError):
        delta_e_94("#1890FF", "#52C41A", "paint")


def test_dispatcher():
    a, b = "#1890FF", "#FAAD14"
    assert delta_e(a, b) == delta_e_2000(a, b)
    assert delta_e(a, b, "76") == delta_e_76(a, b)
    assert delta_e(a, b, DeltaEAlgorithm.CIE94) == delta_e_94(a, b)
    assert delta_e(a, b, "CMC", lightness=1, chroma=1) == delta_e_cmc(a, b, 1, 1)
    assert delta_e(a, b, "oklab") == delta_e_ok(a, b)
    with pytest.raises(ArgumentError):
        delta_e(a, b, "1976")


def test_interpretation():
    assert interpret_delta_e(0) == "identical"
    assert interpret_delta_e(0.5) == "imperceptible"
    assert interpret_delta_e(1.5) == "barely perceptible"
    assert interpret_delta_e(5) == "visible"
    assert interpret_delta_e(10) == "visible"
    assert interpret_delta_e(25) == "distinct"
