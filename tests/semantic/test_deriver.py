import warnings

import pytest

from chromascale import Color, derive_semantic_colors
from chromascale.semantic import SUCCESS_HUES, DANGER_HUES, INFO_HUES, map_hue
from chromascale.semantic.deriver import rounded_hsl


def test_brand_blue_roles(brand_blue):
    roles = derive_semantic_colors(brand_blue)
    assert rounded_hsl(brand_blue) == (209, 100, 55)
    assert roles.primary == brand_blue
    assert roles.success == Color.from_hsl(90, 70, 60)
    assert roles.warning == Color.from_hsl(38, 100, 65)
    assert roles.danger == Color.from_hsl(0, 85, 55)
    assert roles.gray == Color.from_hsl(209, 6, 50)
    assert roles.info is None


def test_success_hue_survives_rounding(brand_blue):
    h, s, l = rounded_hsl(derive_semantic_colors(brand_blue).success)
    assert abs(h - 90) <= 1
    assert abs(s - 70) <= 1
    assert abs(l - 60) <= 1


def test_derivation_is_pure(brand_blue):
    first = derive_semantic_colors(brand_blue, include_info=True)
    second = derive_semantic_colors("#1890FF", include_info=True)
    assert first == second
    assert first.to_hex() == second.to_hex()


def test_info_role(brand_blue):
    roles = derive_semantic_colors(brand_blue, include_info=True)
    assert roles.info == Color.from_hsl(209, 75, 55)
    assert list(roles.as_dict()) == ["primary", "success", "warning", "danger", "gray", "info"]


def test_red_seed():
    roles = derive_semantic_colors("#FF0000")
    assert roles.success == Color.from_hsl(120, 70, 55)
    # reds keep their own hue for danger
    assert roles.danger == Color.from_hsl(0, 85, 55)


def test_unmixed_gray_is_neutral(brand_blue):
    roles = derive_semantic_colors(brand_blue, gray_mix_primary=False)
    assert roles.gray.to_hex() == "#808080"


def test_gray_saturation_is_bounded(brand_blue):
    low = derive_semantic_colors(brand_blue, gray_mix_ratio=0.01).gray
    assert low == Color.from_hsl(209, 3, 50)
    with pytest.warns(UserWarning):
        high = derive_semantic_colors(brand_blue, gray_mix_ratio=1.5).gray
    assert high == Color.from_hsl(209, 8, 50)


def test_valid_ratio_does_not_warn(brand_blue):
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        derive_semantic_colors(brand_blue, gray_mix_ratio=0.5)


def test_hue_buckets():
    assert map_hue(10, SUCCESS_HUES) == 120
    assert map_hue(25, SUCCESS_HUES) == 80
    assert map_hue(100, SUCCESS_HUES) == 100
    assert map_hue(350, SUCCESS_HUES) == 120
    assert map_hue(355, DANGER_HUES) == 355
    assert map_hue(200, DANGER_HUES) == 0
    assert map_hue(200, INFO_HUES) == 200
    assert map_hue(270, INFO_HUES) == 220
