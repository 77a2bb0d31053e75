import pytest

from chromascale import Color
from chromascale.scales import Palette, ThemePalettes


def make_palette():
    return Palette.from_colors([Color(255, 255, 255), Color(128, 128, 128), Color(0, 0, 0)], center=2)


def test_mapping_interface():
    palette = make_palette()
    assert len(palette) == 3
    assert list(palette) == [1, 2, 3]
    assert palette[1] == "#FFFFFF"
    assert palette.to_dict() == {1: "#FFFFFF", 2: "#808080", 3: "#000000"}
    assert dict(palette) == palette.to_dict()
    assert palette.color(3) == Color(0, 0, 0)
    assert palette.center == 2
    assert palette.hexes() == ["#FFFFFF", "#808080", "#000000"]
    with pytest.raises(KeyError):
        palette[4]


def test_string_labels():
    palette = Palette([("50", Color(250, 250, 250)), ("900", Color(10, 10, 10))])
    assert palette.labels == ("50", "900")
    assert palette.center is None
    assert "900" in palette


def test_palette_is_immutable():
    palette = make_palette()
    with pytest.raises(AttributeError):
        palette._center = 1


def test_rejects_bad_labels():
    with pytest.raises(ValueError):
        Palette([(1, Color(0, 0, 0)), (1, Color(1, 1, 1))])
    with pytest.raises(ValueError):
        Palette.from_colors([Color(0, 0, 0)], center=5)


def test_theme_palettes_to_dict():
    theme = ThemePalettes(light={"primary": make_palette()}, dark={"primary": make_palette()})
    assert theme.roles == ("primary",)
    assert theme.to_dict()["dark"]["primary"][3] == "#000000"
