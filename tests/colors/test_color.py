import pytest

from chromascale import Color, ColorFormat, HSL, LAB, OKLCH


def test_construction_clamps_and_rounds():
    c = Color(300, -5, 127.5, alpha=2)
    assert c.rgb == (255, 0, 128)
    assert c.alpha == 1.0
    assert c.is_opaque


def test_color_is_immutable():
    c = Color(1, 2, 3)
    with pytest.raises(AttributeError):
        c.r = 10
    with pytest.raises(AttributeError):
        c._value = (0, 0, 0)


def test_equality_and_hash():
    assert Color(1, 2, 3) == Color.from_hex("#010203")
    assert Color(1, 2, 3) != Color(1, 2, 3, alpha=0.5)
    assert len({Color(1, 2, 3), Color(1, 2, 3), Color(3, 2, 1)}) == 2


def test_hex_encodings(brand_blue):
    assert brand_blue.to_hex() == "#1890FF"
    assert str(brand_blue) == "#1890FF"
    translucent = brand_blue.with_alpha(0.5)
    assert translucent.to_hex() == "#1890FF"
    assert translucent.to_hex(alpha=True) == "#1890FF80"
    assert brand_blue.to_hex(alpha=True) == "#1890FF"


def test_string_formats(brand_blue):
    assert brand_blue.to_string() == "#1890FF"
    assert brand_blue.to_string(ColorFormat.RGB) == "rgb(24, 144, 255)"
    assert brand_blue.to_string("hsl") == "hsl(209, 100%, 55%)"
    assert brand_blue.with_alpha(0.5).to_string("rgb") == "rgba(24, 144, 255, 0.5)"
    assert brand_blue.with_alpha(0.5).to_string(ColorFormat.HEXA) == "#1890FF80"


def test_space_conversions_round_trip(brand_blue):
    for space in ("rgb", "hsl", "hsv", "hwb", "xyz", "lab", "lch", "oklab", "oklch"):
        value = brand_blue.to(space)
        assert value.mode == space
        assert Color.from_space(value) == brand_blue


def test_named_constructors():
    assert Color.from_hsl(0, 100, 50) == Color(255, 0, 0)
    assert Color.from_hsv(120, 100, 100) == Color(0, 255, 0)
    assert Color.from_hwb(240, 0, 0) == Color(0, 0, 255)
    assert Color.from_lab(100, 0, 0) == Color(255, 255, 255)
    assert Color.from_oklch(0, 0, 0) == Color(0, 0, 0)


def test_conversion_keeps_alpha():
    c = Color(10, 20, 30, alpha=0.25)
    assert c.to_lab().alpha == 0.25
    assert Color.from_space(c.to_oklch()).alpha == 0.25


def test_lighten_darken():
    base = Color.from_hsl(200, 50, 50)
    assert abs(base.lighten(20).to_hsl().l - 70) < 0.5
    assert abs(base.darken(20).to_hsl().l - 30) < 0.5
    assert base.lighten(80).to_hex() == "#FFFFFF"
    assert base.darken(80).to_hex() == "#000000"


def test_saturation_and_rotation():
    base = Color.from_hsl(200, 50, 50)
    assert abs(base.saturate(30).to_hsl().s - 80) < 1
    assert abs(base.desaturate(30).to_hsl().s - 20) < 1
    assert abs(base.rotate(180).to_hsl().h - 20) < 1
    gray = base.grayscale()
    assert gray.r == gray.g == gray.b


def test_invert_and_mix():
    assert Color(0, 128, 255).invert() == Color(255, 127, 0)
    black, white = Color(0, 0, 0), Color(255, 255, 255)
    assert black.mix(white).rgb == (128, 128, 128)
    assert black.mix(white, 0) == black
    assert black.mix("#FFFFFF", 1) == white
    half = black.mix(white.with_alpha(0), 0.5)
    assert half.alpha == 0.5


def test_parse_classmethod():
    assert Color.parse("red") == Color(255, 0, 0)
    assert Color.parse(HSL(0, 100, 50)) == Color(255, 0, 0)


def test_repr():
    assert repr(Color(255, 0, 0)) == "Color(#FF0000)"
    assert repr(Color(255, 0, 0, 0.5)) == "Color(#FF0000, alpha=0.5)"
