import pytest

from chromascale import ArgumentError, Color, generate_scale, generate_gray_scale
from chromascale.difference import relative_luminance
from chromascale.scales import ARCO_HUE_STEP, center_step, closest_index
from chromascale.scales.stepped import hsl_nudges, hsv_nudges, separate_from_seed


def test_center_step():
    assert center_step(12) == 7
    assert center_step(14) == 8
    assert center_step(2) == 2


def test_closest_index_ties():
    assert closest_index([10, 20, 30], 21) == 1
    assert closest_index([10, 20, 20, 10], 15) == 0
    assert closest_index([10, 20, 20, 10], 15, prefer=2) == 2
    assert closest_index([10, 20, 20, 10], 20, prefer=3) == 2


def test_light_scale_preserves_seed():
    palette = generate_scale("#1890FF")
    assert len(palette) == 12
    assert palette.labels == tuple(range(1, 13))
    assert palette.center == 7
    assert palette[7] == "#1890FF"
    assert palette.hexes().count("#1890FF") == 1


def test_light_scale_runs_light_to_dark():
    luminance = [relative_luminance(c) for c in generate_scale("#1890FF").colors]
    assert all(a >= b for a, b in zip(luminance, luminance[1:]))
    assert luminance[0] > 0.8


def test_dark_scale_is_reversed():
    light = generate_scale("#1890FF")
    dark = generate_scale("#1890FF", dark=True)
    assert dark.center == 6
    assert dark[6] == "#1890FF"
    luminance = [relative_luminance(c) for c in dark.colors]
    assert luminance[0] < luminance[-1]
    assert light.color(light.center).to_hsl().h == dark.color(dark.center).to_hsl().h


def test_seed_alpha_is_dropped():
    palette = generate_scale(Color.from_hex("#1890FF").with_alpha(0.3))
    assert palette.color(palette.center).alpha == 1.0


def test_scale_without_preserve():
    palette = generate_scale("#1890FF", preserve=False)
    assert palette.center == 7
    assert len(palette) == 12


def test_hue_step_rotates_outer_steps():
    plain = generate_scale("#1890FF")
    rotated = generate_scale("#1890FF", hue_step=ARCO_HUE_STEP)
    assert plain[7] == rotated[7]
    assert plain.hexes() != rotated.hexes()


def test_custom_step_counts():
    assert len(generate_scale("#52C41A", steps=2)) == 2
    assert len(generate_scale("#52C41A", steps=5)) == 5
    with pytest.raises(ArgumentError):
        generate_scale("#52C41A", steps=1)
    with pytest.raises(ArgumentError):
        generate_gray_scale("#52C41A", steps=0)


def test_gray_scale():
    palette = generate_gray_scale("#1890FF")
    assert len(palette) == 14
    assert palette.center == 8
    first, last = palette.color(1), palette.color(14)
    assert round(first.to_hsl().l) == 98
    assert round(last.to_hsl().l) == 15
    # tint stays faint
    for color in palette.colors:
        assert color.to_hsl().s < 10


def test_neutral_gray_scale():
    palette = generate_gray_scale("#1890FF", mix_primary=False)
    for color in palette.colors:
        assert color.r == color.g == color.b


def test_dark_gray_scale_keeps_order():
    palette = generate_gray_scale("#1890FF", dark=True, mix_primary=False)
    assert round(palette.color(1).to_hsl().l) == 85
    assert round(palette.color(14).to_hsl().l) == 12


def test_gray_scale_preserve():
    palette = generate_gray_scale("#1890FF", preserve=True)
    assert palette.center == 7
    assert palette[7] == "#1890FF"


SEED_LEVELS = (0, 15, 64, 128, 192, 240, 250, 255)
SEED_GRID = [
    f"#{r:02X}{g:02X}{b:02X}" for r in SEED_LEVELS for g in SEED_LEVELS for b in SEED_LEVELS
] + ["#FAF2F2", "#FAF0F0", "#1890FF", "#FEFEFE", "#010101", "#F5222D"]


@pytest.mark.parametrize("dark", [False, True])
def test_preserved_seed_appears_once(dark):
    for seed in SEED_GRID:
        palette = generate_scale(seed, dark=dark)
        assert palette[palette.center] == seed, seed
        assert palette.hexes().count(seed) == 1, seed


@pytest.mark.parametrize("dark", [False, True])
def test_preserved_gray_seed_appears_once(dark):
    for seed in SEED_GRID[::7] + ["#FAF2F2", "#FFFFFF", "#000000", "#808080"]:
        palette = generate_gray_scale(seed, dark=dark, preserve=True)
        assert palette[palette.center] == seed, seed
        assert palette.hexes().count(seed) == 1, seed


def test_near_white_seed_keeps_outer_steps_lighter():
    palette = generate_scale("#FAF2F2")
    assert palette[7] == "#FAF2F2"
    seed_value = palette.color(7).to_hsv().v
    for label in range(1, 7):
        assert palette.color(label).to_hsv().v >= seed_value


def test_separate_from_seed_falls_back_at_the_bounds():
    white = Color.from_hex("#FFFFFF")
    colors = separate_from_seed([white, white, white], 1, lambda i, lighter: hsv_nudges(0, 0, 100, lighter))
    assert [c.to_hex() for c in colors].count("#FFFFFF") == 1
    assert colors[1] is white

    black = Color.from_hex("#000000")
    colors = separate_from_seed([black, black], 0, lambda i, lighter: hsl_nudges(0, 0, 0, lighter))
    assert colors[1].to_hex() != "#000000"
