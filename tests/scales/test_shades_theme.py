import pytest

from chromascale import derive_semantic_colors, generate_theme_palettes, generate_tailwind_theme
from chromascale.scales import (
    ANTD_SHADES, GRAY_SHADES, MATERIAL_SHADES, TAILWIND_GRAY_SHADES, TAILWIND_SHADES,
    generate_shade_scale, generate_tailwind_scale, generate_natural_scale, generate_neutral_scale,
)


def test_tailwind_scale_preserves_seed():
    palette = generate_tailwind_scale("#1890FF")
    assert palette.labels == ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950", "1000")
    assert palette.center == "500"
    assert palette["500"] == "#1890FF"


def test_tailwind_scale_without_preserve():
    palette = generate_tailwind_scale("#1890FF", preserve=False)
    assert palette.center is None
    assert round(palette.color("50").to_hsl().l) == 98


def test_other_tables():
    material = generate_shade_scale("#1890FF", MATERIAL_SHADES)
    assert "A400" in material
    natural = generate_natural_scale("#1890FF")
    assert len(natural) == 12
    assert natural.color("50").to_hsl().s < generate_tailwind_scale("#1890FF").color("50").to_hsl().s
    antd = generate_shade_scale("#1890FF", ANTD_SHADES)
    assert antd.labels == tuple(str(i) for i in range(1, 13))
    assert antd.center == "6"
    assert antd["6"] == "#1890FF"
    assert round(antd.color("1").to_hsl().l) == 97
    gray = generate_shade_scale("#1890FF", GRAY_SHADES)
    assert len(gray) == 14
    assert "150" in gray and "850" in gray
    assert gray.center == "500"
    assert gray["500"] == "#1890FF"
    assert generate_neutral_scale(GRAY_SHADES)["1000"] == "#080808"
    with pytest.raises(ValueError):
        generate_shade_scale("#1890FF", ())


def test_shade_tables_keep_seed_unique():
    for table in (TAILWIND_SHADES, GRAY_SHADES, MATERIAL_SHADES, ANTD_SHADES):
        for seed in ("#FAF2F2", "#FFFFFF", "#000000", "#F7F7F7", "#080808", "#1890FF"):
            palette = generate_shade_scale(seed, table)
            assert palette[palette.center] == seed
            assert palette.hexes().count(seed) == 1, (seed, palette.center)


def test_neutral_scale():
    palette = generate_neutral_scale()
    assert len(palette) == len(TAILWIND_GRAY_SHADES) == 14
    for color in palette.colors:
        assert color.r == color.g == color.b


def test_theme_palettes():
    theme = generate_theme_palettes("#1890FF")
    assert theme.roles == ("primary", "success", "warning", "danger", "gray")
    assert set(theme.dark) == set(theme.light)
    assert theme.light["primary"][7] == "#1890FF"
    assert theme.dark["primary"][6] == "#1890FF"
    assert len(theme.light["gray"]) == 14
    assert len(theme.dark["danger"]) == 12


def test_theme_scales_preserve_role_seeds():
    roles = derive_semantic_colors("#1890FF")
    theme = generate_theme_palettes(roles)
    for role in ("success", "warning", "danger"):
        palette = theme.light[role]
        assert palette[palette.center] == getattr(roles, role).to_hex()


def test_theme_with_info_and_custom_steps():
    theme = generate_theme_palettes("#1890FF", include_info=True, steps=10, gray_steps=9)
    assert "info" in theme.light
    assert len(theme.light["info"]) == 10
    assert len(theme.dark["gray"]) == 9
    assert set(theme.to_dict()) == {"light", "dark"}


def test_tailwind_theme():
    palettes = generate_tailwind_theme("#1890FF")
    assert list(palettes) == ["primary", "success", "warning", "danger", "info", "gray"]
    assert palettes["primary"]["500"] == "#1890FF"
    assert len(palettes["gray"]) == 14
