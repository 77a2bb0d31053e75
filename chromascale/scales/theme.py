from __future__ import annotations
from typing import Any, Dict

from boundednumbers.functions import clamp

from ..colors.color import Color
from ..colors.parse import parse_color
from ..semantic.deriver import SemanticColors, derive_semantic_colors
from .palette import Palette, ThemePalettes
from .shades import TAILWIND_GRAY_SHADES, generate_neutral_scale, generate_tailwind_scale
from .stepped import generate_gray_scale, generate_scale

CHROMATIC_STEPS = 12
GRAY_STEPS = 14


def _mode_palettes(
    semantics: SemanticColors,
    dark: bool,
    gray_mix_primary: bool,
    gray_mix_ratio: float,
    steps: int,
    gray_steps: int,
    hue_step: float,
) -> Dict[str, Palette]:
    palettes = {}
    for role, color in semantics.as_dict().items():
        if role == "gray":
            continue
        palettes[role] = generate_scale(color, steps=steps, dark=dark, hue_step=hue_step)
    palettes["gray"] = generate_gray_scale(
        semantics.gray,
        steps=gray_steps,
        dark=dark,
        mix_primary=gray_mix_primary,
        mix_ratio=gray_mix_ratio,
    )
    return palettes


def generate_theme_palettes(
    primary: Any,
    gray_mix_primary: bool = True,
    gray_mix_ratio: float = 0.2,
    include_info: bool = False,
    steps: int = CHROMATIC_STEPS,
    gray_steps: int = GRAY_STEPS,
    hue_step: float = 0.0,
) -> ThemePalettes:
    """
    Light and dark palettes for every semantic role of ``primary``.

    ``primary`` may be a seed color or an already derived SemanticColors.
    Chromatic roles get ``steps``-step scales that preserve their seed; gray
    gets a ``gray_steps``-step gray scale.
    """
    if isinstance(primary, SemanticColors):
        semantics = primary
    else:
        semantics = derive_semantic_colors(
            primary,
            gray_mix_primary=gray_mix_primary,
            gray_mix_ratio=gray_mix_ratio,
            include_info=include_info,
        )
    options = dict(
        gray_mix_primary=gray_mix_primary,
        gray_mix_ratio=gray_mix_ratio,
        steps=steps,
        gray_steps=gray_steps,
        hue_step=hue_step,
    )
    return ThemePalettes(
        light=_mode_palettes(semantics, dark=False, **options),
        dark=_mode_palettes(semantics, dark=True, **options),
    )


def tailwind_semantic_bases(primary: Any) -> Dict[str, Color]:
    """Fixed-hue role seeds whose saturation follows the primary's."""
    color = parse_color(primary)
    s = color.to_hsl().s
    return {
        "primary": color,
        "success": Color.from_hsl(142, clamp(s * 0.9, 45, 70), 45),
        "warning": Color.from_hsl(38, clamp(s * 1.1, 60, 85), 50),
        "danger": Color.from_hsl(4, clamp(s, 50, 75), 50),
        "info": Color.from_hsl(210, clamp(s * 0.85, 40, 70), 50),
    }


def generate_tailwind_theme(primary: Any, preserve: bool = True) -> Dict[str, Palette]:
    """Tailwind-style role scales plus an untinted 14-shade gray."""
    palettes = {
        role: generate_tailwind_scale(seed, preserve=preserve)
        for role, seed in tailwind_semantic_bases(primary).items()
    }
    palettes["gray"] = generate_neutral_scale(TAILWIND_GRAY_SHADES)
    return palettes
