"""
Formula-driven N-step scales.

A scale sweeps one seed from its lightest to its darkest step around a
center step (``steps // 2 + 1``, i.e. 7 of 12 and 8 of 14) that stands for
the seed itself.

Chromatic scales work in HSV: towards the light end saturation falls to a
floor while value rises to a ceiling, towards the dark end saturation rises
to a ceiling while value falls to a floor. Dark-mode bounds are a
compressed version of the light-mode ones and dark palettes are returned in
reverse order.

Gray scales work in HSL with their own lightness curve and a triangular
saturation falloff from the center, scaled by the gray mix ratio.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple

from boundednumbers.functions import clamp

from ..colors.color import Color
from ..colors.parse import parse_color
from ..errors import ArgumentError
from ..semantic.deriver import check_mix_ratio
from ..utils.num_utils import normalize_hue, round_half_up
from .palette import Palette


@dataclass(frozen=True)
class ChromaticBounds:
    min_saturation: float
    max_saturation: float
    min_value: float
    max_value: float


@dataclass(frozen=True)
class GrayCurve:
    max_lightness: float
    min_lightness: float
    center_lightness: float
    saturation_factor: float


LIGHT_BOUNDS = ChromaticBounds(min_saturation=3, max_saturation=95, min_value=18, max_value=98)
DARK_BOUNDS = ChromaticBounds(min_saturation=8, max_saturation=90, min_value=12, max_value=85)

LIGHT_GRAY = GrayCurve(max_lightness=98, min_lightness=15, center_lightness=50, saturation_factor=8)
DARK_GRAY = GrayCurve(max_lightness=85, min_lightness=12, center_lightness=35, saturation_factor=12)

# Hue rotation used by arco-style palettes; 0 keeps the seed hue on every step
ARCO_HUE_STEP = 1.2


def center_step(steps: int) -> int:
    return steps // 2 + 1


def check_steps(steps: int) -> int:
    if steps < 2:
        raise ArgumentError(f"A scale needs at least 2 steps, got {steps}")
    return int(steps)


def closest_index(targets: Sequence[float], seed_value: float, prefer: Optional[int] = None) -> int:
    """
    Index of the target closest to ``seed_value``.

    Ties go to the index nearest ``prefer`` when given, else to the first one.
    """
    def key(i: int) -> Tuple[float, int]:
        return abs(targets[i] - seed_value), abs(i - prefer) if prefer is not None else i

    return min(range(len(targets)), key=key)


def _shift_hue(h: float, offset: int, hue_step: float, lighter: bool) -> float:
    # blues/greens cool down towards light, other hues warm up
    direction = -1 if 60 <= h <= 240 else 1
    if not lighter:
        direction = -direction
    return normalize_hue(h + direction * hue_step * offset)


def hsv_nudges(h: float, s: float, v: float, lighter: bool) -> Iterator[Color]:
    """
    Colors one unit at a time further from an HSV target.

    Lighter steps lose saturation and gain value, darker steps the reverse.
    Once that direction is exhausted the value moves the other way.
    """
    sign = 1 if lighter else -1
    for delta in range(1, 101):
        yield Color.from_hsv(h, clamp(s - sign * delta, 0, 100), clamp(v + sign * delta, 0, 100))
    for delta in range(1, 101):
        yield Color.from_hsv(h, s, clamp(v - sign * delta, 0, 100))


def hsl_nudges(h: float, s: float, l: float, lighter: bool) -> Iterator[Color]:
    """Colors one lightness unit at a time further from an HSL target."""
    sign = 1 if lighter else -1
    for delta in range(1, 101):
        yield Color.from_hsl(h, s, clamp(l + sign * delta, 0, 100))
    for delta in range(1, 101):
        yield Color.from_hsl(h, s, clamp(l - sign * delta, 0, 100))


def separate_from_seed(
    colors: List[Color],
    index: int,
    nudges: Callable[[int, bool], Iterator[Color]],
) -> List[Color]:
    """
    Keep the preserved seed at ``index`` the only step with its hex.

    Any other step rendering to the same hex is replaced by the first of
    ``nudges(step, lighter)`` that does not. Steps before ``index`` are the
    lighter ones.
    """
    seed_hex = colors[index].to_hex()
    for i, color in enumerate(colors):
        if i != index and color.to_hex() == seed_hex:
            colors[i] = next(c for c in nudges(i, i < index) if c.to_hex() != seed_hex)
    return colors


def chromatic_targets(
    seed: Color,
    steps: int,
    bounds: ChromaticBounds,
    hue_step: float = 0.0,
) -> List[Tuple[float, float, float]]:
    """Unadjusted HSV targets for steps 1..N in light-to-dark order."""
    h, s, v = seed.to_hsv()
    center = center_step(steps)
    light_span = center - 1
    dark_span = steps - center

    targets = []
    for step in range(1, steps + 1):
        if step < center:
            i = center - step
            new_s = max(bounds.min_saturation, s - (s - bounds.min_saturation) / light_span * i)
            new_v = min(bounds.max_value, v + (bounds.max_value - v) / light_span * i)
            new_h = _shift_hue(h, i, hue_step, lighter=True)
        elif step > center:
            i = step - center
            new_s = min(bounds.max_saturation, s + (bounds.max_saturation - s) / dark_span * i)
            new_v = max(bounds.min_value, v - (v - bounds.min_value) / dark_span * i)
            new_h = _shift_hue(h, i, hue_step, lighter=False)
        else:
            new_h, new_s, new_v = h, s, v
        targets.append((new_h, new_s, new_v))
    return targets


def generate_scale(
    seed: Any,
    steps: int = 12,
    dark: bool = False,
    preserve: bool = True,
    hue_step: float = 0.0,
) -> Palette:
    """
    Build an N-step chromatic scale from ``seed``.

    Args:
        seed: seed color, any input ``parse_color`` accepts
        steps: number of steps, at least 2
        dark: use the dark-mode bounds and reverse the result
        preserve: overwrite the step whose target value is closest to the
            seed's own with the exact seed
        hue_step: degrees of hue rotation per step away from the center
    Returns:
        Palette labelled 1..N; ``center`` is the label holding the seed.
    Raises:
        ArgumentError: steps < 2
    """
    steps = check_steps(steps)
    color = parse_color(seed)
    targets = chromatic_targets(color, steps, DARK_BOUNDS if dark else LIGHT_BOUNDS, hue_step)
    colors = [Color.from_hsv(h, s, v) for h, s, v in targets]

    center = center_step(steps) - 1
    if preserve:
        center = closest_index([v for _, _, v in targets], color.to_hsv().v, prefer=center)
        colors[center] = color.with_alpha(1.0)
        separate_from_seed(colors, center, lambda i, lighter: hsv_nudges(*targets[i], lighter))

    if dark:
        colors.reverse()
        center = steps - 1 - center
    return Palette.from_colors(colors, center=center + 1)


def gray_lightness(step: int, steps: int, curve: GrayCurve) -> float:
    center = center_step(steps)
    mid = curve.center_lightness
    if step < center:
        return mid + (curve.max_lightness - mid) * (center - step) / (center - 1)
    if step > center:
        return mid - (mid - curve.min_lightness) * (step - center) / (steps - center)
    return mid


def gray_saturation(step: int, steps: int, curve: GrayCurve, mix_ratio: float) -> float:
    center = center_step(steps)
    peak = curve.saturation_factor * mix_ratio
    return float(clamp(peak * (1 - abs(step - center) / center), 0, peak))


def generate_gray_scale(
    seed: Any,
    steps: int = 14,
    dark: bool = False,
    mix_primary: bool = True,
    mix_ratio: float = 0.2,
    preserve: bool = False,
) -> Palette:
    """
    Build an N-step gray scale tinted with the seed hue.

    Lightness and saturation are rounded to whole percentages. With
    ``mix_primary=False`` the scale is a pure neutral (hue 0, saturation 0).
    Gray scales keep light-to-dark order in both modes.
    """
    steps = check_steps(steps)
    color = parse_color(seed)
    curve = DARK_GRAY if dark else LIGHT_GRAY
    ratio = check_mix_ratio(mix_ratio) if mix_primary else 0.0
    hue = color.to_hsl().h if mix_primary else 0.0

    lightness = [gray_lightness(step, steps, curve) for step in range(1, steps + 1)]
    saturation = [round_half_up(gray_saturation(step, steps, curve, ratio)) for step in range(1, steps + 1)]
    colors = [Color.from_hsl(hue, s, round_half_up(l)) for s, l in zip(saturation, lightness)]

    center = center_step(steps) - 1
    if preserve:
        center = closest_index(lightness, color.to_hsl().l, prefer=center)
        colors[center] = color.with_alpha(1.0)
        separate_from_seed(colors, center, lambda i, lighter: hsl_nudges(hue, saturation[i], lightness[i], lighter))
    return Palette.from_colors(colors, center=center + 1)
