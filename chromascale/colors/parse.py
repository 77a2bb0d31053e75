"""
Color input parsing.

Inputs are first classified into a ``ColorInputKind`` and then resolved by
the matching reader, so every accepted shape is explicit:

    HEX          "#RGB", "#RGBA", "#RRGGBB", "#RRGGBBAA" ("#" optional)
    FUNCTIONAL   "rgb(...)", "rgba(...)", "hsl(...)", "hsla(...)"
    NAMED        CSS keywords such as "rebeccapurple", plus "transparent"
    TUPLE        (r, g, b) or (r, g, b, a)
    RGB_RECORD   {"r", "g", "b"[, "a"]}
    HSL_RECORD   {"h", "s", "l"[, "a"]}
    HSV_RECORD   {"h", "s", "v"[, "a"]}
    HWB_RECORD   {"h", "w", "b"[, "a"]}
    COLOR        an existing Color
    SPACE        any space value (HSL(...), LAB(...), ...)

Anything else raises ``InvalidColorInput``.
"""
import re
from enum import Enum
from numbers import Real
from typing import Any, Callable, Dict, List, Mapping, Sequence, Tuple

import numpy as np

from ..errors import InvalidColorInput
from ..conversions.strings import hex_to_rgb
from ..types.color_types import ColorInput, IntTriple
from ..utils.dimension import get_dimension
from ..utils.num_utils import clamp_channel, clamp_unit
from .color import Color
from .named import lookup_named_color
from .spaces import SpaceValue, HSL, HSV, HWB


class ColorInputKind(str, Enum):
    HEX = "hex"
    FUNCTIONAL = "functional"
    NAMED = "named"
    TUPLE = "tuple"
    RGB_RECORD = "rgb_record"
    HSL_RECORD = "hsl_record"
    HSV_RECORD = "hsv_record"
    HWB_RECORD = "hwb_record"
    COLOR = "color"
    SPACE = "space"


# Checked in order; the first complete key set wins
RECORD_KEYS: Tuple[Tuple[ColorInputKind, Tuple[str, str, str]], ...] = (
    (ColorInputKind.RGB_RECORD, ("r", "g", "b")),
    (ColorInputKind.HSL_RECORD, ("h", "s", "l")),
    (ColorInputKind.HSV_RECORD, ("h", "s", "v")),
    (ColorInputKind.HWB_RECORD, ("h", "w", "b")),
)

_FUNCTIONAL = re.compile(r"^\s*([a-z]+)\s*\((.*)\)\s*$", re.IGNORECASE)
_SEPARATORS = re.compile(r"[\s,/]+")
_NUMBER = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)(%|deg)?$", re.IGNORECASE)


def classify_input(value: Any) -> ColorInputKind:
    """Tag an input with the reader that will resolve it."""
    if isinstance(value, Color):
        return ColorInputKind.COLOR
    if isinstance(value, SpaceValue):
        return ColorInputKind.SPACE
    if isinstance(value, str):
        text = value.strip().lower()
        if text == "transparent" or lookup_named_color(text) is not None:
            return ColorInputKind.NAMED
        if "(" in text:
            return ColorInputKind.FUNCTIONAL
        return ColorInputKind.HEX
    if isinstance(value, Mapping):
        keys = set(value.keys())
        for kind, required in RECORD_KEYS:
            if keys.issuperset(required):
                return kind
        raise InvalidColorInput(value, "mapping has no r/g/b, h/s/l, h/s/v or h/w/b channels")
    if isinstance(value, (Sequence, np.ndarray)) and not isinstance(value, (bytes, bytearray)):
        dim = get_dimension(value)
        if dim not in (3, 4):
            raise InvalidColorInput(value, f"expected 3 or 4 components, got {dim}")
        return ColorInputKind.TUPLE
    raise InvalidColorInput(value, f"unsupported type {type(value).__name__}")


def _as_number(value: Any, source: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (Real, np.number)):
        raise InvalidColorInput(source, f"non-numeric component {value!r}")
    return float(value)


def _alpha_of(record: Mapping[str, Any]) -> float:
    for key in ("a", "alpha"):
        if key in record and record[key] is not None:
            return clamp_unit(_as_number(record[key], record))
    return 1.0


def _read_hex(value: str) -> Tuple[IntTriple, float]:
    r, g, b, alpha = hex_to_rgb(value)
    return (r, g, b), 1.0 if alpha is None else alpha


def _read_named(value: str) -> Tuple[IntTriple, float]:
    text = value.strip().lower()
    if text == "transparent":
        return (0, 0, 0), 0.0
    return _read_hex(lookup_named_color(text))


def _split_components(body: str, source: str) -> List[Tuple[float, str]]:
    parts = [p for p in _SEPARATORS.split(body.strip()) if p]
    out = []
    for part in parts:
        match = _NUMBER.match(part)
        if match is None:
            raise InvalidColorInput(source, f"cannot parse component {part!r}")
        out.append((float(match.group(1)), (match.group(2) or "").lower()))
    return out


def _functional_alpha(component: Tuple[float, str]) -> float:
    number, unit = component
    return clamp_unit(number / 100 if unit == "%" else number)


def _read_functional(value: str) -> Tuple[IntTriple, float]:
    match = _FUNCTIONAL.match(value)
    if match is None:
        raise InvalidColorInput(value, "malformed functional notation")
    name = match.group(1).lower()
    components = _split_components(match.group(2), value)
    if len(components) not in (3, 4):
        raise InvalidColorInput(value, f"expected 3 or 4 components, got {len(components)}")
    alpha = _functional_alpha(components[3]) if len(components) == 4 else 1.0

    if name in ("rgb", "rgba"):
        channels = (n * 2.55 if unit == "%" else n for n, unit in components[:3])
        return tuple(clamp_channel(c) for c in channels), alpha
    if name in ("hsl", "hsla"):
        (h, _), (s, _), (l, _) = components[:3]
        return Color.from_space(HSL(h, s, l)).rgb, alpha
    raise InvalidColorInput(value, f"unknown color function {name!r}")


def _read_tuple(value: Sequence[Any]) -> Tuple[IntTriple, float]:
    numbers = [_as_number(v, value) for v in value]
    alpha = clamp_unit(numbers[3]) if len(numbers) == 4 else 1.0
    return tuple(clamp_channel(c) for c in numbers[:3]), alpha


def _record_reader(kind: ColorInputKind) -> Callable[[Mapping[str, Any]], Tuple[IntTriple, float]]:
    keys = dict(RECORD_KEYS)[kind]
    space = {ColorInputKind.HSL_RECORD: HSL, ColorInputKind.HSV_RECORD: HSV, ColorInputKind.HWB_RECORD: HWB}.get(kind)

    def read(record: Mapping[str, Any]) -> Tuple[IntTriple, float]:
        channels = [_as_number(record[k], record) for k in keys]
        if space is None:
            rgb = tuple(clamp_channel(c) for c in channels)
        else:
            rgb = Color.from_space(space(*channels)).rgb
        return rgb, _alpha_of(record)

    return read


READERS: Dict[ColorInputKind, Callable[[Any], Tuple[IntTriple, float]]] = {
    ColorInputKind.HEX: _read_hex,
    ColorInputKind.NAMED: _read_named,
    ColorInputKind.FUNCTIONAL: _read_functional,
    ColorInputKind.TUPLE: _read_tuple,
    ColorInputKind.RGB_RECORD: _record_reader(ColorInputKind.RGB_RECORD),
    ColorInputKind.HSL_RECORD: _record_reader(ColorInputKind.HSL_RECORD),
    ColorInputKind.HSV_RECORD: _record_reader(ColorInputKind.HSV_RECORD),
    ColorInputKind.HWB_RECORD: _record_reader(ColorInputKind.HWB_RECORD),
    ColorInputKind.COLOR: lambda c: (c.rgb, c.alpha),
    ColorInputKind.SPACE: lambda v: (Color.from_space(v).rgb, v.alpha),
}


def parse_rgba(value: ColorInput) -> Tuple[IntTriple, float]:
    """
    Resolve any supported input to ``((r, g, b), alpha)``.

    Raises:
        InvalidColorInput: the input shape or content is not understood.
    """
    return READERS[classify_input(value)](value)


def parse_color(value: ColorInput) -> Color:
    """Resolve any supported input to a Color."""
    if isinstance(value, Color):
        return value
    rgb, alpha = parse_rgba(value)
    return Color(*rgb, alpha=alpha)


def is_valid_color(value: Any) -> bool:
    try:
        parse_rgba(value)
    except InvalidColorInput:
        return False
    return True
