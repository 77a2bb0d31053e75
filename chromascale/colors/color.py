"""
The canonical Color value.

A Color is an 8-bit sRGB triple (ints in [0, 255]) plus an alpha in [0, 1].
It is immutable and hashable; every manipulation returns a new Color.
Conversions to the other spaces return the immutable values from
``chromascale.colors.spaces`` and never round, so ``Color.from_space`` of a
converted value reproduces the original color.

Features:
    - Construction from RGB ints, hex strings, any space value or any input
      accepted by ``parse_color``
    - Hex / rgb() / hsl() string encodings
    - Conversions to HSL, HSV, HWB, XYZ, LAB, LCH, OKLAB, OKLCH
    - HSL-based adjustments (lighten, darken, saturate, desaturate, rotate)
    - grayscale, invert, mix and alpha replacement
"""
from __future__ import annotations
from typing import Any

from boundednumbers.functions import clamp

from ..conversions.strings import rgb_to_hex, hex_to_rgb, format_rgb_string, format_hsl_string
from ..conversions.hsx import rgb_to_hsl
from ..types.color_types import ColorSpace, IntTriple
from ..types.format_type import ColorFormat
from ..utils.num_utils import clamp_channel, clamp_unit, normalize_hue
from .spaces import SpaceValue, RGB, HSL, HSV, HWB, XYZ, LAB, LCH, OKLAB, OKLCH


class Color:
    __slots__ = ('_value', '_alpha', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: float, g: float, b: float, alpha: float = 1.0) -> None:
        self._value = (clamp_channel(r), clamp_channel(g), clamp_channel(b))
        self._alpha = clamp_unit(alpha)
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def parse(cls, value: Any) -> Color:
        """Build a Color from any supported input (see ``parse_color``)."""
        from .parse import parse_color
        return parse_color(value)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        r, g, b, alpha = hex_to_rgb(value)
        return cls(r, g, b, 1.0 if alpha is None else alpha)

    @classmethod
    def from_space(cls, value: SpaceValue) -> Color:
        r, g, b = value.to("rgb")
        return cls(r, g, b, value.alpha)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, alpha: float = 1.0) -> Color:
        return cls.from_space(HSL(h, s, l, alpha))

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, alpha: float = 1.0) -> Color:
        return cls.from_space(HSV(h, s, v, alpha))

    @classmethod
    def from_hwb(cls, h: float, w: float, b: float, alpha: float = 1.0) -> Color:
        return cls.from_space(HWB(h, w, b, alpha))

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float, alpha: float = 1.0) -> Color:
        return cls.from_space(XYZ(x, y, z, alpha))

    @classmethod
    def from_lab(cls, l: float, a: float, b: float, alpha: float = 1.0) -> Color:
        return cls.from_space(LAB(l, a, b, alpha))

    @classmethod
    def from_lch(cls, l: float, c: float, h: float, alpha: float = 1.0) -> Color:
        return cls.from_space(LCH(l, c, h, alpha))

    @classmethod
    def from_oklab(cls, l: float, a: float, b: float, alpha: float = 1.0) -> Color:
        return cls.from_space(OKLAB(l, a, b, alpha))

    @classmethod
    def from_oklch(cls, l: float, c: float, h: float, alpha: float = 1.0) -> Color:
        return cls.from_space(OKLCH(l, c, h, alpha))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    @property
    def rgb(self) -> IntTriple:
        return self._value

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def is_opaque(self) -> bool:
        return self._alpha >= 1

    # ------------------ ENCODINGS ------------------
    def to_hex(self, alpha: bool = False) -> str:
        """``#RRGGBB``; with ``alpha=True`` and a translucent color, ``#RRGGBBAA``."""
        if alpha and self._alpha < 1:
            return rgb_to_hex(*self._value, alpha=self._alpha)
        return rgb_to_hex(*self._value)

    def to_rgb_string(self) -> str:
        return format_rgb_string(*self._value, alpha=self._alpha)

    def to_hsl_string(self) -> str:
        return format_hsl_string(*rgb_to_hsl(*self._value), alpha=self._alpha)

    def to_string(self, fmt: ColorFormat | str = ColorFormat.HEX) -> str:
        fmt = ColorFormat(fmt)
        if fmt == ColorFormat.RGB:
            return self.to_rgb_string()
        if fmt == ColorFormat.HSL:
            return self.to_hsl_string()
        return self.to_hex(alpha=fmt == ColorFormat.HEXA)

    # ------------------ CONVERSIONS ------------------
    def to(self, space: ColorSpace) -> SpaceValue:
        return RGB(*self._value, alpha=self._alpha).to(space)

    def to_rgb(self) -> RGB:
        return RGB(*self._value, alpha=self._alpha)

    def to_hsl(self) -> HSL:
        return self.to("hsl")

    def to_hsv(self) -> HSV:
        return self.to("hsv")

    def to_hwb(self) -> HWB:
        return self.to("hwb")

    def to_xyz(self) -> XYZ:
        return self.to("xyz")

    def to_lab(self) -> LAB:
        return self.to("lab")

    def to_lch(self) -> LCH:
        return self.to("lch")

    def to_oklab(self) -> OKLAB:
        return self.to("oklab")

    def to_oklch(self) -> OKLCH:
        return self.to("oklch")

    # ------------------ MANIPULATION ------------------
    def with_alpha(self, alpha: float) -> Color:
        return Color(*self._value, alpha=alpha)

    def lighten(self, amount: float) -> Color:
        """Add ``amount`` percentage points of HSL lightness."""
        h, s, l = self.to_hsl()
        return Color.from_hsl(h, s, clamp(l + amount, 0, 100), self._alpha)

    def darken(self, amount: float) -> Color:
        return self.lighten(-amount)

    def saturate(self, amount: float) -> Color:
        """Add ``amount`` percentage points of HSL saturation."""
        h, s, l = self.to_hsl()
        return Color.from_hsl(h, clamp(s + amount, 0, 100), l, self._alpha)

    def desaturate(self, amount: float) -> Color:
        return self.saturate(-amount)

    def rotate(self, degrees: float) -> Color:
        h, s, l = self.to_hsl()
        return Color.from_hsl(normalize_hue(h + degrees), s, l, self._alpha)

    def grayscale(self) -> Color:
        return self.desaturate(100)

    def invert(self) -> Color:
        r, g, b = self._value
        return Color(255 - r, 255 - g, 255 - b, self._alpha)

    def mix(self, other: Any, weight: float = 0.5) -> Color:
        """
        Linear blend in sRGB; ``weight`` is the share of ``other`` (0 keeps self).
        Alpha is blended with the same weight.
        """
        if not isinstance(other, Color):
            other = Color.parse(other)
        w = clamp_unit(weight)
        channels = (a * (1 - w) + b * w for a, b in zip(self._value, other._value))
        return Color(*channels, alpha=self._alpha * (1 - w) + other._alpha * w)

    # ------------------ DUNDER ------------------
    def __iter__(self):
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value and self._alpha == other._alpha

    def __hash__(self) -> int:
        return hash((self._value, self._alpha))

    def __repr__(self) -> str:
        if self._alpha < 1:
            return f"Color({self.to_hex()}, alpha={self._alpha:.3g})"
        return f"Color({self.to_hex()})"

    def __str__(self) -> str:
        return self.to_hex()
