"""
Immutable per-space color values.

Each class stores three float channels plus an alpha, exposes the channels
by name (``HSL(210, 50, 40).s``), iterates like a tuple and converts to any
other space with ``to()``. Hue channels are wrapped into [0, 360) and
bounded channels are clamped on construction.

Classes:
    SpaceValue: shared base
    RGB, HSL, HSV, HWB, XYZ, LAB, LCH, OKLAB, OKLCH
"""
from __future__ import annotations
from typing import ClassVar, Dict, Iterator, Optional, Tuple, Type

from boundednumbers.functions import clamp

from ..conversions.wrapper import convert
from ..types.color_types import ColorSpace, is_hue_space
from ..utils.num_utils import clamp_unit, normalize_hue

Range = Optional[Tuple[float, float]]


class SpaceValue:
    __slots__ = ('_value', '_alpha', '_is_frozen')

    mode: ClassVar[ColorSpace]
    channels: ClassVar[Tuple[str, str, str]]
    ranges: ClassVar[Tuple[Range, Range, Range]] = (None, None, None)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, a: float, b: float, c: float, alpha: float = 1.0) -> None:
        values = [float(a), float(b), float(c)]
        for i, bounds in enumerate(self.ranges):
            if bounds is not None:
                values[i] = float(clamp(values[i], *bounds))
        if is_hue_space(self.mode):
            hue = self.channels.index("h")
            values[hue] = normalize_hue(values[hue])

        self._value = tuple(values)
        self._alpha = clamp_unit(alpha)
        super().__setattr__('_is_frozen', True)

    def __getattr__(self, name: str) -> float:
        # only reached when normal lookup fails: resolve channel names
        if not name.startswith('_'):
            channels = type(self).channels
            if name in channels:
                return self._value[channels.index(name)]
        raise AttributeError(f"{self.__class__.__name__} has no attribute {name!r}")

    @property
    def value(self) -> Tuple[float, float, float]:
        return self._value

    @property
    def alpha(self) -> float:
        return self._alpha

    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int) -> float:
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpaceValue):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value and self._alpha == other._alpha

    def __hash__(self) -> int:
        return hash((self.mode, self._value, self._alpha))

    def __repr__(self) -> str:
        parts = ", ".join(f"{n}={v:.4g}" for n, v in zip(self.channels, self._value))
        if self._alpha < 1:
            parts += f", alpha={self._alpha:.4g}"
        return f"{self.__class__.__name__}({parts})"

    def rounded(self, ndigits: int = 0) -> Tuple[float, ...]:
        return tuple(round(v, ndigits) for v in self._value)

    def to(self, space: ColorSpace) -> SpaceValue:
        """Convert to another space, keeping alpha."""
        target = space_class(space)
        if target is type(self):
            return self
        return target(*convert(self._value, self.mode, target.mode), alpha=self._alpha)

    def with_alpha(self, alpha: float) -> SpaceValue:
        return type(self)(*self._value, alpha=alpha)


class RGB(SpaceValue):
    __slots__ = ()
    mode: ClassVar[ColorSpace] = "rgb"
    channels: ClassVar[Tuple[str, str, str]] = ("r", "g", "b")
    ranges = ((0.0, 255.0), (0.0, 255.0), (0.0, 255.0))


class HSL(SpaceValue):
    __slots__ = ()
    mode: ClassVar[ColorSpace] = "hsl"
    channels: ClassVar[Tuple[str, str, str]] = ("h", "s", "l")
    ranges = (None, (0.0, 100.0), (0.0, 100.0))


class HSV(SpaceValue):
    __slots__ = ()
    mode: ClassVar[ColorSpace] = "hsv"
    channels: ClassVar[Tuple[str, str, str]] = ("h", "s", "v")
    ranges = (None, (0.0, 100.0), (0.0, 100.0))


class HWB(SpaceValue):
    __slots__ = ()
    mode: ClassVar[ColorSpace] = "hwb"
    channels: ClassVar[Tuple[str, str, str]] = ("h", "w", "b")
    ranges = (None, (0.0, 100.0), (0.0, 100.0))


class XYZ(SpaceValue):
    __slots__ = ()
    mode: ClassVar[ColorSpace] = "xyz"
    channels: ClassVar[Tuple[str, str, str]] = ("x", "y", "z")


class LAB(SpaceValue):
    __slots__ = ()
    mode: ClassVar[ColorSpace] = "lab"
    channels: ClassVar[Tuple[str, str, str]] = ("l", "a", "b")
    ranges = ((0.0, 100.0), None, None)


class LCH(SpaceValue):
    __slots__ = ()
    mode: ClassVar[ColorSpace] = "lch"
    channels: ClassVar[Tuple[str, str, str]] = ("l", "c", "h")
    ranges = ((0.0, 100.0), None, None)


class OKLAB(SpaceValue):
    __slots__ = ()
    mode: ClassVar[ColorSpace] = "oklab"
    channels: ClassVar[Tuple[str, str, str]] = ("l", "a", "b")
    ranges = ((0.0, 1.0), None, None)


class OKLCH(SpaceValue):
    __slots__ = ()
    mode: ClassVar[ColorSpace] = "oklch"
    channels: ClassVar[Tuple[str, str, str]] = ("l", "c", "h")
    ranges = ((0.0, 1.0), None, None)


SPACE_CLASSES: Dict[str, Type[SpaceValue]] = {
    cls.mode: cls for cls in (RGB, HSL, HSV, HWB, XYZ, LAB, LCH, OKLAB, OKLCH)
}


def space_class(space: ColorSpace) -> Type[SpaceValue]:
    try:
        return SPACE_CLASSES[space.lower()]
    except KeyError:
        raise ValueError(f"Unknown color space: {space}") from None
