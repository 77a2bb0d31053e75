"""
Palette containers.

Classes:
    Palette: immutable ordered mapping of step label -> hex string
    ThemePalettes: light and dark palettes per semantic role
"""
from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..colors.color import Color

Label = Union[int, str]


class Palette(Mapping):
    __slots__ = ('_labels', '_colors', '_center', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, entries: Iterable[Tuple[Label, Color]], center: Optional[Label] = None) -> None:
        labels: List[Label] = []
        colors: List[Color] = []
        for label, color in entries:
            if label in labels:
                raise ValueError(f"Duplicate palette label: {label!r}")
            labels.append(label)
            colors.append(color)
        if center is not None and center not in labels:
            raise ValueError(f"Center label {center!r} is not in the palette")

        self._labels = tuple(labels)
        self._colors = tuple(colors)
        self._center = center
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_colors(cls, colors: Sequence[Color], center: Optional[Label] = None, start: int = 1) -> Palette:
        """Label colors with consecutive integers starting at ``start``."""
        return cls(((start + i, c) for i, c in enumerate(colors)), center=center)

    # ------------------ MAPPING ------------------
    def __getitem__(self, label: Label) -> str:
        return self.color(label).to_hex()

    def __iter__(self) -> Iterator[Label]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __repr__(self) -> str:
        body = ", ".join(f"{label!r}: {c.to_hex()!r}" for label, c in zip(self._labels, self._colors))
        return f"Palette({{{body}}}, center={self._center!r})"

    # ------------------ ACCESSORS ------------------
    def color(self, label: Label) -> Color:
        try:
            return self._colors[self._labels.index(label)]
        except ValueError:
            raise KeyError(label) from None

    @property
    def labels(self) -> Tuple[Label, ...]:
        return self._labels

    @property
    def colors(self) -> Tuple[Color, ...]:
        return self._colors

    @property
    def center(self) -> Optional[Label]:
        """Label intended to hold the seed color."""
        return self._center

    def hexes(self) -> List[str]:
        return [c.to_hex() for c in self._colors]

    def to_dict(self) -> Dict[Label, str]:
        return dict(zip(self._labels, self.hexes()))


@dataclass(frozen=True)
class ThemePalettes:
    light: Dict[str, Palette] = field(default_factory=dict)
    dark: Dict[str, Palette] = field(default_factory=dict)

    @property
    def roles(self) -> Tuple[str, ...]:
        return tuple(self.light)

    def to_dict(self) -> Dict[str, Dict[str, Dict[Label, str]]]:
        return {
            "light": {role: p.to_dict() for role, p in self.light.items()},
            "dark": {role: p.to_dict() for role, p in self.dark.items()},
        }
