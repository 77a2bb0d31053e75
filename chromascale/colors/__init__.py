from .spaces import SpaceValue, RGB, HSL, HSV, HWB, XYZ, LAB, LCH, OKLAB, OKLCH, SPACE_CLASSES, space_class
from .color import Color
from .named import NAMED_COLORS, lookup_named_color, get_color_name
from .parse import ColorInputKind, classify_input, parse_rgba, parse_color, is_valid_color

__all__ = [
    'SpaceValue',
    'RGB',
    'HSL',
    'HSV',
    'HWB',
    'XYZ',
    'LAB',
    'LCH',
    'OKLAB',
    'OKLCH',
    'SPACE_CLASSES',
    'space_class',
    'Color',
    'NAMED_COLORS',
    'lookup_named_color',
    'get_color_name',
    'ColorInputKind',
    'classify_input',
    'parse_rgba',
    'parse_color',
    'is_valid_color',
]
