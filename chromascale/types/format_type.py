# No dependencies
from enum import Enum


class ColorFormat(str, Enum):
    HEX = "hex"
    HEXA = "hexa"
    RGB = "rgb"
    HSL = "hsl"
