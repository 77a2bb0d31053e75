import math
from boundednumbers.functions import clamp

HUE_360 = 360


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values, like the browser's Math.round."""
    return int(math.floor(value + 0.5))


def clamp_channel(value: float) -> int:
    """Clamp an 8-bit channel to [0, 255] and round it to an int."""
    return round_half_up(clamp(float(value), 0.0, 255.0))


def clamp_unit(value: float) -> float:
    return float(clamp(float(value), 0.0, 1.0))


def clamp_percent(value: float) -> float:
    return float(clamp(float(value), 0.0, 100.0))


def normalize_hue(hue: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    hue = hue % HUE_360
    # -1e-17 % 360 gives 360.0 in float arithmetic
    return 0.0 if hue >= HUE_360 else hue
