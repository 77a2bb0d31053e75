from .num_utils import clamp_channel, clamp_unit, clamp_percent, normalize_hue, round_half_up
from .dimension import get_dimension

__all__ = [
    'clamp_channel',
    'clamp_unit',
    'clamp_percent',
    'normalize_hue',
    'round_half_up',
    'get_dimension',
]
