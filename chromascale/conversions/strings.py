"""
Hex and CSS functional-notation encodings.

Hex output is always upper-case ``#RRGGBB`` (``#RRGGBBAA`` when alpha is
requested). Hex input accepts 3, 4, 6 or 8 digits with an optional ``#``.
"""
import re
from typing import Optional, Tuple

from ..errors import InvalidColorInput
from ..utils.num_utils import clamp_channel, round_half_up

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+$")


def rgb_to_hex(r: float, g: float, b: float, alpha: Optional[float] = None) -> str:
    """Encode RGB (and optionally alpha in [0, 1]) as an upper-case hex string."""
    out = "#" + "".join(f"{clamp_channel(c):02X}" for c in (r, g, b))
    if alpha is not None:
        out += f"{clamp_channel(alpha * 255):02X}"
    return out


def hex_to_rgb(value: str) -> Tuple[int, int, int, Optional[float]]:
    """
    Decode a hex color.

    Returns:
        (r, g, b, alpha) where alpha is None unless the input carried one.
    Raises:
        InvalidColorInput: wrong length or non-hex characters.
    """
    digits = value.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if len(digits) not in (3, 4, 6, 8) or not _HEX_DIGITS.match(digits):
        raise InvalidColorInput(value, "expected 3, 4, 6 or 8 hex digits")

    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)

    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else None
    return r, g, b, alpha


def is_hex_color(value: str) -> bool:
    try:
        hex_to_rgb(value)
    except InvalidColorInput:
        return False
    return True


def _format_alpha(alpha: float) -> str:
    return f"{round(alpha, 3):g}"


def format_rgb_string(r: int, g: int, b: int, alpha: float = 1.0) -> str:
    """``rgb(r, g, b)`` or ``rgba(r, g, b, a)`` when alpha < 1."""
    if alpha < 1:
        return f"rgba({r}, {g}, {b}, {_format_alpha(alpha)})"
    return f"rgb({r}, {g}, {b})"


def format_hsl_string(h: float, s: float, l: float, alpha: float = 1.0) -> str:
    """``hsl(h, s%, l%)`` with integer components, ``hsla`` when alpha < 1."""
    h_i, s_i, l_i = (round_half_up(v) for v in (h, s, l))
    h_i %= 360
    if alpha < 1:
        return f"hsla({h_i}, {s_i}%, {l_i}%, {_format_alpha(alpha)})"
    return f"hsl({h_i}, {s_i}%, {l_i}%)"
