"""
Perceptual color difference (Delta E).

Every function accepts anything ``parse_color`` understands and measures in
CIELAB (OKLAB for ``delta_e_ok``). Results are unrounded.

Interpretation of a Delta E value:
    0       identical
    < 1     imperceptible
    1 - 2   barely perceptible
    2 - 10  visible at a glance
    > 10    distinct colors
"""
import math
from enum import Enum
from typing import Any, Tuple

from ..colors.parse import parse_color
from ..errors import ArgumentError

POW7_25 = 25 ** 7


class DeltaEAlgorithm(str, Enum):
    CIE76 = "76"
    CIE94 = "94"
    CIE2000 = "2000"
    CMC = "cmc"
    OKLAB = "oklab"


class Application(str, Enum):
    GRAPHIC_ARTS = "graphic-arts"
    TEXTILES = "textiles"


# (K1, K2) weighting of CIE94 per application
CIE94_WEIGHTS = {
    Application.GRAPHIC_ARTS: (0.045, 0.015),
    Application.TEXTILES: (0.048, 0.014),
}

# Just-noticeable difference per algorithm
JND_THRESHOLDS = {
    DeltaEAlgorithm.CIE76: 2.3,
    DeltaEAlgorithm.CIE94: 2.5,
    DeltaEAlgorithm.CIE2000: 2.3,
    DeltaEAlgorithm.CMC: 2.3,
    DeltaEAlgorithm.OKLAB: 2.3,
}


def resolve_algorithm(algorithm: Any) -> DeltaEAlgorithm:
    try:
        return DeltaEAlgorithm(str(algorithm).lower())
    except ValueError:
        raise ArgumentError(f"Unknown Delta E algorithm: {algorithm!r}") from None


def _lab(color: Any) -> Tuple[float, float, float]:
    return parse_color(color).to_lab().value


def delta_e_76(color1: Any, color2: Any) -> float:
    """Euclidean distance in CIELAB."""
    l1, a1, b1 = _lab(color1)
    l2, a2, b2 = _lab(color2)
    return math.sqrt((l1 - l2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


def delta_e_94(color1: Any, color2: Any, application: Application | str = Application.GRAPHIC_ARTS) -> float:
    """CIE94; ``color1`` is the reference whose chroma scales SC and SH."""
    try:
        k1, k2 = CIE94_WEIGHTS[Application(application)]
    except ValueError:
        raise ArgumentError(f"Unknown CIE94 application: {application!r}") from None

    l1, a1, b1 = _lab(color1)
    l2, a2, b2 = _lab(color2)

    c1 = math.hypot(a1, b1)
    c2 = math.hypot(a2, b2)
    dl = l1 - l2
    dc = c1 - c2
    da = a1 - a2
    db = b1 - b2
    dh = math.sqrt(max(0.0, da * da + db * db - dc * dc))

    sl = 1.0
    sc = 1 + k1 * c1
    sh = 1 + k2 * c1
    return math.sqrt((dl / sl) ** 2 + (dc / sc) ** 2 + (dh / sh) ** 2)


def delta_e_2000(color1: Any, color2: Any) -> float:
    """CIEDE2000 with kL = kC = kH = 1. Symmetric in its arguments."""
    L1, a1, b1 = _lab(color1)
    L2, a2, b2 = _lab(color2)

    C1 = math.hypot(a1, b1)
    C2 = math.hypot(a2, b2)
    C_bar_7 = ((C1 + C2) / 2) ** 7
    G = 0.5 * (1 - math.sqrt(C_bar_7 / (C_bar_7 + POW7_25)))

    a1_prime = (1 + G) * a1
    a2_prime = (1 + G) * a2
    C1_prime = math.hypot(a1_prime, b1)
    C2_prime = math.hypot(a2_prime, b2)

    h1_prime = math.degrees(math.atan2(b1, a1_prime)) % 360
    h2_prime = math.degrees(math.atan2(b2, a2_prime)) % 360

    delta_L = L2 - L1
    delta_C = C2_prime - C1_prime
    chroma_product = C1_prime * C2_prime

    if chroma_product == 0:
        delta_h = 0.0
    elif abs(h2_prime - h1_prime) <= 180:
        delta_h = h2_prime - h1_prime
    elif h2_prime - h1_prime > 180:
        delta_h = h2_prime - h1_prime - 360
    else:
        delta_h = h2_prime - h1_prime + 360

    delta_H = 2 * math.sqrt(chroma_product) * math.sin(math.radians(delta_h) / 2)

    L_bar = (L1 + L2) / 2
    C_prime_bar = (C1_prime + C2_prime) / 2

    if chroma_product == 0:
        h_bar = h1_prime + h2_prime
    elif abs(h1_prime - h2_prime) <= 180:
        h_bar = (h1_prime + h2_prime) / 2
    elif h1_prime + h2_prime < 360:
        h_bar = (h1_prime + h2_prime + 360) / 2
    else:
        h_bar = (h1_prime + h2_prime - 360) / 2

    T = (
        1
        - 0.17 * math.cos(math.radians(h_bar - 30))
        + 0.24 * math.cos(math.radians(2 * h_bar))
        + 0.32 * math.cos(math.radians(3 * h_bar + 6))
        - 0.20 * math.cos(math.radians(4 * h_bar - 63))
    )

    S_L = 1 + (0.015 * (L_bar - 50) ** 2) / math.sqrt(20 + (L_bar - 50) ** 2)
    S_C = 1 + 0.045 * C_prime_bar
    S_H = 1 + 0.015 * C_prime_bar * T

    delta_theta = 30 * math.exp(-(((h_bar - 275) / 25) ** 2))
    C_prime_bar_7 = C_prime_bar ** 7
    R_C = 2 * math.sqrt(C_prime_bar_7 / (C_prime_bar_7 + POW7_25))
    R_T = -R_C * math.sin(math.radians(2 * delta_theta))

    return math.sqrt(max(0.0,
        (delta_L / S_L) ** 2
        + (delta_C / S_C) ** 2
        + (delta_H / S_H) ** 2
        + R_T * (delta_C / S_C) * (delta_H / S_H)
    ))


def delta_e_cmc(color1: Any, color2: Any, l: float = 2.0, c: float = 1.0) -> float:
    """
    CMC l:c. ``color1`` is the reference, so the measure is not symmetric.
    l=2, c=1 is the acceptability form; l=1, c=1 the perceptibility form.
    """
    L1, a1, b1 = _lab(color1)
    L2, a2, b2 = _lab(color2)

    C1 = math.hypot(a1, b1)
    C2 = math.hypot(a2, b2)
    dL = L1 - L2
    dC = C1 - C2
    da = a1 - a2
    db = b1 - b2
    dH = math.sqrt(max(0.0, da * da + db * db - dC * dC))

    H1 = math.degrees(math.atan2(b1, a1)) % 360
    C1_4 = C1 ** 4
    F = math.sqrt(C1_4 / (C1_4 + 1900))
    if 164 <= H1 <= 345:
        T = 0.56 + abs(0.2 * math.cos(math.radians(H1 + 168)))
    else:
        T = 0.36 + abs(0.4 * math.cos(math.radians(H1 + 35)))

    S_L = 0.511 if L1 < 16 else 0.040975 * L1 / (1 + 0.01765 * L1)
    S_C = 0.0638 * C1 / (1 + 0.0131 * C1) + 0.638
    S_H = S_C * (F * T + 1 - F)

    return math.sqrt((dL / (l * S_L)) ** 2 + (dC / (c * S_C)) ** 2 + (dH / S_H) ** 2)


def delta_e_ok(color1: Any, color2: Any) -> float:
    """Euclidean distance in OKLAB (L on the 0-1 scale)."""
    l1, a1, b1 = parse_color(color1).to_oklab().value
    l2, a2, b2 = parse_color(color2).to_oklab().value
    return math.sqrt((l1 - l2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


def delta_e(
    color1: Any,
    color2: Any,
    algorithm: DeltaEAlgorithm | str = DeltaEAlgorithm.CIE2000,
    application: Application | str = Application.GRAPHIC_ARTS,
    lightness: float = 2.0,
    chroma: float = 1.0,
) -> float:
    """Dispatch to the requested Delta E formula."""
    algorithm = resolve_algorithm(algorithm)
    if algorithm == DeltaEAlgorithm.CIE76:
        return delta_e_76(color1, color2)
    if algorithm == DeltaEAlgorithm.CIE94:
        return delta_e_94(color1, color2, application)
    if algorithm == DeltaEAlgorithm.CMC:
        return delta_e_cmc(color1, color2, lightness, chroma)
    if algorithm == DeltaEAlgorithm.OKLAB:
        return delta_e_ok(color1, color2)
    return delta_e_2000(color1, color2)


def interpret_delta_e(value: float) -> str:
    if value <= 0:
        return "identical"
    if value < 1:
        return "imperceptible"
    if value < 2:
        return "barely perceptible"
    if value <= 10:
        return "visible"
    return "distinct"
