"""Support for computing the difference between two or more colors"""
from collections.abc import Iterable
import enum
import math

from .vector import atan2_degrees, distance


class NBS(enum.Enum):
    """
    The verbal grades of color difference in NBS units. Each value is the
    lower limit of the grade's range.
    """
    TRACE = 0.0
    SLIGHT = 0.5
    NOTICEABLE = 1.5
    APPRECIABLE = 3.0
    MUCH = 6.0
    VERY_MUCH = 12.0


DE_TO_NBS = 0.92
"""
The factor for converting a CIELAB difference into NBS units, after Dental
Materials Journal 27(1), 139-144, 2008.
"""


def deltaE_cie76(
    L1: float, a1: float, b1: float,
    L2: float, a2: float, b2: float,
) -> float:
    """
    Determine the difference between two CIELAB colors with the CIE76
    formula, which is the Euclidian distance between the coordinates.
    """
    ΔL = L1 - L2
    Δa = a1 - a2
    Δb = b1 - b2
    return math.sqrt(ΔL * ΔL + Δa * Δa + Δb * Δb)


def _sin(degrees: float) -> float:
    return math.sin(math.radians(degrees))


def _cos(degrees: float) -> float:
    return math.cos(math.radians(degrees))


def deltaE_ciede2000(
    L1: float, a1: float, b1: float,
    L2: float, a2: float, b2: float,
    *,
    kL: float = 1,
    kC: float = 1,
    kH: float = 1,
) -> float:
    """
    Determine the difference between two CIELAB colors with the CIEDE2000
    formula. The implementation follows `Sharma, Wu, and Dalal
    <http://www2.ece.rochester.edu/~gsharma/ciede2000/ciede2000noteCRNA.pdf>`_.
    The weights ``kL``, ``kC``, and ``kH`` default to 1.
    """
    C1 = math.hypot(a1, b1)
    C2 = math.hypot(a2, b2)
    Cb7 = ((C1 + C2) / 2) ** 7
    G = 0.5 * (1 - math.sqrt(Cb7 / (Cb7 + 25 ** 7)))

    ap1 = (1 + G) * a1
    ap2 = (1 + G) * a2
    Cp1 = math.hypot(ap1, b1)
    Cp2 = math.hypot(ap2, b2)
    hp1 = 0.0 if b1 == 0 and ap1 == 0 else atan2_degrees(b1, ap1)
    hp2 = 0.0 if b2 == 0 and ap2 == 0 else atan2_degrees(b2, ap2)

    ΔLp = L2 - L1
    ΔCp = Cp2 - Cp1
    Δhp_raw = hp2 - hp1
    achromatic = Cp1 * Cp2 < 1e-10

    if achromatic:
        Δhp = 0.0
    elif abs(Δhp_raw) <= 180:
        Δhp = Δhp_raw
    elif Δhp_raw > 180:
        Δhp = Δhp_raw - 360
    else:
        Δhp = Δhp_raw + 360
    ΔHp = 2 * math.sqrt(Cp1 * Cp2) * _sin(Δhp / 2)

    Lbp = (L1 + L2) / 2
    Cbp = (Cp1 + Cp2) / 2
    if achromatic:
        hbp = hp1 + hp2
    elif abs(Δhp_raw) <= 180:
        hbp = (hp1 + hp2) / 2
    elif hp1 + hp2 < 360:
        hbp = (hp1 + hp2 + 360) / 2
    else:
        hbp = (hp1 + hp2 - 360) / 2

    T = (
        1
        - 0.17 * _cos(hbp - 30)
        + 0.24 * _cos(2 * hbp)
        + 0.32 * _cos(3 * hbp + 6)
        - 0.2 * _cos(4 * hbp - 63)
    )
    Δθ = 30 * math.exp(-(((hbp - 275) / 25) ** 2))
    Cbp7 = Cbp ** 7
    RC = 2 * math.sqrt(Cbp7 / (Cbp7 + 25 ** 7))
    SL = 1 + 0.015 * (Lbp - 50) ** 2 / math.sqrt(20 + (Lbp - 50) ** 2)
    SC = 1 + 0.045 * Cbp
    SH = 1 + 0.015 * Cbp * T
    RT = -_sin(2 * Δθ) * RC

    tL = ΔLp / (kL * SL)
    tC = ΔCp / (kC * SC)
    tH = ΔHp / (kH * SH)
    return math.sqrt(tL * tL + tC * tC + tH * tH + RT * tC * tH)


def nbs_of(delta_e: float) -> NBS:
    """Grade the CIELAB difference on the NBS scale."""
    units = delta_e * DE_TO_NBS
    grade = NBS.TRACE
    for candidate in NBS:
        if candidate.value <= units:
            grade = candidate
    return grade


def closest(
    origin: tuple[float, float, float],
    candidates: Iterable[tuple[float, float, float]],
) -> tuple[int, tuple[float, float, float]]:
    """
    Find the color closest to the origin amongst candidate colors.

    Args:
        origin: is the reference color in CIELAB coordinates
        candidates: are the colors to compare to, also in CIELAB coordinates
    Returns:
        the index and coordinates of the candidate color closest to the origin
        as measured by CIEDE2000, which are -1 and ``origin`` if the iterable
        is empty.

    This function iterates over the candidates only once and hence the iterable
    may also be an iterator.
    """
    min_ΔE = math.inf
    min_index = -1
    min_color = origin

    for index, color in enumerate(candidates):
        ΔE = deltaE_ciede2000(*origin, *color)
        if ΔE < min_ΔE:
            min_ΔE = ΔE
            min_index = index
            min_color = color

    return min_index, min_color
