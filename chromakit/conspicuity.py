"""
Conspicuity of colors, after *Effective use of color conspicuity for
Re-Coloring system*, Correspondences on Human Interface 12(1), 2010.
"""
from .vector import atan2_degrees


_PEAK_HUE = 35
"""The CIELAB hue angle in degrees offset by 180 from the most conspicuous hue."""


def conspicuity_of_lab(L: float, a: float, b: float) -> float:
    """
    Determine the conspicuity of the CIELAB color as a number between 0 and
    180. It depends on hue only. Reddish hues score highest, bluish ones lowest.
    """
    h = atan2_degrees(b, a)
    if h < _PEAK_HUE:
        return abs(180 - (360 + h - _PEAK_HUE))
    return abs(180 - (h - _PEAK_HUE))
