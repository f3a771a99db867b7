"""
Simulation of color vision deficiencies and age-related change.

Dichromacy is simulated in the LMS cone space by projecting onto the plane
that protanopes or deuteranopes perceive, after Brettel, Viénot, and Mollon,
*Computerized simulation of color appearance for dichromats*, JOSA A 14, 1997.
:attr:`.VisionModel.OKAJIMA2007` additionally rescales the projection so that
the unaffected cone's stimulation is preserved, after Okajima and Kanbe,
*A Real-time Color Simulation of Dichromats*, IEICE technical report 107(117),
2007.

Age-related change shifts CIELAB hue and scales chroma, after Okajima, *Human
Color Vision Mechanism and its Age-Related Change*, IEICE technical report
109(249), 2009.
"""
import math

from .conversion import lms_to_xyz, lrgb_to_xyz, xyz_to_lms, xyz_to_lrgb
from .spec import VisionModel
from .vector import Matrix, multiply, Vector


_BRETTEL_PROTANOPIA: Matrix = (
    (0.0, 2.02344, -2.52581),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
)

_BRETTEL_DEUTERANOPIA: Matrix = (
    (1.0, 0.0, 0.0),
    (0.494207, 0.0, 1.24827),
    (0.0, 0.0, 1.0),
)

# The cone responses to equal-energy white and to linear sRGB white
_LMS_BASE = xyz_to_lms(1, 1, 1)
_LRGB_BASE = xyz_to_lms(*lrgb_to_xyz(1, 1, 1))


def _correct(
    simulated: Vector, kept: float, kept_index: int, base: Vector, alpha: float, beta: float
) -> Vector:
    """Rescale the simulated response to preserve the stimulation of the kept cone."""
    d0, d1, d2 = (v / b for v, b in zip(simulated, base))
    weight = beta if kept_index == 1 else alpha
    k = weight * (kept / base[kept_index]) / (alpha * d0 + beta * d1)
    return k * d0 * base[0], k * d1 * base[1], k * d2 * base[2]


def _protanopia(
    lms: Vector, base: Vector, model: VisionModel, alpha: float, beta: float
) -> Vector:
    simulated = multiply(_BRETTEL_PROTANOPIA, lms)
    if model is VisionModel.OKAJIMA2007:
        simulated = _correct(simulated, lms[1], 1, base, alpha, beta)
    return simulated


def _deuteranopia(
    lms: Vector, base: Vector, model: VisionModel, alpha: float, beta: float
) -> Vector:
    simulated = multiply(_BRETTEL_DEUTERANOPIA, lms)
    if model is VisionModel.OKAJIMA2007:
        simulated = _correct(simulated, lms[0], 0, base, alpha, beta)
    return simulated


def lms_to_protanopia(
    L: float,
    M: float,
    S: float,
    *,
    model: VisionModel = VisionModel.BRETTEL1997,
    alpha: float = 1,
    beta: float = 1,
) -> Vector:
    """Simulate how a protanope perceives the LMS color."""
    return _protanopia((L, M, S), _LMS_BASE, model, alpha, beta)


def lms_to_deuteranopia(
    L: float,
    M: float,
    S: float,
    *,
    model: VisionModel = VisionModel.BRETTEL1997,
    alpha: float = 1,
    beta: float = 1,
) -> Vector:
    """Simulate how a deuteranope perceives the LMS color."""
    return _deuteranopia((L, M, S), _LMS_BASE, model, alpha, beta)


def lrgb_to_protanopia(
    r: float,
    g: float,
    b: float,
    *,
    model: VisionModel = VisionModel.BRETTEL1997,
    alpha: float = 1,
    beta: float = 1,
) -> Vector:
    """
    Simulate how a protanope perceives the linear sRGB color. The input is
    first compressed into the range displayable for protanopes. The result is
    in linear sRGB, too.
    """
    adjusted = (0.992052 * r + 0.003974, 0.992052 * g + 0.003974, 0.992052 * b + 0.003974)
    lms = xyz_to_lms(*lrgb_to_xyz(*adjusted))
    return xyz_to_lrgb(*lms_to_xyz(*_protanopia(lms, _LRGB_BASE, model, alpha, beta)))


def lrgb_to_deuteranopia(
    r: float,
    g: float,
    b: float,
    *,
    model: VisionModel = VisionModel.BRETTEL1997,
    alpha: float = 1,
    beta: float = 1,
) -> Vector:
    """
    Simulate how a deuteranope perceives the linear sRGB color. The input is
    first compressed into the range displayable for deuteranopes. The result
    is in linear sRGB, too.
    """
    adjusted = (0.957237 * r + 0.0213814, 0.957237 * g + 0.0213814, 0.957237 * b + 0.0213814)
    lms = xyz_to_lms(*lrgb_to_xyz(*adjusted))
    return xyz_to_lrgb(*lms_to_xyz(*_deuteranopia(lms, _LRGB_BASE, model, alpha, beta)))


# --------------------------------------------------------------------------------------
# Age-Related Change


def _hue_radians(a: float, b: float) -> float:
    angle = math.atan2(b, a)
    return angle + 2 * math.pi if angle < 0 else angle


def _hue_shift(a: float, b: float) -> float:
    """The hue shift between age 20 and age 70, in radians."""
    p = _hue_radians(a, b)
    return math.radians(4.5 * math.cos(2 * math.pi * (p - 28.8) / 50.9) + 4.4)


def _chroma_ratio(a: float, b: float) -> float:
    c = math.hypot(a, b)
    return (
        0.83 * math.exp(-c / 13.3)
        - (1 / 8) * math.exp(-(c - 50) * (c - 50) / (3000 * 3000))
        + 1
    )


def lab_to_elderly_ab(L: float, a: float, b: float) -> Vector:
    """
    Simulate how a 70-year-old perceives the CIELAB color seen by a 20-year-old.
    Only hue and chroma change.
    """
    angle = _hue_radians(a, b) + _hue_shift(a, b)
    c = math.hypot(a, b) * _chroma_ratio(a, b)
    return L, c * math.cos(angle), c * math.sin(angle)


def lab_to_young_ab(L: float, a: float, b: float) -> Vector:
    """
    Simulate how a 20-year-old perceives the CIELAB color seen by a 70-year-old.
    Only hue and chroma change.
    """
    angle = _hue_radians(a, b) - _hue_shift(a, b)
    c = math.hypot(a, b) / _chroma_ratio(a, b)
    return L, c * math.cos(angle), c * math.sin(angle)
