"""
Conversion between Munsell and the Practical Color Co-ordinate System (PCCS).

PCCS specifies colors by hue (24 sectors), lightness, and saturation, with
lightness equal to Munsell value. Its tones group colors by saturation and
lightness relative to each hue's most saturated color. The conversions follow
Kobayashi and Yosiki, *Mathematical Relation among PCCS Tones, PCCS Color
Attributes and Munsell Color Attributes*, Journal of the Color Science
Association of Japan 25(4), 2001. :attr:`.Method.CONCISE` uses their
closed-form approximations. :attr:`.Method.ACCURATE` interpolates their
piecewise hue table and solves the saturation cubic with Newton's method.
"""
import bisect
import enum
import logging
import math

from .munsell import MAX_HUE as MUNSELL_MAX_HUE, MONO_LIMIT_C
from .spec import ConversionResult, MAX_ITERATIONS, Method
from .vector import normalize_angle


logger = logging.getLogger(__name__)


MAX_HUE = 24
MONO_LIMIT_S = 0.01

SATURATION_TOLERANCE = 0.001
"""The default tolerance for solving saturation."""

HUE_NAMES = (
    '', 'pR', 'R', 'yR', 'rO', 'O', 'yO', 'rY', 'Y', 'gY', 'YG', 'yG', 'G',
    'bG', 'GB', 'GB', 'gB', 'B', 'B', 'pB', 'V', 'bP', 'P', 'rP', 'RP',
)

# The Munsell hues of PCCS hues 1 through 24, with 0 and 100 at both ends
_MUNSELL_HUES = (
    0, 4, 7, 10, 14, 18, 22, 25, 28, 33, 38, 43,
    49, 55, 60, 65, 70, 73, 76, 79, 83, 87, 91, 96, 100,
)

# The coefficients of the saturation cubic for every even PCCS hue
_COEFFICIENTS = (
    (0.853642,  0.084379, -0.002798),  # 0 and 24
    (1.042805,  0.046437,  0.001607),
    (1.079160,  0.025470,  0.003052),
    (1.039472,  0.054749, -0.000511),
    (0.925185,  0.050245,  0.000953),
    (0.968557,  0.012537,  0.003375),
    (1.070433, -0.047359,  0.007385),
    (1.087030, -0.051075,  0.006526),
    (1.089652, -0.050206,  0.006056),
    (0.880861,  0.060300, -0.001280),
    (0.897326,  0.053912, -0.000860),
    (0.887834,  0.055086, -0.000847),
    (0.853642,  0.084379, -0.002798),
)


class Tone(enum.Enum):
    """The PCCS tones."""
    PALE = 'p'
    PALE_PLUS = 'p+'
    LIGHT_GRAYISH = 'ltg'
    GRAYISH = 'g'
    DARK_GRAYISH = 'dkg'
    LIGHT = 'lt'
    LIGHT_PLUS = 'lt+'
    SOFT = 'sf'
    DULL = 'd'
    DARK = 'dk'
    BRIGHT = 'b'
    STRONG = 's'
    DEEP = 'dp'
    VIVID = 'v'
    NONE = 'none'


# --------------------------------------------------------------------------------------
# Shared Terms


def _steepness(h: float) -> float:
    return 0.81 - 0.24 * math.sin((h - 2.6) * math.pi / 12)


def _chroma_scale(h: float) -> float:
    return 12 + 1.7 * math.sin((h + 2.2) * math.pi / 12)


def _coefficients(h: float) -> tuple[float, float, float]:
    """Interpolate the coefficients of the saturation cubic for the hue."""
    h = normalize_angle(h, MAX_HUE)
    hf = math.floor(h)
    if hf % 2 != 0:
        hf -= 1
    hc = hf + 2
    af, ac = _COEFFICIENTS[hf // 2], _COEFFICIENTS[hc // 2]
    r = (h - hf) / (hc - hf)
    return (
        r * (ac[0] - af[0]) + af[0],
        r * (ac[1] - af[1]) + af[1],
        r * (ac[2] - af[2]) + af[2],
    )


def _solve_cubic(
    x0: float,
    a3: float,
    a2: float,
    a1: float,
    a0: float,
    *,
    max_iterations: int,
    tolerance: float,
) -> tuple[float, bool]:
    """Find a root of the cubic near ``x0`` with Newton's method."""
    x = x0
    for _ in range(max_iterations):
        y = ((a3 * x + a2) * x + a1) * x + a0
        slope = (3 * a3 * x + 2 * a2) * x + a1
        if slope == 0:
            return x, False
        x1 = x - y / slope
        if abs(x1 - x) < tolerance:
            return x1, True
        x = x1

    logger.debug('saturation cubic did not converge near %g', x0)
    return x, False


# --------------------------------------------------------------------------------------
# Concise


def _concise_pccs_hue(H: float) -> float:
    y = H * math.pi / 50
    return (
        24 * y / (2 * math.pi) + 1.24
        + 0.02 * math.cos(y) - 0.1 * math.cos(2 * y) - 0.11 * math.cos(3 * y)
        + 0.68 * math.sin(y) - 0.3 * math.sin(2 * y) + 0.013 * math.sin(3 * y)
    )


def _concise_pccs_saturation(V: float, C: float, h: float) -> float:
    e2, e1 = 0.004, 0.077
    e0 = -C / (_chroma_scale(h) * (1 - math.exp(-_steepness(h) * V)))
    return (-e1 + math.sqrt(e1 * e1 - 4 * e2 * e0)) / (2 * e2)


def _concise_munsell_hue(h: float) -> float:
    x = (h - 1) * math.pi / 12
    return (
        100 * x / (2 * math.pi) - 1
        + 0.12 * math.cos(x) + 0.34 * math.cos(2 * x) + 0.4 * math.cos(3 * x)
        - 2.7 * math.sin(x) + 1.5 * math.sin(2 * x) - 0.4 * math.sin(3 * x)
    )


def _concise_munsell_chroma(h: float, l: float, s: float) -> float:
    return (
        _chroma_scale(h)
        * (0.077 * s + 0.004 * s * s)
        * (1 - math.exp(-_steepness(h) * l))
    )


# --------------------------------------------------------------------------------------
# Accurate


def _accurate_pccs_hue(H: float) -> float:
    i = min(bisect.bisect_right(_MUNSELL_HUES, H) - 1, len(_MUNSELL_HUES) - 2)
    H1, H2 = _MUNSELL_HUES[i], _MUNSELL_HUES[i + 1]
    return i + 1 + (H - H1) / (H2 - H1)


def _accurate_pccs_saturation(
    V: float, C: float, h: float, *, max_iterations: int, tolerance: float
) -> tuple[float, bool]:
    a1, a2, a3 = _coefficients(h)
    a0 = -C / (1 - math.exp(-_steepness(h) * V))
    return _solve_cubic(
        _concise_pccs_saturation(V, C, h), a3, a2, a1, a0,
        max_iterations=max_iterations,
        tolerance=tolerance,
    )


def _accurate_munsell_hue(h: float) -> float:
    k = math.floor(h)
    if k == 0:
        H1, H2 = 96, 100
    else:
        H1, H2 = _MUNSELL_HUES[k - 1], _MUNSELL_HUES[k]
    return H1 + (H2 - H1) * (h - k)


def _accurate_munsell_chroma(h: float, l: float, s: float) -> float:
    a1, a2, a3 = _coefficients(h)
    return ((a3 * s + a2) * s + a1) * s * (1 - math.exp(-_steepness(h) * l))


# --------------------------------------------------------------------------------------
# Munsell


def munsell_to_pccs(
    H: float,
    V: float,
    C: float,
    *,
    method: Method = Method.ACCURATE,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: None | float = None,
) -> ConversionResult:
    """
    Convert the given color from Munsell hue, value, and chroma to PCCS hue,
    lightness, and saturation. The result is flagged as not converged if
    solving for saturation hit the iteration cap.
    """
    H = normalize_angle(H, MUNSELL_MAX_HUE)
    concise = method is Method.CONCISE

    h = _concise_pccs_hue(H) if concise else _accurate_pccs_hue(H)
    h = normalize_angle(h, MAX_HUE)

    s, converged = 0.0, True
    if MONO_LIMIT_C <= C and V > 0:
        if concise:
            s = _concise_pccs_saturation(V, C, h)
        else:
            s, converged = _accurate_pccs_saturation(
                V, C, h,
                max_iterations=max_iterations,
                tolerance=SATURATION_TOLERANCE if tolerance is None else tolerance,
            )

    return ConversionResult((h, V, s), False, converged)


def pccs_to_munsell(
    h: float, l: float, s: float, *, method: Method = Method.ACCURATE
) -> tuple[float, float, float]:
    """
    Convert the given color from PCCS hue, lightness, and saturation to
    Munsell hue, value, and chroma.
    """
    h = normalize_angle(h, MAX_HUE)
    if method is Method.CONCISE:
        H = _concise_munsell_hue(h)
        C = _concise_munsell_chroma(h, l, s) if MONO_LIMIT_S <= s else 0.0
    else:
        H = _accurate_munsell_hue(h)
        C = _accurate_munsell_chroma(h, l, s) if MONO_LIMIT_S <= s else 0.0
    return normalize_angle(H, MUNSELL_MAX_HUE), l, C


# --------------------------------------------------------------------------------------
# Tones


def _lightness_offset(h: float, s: float) -> float:
    return (0.25 - 0.34 * math.sqrt(1 - math.sin((h - 2) * math.pi / 12))) * s


def relative_lightness(h: float, l: float, s: float) -> float:
    """Determine the lightness in the tone coordinate system."""
    return l - _lightness_offset(h, s)


def absolute_lightness(h: float, L: float, s: float) -> float:
    """Determine the PCCS lightness of the tone coordinates."""
    return L + _lightness_offset(h, s)


def to_tone_coordinate(h: float, l: float, s: float) -> tuple[float, float, float]:
    return h, relative_lightness(h, l, s), s


def to_normal_coordinate(h: float, L: float, s: float) -> tuple[float, float, float]:
    return h, absolute_lightness(h, L, s), s


def tone(h: float, l: float, s: float) -> Tone:
    """Determine the tone of the given PCCS color."""
    t = relative_lightness(h, l, s)
    upper = -0.3 * s + 8.5
    lower = 0.3 * s + 2.5

    if s < 1:
        return Tone.NONE
    if s < 4:
        if t < lower:
            return Tone.DARK_GRAYISH
        if t < 5.5:
            return Tone.GRAYISH
        if t < upper:
            return Tone.LIGHT_GRAYISH
        return Tone.PALE if s < 2.5 else Tone.PALE_PLUS
    if s < 7:
        if t < lower:
            return Tone.DARK
        if t < 5.5:
            return Tone.DULL
        if t < upper:
            return Tone.SOFT
        return Tone.LIGHT if s < 5.5 else Tone.LIGHT_PLUS
    if s < 8.5:
        if t < lower:
            return Tone.DEEP
        if t < upper:
            return Tone.STRONG
        return Tone.BRIGHT
    return Tone.VIVID


# --------------------------------------------------------------------------------------
# Notation


def _round1(value: float) -> str:
    return f'{round(value, 1):g}'


def _hue_sector(h: float) -> int:
    sector = math.floor(h + 0.5)
    if sector <= 0:
        sector = MAX_HUE
    if sector > MAX_HUE:
        sector -= MAX_HUE
    return sector


def _achromatic_name(l: float) -> str:
    if 9.5 <= l:
        return 'W'
    if l <= 1.5:
        return 'Bk'
    return 'Gy'


def pccs_to_hue_string(h: float, l: float, s: float) -> str:
    """Format the hue of the given PCCS color, e.g., ``pR`` or ``N``."""
    if s < MONO_LIMIT_S:
        return 'N'
    return HUE_NAMES[_hue_sector(h)]


def pccs_to_tone_string(h: float, l: float, s: float) -> str:
    """Format the tone of the given PCCS color, with ``W``, ``Gy``, or ``Bk`` for grays."""
    if s < MONO_LIMIT_S:
        return _achromatic_name(l)
    return tone(h, l, s).value


def pccs_to_string(h: float, l: float, s: float) -> str:
    """
    Format the given PCCS color, e.g., ``v2 2:R-4.5-9s`` for chromatic colors
    or ``Gy-5 N-5`` for achromatic ones.
    """
    lightness = _round1(l)
    if s < MONO_LIMIT_S:
        name = _achromatic_name(l)
        prefix = f'{name}-{lightness}' if name == 'Gy' else name
        return f'{prefix} N-{lightness}'

    hue = _round1(h)
    notation = f'{hue}:{HUE_NAMES[_hue_sector(h)]}-{lightness}-{_round1(s)}s'
    t = tone(h, l, s)
    if t is Tone.NONE:
        return notation
    return f'{t.value}{hue} {notation}'
