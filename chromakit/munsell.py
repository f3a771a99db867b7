"""
Conversion between CIE XYZ and the Munsell color system.

The Munsell system has no closed form. This module interpolates the Munsell
renotation data (all samples, including extrapolated ones), which maps hue,
value, and chroma to chromaticity under illuminant C. The data ships with
``colour-science``. It is organized into one level per value, with hues in
steps of 2.5 and chromas in steps of 2.

Converting from Munsell interpolates chromaticity within the cell of the
renotation grid that contains the hue and chroma, at the two levels
bracketing the value, and then between the levels. Converting to Munsell
searches the cell whose bilinear patch contains the chromaticity at both
levels and inverts the patch. With :attr:`.Method.ACCURATE`, a Newton search
over the forward interpolation then refines hue and chroma, so that the two
directions agree.

Value is computed from luminance with the cubic of JIS Z 8721, which is
solved by Newton's method in the other direction. Value 0 and value 10 are
achromatic boundaries.
"""
import bisect
from collections.abc import Iterable, Mapping
import dataclasses
import logging
import math
import re
import types

from colour.notation.datasets.munsell import MUNSELL_COLOURS_ALL

from .conversion import (
    ILLUMINANT_C,
    ILLUMINANT_C_XY,
    WHITE_POINTS,
    adapt_xyz,
    xyz_to_yxy,
    yxy_to_xyz,
)
from .spec import ConversionResult, MAX_ITERATIONS, Method, WhiteSpec
from .vector import normalize_angle


logger = logging.getLogger(__name__)


HUE_NAMES = ('R', 'YR', 'Y', 'GY', 'G', 'BG', 'B', 'PB', 'P', 'RP')
MAX_HUE = 100
MAX_VALUE = 10
MONO_LIMIT_C = 0.05

VALUE_TOLERANCE = 1e-10
"""The default tolerance for luminance when solving for value."""

CHROMATICITY_TOLERANCE = 1e-9
"""The default tolerance for chromaticity when refining hue and chroma."""

_EPSILON = 1e-13

# Hues are addressed in tenths, so that the grid is integral
_HUE_STEP = 25
_HUE_TENTHS = 1000


# --------------------------------------------------------------------------------------
# Hue Names


_HUE_NAME = re.compile(r'(\d+(?:\.\d*)?|\.\d+)([A-Z]{1,2})')

def hue_name_to_value(name: str) -> float:
    """
    Convert the hue name, e.g., ``5R`` or ``10RP``, to the hue value between
    0 and 100. Note that ``10RP`` is the same hue as ``0R``.
    """
    match = _HUE_NAME.fullmatch(name.strip())
    if match is None or match.group(2) not in HUE_NAMES:
        raise ValueError(f'"{name}" is not a Munsell hue')
    value = float(match.group(1))
    if value > 10:
        raise ValueError(f'"{name}" has hue step greater than 10')
    return normalize_angle(value + 10 * HUE_NAMES.index(match.group(2)), MAX_HUE)


def hue_value_to_name(hue: float, chroma: float) -> str:
    """
    Convert the hue value to its name. Achromatic colors have hue ``N``.
    """
    if chroma < MONO_LIMIT_C:
        return 'N'

    hue = normalize_angle(hue, MAX_HUE)
    if hue <= 0:
        hue += MAX_HUE
    tenths = int(hue * 10) % 100
    index = int(hue / 10)
    if tenths == 0:
        tenths = 100
        index -= 1
    return f'{round(tenths / 10, 1):g}{HUE_NAMES[index]}'


def munsell_to_string(H: float, V: float, C: float) -> str:
    """Format the color in Munsell notation, e.g., ``5R 4/14`` or ``N 5``."""
    value = f'{round(V, 1):g}'
    if C < MONO_LIMIT_C:
        return f'N {value}'
    return f'{hue_value_to_name(H, C)} {value}/{round(C, 1):g}'


# --------------------------------------------------------------------------------------
# Renotation Table


@dataclasses.dataclass(frozen=True, slots=True)
class _Level:
    """
    The renotation samples for one value.

    Attributes:
        value: is the Munsell value
        chromaticities: maps hue in tenths and chroma to chromaticity
        max_chroma: is the largest chroma per hue step, with all smaller even
            chromas present, or 0 for hues without samples
        samples: are the chromaticity, hue in tenths, and chroma of all samples
    """
    value: float
    chromaticities: Mapping[tuple[int, int], tuple[float, float]]
    max_chroma: tuple[int, ...]
    samples: tuple[tuple[float, float, int, int], ...]

    @property
    def chroma_limit(self) -> int:
        return max(self.max_chroma)


def _build_levels(
    data: Iterable[tuple[tuple[str, float, float], object]]
) -> tuple[_Level, ...]:
    raw: dict[float, dict[tuple[int, int], tuple[float, float]]] = {}

    for (hue_name, value, chroma), xyY in data:
        tenths = round(hue_name_to_value(hue_name) * 10) % _HUE_TENTHS
        c = round(float(chroma))
        if tenths % _HUE_STEP != 0 or c <= 0 or c % 2 != 0:
            continue
        x, y = float(xyY[0]), float(xyY[1])  # type: ignore[index]
        raw.setdefault(float(value), {})[(tenths, c)] = (x, y)

    levels: list[_Level] = []
    for value in sorted(raw):
        table = raw[value]

        # Only keep chromas without gaps from 2 upwards
        max_chroma = []
        chromaticities = {}
        for tenths in range(0, _HUE_TENTHS, _HUE_STEP):
            c = 2
            while (tenths, c) in table:
                chromaticities[(tenths, c)] = table[(tenths, c)]
                c += 2
            max_chroma.append(c - 2)

        levels.append(_Level(
            value,
            types.MappingProxyType(chromaticities),
            tuple(max_chroma),
            tuple((x, y, t, c) for (t, c), (x, y) in chromaticities.items()),
        ))

    logger.debug(
        'built Munsell renotation table with %d levels and %d samples',
        len(levels), sum(len(l.samples) for l in levels),
    )
    return tuple(levels)


_LEVELS = _build_levels(MUNSELL_COLOURS_ALL)
_VALUES = tuple(level.value for level in _LEVELS)


def _xy_of(level: _Level, tenths: int, chroma: int) -> None | tuple[float, float]:
    if chroma == 0:
        return ILLUMINANT_C_XY
    return level.chromaticities.get((tenths % _HUE_TENTHS, chroma))


def _max_chroma_of(level: _Level, tenths: int) -> int:
    return level.max_chroma[(tenths % _HUE_TENTHS) // _HUE_STEP]


# --------------------------------------------------------------------------------------
# Geometry


def _lerp(
    a: tuple[float, float], b: tuple[float, float], r: float
) -> tuple[float, float]:
    return (b[0] - a[0]) * r + a[0], (b[1] - a[1]) * r + a[1]


def _cross(ax: float, ay: float, bx: float, by: float) -> float:
    return ax * by - ay * bx


def _inside(
    p: tuple[float, float],
    a: tuple[float, float],
    b: tuple[float, float],
    c: tuple[float, float],
) -> bool:
    """
    Determine whether the point is inside the clockwise triangle, including
    its boundary. Points right of any edge are outside.
    """
    for (sx, sy), (ex, ey) in ((a, b), (b, c), (c, a)):
        if _cross(p[0] - sx, p[1] - sy, ex - sx, ey - sy) < 0:
            return False
    return True


def _invert_patch(
    p: tuple[float, float],
    wa: tuple[float, float],
    wd: tuple[float, float],
    wb: tuple[float, float],
    wc: tuple[float, float],
) -> None | tuple[float, float]:
    """
    Invert the bilinear patch with corners A, B (next hue), C (next hue and
    chroma), and D (next chroma), i.e., find the ratios along the hue and
    chroma directions that map onto the point. Return ``None`` if the point
    is outside the patch.
    """
    # Solve ea·v² + eb·v + ec = 0 for the ratio v along chroma
    v = -1.0
    ea = (
        (wa[0] - wd[0]) * (wa[1] + wc[1] - wb[1] - wd[1])
        - (wa[0] + wc[0] - wb[0] - wd[0]) * (wa[1] - wd[1])
    )
    eb = (
        (p[0] - wa[0]) * (wa[1] + wc[1] - wb[1] - wd[1])
        + (wa[0] - wd[0]) * (wb[1] - wa[1])
        - (wa[0] + wc[0] - wb[0] - wd[0]) * (p[1] - wa[1])
        - (wb[0] - wa[0]) * (wa[1] - wd[1])
    )
    ec = (p[0] - wa[0]) * (wb[1] - wa[1]) - (p[1] - wa[1]) * (wb[0] - wa[0])

    if abs(ea) < _EPSILON:
        if abs(eb) >= _EPSILON:
            v = -ec / eb
    else:
        discriminant = eb * eb - 4 * ea * ec
        if discriminant < 0:
            return None
        root = math.sqrt(discriminant)
        v1 = (-eb + root) / (2 * ea)
        v2 = (-eb - root) / (2 * ea)

        if wa == wb:
            # A degenerate patch at the achromatic point always has root v1 = 0
            if 0 <= v2 <= 1:
                v = v2
        elif 0 <= v1 <= 1:
            v = v1
        elif 0 <= v2 <= 1:
            v = v2
    if v < 0:
        return None

    # Determine the ratio h along hue
    h1 = h2 = -1.0
    deX = (wa[0] - wd[0] - wb[0] + wc[0]) * v - wa[0] + wb[0]
    deY = (wa[1] - wd[1] - wb[1] + wc[1]) * v - wa[1] + wb[1]
    if abs(deX) >= _EPSILON:
        h1 = ((wa[0] - wd[0]) * v + p[0] - wa[0]) / deX
    if abs(deY) >= _EPSILON:
        h2 = ((wa[1] - wd[1]) * v + p[1] - wa[1]) / deY

    if 0 <= h1 <= 1:
        return h1, v
    if 0 <= h2 <= 1:
        return h2, v
    return None


def _interpolate_hue_chroma(
    hc0: tuple[float, float], hc1: tuple[float, float], r: float
) -> tuple[float, float]:
    """Interpolate hue and chroma, taking the shorter way around the hue circle."""
    h0, c0 = hc0
    h1, c1 = hc1
    if abs(h1 - h0) > MAX_HUE / 2:
        if h0 < h1:
            h0 += MAX_HUE
        elif h0 > h1:
            h1 += MAX_HUE

    h = normalize_angle((h1 - h0) * r + h0, MAX_HUE)
    c = (c1 - c0) * r + c0
    if c < MONO_LIMIT_C:
        c = 0.0
    return h, c


# --------------------------------------------------------------------------------------
# Chromaticity to Hue and Chroma


def _scan_cell(
    p: tuple[float, float], level: _Level, ht: int, c: int
) -> tuple[None | tuple[float, float], bool]:
    """
    Try to locate the point within the cell with the given lower hue and chroma.
    The second result flags that there are no more samples along the hue.
    """
    wa = _xy_of(level, ht, c)
    wb = _xy_of(level, ht + _HUE_STEP, c)
    if wa is None and wb is None:
        return None, True

    wc = _xy_of(level, ht + _HUE_STEP, c + 2)
    wd = _xy_of(level, ht, c + 2)

    # Complete a ragged edge with a parallelogram
    if c != 0 and wa is not None and wb is not None:
        if wc is not None and wd is None:
            wd = wa[0] + (wc[0] - wb[0]), wa[1] + (wc[1] - wb[1])
        elif wc is None and wd is not None:
            wc = wb[0] + (wd[0] - wa[0]), wb[1] + (wd[1] - wa[1])
    if wa is None or wb is None or wc is None or wd is None:
        return None, False

    if _inside(p, wa, wc, wd) or (c != 0 and _inside(p, wa, wb, wc)):
        ratios = _invert_patch(p, wa, wd, wb, wc)
        if ratios is not None:
            return (
                (_HUE_STEP * ratios[0] + ht) / 10,
                2 * ratios[1] + c,
            ), False
    return None, False


def _scan_hues(
    p: tuple[float, float], level: _Level, hues: Iterable[int]
) -> None | tuple[float, float]:
    for ht in hues:
        for c in range(0, level.chroma_limit + 1, 2):
            hc, exhausted = _scan_cell(p, level, ht, c)
            if exhausted:
                break
            if hc is not None:
                return normalize_angle(hc[0], MAX_HUE), hc[1]
    return None


def _nearest_samples(
    p: tuple[float, float], level: _Level, count: int
) -> list[tuple[float, int, int]]:
    distances = sorted(
        (math.hypot(p[0] - x, p[1] - y), t, c) for x, y, t, c in level.samples
    )
    return distances[:count]


def _scan_hue_chroma(
    x: float, y: float, level: _Level
) -> tuple[tuple[float, float], bool]:
    """
    Determine hue and chroma of the chromaticity at the given level. The second
    result flags chromaticities outside the renotation data, whose hue and
    chroma are interpolated from the two nearest samples.
    """
    p = x, y
    if math.hypot(x - ILLUMINANT_C_XY[0], y - ILLUMINANT_C_XY[1]) < _EPSILON:
        return (0.0, 0.0), False

    # Start near the hue of the closest sample, then try all hues
    nearest = _nearest_samples(p, level, 2)
    if nearest:
        _, ht, _ = nearest[0]
        hc = _scan_hues(p, level, range(ht - 125, ht + 126, _HUE_STEP))
        if hc is not None:
            return hc, False
    hc = _scan_hues(p, level, range(0, _HUE_TENTHS, _HUE_STEP))
    if hc is not None:
        return hc, False

    if len(nearest) < 2:
        return (0.0, 0.0), True
    (d0, t0, c0), (d1, t1, c1) = nearest
    total = d0 + d1
    r = 0.0 if total == 0 else d0 / total
    return _interpolate_hue_chroma((t0 / 10, c0), (t1 / 10, c1), r), True


# --------------------------------------------------------------------------------------
# Hue and Chroma to Chromaticity


def _barycentric(
    level: _Level,
    p: tuple[float, float],
    a: tuple[int, int],
    b: tuple[int, int],
    c: tuple[int, int],
) -> tuple[float, float]:
    f = (b[1] - c[1]) * (a[0] - c[0]) + (c[0] - b[0]) * (a[1] - c[1])
    w1 = ((b[1] - c[1]) * (p[0] - c[0]) + (c[0] - b[0]) * (p[1] - c[1])) / f
    w2 = ((c[1] - a[1]) * (p[0] - c[0]) + (a[0] - c[0]) * (p[1] - c[1])) / f
    w3 = 1 - w1 - w2

    wa = _xy_of(level, *a)
    wb = _xy_of(level, *b)
    wc = _xy_of(level, *c)
    assert wa is not None and wb is not None and wc is not None
    return (
        wa[0] * w1 + wb[0] * w2 + wc[0] * w3,
        wa[1] * w1 + wb[1] * w2 + wc[1] * w3,
    )


def _scan_chromaticity(
    H: float, C: float, level: _Level
) -> tuple[tuple[float, float], bool]:
    """
    Determine the chromaticity of hue and chroma at the given level. The second
    result flags hue and chroma within the renotation data.
    """
    ht = H * 10
    p = ht, C

    c_l = math.floor(C / 2) * 2
    c_u = c_l + 2

    # Skip hues without samples
    ht_l = math.floor(ht / _HUE_STEP) * _HUE_STEP
    ht_u = ht_l + _HUE_STEP
    for _ in range(_HUE_TENTHS // _HUE_STEP):
        max_l = _max_chroma_of(level, ht_l)
        if max_l != 0:
            break
        ht_l -= _HUE_STEP
    for _ in range(_HUE_TENTHS // _HUE_STEP):
        max_u = _max_chroma_of(level, ht_u)
        if max_u != 0:
            break
        ht_u += _HUE_STEP

    # Triangulate the ragged edge between hues with different chroma extents
    if max_u <= C < max_l:
        for c_c in range(max_u, max_l - 1, 2):
            a, b, c = (ht_u, max_u), (ht_l, c_c), (ht_l, c_c + 2)
            if _inside(p, a, b, c):
                return _barycentric(level, p, a, b, c), True
    if max_l <= C < max_u:
        for c_c in range(max_l, max_u - 1, 2):
            a, b, c = (ht_l, max_l), (ht_u, c_c + 2), (ht_u, c_c)
            if _inside(p, a, b, c):
                return _barycentric(level, p, a, b, c), True

    # Beyond the data, hold chroma at the outermost samples
    if max_l <= C or max_u <= C:
        rx = (ht - ht_l) / (ht_u - ht_l)
        wa = _xy_of(level, ht_l, max_l)
        wb = _xy_of(level, ht_u, max_u)
        assert wa is not None and wb is not None
        return _lerp(wa, wb, rx), False

    rx = (ht - ht_l) / (ht_u - ht_l)
    ry = (C - c_l) / (c_u - c_l)
    wa = _xy_of(level, ht_l, c_l)
    wb = _xy_of(level, ht_u, c_l)
    wc = _xy_of(level, ht_u, c_u)
    wd = _xy_of(level, ht_l, c_u)
    assert wa is not None and wb is not None and wc is not None and wd is not None
    return _lerp(_lerp(wa, wb, rx), _lerp(wd, wc, rx), ry), True


# --------------------------------------------------------------------------------------
# Value and Luminance


def value_to_luminance(V: float) -> float:
    """Determine the luminance Y between 0 and 1 for the Munsell value."""
    if V <= 1:
        return V * 0.0121
    return (0.0467 * V ** 3 + 0.5602 * V ** 2 - 0.1753 * V + 0.8007) / 100


def luminance_to_value(
    Y: float,
    *,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: None | float = None,
) -> tuple[float, bool]:
    """
    Determine the Munsell value for the luminance Y with Newton's method.

    Returns:
        the value and a flag for convergence. Without convergence, the value
        is the best estimate encountered.
    """
    if Y <= 0.0121:
        return Y / 0.0121, True

    tolerance = VALUE_TOLERANCE if tolerance is None else tolerance
    V = float(MAX_VALUE)
    best_V, best_error = V, math.inf
    for _ in range(max_iterations):
        error = value_to_luminance(V) - Y
        if abs(error) < best_error:
            best_V, best_error = V, abs(error)
        if abs(error) < tolerance:
            return V, True
        slope = (
            0.0121 if V <= 1
            else (3 * 0.0467 * V * V + 2 * 0.5602 * V - 0.1753) / 100
        )
        V -= error / slope

    logger.debug('value for luminance %g did not converge', Y)
    return best_V, False


# --------------------------------------------------------------------------------------
# Munsell and Yxy under Illuminant C


def _bracket(V: float) -> int:
    """Determine the index of the highest level at or below the value, or -1."""
    return bisect.bisect_right(_VALUES, V) - 1


def munsell_to_yxy_c(H: float, V: float, C: float) -> tuple[tuple[float, float, float], bool]:
    """
    Convert the Munsell color to Yxy under illuminant C.

    Returns:
        the Yxy coordinates and a flag for colors outside the renotation data
    """
    H = normalize_angle(H, MAX_HUE)
    Y = value_to_luminance(V)

    if V <= _EPSILON or V >= MAX_VALUE:
        return (Y, *ILLUMINANT_C_XY), MONO_LIMIT_C <= C
    if C < MONO_LIMIT_C:
        return (Y, *ILLUMINANT_C_XY), False

    top = _LEVELS[-1]
    if top.value <= V:
        xy, inside = _scan_chromaticity(H, C, top)
        return (Y, *xy), not inside

    index = _bracket(V)
    upper = _LEVELS[index + 1]
    if index < 0:
        lower_value = 0.0
        lower_xy, lower_inside = ILLUMINANT_C_XY, False
    else:
        lower_value = _LEVELS[index].value
        lower_xy, lower_inside = _scan_chromaticity(H, C, _LEVELS[index])
    upper_xy, upper_inside = _scan_chromaticity(H, C, upper)

    r = (V - lower_value) / (upper.value - lower_value)
    if index < 0 or not (lower_inside or upper_inside):
        out_of_gamut = True
    elif r < 0.5:
        out_of_gamut = not lower_inside
    else:
        out_of_gamut = not upper_inside

    return (Y, *_lerp(lower_xy, upper_xy, r)), out_of_gamut


def _yxy_c_to_hue_chroma(
    x: float, y: float, V: float
) -> tuple[tuple[float, float], bool]:
    top = _LEVELS[-1]
    if top.value <= V:
        return _scan_hue_chroma(x, y, top)

    index = _bracket(V)
    upper = _LEVELS[index + 1]
    upper_hc, upper_outside = _scan_hue_chroma(x, y, upper)
    if index < 0:
        lower_value = 0.0
        lower_hc, lower_outside = (upper_hc[0], 0.0), False
    else:
        lower_value = _LEVELS[index].value
        lower_hc, lower_outside = _scan_hue_chroma(x, y, _LEVELS[index])

    r = (V - lower_value) / (upper.value - lower_value)
    return (
        _interpolate_hue_chroma(lower_hc, upper_hc, r),
        lower_outside or upper_outside,
    )


def _refine(
    x: float,
    y: float,
    H: float,
    V: float,
    C: float,
    max_iterations: int,
    tolerance: float,
) -> tuple[float, float, bool]:
    """
    Refine hue and chroma with Newton's method, so that the forward conversion
    reproduces the chromaticity. The Jacobian is estimated with finite
    differences.
    """
    def forward(H: float, C: float) -> tuple[float, float]:
        (_, fx, fy), _ = munsell_to_yxy_c(H, V, C)
        return fx, fy

    delta = 1e-6
    best_H, best_C, best_error = H, C, math.inf

    for _ in range(max_iterations):
        fx, fy = forward(H, C)
        ex, ey = x - fx, y - fy
        error = math.hypot(ex, ey)
        if error < best_error:
            best_H, best_C, best_error = H, C, error
        if error < tolerance:
            return H, C, True

        hx, hy = forward(H + delta, C)
        cx, cy = forward(H, C + delta)
        j11, j21 = (hx - fx) / delta, (hy - fy) / delta
        j12, j22 = (cx - fx) / delta, (cy - fy) / delta
        determinant = j11 * j22 - j12 * j21
        if abs(determinant) < 1e-18:
            break

        dH = (ex * j22 - j12 * ey) / determinant
        dC = (j11 * ey - j21 * ex) / determinant
        H = normalize_angle(H + max(-2.5, min(2.5, dH)), MAX_HUE)
        C = max(C + max(-2.0, min(2.0, dC)), 0.0)
        if C < MONO_LIMIT_C:
            break

    logger.debug('hue and chroma for xy (%g, %g) did not converge', x, y)
    return best_H, best_C, False


def yxy_c_to_munsell(
    Y: float,
    x: float,
    y: float,
    *,
    method: Method = Method.ACCURATE,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: None | float = None,
) -> ConversionResult:
    """Convert the Yxy color under illuminant C to Munsell."""
    V, converged = luminance_to_value(
        Y, max_iterations=max_iterations, tolerance=tolerance
    )
    if (
        V <= _EPSILON
        or V >= MAX_VALUE
        or (abs(x - ILLUMINANT_C_XY[0]) < _EPSILON and abs(y - ILLUMINANT_C_XY[1]) < _EPSILON)
    ):
        return ConversionResult((0.0, V, 0.0), False, converged)

    (H, C), out_of_gamut = _yxy_c_to_hue_chroma(x, y, V)

    if method is Method.ACCURATE and not out_of_gamut and C >= MONO_LIMIT_C:
        H, C, refined = _refine(
            x, y, H, V, C,
            max_iterations,
            CHROMATICITY_TOLERANCE if tolerance is None else tolerance,
        )
        converged = converged and refined

    return ConversionResult((H, V, C), out_of_gamut, converged)


# --------------------------------------------------------------------------------------
# XYZ


def xyz_to_munsell(
    X: float,
    Y: float,
    Z: float,
    *,
    method: Method = Method.ACCURATE,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: None | float = None,
    white: WhiteSpec = 'D65',
) -> ConversionResult:
    """
    Convert the given color from XYZ to Munsell hue, value, and chroma.

    The result is flagged as out of gamut if the chromaticity lies outside the
    renotation data. It is flagged as not converged if solving for value or
    refining hue and chroma hit the iteration cap.
    """
    Yc, x, y = xyz_to_yxy(
        *adapt_xyz(X, Y, Z, source=WHITE_POINTS[white], target=ILLUMINANT_C),
        white=white,
    )
    return yxy_c_to_munsell(
        Yc, x, y,
        method=method,
        max_iterations=max_iterations,
        tolerance=tolerance,
    )


def munsell_to_xyz(
    H: float, V: float, C: float, *, white: WhiteSpec = 'D65'
) -> ConversionResult:
    """
    Convert the given color from Munsell hue, value, and chroma to XYZ. The
    result is flagged as out of gamut if hue and chroma lie outside the
    renotation data.
    """
    yxy, out_of_gamut = munsell_to_yxy_c(H, V, C)
    xyz = adapt_xyz(
        *yxy_to_xyz(*yxy), source=ILLUMINANT_C, target=WHITE_POINTS[white]
    )
    return ConversionResult(xyz, out_of_gamut)
