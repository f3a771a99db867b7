"""Conversion between color spaces"""
from collections.abc import Callable, Iterable
import functools
from importlib import import_module
import inspect
import itertools
import logging
import math
from typing import cast

from .space import Space, UNIVERSE
from .spec import (
    ConversionResult,
    ConverterSpec,
    CoordinateSpec,
    DEFAULT_OPTIONS,
    Options,
    WhiteSpec,
)
from .vector import (
    atan2_degrees,
    compose,
    diagonal,
    invert,
    Matrix,
    multiply,
    Vector,
)


logger = logging.getLogger(__name__)


# --------------------------------------------------------------------------------------
# Reference whites, all with Y = 1


D65: Vector = (0.95047, 1.0, 1.08883)
D50: Vector = (0.96422, 1.0, 0.82521)

ILLUMINANT_C_XY = (0.3101, 0.3162)
ILLUMINANT_C: Vector = (
    ILLUMINANT_C_XY[0] / ILLUMINANT_C_XY[1],
    1.0,
    (1 - ILLUMINANT_C_XY[0] - ILLUMINANT_C_XY[1]) / ILLUMINANT_C_XY[1],
)

WHITE_POINTS: dict[str, Vector] = {
    'D65': D65,
    'D50': D50,
}


# --------------------------------------------------------------------------------------
# See http://www.brucelindbloom.com/index.html?Eqn_RGB_XYZ_Matrix.html

_LRGB_TO_XYZ: dict[str, Matrix] = {
    'D65': (
        ( 0.4124564,  0.3575761,  0.1804375 ),
        ( 0.2126729,  0.7151522,  0.0721750 ),
        ( 0.0193339,  0.1191920,  0.9503041 ),
    ),
    # Bradford-adapted
    'D50': (
        ( 0.4360747,  0.3850649,  0.1430804 ),
        ( 0.2225045,  0.7168786,  0.0606169 ),
        ( 0.0139322,  0.0971045,  0.7141733 ),
    ),
}

# Exact inverses, so that round trips only accrue floating point error
_XYZ_TO_LRGB: dict[str, Matrix] = {
    white: invert(matrix) for white, matrix in _LRGB_TO_XYZ.items()
}

# Cone fundamentals by Smith and Pokorny (1975)
SMITH_POKORNY: Matrix = (
    (  0.15514,  0.54312, -0.03286 ),
    ( -0.15514,  0.45684,  0.03286 ),
    (  0.0,      0.0,      0.01608 ),
)

BRADFORD: Matrix = (
    (  0.8951,  0.2664, -0.1614 ),
    ( -0.7502,  1.7135,  0.0367 ),
    (  0.0389, -0.0685,  1.0296 ),
)

VON_KRIES: Matrix = (
    (  0.40024,  0.7076,  -0.08081 ),
    ( -0.2263,   1.16532,  0.0457  ),
    (  0.0,      0.0,      0.91822 ),
)

_LMS_TO_XYZ = invert(SMITH_POKORNY)

_LRGB_TO_YIQ: Matrix = (
    ( 0.299,     0.587,     0.114    ),
    ( 0.595716, -0.274453, -0.321263 ),
    ( 0.211456, -0.522591,  0.311135 ),
)

_YIQ_TO_LRGB = invert(_LRGB_TO_YIQ)


# --------------------------------------------------------------------------------------
# Chromatic Adaptation


@functools.cache
def adaptation_matrix(
    source: Vector, target: Vector, cone: Matrix = VON_KRIES
) -> Matrix:
    """
    Compute the matrix for adapting XYZ coordinates relative to the source
    white to coordinates relative to the target white. The adaptation scales
    the cone responses, by default with the Von Kries matrix.
    """
    source_cone = multiply(cone, source)
    target_cone = multiply(cone, target)
    scale = diagonal(*(t / s for s, t in zip(source_cone, target_cone)))
    return compose(invert(cone), compose(scale, cone))


def adapt_xyz(
    X: float, Y: float, Z: float, *, source: Vector, target: Vector
) -> tuple[float, float, float]:
    """Adapt the given XYZ color from the source to the target white."""
    if source == target:
        return X, Y, Z
    return multiply(adaptation_matrix(source, target), (X, Y, Z))


# --------------------------------------------------------------------------------------
# sRGB and Linear sRGB


def rgb_to_lrgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert the given color from sRGB with channels between 0 and 255 to linear
    sRGB with channels between 0 and 1.
    """
    def convert(value: float) -> float:
        value = value / 255
        magnitude = math.fabs(value)

        if magnitude <= 0.04045:
            return value / 12.92

        return math.copysign(math.pow((magnitude + 0.055) / 1.055, 2.4), value)

    return convert(r), convert(g), convert(b)


def lrgb_to_rgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert the given color from linear sRGB to sRGB. The result is neither
    rounded nor clipped.
    """
    def convert(value: float) -> float:
        magnitude = math.fabs(value)

        if magnitude <= 0.0031308:
            return value * 12.92 * 255

        return math.copysign(math.pow(magnitude, 1/2.4) * 1.055 - 0.055, value) * 255

    return convert(r), convert(g), convert(b)


def lrgb_to_xyz(
    r: float, g: float, b: float, *, white: WhiteSpec = 'D65'
) -> tuple[float, float, float]:
    """Convert the given color from linear sRGB to XYZ."""
    return multiply(_LRGB_TO_XYZ[white], (r, g, b))


def lrgb_to_yiq(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from linear sRGB to YIQ."""
    return multiply(_LRGB_TO_YIQ, (r, g, b))


def yiq_to_lrgb(y: float, i: float, q: float) -> tuple[float, float, float]:
    """Convert the given color from YIQ to linear sRGB."""
    return multiply(_YIQ_TO_LRGB, (y, i, q))


# --------------------------------------------------------------------------------------
# HSL and HWB, with percentages for all but hue


def _hue_of_rgb(r: float, g: float, b: float, v: float, c: float) -> float:
    if c == 0:
        return 0.0
    if v == b:
        h = 60 * ((r - g) / c + 4)
    elif v == g:
        h = 60 * ((b - r) / c + 2)
    else:
        h = 60 * ((g - b) / c % 6)
    return h % 360


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from sRGB to HSL."""
    r, g, b = r / 255, g / 255, b / 255
    v = max(r, g, b)
    c = v - min(r, g, b)
    l = v - c / 2
    s = 0.0 if l == 0 or l == 1 else (v - l) / min(l, 1 - l)
    return _hue_of_rgb(r, g, b, v, c), s * 100, l * 100


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert the given color from HSL to sRGB."""
    s, l = s / 100, l / 100
    c = (1 - math.fabs(2 * l - 1)) * s
    hp = (h % 360) / 60
    x = c * (1 - math.fabs(hp % 2 - 1))

    r = g = b = 0.0
    match int(hp):
        case 0:
            r, g = c, x
        case 1:
            r, g = x, c
        case 2:
            g, b = c, x
        case 3:
            g, b = x, c
        case 4:
            r, b = x, c
        case _:
            r, b = c, x

    m = l - c / 2
    return (r + m) * 255, (g + m) * 255, (b + m) * 255


def rgb_to_hwb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from sRGB to HWB."""
    r, g, b = r / 255, g / 255, b / 255
    v = max(r, g, b)
    c = v - min(r, g, b)
    return _hue_of_rgb(r, g, b, v, c), 100 * min(r, g, b), 100 * (1 - v)


def hwb_to_rgb(h: float, w: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from HWB to sRGB."""
    w, b = w / 100, b / 100
    if w + b >= 1:
        gray = w / (w + b) * 255
        return gray, gray, gray

    scale = 1 - w - b
    return cast(
        tuple[float, float, float],
        tuple(c * scale + w * 255 for c in hsl_to_rgb(h, 100, 50)),
    )


# --------------------------------------------------------------------------------------
# CIELAB and CIELCh


_LAB_EPSILON = (6 / 29) ** 3
_LAB_SLOPE = 3 * (6 / 29) ** 2
_LAB_OFFSET = 4 / 29


def _lab_compress(value: float) -> float:
    if value > _LAB_EPSILON:
        return math.cbrt(value)
    return value / _LAB_SLOPE + _LAB_OFFSET


def _lab_expand(value: float) -> float:
    if value > 6 / 29:
        return value * value * value
    return (value - _LAB_OFFSET) * _LAB_SLOPE


def xyz_to_lab(
    X: float, Y: float, Z: float, *, white: WhiteSpec = 'D65'
) -> tuple[float, float, float]:
    """Convert the given color from XYZ to CIELAB."""
    Xn, Yn, Zn = WHITE_POINTS[white]
    fx = _lab_compress(X / Xn)
    fy = _lab_compress(Y / Yn)
    fz = _lab_compress(Z / Zn)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_to_xyz(
    L: float, a: float, b: float, *, white: WhiteSpec = 'D65'
) -> tuple[float, float, float]:
    """Convert the given color from CIELAB to XYZ."""
    Xn, Yn, Zn = WHITE_POINTS[white]
    fy = (L + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200
    return Xn * _lab_expand(fx), Yn * _lab_expand(fy), Zn * _lab_expand(fz)


def lightness_from_xyz(
    X: float, Y: float, Z: float, *, white: WhiteSpec = 'D65'
) -> float:
    """Determine the CIELAB lightness L* of the given XYZ color."""
    return 116 * _lab_compress(Y / WHITE_POINTS[white][1]) - 16


def lab_to_lch(L: float, a: float, b: float) -> tuple[float, float, float]:
    """Convert the given color from CIELAB to CIELCh."""
    return L, math.hypot(a, b), atan2_degrees(b, a)


def lch_to_lab(L: float, C: float, h: float) -> tuple[float, float, float]:
    """Convert the given color from CIELCh to CIELAB."""
    return L, C * math.cos(math.radians(h)), C * math.sin(math.radians(h))


# --------------------------------------------------------------------------------------
# LMS and Yxy


def xyz_to_lms(X: float, Y: float, Z: float) -> tuple[float, float, float]:
    """Convert the given color from XYZ to LMS cone response."""
    return multiply(SMITH_POKORNY, (X, Y, Z))


def lms_to_xyz(L: float, M: float, S: float) -> tuple[float, float, float]:
    """Convert the given color from LMS cone response to XYZ."""
    return multiply(_LMS_TO_XYZ, (L, M, S))


def white_chromaticity(white: Vector) -> tuple[float, float]:
    """Determine the chromaticity coordinates of the reference white."""
    total = sum(white)
    return white[0] / total, white[1] / total


def xyz_to_yxy(
    X: float, Y: float, Z: float, *, white: WhiteSpec = 'D65'
) -> tuple[float, float, float]:
    """
    Convert the given color from XYZ to Yxy. Black has no chromaticity and
    hence is assigned the reference white's.
    """
    total = X + Y + Z
    if total == 0:
        return (Y, *white_chromaticity(WHITE_POINTS[white]))
    return Y, X / total, Y / total


def yxy_to_xyz(Y: float, x: float, y: float) -> tuple[float, float, float]:
    """Convert the given color from Yxy to XYZ."""
    if y == 0:
        return 0.0, 0.0, 0.0
    return x * Y / y, Y, (1 - x - y) * Y / y


# --------------------------------------------------------------------------------------
# XYZ


def xyz_to_lrgb(
    X: float, Y: float, Z: float, *, white: WhiteSpec = 'D65'
) -> tuple[float, float, float]:
    """Convert the given color from XYZ to linear sRGB."""
    return multiply(_XYZ_TO_LRGB[white], (X, Y, Z))


# --------------------------------------------------------------------------------------
# Utilities


def monochrome_rgb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert the given sRGB color to the gray with the same perceptual
    lightness.
    """
    L = lightness_from_xyz(*lrgb_to_xyz(*rgb_to_lrgb(r, g, b)))
    return lrgb_to_rgb(*xyz_to_lrgb(*lab_to_xyz(L, 0, 0)))


# --------------------------------------------------------------------------------------
# Arbitrary Conversions


def _collect_conversions(
    mod: dict[str, object],
    conversions: dict[str, dict[str, ConverterSpec]]
) -> None:
    module_name = mod.get('__name__')
    for name, value in mod.items():
        if name.startswith('_') or '_to_' not in name or not callable(value):
            continue
        # Skip conversions imported from other modules
        if getattr(value, '__module__', None) != module_name:
            continue
        source, _, target = name.partition('_to_')
        if not (Space.is_tag(source) and Space.is_tag(target)):
            continue
        targets = conversions.setdefault(source, {})
        if target in targets:
            raise ValueError(f'duplicate conversion from {source} to {target}')
        targets[target] = cast(ConverterSpec, value)


_BASE_TREE = {
    space.tag: None if space.base is None else space.base.tag
    for space in UNIVERSE
}

def _path_to_root(tag: str) -> list[str]:
    path = [tag]
    while (base := _BASE_TREE[path[-1]]) is not None:
        path.append(base)
    return path


def _elaborate_route(source: str, target: str) -> tuple[str, ...]:
    """
    Elaborate the route from the source to the target color space. It climbs
    the base tree from the source to the lowest ancestor shared with the target
    and then descends to the target.
    """
    for tag in (source, target):
        if tag not in _BASE_TREE:
            raise ValueError(f'{tag} is not a valid color space')

    upward = _path_to_root(source)
    downward = _path_to_root(target)

    # Both paths end at XYZ; drop common ancestors but the lowest
    while len(upward) > 1 and len(downward) > 1 and upward[-2] == downward[-2]:
        upward.pop()
        downward.pop()

    downward.pop()
    return (*upward, *reversed(downward))


_OPTION_NAMES = ('method', 'model', 'max_iterations', 'tolerance', 'white')

def _bind(fn: ConverterSpec, options: Options) -> ConverterSpec:
    """Bind the options that the conversion function accepts as keywords."""
    parameters = inspect.signature(fn).parameters
    settings = {
        name: getattr(options, name)
        for name in _OPTION_NAMES
        if name in parameters
        and parameters[name].kind is inspect.Parameter.KEYWORD_ONLY
    }
    if not settings:
        return fn
    return cast(ConverterSpec, functools.partial(fn, **settings))


def _create_converter(
    steps: tuple[tuple[ConverterSpec, Space], ...]
) -> Callable[..., ConversionResult]:
    """
    Instantiate a closure that applies the given conversions and accumulates
    their diagnostics. Doing so in a dedicated top-level function keeps the
    closure environment minimal.
    """
    def converter(*coordinates: float) -> ConversionResult:
        if len(coordinates) != 3:
            raise ValueError(
                f'color should have 3 coordinates, not {len(coordinates)}'
            )
        result = ConversionResult(cast(CoordinateSpec, coordinates))
        for fn, space in steps:
            value = fn(*result.coordinates)
            if not isinstance(value, ConversionResult):
                value = ConversionResult(
                    value, space.device and not space.in_gamut(*value)
                )
            result = result.merge(value)
        return result
    return converter


# The Munsell and PCCS engines depend on this module and hence are loaded lazily
_ENGINE_MODULES = {
    'munsell': '.munsell',
    'pccs': '.pccs',
}

_converter_cache: dict[tuple[str, str, Options], Callable[..., ConversionResult]] = {}
_conversions: dict[str, dict[str, ConverterSpec]] = {}
_collected_modules: set[str] = set()

def _ensure_conversions(route: tuple[str, ...]) -> None:
    if not _conversions:
        _collect_conversions(globals(), _conversions)

    for tag in route:
        module = _ENGINE_MODULES.get(tag)
        if module is None or module in _collected_modules:
            continue
        pkg, _, _ = __name__.rpartition('.')
        mod = import_module(module, pkg)
        _collect_conversions(vars(mod), _conversions)
        _collected_modules.add(module)


def get_converter(
    source: str,
    target: str,
    *,
    options: Options = DEFAULT_OPTIONS,
) -> Callable[..., ConversionResult]:
    """
    Instantiate a function that converts coordinates from the source color
    space to the target color space.

    The converter returns a :class:`.ConversionResult`. Its ``out_of_gamut``
    flag is set when the result or an intermediate result falls outside a
    device gamut or the Munsell renotation data. Its ``converged`` flag is
    cleared when an iterative solver hit the iteration cap.

    This function factory caches converters to avoid re-instantiating the same
    converter over and over again. Each converter's name is computed as
    ``f"{source}_to_{target}"``.
    """
    key = source, target, options
    maybe_converter = _converter_cache.get(key)
    if maybe_converter is not None:
        return maybe_converter

    route = _elaborate_route(source, target)
    _ensure_conversions(route)

    # Turn list of nodes into list of functions into converter function
    steps = tuple(
        (_bind(_conversions[t1][t2], options), Space.resolve(t2))
        for t1, t2 in itertools.pairwise(route)
    )

    # Annotate converter for easy debugability
    converter = _create_converter(steps)
    name = f'{source}_to_{target}'
    setattr(converter, '__name__', name)
    setattr(converter, '__qualname__', name)
    setattr(converter, 'route', route)
    setattr(converter, 'conversions', tuple(fn for fn, _ in steps))

    logger.debug('created converter along route %s', ' -> '.join(route))
    _converter_cache[key] = converter
    return converter


def convert(
    coordinates: Iterable[float],
    source: str,
    target: str,
    *,
    options: Options = DEFAULT_OPTIONS,
    **overrides: object,
) -> ConversionResult:
    """
    Convert the coordinates from the source to the target color space.

    Keyword arguments other than ``options`` override the corresponding
    fields of the options, e.g., ``method=Method.CONCISE``.
    """
    if overrides:
        options = options.replace(**overrides)
    return get_converter(source, target, options=options)(*coordinates)
