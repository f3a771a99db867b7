"""Support for serializing and deserializing color values"""
import enum
import re
from typing import cast, Literal, NoReturn, overload

from .space import Space
from .spec import CoordinateSpec


@overload
def _check(
    is_valid: Literal[False], entity: str, value: object, deficiency: str = ...
) -> NoReturn:
    ...
@overload
def _check(
    is_valid: bool, entity: str, value: object, deficiency: str = ...
) -> None | NoReturn:
    ...
def _check(
    is_valid: bool, entity: str, value: object, deficiency: str = 'is malformed'
) -> None | NoReturn:
    if not is_valid:
        raise SyntaxError(f'{entity} "{value}" {deficiency}')
    return


def parse_hex(color: str) -> tuple[str, CoordinateSpec]:
    """
    Parse the string specifying a color in hashed hexadecimal format. The
    result is tagged ``rgb`` and has coordinates between 0 and 255.
    """
    entity = 'hex web color'

    try:
        _check(color.startswith('#'), entity, color, 'does not start with "#"')
        digits = color[1:]
        _check(len(digits) in (3, 6), entity, color, 'does not have 3 or 6 digits')
        if len(digits) == 3:
            digits = ''.join(f'{d}{d}' for d in digits)
        return 'rgb', cast(
            CoordinateSpec,
            tuple(float(int(digits[n:n+2], base=16)) for n in range(0, 6, 2)),
        )
    except ValueError:
        _check(False, entity, color)


_FUNCTION = re.compile(r'([a-z]+)\((.*)\)')

def parse_fn(color: str) -> tuple[str, CoordinateSpec]:
    """
    Parse the string specifying a color in function notation, e.g.,
    ``lab(50, 20, -30)``. The function name must be a color space tag.
    """
    entity = 'color function'

    match = _FUNCTION.fullmatch(color.strip())
    _check(match is not None, entity, color)
    assert match is not None
    tag, args = match.groups()
    _check(
        Space.is_tag(tag), entity, color, f'has unknown color space "{tag}"'
    )

    try:
        coordinates = tuple(float(c) for c in args.split(','))
    except ValueError:
        _check(False, entity, color, 'has non-numeric coordinates')
    _check(len(coordinates) == 3, entity, color, 'does not have three coordinates')
    return tag, cast(CoordinateSpec, coordinates)


_MUNSELL = re.compile(
    r'(?:(?P<hue>\d+(?:\.\d*)?[A-Z]{1,2})\s+(?P<value>\d+(?:\.\d*)?)/(?P<chroma>\d+(?:\.\d*)?))'
    r'|(?:N\s*(?P<gray>\d+(?:\.\d*)?))'
)

def parse_munsell(color: str) -> tuple[str, CoordinateSpec]:
    """
    Parse the string specifying a color in Munsell notation, e.g., ``5R 4/14``
    for a chromatic color or ``N 5`` for an achromatic one.
    """
    from .munsell import hue_name_to_value
    entity = 'Munsell color'

    match = _MUNSELL.fullmatch(color.strip())
    _check(match is not None, entity, color)
    assert match is not None

    if match.group('gray') is not None:
        return 'munsell', (0.0, float(match.group('gray')), 0.0)

    try:
        hue = hue_name_to_value(match.group('hue'))
    except ValueError:
        _check(False, entity, color, 'has invalid hue')
    return 'munsell', (hue, float(match.group('value')), float(match.group('chroma')))


# --------------------------------------------------------------------------------------


def from_color_integer(value: int) -> tuple[int, int, int]:
    """Split the 24-bit color integer ``0xRRGGBB`` into its three channels."""
    if not 0 <= value <= 0xFFFFFF:
        raise ValueError(f'{value:#x} is not a 24-bit color integer')
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def to_color_integer(r: float, g: float, b: float) -> int:
    """
    Combine the three sRGB channels between 0 and 255 into a 24-bit color
    integer. Channels are rounded first.
    """
    channels = []
    for c in (r, g, b):
        channel = round(c)
        if not 0 <= channel <= 255:
            raise ValueError(f'channel {c} is out of range 0 to 255')
        channels.append(channel)
    return channels[0] << 16 | channels[1] << 8 | channels[2]


# --------------------------------------------------------------------------------------


class Format(enum.Enum):
    """
    The color format

    Attributes:
        FUNCTION: for ``<tag>(<coordinates>)`` notation
        HEX: for ``#<hex>`` notation of sRGB colors
        NOTATION: for the native notation of Munsell and PCCS colors
    """
    FUNCTION = 'f'
    HEX = 'h'
    NOTATION = 'n'


def parse_format_spec(spec: str) -> tuple[Format, int]:
    """
    Parse the color format specifier into the format and precision.

    Args:
        spec: selects the desired output format and precision
    Returns:
        the format and maximum precision for floating point numbers, which
        default to `Format.FUNCTION` and 5, respectively

    A valid format specifier comprises two optional parts. The first part
    specifies the precision as a period followed by decimal digits, e.g.,
    ``.3``. The second part is ``f``, ``h``, or ``n`` for the format.
    """
    format = Format.FUNCTION
    precision = 5

    s = spec
    if s:
        f = s[-1]
        if f in ('f', 'h', 'n'):
            format = Format(f)
            s = s[:-1]
    if s.startswith('.') and s[1:].isdigit():
        precision = int(s[1:])
        s = ''
    if s:
        raise ValueError(f'malformed color format "{spec}"')

    return format, precision


def stringify(
    tag: str,
    coordinates: CoordinateSpec,
    format: Format = Format.FUNCTION,
    precision: int = 5
) -> str:
    """
    Format the tagged coordinates in the specified format and with the specified
    precision.
    """
    if format is Format.HEX:
        if tag != 'rgb':
            raise ValueError(f'{tag} has no hexadecimal serialization')
        return f'#{to_color_integer(*coordinates):06x}'
    elif format is Format.NOTATION:
        if tag == 'munsell':
            from .munsell import munsell_to_string
            return munsell_to_string(*coordinates)
        elif tag == 'pccs':
            from .pccs import pccs_to_string
            return pccs_to_string(*coordinates)
        raise ValueError(f'{tag} has no native notation')

    coordinate_text = ', '.join(f'{c:.{precision}}' for c in coordinates)
    return f'{tag}({coordinate_text})'
