"""
Metadata about color spaces.

Each color space has a lower-case tag, which also is the prefix or suffix of
the corresponding conversion functions in the ``conversion`` module, and three
coordinates with optional ranges. Only the device spaces, i.e., RGB and linear
RGB, have a gamut in the strict sense. The other ranges are nominal and serve
for clipping and documentation only.
"""
import dataclasses
import math
from typing import cast, Literal, Self

from .equality import normalize
from .spec import CoordinateSpec


EPSILON = 0.000075


@dataclasses.dataclass(frozen=True, slots=True)
class Coordinate:
    """
    A color space coordinate.

    Attributes:
        name: the single-letter name of the coordinate
        min: the optional minimum value for the coordinate
        max: the optional maximum value for the coordinate
        type: the optional type for common coordinate semantics

    The following two coordinate type annotations are recognized:

      * An **angle** is a hue, i.e., a floating point number that wraps around
        at ``max``, which hence is the hue's period. Its ``min`` must be 0.
      * A **normal** is a floating point number between 0 and 1, inclusive.

    Instances of this class are immutable.
    """
    name: str
    min: None | float = None
    max: None | float = None
    type: None | Literal['angle', 'normal'] = None

    def __post_init__(self) -> None:
        if len(self.name) > 1:
            raise ValueError('coordinate must have name with at most 1 character')

        if self.angular:
            if self.min != 0 or self.max is None or self.max <= 0:
                raise ValueError('angle coordinate must have range from 0 to period')
        elif self.normal:
            if self.min != 0 or self.max != 1:
                raise ValueError('normal coordinate must have range from 0 to 1')

        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f'minimum {self.min} greater than maximum {self.max}')

    @property
    def angular(self) -> bool:
        """Flag for this coordinate representing a hue."""
        return self.type == 'angle'

    @property
    def normal(self) -> bool:
        """Flag for this coordinate being normal, i.e., between 0 and 1."""
        return self.type == 'normal'

    @property
    def unbounded(self) -> bool:
        """
        Flag for this coordinate having no bounds. That is the case if the
        coordinate represents a hue or has no limits.
        """
        return self.type == 'angle' or self.min is None and self.max is None

    def in_range(self, value: float, *, epsilon: float = EPSILON) -> bool:
        """
        Determine whether the given value is within the range set by this
        coordinate's ``min`` and ``max`` attributes with an epsilon tolerance.
        For hues, null limits, and not-a-numbers, that is always the case.
        """
        if self.unbounded or math.isnan(value):
            return True

        return (
            (self.min is None or self.min - epsilon <= value)
            and (self.max is None or value <= self.max + epsilon)
        )

    def clip(self, value: float, *, epsilon: float = 0) -> float:
        """
        Clip the value to the range set by this coordinate's ``min`` and ``max``
        attributes with an ``epsilon`` tolerance. The result is the input for
        hues, null limits, and not-a-numbers.
        """
        if self.unbounded or math.isnan(value):
            return value
        if self.min is not None and not self.min - epsilon <= value:
            return self.min
        if self.max is not None and not value <= self.max + epsilon:
            return self.max
        return value


@dataclasses.dataclass(frozen=True, slots=True)
class Space:
    """
    A color space.

    Attributes:
        tag: is a lower-case Python identifier
        label: is a human-readable, descriptive label
        base: is the optional base color space, i.e., the next space on the
            way to XYZ
        coordinates: are the coordinates
        device: flags spaces whose coordinate ranges are a real gamut, so that
            conversion results outside the ranges are flagged

    Instances of this class are immutable.
    """
    tag: str
    label: str
    base: None | Self
    coordinates: tuple[Coordinate, Coordinate, Coordinate]
    device: bool = False

    def __post_init__(self) -> None:
        if sum(c.angular for c in self.coordinates) > 1:
            raise ValueError(f'{self.tag} has more than one hue coordinate')

    @property
    def angular_index(self) -> int:
        """
        Determine the index of the hue coordinate. If the color space is
        polar, this property provides the hue's index. Otherwise, it is -1.
        """
        for index, coordinate in enumerate(self.coordinates):
            if coordinate.angular:
                return index
        return -1

    @property
    def hue_period(self) -> None | float:
        """Determine the period of this color space's hue, if it has one."""
        index = self.angular_index
        return None if index < 0 else self.coordinates[index].max

    def in_gamut(self, *coordinates: float, epsilon: float = EPSILON) -> bool:
        """
        Determine whether the given coordinates are in gamut for this color
        space within an epsilon tolerance.
        """
        assert len(self.coordinates) == len(coordinates)
        for coordinate, value in zip(self.coordinates, coordinates):
            if not coordinate.in_range(value, epsilon=epsilon):
                return False
        return True

    def clip(self, *coordinates: float, epsilon: float = 0) -> CoordinateSpec:
        """
        Clip the coordinates to this color space's ranges with an epsilon
        tolerance.
        """
        return cast(
            CoordinateSpec,
            tuple(
                c.clip(v, epsilon=epsilon)
                for c, v in zip(self.coordinates, coordinates)
            ),
        )

    def normalize(self, *coordinates: float) -> tuple[None | float, ...]:
        """
        Normalize coordinates for this color space. See :func:`.normalize`.
        """
        index = self.angular_index
        return normalize(
            coordinates,
            angular_index=index,
            period=360 if index < 0 else cast(float, self.coordinates[index].max),
        )

    @staticmethod
    def is_tag(tag: str) -> bool:
        """Check whether the tag is a valid for a color space."""
        return tag in _TAG_TO_SPACE

    @staticmethod
    def resolve(tag: str) -> 'Space':
        """Resolve the tag to the corresponding color space."""
        space = _TAG_TO_SPACE.get(tag)
        if space is None:
            raise ValueError(f'{tag} is not a valid color space')
        return space


XYZ = Space(
    tag='xyz',
    label='CIE 1931 XYZ',
    base=None,
    coordinates=(
        Coordinate('X'),
        Coordinate('Y'),
        Coordinate('Z'),
    ),
)

LRGB = Space(
    tag='lrgb',
    label='Linear sRGB',
    base=XYZ,
    coordinates=(
        Coordinate('r', 0, 1, 'normal'),
        Coordinate('g', 0, 1, 'normal'),
        Coordinate('b', 0, 1, 'normal'),
    ),
    device=True,
)

RGB = Space(
    tag='rgb',
    label='sRGB',
    base=LRGB,
    coordinates=(
        Coordinate('r', 0, 255),
        Coordinate('g', 0, 255),
        Coordinate('b', 0, 255),
    ),
    device=True,
)

YIQ = Space(
    tag='yiq',
    label='NTSC YIQ',
    base=LRGB,
    coordinates=(
        Coordinate('y', 0, 1, 'normal'),
        Coordinate('i', -0.5957, 0.5957),
        Coordinate('q', -0.5226, 0.5226),
    ),
)

HSL = Space(
    tag='hsl',
    label='HSL',
    base=RGB,
    coordinates=(
        Coordinate('h', 0, 360, 'angle'),
        Coordinate('s', 0, 100),
        Coordinate('l', 0, 100),
    ),
)

HWB = Space(
    tag='hwb',
    label='HWB',
    base=RGB,
    coordinates=(
        Coordinate('h', 0, 360, 'angle'),
        Coordinate('w', 0, 100),
        Coordinate('b', 0, 100),
    ),
)

YXY = Space(
    tag='yxy',
    label='CIE 1931 Yxy',
    base=XYZ,
    coordinates=(
        Coordinate('Y'),
        Coordinate('x', 0, 1, 'normal'),
        Coordinate('y', 0, 1, 'normal'),
    ),
)

LAB = Space(
    tag='lab',
    label='CIELAB',
    base=XYZ,
    coordinates=(
        Coordinate('L', 0, 100),
        Coordinate('a'),
        Coordinate('b'),
    ),
)

LCH = Space(
    tag='lch',
    label='CIELCh',
    base=LAB,
    coordinates=(
        Coordinate('L', 0, 100),
        Coordinate('C', 0),
        Coordinate('h', 0, 360, 'angle'),
    ),
)

LMS = Space(
    tag='lms',
    label='LMS cone response',
    base=XYZ,
    coordinates=(
        Coordinate('L'),
        Coordinate('M'),
        Coordinate('S'),
    ),
)

MUNSELL = Space(
    tag='munsell',
    label='Munsell HVC',
    base=XYZ,
    coordinates=(
        Coordinate('H', 0, 100, 'angle'),
        Coordinate('V', 0, 10),
        Coordinate('C', 0),
    ),
)

PCCS = Space(
    tag='pccs',
    label='PCCS hls',
    base=MUNSELL,
    coordinates=(
        Coordinate('h', 0, 24, 'angle'),
        Coordinate('l', 0, 10),
        Coordinate('s', 0),
    ),
)

UNIVERSE = (
    XYZ,
    LRGB,
    RGB,
    YIQ,
    HSL,
    HWB,
    YXY,
    LAB,
    LCH,
    LMS,
    MUNSELL,
    PCCS,
)

_TAG_TO_SPACE = { space.tag: space for space in UNIVERSE }
