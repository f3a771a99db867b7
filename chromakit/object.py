"""Chromakit's high-level color API."""

from collections.abc import Iterable
import dataclasses
from typing import cast, overload, Self

from .category import category_of_yxy
from .conspicuity import conspicuity_of_lab
from .conversion import get_converter, monochrome_rgb
from .difference import closest, deltaE_ciede2000, nbs_of, NBS
from .gamut import map_into_gamut
from .serde import (
    parse_fn,
    parse_format_spec,
    parse_hex,
    parse_munsell,
    stringify,
)
from .space import EPSILON, Space
from .spec import (
    ConversionResult,
    CoordinateSpec,
    DEFAULT_OPTIONS,
    Options,
    VisionModel,
)
from .vision import lab_to_elderly_ab, lrgb_to_deuteranopia, lrgb_to_protanopia


@dataclasses.dataclass(frozen=True, slots=True, init=False, eq=False)
class Color:
    """
    A color object.

    This class implements the high-level, object-oriented API for colors.

    Attributes:
        tag: identifies the color space
        coordinates: are the three numerical components of the color

    Color's constructor supports a number of options for specifying the color
    and its coordinates:

        * From an existing ``Color`` object
        * From the textual representation of a color, using ``#`` for hex
          colors, Munsell notation, or one of the tags in function notation
        * From a tag and tuple with coordinates
        * From a tag and three coordinates

    Instances of this class are immutable.

    This class implements ``__hash__()`` and ``__eq__()`` so that colors *in the
    same color space* with sufficiently close coordinates are treated as equal.
    That means equality after rounding to 14 decimal digits, with hues mapped
    onto their period first. Since equal colors must have equal hashes, the
    magnitude of the difference cannot be used for equality.
    """
    tag: str
    coordinates: CoordinateSpec

    @overload
    def __init__(self, color: str | Self, /) -> None:
        ...
    @overload
    def __init__(self, tag: str, coordinates: Iterable[float], /) -> None:
        ...
    @overload
    def __init__(self, tag: str, c1: float, c2: float, c3: float, /) -> None:
        ...
    def __init__(
        self,
        tag: str | Self,
        coordinates: None | float | Iterable[float] = None,
        c2: None | float = None,
        c3: None | float = None,
    ) -> None:
        if isinstance(tag, Color):
            tag, coordinates = tag.tag, tag.coordinates
        elif coordinates is None:
            text = tag.strip()
            if text.startswith('#'):
                tag, coordinates = parse_hex(text)
            elif '(' in text and text.endswith(')'):
                tag, coordinates = parse_fn(text)
            elif text[:1].isdigit() or text.startswith('N'):
                tag, coordinates = parse_munsell(text)
            else:
                raise ValueError(f'"{tag}" is not a valid color')
        elif c2 is not None or c3 is not None:
            coordinates = cast(float, coordinates), cast(float, c2), cast(float, c3)

        assert coordinates is not None and not isinstance(coordinates, (int, float))
        values = tuple(float(c) for c in coordinates)
        space = Space.resolve(tag)
        if len(values) != len(space.coordinates):
            raise ValueError(
                f'{tag} should have {len(space.coordinates)} coordinates, not {len(values)}'
            )

        object.__setattr__(self, 'tag', tag)
        object.__setattr__(self, 'coordinates', values)

    @property
    def space(self) -> Space:
        """Get the color space for this color."""
        return Space.resolve(self.tag)

    def __getattr__(self, name: str) -> float:
        """Provide access to color space coordinates by single-letter name."""
        if len(name) == 1:
            for coordinate, value in zip(self.space.coordinates, self.coordinates):
                if coordinate.name == name:
                    return value

        raise AttributeError(f'color {self} has no attribute named "{name}"')

    # ----------------------------------------------------------------------------------
    # Hash and Equality

    def __hash__(self) -> int:
        return hash((self.tag, self.space.normalize(*self.coordinates)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color) or self.tag != other.tag:
            return NotImplemented
        space = self.space
        return space.normalize(*self.coordinates) == space.normalize(*other.coordinates)

    # ----------------------------------------------------------------------------------
    # Gamut and Clipping

    def in_gamut(self, epsilon: float = EPSILON) -> bool:
        """Determine whether this color is within gamut for its color space."""
        return self.space.in_gamut(*self.coordinates, epsilon=epsilon)

    def clip(self, epsilon: float = 0) -> Self:
        """Clip this color to its color space's ranges."""
        if self.in_gamut(epsilon):
            return self
        return type(self)(self.tag, self.space.clip(*self.coordinates))

    def to_gamut(self) -> Self:
        """
        Map this color into the gamut of its color space by reducing CIELCh
        chroma until clipping makes no noticeable difference. Only sRGB and
        linear sRGB colors have a gamut.
        """
        return type(self)(self.tag, map_into_gamut(self.tag, self.coordinates))

    # ----------------------------------------------------------------------------------
    # Conversion to Other Color Spaces

    def convert(
        self, target: str, *, options: Options = DEFAULT_OPTIONS
    ) -> ConversionResult:
        """
        Convert this color to the specified color space, returning the
        coordinates together with the out-of-gamut and convergence flags.
        """
        return get_converter(self.tag, target, options=options)(*self.coordinates)

    def to(self, target: str, *, options: Options = DEFAULT_OPTIONS) -> Self:
        """Convert this color to the specified color space."""
        if self.tag == target:
            return self
        return type(self)(target, self.convert(target, options=options).coordinates)

    # ----------------------------------------------------------------------------------
    # Evaluation

    def distance(self, other: 'str | Color') -> float:
        """
        Determine the CIEDE2000 color difference between this color and the
        given color.
        """
        return deltaE_ciede2000(
            *self.to('lab').coordinates,
            *Color(other).to('lab').coordinates,
        )

    def difference_grade(self, other: 'str | Color') -> NBS:
        """Grade the difference between this color and the given color."""
        return nbs_of(self.distance(other))

    def closest(self, colors: Iterable['str | Color']) -> int:
        """
        Find the color with the smallest CIEDE2000 difference from this color
        and return its index.
        """
        index, _ = closest(
            self.to('lab').coordinates,
            (Color(c).to('lab').coordinates for c in colors),
        )
        return index

    def category(self) -> str:
        """Determine the basic categorical color of this color."""
        return category_of_yxy(*self.to('yxy').coordinates)

    def conspicuity(self) -> float:
        """Determine the conspicuity of this color."""
        return conspicuity_of_lab(*self.to('lab').coordinates)

    def tone(self, *, options: Options = DEFAULT_OPTIONS) -> str:
        """Determine the PCCS tone of this color, with grays as ``W``, ``Gy``, or ``Bk``."""
        from .pccs import pccs_to_tone_string
        return pccs_to_tone_string(*self.to('pccs', options=options).coordinates)

    # ----------------------------------------------------------------------------------
    # Simulation

    def protanopia(self, model: VisionModel = VisionModel.BRETTEL1997) -> Self:
        """Simulate how a protanope perceives this color."""
        return type(self)(
            'lrgb', lrgb_to_protanopia(*self.to('lrgb').coordinates, model=model)
        ).to(self.tag)

    def deuteranopia(self, model: VisionModel = VisionModel.BRETTEL1997) -> Self:
        """Simulate how a deuteranope perceives this color."""
        return type(self)(
            'lrgb', lrgb_to_deuteranopia(*self.to('lrgb').coordinates, model=model)
        ).to(self.tag)

    def elderly(self) -> Self:
        """Simulate how a 70-year-old perceives this color."""
        return type(self)('lab', lab_to_elderly_ab(*self.to('lab').coordinates)).to(self.tag)

    def monochrome(self) -> Self:
        """Convert this color to the gray with the same perceptual lightness."""
        return type(self)('rgb', monochrome_rgb(*self.to('rgb').coordinates)).to(self.tag)

    # ----------------------------------------------------------------------------------
    # Serialization to Text

    def __format__(self, format_spec: str) -> str:
        fmt, precision = parse_format_spec(format_spec)
        return stringify(self.tag, self.coordinates, fmt, precision)

    def __str__(self) -> str:
        return stringify(self.tag, self.coordinates)
