"""
Basic type declarations for coordinates, conversions, and their settings:

  * ``CoordinateSpec`` is a triple of floating point values
  * ``ConverterSpec`` describes a function that converts from one color space
    into another
  * ``ConversionResult`` bundles converted coordinates with the advisory
    out-of-gamut and convergence diagnostics
  * ``Method`` and ``VisionModel`` select between alternative algorithms
  * ``Options`` bundles all settings that influence conversions

All container types are immutable.
"""
import dataclasses
import enum
from typing import Literal, Protocol, Self, TypeAlias


CoordinateSpec: TypeAlias = tuple[float, float, float]

WhiteSpec: TypeAlias = Literal['D65', 'D50']


@dataclasses.dataclass(frozen=True, slots=True)
class ConversionResult:
    """
    The result of a conversion.

    Attributes:
        coordinates: are the converted coordinates
        out_of_gamut: flags coordinates that fall outside the representable
            range of the target (or an intermediate) color space; they are a
            best effort and have not been clipped
        converged: flags that all iterative solvers involved in the
            conversion met their tolerance before hitting the iteration cap

    Both flags are advisory. The coordinates are always usable.
    """
    coordinates: CoordinateSpec
    out_of_gamut: bool = False
    converged: bool = True

    def merge(self, other: 'ConversionResult') -> 'ConversionResult':
        """
        Combine the diagnostics of this result with a later one. The result
        has the later result's coordinates.
        """
        return ConversionResult(
            other.coordinates,
            self.out_of_gamut or other.out_of_gamut,
            self.converged and other.converged,
        )


class ConverterSpec(Protocol):
    def __call__(
        self, __c1: float, __c2: float, __c3: float
    ) -> CoordinateSpec | ConversionResult:
        ...


class Method(enum.Enum):
    """
    The algorithm for the Munsell and PCCS engines.

    Attributes:
        CONCISE: for closed-form approximations without refinement
        ACCURATE: for interpolation tables and iterative solvers
    """
    CONCISE = 'concise'
    ACCURATE = 'accurate'


class VisionModel(enum.Enum):
    """
    The model for simulating dichromatic color vision.

    Attributes:
        BRETTEL1997: for Brettel, Viénot, and Mollon's projection only
        OKAJIMA2007: for the same projection followed by Okajima's correction,
            which preserves the stimulation of the unaffected cone
    """
    BRETTEL1997 = 'brettel1997'
    OKAJIMA2007 = 'okajima2007'


MAX_ITERATIONS = 50
"""The default cap on iterations for all iterative solvers."""


@dataclasses.dataclass(frozen=True, slots=True)
class Options:
    """
    Settings for conversions.

    Attributes:
        method: selects the Munsell and PCCS algorithms
        model: selects the dichromacy simulation
        max_iterations: caps every iterative solver
        tolerance: overrides each solver's default tolerance, if not ``None``
        white: selects the reference white for XYZ

    Converter functions accept the same names as keyword-only arguments.
    Instances of this class are immutable and hashable, so they can key
    caches.
    """
    method: Method = Method.ACCURATE
    model: VisionModel = VisionModel.BRETTEL1997
    max_iterations: int = MAX_ITERATIONS
    tolerance: None | float = None
    white: WhiteSpec = 'D65'

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            raise ValueError(
                f'maximum number of iterations {self.max_iterations} is not positive'
            )
        if self.tolerance is not None and not self.tolerance > 0:
            raise ValueError(f'tolerance {self.tolerance} is not positive')
        if self.white not in ('D65', 'D50'):
            raise ValueError(f'{self.white} is not a supported reference white')

    def replace(self, **changes: object) -> Self:
        """Create a copy of these options with the given fields changed."""
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]


DEFAULT_OPTIONS = Options()
