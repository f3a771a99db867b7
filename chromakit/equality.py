"""
Equality of colors.

Equality comparison for colors is complicated by three problems:

 1. Coordinate values may be not-a-numbers, which do not equal themselves.
 2. Hues may have values outside their period but still denote the same hue.
    The period is 360 degrees for LCh, HSL, and HWB, 100 steps for Munsell,
    and 24 sectors for PCCS.
 3. Conversion between color spaces accrues floating point error.

Since Python requires that equal objects have equal hashes, the difference
between two colors cannot define equality. Instead, this module normalizes
coordinates to a canonical representation that is then used for both hash
computation and equality comparison.
"""
import math

from .vector import normalize_angle


PRECISION = 14
"""
The default precision for rounding coordinates during normalization.
"""


def normalize(
    coordinates: tuple[float, ...],
    *,
    angular_index: int = -1,
    period: float = 360,
    precision: int = PRECISION,
) -> tuple[None | float, ...]:
    """
    Normalize the coordinates.

    Args:
        coordinates: are the color's components.
        angular_index: is the index of the hue coordinate, if there is one.
        period: is the hue's period.
        precision: is the number of decimals to round to.
    Returns:
        The normalized coordinates.

    This function replaces not-a-numbers with ``None``, maps hues onto the
    interval from 0 to the period and rounds them to two decimal digits less
    than the precision, and rounds all other coordinates to as many decimal
    digits as the precision.
    """
    result: list[None | float] = []

    for index, value in enumerate(coordinates):
        if math.isnan(value):
            result.append(None)
            continue

        if index == angular_index:
            value = normalize_angle(float(value), period)
            effective_precision = precision - 2
            value = round(value, effective_precision)
            # Rounding may turn a hue just below the period into the period
            result.append(0.0 if value >= period else value)
            continue

        result.append(round(float(value), precision))

    return tuple(result)
