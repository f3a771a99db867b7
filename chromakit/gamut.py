"""
Support for gamut mapping.

Gamut mapping makes extensive use of other color algorithms, constantly
converting between color spaces, computing the distance between colors,
checking whether colors are in gamut, and clipping colors. As a result, this
module has more dependencies than most of the other modules, importing symbols
from :mod:`.conversion`, :mod:`.difference`, :mod:`.space`, and :mod:`.spec`.
"""
from .conversion import get_converter, lch_to_lab
from .difference import deltaE_cie76
from .space import Space
from .spec import CoordinateSpec


JND = 2.0
EPSILON = 0.0001

def map_into_gamut(
    target: str,
    coordinates: CoordinateSpec,
) -> CoordinateSpec:
    """
    Map the coordinates into gamut by adapting the `CSS Color 4 algorithm
    <https://drafts.csswg.org/css-color/#css-gamut-mapping>`_ to CIELCh.

    The algorithm performs a binary search across the chroma range between zero
    and the chroma of the original, out-of-gamut color in CIELCh. It stops the
    search once the chroma-adjusted color is within the just noticeable
    difference (JND) of its clipped version as measured by CIE76 and uses that
    clipped version as result. Only sRGB and linear sRGB have a gamut. For all
    other color spaces, this function returns the coordinates unchanged.
    """
    target_space = Space.resolve(target)
    if not target_space.device:
        return coordinates

    # We'll be using these converters a lot
    lch_to_target = get_converter('lch', target)
    target_to_lab = get_converter(target, 'lab')

    # 1. Preliminary: Check lightness
    origin_as_lch = get_converter(target, 'lch')(*coordinates).coordinates
    L = origin_as_lch[0]
    if L >= 100:
        return lch_to_target(100, 0, 0).coordinates
    if L <= 0:
        return lch_to_target(0, 0, 0).coordinates

    # 2. Preliminary: Check gamut
    if target_space.in_gamut(*coordinates, epsilon=0):
        return coordinates

    # Minimize just noticeable difference between current and clipped colors
    current_as_lch = origin_as_lch
    clipped_as_target = target_space.clip(
        *lch_to_target(*current_as_lch).coordinates, epsilon=0
    )
    diff = deltaE_cie76(
        *target_to_lab(*clipped_as_target).coordinates, *lch_to_lab(*current_as_lch)
    )

    if diff < JND:
        return clipped_as_target

    # Perform a binary search by adjusting chroma in CIELCh
    min = 0.0
    max = origin_as_lch[1]
    min_in_gamut = True

    while max - min > EPSILON:
        chroma = (min + max) / 2
        current_as_lch = current_as_lch[0], chroma, current_as_lch[2]
        current_as_target = lch_to_target(*current_as_lch).coordinates
        if min_in_gamut and target_space.in_gamut(*current_as_target, epsilon=0):
            min = chroma
            continue

        clipped_as_target = target_space.clip(*current_as_target, epsilon=0)
        diff = deltaE_cie76(
            *target_to_lab(*clipped_as_target).coordinates, *lch_to_lab(*current_as_lch)
        )
        if diff < JND:
            if JND - diff < EPSILON:
                return clipped_as_target
            min_in_gamut = False
            min = chroma
        else:
            max = chroma

    return clipped_as_target
