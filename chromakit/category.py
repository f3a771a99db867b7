"""
Basic categorical colors.

This module determines which of the eleven basic color terms best describes a
color. Lookup quantizes luminance to one of six levels and then picks the
category of the nearest populated cell on an 18 by 21 grid of chromaticities,
which starts at x = 0.150 and y = 0.075 and has a step of 0.025.

The grid is derived when the module is loaded. A cell is populated if its
chromaticity lies within the sRGB triangle. Its category follows from the
CIELCh coordinates of the cell's color at the level's luminance.
"""
import logging
import math
import types

from .conversion import lab_to_lch, xyz_to_lab, xyz_to_lrgb, yxy_to_xyz


logger = logging.getLogger(__name__)


CATEGORIES = (
    'white', 'black', 'red', 'green',
    'yellow', 'blue', 'brown', 'purple',
    'pink', 'orange', 'gray',
)

_Y_TO_LUMINANCE = 60
_LEVELS = (2, 5, 10, 20, 30, 40)

_COLUMNS = 18
_ROWS = 21
_ORIGIN_X = 150
_ORIGIN_Y = 75
_STEP = 25


def _luminance_of_level(level: int) -> float:
    return level ** (1 / 0.9) / _Y_TO_LUMINANCE


def _classify(L: float, C: float, h: float) -> str:
    if C < 12:
        if L > 80:
            return 'white'
        if L < 30:
            return 'black'
        return 'gray'

    if h < 50 or 350 <= h:
        if L >= 65:
            return 'pink'
        if 20 <= h < 50 and L < 45 and C < 60:
            return 'brown'
        return 'red'
    if h < 85:
        return 'orange' if L >= 45 else 'brown'
    if h < 115:
        return 'yellow' if L >= 65 else 'brown'
    if h < 225:
        return 'green'
    if h < 312:
        return 'blue'
    return 'pink' if L >= 65 else 'purple'


def _build_table() -> types.MappingProxyType[int, tuple[tuple[int, int, str], ...]]:
    table = {}
    for level in _LEVELS:
        Y = _luminance_of_level(level)
        cells = []
        for index in range(_COLUMNS * _ROWS):
            x = (index % _COLUMNS) * _STEP + _ORIGIN_X
            y = (index // _COLUMNS) * _STEP + _ORIGIN_Y

            # Only chromaticities that sRGB can display
            if any(c < -1e-9 for c in xyz_to_lrgb(*yxy_to_xyz(1, x / 1000, y / 1000))):
                continue

            L, C, h = lab_to_lch(*xyz_to_lab(*yxy_to_xyz(Y, x / 1000, y / 1000)))
            cells.append((x, y, _classify(L, C, h)))
        table[level] = tuple(cells)

    logger.debug(
        'built categorical color table with %d cells',
        sum(len(cells) for cells in table.values()),
    )
    return types.MappingProxyType(table)


_TABLE = _build_table()


def category_of_yxy(Y: float, x: float, y: float) -> str:
    """
    Determine the basic categorical color of the Yxy color, which is one of
    :data:`CATEGORIES`.
    """
    luminance = math.pow(max(Y, 0) * _Y_TO_LUMINANCE, 0.9)
    level = min(_LEVELS, key=lambda l: abs(luminance - l))

    sx, sy = x * 1000, y * 1000
    best, category = math.inf, CATEGORIES[1]
    for cx, cy, name in _TABLE[level]:
        d = math.hypot(sx - cx, sy - cy)
        if d < best:
            best, category = d, name
    return category
