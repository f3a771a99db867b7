"""
Chromakit converts colors between RGB, CIE, and perceptual color spaces,
including the Munsell and PCCS color order systems, and evaluates and
simulates colors.

The low-level API consists of plain functions that operate on three
coordinates, e.g., :func:`.conversion.rgb_to_lrgb`, and
:func:`.conversion.convert`, which converts between arbitrary color spaces.
The high-level API is :class:`.Color`.
"""
import logging

from .conversion import convert, get_converter
from .object import Color
from .space import Space, UNIVERSE
from .spec import (
    ConversionResult,
    DEFAULT_OPTIONS,
    Method,
    Options,
    VisionModel,
)


logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = (
    'Color',
    'ConversionResult',
    'convert',
    'DEFAULT_OPTIONS',
    'get_converter',
    'Method',
    'Options',
    'Space',
    'UNIVERSE',
    'VisionModel',
)
