"""
rgbapixel Pixel Classes
=======================

RGBA pixel values whose four channels share one unsigned integer type.

Features
--------
- 8, 16, 32 and 64 bit channel variants
- Alpha defaults to the channel maximum (fully opaque)
- In-place setters that return the pixel for chaining
- Tuple, list and numpy array views of the channels
- Hex rendering and a single-pass channel iterator

Usage
-----
>>> from rgbapixel.pixel import PixelU8, PixelU16

>>> px = PixelU8.new(9, 234, 5)
>>> px.get_tuple()  # (9, 234, 5, 255)
>>> px.to_hex()  # '0x9EA5FF'
>>> px.set_r(10).set_alpha(128).get_vector()  # [10, 234, 5, 128]
>>> list(px)  # [10, 234, 5, 128]
>>>
>>> deep = PixelU16.default()
>>> deep.get_slice()  # array([0, 0, 0, 65535], dtype=uint16)

Pixel Classes
-------------
    - PixelU8: 8-bit channels (alias: Pixel)
    - PixelU16: 16-bit channels
    - PixelU32: 32-bit channels
    - PixelU64: 64-bit channels

Notes
-----
- Channel values outside the channel type raise OverflowError; nothing is clamped
- Non-integer channel values raise TypeError
- to_hsv() always raises NotImplementedError
- to_hex() prefixes only the red channel and pads none of them
"""

from .pixel_math import PixelMath
from .pixel_base import PixelBase
from .channel_iter import PixelChannelIterator
from .variants import Pixel, PixelU8, PixelU16, PixelU32, PixelU64, pixel_class


__all__ = [
    'PixelMath',
    'PixelBase',
    'PixelChannelIterator',
    'Pixel',
    'PixelU8',
    'PixelU16',
    'PixelU32',
    'PixelU64',
    'pixel_class',
]
