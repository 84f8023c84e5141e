"""rgbapixel: generic RGBA pixel values over unsigned integer channels."""

from .pixel import (
    PixelMath,
    PixelBase,
    PixelChannelIterator,
    Pixel,
    PixelU8,
    PixelU16,
    PixelU32,
    PixelU64,
    pixel_class,
)
from .types import ChannelType

__version__ = "0.1.0"

__all__ = [
    # pixel types
    "PixelMath",
    "PixelBase",
    "Pixel",
    "PixelU8",
    "PixelU16",
    "PixelU32",
    "PixelU64",
    "pixel_class",
    # iteration
    "PixelChannelIterator",
    # channel types
    "ChannelType",
    "__version__",
]
