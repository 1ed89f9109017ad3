"""SimpleImage: an RGBA pixel buffer with RGB and HSL views."""

from .buffer import PixelBuffer
from .pixels import PixelBase, RGBPixel, HSLPixel
from .conversions import (
    to_hsl,
    to_rgb,
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    parse_channel,
    bound01,
    Fraction,
    Percentage,
)
from .surfaces import RasterSurface, MemorySurface, ImageSurface
from .errors import (
    SimpleImageError,
    ReadOnlyViolation,
    MissingChannel,
    OutOfRange,
    CoordinateWarning,
)
from .types import ChannelKind

# Friendly aliases
SimpleImage = PixelBuffer
RGB = RGBPixel
HSL = HSLPixel

__version__ = "1.0.0"

__all__ = [
    # buffer
    "PixelBuffer",
    "SimpleImage",
    # pixel types
    "PixelBase",
    "RGBPixel",
    "HSLPixel",
    "RGB",
    "HSL",
    # conversions
    "to_hsl",
    "to_rgb",
    "unit_rgb_to_hsl",
    "hsl_to_unit_rgb",
    "parse_channel",
    "bound01",
    "Fraction",
    "Percentage",
    "ChannelKind",
    # surfaces
    "RasterSurface",
    "MemorySurface",
    "ImageSurface",
    # errors
    "SimpleImageError",
    "ReadOnlyViolation",
    "MissingChannel",
    "OutOfRange",
    "CoordinateWarning",
    "__version__",
]
