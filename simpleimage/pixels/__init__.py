"""
Pixel value types.

``RGBPixel`` and ``HSLPixel`` are small immutable values tagged with their
color mode. Alpha is optional on both and stored as ``None`` when absent.

>>> from simpleimage.pixels import RGBPixel, HSLPixel
>>> RGBPixel(255, 128, 0)
RGBPixel(r=255, g=128, b=0)
>>> RGBPixel.from_any({"r": 10, "g": 20, "b": 30, "a": 40}).a
40
>>> HSLPixel(120, "50%", 0.25).s
'50%'
"""
from .pixel_base import PixelBase
from .rgb import RGBPixel
from .hsl import HSLPixel

__all__ = ["PixelBase", "RGBPixel", "HSLPixel"]
