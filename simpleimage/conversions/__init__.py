"""
SimpleImage Color Conversions
=============================

Stateless conversion between the RGB and HSL views of a single pixel.

Conversion Functions
--------------------

Pixel level:
    to_hsl(pixel)
        RGBPixel (0-255 channels) → HSLPixel (h in degrees, s/l/a in [0, 1])
    to_rgb(pixel)
        HSLPixel → RGBPixel, rounded to integer channels

Unit space:
    unit_rgb_to_hsl(r, g, b)
        (r, g, b) in [0, 1] → (h, s, l)
    hsl_to_unit_rgb(h, s, l)
        (h, s, l) → (r, g, b) in [0, 1]
    unit_hsl_to_unit_rgb(h, s, l)
        Same, with h as a fraction of a full turn
    hue_to_rgb(p, q, t)
        Piecewise hue-to-channel helper used by hsl_to_unit_rgb

Normalization:
    parse_channel(value)
        Raw input → Fraction | Percentage
    bound01(value, max_value)
        Parsed or raw input → [0, 1]

Examples
--------
>>> from simpleimage.conversions import to_hsl, to_rgb, bound01
>>> to_hsl((0, 255, 0, 255)).h
120.0
>>> to_rgb({"h": 0, "s": "100%", "l": "50%"})
RGBPixel(r=255, g=0, b=0, a=255)
>>> bound01("50%", 1)
0.5
"""

from .normalize import (
    Fraction,
    Percentage,
    ParsedChannel,
    parse_channel,
    bound01,
)
from .to_hsl import unit_rgb_to_hsl
from .to_rgb import hsl_to_unit_rgb, unit_hsl_to_unit_rgb, hue_to_rgb
from .wrapper import to_hsl, to_rgb

__all__ = [
    # Normalization
    'Fraction',
    'Percentage',
    'ParsedChannel',
    'parse_channel',
    'bound01',

    # Unit space
    'unit_rgb_to_hsl',
    'hsl_to_unit_rgb',
    'unit_hsl_to_unit_rgb',
    'hue_to_rgb',

    # Pixel level
    'to_hsl',
    'to_rgb',
]
