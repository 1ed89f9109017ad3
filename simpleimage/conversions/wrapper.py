from __future__ import annotations

from typing import Any, Union

from ..pixels.hsl import HSLPixel
from ..pixels.rgb import RGBPixel
from ..types.channel_types import CHANNEL_MAX, DEFAULT_ALPHA, HUE_MAX, UNIT_MAX
from .normalize import bound01
from .to_hsl import unit_rgb_to_hsl
from .to_rgb import unit_hsl_to_unit_rgb


def to_hsl(pixel: Union[RGBPixel, Any]) -> HSLPixel:
    """
    Convert an RGB(A) pixel to HSL(A).

    Channels are normalized against 255 before conversion. A pixel without
    alpha is treated as fully opaque.

    Returns:
        HSLPixel with h in degrees [0, 360) and s, l, a in [0, 1]
    """
    pixel = RGBPixel.from_any(pixel)
    alpha = pixel.a if pixel.a is not None else DEFAULT_ALPHA

    r = bound01(pixel.r, CHANNEL_MAX)
    g = bound01(pixel.g, CHANNEL_MAX)
    b = bound01(pixel.b, CHANNEL_MAX)
    a = bound01(alpha, CHANNEL_MAX)

    h, s, l = unit_rgb_to_hsl(r, g, b)
    return HSLPixel(h, s, l, a)


def to_rgb(pixel: Union[HSLPixel, Any]) -> RGBPixel:
    """
    Convert an HSL(A) pixel to RGBA on the 0-255 scale.

    Hue is normalized against 360, saturation, lightness and alpha against 1;
    any of them may be a percentage string. Alpha defaults to 1 when absent.
    Channels are rounded to the nearest integer.
    """
    pixel = HSLPixel.from_any(pixel)

    h = bound01(pixel.h, HUE_MAX)
    s = bound01(pixel.s, UNIT_MAX)
    l = bound01(pixel.l, UNIT_MAX)
    a = 1.0 if pixel.a is None else bound01(pixel.a, UNIT_MAX)

    r, g, b = unit_hsl_to_unit_rgb(h, s, l)
    return RGBPixel(*(round(c * CHANNEL_MAX) for c in (r, g, b, a)))
