from typing import Tuple

from ..types.channel_types import HUE_MAX


def hue_to_rgb(p: float, q: float, t: float) -> float:
    """Evaluate one RGB channel from the HSL intermediates ``p``, ``q`` at hue offset ``t``."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def unit_hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Same as ``hsl_to_unit_rgb`` with the hue already expressed as a turn fraction in [0, 1]."""
    if s == 0:
        return l, l, l  # achromatic

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    r = hue_to_rgb(p, q, h + 1 / 3)
    g = hue_to_rgb(p, q, h)
    b = hue_to_rgb(p, q, h - 1 / 3)
    return r, g, b


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to unit RGB.

    Args:
        h: Hue in degrees [0, 360]
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    return unit_hsl_to_unit_rgb(h / HUE_MAX, s, l)
