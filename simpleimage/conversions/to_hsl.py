from typing import Tuple


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSL.

    Args:
        r: Red in [0, 1]
        g: Green in [0, 1]
        b: Blue in [0, 1]

    Returns:
        Tuple[float, float, float]: (h, s, l) with h in degrees [0, 360)
        and s, l in [0, 1]
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2

    if max_c == min_c:
        return 0.0, 0.0, l  # achromatic

    d = max_c - min_c
    s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)

    if max_c == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif max_c == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4

    return h / 6 * 360, s, l
