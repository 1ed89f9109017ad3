from typing import Any, ClassVar, Tuple

from .pixel_base import PixelBase, _channel_property


class HSLPixel(PixelBase):
    """
    Pixel in HSL(A).

    Values produced by the converter use h in degrees [0, 360) and s, l, a in
    [0, 1]. On input any channel may also be a percentage string such as
    ``"50%"``; it is resolved when the pixel is converted to RGB.
    """
    __slots__ = ()

    mode: ClassVar[str] = "hsl"
    channels: ClassVar[Tuple[str, str, str, str]] = ("h", "s", "l", "a")

    h = _channel_property(0, "Hue in degrees")
    s = _channel_property(1, "Saturation")
    l = _channel_property(2, "Lightness")
    a = _channel_property(3, "Alpha, or None when not given")

    @classmethod
    def _check_channel(cls, name: str, value: Any) -> Any:
        value = super()._check_channel(name, value)
        if not isinstance(value, (int, float, str)):
            try:
                value = float(value)
            except (TypeError, ValueError) as exc:
                raise TypeError(
                    f"hsl channel {name!r} must be a number or a percentage string, "
                    f"got {type(value).__name__}"
                ) from exc
        return value


HSL = HSLPixel
