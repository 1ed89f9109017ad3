from numbers import Real
from typing import Any, ClassVar, Tuple

from .pixel_base import PixelBase, _channel_property


class RGBPixel(PixelBase):
    """Pixel in RGB(A); channels are numbers on the 0-255 scale."""
    __slots__ = ()

    mode: ClassVar[str] = "rgb"
    channels: ClassVar[Tuple[str, str, str, str]] = ("r", "g", "b", "a")

    r = _channel_property(0, "Red (0-255)")
    g = _channel_property(1, "Green (0-255)")
    b = _channel_property(2, "Blue (0-255)")
    a = _channel_property(3, "Alpha (0-255), or None when not given")

    @classmethod
    def _check_channel(cls, name: str, value: Any) -> Any:
        value = super()._check_channel(name, value)
        if not isinstance(value, Real):
            raise TypeError(
                f"rgb channel {name!r} must be a real number, got {type(value).__name__}"
            )
        return value


RGB = RGBPixel
