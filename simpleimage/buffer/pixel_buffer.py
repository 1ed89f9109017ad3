from __future__ import annotations

import math
import warnings
from typing import Any, Tuple

import numpy as np
from boundednumbers.functions import clamp

from ..conversions.wrapper import to_hsl, to_rgb
from ..errors import CoordinateWarning, OutOfRange, ReadOnlyViolation
from ..pixels.hsl import HSLPixel
from ..pixels.rgb import RGBPixel
from ..surfaces.base import RasterSurface, check_dimensions, check_length
from ..surfaces.image import ImageSurface
from ..surfaces.memory import MemorySurface
from ..types.channel_types import CHANNEL_MAX, DEFAULT_ALPHA, RGBA_STRIDE


class PixelBuffer:
    """
    Directly addressable RGBA pixel buffer with RGB and HSL views.

    The buffer copies the surface's pixels into an array it owns. Writes only
    reach the surface when ``render`` (or ``flush``) is called.

    Args:
        surface: Source and display target for the pixels.
        read_only: Reject every write when True.
    """

    def __init__(self, surface: RasterSurface, read_only: bool = False) -> None:
        width, height = surface.width, surface.height
        check_dimensions(width, height)
        data = surface.get_pixels()
        check_length(data, width, height)

        self._surface = surface
        self._width = int(width)
        self._height = int(height)
        self._read_only = bool(read_only)
        self._data = np.frombuffer(bytes(data), dtype=np.uint8).copy()

    @classmethod
    def blank(cls, width: int, height: int,
              fill: Tuple[int, int, int, int] = (0, 0, 0, 0),
              read_only: bool = False) -> "PixelBuffer":
        """Buffer over a fresh in-memory surface filled with ``fill``."""
        return cls(MemorySurface(width, height, fill=fill), read_only=read_only)

    @classmethod
    def from_image(cls, image, read_only: bool = False) -> "PixelBuffer":
        """Buffer over a Pillow image; non-RGBA images are converted to RGBA."""
        return cls(ImageSurface(image), read_only=read_only)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        return self._width, self._height

    @property
    def read_only(self) -> bool:
        return self._read_only

    @property
    def surface(self) -> RasterSurface:
        return self._surface

    # ------------------ ADDRESSING ------------------
    @staticmethod
    def _floor(value: Any, axis: str) -> int:
        floored = math.floor(value)
        if floored != value:
            warnings.warn(
                f"Non-integer value for {axis} given ({value!r}); using floor({axis}) = {floored}.",
                CoordinateWarning,
                stacklevel=3,
            )
        return floored

    def offset_of(self, x: float, y: float) -> int:
        """
        Index of the red channel of pixel ``(x, y)``.

        Non-integer coordinates are floored with a ``CoordinateWarning``.

        Raises:
            OutOfRange: if the floored coordinates fall outside the buffer,
                or a coordinate is NaN or infinite.
        """
        if not (math.isfinite(x) and math.isfinite(y)):
            raise OutOfRange(x, y, self._width, self._height)
        fx = self._floor(x, "x")
        fy = self._floor(y, "y")
        if not (0 <= fx < self._width and 0 <= fy < self._height):
            raise OutOfRange(fx, fy, self._width, self._height)
        return (fy * self._width + fx) * RGBA_STRIDE

    # ------------------ RGB VIEW ------------------
    def get_rgb(self, x: float, y: float) -> RGBPixel:
        i = self.offset_of(x, y)
        r, g, b, a = (int(v) for v in self._data[i:i + RGBA_STRIDE])
        return RGBPixel(r, g, b, a)

    def set_rgb(self, x: float, y: float, pixel: Any) -> None:
        """
        Overwrite pixel ``(x, y)``.

        ``pixel`` may be an RGBPixel, a mapping with ``r``, ``g``, ``b`` and
        optionally ``a``, or a 3/4-sequence. Alpha defaults to 255. Channels are
        rounded to the nearest integer (ties to even) and clamped into [0, 255].

        Raises:
            ReadOnlyViolation: if the buffer is read-only.
            MissingChannel: if ``r``, ``g`` or ``b`` is absent.
            OutOfRange: if ``(x, y)`` is outside the buffer.
        """
        if self._read_only:
            raise ReadOnlyViolation()

        pixel = RGBPixel.from_any(pixel)
        alpha = pixel.a if pixel.a is not None else DEFAULT_ALPHA

        i = self.offset_of(x, y)
        self._data[i:i + RGBA_STRIDE] = [
            _to_byte(v) for v in (pixel.r, pixel.g, pixel.b, alpha)
        ]

    # ------------------ HSL VIEW ------------------
    def get_hsl(self, x: float, y: float) -> HSLPixel:
        return to_hsl(self.get_rgb(x, y))

    def set_hsl(self, x: float, y: float, pixel: Any) -> None:
        """Convert ``pixel`` to RGB and write it with ``set_rgb``."""
        self.set_rgb(x, y, to_rgb(pixel))

    # ------------------ SURFACE ------------------
    def to_bytes(self) -> bytes:
        return self._data.tobytes()

    def render(self) -> None:
        """Push the buffer's current pixels to the surface."""
        self._surface.put_pixels(self.to_bytes())

    flush = render

    def __repr__(self) -> str:
        mode = ", read_only" if self._read_only else ""
        return f"PixelBuffer({self._width}x{self._height}{mode})"


def _to_byte(value: float) -> int:
    value = float(value)
    if math.isnan(value):
        return 0
    return int(round(clamp(value, 0.0, float(CHANNEL_MAX))))
