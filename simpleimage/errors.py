from typing import Tuple


class SimpleImageError(Exception):
    """Base class for errors raised by simpleimage."""


class ReadOnlyViolation(SimpleImageError, PermissionError):
    """A write was attempted on a buffer created with ``read_only=True``."""

    def __init__(self, message: str = "A call to set a pixel was made on a read-only PixelBuffer.") -> None:
        super().__init__(message)


class MissingChannel(SimpleImageError, ValueError):
    """A pixel passed to a write call lacks one of its required channels."""

    def __init__(self, missing: Tuple[str, ...], mode: str = "rgb") -> None:
        self.missing = tuple(missing)
        self.mode = mode
        names = ", ".join(self.missing)
        super().__init__(f"{mode} pixel is missing required channel(s): {names}")


class OutOfRange(SimpleImageError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        super().__init__(
            f"Pixel ({x}, {y}) is outside a {width}x{height} buffer"
        )


class CoordinateWarning(UserWarning):
    """A non-integer coordinate was given and floored."""
