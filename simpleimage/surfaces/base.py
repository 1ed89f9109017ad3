from typing import Protocol, runtime_checkable


@runtime_checkable
class RasterSurface(Protocol):
    """
    Anything that holds displayable RGBA pixels.

    ``get_pixels`` returns the current contents as ``width * height * 4``
    bytes in row-major RGBA order; ``put_pixels`` replaces them.
    """
    width: int
    height: int

    def get_pixels(self) -> bytes: ...

    def put_pixels(self, data: bytes) -> None: ...


def expected_length(width: int, height: int) -> int:
    return width * height * 4


def check_dimensions(width: int, height: int) -> None:
    if isinstance(width, bool) or isinstance(height, bool):
        raise TypeError("Surface dimensions must be integers")
    if int(width) != width or int(height) != height:
        raise TypeError(f"Surface dimensions must be integers, got {width}x{height}")
    if width <= 0 or height <= 0:
        raise ValueError(f"Surface dimensions must be positive, got {width}x{height}")


def check_length(data: bytes, width: int, height: int) -> None:
    expected = expected_length(width, height)
    if len(data) != expected:
        raise ValueError(
            f"Pixel data has {len(data)} bytes; a {width}x{height} RGBA surface needs {expected}"
        )
