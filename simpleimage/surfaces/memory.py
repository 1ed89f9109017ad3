from typing import Optional, Tuple

from .base import check_dimensions, check_length, expected_length


class MemorySurface:
    """In-memory RGBA framebuffer backed by a ``bytearray``."""

    def __init__(self, width: int, height: int, data: Optional[bytes] = None,
                 fill: Tuple[int, int, int, int] = (0, 0, 0, 0)) -> None:
        check_dimensions(width, height)
        self.width = int(width)
        self.height = int(height)
        if data is None:
            self._data = bytearray(fill) * (self.width * self.height)
        else:
            check_length(data, self.width, self.height)
            self._data = bytearray(data)
        # number of put_pixels calls, lets callers see when a refresh happened
        self.refresh_count = 0

    def get_pixels(self) -> bytes:
        return bytes(self._data)

    def put_pixels(self, data: bytes) -> None:
        check_length(data, self.width, self.height)
        self._data[:] = data
        self.refresh_count += 1

    def __len__(self) -> int:
        return expected_length(self.width, self.height)

    def __repr__(self) -> str:
        return f"MemorySurface({self.width}x{self.height})"
