from .pixel_buffer import PixelBuffer

__all__ = ["PixelBuffer"]
