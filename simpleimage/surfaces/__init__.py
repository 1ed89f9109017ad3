"""Raster surfaces a PixelBuffer reads from and renders to."""
from .base import RasterSurface
from .memory import MemorySurface
from .image import ImageSurface

__all__ = ["RasterSurface", "MemorySurface", "ImageSurface"]
