from PIL import Image

from .base import check_length


class ImageSurface:
    """
    Raster surface over a Pillow image.

    Images in any mode other than RGBA are converted once when wrapped, so
    ``image`` may be a different object than the one passed in.
    """

    def __init__(self, image: Image.Image) -> None:
        if not isinstance(image, Image.Image):
            raise TypeError(f"ImageSurface expects a PIL.Image.Image, got {type(image).__name__}")
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        self.image = image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def get_pixels(self) -> bytes:
        return self.image.tobytes()

    def put_pixels(self, data: bytes) -> None:
        check_length(data, self.width, self.height)
        self.image.frombytes(bytes(data))

    def __repr__(self) -> str:
        return f"ImageSurface({self.width}x{self.height})"
