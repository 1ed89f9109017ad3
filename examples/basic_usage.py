"""Basic SimpleImage usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from PIL import Image

from simpleimage import HSLPixel, PixelBuffer, to_hsl


def demonstrate_pixels() -> None:
    # Read and write single pixels in both views.
    buf = PixelBuffer.blank(4, 4, fill=(255, 128, 64, 255))
    print("RGB at (1, 1):", buf.get_rgb(1, 1))
    print("HSL at (1, 1):", buf.get_hsl(1, 1))

    buf.set_hsl(1, 1, HSLPixel(200, "60%", "40%"))
    print("After set_hsl:", buf.get_rgb(1, 1))


def demonstrate_image() -> None:
    # Desaturate the left half of a Pillow image in place.
    image = Image.new("RGB", (8, 2), (40, 160, 90))
    buf = PixelBuffer.from_image(image)
    for y in range(buf.height):
        for x in range(buf.width // 2):
            hsl = to_hsl(buf.get_rgb(x, y))
            buf.set_hsl(x, y, HSLPixel(hsl.h, 0, hsl.l, hsl.a))
    buf.render()

    surface_image = buf.surface.image
    print("Left pixel:", surface_image.getpixel((0, 0)))
    print("Right pixel:", surface_image.getpixel((7, 0)))


if __name__ == "__main__":
    demonstrate_pixels()
    demonstrate_image()
