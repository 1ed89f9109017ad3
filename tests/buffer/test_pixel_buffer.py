import warnings

import numpy as np
import pytest

from simpleimage.buffer import PixelBuffer
from simpleimage.errors import (
    CoordinateWarning,
    MissingChannel,
    OutOfRange,
    ReadOnlyViolation,
)
from simpleimage.pixels import HSLPixel, RGBPixel
from simpleimage.surfaces import MemorySurface


class ShortSurface:
    """Surface whose pixel data is one byte short."""
    width = 2
    height = 2

    def get_pixels(self):
        return bytes(15)

    def put_pixels(self, data):
        raise AssertionError("should never be called")


def make_buffer(width=4, height=4, read_only=False):
    data = bytes(range(width * height * 4))
    return PixelBuffer(MemorySurface(width, height, data), read_only=read_only)


def test_dimensions():
    buf = make_buffer(4, 3)
    assert buf.width == 4
    assert buf.height == 3
    assert buf.size == (4, 3)
    assert not buf.read_only
    assert len(buf.to_bytes()) == 4 * 3 * 4

def test_offset_of():
    buf = make_buffer(4, 4)
    assert buf.offset_of(2, 1) == 24
    assert buf.offset_of(0, 0) == 0
    assert buf.offset_of(3, 3) == (3 * 4 + 3) * 4

def test_offset_of_floors_with_warning():
    buf = make_buffer(4, 4)
    with pytest.warns(CoordinateWarning):
        assert buf.offset_of(2.7, 1) == 24
    with pytest.warns(CoordinateWarning):
        assert buf.offset_of(2, 1.99) == 24

def test_integer_valued_coordinates_do_not_warn():
    buf = make_buffer(4, 4)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert buf.offset_of(2, 1) == 24
        assert buf.offset_of(2.0, 1.0) == 24
        assert buf.offset_of(np.int64(2), np.int64(1)) == 24

def test_out_of_range():
    buf = make_buffer(4, 4)
    for x, y in ((4, 0), (0, 4), (-1, 0), (0, -1), (100, 100)):
        with pytest.raises(OutOfRange):
            buf.get_rgb(x, y)

def test_out_of_range_after_flooring():
    buf = make_buffer(4, 4)
    with pytest.warns(CoordinateWarning):
        with pytest.raises(OutOfRange) as exc_info:
            buf.get_rgb(-0.5, 0)
    assert exc_info.value.x == -1
    assert isinstance(exc_info.value, IndexError)

def test_non_finite_coordinates_are_out_of_range():
    buf = make_buffer(4, 4)
    for x, y in ((float("inf"), 0), (0, float("-inf")), (float("nan"), 1), (2, float("nan"))):
        with pytest.raises(OutOfRange):
            buf.get_rgb(x, y)
        with pytest.raises(OutOfRange):
            buf.set_rgb(x, y, (1, 2, 3))

def test_get_rgb_reads_channels():
    buf = make_buffer(4, 4)
    px = buf.get_rgb(2, 1)
    assert px == RGBPixel(24, 25, 26, 27)
    assert all(type(c) is int for c in px)

def test_set_rgb():
    buf = make_buffer()
    buf.set_rgb(1, 2, RGBPixel(10, 20, 30, 40))
    assert buf.get_rgb(1, 2) == RGBPixel(10, 20, 30, 40)

def test_set_rgb_defaults_alpha():
    buf = make_buffer()
    buf.set_rgb(0, 0, {"r": 10, "g": 20, "b": 30})
    assert buf.get_rgb(0, 0) == RGBPixel(10, 20, 30, 255)

def test_set_rgb_missing_channel():
    buf = make_buffer()
    before = buf.to_bytes()
    with pytest.raises(MissingChannel):
        buf.set_rgb(0, 0, {"r": 10, "g": 20})
    assert buf.to_bytes() == before

def test_set_rgb_only_touches_one_pixel():
    buf = make_buffer()
    before = bytearray(buf.to_bytes())
    buf.set_rgb(2, 1, (1, 2, 3, 4))
    before[24:28] = bytes((1, 2, 3, 4))
    assert buf.to_bytes() == bytes(before)

def test_set_rgb_rounds_and_clamps():
    buf = make_buffer()
    buf.set_rgb(0, 0, (300, -4, 127.5, 2.5))
    assert buf.get_rgb(0, 0) == RGBPixel(255, 0, 128, 2)
    buf.set_rgb(0, 0, (float("nan"), float("inf"), 10.4, 10.6))
    assert buf.get_rgb(0, 0) == RGBPixel(0, 255, 10, 11)

def test_read_only():
    buf = make_buffer(read_only=True)
    assert buf.read_only
    with pytest.raises(ReadOnlyViolation):
        buf.set_rgb(0, 0, {"r": 1, "g": 2, "b": 3})
    with pytest.raises(ReadOnlyViolation):
        buf.set_hsl(0, 0, HSLPixel(0, 1, 0.5))
    assert buf.get_rgb(2, 1) == RGBPixel(24, 25, 26, 27)
    buf.get_hsl(2, 1)

def test_read_only_is_checked_first():
    buf = make_buffer(read_only=True)
    with pytest.raises(ReadOnlyViolation):
        buf.set_rgb(99, 99, {"r": 1})

def test_get_hsl():
    buf = make_buffer()
    buf.set_rgb(3, 3, (0, 0, 255))
    hsl = buf.get_hsl(3, 3)
    assert abs(hsl.h - 240) < 1e-9
    assert hsl.s == 1
    assert hsl.l == 0.5
    assert hsl.a == 1

def test_set_hsl():
    buf = make_buffer()
    buf.set_hsl(1, 1, {"h": 120, "s": "100%", "l": "50%"})
    assert buf.get_rgb(1, 1) == RGBPixel(0, 255, 0, 255)
    buf.set_hsl(1, 1, HSLPixel(0, 0, 0.5, 0.5))
    assert buf.get_rgb(1, 1) == RGBPixel(128, 128, 128, 128)

def test_set_hsl_round_trip():
    buf = make_buffer()
    for x in range(4):
        for y in range(4):
            before = buf.get_rgb(x, y)
            buf.set_hsl(x, y, buf.get_hsl(x, y))
            after = buf.get_rgb(x, y)
            for c_in, c_out in zip(before, after):
                assert abs(c_in - c_out) <= 1

def test_writes_reach_surface_only_on_render():
    surface = MemorySurface(2, 2)
    buf = PixelBuffer(surface)
    buf.set_rgb(1, 0, (9, 8, 7))
    assert surface.get_pixels() == bytes(16)
    assert surface.refresh_count == 0

    buf.render()
    assert surface.get_pixels()[4:8] == bytes((9, 8, 7, 255))
    assert surface.refresh_count == 1

def test_flush_is_render():
    surface = MemorySurface(1, 1)
    buf = PixelBuffer(surface)
    buf.set_rgb(0, 0, (1, 2, 3))
    buf.flush()
    assert surface.get_pixels() == bytes((1, 2, 3, 255))

def test_buffer_owns_its_pixels():
    surface = MemorySurface(1, 1)
    buf = PixelBuffer(surface)
    surface.put_pixels(bytes((5, 5, 5, 5)))
    assert buf.get_rgb(0, 0) == RGBPixel(0, 0, 0, 0)

def test_blank():
    buf = PixelBuffer.blank(3, 2, fill=(1, 2, 3, 4))
    assert buf.size == (3, 2)
    assert buf.get_rgb(2, 1) == RGBPixel(1, 2, 3, 4)
    assert isinstance(buf.surface, MemorySurface)

def test_construction_rejects_bad_length():
    with pytest.raises(ValueError):
        PixelBuffer(ShortSurface())

def test_construction_rejects_bad_dimensions():
    with pytest.raises(ValueError):
        PixelBuffer.blank(0, 4)
    with pytest.raises(ValueError):
        PixelBuffer.blank(4, -1)

def test_repr():
    assert repr(PixelBuffer.blank(2, 3)) == "PixelBuffer(2x3)"
    assert repr(PixelBuffer.blank(2, 3, read_only=True)) == "PixelBuffer(2x3, read_only)"
