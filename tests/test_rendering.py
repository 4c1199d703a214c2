import pytest
from PIL import Image

from pnmkit.raster import UINT16, PixelColor, PnmFormat, RasterBuffer
from pnmkit.rendering import (
    buffer_to_image,
    image_to_buffer,
    image_to_bw_pixels,
    load_image,
    resize_to_width,
)


def _gray(values, size):
    img = Image.new("L", size)
    img.putdata(values)
    return img


@pytest.mark.parametrize("dither", [True, False])
def test_black_maps_to_one(dither):
    img = _gray([0, 255], (2, 1))
    assert image_to_bw_pixels(img, dither) == [1, 0]


def test_image_to_bitmap_buffer():
    buffer = image_to_buffer(_gray([0, 255, 255, 0], (2, 2)), PnmFormat.PBM_BINARY, dither=False)
    assert buffer.pixel_data == [1, 0, 0, 1]


def test_image_to_gray_buffer_scales_to_channel_type():
    img = _gray([0, 255], (2, 1))
    assert image_to_buffer(img, PnmFormat.PGM_ASCII).pixel_data == [0, 255]
    assert image_to_buffer(img, PnmFormat.PGM_ASCII, channel_type=UINT16).pixel_data == [0, 65535]


def test_image_to_color_buffer():
    img = Image.new("RGB", (1, 2), (10, 20, 30))
    buffer = image_to_buffer(img, PnmFormat.PPM_BINARY)
    assert buffer.pixel_data == [10, 20, 30, 10, 20, 30]


def test_buffer_to_image_modes():
    bitmap = RasterBuffer(2, 1, PnmFormat.PBM_ASCII)
    bitmap.set_pixel(0, 0, PixelColor(1))
    img = buffer_to_image(bitmap)
    assert img.mode == "1"
    assert img.getpixel((0, 0)) == 0
    assert img.getpixel((1, 0)) == 255

    gray = RasterBuffer(1, 1, PnmFormat.PGM_BINARY, UINT16)
    gray.set_pixel(0, 0, PixelColor(65535))
    assert buffer_to_image(gray).getpixel((0, 0)) == 255

    color = RasterBuffer(1, 1, PnmFormat.PPM_ASCII)
    color.set_pixel(0, 0, PixelColor(1, 2, 3))
    img = buffer_to_image(color)
    assert img.mode == "RGB"
    assert img.getpixel((0, 0)) == (1, 2, 3)


def test_resize_to_width_keeps_aspect():
    img = Image.new("L", (8, 4))
    assert resize_to_width(img, 4).size == (4, 2)
    assert resize_to_width(img, None) is img


def test_load_image_rejects_unknown_extension(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hello")
    with pytest.raises(ValueError):
        load_image(str(path))
