from __future__ import annotations

from typing import List

from PIL import Image

from ..raster import UINT8, ChannelType, ImageKind, PnmFormat, RasterBuffer


def image_to_bw_pixels(img: Image.Image, dither: bool) -> List[int]:
    """Return 0/1 pixels where 1 is black, as PBM expects."""
    if dither:
        img = img.convert("1")
        data = list(img.getdata())
        return [1 if p == 0 else 0 for p in data]
    img = img.convert("L")
    data = list(img.getdata())
    avg = sum(data) / len(data) if data else 0
    threshold = int(max(0, min(255, avg - 13)))
    return [1 if p <= threshold else 0 for p in data]


def _scale(samples: List[int], channel_type: ChannelType) -> List[int]:
    if channel_type.maximum == 255:
        return samples
    return [value * channel_type.maximum // 255 for value in samples]


def image_to_buffer(
    img: Image.Image,
    fmt: PnmFormat,
    dither: bool = True,
    channel_type: ChannelType = UINT8,
) -> RasterBuffer:
    """Convert a Pillow image into a buffer of the requested format."""
    buffer = RasterBuffer(img.width, img.height, fmt, channel_type)
    if fmt.kind is ImageKind.BITMAP:
        buffer.set_pixel_data(image_to_bw_pixels(img, dither))
    elif fmt.kind is ImageKind.GRAYSCALE:
        buffer.set_pixel_data(_scale(list(img.convert("L").getdata()), channel_type))
    else:
        samples: List[int] = []
        for pixel in img.convert("RGB").getdata():
            samples.extend(pixel)
        buffer.set_pixel_data(_scale(samples, channel_type))
    return buffer


def buffer_to_image(buffer: RasterBuffer) -> Image.Image:
    """Render a buffer as an 8-bit Pillow image for previewing."""
    size = (buffer.width, buffer.height)
    samples = buffer.pixel_data
    if buffer.format.is_bitmap:
        img = Image.new("L", size, 255)
        img.putdata([0 if value else 255 for value in samples])
        return img.convert("1")
    maximum = buffer.channel_type.maximum
    scaled = [value * 255 // maximum for value in samples]
    if buffer.channel_count == 1:
        img = Image.new("L", size)
        img.putdata(scaled)
        return img
    img = Image.new("RGB", size)
    img.putdata([tuple(scaled[i : i + 3]) for i in range(0, len(scaled), 3)])
    return img
