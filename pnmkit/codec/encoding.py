from __future__ import annotations

from typing import List, Sequence

from ..raster import RasterBuffer


def encode_ascii_body(buffer: RasterBuffer) -> bytes:
    """Encode samples as decimal text, one image row per line.

    Every value, including the last one of a row, is followed by a space.
    """
    samples = buffer.pixel_data
    stride = buffer.width * buffer.channel_count
    if not samples:
        return b""
    out: List[str] = []
    for start in range(0, len(samples), stride):
        row = samples[start : start + stride]
        out.append("".join(f"{value} " for value in row))
        out.append("\n")
    return "".join(out).encode("ascii")


def pack_line(line: Sequence[int]) -> bytes:
    """Pack a 1-bit line into bytes, most significant bit first.

    A trailing partial group stays left-aligned: its unused low bits are 0.
    """
    out = bytearray()
    for i in range(0, len(line), 8):
        value = 0
        for bit, pix in enumerate(line[i : i + 8]):
            if pix:
                value |= 1 << (7 - bit)
        out.append(value)
    return bytes(out)


def pack_bitmap_rows(samples: Sequence[int], width: int) -> bytes:
    """Pack row-major 0/1 pixels; each row takes ceil(width / 8) bytes."""
    if width <= 0:
        return b""
    height = len(samples) // width
    out = bytearray()
    for row in range(height):
        out += pack_line(samples[row * width : (row + 1) * width])
    return bytes(out)


def encode_raw_samples(samples: Sequence[int], byte_width: int) -> bytes:
    """Write samples in storage order; multi-byte samples are big-endian."""
    if byte_width == 1:
        return bytes(samples)
    out = bytearray()
    for value in samples:
        out += value.to_bytes(byte_width, "big", signed=False)
    return bytes(out)


def encode_binary_body(buffer: RasterBuffer) -> bytes:
    if buffer.format.is_bitmap:
        return pack_bitmap_rows(buffer.pixel_data, buffer.width)
    return encode_raw_samples(buffer.pixel_data, buffer.channel_type.byte_width)
