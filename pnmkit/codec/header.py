from __future__ import annotations

from ..raster import PnmFormat, RasterBuffer


def magic_number(fmt: PnmFormat) -> bytes:
    """Return the two-byte magic number (b"P1" .. b"P6")."""
    return fmt.magic_number.encode("ascii")


def build_header(buffer: RasterBuffer) -> bytes:
    """Build the text header; bitmap formats carry no maxval line."""
    lines = [
        buffer.format.magic_number,
        f"{buffer.width} {buffer.height}",
    ]
    if not buffer.format.is_bitmap:
        lines.append(str(buffer.channel_type.maximum))
    return ("\n".join(lines) + "\n").encode("ascii")
