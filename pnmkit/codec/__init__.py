from .encoding import (
    encode_ascii_body,
    encode_binary_body,
    encode_raw_samples,
    pack_bitmap_rows,
    pack_line,
)
from .header import build_header, magic_number
from .writer import encode_body, encode_image, save

__all__ = [
    "build_header",
    "encode_ascii_body",
    "encode_binary_body",
    "encode_body",
    "encode_image",
    "encode_raw_samples",
    "magic_number",
    "pack_bitmap_rows",
    "pack_line",
    "save",
]
