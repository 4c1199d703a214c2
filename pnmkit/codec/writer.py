from __future__ import annotations

import os
from typing import Union

from ..raster import RasterBuffer
from .encoding import encode_ascii_body, encode_binary_body
from .header import build_header

PathLike = Union[str, "os.PathLike[str]"]


def encode_body(buffer: RasterBuffer) -> bytes:
    if buffer.format.is_binary:
        return encode_binary_body(buffer)
    return encode_ascii_body(buffer)


def encode_image(buffer: RasterBuffer) -> bytes:
    """Build the complete PNM file contents (header + body)."""
    return build_header(buffer) + encode_body(buffer)


def save(buffer: RasterBuffer, path: PathLike) -> None:
    """Write ``buffer`` to ``path``.

    The image is encoded before the file is opened, so an encoding error
    never leaves a partial file behind. Open and write errors propagate.
    """
    data = encode_image(buffer)
    with open(path, "wb") as handle:
        handle.write(data)
