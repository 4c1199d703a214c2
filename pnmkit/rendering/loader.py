from __future__ import annotations

import os
from typing import Optional, Set

from PIL import Image, ImageOps

SUPPORTED_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tif", ".tiff"}


def load_image(path: str) -> Image.Image:
    ext = os.path.splitext(path)[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
    with Image.open(path) as img:
        img = ImageOps.exif_transpose(img)
        return img.copy()


def normalize_image(img: Image.Image) -> Image.Image:
    if img.mode not in ("RGB", "L", "1"):
        return img.convert("RGB")
    return img


def resize_to_width(img: Image.Image, width: Optional[int]) -> Image.Image:
    if not width or img.width == width:
        return img
    ratio = width / float(img.width)
    height = max(1, int(img.height * ratio))
    return img.resize((width, height), Image.LANCZOS)
