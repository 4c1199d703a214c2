from .loader import SUPPORTED_EXTENSIONS, load_image, normalize_image, resize_to_width
from .renderer import buffer_to_image, image_to_buffer, image_to_bw_pixels

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "buffer_to_image",
    "image_to_buffer",
    "image_to_bw_pixels",
    "load_image",
    "normalize_image",
    "resize_to_width",
]
