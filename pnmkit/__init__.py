from .codec import encode_image, save
from .raster import UINT8, UINT16, ChannelType, ImageKind, PixelColor, PnmFormat, RasterBuffer, ResizeMode

__version__ = "0.1.0"

__all__ = [
    "ChannelType",
    "ImageKind",
    "PixelColor",
    "PnmFormat",
    "RasterBuffer",
    "ResizeMode",
    "UINT8",
    "UINT16",
    "encode_image",
    "save",
]
