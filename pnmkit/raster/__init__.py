from .buffer import PixelPredicate, RasterBuffer, ResizeMode
from .types import UINT8, UINT16, ChannelType, ImageKind, PixelColor, PnmFormat

__all__ = [
    "ChannelType",
    "ImageKind",
    "PixelColor",
    "PixelPredicate",
    "PnmFormat",
    "RasterBuffer",
    "ResizeMode",
    "UINT8",
    "UINT16",
]
