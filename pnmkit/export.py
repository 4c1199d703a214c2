from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .codec import save
from .raster import UINT8, ChannelType, PixelColor, PnmFormat, RasterBuffer
from .rendering import image_to_buffer, load_image, normalize_image, resize_to_width

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = PnmFormat.PPM_BINARY
DEFAULT_DEMO_SIZE = (640, 480)


@dataclass
class ExportSettings:
    format: PnmFormat = DEFAULT_FORMAT
    width: Optional[int] = None
    dither: bool = True
    channel_type: ChannelType = UINT8


class ImageExporter:
    def __init__(self, settings: Optional[ExportSettings] = None) -> None:
        self.settings = settings or ExportSettings()

    def build_from_file(self, path: str) -> RasterBuffer:
        self._validate_input_path(path)
        img = resize_to_width(normalize_image(load_image(path)), self.settings.width)
        logger.debug(f"Loaded {path} as {img.mode} {img.width}x{img.height}")
        return image_to_buffer(
            img,
            self.settings.format,
            dither=self.settings.dither,
            channel_type=self.settings.channel_type,
        )

    def export_file(self, source: str, destination: str) -> RasterBuffer:
        buffer = self.build_from_file(source)
        self.save(buffer, destination)
        return buffer

    def build_demo(self, width: int, height: int) -> RasterBuffer:
        """Draw stripes, a rectangle and a circle in the configured format."""
        buffer = RasterBuffer(width, height, self.settings.format, self.settings.channel_type)
        maximum = self.settings.channel_type.maximum
        if self.settings.format.is_bitmap:
            stripe = PixelColor(1)
            shape = PixelColor(1)
        elif self.settings.format.channel_count == 3:
            stripe = PixelColor(maximum, 0, 0)
            shape = PixelColor(maximum, maximum, maximum)
        else:
            stripe = PixelColor(maximum)
            shape = PixelColor(maximum // 2)
        buffer.set_pixels(lambda x, y: x % 5 == 0 and y % 3 != 0, stripe)
        buffer.add_rectangle(width // 8, height // 8, width // 4, height // 4, shape)
        buffer.add_circle(width // 2, height // 2, min(width, height) // 6, shape)
        return buffer

    def save(self, buffer: RasterBuffer, destination: str) -> None:
        try:
            save(buffer, destination)
        except OSError as exc:
            logger.error(f"Failed to write {destination}: {exc}")
            raise
        logger.info(
            f"Wrote {destination} ({buffer.format.magic_number}, {buffer.width}x{buffer.height})"
        )

    @staticmethod
    def _validate_input_path(path: str) -> None:
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
