from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, List

from .types import UINT8, ChannelType, PixelColor, PnmFormat

PixelPredicate = Callable[[int, int], bool]


class ResizeMode(Enum):
    """How existing samples are treated when the buffer changes shape."""

    RESET = "reset"
    REMAP = "remap"


class RasterBuffer:
    """Row-major sample buffer for a single PNM image.

    Pixel (x, y) occupies ``channel_count`` consecutive samples starting at
    ``channel_count * (y * width + x)``. Color samples are stored as r, g, b.
    """

    def __init__(
        self,
        width: int,
        height: int,
        format: PnmFormat = PnmFormat.PPM_BINARY,
        channel_type: ChannelType = UINT8,
    ) -> None:
        self._validate_dimensions(width, height)
        self._width = width
        self._height = height
        self._format = format
        self._channel_type = channel_type
        self._samples: List[int] = [0] * self._expected_length(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def format(self) -> PnmFormat:
        return self._format

    @property
    def channel_type(self) -> ChannelType:
        return self._channel_type

    @property
    def channel_count(self) -> int:
        return self._format.channel_count

    @property
    def pixel_data(self) -> List[int]:
        return list(self._samples)

    def set_pixel_data(self, samples: Iterable[int]) -> None:
        """Replace all samples.

        The sequence is truncated or zero-padded to the size the current
        dimensions require. Bitmap samples above 1 are stored as 1.
        """
        data = [self._coerce(value) for value in samples]
        expected = self._expected_length(self._width, self._height)
        if len(data) < expected:
            data.extend([0] * (expected - len(data)))
        self._samples = data[:expected]

    def swap_encoding(self) -> None:
        """Switch between the ASCII and binary variant of the same image kind."""
        self._format = self._format.counterpart

    def clear(self) -> None:
        self._samples = [0] * len(self._samples)

    # Shape

    def set_width(self, width: int, mode: ResizeMode) -> None:
        self.resize(width, self._height, mode)

    def set_height(self, height: int, mode: ResizeMode) -> None:
        self.resize(self._width, height, mode)

    def resize(self, width: int, height: int, mode: ResizeMode) -> None:
        """Change dimensions.

        RESET discards every sample. REMAP keeps the overlapping top-left
        region at the same coordinates and zero-fills the rest.
        """
        self._validate_dimensions(width, height)
        samples = [0] * self._expected_length(width, height)
        if mode is ResizeMode.REMAP:
            cc = self.channel_count
            keep = min(width, self._width) * cc
            for y in range(min(height, self._height)):
                src = y * self._width * cc
                dst = y * width * cc
                samples[dst : dst + keep] = self._samples[src : src + keep]
        elif mode is not ResizeMode.RESET:
            raise ValueError(f"Unsupported resize mode: {mode}")
        self._width = width
        self._height = height
        self._samples = samples

    # Pixels

    def get_pixel(self, x: int, y: int) -> PixelColor:
        start = self._offset(x, y)
        if self.channel_count == 3:
            r, g, b = self._samples[start : start + 3]
            return PixelColor(r, g, b)
        return PixelColor(self._samples[start])

    def set_pixel(self, x: int, y: int, color: PixelColor) -> None:
        start = self._offset(x, y)
        if self.channel_count == 3:
            values = (color.r, color.g, color.b)
        else:
            values = (color.y,)
        coerced = [self._coerce(value) for value in values]
        self._samples[start : start + len(coerced)] = coerced

    def set_pixels(self, predicate: PixelPredicate, color: PixelColor) -> None:
        """Set every pixel for which ``predicate(x, y)`` holds."""
        for y in range(self._height):
            for x in range(self._width):
                if predicate(x, y):
                    self.set_pixel(x, y, color)

    def fill(self, color: PixelColor) -> None:
        self.set_pixels(lambda x, y: True, color)

    # Drawing

    def add_rectangle(self, x_left: int, y_top: int, width: int, height: int, color: PixelColor) -> None:
        """Fill a rectangle; both the right and bottom edges are inclusive."""
        x_right = x_left + width
        y_bottom = y_top + height
        self.set_pixels(
            lambda x, y: x_left <= x <= x_right and y_top <= y <= y_bottom,
            color,
        )

    def add_circle(self, cx: int, cy: int, radius: int, color: PixelColor) -> None:
        """Fill a disc; pixels at exactly ``radius`` are not drawn."""
        limit = radius * radius
        self.set_pixels(
            lambda x, y: (x - cx) * (x - cx) + (y - cy) * (y - cy) < limit,
            color,
        )

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self._width}x{self._height} image")
        return self.channel_count * (y * self._width + x)

    def _coerce(self, value: int) -> int:
        if self._format.is_bitmap and isinstance(value, int) and value > 1:
            return 1
        self._channel_type.validate(value)
        return int(value)

    def _expected_length(self, width: int, height: int) -> int:
        return width * height * self.channel_count

    @staticmethod
    def _validate_dimensions(width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("Width and height must not be negative")

    def __repr__(self) -> str:
        return (
            f"RasterBuffer(width={self._width}, height={self._height}, "
            f"format={self._format.name}, channel_type={self._channel_type.name})"
        )
