from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class ImageKind(Enum):
    BITMAP = "bitmap"
    GRAYSCALE = "grayscale"
    COLOR = "color"


class PnmFormat(Enum):
    """PNM variants: {bitmap, grayscale, color} x {ascii, binary}."""

    PBM_ASCII = "pbm-ascii"
    PGM_ASCII = "pgm-ascii"
    PPM_ASCII = "ppm-ascii"
    PBM_BINARY = "pbm-binary"
    PGM_BINARY = "pgm-binary"
    PPM_BINARY = "ppm-binary"

    @property
    def kind(self) -> ImageKind:
        return _KINDS[self]

    @property
    def is_binary(self) -> bool:
        return self in _BINARY_FORMATS

    @property
    def is_bitmap(self) -> bool:
        return self.kind is ImageKind.BITMAP

    @property
    def channel_count(self) -> int:
        return 3 if self.kind is ImageKind.COLOR else 1

    @property
    def magic_number(self) -> str:
        return _MAGIC_NUMBERS[self]

    @property
    def counterpart(self) -> "PnmFormat":
        """Return the same image kind with the other body encoding."""
        return _COUNTERPARTS[self]

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self.kind]

    @classmethod
    def of(cls, kind: ImageKind, binary: bool) -> "PnmFormat":
        for fmt in cls:
            if fmt.kind is kind and fmt.is_binary == binary:
                return fmt
        raise ValueError(f"No PNM format for {kind.value}")

    @classmethod
    def parse(cls, name: str) -> "PnmFormat":
        """Parse names like 'pbm', 'pgm-ascii', 'ppm-binary' or 'P4'."""
        key = name.strip().lower()
        for fmt in cls:
            if key in (fmt.value, fmt.magic_number.lower()):
                return fmt
        kind = _KIND_NAMES.get(key)
        if kind is not None:
            return cls.of(kind, binary=True)
        raise ValueError(f"Unknown PNM format: {name}")


_KINDS: Dict[PnmFormat, ImageKind] = {
    PnmFormat.PBM_ASCII: ImageKind.BITMAP,
    PnmFormat.PGM_ASCII: ImageKind.GRAYSCALE,
    PnmFormat.PPM_ASCII: ImageKind.COLOR,
    PnmFormat.PBM_BINARY: ImageKind.BITMAP,
    PnmFormat.PGM_BINARY: ImageKind.GRAYSCALE,
    PnmFormat.PPM_BINARY: ImageKind.COLOR,
}

_BINARY_FORMATS = frozenset({PnmFormat.PBM_BINARY, PnmFormat.PGM_BINARY, PnmFormat.PPM_BINARY})

_MAGIC_NUMBERS: Dict[PnmFormat, str] = {
    PnmFormat.PBM_ASCII: "P1",
    PnmFormat.PGM_ASCII: "P2",
    PnmFormat.PPM_ASCII: "P3",
    PnmFormat.PBM_BINARY: "P4",
    PnmFormat.PGM_BINARY: "P5",
    PnmFormat.PPM_BINARY: "P6",
}

_COUNTERPARTS: Dict[PnmFormat, PnmFormat] = {
    PnmFormat.PBM_ASCII: PnmFormat.PBM_BINARY,
    PnmFormat.PGM_ASCII: PnmFormat.PGM_BINARY,
    PnmFormat.PPM_ASCII: PnmFormat.PPM_BINARY,
    PnmFormat.PBM_BINARY: PnmFormat.PBM_ASCII,
    PnmFormat.PGM_BINARY: PnmFormat.PGM_ASCII,
    PnmFormat.PPM_BINARY: PnmFormat.PPM_ASCII,
}

_EXTENSIONS: Dict[ImageKind, str] = {
    ImageKind.BITMAP: ".pbm",
    ImageKind.GRAYSCALE: ".pgm",
    ImageKind.COLOR: ".ppm",
}

_KIND_NAMES: Dict[str, ImageKind] = {
    "pbm": ImageKind.BITMAP,
    "pgm": ImageKind.GRAYSCALE,
    "ppm": ImageKind.COLOR,
}


@dataclass(frozen=True)
class ChannelType:
    """Unsigned integer sample type stored in a raster buffer."""

    name: str
    bits: int

    @property
    def maximum(self) -> int:
        return (1 << self.bits) - 1

    @property
    def byte_width(self) -> int:
        return (self.bits + 7) // 8

    def validate(self, value: int) -> None:
        if not isinstance(value, int):
            raise ValueError(f"Sample {value!r} is not an integer")
        if value < 0 or value > self.maximum:
            raise ValueError(f"Sample {value} out of range for {self.name} (0..{self.maximum})")


UINT8 = ChannelType("uint8", 8)
UINT16 = ChannelType("uint16", 16)


@dataclass(frozen=True)
class PixelColor:
    """Color of a single pixel.

    Color buffers use r, g and b; single-channel buffers use y. A single
    positional value fills both r and y, so ``PixelColor(1)`` works for
    every format.
    """

    r: int = 0
    g: int = 0
    b: int = 0
    y: Optional[int] = None

    def __post_init__(self) -> None:
        if self.y is None:
            object.__setattr__(self, "y", self.r)

    @classmethod
    def gray(cls, value: int) -> "PixelColor":
        return cls(value)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "PixelColor":
        return cls(r, g, b)
