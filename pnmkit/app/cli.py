from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from ..export import DEFAULT_DEMO_SIZE, ExportSettings, ImageExporter
from ..raster import UINT8, UINT16, ImageKind, PnmFormat

logger = logging.getLogger(__name__)

CHANNEL_TYPES = {8: UINT8, 16: UINT16}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pnmkit",
        description="pnmkit: write PBM/PGM/PPM images from raster files or a drawn demo scene.",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="INPUT OUTPUT, or only OUTPUT with --demo")
    parser.add_argument("--format", default="ppm", help="Output kind: pbm, pgm, ppm or a full name like pgm-ascii")
    parser.add_argument("--ascii", action="store_true", help="Write the ASCII variant (P1/P2/P3)")
    parser.add_argument("--width", type=int, help="Scale the input image to this width")
    parser.add_argument("--no-dither", action="store_true", help="Threshold instead of dithering for pbm output")
    parser.add_argument("--depth", type=int, choices=sorted(CHANNEL_TYPES), default=8, help="Bits per sample")
    parser.add_argument("--demo", action="store_true", help="Draw the demo scene instead of converting a file")
    parser.add_argument("--size", metavar="WxH", help="Demo image size (default: 640x480)")
    parser.add_argument("--list-formats", action="store_true", help="List supported formats and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def list_formats() -> int:
    for fmt in PnmFormat:
        print(f"{fmt.magic_number} {fmt.value} ({fmt.extension})")
    return 0


def parse_size(value: Optional[str]) -> Tuple[int, int]:
    if not value:
        return DEFAULT_DEMO_SIZE
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise ValueError(f"Invalid size '{value}', expected WxH") from None
    return width, height


def _resolve_format(args: argparse.Namespace) -> PnmFormat:
    fmt = PnmFormat.parse(args.format)
    if args.ascii and fmt.is_binary:
        fmt = fmt.counterpart
    return fmt


def build_settings(args: argparse.Namespace) -> ExportSettings:
    fmt = _resolve_format(args)
    if args.depth != 8 and fmt.kind is ImageKind.BITMAP:
        logger.warning("--depth is ignored for bitmap output")
    return ExportSettings(
        format=fmt,
        width=args.width,
        dither=not args.no_dither,
        channel_type=CHANNEL_TYPES[args.depth],
    )


def run_demo(args: argparse.Namespace) -> int:
    exporter = ImageExporter(build_settings(args))
    width, height = parse_size(args.size)
    buffer = exporter.build_demo(width, height)
    exporter.save(buffer, args.paths[0])
    return 0


def run_convert(args: argparse.Namespace) -> int:
    source, destination = args.paths
    exporter = ImageExporter(build_settings(args))
    exporter.export_file(source, destination)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    if args.list_formats:
        return list_formats()
    expected = 1 if args.demo else 2
    if len(args.paths) != expected:
        usage = "OUTPUT" if args.demo else "INPUT OUTPUT"
        print(f"Expected {usage}. Use --help for usage.", file=sys.stderr)
        return 2
    try:
        if args.demo:
            return run_demo(args)
        return run_convert(args)
    except Exception as exc:
        logger.debug("Command failed", exc_info=True)
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
