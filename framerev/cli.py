from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .errors import ConfigError, FrameRevError
from .repack_job import RepackSettings, repack_file

MAX_PARAMETER = 2**32 - 1


def parse_positive_int(value: str, name: str = "value") -> int:
    """Parse a string as a positive (non-zero) integer that fits in 32 bits."""
    text = value.strip()
    if not (text.isascii() and text.isdigit()):
        raise ConfigError(f"{name} must be a positive integer, got {value!r}", name)
    result = int(text, 10)
    if result == 0:
        raise ConfigError(f"{name} cannot be zero", name)
    if result > MAX_PARAMETER:
        raise ConfigError(f"{name} cannot be larger than {MAX_PARAMETER}, got {result}", name)
    return result


def _positive_int(name: str):
    def parse(value: str) -> int:
        try:
            return parse_positive_int(value, name)
        except ConfigError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    return parse


def build_parser() -> argparse.ArgumentParser:
    # -h is the frame height, so help is only available as --help.
    parser = argparse.ArgumentParser(
        prog="framerev",
        description="Repack a grid sprite sheet into a sheet with a different number of frames per row.",
        add_help=False,
    )
    parser.add_argument("-i", "--input", required=True, metavar="PATH", help="Path to input image")
    parser.add_argument(
        "-w", "--width", dest="frame_width", required=True, type=_positive_int("frame width"),
        help="Width of a frame in the image",
    )
    parser.add_argument(
        "-h", "--height", dest="frame_height", required=True, type=_positive_int("frame height"),
        help="Height of a frame in the image",
    )
    parser.add_argument(
        "-r", "--frames-per-row", type=_positive_int("frames per row"),
        help="Number of frames per row in the destination image (default: same as source)",
    )
    parser.add_argument(
        "-o", "--output", required=True, metavar="PATH",
        help="Path to location whose contents will be overwritten with output",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log grid geometry and every frame move")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def run(args: argparse.Namespace) -> int:
    settings = RepackSettings(
        frame_width=args.frame_width,
        frame_height=args.frame_height,
        frames_per_row=args.frames_per_row,
    )
    job = repack_file(args.input, args.output, settings)
    geometry = job.geometry
    width, height = geometry.canvas_size
    print(
        f"Wrote {args.output} ({width}x{height}, {geometry.total_frames} frames, "
        f"{geometry.dest_frames_x} columns x {geometry.dest_frames_y} rows)"
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s")
    try:
        return run(args)
    except FrameRevError as exc:
        print(str(exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
