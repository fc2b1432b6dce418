"""Command line entry point: load, transform, save."""

import argparse
import logging
import sys
from typing import List, Optional

from pixpool.config import APP_CONFIG, BLUR_PRESETS
from pixpool.errors import PixpoolError
from pixpool.loader.service import Loader
from pixpool.logging_config import setup_logging
from pixpool.pipeline import Blur, Operation, Pipeline, Resize, Rotate, Sobel


def parse_size(value: str) -> Resize:
    """Parse ``WIDTHxHEIGHT``."""
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}")
    if width < 1 or height < 1:
        raise argparse.ArgumentTypeError(f"size must be positive, got {value!r}")
    return Resize(width, height)


class AppendOperation(argparse.Action):
    """Collects operation flags into ``namespace.operations`` in command line order."""

    def __init__(self, option_strings, dest, build, nargs=None, **kwargs):
        self.build = build
        super().__init__(option_strings, dest, nargs=nargs, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        operations = list(getattr(namespace, "operations", None) or [])
        operations.append(self.build(values))
        namespace.operations = operations


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixpool",
        description="Apply blur, edge detection, rotation and resize using a pool of worker threads.",
    )
    parser.add_argument("input", nargs="?", help="Image to load; a gradient demo image is used if omitted.")
    parser.add_argument("output", nargs="?", help="Where to save the result.")
    parser.add_argument(
        "-w", "--workers", type=int, default=APP_CONFIG.default_workers,
        help=f"Worker threads per transform (default: {APP_CONFIG.default_workers}).",
    )
    parser.add_argument(
        "--blur", action=AppendOperation, build=Blur, dest="operations",
        choices=sorted(BLUR_PRESETS), help="3x3 box blur: light (1 pass), medium (3), heavy (10).",
    )
    parser.add_argument(
        "--sobel", action=AppendOperation, build=lambda _: Sobel(), nargs=0, dest="operations",
        help="Sobel edge detection.",
    )
    parser.add_argument(
        "--rotate", action=AppendOperation, build=Rotate, type=float, dest="operations",
        metavar="DEGREES", help="Rotate about the image center.",
    )
    parser.add_argument(
        "--resize", action=AppendOperation, build=lambda size: size, type=parse_size,
        dest="operations", metavar="WxH", help="Bilinear resize to WIDTHxHEIGHT.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    parser.set_defaults(operations=[])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logging(logging.DEBUG if args.verbose else APP_CONFIG.log_level)

    try:
        if args.input:
            image = Loader.load(args.input)
        else:
            logger.warning("No input image given, using the demo gradient")
            image = Loader.demo_image(APP_CONFIG.demo_width, APP_CONFIG.demo_height)

        operations: List[Operation] = args.operations
        result = Pipeline(args.workers).apply(image, operations)

        if args.output:
            Loader.save(result, args.output)
        else:
            logger.info("No output path given, result not saved. Usage: pixpool input.png output.png")
    except FileNotFoundError as e:
        logger.error(f"File not found: {e.filename}")
        return 1
    except PixpoolError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
