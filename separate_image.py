#!/usr/bin/env python
"""
Image Separator

Usage:
    python separate_image.py [-c N] [-r N] [--reverse-col BOOL] <image_path>...

Examples:
    python separate_image.py -c 2 -r 3 ./scans/page.png
    python separate_image.py --column 4 --reverse-col true ./manga/*.jpg

Each tile (x, y) of dir/name.ext is written to dir/name-<y>-<x>.ext,
in the same format as the input.
"""

import argparse
import sys

from core.errors import InvalidArgument
from pipeline import SeparateConfig, separate_images


def str_to_bool(value: str) -> bool:
    """Parse a command-line boolean."""
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "on", "1"):
        return True
    if lowered in ("false", "no", "off", "0"):
        return False
    raise argparse.ArgumentTypeError(f"expected a boolean, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="separate-image",
        description="Split images into a grid of tiles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Output naming:
  tile (x, y) of dir/name.ext is written to dir/name-<y>-<x>.ext
  with --reverse-col true, x = 0 is the rightmost column
        """
    )
    parser.add_argument("input_paths", nargs="+", metavar="input_path",
                        help="Path(s) to the image(s) to split")
    parser.add_argument("--column", "-c", type=int, default=1,
                        help="Number of columns (default: 1)")
    parser.add_argument("--row", "-r", type=int, default=1,
                        help="Number of rows (default: 1)")
    parser.add_argument("--reverse-col", type=str_to_bool, default=False,
                        metavar="BOOL",
                        help="Number columns from right to left (default: false)")
    parser.add_argument("--preview", metavar="PATH",
                        help="Also save a preview sheet of the tiles; "
                             "'{stem}' is replaced by the input name "
                             "(without it, every input writes the same sheet)")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress output")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = SeparateConfig(
            col_num=args.column,
            row_num=args.row,
            reverse_col=args.reverse_col,
            verbose=not args.quiet,
            preview_path=args.preview
        )
    except InvalidArgument as e:
        parser.error(str(e))

    failures = separate_images(args.input_paths, config)

    if failures:
        if config.verbose:
            print(f"\n{len(failures)} of {len(args.input_paths)} file(s) failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
