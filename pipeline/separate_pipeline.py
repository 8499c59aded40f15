"""
Separation Pipeline

Drives the grid partitioner over image files:
1. Load image (codec chosen by file extension)
2. Split into col_num x row_num tiles
3. Write every tile next to the input as <stem>-<y>-<x>.<ext>

Each input file is processed completely before the next one.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from core.errors import EncodeError, SeparatorError
from core.image_utils import load_image, save_image, has_writer
from core.splitting import check_count, separate


@dataclass
class SeparateConfig:
    """
    Options for separating images.

    Attributes:
        col_num: Number of columns to split into
        row_num: Number of rows to split into
        reverse_col: Number columns from right to left
        verbose: Print progress info
        preview_path: Optional path pattern for a tile preview sheet;
                      '{stem}' is replaced by the input file's stem
    """
    col_num: int = 1
    row_num: int = 1
    reverse_col: bool = False
    verbose: bool = True
    preview_path: Optional[str] = None

    def __post_init__(self):
        check_count(self.col_num, "col_num")
        check_count(self.row_num, "row_num")


def tile_output_path(input_path, x: int, y: int) -> Path:
    """Output path of tile (x, y): dir/name.ext -> dir/name-<y>-<x>.ext"""
    input_path = Path(input_path)
    return input_path.with_name(f"{input_path.stem}-{y}-{x}{input_path.suffix}")


def separate_one_image(input_path, config: SeparateConfig) -> List[Path]:
    """
    Split one image file and write its tiles.

    Args:
        input_path: Path to the image
        config: Separation options

    Returns:
        Paths of the written tiles, ordered by (y, x)

    Raises:
        DecodeError: If the image cannot be loaded
        InvalidArgument: If the grid does not fit the image
        EncodeError: If the format has no writer or a tile write fails
    """
    input_path = Path(input_path)
    image = load_image(input_path)

    if config.verbose:
        print(f"Loaded: {input_path}")
        print(f"Size: {image.shape[1]}x{image.shape[0]}")
        print(f"Grid: {config.col_num}x{config.row_num}"
              f"{' (reversed columns)' if config.reverse_col else ''}")

    parts = separate(image, config.col_num, config.row_num,
                     reverse_col=config.reverse_col)

    # Fail before writing anything if the format cannot be encoded
    probe = tile_output_path(input_path, 0, 0)
    if not has_writer(probe):
        raise EncodeError(f"No image writer for format: {input_path}")

    written = []
    for (x, y) in sorted(parts, key=lambda index: (index[1], index[0])):
        output_path = tile_output_path(input_path, x, y)
        save_image(output_path, parts.get(x, y))
        written.append(output_path)
        if config.verbose:
            tile = parts.get(x, y)
            print(f"  ({x}, {y}) {tile.shape[1]}x{tile.shape[0]} -> {output_path}")

    if config.preview_path:
        from visualization.display import save_tile_grid
        preview = config.preview_path.replace("{stem}", input_path.stem)
        save_tile_grid(parts, preview, title=input_path.name)
        if config.verbose:
            print(f"Saved preview: {preview}")

    if config.verbose:
        print(f"Wrote {len(written)} tiles")

    return written


def separate_images(input_paths: Iterable, config: SeparateConfig) -> Dict[str, Exception]:
    """
    Split every image in input_paths.

    A failing file is reported and skipped; the remaining files are still
    processed.

    Returns:
        Dict mapping each failed input path to its error (empty on success)
    """
    input_paths = list(input_paths)
    if (config.preview_path and "{stem}" not in config.preview_path
            and len(input_paths) > 1):
        print(f"Warning: preview path {config.preview_path!r} has no '{{stem}}'; "
              "each input overwrites the same preview", file=sys.stderr)

    failures = {}
    for input_path in input_paths:
        try:
            separate_one_image(input_path, config)
        except SeparatorError as e:
            print(f"Error: {input_path}: {e}", file=sys.stderr)
            failures[str(input_path)] = e
    return failures
