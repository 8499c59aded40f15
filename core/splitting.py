"""Image splitting into a grid of tiles."""

import numpy as np
from collections.abc import Mapping
from typing import Dict, Iterator, List, Tuple

from .errors import InvalidArgument


TileIndex = Tuple[int, int]


class SeparatedParts(Mapping):
    """
    Read-only mapping of tile index (x, y) to tile image.

    Attributes:
        col_num: Number of columns the image was split into
        row_num: Number of rows the image was split into
        reverse_col: Whether column indices run right to left
    """

    def __init__(self, tiles: Dict[TileIndex, np.ndarray], col_num: int,
                 row_num: int, reverse_col: bool = False):
        self._tiles = dict(tiles)
        self.col_num = col_num
        self.row_num = row_num
        self.reverse_col = reverse_col

    def __getitem__(self, index: TileIndex) -> np.ndarray:
        return self._tiles[index]

    def __iter__(self) -> Iterator[TileIndex]:
        return iter(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __repr__(self) -> str:
        return (f"SeparatedParts(col_num={self.col_num}, row_num={self.row_num}, "
                f"reverse_col={self.reverse_col})")

    def get(self, x: int, y: int) -> np.ndarray:
        """Get tile at (x, y). Same as parts[(x, y)]."""
        return self._tiles[(x, y)]


def check_count(value, name: str) -> None:
    """Raise InvalidArgument unless value is a positive integer."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidArgument(f"{name} must be >= 1, got {value}")


def compute_boundaries(length: int, parts: int) -> List[int]:
    """
    Compute cut positions splitting `length` pixels into `parts` spans.

    Widths of consecutive spans differ by at most one pixel.

    Example:
        compute_boundaries(10, 3) -> [0, 3, 6, 10]
    """
    check_count(parts, "parts")
    return [length * i // parts for i in range(parts + 1)]


def physical_column(x: int, col_num: int, reverse_col: bool) -> int:
    """Map a column index to its physical column (and back)."""
    return col_num - 1 - x if reverse_col else x


def separate(image: np.ndarray, col_num: int, row_num: int,
             reverse_col: bool = False) -> SeparatedParts:
    """
    Split image into col_num x row_num tiles.

    Args:
        image: Input image as numpy array (H, W) or (H, W, C)
        col_num: Number of horizontal divisions
        row_num: Number of vertical divisions
        reverse_col: Give the rightmost tiles the smallest column index

    Returns:
        SeparatedParts mapping (x, y) to an independent copy of each tile,
        where 0 <= x < col_num and 0 <= y < row_num

    Raises:
        InvalidArgument: If col_num/row_num is not a positive integer or
                         the grid would produce a zero-size tile
    """
    check_count(col_num, "col_num")
    check_count(row_num, "row_num")

    if image is None or np.ndim(image) < 2:
        raise InvalidArgument("Image must be an array with at least 2 dimensions")

    height, width = image.shape[:2]
    x_list = compute_boundaries(width, col_num)
    y_list = compute_boundaries(height, row_num)

    # col_num > width (or row_num > height) collapses a pair of cuts
    if any(a == b for a, b in zip(x_list, x_list[1:])):
        raise InvalidArgument(
            f"Cannot split width {width} into {col_num} columns: tiles would be empty")
    if any(a == b for a, b in zip(y_list, y_list[1:])):
        raise InvalidArgument(
            f"Cannot split height {height} into {row_num} rows: tiles would be empty")

    tiles = {}
    for x in range(col_num):
        for y in range(row_num):
            tile = image[y_list[y]:y_list[y + 1], x_list[x]:x_list[x + 1]].copy()
            tiles[(physical_column(x, col_num, reverse_col), y)] = tile

    return SeparatedParts(tiles, col_num, row_num, reverse_col)


def reassemble(parts: SeparatedParts) -> np.ndarray:
    """
    Put tiles back together in physical order.

    Inverse of separate(): reassemble(separate(img, c, r, rev)) equals img.
    """
    rows = []
    for y in range(parts.row_num):
        row = [parts.get(physical_column(x, parts.col_num, parts.reverse_col), y)
               for x in range(parts.col_num)]
        rows.append(np.concatenate(row, axis=1))
    return np.concatenate(rows, axis=0)
