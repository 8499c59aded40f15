"""Preview sheets for separated tiles."""

import cv2
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional

from core.errors import EncodeError
from core.splitting import SeparatedParts


def _to_display(tile: np.ndarray) -> np.ndarray:
    """Convert an OpenCV tile (BGR/BGRA) to RGB(A) for matplotlib."""
    if tile.ndim == 3 and tile.shape[2] == 3:
        return cv2.cvtColor(tile, cv2.COLOR_BGR2RGB)
    if tile.ndim == 3 and tile.shape[2] == 4:
        return cv2.cvtColor(tile, cv2.COLOR_BGRA2RGBA)
    if tile.ndim == 3 and tile.shape[2] == 1:
        return tile[:, :, 0]
    return tile


def save_tile_grid(parts: SeparatedParts, output_path: str,
                   title: Optional[str] = None, dpi: int = 100,
                   figsize_per_tile: tuple = (2, 2)):
    """
    Save every tile in a row_num x col_num sheet, laid out by tile index.

    Args:
        parts: Result of separate()
        output_path: Path to save the sheet (format from extension)
        title: Optional figure title
        dpi: Output DPI
        figsize_per_tile: Figure size per tile
    """
    col_num, row_num = parts.col_num, parts.row_num
    fig, axes = plt.subplots(row_num, col_num,
                             figsize=(figsize_per_tile[0] * col_num,
                                      figsize_per_tile[1] * row_num),
                             squeeze=False)

    for (x, y), tile in parts.items():
        ax = axes[y, x]
        img = _to_display(tile)
        ax.imshow(img, cmap='gray' if img.ndim == 2 else None)
        ax.set_title(f"({x}, {y})", fontsize=8)
        ax.axis('off')

    if title:
        fig.suptitle(title)
    plt.tight_layout()

    output_dir = Path(output_path).parent
    try:
        if output_dir and str(output_dir) != '.':
            output_dir.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=dpi, bbox_inches='tight')
    except (ValueError, OSError) as e:
        raise EncodeError(f"Could not save preview: {output_path} ({e})") from e
    finally:
        plt.close(fig)
