"""Tests for tile preview sheets."""

import sys
import os

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.errors import EncodeError
from core.splitting import separate
from visualization.display import save_tile_grid


def test_save_tile_grid(tmp_path):
    img = np.random.RandomState(0).randint(0, 255, (8, 12, 3)).astype(np.uint8)
    output = tmp_path / "sheet.png"

    save_tile_grid(separate(img, 3, 2, reverse_col=True), str(output), title="sheet")

    assert output.stat().st_size > 0


def test_save_tile_grid_single_tile_grayscale(tmp_path):
    img = np.zeros((4, 4), dtype=np.uint8)
    output = tmp_path / "one.png"

    save_tile_grid(separate(img, 1, 1), str(output))

    assert output.exists()


def test_save_tile_grid_bgra(tmp_path):
    img = np.full((4, 6, 4), 128, dtype=np.uint8)
    output = tmp_path / "alpha.png"

    save_tile_grid(separate(img, 2, 2), str(output))

    assert output.exists()


def test_save_tile_grid_unknown_format(tmp_path):
    img = np.zeros((4, 4, 3), dtype=np.uint8)
    with pytest.raises(EncodeError):
        save_tile_grid(separate(img, 2, 2), str(tmp_path / "sheet.unknownfmt"))


def test_save_tile_grid_parent_is_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    img = np.zeros((4, 4, 3), dtype=np.uint8)
    with pytest.raises(EncodeError):
        save_tile_grid(separate(img, 2, 2), str(blocker / "sheet.png"))
