"""
Pipeline orchestration modules.

1. load_image() - decode the input file
2. separate() - split into tiles
3. save_image() - write each tile as <stem>-<y>-<x>.<ext>
"""
from .separate_pipeline import (
    SeparateConfig,
    tile_output_path,
    separate_one_image,
    separate_images
)
