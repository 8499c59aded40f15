"""Visualization utilities for separated tiles."""
from .display import save_tile_grid
