#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ARC Editor - Coordinate Resolver
=================================

Maps a pointer position (mouse or touch, same path) to the grid cell under
it. Cell size is recomputed on demand from the grid shape, the available
display size and the pinch-zoom scale:

    cell = max(min_cell_px, floor(max_display_px / max(H, W))) * scale
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import DEFAULT_MIN_CELL_SIZE_PX, DEFAULT_MAX_DISPLAY_SIZE_PX
from .types import Cell


@dataclass(frozen=True)
class Viewport:
    """Screen-space position of the grid origin (top-left corner of cell (0,0))."""
    origin_x: float = 0.0
    origin_y: float = 0.0
    scale: float = 1.0


def cell_size(shape: Tuple[int, int],
              min_cell_px: int = DEFAULT_MIN_CELL_SIZE_PX,
              max_display_px: int = DEFAULT_MAX_DISPLAY_SIZE_PX,
              scale: float = 1.0) -> float:
    """Rendered cell size in pixels for a grid of the given shape."""
    H, W = shape
    base = max(min_cell_px, int(math.floor(max_display_px / max(H, W))))
    return base * scale


class CoordinateResolver:
    """Stateless pointer -> cell mapping for a given display configuration."""

    def __init__(self,
                 min_cell_px: int = DEFAULT_MIN_CELL_SIZE_PX,
                 max_display_px: int = DEFAULT_MAX_DISPLAY_SIZE_PX):
        self.min_cell_px = min_cell_px
        self.max_display_px = max_display_px

    def cell_size(self, shape: Tuple[int, int], scale: float = 1.0) -> float:
        return cell_size(shape, self.min_cell_px, self.max_display_px, scale)

    def resolve(self, x: float, y: float, shape: Tuple[int, int],
                viewport: Viewport) -> Optional[Cell]:
        """
        Return (row, col) under (x, y), or None if outside the grid.

        Args:
            x, y: Pointer position in screen pixels
            shape: (rows, cols) of the current grid
            viewport: Grid origin and zoom scale
        """
        size = self.cell_size(shape, viewport.scale)
        if size <= 0:
            return None
        col = int(math.floor((x - viewport.origin_x) / size))
        row = int(math.floor((y - viewport.origin_y) / size))
        H, W = shape
        if not (0 <= row < H and 0 <= col < W):
            return None
        return row, col
