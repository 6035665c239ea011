#!/usr/bin/env python3
"""ARC Editor - Spatial Operators"""

from typing import Callable
import numpy as np
from ..core.types import Grid, copy_grid

def RESIZE(rows: int, cols: int) -> Callable[[Grid], Grid]:
    """
    Resize grid to rows x cols.

    Cells in the overlap keep their value by position; newly added cells are 0.

    Example:
        >>> RESIZE(3, 3)(G([[1, 2], [3, 4]]))
        array([[1, 2, 0],
               [3, 4, 0],
               [0, 0, 0]])
    """
    def f(z: Grid) -> Grid:
        out = np.zeros((rows, cols), dtype=int)
        h = min(rows, z.shape[0])
        w = min(cols, z.shape[1])
        out[:h, :w] = z[:h, :w]
        return out
    return f

def COPY_FROM(source: Grid) -> Callable[[Grid], Grid]:
    """Replace the grid with a copy of source (shape may change)."""
    src = copy_grid(source)
    def f(z: Grid) -> Grid:
        return src.copy()
    return f
