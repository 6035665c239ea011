#!/usr/bin/env python3
"""ARC Editor - Paint Operators"""

from typing import Callable, Tuple
import numpy as np
from ..core.types import Grid

def SET_CELL(r: int, c: int, color: int) -> Callable[[Grid], Grid]:
    """
    Set a single cell to color.

    Example:
        >>> SET_CELL(0, 0, 1)(G([[0, 0], [0, 0]]))
        array([[1, 0],
               [0, 0]])
    """
    def f(z: Grid) -> Grid:
        out = z.copy()
        out[r, c] = color
        return out
    return f

def PAINT_RECT(rect: Tuple[int, int, int, int], color: int) -> Callable[[Grid], Grid]:
    """
    Paint every cell of a rectangle with color.

    Args:
        rect: (min_row, max_row, min_col, max_col), inclusive on both ends
        color: Color to paint
    """
    r0, r1, c0, c1 = rect
    def f(z: Grid) -> Grid:
        out = z.copy()
        out[r0:r1+1, c0:c1+1] = color
        return out
    return f

def FILL_ALL(color: int) -> Callable[[Grid], Grid]:
    """Recolor the entire grid to a constant color."""
    def f(z: Grid) -> Grid:
        out = z.copy()
        out[:, :] = color
        return out
    return f

def RESET() -> Callable[[Grid], Grid]:
    """Clear the grid to all zeros, keeping its shape."""
    def f(z: Grid) -> Grid:
        return np.zeros_like(z, dtype=int)
    return f

def changed_cells(a: Grid, b: Grid) -> int:
    """Number of cells that differ between two same-shape grids."""
    return int((a != b).sum())
