#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ARC Editor - Grid Store
========================

Single source of truth for the grid being edited.

- get() hands out a read-only view; callers cannot mutate the store
- replace() validates and swaps the grid wholesale
- equals() / is_all_zero() back the redundancy checks
"""

import numpy as np
from typing import Tuple

from .types import Grid, validate_grid

# =============================================================================
# Equality Helpers
# =============================================================================

def equals(a, b) -> bool:
    """Deep structural equality (shape and every cell)."""
    a = np.asarray(a)
    b = np.asarray(b)
    return a.shape == b.shape and np.array_equal(a, b)


def is_all_zero(g) -> bool:
    """True if every cell is 0."""
    return not np.any(np.asarray(g))

# =============================================================================
# Store
# =============================================================================

class GridStore:
    """Owns the current grid. Only ActionRecorder writes to it."""

    equals = staticmethod(equals)
    is_all_zero = staticmethod(is_all_zero)

    def __init__(self, grid):
        self._grid = self._freeze(validate_grid(grid))

    @staticmethod
    def _freeze(g: Grid) -> Grid:
        g = np.array(g, dtype=int)
        g.flags.writeable = False
        return g

    def get(self) -> Grid:
        """Current grid as a read-only array."""
        return self._grid

    def replace(self, new_grid) -> None:
        """Validate new_grid and replace the stored grid. Raises InvalidGrid."""
        self._grid = self._freeze(validate_grid(new_grid))

    @property
    def shape(self) -> Tuple[int, int]:
        return self._grid.shape

    def cell(self, r: int, c: int) -> int:
        return int(self._grid[r, c])

    def __repr__(self) -> str:
        H, W = self._grid.shape
        return f"GridStore({H}x{W})"
