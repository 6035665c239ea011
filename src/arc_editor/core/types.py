#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ARC Editor - Type Definitions
==============================

Core types used throughout the grid editor:
- Grid: 2D integer array (color values 0-9)
- Mode: active interaction mode (edit / select / fill)
- Cell: (row, col) coordinate
- SelectionRect: anchor/cursor pair of an in-progress drag
- PointerEvent: platform-agnostic pointer/touch event
"""

import numpy as np
from enum import Enum
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import MIN_GRID_DIM, MAX_GRID_DIM, NUM_COLORS
from .errors import InvalidGrid, InvalidColor

# =============================================================================
# Core Types
# =============================================================================

Grid = np.ndarray          # dtype=int, shape (H, W), values 0..9
Cell = Tuple[int, int]     # (row, col)


class Mode(str, Enum):
    """Interaction mode of the editor. Exactly one is active at a time."""
    EDIT = "edit"
    SELECT = "select"
    FILL = "fill"


@dataclass
class SelectionRect:
    """In-progress drag selection: anchor is where the press landed."""
    anchor: Cell
    cursor: Cell

    def normalized(self) -> Tuple[int, int, int, int]:
        """Return (min_row, max_row, min_col, max_col)."""
        (r0, c0), (r1, c1) = self.anchor, self.cursor
        return min(r0, r1), max(r0, r1), min(c0, c1), max(c0, c1)


@dataclass(frozen=True)
class PointerEvent:
    """
    A single pointer or touch sample, already adapted by the host.

    kind is one of "start", "move", "end", "cancel". A pointer leaving the
    grid is delivered as "cancel". For two-finger touches, (x2, y2) is the
    second finger's position.
    """
    x: float
    y: float
    kind: str
    pointer_count: int = 1
    x2: Optional[float] = None
    y2: Optional[float] = None


POINTER_KINDS = ("start", "move", "end", "cancel")

# =============================================================================
# Type Utilities
# =============================================================================

def G(lst) -> Grid:
    """Helper to build a grid from nested lists."""
    return np.array(lst, dtype=int)


def copy_grid(g: Grid) -> Grid:
    """Create a writable copy of a grid."""
    return np.array(g, dtype=int)


def to_list(g: Grid) -> List[List[int]]:
    """Plain nested-list form (JSON-serializable, no numpy scalars)."""
    return [[int(v) for v in row] for row in np.asarray(g)]


def validate_grid(g) -> Grid:
    """
    Validate and convert g to a Grid.

    Accepts nested lists or ndarrays. Raises InvalidGrid for ragged or empty
    rows, non-integer values, colors outside 0-9, or dimensions outside 1-30.
    """
    if isinstance(g, np.ndarray):
        arr = g
    else:
        if not isinstance(g, (list, tuple)) or len(g) == 0:
            raise InvalidGrid("Grid must be a non-empty list of rows.")
        lengths = set()
        for row_idx, row in enumerate(g):
            if not isinstance(row, (list, tuple, np.ndarray)):
                raise InvalidGrid(f"Row {row_idx} must be a list, got {type(row).__name__}.")
            lengths.add(len(row))
        if len(lengths) > 1:
            raise InvalidGrid(f"Inconsistent row lengths: {sorted(lengths)}.")
        arr = np.array(g)

    if arr.ndim != 2:
        raise InvalidGrid(f"Grid must be 2D, got {arr.ndim} dimensions.")
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise InvalidGrid(f"Grid values must be integers, got dtype {arr.dtype}.")

    H, W = arr.shape
    if not (MIN_GRID_DIM <= H <= MAX_GRID_DIM and MIN_GRID_DIM <= W <= MAX_GRID_DIM):
        raise InvalidGrid(
            f"Grid dimensions must be between {MIN_GRID_DIM} and {MAX_GRID_DIM}, got {H}x{W}."
        )

    arr = arr.astype(int)
    if arr.min() < 0 or arr.max() >= NUM_COLORS:
        raise InvalidGrid(f"Grid values must be 0-{NUM_COLORS - 1}.")
    return arr


def validate_color(color) -> int:
    """Return color as int if it is a valid palette index, else raise InvalidColor."""
    if isinstance(color, bool) or not isinstance(color, (int, np.integer)):
        raise InvalidColor(f"Color must be an integer, got {color!r}.")
    if not (0 <= int(color) < NUM_COLORS):
        raise InvalidColor(f"Color must be 0-{NUM_COLORS - 1}, got {color}.")
    return int(color)
