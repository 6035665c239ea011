"""ARC Editor - Grid Edit Operators"""

from .paint import SET_CELL, PAINT_RECT, FILL_ALL, RESET, changed_cells
from .spatial import RESIZE, COPY_FROM

__all__ = [
    # Paint
    'SET_CELL', 'PAINT_RECT', 'FILL_ALL', 'RESET', 'changed_cells',
    # Spatial
    'RESIZE', 'COPY_FROM',
]
