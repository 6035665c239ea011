"""
Official ARC color palette and plain-text rendering.
"""

import numpy as np
from typing import Dict

ARC_COLORS: Dict[int, str] = {
    0: "#000000",  # Black
    1: "#0074D9",  # Blue
    2: "#FF4136",  # Red
    3: "#2ECC40",  # Green
    4: "#FFDC00",  # Yellow
    5: "#AAAAAA",  # Gray
    6: "#F012BE",  # Magenta
    7: "#FF851B",  # Orange
    8: "#7FDBFF",  # Cyan
    9: "#870C25",  # Maroon
}

COLOR_NAMES: Dict[int, str] = {
    0: "Black", 1: "Blue", 2: "Red", 3: "Green", 4: "Yellow",
    5: "Gray", 6: "Magenta", 7: "Orange", 8: "Cyan", 9: "Maroon",
}

UNKNOWN_HEX = "#CCCCCC"


def color_hex(c: int) -> str:
    return ARC_COLORS.get(int(c), UNKNOWN_HEX)


def color_name(c: int) -> str:
    return COLOR_NAMES.get(int(c), f"Color {c}")


def render_text(g, zero: str = ".") -> str:
    """One line per row, one digit per cell; background shown as `zero`."""
    rows = []
    for row in np.asarray(g):
        rows.append(" ".join(zero if v == 0 else str(int(v)) for v in row))
    return "\n".join(rows)
