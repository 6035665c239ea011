"""
Replay a recorded action log onto an input grid.

Each action is re-applied with the pure operators; the log must be
contiguous (sequenceNumber 1..n) and every cell_change must find the
oldValue it recorded.
"""

from typing import Dict, Iterable, Union

from .core import actions as A
from .core.actions import Action
from .core.errors import ReplayMismatch, InvalidGrid, InvalidColor, InvalidDimensions
from .core.grid_store import equals
from .core.recorder import check_dimensions
from .core.types import Grid, validate_grid, validate_color
from .operators import SET_CELL, PAINT_RECT, FILL_ALL, RESET, RESIZE, COPY_FROM


def _rect(d: Dict, g: Grid):
    r = d["rect"]
    rect = r["minRow"], r["maxRow"], r["minCol"], r["maxCol"]
    H, W = g.shape
    r0, r1, c0, c1 = rect
    if not (0 <= r0 <= r1 < H and 0 <= c0 <= c1 < W):
        raise ReplayMismatch(f"#{d['sequenceNumber']}: region {rect} is outside the {H}x{W} grid")
    return rect


def apply_action(g: Grid, d: Dict, input_grid: Grid) -> Grid:
    """Apply one action (dict form) to g and return the new grid."""
    t = d["type"]
    if t == A.CELL_CHANGE:
        r, c = d["row"], d["col"]
        if not (0 <= r < g.shape[0] and 0 <= c < g.shape[1]):
            raise ReplayMismatch(f"#{d['sequenceNumber']}: cell ({r}, {c}) outside {g.shape}")
        if int(g[r, c]) != d["oldValue"]:
            raise ReplayMismatch(
                f"#{d['sequenceNumber']}: cell ({r}, {c}) is {int(g[r, c])}, log says {d['oldValue']}"
            )
        return SET_CELL(r, c, validate_color(d["newValue"]))(g)
    if t == A.SELECT_REGION:
        return PAINT_RECT(_rect(d, g), validate_color(d["color"]))(g)
    if t == A.FILL_ALL:
        return FILL_ALL(validate_color(d["color"]))(g)
    if t == A.RESET:
        return RESET()(g)
    if t == A.COPY_FROM_INPUT:
        return COPY_FROM(input_grid)(g)
    if t == A.RESIZE:
        return RESIZE(*check_dimensions(d["newRows"], d["newCols"]))(g)
    if t == A.TEST_SOLUTION:
        return g
    raise ReplayMismatch(f"#{d.get('sequenceNumber')}: unknown action type {t!r}")


def replay_actions(input_grid, actions: Iterable[Union[Action, Dict]],
                   expected_final=None) -> Grid:
    """
    Replay actions from input_grid and return the final grid.

    Args:
        input_grid: Grid the session started from
        actions: Action objects or dicts, in log order
        expected_final: If given, the replayed grid must equal it

    Raises:
        ReplayMismatch: gap in sequence numbers, stale oldValue, unknown
            type, region outside the grid, color outside 0-9, resize
            outside 1..30, or a final grid different from expected_final
    """
    inp = validate_grid(input_grid)
    g = inp.copy()
    for i, a in enumerate(actions, 1):
        d = a.to_dict() if isinstance(a, Action) else a
        if d.get("sequenceNumber") != i:
            raise ReplayMismatch(f"expected sequenceNumber {i}, got {d.get('sequenceNumber')}")
        try:
            g = validate_grid(apply_action(g, d, inp))
        except (InvalidGrid, InvalidColor, InvalidDimensions) as e:
            raise ReplayMismatch(f"#{i}: {e}") from e
    if expected_final is not None and not equals(g, expected_final):
        raise ReplayMismatch("replayed grid does not match the recorded final grid")
    return g
