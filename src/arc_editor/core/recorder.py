#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ARC Editor - Action Recorder
=============================

The only writer of GridStore. For every proposed edit:

1. Gate: refuse if the session is past its action limit (or not Active)
2. Plan: compute the proposed grid and the Action payload
3. Redundancy: suppress if the edit would not change anything
4. Commit: replace the grid, bump actionCount, stamp sequenceNumber/timestamp

Redundancy rules:

    cell_change      new color == existing cell color
    fill_all         every cell already equals the color
    reset            grid already all zero
    copy_from_input  grid already equals the input grid
    resize           requested (rows, cols) == current shape
    select_region    never suppressed
    test_solution    never suppressed (does not touch the grid)

Sequence numbers are only assigned to committed actions, so the log is
1..n with no gaps.
"""

import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from ..config import MIN_GRID_DIM, MAX_GRID_DIM
from ..operators import SET_CELL, PAINT_RECT, FILL_ALL, RESET, RESIZE, COPY_FROM, changed_cells
from . import actions as A
from .actions import Action, rect_payload
from .errors import InvalidDimensions, InvalidGrid, LimitExceeded, InvalidTransition
from .grid_store import GridStore, equals, is_all_zero
from .limiter import SafetyLimiter
from .types import Grid, validate_color

COMMITTED = "committed"
SUPPRESSED = "suppressed"
REFUSED = "refused"

# =============================================================================
# Session Counters
# =============================================================================

@dataclass
class SessionCounters:
    """Per-session counters; a new session starts from fresh counters."""
    action_count: int = 0
    selected_color: int = 1

# =============================================================================
# Planners: (store, **params) -> (new_grid, payload) or None if redundant
# =============================================================================

Plan = Optional[Tuple[Optional[Grid], Dict]]


def check_dimensions(rows, cols) -> Tuple[int, int]:
    """Validate a resize target. Raises InvalidDimensions with a user-facing message."""
    for v in (rows, cols):
        if isinstance(v, bool) or not isinstance(v, (int, np.integer)):
            raise InvalidDimensions("Grid dimensions must be whole numbers")
    rows, cols = int(rows), int(cols)
    if not (MIN_GRID_DIM <= rows <= MAX_GRID_DIM and MIN_GRID_DIM <= cols <= MAX_GRID_DIM):
        raise InvalidDimensions(
            f"Grid dimensions must be between {MIN_GRID_DIM} and {MAX_GRID_DIM}"
        )
    return rows, cols


def plan_cell_change(store: GridStore, row: int, col: int, color: int) -> Plan:
    H, W = store.shape
    if not (0 <= row < H and 0 <= col < W):
        raise InvalidGrid(f"cell ({row}, {col}) is outside the {H}x{W} grid")
    old = store.cell(row, col)
    if old == color:
        return None
    new = SET_CELL(row, col, color)(store.get())
    return new, {"row": int(row), "col": int(col), "oldValue": old, "newValue": color}


def plan_select_region(store: GridStore, rect: Tuple[int, int, int, int], color: int) -> Plan:
    H, W = store.shape
    r0, r1, c0, c1 = rect
    if not (0 <= r0 <= r1 < H and 0 <= c0 <= c1 < W):
        raise InvalidGrid(f"region {rect} is outside the {H}x{W} grid")
    cur = store.get()
    new = PAINT_RECT(rect, color)(cur)
    return new, {"rect": rect_payload(rect), "color": color,
                 "cellsAffected": changed_cells(cur, new)}


def plan_fill_all(store: GridStore, color: int) -> Plan:
    cur = store.get()
    if (cur == color).all():
        return None
    return FILL_ALL(color)(cur), {"color": color}


def plan_reset(store: GridStore) -> Plan:
    cur = store.get()
    if is_all_zero(cur):
        return None
    return RESET()(cur), {}


def plan_copy_from_input(store: GridStore, input_grid: Grid) -> Plan:
    cur = store.get()
    if equals(cur, input_grid):
        return None
    return COPY_FROM(input_grid)(cur), {}


def plan_resize(store: GridStore, rows: int, cols: int) -> Plan:
    rows, cols = check_dimensions(rows, cols)
    if (rows, cols) == store.shape:
        return None
    return RESIZE(rows, cols)(store.get()), {"newRows": rows, "newCols": cols}


def plan_test_solution(store: GridStore, expected: Grid) -> Plan:
    cur = store.get()
    return None, {
        "isCorrect": bool(equals(cur, expected)),
        "expectedRows": int(expected.shape[0]), "expectedCols": int(expected.shape[1]),
        "actualRows": int(cur.shape[0]), "actualCols": int(cur.shape[1]),
    }


PLANNERS: Dict[str, Callable[..., Plan]] = {
    A.CELL_CHANGE: plan_cell_change,
    A.SELECT_REGION: plan_select_region,
    A.FILL_ALL: plan_fill_all,
    A.RESET: plan_reset,
    A.COPY_FROM_INPUT: plan_copy_from_input,
    A.RESIZE: plan_resize,
    A.TEST_SOLUTION: plan_test_solution,
}

# Payload params that name a paint color
_COLOR_PARAMS = ("color",)

# =============================================================================
# Recorder
# =============================================================================

def now_ms() -> int:
    return int(time.time() * 1000)


class ActionRecorder:
    """Applies committed edits to GridStore and emits Action records."""

    def __init__(self, store: GridStore, limiter: SafetyLimiter,
                 counters: Optional[SessionCounters] = None,
                 clock: Callable[[], int] = now_ms):
        self.store = store
        self.limiter = limiter
        self.counters = counters or SessionCounters()
        self.clock = clock
        self.last_outcome: Optional[str] = None
        self._listeners: List[Callable[[Action], None]] = []

    def on_action(self, callback: Callable[[Action], None]) -> None:
        self._listeners.append(callback)

    def commit(self, kind: str, **params) -> Optional[Action]:
        """
        Commit an edit of the given kind.

        Returns:
            The new Action, or None if the edit was suppressed (no-op) or
            refused (limit reached / session closed). last_outcome tells
            which.

        Raises:
            InvalidDimensions: resize outside 1..30
            InvalidGrid / InvalidColor: malformed arguments
        """
        if kind not in PLANNERS:
            raise ValueError(f"Unknown action type: {kind}")

        try:
            self.limiter.ensure_can_commit()
        except (LimitExceeded, InvalidTransition):
            self.last_outcome = REFUSED
            return None

        for name in _COLOR_PARAMS:
            if name in params:
                params[name] = validate_color(params[name])

        plan = PLANNERS[kind](self.store, **params)
        if plan is None:
            self.last_outcome = SUPPRESSED
            return None

        new_grid, payload = plan
        if new_grid is not None:
            self.store.replace(new_grid)

        self.counters.action_count += 1
        action = Action(self.counters.action_count, kind, self.clock(), payload)
        self.last_outcome = COMMITTED

        for cb in self._listeners:
            cb(action)
        self.limiter.observe(self.counters.action_count)
        return action

    @property
    def action_count(self) -> int:
        return self.counters.action_count
