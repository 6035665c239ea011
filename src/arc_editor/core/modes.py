#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ARC Editor - Mode Controller
=============================

Interprets pointer events according to the active mode:

- EDIT:   press over a cell paints it (cell_change)
- SELECT: press -> drag -> release paints the rectangle (select_region)
          Idle --start--> Dragging --move*--> --end--> commit / --cancel--> abort
- FILL:   press inside the grid recolors every cell (fill_all)

Two-finger touches drive pinch-to-zoom instead. Zoom only changes the
viewport scale used for hit-testing; it never commits or touches the grid.
"""

import math
from dataclasses import replace
from typing import Optional

from ..config import MIN_SCALE, MAX_SCALE
from .actions import Action, CELL_CHANGE, SELECT_REGION, FILL_ALL
from .coords import CoordinateResolver, Viewport
from .recorder import ActionRecorder
from .types import Mode, PointerEvent, SelectionRect, POINTER_KINDS


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


class PinchZoom:
    """Two-finger zoom: scale = clamp(scale * d / d_prev, min, max)."""

    def __init__(self, min_scale: float = MIN_SCALE, max_scale: float = MAX_SCALE):
        self.min_scale = min_scale
        self.max_scale = max_scale
        self.scale = 1.0
        self._prev_distance: Optional[float] = None

    @property
    def active(self) -> bool:
        return self._prev_distance is not None

    def begin(self, distance: float) -> None:
        self._prev_distance = distance if distance > 0 else None

    def update(self, distance: float) -> float:
        if self._prev_distance is not None and distance > 0:
            self.scale = clamp(self.scale * (distance / self._prev_distance),
                               self.min_scale, self.max_scale)
            self._prev_distance = distance
        return self.scale

    def end(self) -> None:
        self._prev_distance = None


def finger_distance(ev: PointerEvent) -> float:
    if ev.x2 is None or ev.y2 is None:
        return 0.0
    return math.hypot(ev.x2 - ev.x, ev.y2 - ev.y)


class ModeController:
    """Pointer/gesture state machine feeding the ActionRecorder."""

    def __init__(self, recorder: ActionRecorder, resolver: CoordinateResolver,
                 viewport: Optional[Viewport] = None, zoom: Optional[PinchZoom] = None):
        self.recorder = recorder
        self.resolver = resolver
        self.viewport = viewport or Viewport()
        self.zoom = zoom or PinchZoom()
        self.mode = Mode.EDIT
        self.selection: Optional[SelectionRect] = None

    # -------------------------------------------------------------------------
    # Mode and viewport
    # -------------------------------------------------------------------------

    def set_mode(self, mode) -> None:
        """Switch mode; an in-progress drag selection is dropped without an Action."""
        self.mode = Mode(mode)
        self.selection = None

    def set_viewport(self, viewport: Viewport) -> None:
        self.viewport = replace(viewport, scale=self.zoom.scale)

    @property
    def scale(self) -> float:
        return self.zoom.scale

    @property
    def dragging(self) -> bool:
        return self.selection is not None

    def resolve(self, x: float, y: float):
        return self.resolver.resolve(x, y, self.recorder.store.shape, self.viewport)

    # -------------------------------------------------------------------------
    # Event dispatch
    # -------------------------------------------------------------------------

    def handle(self, ev: PointerEvent) -> Optional[Action]:
        """Feed one pointer event; returns the Action it committed, if any."""
        if ev.kind not in POINTER_KINDS:
            raise ValueError(f"Unknown pointer event kind: {ev.kind}")

        if ev.pointer_count >= 2 or self.zoom.active:
            self._handle_pinch(ev)
            return None

        if self.mode == Mode.SELECT:
            return self._handle_select(ev)

        if ev.kind != "start":
            return None
        cell = self.resolve(ev.x, ev.y)
        if cell is None:
            return None
        if self.mode == Mode.FILL:
            return self.recorder.commit(FILL_ALL, color=self.recorder.counters.selected_color)
        return self.click(*cell)

    def click(self, row: int, col: int) -> Optional[Action]:
        """
        Edit/Fill click on a cell (also used by keyboard/host-driven input).

        Select mode only commits on drag release, so a click there does nothing.
        """
        if self.mode == Mode.SELECT:
            return None
        if self.mode == Mode.FILL:
            return self.recorder.commit(FILL_ALL, color=self.recorder.counters.selected_color)
        return self.recorder.commit(CELL_CHANGE, row=row, col=col,
                                    color=self.recorder.counters.selected_color)

    def _handle_select(self, ev: PointerEvent) -> Optional[Action]:
        if ev.kind == "start":
            cell = self.resolve(ev.x, ev.y)
            self.selection = SelectionRect(cell, cell) if cell is not None else None
            return None
        if ev.kind == "move":
            if self.selection is not None:
                cell = self.resolve(ev.x, ev.y)
                if cell is not None:
                    self.selection.cursor = cell
            return None
        if ev.kind == "cancel":
            self.selection = None
            return None
        # end
        sel, self.selection = self.selection, None
        if sel is None:
            return None
        return self.recorder.commit(SELECT_REGION, rect=sel.normalized(),
                                    color=self.recorder.counters.selected_color)

    def _handle_pinch(self, ev: PointerEvent) -> None:
        # A second finger turns any drag into a zoom gesture
        self.selection = None
        if ev.kind in ("end", "cancel") or ev.pointer_count < 2:
            self.zoom.end()
            return
        d = finger_distance(ev)
        if ev.kind == "start" or not self.zoom.active:
            self.zoom.begin(d)
        else:
            self.zoom.update(d)
        self.viewport = replace(self.viewport, scale=self.zoom.scale)
