"""
Editing session: one participant, one task grid.

Wires GridStore, ModeController, CoordinateResolver, ActionRecorder and
SafetyLimiter together and exposes the toolbar operations (reset, copy from
input, resize, fill, test solution) plus pointer input to the host.
"""

import re
from typing import Callable, Dict, List, Optional, Tuple

from .config import EditorConfig
from .core import actions as A
from .core.actions import Action
from .core.coords import CoordinateResolver, Viewport
from .core.errors import InvalidDimensions, MissingGroundTruth
from .core.grid_store import GridStore
from .core.limiter import SafetyLimiter, SessionPhase, LimiterSignal
from .core.modes import ModeController, PinchZoom
from .core.recorder import ActionRecorder, SessionCounters, check_dimensions, now_ms
from .core.types import Grid, Mode, PointerEvent, copy_grid, to_list, validate_color, validate_grid

_RESIZE_RE = re.compile(r"^\s*(\d+)\s*[x×]\s*(\d+)\s*$", re.IGNORECASE)


def parse_resize_request(text: str) -> Tuple[int, int]:
    """
    Parse "<rows>x<cols>" (also "×", any case, optional spaces).

    Raises:
        InvalidDimensions: malformed text or dimensions outside 1..30.
            str(e) is suitable to show the participant.
    """
    m = _RESIZE_RE.match(text or "")
    if not m:
        raise InvalidDimensions('Invalid format. Please use format like "5x5" or "10x8"')
    return check_dimensions(int(m.group(1)), int(m.group(2)))


class EditingSession:
    """
    State of one editing session (SessionState), owned by the host.

    Loading the grid starts the session: it is Active as soon as it is
    constructed, and durationSeconds counts from then.

    Example:
        >>> s = EditingSession([[0, 0], [0, 0]])
        >>> s.click_cell(0, 0).to_dict()["newValue"]
        1
    """

    def __init__(self, input_grid, ground_truth=None,
                 config: Optional[EditorConfig] = None,
                 clock: Callable[[], int] = now_ms):
        self.config = (config or EditorConfig()).validate()
        self.input_grid: Grid = validate_grid(input_grid)
        self.ground_truth: Optional[Grid] = (
            validate_grid(ground_truth) if ground_truth is not None else None
        )
        self.clock = clock

        self.store = GridStore(self.input_grid)
        self.counters = SessionCounters(selected_color=self.config.default_color)
        self.limiter = SafetyLimiter(self.config.action_limit, self.config.warning_threshold)
        self.recorder = ActionRecorder(self.store, self.limiter, self.counters, clock)
        self.resolver = CoordinateResolver(self.config.min_cell_size_px,
                                           self.config.max_display_size_px)
        self.modes = ModeController(self.recorder, self.resolver,
                                    zoom=PinchZoom(self.config.min_scale, self.config.max_scale))

        self.actions: List[Action] = []
        self.is_correct: Optional[bool] = None
        self._grid_listeners: List[Callable[[Grid], None]] = []
        self.recorder.on_action(self._record)

        self.limiter.activate()
        self.started_at: int = self.clock()

    # -------------------------------------------------------------------------
    # Host subscriptions
    # -------------------------------------------------------------------------

    def on_action(self, callback: Callable[[Action], None]) -> None:
        self.recorder.on_action(callback)

    def on_grid_change(self, callback: Callable[[Grid], None]) -> None:
        self._grid_listeners.append(callback)

    def on_signal(self, callback: Callable[[LimiterSignal], None]) -> None:
        self.limiter.on_signal(callback)

    def _record(self, action: Action) -> None:
        self.actions.append(action)
        if action.type == A.TEST_SOLUTION:
            self.is_correct = action.payload["isCorrect"]
            return
        grid = self.store.get()
        for cb in self._grid_listeners:
            cb(grid)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Finalize the session (host moved past the solving phase)."""
        self.limiter.close()

    @property
    def phase(self) -> SessionPhase:
        return self.limiter.phase

    @property
    def grid(self) -> Grid:
        return self.store.get()

    @property
    def action_count(self) -> int:
        return self.counters.action_count

    @property
    def last_outcome(self) -> Optional[str]:
        return self.recorder.last_outcome

    # -------------------------------------------------------------------------
    # Color and mode
    # -------------------------------------------------------------------------

    @property
    def selected_color(self) -> int:
        return self.counters.selected_color

    def select_color(self, color: int) -> None:
        self.counters.selected_color = validate_color(color)

    @property
    def mode(self) -> Mode:
        return self.modes.mode

    def set_mode(self, mode) -> None:
        self.modes.set_mode(mode)

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def set_viewport(self, origin_x: float, origin_y: float) -> None:
        self.modes.set_viewport(Viewport(origin_x, origin_y))

    def cell_size(self) -> float:
        """Current rendered cell size, recomputed from shape and zoom."""
        return self.resolver.cell_size(self.store.shape, self.modes.scale)

    def handle_pointer(self, event: PointerEvent) -> Optional[Action]:
        return self.modes.handle(event)

    def click_cell(self, row: int, col: int) -> Optional[Action]:
        return self.modes.click(row, col)

    def select_region(self, anchor, cursor) -> Optional[Action]:
        """Programmatic drag-select from anchor to cursor (both (row, col))."""
        (r0, c0), (r1, c1) = anchor, cursor
        rect = (min(r0, r1), max(r0, r1), min(c0, c1), max(c0, c1))
        return self.recorder.commit(A.SELECT_REGION, rect=rect, color=self.selected_color)

    # -------------------------------------------------------------------------
    # Toolbar
    # -------------------------------------------------------------------------

    def fill_all(self) -> Optional[Action]:
        return self.recorder.commit(A.FILL_ALL, color=self.selected_color)

    def reset(self) -> Optional[Action]:
        return self.recorder.commit(A.RESET)

    def copy_from_input(self) -> Optional[Action]:
        return self.recorder.commit(A.COPY_FROM_INPUT, input_grid=self.input_grid)

    def resize(self, rows: int, cols: int) -> Optional[Action]:
        return self.recorder.commit(A.RESIZE, rows=rows, cols=cols)

    def resize_from_text(self, text: str) -> Optional[Action]:
        rows, cols = parse_resize_request(text)
        return self.resize(rows, cols)

    def test_solution(self) -> Optional[Action]:
        """Compare the grid with the ground truth and log the verdict."""
        if self.ground_truth is None:
            raise MissingGroundTruth("No test output available for this task")
        return self.recorder.commit(A.TEST_SOLUTION, expected=self.ground_truth)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    @property
    def action_log(self) -> List[Dict]:
        return [a.to_dict() for a in self.actions]

    def solving_process(self, now: Optional[int] = None) -> Dict:
        """Phase-2 record the host submits with the questionnaire answers."""
        now = self.clock() if now is None else now
        duration = max(0, (now - self.started_at) // 1000)
        return {
            "actionLog": self.action_log,
            "solutionGrid": to_list(self.store.get()),
            "durationSeconds": int(duration),
            "isCorrect": self.is_correct,
        }

    def snapshot(self) -> Grid:
        """Writable copy of the current grid."""
        return copy_grid(self.store.get())
