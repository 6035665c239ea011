"""Shared fixtures-by-hand for the editor tests."""

from arc_editor.core.grid_store import GridStore
from arc_editor.core.limiter import SafetyLimiter
from arc_editor.core.recorder import ActionRecorder, SessionCounters


class FakeClock:
    """Deterministic epoch-millis clock advancing by `step` per call."""

    def __init__(self, start: int = 1_700_000_000_000, step: int = 10):
        self.t = start
        self.step = step

    def __call__(self) -> int:
        self.t += self.step
        return self.t


def make_recorder(grid, limit=1000, warning=900, color=1):
    store = GridStore(grid)
    limiter = SafetyLimiter(limit, warning)
    limiter.activate()
    rec = ActionRecorder(store, limiter, SessionCounters(selected_color=color), FakeClock())
    return rec
