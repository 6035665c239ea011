#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ARC Editor - Safety Limiter
============================

Caps the number of committed actions per session.

Session lifecycle:

    NotStarted -> Active -> LimitReached -> Closed
                       \\_____________________/

- Active is entered when the first grid is loaded
- LimitReached is entered exactly once, when actionCount hits the limit
- Closed when the host finalizes; no transition skips Active

A one-time `warning` signal fires at the warning threshold and a one-time
`limit_reached` signal at the limit. Neither touches the grid.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..config import DEFAULT_ACTION_LIMIT, default_warning_threshold
from .errors import LimitExceeded, InvalidTransition

WARNING = "warning"
LIMIT_REACHED = "limit_reached"


class SessionPhase(str, Enum):
    NOT_STARTED = "not_started"
    ACTIVE = "active"
    LIMIT_REACHED = "limit_reached"
    CLOSED = "closed"


@dataclass(frozen=True)
class LimiterSignal:
    """Notification to the host. kind is `warning` or `limit_reached`."""
    kind: str
    action_count: int
    limit: int

    @property
    def force_transition(self) -> bool:
        """Host must move past the solving phase."""
        return self.kind == LIMIT_REACHED

    def to_dict(self):
        return {"type": self.kind, "actionCount": self.action_count, "limit": self.limit}


SignalCallback = Callable[[LimiterSignal], None]


class SafetyLimiter:
    """Observes actionCount after each commit and owns the session phase."""

    def __init__(self, limit: int = DEFAULT_ACTION_LIMIT,
                 warning_threshold: Optional[int] = None):
        if warning_threshold is None:
            warning_threshold = default_warning_threshold(limit)
        if limit < 1 or not (1 <= warning_threshold <= limit):
            raise ValueError(f"invalid limits: warning={warning_threshold}, limit={limit}")
        self.limit = limit
        self.warning_threshold = warning_threshold
        self.phase = SessionPhase.NOT_STARTED
        self.warned = False
        self.signals: List[LimiterSignal] = []
        self._callbacks: List[SignalCallback] = []

    def on_signal(self, callback: SignalCallback) -> None:
        self._callbacks.append(callback)

    def _emit(self, signal: LimiterSignal) -> None:
        self.signals.append(signal)
        for cb in self._callbacks:
            cb(signal)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def activate(self) -> None:
        if self.phase != SessionPhase.NOT_STARTED:
            raise InvalidTransition(f"cannot start a session in phase {self.phase.value}")
        self.phase = SessionPhase.ACTIVE

    def close(self) -> None:
        if self.phase == SessionPhase.NOT_STARTED:
            raise InvalidTransition("cannot close a session that was never started")
        self.phase = SessionPhase.CLOSED

    # -------------------------------------------------------------------------
    # Commit gate
    # -------------------------------------------------------------------------

    def ensure_can_commit(self) -> None:
        """Raise LimitExceeded once the limit is reached; InvalidTransition outside Active."""
        if self.phase == SessionPhase.LIMIT_REACHED:
            raise LimitExceeded(f"action limit of {self.limit} reached")
        if self.phase != SessionPhase.ACTIVE:
            raise InvalidTransition(f"no commits allowed in phase {self.phase.value}")

    def observe(self, action_count: int) -> None:
        """Called after every committed action."""
        if not self.warned and action_count >= self.warning_threshold:
            self.warned = True
            self._emit(LimiterSignal(WARNING, action_count, self.limit))
        if action_count >= self.limit and self.phase == SessionPhase.ACTIVE:
            self.phase = SessionPhase.LIMIT_REACHED
            self._emit(LimiterSignal(LIMIT_REACHED, action_count, self.limit))

