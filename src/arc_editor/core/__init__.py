"""ARC Editor - Core Grid Editing"""

from .types import (
    Grid, Cell, Mode, SelectionRect, PointerEvent, POINTER_KINDS,
    G, copy_grid, to_list, validate_grid, validate_color,
)
from .errors import (
    GridEditorError, InvalidGrid, InvalidDimensions, InvalidColor,
    LimitExceeded, InvalidTransition, MissingGroundTruth, ReplayMismatch,
)
from .grid_store import GridStore, equals, is_all_zero
from .coords import Viewport, CoordinateResolver, cell_size
from .actions import Action, ACTION_TYPES, PAYLOAD_KEYS, RECT_KEYS, rect_payload
from .limiter import SafetyLimiter, SessionPhase, LimiterSignal, WARNING, LIMIT_REACHED
from .recorder import (
    ActionRecorder, SessionCounters, PLANNERS, check_dimensions,
    COMMITTED, SUPPRESSED, REFUSED,
)
from .modes import ModeController, PinchZoom

__all__ = [
    # Types
    'Grid', 'Cell', 'Mode', 'SelectionRect', 'PointerEvent', 'POINTER_KINDS',
    'G', 'copy_grid', 'to_list', 'validate_grid', 'validate_color',
    # Errors
    'GridEditorError', 'InvalidGrid', 'InvalidDimensions', 'InvalidColor',
    'LimitExceeded', 'InvalidTransition', 'MissingGroundTruth', 'ReplayMismatch',
    # Store
    'GridStore', 'equals', 'is_all_zero',
    # Coordinates
    'Viewport', 'CoordinateResolver', 'cell_size',
    # Actions
    'Action', 'ACTION_TYPES', 'PAYLOAD_KEYS', 'RECT_KEYS', 'rect_payload',
    # Limiter
    'SafetyLimiter', 'SessionPhase', 'LimiterSignal', 'WARNING', 'LIMIT_REACHED',
    # Recorder
    'ActionRecorder', 'SessionCounters', 'PLANNERS', 'check_dimensions',
    'COMMITTED', 'SUPPRESSED', 'REFUSED',
    # Modes
    'ModeController', 'PinchZoom',
]
