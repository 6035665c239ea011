"""
ARC Editor - Interactive Grid Editing Core

Mode-aware grid editor with a replayable, redundancy-suppressed action log
for collecting human ARC solving traces.
"""

from .config import EditorConfig, responsive_display_size
from .core import (
    Grid, Mode, PointerEvent, SelectionRect, G, copy_grid, to_list,
    GridEditorError, InvalidGrid, InvalidDimensions, InvalidColor,
    LimitExceeded, InvalidTransition, MissingGroundTruth, ReplayMismatch,
    GridStore, equals, is_all_zero,
    Viewport, CoordinateResolver, cell_size,
    Action, ACTION_TYPES,
    SafetyLimiter, SessionPhase, LimiterSignal,
    ActionRecorder, SessionCounters,
    ModeController, PinchZoom,
)
from .session import EditingSession, parse_resize_request
from .tasks import ARCTask, load_task, load_tasks
from .replay import replay_actions, apply_action
from .palette import ARC_COLORS, COLOR_NAMES, color_hex, color_name, render_text
from .utils import log_actions, read_action_log, session_sha

__all__ = [
    # Config
    'EditorConfig', 'responsive_display_size',

    # Types
    'Grid', 'Mode', 'PointerEvent', 'SelectionRect', 'G', 'copy_grid', 'to_list',

    # Errors
    'GridEditorError', 'InvalidGrid', 'InvalidDimensions', 'InvalidColor',
    'LimitExceeded', 'InvalidTransition', 'MissingGroundTruth', 'ReplayMismatch',

    # Core components
    'GridStore', 'equals', 'is_all_zero',
    'Viewport', 'CoordinateResolver', 'cell_size',
    'Action', 'ACTION_TYPES',
    'SafetyLimiter', 'SessionPhase', 'LimiterSignal',
    'ActionRecorder', 'SessionCounters',
    'ModeController', 'PinchZoom',

    # Session
    'EditingSession', 'parse_resize_request',

    # Tasks
    'ARCTask', 'load_task', 'load_tasks',

    # Replay
    'replay_actions', 'apply_action',

    # Palette
    'ARC_COLORS', 'COLOR_NAMES', 'color_hex', 'color_name', 'render_text',

    # Utils
    'log_actions', 'read_action_log', 'session_sha',
]
