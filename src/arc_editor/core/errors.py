#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ARC Editor - Errors
====================

All editor failures are local and recoverable: the offending operation is
rejected before any mutation and the session carries on.
"""


class GridEditorError(Exception):
    """Base class for grid editor errors."""


class InvalidGrid(GridEditorError, ValueError):
    """Malformed, ragged or out-of-bounds grid."""


class InvalidDimensions(GridEditorError, ValueError):
    """Resize request outside 1..30 or unparseable. str(e) is user-facing."""


class InvalidColor(GridEditorError, ValueError):
    """Paint color outside the 0-9 palette."""


class LimitExceeded(GridEditorError):
    """Commit attempted after the session's action limit was reached."""


class InvalidTransition(GridEditorError):
    """Session lifecycle step that would skip or repeat a state."""


class MissingGroundTruth(GridEditorError):
    """Solution check requested for a task without a test output."""


class ReplayMismatch(GridEditorError):
    """Recorded action log does not agree with the replayed grid."""
