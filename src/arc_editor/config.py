"""
Editor configuration: grid bounds, action limits and display sizing.
"""

import math
from dataclasses import dataclass, asdict
from typing import Dict, Optional

# Grid bounds (ARC tasks are at most 30x30, colors 0-9)
MIN_GRID_DIM = 1
MAX_GRID_DIM = 30
NUM_COLORS = 10

# Safety limits
DEFAULT_ACTION_LIMIT = 1000
WARNING_FRACTION = 0.9

# Display sizing (pixels)
DEFAULT_MIN_CELL_SIZE_PX = 6
DEFAULT_MAX_DISPLAY_SIZE_PX = 480
VIEWPORT_WIDTH_FRACTION = 0.9
VIEWPORT_HEIGHT_FRACTION = 0.6

# Pinch-zoom clamp
MIN_SCALE = 0.5
MAX_SCALE = 3.0

DEFAULT_COLOR = 1


@dataclass
class EditorConfig:
    """Settings the host passes to an editing session."""
    action_limit: int = DEFAULT_ACTION_LIMIT
    warning_threshold: Optional[int] = None     # None: 90% of action_limit
    min_cell_size_px: int = DEFAULT_MIN_CELL_SIZE_PX
    max_display_size_px: int = DEFAULT_MAX_DISPLAY_SIZE_PX
    min_scale: float = MIN_SCALE
    max_scale: float = MAX_SCALE
    default_color: int = DEFAULT_COLOR

    def __post_init__(self):
        if self.warning_threshold is None:
            self.warning_threshold = default_warning_threshold(self.action_limit)

    def validate(self) -> "EditorConfig":
        """Raise ValueError on inconsistent settings; return self."""
        if self.action_limit < 1:
            raise ValueError(f"action_limit must be positive, got {self.action_limit}")
        if not (1 <= self.warning_threshold <= self.action_limit):
            raise ValueError(
                f"warning_threshold must be in 1..{self.action_limit}, got {self.warning_threshold}"
            )
        if self.min_cell_size_px < 1 or self.max_display_size_px < 1:
            raise ValueError("cell and display sizes must be positive")
        if not (0 < self.min_scale <= 1.0 <= self.max_scale):
            raise ValueError(f"invalid zoom range [{self.min_scale}, {self.max_scale}]")
        if not (0 <= self.default_color < NUM_COLORS):
            raise ValueError(f"default_color must be 0-{NUM_COLORS - 1}, got {self.default_color}")
        return self

    def to_dict(self) -> Dict:
        return asdict(self)


def default_warning_threshold(action_limit: int) -> int:
    """Warning point for a given limit: 90% of it, at least 1."""
    return max(1, int(round(action_limit * WARNING_FRACTION)))


def responsive_display_size(viewport_w: float, viewport_h: float,
                            cap: int = DEFAULT_MAX_DISPLAY_SIZE_PX) -> int:
    """
    Derive maxDisplaySizePx from the available viewport.

    The grid may use 90% of the width and 60% of the height, never more
    than `cap` and never less than 1 px.
    """
    avail = min(viewport_w * VIEWPORT_WIDTH_FRACTION, viewport_h * VIEWPORT_HEIGHT_FRACTION)
    return max(1, min(cap, int(math.floor(avail))))
