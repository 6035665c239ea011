#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ARC Editor - Action Records
============================

An Action is the immutable receipt of one committed state change:

    {sequenceNumber, type, timestamp, ...type-specific payload}

Payload keys use the wire (camelCase) names so that to_dict() is exactly
what the host appends to its log and submits.
"""

from types import MappingProxyType
from dataclasses import dataclass, field
from typing import Dict, Mapping, Tuple

# =============================================================================
# Action Types
# =============================================================================

CELL_CHANGE = "cell_change"
SELECT_REGION = "select_region"
FILL_ALL = "fill_all"
RESET = "reset"
COPY_FROM_INPUT = "copy_from_input"
RESIZE = "resize"
TEST_SOLUTION = "test_solution"

ACTION_TYPES: Tuple[str, ...] = (
    CELL_CHANGE, SELECT_REGION, FILL_ALL, RESET,
    COPY_FROM_INPUT, RESIZE, TEST_SOLUTION,
)

# Payload keys each action type must carry
PAYLOAD_KEYS: Dict[str, Tuple[str, ...]] = {
    CELL_CHANGE: ("row", "col", "oldValue", "newValue"),
    SELECT_REGION: ("rect", "color", "cellsAffected"),
    FILL_ALL: ("color",),
    RESET: (),
    COPY_FROM_INPUT: (),
    RESIZE: ("newRows", "newCols"),
    TEST_SOLUTION: ("isCorrect",),
}

RECT_KEYS = ("minRow", "maxRow", "minCol", "maxCol")

# =============================================================================
# Action Dataclass
# =============================================================================

@dataclass(frozen=True)
class Action:
    """One committed edit. Never mutated after creation."""
    sequence_number: int
    type: str
    timestamp: int                 # epoch millis
    payload: Mapping = field(default_factory=dict)

    def __post_init__(self):
        # Read-only payload, nested mappings included
        frozen = {k: MappingProxyType(dict(v)) if isinstance(v, Mapping) else v
                  for k, v in self.payload.items()}
        object.__setattr__(self, "payload", MappingProxyType(frozen))

    def to_dict(self) -> Dict:
        """JSON-serializable form."""
        out = {
            "sequenceNumber": self.sequence_number,
            "type": self.type,
            "timestamp": self.timestamp,
        }
        for k, v in self.payload.items():
            out[k] = dict(v) if isinstance(v, Mapping) else v
        return out

    @classmethod
    def from_dict(cls, d: Dict) -> "Action":
        payload = {k: v for k, v in d.items()
                   if k not in ("sequenceNumber", "type", "timestamp")}
        return cls(int(d["sequenceNumber"]), d["type"], int(d["timestamp"]), payload)


def rect_payload(rect: Tuple[int, int, int, int]) -> Dict[str, int]:
    """(min_row, max_row, min_col, max_col) -> wire dict."""
    return {k: int(v) for k, v in zip(RECT_KEYS, rect)}
