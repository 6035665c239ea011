#!/usr/bin/env python3
"""
Validate an action log against the Action record schema.

This script ensures:
1. Every record has sequenceNumber, type and timestamp
2. Types are known and carry their required payload keys
3. Sequence numbers run 1..n with no gaps
4. Timestamps never go backwards
5. Colors are 0-9, resize dimensions 1-30

Usage:
    python scripts/validate_action_log.py runs/2026-10-18/actions.jsonl
"""

import sys
import argparse
from pathlib import Path
from typing import Dict, List

# Add src to path if not already there
src_path = str(Path(__file__).parent.parent / 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from arc_editor.config import MIN_GRID_DIM, MAX_GRID_DIM, NUM_COLORS
from arc_editor.core.actions import ACTION_TYPES, PAYLOAD_KEYS, RECT_KEYS
from arc_editor.utils import read_action_log


def _is_int(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def validate_record(d: Dict, idx: int) -> bool:
    """
    Validate a single action record.

    Returns:
        True if valid, raises ValueError otherwise
    """
    if not isinstance(d, dict):
        raise ValueError(f"record {idx}: must be an object, got {type(d).__name__}")

    for key in ("sequenceNumber", "type", "timestamp"):
        if key not in d:
            raise ValueError(f"record {idx}: missing {key}")
    if not _is_int(d["timestamp"]):
        raise ValueError(f"record {idx}: timestamp must be int millis, got {d['timestamp']!r}")

    t = d["type"]
    if t not in ACTION_TYPES:
        raise ValueError(f"record {idx}: unknown type {t!r}")

    for key in PAYLOAD_KEYS[t]:
        if key not in d:
            raise ValueError(f"record {idx} ({t}): missing payload key {key}")

    for key in ("color", "oldValue", "newValue"):
        if key in d and not (_is_int(d[key]) and 0 <= d[key] < NUM_COLORS):
            raise ValueError(f"record {idx} ({t}): {key} must be 0-{NUM_COLORS - 1}, got {d[key]!r}")

    if t == "resize":
        for key in ("newRows", "newCols"):
            if not (_is_int(d[key]) and MIN_GRID_DIM <= d[key] <= MAX_GRID_DIM):
                raise ValueError(f"record {idx}: {key} must be {MIN_GRID_DIM}-{MAX_GRID_DIM}, got {d[key]!r}")

    if t == "select_region":
        rect = d["rect"]
        if not isinstance(rect, dict) or any(k not in rect for k in RECT_KEYS):
            raise ValueError(f"record {idx}: rect must have {', '.join(RECT_KEYS)}")
        if rect["minRow"] > rect["maxRow"] or rect["minCol"] > rect["maxCol"]:
            raise ValueError(f"record {idx}: rect is not normalized: {rect}")

    return True


def validate_log(records: List[Dict], verbose: bool = True) -> bool:
    """Validate a whole log. Raises ValueError on the first problem."""
    last_ts = None
    for idx, d in enumerate(records, 1):
        validate_record(d, idx)
        if d["sequenceNumber"] != idx:
            raise ValueError(f"record {idx}: sequenceNumber {d['sequenceNumber']}, expected {idx}")
        if last_ts is not None and d["timestamp"] < last_ts:
            raise ValueError(f"record {idx}: timestamp went backwards ({d['timestamp']} < {last_ts})")
        last_ts = d["timestamp"]

    if verbose:
        print(f"✓ Validated {len(records)} actions")
    return True


def main():
    parser = argparse.ArgumentParser(description="Validate an ARC editor action log")
    parser.add_argument("log_path", type=str, help="Action log (JSONL or JSON array)")
    parser.add_argument("--quiet", action="store_true", help="Suppress validation messages")

    args = parser.parse_args()

    if not Path(args.log_path).exists():
        print(f"ERROR: File not found: {args.log_path}", file=sys.stderr)
        sys.exit(1)

    try:
        validate_log(read_action_log(args.log_path), verbose=not args.quiet)
        sys.exit(0)
    except ValueError as e:
        print(f"VALIDATION FAILED: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
