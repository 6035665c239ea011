#!/usr/bin/env python3
"""
Replay a recorded action log against an ARC task and show the final grid.

The log is re-applied to the task's test input; every cell_change must
find the value it recorded. With a ground-truth output in the task file
the replayed grid is also checked for correctness.

Usage:
    python scripts/replay_action_log.py data/training/007bbfb7.json runs/2026-10-18/actions.jsonl
    python scripts/replay_action_log.py task.json log.json --test-index=1 --expect-correct
"""

import sys
import argparse
from pathlib import Path

# Add src to path if not already there
src_path = str(Path(__file__).parent.parent / 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from arc_editor import (
    load_task, read_action_log, replay_actions, render_text,
    equals, session_sha, GridEditorError
)


def replay_file(task_path: str, log_path: str, test_index: int = 0, verbose: bool = True):
    """
    Replay log_path against test case test_index of task_path.

    Returns:
        (final_grid, is_correct) where is_correct is None without ground truth
    """
    task = load_task(task_path)
    input_grid, expected = task.test_pair(test_index)
    actions = read_action_log(log_path)

    final = replay_actions(input_grid, actions)
    is_correct = None if expected is None else equals(final, expected)

    if verbose:
        print("=" * 70)
        print(f"Task: {task.task_id} (test #{test_index})")
        print(f"Actions: {len(actions)}")
        print(f"Session SHA: {session_sha(input_grid, actions)}")
        print("=" * 70)
        print("Input:")
        print(render_text(input_grid))
        print(f"\nFinal ({final.shape[0]}x{final.shape[1]}):")
        print(render_text(final))
        if is_correct is not None:
            print(f"\n{'✓ Correct' if is_correct else '✗ Incorrect'}")

    return final, is_correct


def main():
    parser = argparse.ArgumentParser(description="Replay an ARC editor action log")
    parser.add_argument("task_path", type=str, help="ARC task JSON file")
    parser.add_argument("log_path", type=str, help="Action log (JSONL or JSON array)")
    parser.add_argument("--test-index", type=int, default=0, help="Test case index")
    parser.add_argument("--expect-correct", action="store_true",
                        help="Exit non-zero unless the replayed grid matches the ground truth")
    parser.add_argument("--quiet", action="store_true", help="Suppress output")

    args = parser.parse_args()

    for p in (args.task_path, args.log_path):
        if not Path(p).exists():
            print(f"ERROR: File not found: {p}", file=sys.stderr)
            sys.exit(1)

    try:
        _, is_correct = replay_file(args.task_path, args.log_path,
                                    args.test_index, verbose=not args.quiet)
    except GridEditorError as e:
        print(f"REPLAY FAILED: {e}", file=sys.stderr)
        sys.exit(1)
    except (KeyError, IndexError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.expect_correct and not is_correct:
        sys.exit(2)
    sys.exit(0)


if __name__ == "__main__":
    main()
