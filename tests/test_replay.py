"""
Tests for action-log replay, JSONL logging, task loading and the palette.
"""

import json
import os
import sys

import pytest

from arc_editor import (
    EditingSession, G, to_list, replay_actions, ReplayMismatch,
    log_actions, read_action_log, session_sha,
    load_task, load_tasks, color_hex, color_name, render_text, ARC_COLORS,
)

from helpers import FakeClock

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'scripts'))
from validate_action_log import validate_log  # noqa: E402


def recorded_session():
    s = EditingSession([[1, 2], [3, 4]], clock=FakeClock())
    s.select_color(5)
    s.click_cell(0, 0)
    s.resize(3, 3)
    s.select_region((1, 1), (2, 2))
    s.reset()
    s.copy_from_input()
    s.select_color(6)
    s.fill_all()
    return s


# ==============================================================================
# Replay
# ==============================================================================

def test_replay_reproduces_final_grid():
    s = recorded_session()
    final = replay_actions(s.input_grid, s.actions)
    assert to_list(final) == to_list(s.grid) == [[6, 6], [6, 6]]


def test_replay_intermediate_state():
    s = recorded_session()
    final = replay_actions(s.input_grid, s.action_log[:3])
    assert to_list(final) == [[5, 2, 0], [3, 5, 5], [0, 5, 5]]


def test_replay_detects_gap():
    log = recorded_session().action_log
    del log[1]
    with pytest.raises(ReplayMismatch):
        replay_actions([[1, 2], [3, 4]], log)


def test_replay_detects_stale_old_value():
    log = recorded_session().action_log
    with pytest.raises(ReplayMismatch):
        replay_actions([[9, 2], [3, 4]], log)


def test_replay_detects_final_mismatch():
    s = recorded_session()
    with pytest.raises(ReplayMismatch):
        replay_actions(s.input_grid, s.actions, expected_final=G([[0]]))


def test_replay_unknown_type():
    with pytest.raises(ReplayMismatch):
        replay_actions([[0]], [{"sequenceNumber": 1, "type": "lasso", "timestamp": 1}])


def test_replay_rejects_region_outside_grid():
    log = [{"sequenceNumber": 1, "type": "select_region", "timestamp": 1,
            "rect": {"minRow": 5, "maxRow": 7, "minCol": 5, "maxCol": 7},
            "color": 3, "cellsAffected": 9}]
    with pytest.raises(ReplayMismatch):
        replay_actions([[0, 0], [0, 0]], log)


@pytest.mark.parametrize("kind,extra", [
    ("fill_all", {}),
    ("select_region", {"rect": {"minRow": 0, "maxRow": 0, "minCol": 0, "maxCol": 0},
                       "cellsAffected": 1}),
])
def test_replay_rejects_color_out_of_range(kind, extra):
    log = [dict({"sequenceNumber": 1, "type": kind, "timestamp": 1, "color": 42}, **extra)]
    with pytest.raises(ReplayMismatch):
        replay_actions([[0, 0], [0, 0]], log)


@pytest.mark.parametrize("rows,cols", [(0, 0), (31, 31), (2.5, 2)])
def test_replay_rejects_resize_out_of_range(rows, cols):
    log = [{"sequenceNumber": 1, "type": "resize", "timestamp": 1,
            "newRows": rows, "newCols": cols}]
    with pytest.raises(ReplayMismatch):
        replay_actions([[1]], log)


# ==============================================================================
# Logging
# ==============================================================================

def test_log_and_read_back_jsonl(tmp_path):
    s = recorded_session()
    path = log_actions(s.actions, out_dir=str(tmp_path))
    assert path.name == "actions.jsonl"
    lines = path.read_text().splitlines()
    assert len(lines) == len(s.actions)
    assert json.loads(lines[0])["type"] == "cell_change"
    assert read_action_log(path) == s.action_log


def test_log_appends(tmp_path):
    s = recorded_session()
    log_actions(s.actions[:2], out_dir=str(tmp_path))
    path = log_actions(s.actions[2:], out_dir=str(tmp_path))
    assert read_action_log(path) == s.action_log


def test_read_json_array_and_solving_record(tmp_path):
    s = recorded_session()
    p1 = tmp_path / "log.json"
    p1.write_text(json.dumps(s.action_log))
    assert read_action_log(p1) == s.action_log
    p2 = tmp_path / "phase2.json"
    p2.write_text(json.dumps(s.solving_process()))
    assert read_action_log(p2) == s.action_log


def test_session_sha_ignores_timestamps():
    a = recorded_session()
    b = EditingSession([[1, 2], [3, 4]], clock=FakeClock(start=5, step=77))
    b.select_color(5)
    b.click_cell(0, 0)
    sha_a = session_sha(a.input_grid, a.actions[:1])
    sha_b = session_sha(b.input_grid, b.actions)
    assert sha_a == sha_b
    assert sha_a != session_sha(a.input_grid, a.actions)
    assert len(sha_a) == 64


def test_validate_log_script():
    log = recorded_session().action_log
    assert validate_log(log, verbose=False)
    bad = [dict(d) for d in log]
    bad[0]["sequenceNumber"] = 2
    with pytest.raises(ValueError):
        validate_log(bad, verbose=False)
    bad = [dict(d) for d in log]
    del bad[1]["newRows"]
    with pytest.raises(ValueError):
        validate_log(bad, verbose=False)


# ==============================================================================
# Tasks and palette
# ==============================================================================

TASK = {
    "train": [{"input": [[0, 1]], "output": [[1, 0]]}],
    "test": [{"input": [[0, 0], [1, 1]], "output": [[1, 1], [0, 0]]}],
}


def test_load_task(tmp_path):
    p = tmp_path / "abc123.json"
    p.write_text(json.dumps(TASK))
    task = load_task(p)
    assert task.task_id == "abc123"
    inp, expected = task.test_pair(0)
    assert to_list(inp) == [[0, 0], [1, 1]]
    assert to_list(expected) == [[1, 1], [0, 0]]

    s = EditingSession(inp, ground_truth=expected, clock=FakeClock())
    assert s.test_solution().payload["isCorrect"] is False


def test_load_tasks_with_solutions(tmp_path):
    challenges = {"t1": {"train": TASK["train"], "test": [{"input": [[3]]}]}}
    solutions = {"t1": [[[4]]]}
    cp, sp = tmp_path / "c.json", tmp_path / "s.json"
    cp.write_text(json.dumps(challenges))
    sp.write_text(json.dumps(solutions))

    tasks = load_tasks(cp, sp)
    assert to_list(tasks["t1"].test_pair(0)[1]) == [[4]]
    assert load_tasks(cp)["t1"].test_pair(0)[1] is None


def test_palette():
    assert len(ARC_COLORS) == 10
    assert color_hex(1) == "#0074D9"
    assert color_name(9) == "Maroon"
    assert color_hex(42) == "#CCCCCC"
    assert render_text(G([[0, 1], [2, 0]])) == ". 1\n2 ."
