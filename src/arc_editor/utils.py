"""
Utility functions for ARC Editor: action-log persistence and hashing.
"""

import json
import hashlib
from pathlib import Path
from datetime import datetime
from typing import Dict, Iterable, List, Union

from .core.actions import Action
from .core.types import to_list


def _as_dict(a: Union[Action, Dict]) -> Dict:
    return a.to_dict() if isinstance(a, Action) else dict(a)


# ==============================================================================
# Action log files
# ==============================================================================

def log_actions(actions: Iterable[Union[Action, Dict]], out_dir: str = None,
                filename: str = "actions.jsonl") -> Path:
    """
    Append action records to a JSONL file.

    Args:
        actions: Action objects or their dict form
        out_dir: Output directory (default: runs/YYYY-MM-DD)
        filename: Log file name inside out_dir

    Returns:
        Path of the log file
    """
    if out_dir is None:
        date_str = datetime.now().strftime("%Y-%m-%d")
        out_dir = f"runs/{date_str}"

    Path(out_dir).mkdir(parents=True, exist_ok=True)
    log_path = Path(out_dir) / filename

    with open(log_path, "a") as f:
        for a in actions:
            f.write(json.dumps(_as_dict(a), sort_keys=True) + "\n")

    return log_path


def read_action_log(path: Union[str, Path]) -> List[Dict]:
    """
    Read an action log written by log_actions (JSONL), or a JSON array.

    A JSON object with an "actionLog" key (a solving-process record) is
    also accepted.
    """
    text = Path(path).read_text()
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return [json.loads(line) for line in text.splitlines() if line.strip()]
    if isinstance(data, dict):
        data = data.get("actionLog", [data])
    return list(data)


# ==============================================================================
# Hashes
# ==============================================================================

def session_sha(input_grid, actions: Iterable[Union[Action, Dict]]) -> str:
    """
    SHA-256 of a session's input grid and action log.

    Timestamps are excluded so a replay of the same edits hashes the same.
    """
    log = []
    for a in actions:
        d = _as_dict(a)
        d.pop("timestamp", None)
        log.append(d)
    payload = {"input": to_list(input_grid), "actions": log}
    return hashlib.sha256(json.dumps(payload, sort_keys=True).encode()).hexdigest()
