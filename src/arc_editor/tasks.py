"""
ARC task source: supplies the input grid and, when known, the ground truth.
"""

import json
from pathlib import Path
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .core.types import Grid, validate_grid


@dataclass
class ARCTask:
    """ARC task with train pairs and test inputs (test outputs may be unknown)."""
    task_id: str
    train: List[Tuple[Grid, Grid]]
    test_in: List[Grid]
    test_out: List[Grid]

    def test_pair(self, i: int = 0) -> Tuple[Grid, Optional[Grid]]:
        """(input, ground truth or None) for test case i."""
        expected = self.test_out[i] if i < len(self.test_out) else None
        return self.test_in[i], expected

    @classmethod
    def from_json(cls, task_id: str, data: Dict, solutions: Optional[List] = None) -> "ARCTask":
        train = [(validate_grid(p["input"]), validate_grid(p["output"])) for p in data["train"]]
        test_in = [validate_grid(p["input"]) for p in data["test"]]
        if solutions is not None:
            test_out = [validate_grid(g) for g in solutions]
        else:
            test_out = [validate_grid(p["output"]) for p in data["test"] if "output" in p]
        return cls(task_id, train, test_in, test_out)


def load_task(path) -> ARCTask:
    """Load a single-task file (data/training/<id>.json layout)."""
    path = Path(path)
    with open(path) as f:
        data = json.load(f)
    return ARCTask.from_json(path.stem, data)


def load_tasks(challenges_path, solutions_path=None) -> Dict[str, ARCTask]:
    """Load a Kaggle-style challenges file, optionally with its solutions file."""
    with open(challenges_path) as f:
        challenges = json.load(f)
    solutions = {}
    if solutions_path is not None:
        with open(solutions_path) as f:
            solutions = json.load(f)
    return {
        task_id: ARCTask.from_json(task_id, data, solutions.get(task_id))
        for task_id, data in challenges.items()
    }
