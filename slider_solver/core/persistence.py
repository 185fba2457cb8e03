"""
Helpers for loading puzzle sets and saving / loading solved searches.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import yaml

from ..puzzles.sliding_blocks.board import parse_board
from ..puzzles.sliding_blocks.examples import Puzzle
from .solver import Solution, SolveResult


def load_puzzle_set(path: str | Path) -> List[Puzzle]:
    """
    Read a YAML file of the form::

        puzzles:
          - name: medium
            expected_cost: 81
            source: |
              ######
              ...
            target: |
              ...
    """
    with Path(path).open() as fh:
        config = yaml.safe_load(fh) or {}
    entries = config.get("puzzles")
    if not isinstance(entries, list):
        raise ValueError(f"{path}: expected a 'puzzles' list")

    puzzles: List[Puzzle] = []
    for idx, entry in enumerate(entries):
        name = str(entry.get("name", f"puzzle_{idx}"))
        if "source" not in entry or "target" not in entry:
            raise ValueError(f"{path}: puzzle {name!r} needs both 'source' and 'target'")
        expected = entry.get("expected_cost")
        puzzles.append(
            Puzzle(
                name=name,
                source=entry["source"],
                target=entry["target"],
                expected_cost=int(expected) if expected is not None else None,
            )
        )
    return puzzles


class SolutionStore:
    """
    Very thin wrapper around JSON until we need something fancier.
    Boards are stored as lists of text rows.
    """

    def __init__(self, root_dir: str | Path):
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

    # ---------------- Solutions ---------------- #

    def save_solution(self, name: str, result: SolveResult) -> Path:
        solution = result.solution
        data: Dict[str, Any] = {
            "visited": result.visited,
            "generated": result.generated,
            "cost": solution.cost if solution is not None else None,
            "path": [board.rows() for board in solution.path] if solution is not None else None,
        }
        return self.save_json(data, name)

    def load_solution(self, name: str) -> SolveResult:
        data = self.load_json(name)
        solution = None
        if data.get("path") is not None:
            path = [parse_board("\n".join(rows)) for rows in data["path"]]
            solution = Solution(path, int(data["cost"]))
        return SolveResult(int(data["visited"]), int(data["generated"]), solution)

    # ---------------- Misc ---------------- #

    def save_json(self, data: Dict[str, Any], name: str) -> Path:
        path = self.root_dir / f"{name}.json"
        with path.open("w") as fh:
            json.dump(data, fh, indent=2)
        return path

    def load_json(self, name: str) -> Dict[str, Any]:
        path = self.root_dir / f"{name}.json"
        with path.open() as fh:
            return json.load(fh)
