from __future__ import annotations

from functools import lru_cache

import numpy as np

from .board import Board, SPACE, is_fungible, is_unique

# Per-byte lookup tables
_UNIQUE = np.array([is_unique(v) for v in range(256)])
_FUNGIBLE = np.array([is_fungible(v) for v in range(256)])


class TargetPattern:
    """Pre-computed view of a target board.

    Blank target cells are wildcards; only the remaining cells are compared.
    """

    def __init__(self, target: Board):
        self.target = target
        flat = np.frombuffer(target.cells, dtype=np.uint8)
        self.indices = np.flatnonzero(flat != SPACE)
        self.expected = flat[self.indices]
        self.expected_fungible = _FUNGIBLE[self.expected]

    def _actual(self, state: Board) -> np.ndarray:
        return np.frombuffer(state.cells, dtype=np.uint8)[self.indices]

    def matches(self, state: Board) -> bool:
        return bool(np.array_equal(self._actual(state), self.expected))

    def out_of_place(self, state: Board) -> int:
        """Distinct misplaced unique pieces, plus one if any fungible cell is wrong.

        Moving one fungible piece relabels the others, so a single turn can
        fix every fungible mismatch at once; they share a single unit.
        """
        actual = self._actual(state)
        wrong = actual != self.expected
        if not wrong.any():
            return 0
        misplaced = actual[wrong]
        count = len(set(misplaced[_UNIQUE[misplaced]].tolist()))
        if _FUNGIBLE[misplaced].any() or self.expected_fungible[wrong].any():
            count += 1
        return count


@lru_cache(maxsize=32)
def target_pattern(target: Board) -> TargetPattern:
    return TargetPattern(target)


def is_goal(state: Board, target: Board) -> bool:
    """True when every non-wildcard target cell equals the state's cell."""
    return target_pattern(target).matches(state)


def heuristic(state: Board, target: Board) -> int:
    """Admissible lower bound on the remaining turns.

    Each out-of-place unique piece needs a turn of its own, and wrong
    fungible cells need at least one more turn moving a fungible piece.
    """
    return target_pattern(target).out_of_place(state)


def zero_heuristic(state: Board, target: Board) -> int:
    """Brute-force search: no guidance at all."""
    return 0
