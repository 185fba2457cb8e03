from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, NamedTuple, Optional


class Solution(NamedTuple):
    """Path of states from source to goal (inclusive) and its cost."""

    path: List[Any]
    cost: int


class SolveResult(NamedTuple):
    """Search outcome plus instrumentation.

    visited: states popped from the frontier and expanded
    generated: successors produced across all expansions
    solution: None when the state space was exhausted without a goal
    """

    visited: int
    generated: int
    solution: Optional[Solution]


class HeuristicSolver(ABC):
    """
    Classical search algorithm that finds a shortest sequence of states
    from a source position to one matching a fixed target.
    """

    @abstractmethod
    def solve(self, source: Any) -> SolveResult:
        """
        Search from *source* and return the result with search statistics.
        """
        raise NotImplementedError
