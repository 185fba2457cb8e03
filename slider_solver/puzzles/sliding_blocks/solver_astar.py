from __future__ import annotations

import heapq
from typing import Callable, Dict, List, Tuple

from ...core.solver import HeuristicSolver, Solution, SolveResult
from .board import Board
from .goal import heuristic as pieces_out_of_place
from .goal import is_goal
from .moves import successors

Heuristic = Callable[[Board, Board], int]


class AStarSolver(HeuristicSolver):
    """A* search for the fewest turns from a board to a target pattern."""

    def __init__(self, target: Board, heuristic: Heuristic = pieces_out_of_place):
        self.target = target
        self.heuristic = heuristic

    # ------------------------------------------------------------------
    # Solve
    # ------------------------------------------------------------------
    def solve(self, source: Board) -> SolveResult:
        target = self.target
        if source.shape != target.shape:
            raise ValueError(f"source is {source.shape} but target is {target.shape}")

        start_state = source.canonical()
        # Entries are (f, -g, tie-breaker, state): deeper nodes win ties
        frontier: List[Tuple[int, int, int, Board]] = []
        heapq.heappush(frontier, (self.heuristic(start_state, target), 0, 0, start_state))
        came_from: Dict[Board, Board] = {}
        g_cost: Dict[Board, int] = {start_state: 0}
        counter = 0
        visited = 0
        generated = 0
        while frontier:
            _, neg_g, _, current = heapq.heappop(frontier)
            cost = -neg_g
            if cost > g_cost[current]:
                continue  # stale entry
            if is_goal(current, target):
                path = self._reconstruct_path(came_from, current)
                return SolveResult(visited, generated, Solution(path, cost))

            children = successors(current)
            visited += 1
            generated += len(children)
            tentative_g = cost + 1
            for next_state in children:
                if next_state not in g_cost or tentative_g < g_cost[next_state]:
                    g_cost[next_state] = tentative_g
                    came_from[next_state] = current
                    priority = tentative_g + self.heuristic(next_state, target)
                    counter += 1
                    heapq.heappush(frontier, (priority, -tentative_g, counter, next_state))
        return SolveResult(visited, generated, None)

    # ------------------------------------------------------------------
    # Utilities
    # ------------------------------------------------------------------
    def _reconstruct_path(self, came_from: Dict[Board, Board], goal_state: Board) -> List[Board]:
        path: List[Board] = [goal_state]
        current = goal_state
        while current in came_from:
            current = came_from[current]
            path.append(current)
        path.reverse()
        return path


def solve(source: Board, target: Board, heuristic: Heuristic = pieces_out_of_place) -> SolveResult:
    """Solve *source* towards *target*, returning (visited, generated, solution)."""
    return AStarSolver(target, heuristic=heuristic).solve(source)
