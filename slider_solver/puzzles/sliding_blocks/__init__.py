"""Sliding-block (Klotski-style) puzzle engine."""
from .board import Board, Direction, parse_board
from .moves import successors
from .goal import is_goal, heuristic, zero_heuristic
from .solver_astar import AStarSolver, solve
from .examples import EXAMPLES, Puzzle, get_example

__all__ = [
    "Board",
    "Direction",
    "parse_board",
    "successors",
    "is_goal",
    "heuristic",
    "zero_heuristic",
    "AStarSolver",
    "solve",
    "EXAMPLES",
    "Puzzle",
    "get_example",
]
