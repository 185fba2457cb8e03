"""
Core abstractions shared across puzzles and tooling.
"""
from .solver import HeuristicSolver
from .persistence import SolutionStore, load_puzzle_set

__all__ = [
    "HeuristicSolver",
    "SolutionStore",
    "load_puzzle_set",
]
