#!/usr/bin/env python3
"""
Time repeated solves of the example puzzles.

Usage:
    python scripts/benchmark.py --repeats 5
    python scripts/benchmark.py --puzzles simple medium --config configs/puzzles.yaml
"""

import argparse
import sys
import time
from pathlib import Path

import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from slider_solver.core.persistence import load_puzzle_set
from slider_solver.puzzles.sliding_blocks import EXAMPLES, solve


def main():
    parser = argparse.ArgumentParser(description="Benchmark the sliding-block solver")
    parser.add_argument("--config", type=str, help="YAML puzzle set (defaults to the built-in examples)")
    parser.add_argument("--puzzles", nargs="+", help="Names of puzzles to run (default: all)")
    parser.add_argument("--repeats", type=int, default=3, help="Solves per puzzle")

    args = parser.parse_args()
    if args.repeats < 1:
        print("Error: --repeats must be at least 1")
        sys.exit(1)

    puzzles = load_puzzle_set(args.config) if args.config else list(EXAMPLES.values())
    if args.puzzles:
        puzzles = [p for p in puzzles if p.name in args.puzzles]
        if not puzzles:
            print(f"Error: no puzzles named {', '.join(args.puzzles)}")
            sys.exit(1)

    for puzzle in puzzles:
        board, target = puzzle.boards()
        timings = []
        for _ in range(args.repeats):
            start_time = time.perf_counter()
            visited, generated, solution = solve(board, target)
            timings.append(time.perf_counter() - start_time)

        cost = solution.cost if solution is not None else "unsolved"
        print(f"{puzzle.name}:")
        print(f"  moves: {cost}")
        print(f"  visited: {visited}  generated: {generated}")
        print(f"  time: best {min(timings):.3f}s  mean {np.mean(timings):.3f}s  ({args.repeats} runs)")


if __name__ == "__main__":
    main()
