#!/usr/bin/env python3
"""
Solve the example sliding-block puzzles and print search statistics.

Usage:
    # Built-in examples
    python scripts/solve_examples.py

    # Selected puzzles from a YAML puzzle set, brute force, with the full path
    python scripts/solve_examples.py --config configs/puzzles.yaml --names medium --no-heuristic --show-path

    # Save every solution as JSON
    python scripts/solve_examples.py --save-dir solutions
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from slider_solver.core.persistence import SolutionStore, load_puzzle_set
from slider_solver.puzzles.sliding_blocks import EXAMPLES, heuristic, solve, zero_heuristic


def main():
    parser = argparse.ArgumentParser(description="Solve sliding-block puzzles")
    parser.add_argument("--config", type=str, help="YAML puzzle set (defaults to the built-in examples)")
    parser.add_argument("--names", nargs="+", help="Only solve puzzles with these names")
    parser.add_argument("--no-heuristic", action="store_true", help="Brute-force search without a heuristic")
    parser.add_argument("--show-path", action="store_true", help="Print every board of the solution")
    parser.add_argument("--save-dir", type=str, help="Directory to save solutions as JSON")

    args = parser.parse_args()

    puzzles = load_puzzle_set(args.config) if args.config else list(EXAMPLES.values())
    if args.names:
        puzzles = [p for p in puzzles if p.name in args.names]
        if not puzzles:
            print(f"Error: no puzzles named {', '.join(args.names)}")
            sys.exit(1)

    store = SolutionStore(args.save_dir) if args.save_dir else None
    guide = zero_heuristic if args.no_heuristic else heuristic

    for puzzle in puzzles:
        board, target = puzzle.boards()

        print("----")
        print(f"Source ({puzzle.name}):")
        print(board)
        print("----")
        print("Target:")
        print(target)
        print("----")

        result = solve(board, target, heuristic=guide)
        visited, generated, solution = result

        if solution is not None:
            print(f"Found a solution in {solution.cost} moves:")
            print(f"Visited {visited} board positions (generated {generated} total).")
            if puzzle.expected_cost is not None and solution.cost != puzzle.expected_cost:
                print(f"Warning: expected {puzzle.expected_cost} moves")
            if args.show_path:
                for step, state in enumerate(solution.path):
                    print(f"\nMove {step}:")
                    print(state)
            print("----")
            print()
        else:
            print("No solution found")

        if store is not None:
            path = store.save_solution(puzzle.name, result)
            print(f"Saved to {path}")


if __name__ == "__main__":
    main()
