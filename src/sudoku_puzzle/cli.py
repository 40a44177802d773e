"""
Command-line puzzle generator.

Usage:
    python -m sudoku_puzzle --difficulty hard --seed 123
    python -m sudoku_puzzle --remove 45 --count 5 --summary --plot cost.png
    python -m sudoku_puzzle --config configs/default.yaml
"""

import argparse
from typing import List, Optional

from .analysis import plot_generation_cost, print_summary, records_to_frame
from .batch import generate_batch
from .config import make_generator_config
from .constants import DIFFICULTY_TIERS, format_grid


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-puzzle",
        description="Generate uniquely solvable 9x9 Sudoku puzzles.",
    )
    parser.add_argument("--config", help="YAML file with generator settings")
    parser.add_argument(
        "--difficulty", choices=sorted(DIFFICULTY_TIERS),
        help="Tier to draw the number of removed cells from",
    )
    parser.add_argument("--remove", type=int, dest="removal_count",
                        help="Exact number of cells to remove (overrides --difficulty); "
                             "a unique puzzle keeps at least 17 clues, so counts above 64 never finish")
    parser.add_argument("--seed", type=int, help="Seed for reproducible puzzles")
    parser.add_argument("--count", type=int, dest="num_puzzles", help="Number of puzzles")
    parser.add_argument("--show-solution", action="store_true",
                        help="Print each puzzle's solution under it")
    parser.add_argument("--summary", action="store_true",
                        help="Print search statistics for the batch")
    parser.add_argument("--plot", metavar="PATH", help="Save a generation-cost plot")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress lines")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = make_generator_config(
            args.config,
            difficulty=args.difficulty,
            removal_count=args.removal_count,
            seed=args.seed,
            num_puzzles=args.num_puzzles,
        )
    except ValueError as e:
        build_parser().error(str(e))

    records = generate_batch(config, progress=not args.quiet)

    for record in records:
        print(f"\nPuzzle {record.puzzle_id} ({record.difficulty}, {record.removal_count} removed):")
        print(record.grid.format())
        if args.show_solution:
            print("\nSolution:")
            print(format_grid(record.grid.solution_values()))

    if args.summary or args.plot:
        print_summary(records)
    if args.plot:
        plot_generation_cost(records_to_frame(records), save_path=args.plot)
    return 0
