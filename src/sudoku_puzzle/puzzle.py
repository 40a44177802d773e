"""
Entry points used by a presentation layer: generate a puzzle, check a grid.
"""

from typing import Optional

import numpy as np

from .config import draw_removal_count
from .full_grid import FullGridGenerator
from .grid import Grid
from .reducer import PuzzleReducer


def generate(removal_count: int, rng: Optional[np.random.RandomState] = None) -> Grid:
    """
    Generate a uniquely solvable puzzle.

    Args:
        removal_count: Cells to blank (Easy 20-30, Medium 30-40, Hard 40-50,
            Expert 50-55; the ranges are not enforced).
        rng: Random source shared by grid generation and reduction.

    Returns:
        Grid with exactly `removal_count` blanked cells.
    """
    rng = rng or np.random.RandomState()
    grid = FullGridGenerator(rng).generate()
    PuzzleReducer(rng).reduce(grid, removal_count)
    return grid


def generate_for_difficulty(
    difficulty: str, rng: Optional[np.random.RandomState] = None
) -> Grid:
    """Generate a puzzle with a removal count drawn from the named tier."""
    rng = rng or np.random.RandomState()
    return generate(draw_removal_count(difficulty, rng), rng)


def check_solved(grid: Grid) -> bool:
    """True iff every cell holds its solution digit."""
    return grid.is_solved
