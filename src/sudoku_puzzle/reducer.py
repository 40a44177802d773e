"""
Puzzle reduction: blank random cells while keeping the solution unique.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Optional

import numpy as np

from .constants import NUM_CELLS
from .grid import Grid
from .solution_counter import SolutionCounter


@dataclass
class ReductionStats:
    requested: int = 0
    removed: int = 0
    attempts: int = 0
    rejected: int = 0
    counter_nodes: int = 0

    def to_dict(self) -> Dict:
        return asdict(self)


class PuzzleReducer:
    """
    Removes cells from a solved Grid one at a time.

    Each removal is tentative: the cell is blanked, the SolutionCounter is
    consulted, and the cell is reset when the puzzle stops being uniquely
    solvable. There is no attempt cap; for counts near 81 the loop may run
    for a very long time.
    """

    def __init__(
        self,
        rng: Optional[np.random.RandomState] = None,
        counter: Optional[SolutionCounter] = None,
    ):
        self.rng = rng or np.random.RandomState()
        self.counter = counter or SolutionCounter()

    def reduce(self, grid: Grid, count: int) -> ReductionStats:
        """
        Blank exactly `count` distinct cells of `grid` in place.

        Args:
            grid: A complete grid (cells already blanked are left blanked and
                do not count towards `count`).
            count: Number of cells to remove, 0-81.

        Returns:
            ReductionStats for this run.
        """
        available = NUM_CELLS - grid.blanked_count
        if not 0 <= count <= available:
            raise ValueError(f"count must be 0-{available}, got {count}")

        stats = ReductionStats(requested=count)
        while stats.removed < count:
            index = int(self.rng.randint(0, NUM_CELLS))
            cell = grid[index]
            if cell.is_blanked:
                continue

            stats.attempts += 1
            cell.blank()
            unique = self.counter.is_unique(grid)
            stats.counter_nodes += self.counter.nodes_visited
            if unique:
                stats.removed += 1
            else:
                cell.reset()
                stats.rejected += 1

        return stats
