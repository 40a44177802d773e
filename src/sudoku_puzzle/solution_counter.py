"""
Backtracking solution counter with early exit.

Callers only need to tell "no solution", "unique" and "more than one" apart,
so the search stops as soon as it reaches `limit` solutions.
"""

from .constants import NUM_CELLS, SIZE
from .grid import Grid


class SolutionCounter:
    """
    Counts completions of a partially blanked Grid.

    The grid is searched in place: every tentative digit is reverted before
    `count` returns, so current values come back exactly as they were found.
    """

    def __init__(self):
        self.nodes_visited = 0
        self._solutions = 0
        self._limit = 2

    def count(self, grid: Grid, limit: int = 2) -> int:
        """
        Count solutions of `grid`, stopping once `limit` have been found.

        Args:
            grid: Grid whose non-zero current values are treated as fixed.
            limit: Stop searching at this many solutions.

        Returns:
            Number of solutions found, at most `limit`.
        """
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")
        self.nodes_visited = 0
        self._solutions = 0
        self._limit = limit
        self._solve(grid, 0)
        return self._solutions

    def is_unique(self, grid: Grid) -> bool:
        return self.count(grid) == 1

    def _solve(self, grid: Grid, index: int):
        cells = grid.cells
        while index < NUM_CELLS and cells[index].current_value != 0:
            index += 1
        if index == NUM_CELLS:
            self._solutions += 1
            return

        cell = cells[index]
        used = grid.used_digits(index)
        for num in range(1, SIZE + 1):
            if num in used:
                continue

            self.nodes_visited += 1
            cell.place(num)
            self._solve(grid, index + 1)
            cell.place(0)

            if self._solutions >= self._limit:
                return
