"""
Randomized construction of a complete, valid 9x9 Sudoku grid.

Seeds the three diagonal boxes with random permutations (they share no row
or column, so they never conflict), then completes the other 63 cells by
row-major backtracking.
"""

from typing import List, Optional, Set

import numpy as np

from .constants import BOX_INDICES, BOX_OF, COL_OF, DIAGONAL_BOXES, DIGITS, NUM_CELLS, ROW_OF, SIZE
from .grid import Grid


class GenerationError(RuntimeError):
    """The fill search ran out of candidates (should never happen for 9x9)."""


class FullGridGenerator:
    """Builds solved grids from an explicit random source."""

    def __init__(self, rng: Optional[np.random.RandomState] = None):
        self.rng = rng or np.random.RandomState()
        self.nodes_visited = 0

    def generate(self) -> Grid:
        """Return a new Grid whose cells all hold their solution digit."""
        self.nodes_visited = 0
        numbers = [0] * NUM_CELLS
        rows: List[Set[int]] = [set() for _ in range(SIZE)]
        cols: List[Set[int]] = [set() for _ in range(SIZE)]
        boxes: List[Set[int]] = [set() for _ in range(SIZE)]

        for b in DIAGONAL_BOXES:
            self._fill_box(numbers, b, rows, cols, boxes)

        if not self._fill_remaining(numbers, 0, rows, cols, boxes):
            raise GenerationError("Exhausted search while completing the grid")

        return Grid.from_values(numbers)

    def _fill_box(self, numbers, b, rows, cols, boxes):
        perm = self.rng.permutation(DIGITS)
        for index, num in zip(BOX_INDICES[b], perm):
            num = int(num)
            numbers[index] = num
            rows[ROW_OF[index]].add(num)
            cols[COL_OF[index]].add(num)
            boxes[b].add(num)

    def _fill_remaining(self, numbers, index, rows, cols, boxes) -> bool:
        if index == NUM_CELLS:
            return True
        if numbers[index] != 0:
            return self._fill_remaining(numbers, index + 1, rows, cols, boxes)

        r, c, b = ROW_OF[index], COL_OF[index], BOX_OF[index]
        for num in DIGITS:
            if num in rows[r] or num in cols[c] or num in boxes[b]:
                continue

            self.nodes_visited += 1
            numbers[index] = num
            rows[r].add(num)
            cols[c].add(num)
            boxes[b].add(num)

            if self._fill_remaining(numbers, index + 1, rows, cols, boxes):
                return True

            numbers[index] = 0
            rows[r].remove(num)
            cols[c].remove(num)
            boxes[b].remove(num)

        return False
