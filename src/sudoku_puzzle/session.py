"""
Play session: owns the current puzzle and applies player moves to it.
"""

from typing import List, Optional, Tuple

import numpy as np

from .config import GeneratorConfig, draw_removal_count
from .constants import COL_OF, ROW_OF
from .grid import Grid
from .puzzle import check_solved, generate

SOLVED_MESSAGE = "Congratulations! You solved the puzzle!"
NOT_SOLVED_MESSAGE = "The solution is not correct. Try again."


class SudokuSession:
    """Single owner of one Grid at a time."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[np.random.RandomState] = None,
    ):
        self.config = config or GeneratorConfig()
        self.rng = rng or self.config.make_rng()
        self.grid: Optional[Grid] = None
        self.moves = 0

    def new_game(
        self, difficulty: Optional[str] = None, removal_count: Optional[int] = None
    ) -> Grid:
        """Replace the current puzzle with a freshly generated one."""
        if removal_count is None:
            if difficulty is not None:
                removal_count = draw_removal_count(difficulty, self.rng)
            else:
                removal_count = self.config.resolve_removal_count(self.rng)

        self.grid = generate(removal_count, self.rng)
        self.moves = 0
        return self.grid

    def _require_grid(self) -> Grid:
        if self.grid is None:
            raise RuntimeError("No game in progress; call new_game() first")
        return self.grid

    def enter(self, row: int, col: int, value: int) -> bool:
        """Write a guess; returns False when the cell is not editable."""
        cell = self._require_grid().cell(row, col)
        editable = cell.is_blanked and not cell.is_correct
        cell.current_value = value
        if editable:
            self.moves += 1
        return editable

    def clear(self, row: int, col: int):
        self._require_grid().cell(row, col).clear()

    def errors(self) -> List[Tuple[int, int]]:
        """(row, col) of every wrong guess on the board."""
        grid = self._require_grid()
        return [(ROW_OF[i], COL_OF[i]) for i, cell in enumerate(grid) if cell.is_error]

    def check_solution(self) -> Tuple[bool, str]:
        if check_solved(self._require_grid()):
            return True, SOLVED_MESSAGE
        return False, NOT_SOLVED_MESSAGE

    def render(self) -> str:
        return self._require_grid().format()
