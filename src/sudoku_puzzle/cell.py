"""
A single Sudoku position: its fixed solution digit and the digit currently shown.
"""

import numbers

from .constants import SIZE


class Cell:
    """
    One grid position.

    - `solution_value` never changes after construction.
    - `current_value` is 0 (blank) or 1-9.
    - Player writes are accepted only while the cell is blanked and not yet
      correct; any other write is silently ignored.
    """

    def __init__(self, solution_value: int):
        if not 1 <= solution_value <= SIZE:
            raise ValueError(f"Solution value must be 1-{SIZE}, got {solution_value}")
        self._solution_value = solution_value
        self._current_value = solution_value
        self._is_blanked = False

    @property
    def solution_value(self) -> int:
        return self._solution_value

    @property
    def current_value(self) -> int:
        return self._current_value

    @current_value.setter
    def current_value(self, value: int):
        _check_digit(value)
        if self._is_blanked and not self.is_correct:
            self._current_value = int(value)

    @property
    def is_blanked(self) -> bool:
        return self._is_blanked

    @property
    def is_given(self) -> bool:
        """True for an original clue the player cannot edit."""
        return not self._is_blanked

    @property
    def is_correct(self) -> bool:
        return self._current_value == self._solution_value

    @property
    def is_error(self) -> bool:
        """A wrong guess sits in this blanked cell."""
        return self._is_blanked and self._current_value != 0 and not self.is_correct

    def blank(self):
        """Clear the cell for play."""
        self._current_value = 0
        self._is_blanked = True

    def reset(self):
        """Restore the solution digit and make the cell a given again."""
        self._current_value = self._solution_value
        self._is_blanked = False

    def clear(self):
        """Wipe a wrong guess so the player can try again."""
        if self.is_error:
            self._current_value = 0

    def place(self, value: int):
        # Unguarded write for the solution search; callers restore 0 afterwards.
        self._current_value = value

    def __repr__(self) -> str:
        return f"Cell({self._current_value} ({self._solution_value}))"


def _check_digit(value: int):
    if not isinstance(value, numbers.Integral) or isinstance(value, bool) or not 0 <= value <= SIZE:
        raise ValueError(f"Cell value must be 0-{SIZE}, got {value!r}")
