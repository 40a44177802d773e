"""
Strong verifier for 9x9 Sudoku.

Deterministic checker: validates Sudoku rules on plain 9x9 rows and matches
single guesses against a grid's solution.
"""

from typing import List, Sequence, Tuple

from .constants import BOX, DIGITS, SIZE
from .grid import Grid

_TARGET = list(DIGITS)


def _shape_ok(rows: Sequence[Sequence[int]]) -> bool:
    return len(rows) == SIZE and all(len(row) == SIZE for row in rows)


def _units(rows: Sequence[Sequence[int]]) -> List[Tuple[str, List[int]]]:
    units = [(f"Row {r}", list(rows[r])) for r in range(SIZE)]
    units += [(f"Column {c}", [rows[r][c] for r in range(SIZE)]) for c in range(SIZE)]
    for box_r in range(BOX):
        for box_c in range(BOX):
            box = [
                rows[r][c]
                for r in range(box_r * BOX, box_r * BOX + BOX)
                for c in range(box_c * BOX, box_c * BOX + BOX)
            ]
            units.append((f"Box ({box_r},{box_c})", box))
    return units


class StrongVerifier:
    """Deterministic Sudoku verifier: checks validity AND correctness."""

    @staticmethod
    def verify_cell_correctness(
        grid: Grid, row: int, col: int, value: int
    ) -> Tuple[bool, str]:
        """Check if a proposed value matches the grid's solution."""
        true_value = grid.cell(row, col).solution_value
        if value == true_value:
            return True, f"Correct! {value} matches the solution"
        return False, f"Incorrect: placed {value} but should be {true_value}"

    @staticmethod
    def verify_complete_solution(rows: Sequence[Sequence[int]]) -> Tuple[bool, str]:
        """Verify that every row, column and box holds 1-9 exactly once."""
        if not _shape_ok(rows):
            return False, "Grid is not 9x9"

        for r in range(SIZE):
            for c in range(SIZE):
                if rows[r][c] not in _TARGET:
                    return False, f"Invalid value at ({r},{c}): {rows[r][c]}"

        for name, values in _units(rows):
            if sorted(values) != _TARGET:
                return False, f"{name} invalid: {values}"

        return True, "Solution is correct!"

    @staticmethod
    def verify_partial_solution(rows: Sequence[Sequence[int]]) -> Tuple[bool, str]:
        """Verify a partial grid has no conflicts."""
        if not _shape_ok(rows):
            return False, "Grid is not 9x9"

        for r in range(SIZE):
            for c in range(SIZE):
                if rows[r][c] not in [0] + _TARGET:
                    return False, f"Invalid value at ({r},{c}): {rows[r][c]}"

        for name, values in _units(rows):
            filled = [v for v in values if v != 0]
            if len(filled) != len(set(filled)):
                return False, f"Duplicate in {name.lower()}"

        return True, "Partial solution is valid"
