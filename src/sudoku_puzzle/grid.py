"""
The 9x9 Sudoku grid: 81 cells in row-major order plus row/column/box queries.
"""

from typing import Iterable, List, Sequence, Set

from .cell import Cell
from .constants import (
    BOX_INDICES,
    COL_INDICES,
    NUM_CELLS,
    PEERS,
    ROW_INDICES,
    SIZE,
    format_grid,
)


class Grid:
    """
    Fixed collection of 81 Cells.

    Index i maps to row i // 9, column i % 9 and box (row // 3) * 3 + col // 3.
    Solution values are fixed at construction; only each cell's current value
    and blanked flag change afterwards.
    """

    def __init__(self, cells: Sequence[Cell]):
        if len(cells) != NUM_CELLS:
            raise ValueError(f"Grid needs {NUM_CELLS} cells, got {len(cells)}")
        self.cells: List[Cell] = list(cells)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "Grid":
        """Build a grid (no blanks) from 81 solution digits in row-major order."""
        values = [int(v) for v in values]
        if len(values) != NUM_CELLS:
            raise ValueError(f"Expected {NUM_CELLS} values, got {len(values)}")
        return cls([Cell(v) for v in values])

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("Grid is not 9x9")
        return cls.from_values(v for row in rows for v in row)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __len__(self) -> int:
        return NUM_CELLS

    def __iter__(self):
        return iter(self.cells)

    def cell(self, row: int, col: int) -> Cell:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"row/col out of range: ({row},{col})")
        return self.cells[row * SIZE + col]

    def row(self, r: int) -> List[Cell]:
        return [self.cells[i] for i in ROW_INDICES[r]]

    def column(self, c: int) -> List[Cell]:
        return [self.cells[i] for i in COL_INDICES[c]]

    def box(self, b: int) -> List[Cell]:
        return [self.cells[i] for i in BOX_INDICES[b]]

    def used_digits(self, index: int) -> Set[int]:
        """Non-zero current values in the row, column and box of `index`."""
        cells = self.cells
        used = {cells[p].current_value for p in PEERS[index]}
        used.discard(0)
        return used

    @property
    def is_solved(self) -> bool:
        return all(cell.is_correct for cell in self.cells)

    @property
    def blanked_count(self) -> int:
        return sum(1 for cell in self.cells if cell.is_blanked)

    def blanked_indices(self) -> List[int]:
        return [i for i, cell in enumerate(self.cells) if cell.is_blanked]

    def current_values(self) -> List[List[int]]:
        """Current digits as 9 rows (0 = blank)."""
        return [[self.cells[i].current_value for i in idx] for idx in ROW_INDICES]

    def solution_values(self) -> List[List[int]]:
        return [[self.cells[i].solution_value for i in idx] for idx in ROW_INDICES]

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def format(self, separators: bool = True) -> str:
        return format_grid(self.current_values(), separators=separators)

    def __str__(self) -> str:
        return self.format(separators=False)

    def __repr__(self) -> str:
        return f"Grid(blanked={self.blanked_count}, solved={self.is_solved})"
