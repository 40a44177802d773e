"""
Sudoku constants, index tables, difficulty tiers, and display utilities.
"""

from typing import Dict, List, Sequence, Tuple


# ============================================================================
# 9x9 Sudoku Geometry
# ============================================================================

SIZE = 9
BOX = 3
NUM_CELLS = SIZE * SIZE
DIGITS = tuple(range(1, SIZE + 1))

SUDOKU_RULES = """9x9 Sudoku Rules:
- The grid is 9x9, divided into nine 3x3 boxes
- Fill each cell with a number from 1 to 9
- Each ROW must contain the numbers 1-9 exactly once
- Each COLUMN must contain the numbers 1-9 exactly once
- Each 3x3 BOX must contain the numbers 1-9 exactly once
- Some cells are given as clues and cannot be changed
"""


def box_of(row: int, col: int) -> int:
    """Box number (0-8, row-major) containing (row, col)."""
    return (row // BOX) * BOX + col // BOX


ROW_OF: Tuple[int, ...] = tuple(i // SIZE for i in range(NUM_CELLS))
COL_OF: Tuple[int, ...] = tuple(i % SIZE for i in range(NUM_CELLS))
BOX_OF: Tuple[int, ...] = tuple(box_of(ROW_OF[i], COL_OF[i]) for i in range(NUM_CELLS))

ROW_INDICES: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(r * SIZE + c for c in range(SIZE)) for r in range(SIZE)
)
COL_INDICES: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(r * SIZE + c for r in range(SIZE)) for c in range(SIZE)
)
BOX_INDICES: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(i for i in range(NUM_CELLS) if BOX_OF[i] == b) for b in range(SIZE)
)

# Every other index sharing a row, column or box with i (20 per cell)
PEERS: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(
        sorted(
            (
                set(ROW_INDICES[ROW_OF[i]])
                | set(COL_INDICES[COL_OF[i]])
                | set(BOX_INDICES[BOX_OF[i]])
            )
            - {i}
        )
    )
    for i in range(NUM_CELLS)
)

# Top-left, middle-center and bottom-right boxes share no row or column
DIAGONAL_BOXES = (0, 4, 8)


# ============================================================================
# Difficulty Tiers (cells removed, inclusive bounds)
# ============================================================================

DIFFICULTY_TIERS: Dict[str, Tuple[int, int]] = {
    "easy": (20, 30),
    "medium": (30, 40),
    "hard": (40, 50),
    "expert": (50, 55),
}


def tier_for_count(removal_count: int) -> str:
    """Name the tier a removal count falls in ("custom" when outside all)."""
    for name, (low, high) in DIFFICULTY_TIERS.items():
        if low <= removal_count < high:
            return name
    if removal_count == DIFFICULTY_TIERS["expert"][1]:
        return "expert"
    return "custom"


# ============================================================================
# Display Utility
# ============================================================================

BLANK = "_"


def format_grid(grid: Sequence[Sequence[int]], separators: bool = True) -> str:
    """
    Format a 9x9 grid for display.

    Args:
        grid: 9 rows of 9 ints (0 = empty).
        separators: If True, draw lines between the 3x3 boxes.

    Returns:
        Formatted multi-line string with blanks shown as '_'.
    """
    lines: List[str] = []
    for i, row in enumerate(grid):
        cells = [str(cell) if cell != 0 else BLANK for cell in row]
        if separators:
            groups = [" ".join(cells[j : j + BOX]) for j in range(0, SIZE, BOX)]
            lines.append(" | ".join(groups))
            if i in (2, 5):  # Separator after each band
                lines.append("------+-------+------")
        else:
            lines.append(" ".join(cells))
    return "\n".join(lines)
