# tests/conftest.py
import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from sudoku_puzzle import Grid

# Classic puzzle (0 = empty) with its unique solution
CLASSIC_PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]
CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# Valid grid where (0,0),(0,3),(1,0),(1,3) hold 1,2 / 2,1: blanking those four
# cells leaves two interchangeable completions.
RECTANGLE_SOLUTION = [
    [1, 3, 4, 2, 7, 8, 5, 6, 9],
    [2, 8, 9, 1, 5, 6, 3, 4, 7],
    [5, 6, 7, 3, 4, 9, 1, 2, 8],
    [3, 4, 1, 7, 8, 2, 6, 9, 5],
    [8, 9, 2, 5, 6, 1, 4, 7, 3],
    [6, 7, 5, 4, 9, 3, 2, 8, 1],
    [4, 1, 3, 8, 2, 7, 9, 5, 6],
    [9, 2, 8, 6, 1, 5, 7, 3, 4],
    [7, 5, 6, 9, 3, 4, 8, 1, 2],
]
RECTANGLE_CELLS = [(0, 0), (0, 3), (1, 0), (1, 3)]


@pytest.fixture
def rng():
    return np.random.RandomState(42)


@pytest.fixture
def solved_grid():
    return Grid.from_rows(CLASSIC_SOLUTION)


@pytest.fixture
def classic_puzzle():
    grid = Grid.from_rows(CLASSIC_SOLUTION)
    for r in range(9):
        for c in range(9):
            if CLASSIC_PUZZLE[r][c] == 0:
                grid.cell(r, c).blank()
    return grid


@pytest.fixture
def rectangle_puzzle():
    grid = Grid.from_rows(RECTANGLE_SOLUTION)
    for r, c in RECTANGLE_CELLS:
        grid.cell(r, c).blank()
    return grid


def assert_valid_solution(rows):
    target = list(range(1, 10))
    for r in range(9):
        assert sorted(rows[r]) == target, f"row {r}"
    for c in range(9):
        assert sorted(rows[r][c] for r in range(9)) == target, f"column {c}"
    for b in range(9):
        br, bc = (b // 3) * 3, (b % 3) * 3
        box = [rows[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)]
        assert sorted(box) == target, f"box {b}"
