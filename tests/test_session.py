import numpy as np
import pytest

from sudoku_puzzle import GeneratorConfig, SudokuSession
from sudoku_puzzle.constants import COL_OF, ROW_OF
from sudoku_puzzle.session import NOT_SOLVED_MESSAGE, SOLVED_MESSAGE


@pytest.fixture
def session():
    return SudokuSession(GeneratorConfig(seed=11), np.random.RandomState(11))


def _first_blank(grid):
    index = grid.blanked_indices()[0]
    return ROW_OF[index], COL_OF[index], grid[index]


def test_requires_a_game():
    with pytest.raises(RuntimeError):
        SudokuSession(GeneratorConfig(seed=1)).check_solution()


def test_new_game_uses_removal_count(session):
    grid = session.new_game(removal_count=22)
    assert grid.blanked_count == 22
    assert session.grid is grid


def test_new_game_draws_from_tier(session):
    grid = session.new_game(difficulty="easy")
    assert 20 <= grid.blanked_count <= 30


def test_enter_and_check(session):
    grid = session.new_game(removal_count=21)
    assert session.check_solution() == (False, NOT_SOLVED_MESSAGE)

    row, col, cell = _first_blank(grid)
    wrong = cell.solution_value % 9 + 1
    assert session.enter(row, col, wrong)
    assert session.errors() == [(row, col)]

    session.clear(row, col)
    assert cell.current_value == 0
    assert session.errors() == []

    for index in grid.blanked_indices():
        assert session.enter(ROW_OF[index], COL_OF[index], grid[index].solution_value)
    assert session.check_solution() == (True, SOLVED_MESSAGE)
    assert session.moves == 22


def test_enter_on_given_is_rejected(session):
    grid = session.new_game(removal_count=25)
    index = next(i for i, cell in enumerate(grid) if cell.is_given)
    before = grid[index].current_value
    assert not session.enter(ROW_OF[index], COL_OF[index], before % 9 + 1)
    assert grid[index].current_value == before
    assert session.moves == 0


def test_render(session):
    session.new_game(removal_count=30)
    text = session.render()
    assert text.count("_") == 30
    assert len(text.splitlines()) == 11
