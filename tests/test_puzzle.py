import numpy as np
import pytest

from sudoku_puzzle import (
    DIFFICULTY_TIERS,
    SolutionCounter,
    StrongVerifier,
    check_solved,
    generate,
    generate_for_difficulty,
)

from conftest import assert_valid_solution


@pytest.mark.parametrize("n", [20, 35, 50, 55])
def test_generate_blanks_exactly_n_with_unique_solution(n):
    grid = generate(n, np.random.RandomState(n))
    assert grid.blanked_count == n
    assert SolutionCounter().count(grid) == 1
    assert_valid_solution(grid.solution_values())
    ok, message = StrongVerifier.verify_partial_solution(grid.current_values())
    assert ok, message


def test_generate_zero_is_a_full_grid(rng):
    grid = generate(0, rng)
    assert grid.blanked_count == 0
    assert check_solved(grid)
    assert grid.current_values() == grid.solution_values()


def test_check_solved_is_read_only(rng):
    grid = generate(25, rng)
    before = grid.current_values()
    first = check_solved(grid)
    second = check_solved(grid)
    assert first is second is False
    assert grid.current_values() == before


def test_filling_every_blank_solves_the_puzzle(rng):
    grid = generate(30, rng)
    for index in grid.blanked_indices():
        grid[index].current_value = grid[index].solution_value
    assert check_solved(grid)


def test_given_cells_cannot_be_overwritten(rng):
    grid = generate(30, rng)
    given = next(cell for cell in grid if cell.is_given)
    original = given.current_value
    given.current_value = original % 9 + 1
    assert given.current_value == original


@pytest.mark.parametrize("difficulty", ["easy", "Medium", "hard"])
def test_generate_for_difficulty_uses_tier_range(difficulty):
    grid = generate_for_difficulty(difficulty, np.random.RandomState(5))
    low, high = DIFFICULTY_TIERS[difficulty.lower()]
    assert low <= grid.blanked_count <= high


def test_unknown_difficulty():
    with pytest.raises(ValueError):
        generate_for_difficulty("impossible", np.random.RandomState(0))
