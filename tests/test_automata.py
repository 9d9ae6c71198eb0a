import random

import numpy as np
import pytest

from simlab.automata import (
    count_neighbours,
    drawing_to_text,
    percolation_step,
    stopping_time,
    syracuse,
    syracuse_color,
    vector_cell_step,
)


def test_count_neighbours_excludes_centre():
    grid = np.arange(9).reshape(3, 3)
    assert count_neighbours(grid, 1, 1) == int(grid.sum()) - int(grid[1, 1])


def test_count_neighbours_rejects_border():
    grid = np.zeros((4, 4))
    with pytest.raises(IndexError):
        count_neighbours(grid, 0, 1)
    with pytest.raises(IndexError):
        count_neighbours(grid, 1, 3)


def test_percolation_certain_growth_grows_every_interior_cell():
    grid = np.zeros((5, 6), dtype=int)
    result = percolation_step(grid, 0, random.Random(1))
    assert (result[1:-1, 1:-1] == 4).all()
    assert result[0].sum() == 0 and result[-1].sum() == 0
    assert result[:, 0].sum() == 0 and result[:, -1].sum() == 0
    again = percolation_step(result, 0, random.Random(2))
    assert (again[1:-1, 1:-1] == result[1:-1, 1:-1] + 4).all()


def test_percolation_does_not_touch_input():
    grid = np.zeros((4, 4), dtype=int)
    percolation_step(grid, 0, random.Random(3))
    assert grid.sum() == 0


def test_percolation_is_reproducible_and_grows_by_fours():
    grid = np.zeros((10, 10), dtype=int)
    first = percolation_step(grid, 20, random.Random(7))
    second = percolation_step(grid, 20, random.Random(7))
    assert np.array_equal(first, second)
    assert (first % 4 == 0).all()


def test_percolation_undefined_odds_raise():
    grid = np.zeros((3, 3), dtype=int)
    grid[0, 0] = 9
    with pytest.raises(ValueError):
        percolation_step(grid, 8, random.Random(0))


def test_vector_cell_spreads_to_included_offsets_only():
    grid = np.zeros((7, 7, 2), dtype=int)
    grid[3, 3] = (10, 0)
    result = vector_cell_step(grid, 1.0)
    assert result[3, 4].tolist() == [0, 10]
    assert result[4, 2].tolist() == [0, 10]
    assert result[4, 4].tolist() == [0, 0]
    assert result[2, 2].tolist() == [0, 0]
    assert result[3, 3].tolist() == [0, 0]


def test_vector_cell_clears_border():
    grid = np.full((5, 5, 2), 7)
    result = vector_cell_step(grid, 1.0)
    assert result[0].sum() == 0 and result[:, -1].sum() == 0


def test_vector_cell_channel_swap_symmetry():
    rng = np.random.default_rng(5)
    grid = rng.integers(0, 20, size=(6, 6, 2))
    result = vector_cell_step(grid, 0.7)
    swapped = vector_cell_step(grid[..., ::-1], 0.7)
    assert np.array_equal(result[..., ::-1], swapped)


def test_vector_cell_zero_transmission():
    grid = np.full((5, 5, 2), 9)
    assert vector_cell_step(grid, 0.0).sum() == 0


def test_vector_cell_truncates_each_addition():
    grid = np.zeros((5, 5, 2), dtype=int)
    grid[..., 1] = 3
    result = vector_cell_step(grid, 0.5)
    assert result[2, 2].tolist() == [6, 0]


def test_vector_cell_rejects_bad_shape():
    with pytest.raises(ValueError):
        vector_cell_step(np.zeros((4, 4)), 1.0)


@pytest.mark.parametrize("n", [2, 10, 64, 1000])
def test_syracuse_even(n):
    assert syracuse(n) == n // 2


@pytest.mark.parametrize("n", [1, 3, 7, 27])
def test_syracuse_odd(n):
    assert syracuse(n) == 3 * n + 1


def test_stopping_time_of_one_is_zero():
    assert stopping_time(1) == 0


def test_stopping_time_of_27():
    assert stopping_time(27) == 111


@pytest.mark.parametrize("n", [3, 6, 27, 97, 871])
def test_stopping_time_recurrence(n):
    assert stopping_time(n) == 1 + stopping_time(syracuse(n))


def test_stopping_time_above_limit_is_zero():
    assert stopping_time(101, 100) == 0


def test_syracuse_color_zero_is_black():
    assert syracuse_color(0) == (0, 0, 0)


def test_syracuse_color_uses_whole_hundreds_and_forties():
    assert syracuse_color(39) == (255, 0, 0)
    red, green, blue = syracuse_color(100000)
    assert (red, green, blue) == (255, 255, 255)


def test_drawing_to_text_worked_example():
    assert drawing_to_text([[1, 0], [0, 0]]) == "AS: 2,2 \n01\n11\n"


def test_drawing_to_text_empty():
    assert drawing_to_text([]) == "AS: 0,0 \n"


def test_drawing_to_text_rejects_ragged_rows():
    with pytest.raises(ValueError):
        drawing_to_text([[1, 0], [0]])