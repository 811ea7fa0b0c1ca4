import copy

from algokit.flood_fill import flood_fill, render_grid

SOURCE_GRID = [
    [1, 1, 1],
    [1, 1, 0],
    [1, 0, 1],
]


def test_source_example():
    grid = copy.deepcopy(SOURCE_GRID)
    flood_fill(grid, 0, 0, 3)
    assert grid == [[3, 3, 3], [3, 3, 0], [3, 0, 1]]


def test_count_equals_changed_cells():
    grid = copy.deepcopy(SOURCE_GRID)
    changed = flood_fill(grid, 0, 0, 3)
    diffs = sum(
        a != b for row_a, row_b in zip(grid, SOURCE_GRID) for a, b in zip(row_a, row_b)
    )
    assert changed == diffs


def test_same_colour_changes_nothing():
    grid = copy.deepcopy(SOURCE_GRID)
    assert flood_fill(grid, 0, 0, 1) == 0
    assert grid == SOURCE_GRID


def test_out_of_bounds_changes_nothing():
    grid = copy.deepcopy(SOURCE_GRID)
    assert flood_fill(grid, 3, 0, 9) == 0
    assert flood_fill(grid, 0, -1, 9) == 0
    assert grid == SOURCE_GRID


def test_isolated_cell():
    grid = copy.deepcopy(SOURCE_GRID)
    assert flood_fill(grid, 2, 2, 7) == 1
    assert grid[2][2] == 7
    assert grid[0] == SOURCE_GRID[0]


def test_diagonals_not_connected():
    grid = [[1, 0], [0, 1]]
    flood_fill(grid, 0, 0, 5)
    assert grid == [[5, 0], [0, 1]]


def test_refill_restores():
    grid = copy.deepcopy(SOURCE_GRID)
    flood_fill(grid, 0, 0, 3)
    flood_fill(grid, 0, 0, 1)
    assert grid == SOURCE_GRID


def test_render_grid():
    assert render_grid([[1, 2], [3, 4]]) == "1  2\n3  4"