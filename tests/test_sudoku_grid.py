import pytest

from sudoku_grid import (
    CELL_COUNT,
    CellValueError,
    Grid,
    ShapeError,
    SudokuError,
    coordinates,
    new_grid,
)


@pytest.mark.parametrize("length", [0, 1, 80, 82, 162])
def test_new_grid_rejects_wrong_length(length):
    with pytest.raises(ShapeError):
        new_grid([0] * length)


def test_shape_error_is_a_value_error():
    with pytest.raises(ValueError):
        new_grid([1, 2, 3])
    assert issubclass(ShapeError, SudokuError)


def test_new_grid_keeps_cells_in_order():
    cells = [i % 10 for i in range(CELL_COUNT)]
    grid = new_grid(cells)
    assert len(grid) == CELL_COUNT
    assert list(grid) == cells
    assert grid[0] == 0
    assert grid[80] == 80 % 10


def test_grid_write_is_in_place():
    grid = new_grid([0] * CELL_COUNT)
    grid[40] = 7
    assert grid[40] == 7
    assert grid.to_rows()[4][4] == 7


def test_grid_does_not_alias_input():
    cells = [0] * CELL_COUNT
    grid = new_grid(cells)
    grid[0] = 5
    assert cells[0] == 0


def test_from_rows_and_to_rows(classic_puzzle):
    grid = Grid.from_rows(classic_puzzle)
    assert grid.to_rows() == classic_puzzle
    assert list(grid)[:9] == [5, 3, 0, 0, 7, 0, 0, 0, 0]


def test_from_rows_rejects_ragged_rows(classic_puzzle):
    classic_puzzle[3] = classic_puzzle[3][:8]
    with pytest.raises(ShapeError):
        Grid.from_rows(classic_puzzle)


def test_copy_is_independent(classic_puzzle):
    grid = Grid.from_rows(classic_puzzle)
    clone = grid.copy()
    assert clone == grid
    clone[2] = 4
    assert clone != grid
    assert grid[2] == 0


@pytest.mark.parametrize(
    "index, expected",
    [
        (0, (0, 0, 0)),
        (8, (0, 8, 2)),
        (10, (1, 1, 0)),
        (30, (3, 3, 4)),
        (40, (4, 4, 4)),
        (53, (5, 8, 5)),
        (72, (8, 0, 6)),
        (80, (8, 8, 8)),
    ],
)
def test_coordinates(index, expected):
    assert coordinates(index) == expected


@pytest.mark.parametrize("index", [-1, 81, 1000])
def test_coordinates_out_of_range(index):
    with pytest.raises(IndexError):
        coordinates(index)


@pytest.mark.parametrize("value", [10, -1, 5.9, 5.0, "5", None, True])
def test_new_grid_rejects_bad_cell_values(value):
    with pytest.raises(CellValueError):
        new_grid([0] * 80 + [value])


def test_cell_value_error_names_the_cell():
    cells = [0] * CELL_COUNT
    cells[13] = 12  # row 2, col 5
    with pytest.raises(CellValueError, match="row 2, column 5"):
        new_grid(cells)
    assert issubclass(CellValueError, SudokuError)
    assert issubclass(CellValueError, ValueError)


def test_len_follows_cells():
    grid = new_grid([0] * CELL_COUNT)
    grid.cells.append(0)
    assert len(grid) == CELL_COUNT + 1
