import pytest

from lifegrid.grid import Cell, Grid


def test_new_grid_is_dead():
    grid = Grid(3, 4)
    assert all(grid.get(r, c) is Cell.DEAD for r in range(3) for c in range(4))


def test_size():
    assert Grid(3, 4).size() == (3, 4)


def test_set_get_round_trip_non_square():
    grid = Grid(2, 5)
    grid.set(Cell.ALIVE, 1, 4)
    assert grid.get(1, 4) is Cell.ALIVE
    alive = [
        (r, c) for r in range(2) for c in range(5) if grid.get(r, c) is Cell.ALIVE
    ]
    assert alive == [(1, 4)]


def test_out_of_range_raises():
    grid = Grid(2, 2)
    with pytest.raises(IndexError):
        grid.get(2, 0)
    with pytest.raises(IndexError):
        grid.set(Cell.ALIVE, 0, -1)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Grid(-1, 3)


def test_corner_neighbours():
    grid = Grid(3, 3)
    assert set(grid.neighbours(0, 0)) == {(1, 0), (0, 1), (1, 1)}


def test_middle_has_eight_neighbours():
    grid = Grid(3, 3)
    neighbours = grid.neighbours(1, 1)
    assert len(neighbours) == 8
    assert len(set(neighbours)) == 8


@pytest.mark.parametrize("row, col", [(0, 0), (0, 3), (2, 1), (4, 3), (4, 0)])
def test_neighbours_are_adjacent_and_inside(row, col):
    grid = Grid(5, 4)
    for r, c in grid.neighbours(row, col):
        assert (r, c) != (row, col)
        assert abs(r - row) <= 1 and abs(c - col) <= 1
        assert 0 <= r < 5 and 0 <= c < 4


def test_from_cells_round_trip():
    cells = [Cell.ALIVE, Cell.DEAD, Cell.DEAD, Cell.ALIVE, Cell.ALIVE, Cell.DEAD]
    grid = Grid.from_cells(cells, 2, 3)
    assert [grid.get(r, c) for r in range(2) for c in range(3)] == cells


def test_from_cells_wrong_length():
    with pytest.raises(ValueError):
        Grid.from_cells([Cell.DEAD] * 5, 2, 3)


def test_copy_is_independent():
    grid = Grid(2, 2)
    twin = grid.copy()
    assert twin == grid
    twin.set(Cell.ALIVE, 0, 0)
    assert grid.get(0, 0) is Cell.DEAD
    assert twin != grid