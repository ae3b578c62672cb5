import pytest

from lifeterm.grid import Grid


def _all_cells(grid):
    return [grid[(x, y)] for y in range(grid.height) for x in range(grid.width)]


def test_alone_cells_should_die():
    grid = Grid(100, 100)
    for index in [(0, 0), (5, 5), (99, 99), (0, 50), (50, 0)]:
        grid.toggle_cell(index)

    grid.next_generation()

    assert grid.population == 0
    assert _all_cells(grid) == [False] * 10000


def test_cells_with_one_neighbor_should_die():
    grid = Grid(100, 100)
    alive = [(0, 0), (0, 1), (5, 0), (5, 1), (98, 98), (99, 99)]
    for index in alive:
        grid.toggle_cell(index)

    grid.next_generation()

    assert grid.population == 0
    for index in alive:
        assert grid[index] is False


def test_blinker():
    grid = Grid(100, 100)
    for index in [(10, 10), (10, 11), (10, 12)]:
        grid.toggle_cell(index)

    grid.next_generation()
    assert grid.population == 3

    for index in [(9, 11), (10, 11), (11, 11)]:
        assert grid[index] is True
    assert grid[(10, 10)] is False
    assert grid[(10, 12)] is False


def test_blinker_returns_after_two_generations():
    grid = Grid(20, 20)
    start = [(10, 10), (10, 11), (10, 12)]
    for index in start:
        grid.toggle_cell(index)

    grid.next_generation()
    grid.next_generation()

    assert grid.generation == 2
    assert grid.population == 3
    assert [index for index in start if grid[index]] == start


def test_block_is_stable():
    grid = Grid(10, 10)
    block = [(0, 0), (0, 1), (1, 0), (1, 1)]
    for index in block:
        grid.toggle_cell(index)

    grid.next_generation()

    assert grid.population == 4
    assert all(grid[index] for index in block)


def test_toggle_cell_tracks_population():
    grid = Grid(5, 5)
    grid.toggle_cell((2, 3))
    assert grid[(2, 3)] is True
    assert grid.population == 1
    grid.toggle_cell((2, 3))
    assert grid[(2, 3)] is False
    assert grid.population == 0


def test_setitem_does_not_touch_population():
    grid = Grid(4, 3)
    grid[(3, 2)] = True
    assert grid[(3, 2)] is True
    assert grid.population == 0


def test_new_grid_is_empty():
    grid = Grid(7, 3)
    assert grid.generation == 0
    assert grid.population == 0
    assert _all_cells(grid) == [False] * 21


@pytest.mark.parametrize("index", [(5, 0), (0, 5), (-1, 0), (0, -1)])
def test_out_of_bounds_index_raises(index):
    grid = Grid(5, 5)
    with pytest.raises(IndexError):
        grid[index]
    with pytest.raises(IndexError):
        grid.toggle_cell(index)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Grid(-1, 3)