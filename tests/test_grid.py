import pytest

from gridpath.core.types import Grid, GridError, OPEN, WALL


def test_empty_grid_defaults():
    g = Grid.empty()
    assert (g.rows, g.cols) == (20, 20)
    assert g.start == (0, 0)
    assert g.goal == (19, 19)
    assert g.walls() == set()


def test_neighbors_order_and_bounds():
    g = Grid.empty(3, 3)
    assert g.neighbors((1, 1)) == [(0, 1), (2, 1), (1, 0), (1, 2)]
    assert g.neighbors((0, 0)) == [(1, 0), (0, 1)]


def test_neighbors_skip_walls():
    g = Grid.empty(3, 3)
    g.set_wall((0, 1))
    g.set_wall((1, 0))
    assert g.neighbors((1, 1)) == [(2, 1), (1, 2)]


def test_dead_end_has_no_neighbors():
    g = Grid.empty(3, 3, start=(2, 2), goal=(0, 2))
    g.set_wall((0, 1))
    g.set_wall((1, 0))
    assert g.neighbors((0, 0)) == []


def test_toggle_wall():
    g = Grid.empty(4, 4)
    assert g.toggle_wall((1, 2)) is True
    assert g.is_block((1, 2))
    assert g.toggle_wall((1, 2)) is True
    assert not g.is_block((1, 2))


def test_start_and_goal_cannot_be_walled():
    g = Grid.empty(4, 4)
    assert g.toggle_wall(g.start) is False
    assert g.set_wall(g.goal) is False
    assert not g.is_block(g.start)
    assert not g.is_block(g.goal)


def test_toggle_out_of_bounds_raises():
    g = Grid.empty(4, 4)
    with pytest.raises(GridError):
        g.toggle_wall((4, 0))
    with pytest.raises(GridError):
        g.set_wall((-1, 2))


def test_clear_walls():
    g = Grid.empty(4, 4)
    for c in [(0, 1), (1, 1), (2, 2)]:
        g.set_wall(c)
    assert g.walls() == {(0, 1), (1, 1), (2, 2)}
    g.clear_walls()
    assert g.walls() == set()
    assert all(v == OPEN for row in g.cells for v in row)


def test_copy_is_independent():
    g = Grid.empty(4, 4)
    dup = g.copy()
    dup.set_wall((1, 1))
    assert g.cells[1][1] == OPEN
    assert dup.cells[1][1] == WALL


@pytest.mark.parametrize("grid", [
    Grid(0, 3, [], (0, 0), (0, 1)),
    Grid(2, 2, [[0, 0]], (0, 0), (1, 1)),
    Grid.empty(3, 3, start=(3, 0)),
    Grid.empty(3, 3, goal=(0, -1)),
    Grid.empty(3, 3, start=(1, 1), goal=(1, 1)),
    Grid(2, 2, [[1, 0], [0, 0]], (0, 0), (1, 1)),
    Grid(2, 2, [[0, 0], [0, 1]], (0, 0), (1, 1)),
])
def test_validate_rejects_bad_input(grid):
    with pytest.raises(GridError):
        grid.validate()


def test_validate_accepts_good_grid():
    Grid.empty(2, 1).validate()


def test_list_coordinates_become_tuples():
    g = Grid(3, 3, [[0] * 3 for _ in range(3)], [0, 0], [2, 2])
    assert g.start == (0, 0)
    assert g.goal == (2, 2)
    assert g.set_wall((0, 0)) is False
    assert g.toggle_wall((2, 2)) is False
    assert not g.is_block((0, 0))
    g.validate()


@pytest.mark.parametrize("start", [("0", "0"), (0.0, 0.0), (None, 0), (0, 0, 0), (True, 0), 5])
def test_validate_rejects_non_int_coordinates(start):
    g = Grid(3, 3, [[0] * 3 for _ in range(3)], start, (2, 2))
    with pytest.raises(GridError):
        g.validate()
