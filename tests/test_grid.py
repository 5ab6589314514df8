import pytest

from mazegame.grid import (
    DOWN, LEFT, RIGHT, SAMPLE_LAYOUT, SAMPLE_TARGET, UP,
    FlatGrid, WallGrid, parse_direction, sample_grid,
)


def test_new_wall_grid_is_fully_walled():
    grid = WallGrid(3, 4)
    assert grid.walls.all()
    assert not grid.visited.any()
    assert grid.removed_walls() == 0
    assert grid.neighbors((1, 1)) == []


def test_remove_wall_updates_both_sides():
    grid = WallGrid(2, 2)
    grid.remove_wall((0, 0), (0, 1))
    assert not grid.has_wall((0, 0), RIGHT)
    assert not grid.has_wall((0, 1), LEFT)
    assert grid.has_wall((0, 0), DOWN)

    grid.remove_wall((1, 1), (0, 1))
    assert not grid.has_wall((1, 1), UP)
    assert not grid.has_wall((0, 1), DOWN)
    assert grid.removed_walls() == 2


def test_remove_wall_rejects_non_adjacent_cells():
    grid = WallGrid(3, 3)
    with pytest.raises(ValueError):
        grid.remove_wall((0, 0), (1, 1))


def test_wall_grid_neighbors_follow_up_right_down_left_order():
    grid = WallGrid(3, 3)
    for other in [(1, 0), (2, 1), (1, 2), (0, 1)]:
        grid.remove_wall((1, 1), other)
    assert grid.neighbors((1, 1)) == [(0, 1), (1, 2), (2, 1), (1, 0)]


def test_outer_edge_is_never_passable():
    grid = WallGrid(2, 2)
    grid.walls[0, 0, UP] = False  # hand-broken border
    assert not grid.can_move((0, 0), UP)


@pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0), (-1, 2)])
def test_grid_rejects_non_positive_dimensions(rows, cols):
    with pytest.raises(ValueError):
        WallGrid(rows, cols)


def test_flat_grid_adjacency_uses_passability():
    grid = FlatGrid([[0, 1], [0, 0]])
    assert grid.can_move((0, 0), DOWN)
    assert not grid.can_move((0, 0), RIGHT)
    assert not grid.can_move((0, 0), UP)
    assert grid.neighbors((1, 0)) == [(0, 0), (1, 1)]


def test_flat_grid_rejects_ragged_rows():
    with pytest.raises(ValueError):
        FlatGrid([[0, 0], [0]])


def test_sample_layout_shape_and_endpoints():
    grid = sample_grid()
    assert (grid.rows, grid.cols) == (len(SAMPLE_LAYOUT), len(SAMPLE_LAYOUT[0]))
    assert (grid.rows, grid.cols) == (10, 9)
    assert grid.is_open((0, 0))
    assert grid.is_open(SAMPLE_TARGET)


def test_parse_direction():
    assert parse_direction("up") == UP
    assert parse_direction("left") == LEFT
    assert parse_direction(RIGHT) == RIGHT
    with pytest.raises(ValueError):
        parse_direction("sideways")
