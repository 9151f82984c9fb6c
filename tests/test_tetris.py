import random

import pytest

from learnbox.tetris import (
    BORDER,
    FIGURE_CELL,
    FIGURES,
    FREE,
    MAP_COLS,
    MAP_LINES,
    Figure,
    TetrisGame,
)


@pytest.fixture
def game():
    return TetrisGame(random.Random(7))


@pytest.mark.parametrize("index", range(len(FIGURES)))
def test_four_rotations_restore_figure(index):
    figure = Figure(3, 4, FIGURES[index])
    turned = figure.rotated().rotated().rotated().rotated()
    assert turned.cells == figure.cells
    assert (turned.x, turned.y) == (3, 4)


def test_rotating_line_makes_column():
    turned = Figure(1, 1, FIGURES[6]).rotated()
    assert turned.cells == ((0, 0, 3, 0),) * 4


@pytest.mark.parametrize("index", range(len(FIGURES)))
def test_half_turn_reverses_rows_and_columns(index):
    figure = Figure(0, 0, FIGURES[index])
    half = figure.rotated().rotated()
    assert half.cells == tuple(tuple(reversed(row)) for row in reversed(figure.cells))


def test_field_has_border_and_empty_interior(game):
    for y, row in enumerate(game.grid):
        for x, value in enumerate(row):
            edge = x in (0, MAP_COLS - 1) or y in (0, MAP_LINES - 1)
            assert value == (BORDER if edge else FREE)


def test_new_figure_starts_at_top_inside_field(game):
    assert game.current.y == 0
    assert 1 <= game.current.x <= MAP_COLS - game.current.size - 1
    assert game.current.cells in FIGURES


def test_new_iteration_uses_previewed_figure(game):
    expected = game.next_index
    game.new_iteration()
    assert game.current.cells == FIGURES[expected]
    assert game.preview.cells == FIGURES[game.next_index]


def test_advance_moves_down_without_landing(game):
    start = game.current.y
    assert game.advance(0, 1) is False
    assert game.current.y == start + 1


def test_figure_lands_on_floor(game):
    landed = False
    for _ in range(MAP_LINES):
        if game.advance(0, 1):
            landed = True
            break
    assert landed
    lowest = max(y for y, _, _ in game.current.occupied())
    assert lowest == MAP_LINES - 2


def test_figure_to_map_writes_blocks(game):
    while not game.advance(0, 1):
        pass
    game.figure_to_map(game.current)
    placed = sum(value == FIGURE_CELL for row in game.grid for value in row)
    expected = sum(1 for _ in game.current.occupied())
    assert placed == expected
    for y, x, _ in game.current.occupied():
        assert game.grid[y][x] == FIGURE_CELL


def test_collision_pushes_figure_back_from_right_wall(game):
    start_x = MAP_COLS - 4
    figure = Figure(start_x, 5, FIGURES[6])
    game.check_collision(figure, 1)
    assert figure.x == start_x - 1


def test_rotate_applies_free_rotation(game):
    game.current = Figure(10, 5, FIGURES[1])
    expected = game.current.rotated().cells
    game.rotate()
    assert game.current.cells == expected


def test_rotate_refused_when_rotated_figure_would_land(game):
    game.current = Figure(10, 5, FIGURES[1])
    for x in range(10, 14):
        game.grid[9][x] = FIGURE_CELL
    game.rotate()
    assert game.current.cells == FIGURES[1]


def test_game_over_requires_all_top_rows(game):
    assert game.is_game_over() is False
    for y in range(1, 4):
        game.grid[y][5] = FIGURE_CELL
    assert game.is_game_over() is False
    game.grid[4][5] = FIGURE_CELL
    assert game.is_game_over() is True