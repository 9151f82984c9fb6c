import random

import pytest

from learnbox.tetris_classic import (
    COLS,
    LINE_SCORE,
    ROWS,
    SHAPES,
    START_TIMER_US,
    TIMER_STEP_US,
    Board,
    Shape,
)


@pytest.fixture
def board():
    return Board(random.Random(3))


@pytest.mark.parametrize("cells", SHAPES)
def test_four_rotations_restore_shape(cells):
    shape = Shape(cells, row=2, col=4)
    assert shape.rotated().rotated().rotated().rotated() == shape


@pytest.mark.parametrize("cells", SHAPES)
def test_rotation_keeps_block_count(cells):
    shape = Shape(cells)
    assert len(list(shape.rotated().blocks())) == len(list(shape.blocks()))


def test_new_board_state(board):
    assert board.score == 0
    assert board.game_on is True
    assert board.timer_us == START_TIMER_US
    assert board.current.row == 0
    assert 0 <= board.current.col <= COLS - board.current.width
    assert board.fits(board.current)


def test_empty_phantom_rows_may_leave_table(board):
    line = SHAPES[6]
    assert board.fits(Shape(line, row=ROWS - 2, col=0)) is True
    assert board.fits(Shape(line, row=ROWS - 1, col=0)) is False


def test_filled_cell_outside_side_is_rejected(board):
    assert board.fits(Shape(SHAPES[5], row=5, col=-1)) is False
    assert board.fits(Shape(SHAPES[5], row=5, col=COLS - 1)) is False


def test_overlap_with_table_is_rejected(board):
    board.table[6][3] = 1
    assert board.fits(Shape(SHAPES[5], row=5, col=3)) is False
    assert board.fits(Shape(SHAPES[5], row=5, col=5)) is True


def test_clear_full_lines_shifts_and_scores(board):
    board.table[ROWS - 1] = [1] * COLS
    board.table[ROWS - 2][0] = 1
    assert board.clear_full_lines() == 1
    assert board.score == LINE_SCORE
    assert board.timer_us == START_TIMER_US - TIMER_STEP_US
    assert board.table[ROWS - 1] == [1] + [0] * (COLS - 1)
    assert board.table[0] == [0] * COLS


def test_clear_without_full_lines_only_speeds_up(board):
    board.table[ROWS - 1][0] = 1
    assert board.clear_full_lines() == 0
    assert board.score == 0
    assert board.timer_us == START_TIMER_US - TIMER_STEP_US
    assert board.table[ROWS - 1][0] == 1


def test_left_and_right_moves(board):
    board.current = Shape(SHAPES[5], row=3, col=4)
    board.handle("a")
    assert board.current.col == 3
    board.handle("d")
    board.handle("d")
    assert board.current.col == 5


def test_move_blocked_by_wall(board):
    board.current = Shape(SHAPES[5], row=3, col=0)
    board.handle("a")
    assert board.current.col == 0


def test_rotate_action(board):
    board.current = Shape(SHAPES[2], row=5, col=4)
    board.handle("w")
    assert board.current == Shape(SHAPES[2], row=5, col=4).rotated()


def test_down_locks_shape_at_bottom(board):
    board.current = Shape(SHAPES[5], row=ROWS - 2, col=0)
    board.handle("s")
    assert sum(map(sum, board.table)) == 4
    assert board.table[ROWS - 1][0] == 1
    assert board.table[ROWS - 2][1] == 1
    assert board.current.row == 0


def test_down_moves_shape_when_free(board):
    board.current = Shape(SHAPES[5], row=3, col=2)
    board.handle("s")
    assert board.current.row == 4
    assert sum(map(sum, board.table)) == 0


def test_spawn_on_full_table_ends_game(board):
    board.table = [[1] * COLS for _ in range(ROWS)]
    board.spawn()
    assert board.game_on is False


def test_render_shows_shape_and_score(board):
    text = board.render()
    rows = text.split("\n")[:ROWS]
    assert all(len(row) == 2 * COLS for row in rows)
    assert text.count("O") == len(list(board.current.blocks()))
    assert text.endswith("\nScore: 0\n")
    assert text.count(".") + text.count("O") == ROWS * COLS