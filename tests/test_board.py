import pytest

from tetris_board import Board
from tetris_piece import SHAPES

from conftest import fill_rows


def test_rejects_empty_dimensions():
    with pytest.raises(ValueError):
        Board(0, 20)


def test_is_empty_bounds():
    b = Board()
    assert b.is_empty(0, 0)
    b.grid[19][9] = "#fff"
    assert not b.is_empty(19, 9)
    assert not b.is_empty(-1, 0)
    assert not b.is_empty(0, 10)
    assert not b.is_empty(20, 0)


def collision_board():
    b = Board()
    fill_rows(b, [15], skip_cols=(0, 3, 4, 8))
    b.grid[19][5] = "#0f0"
    return b


@pytest.mark.parametrize("kind,x,y,expected", [
    ("T", 0, 0, False),
    ("T", -1, 0, True),     # left arm at col -1
    ("T", 7, 0, False),
    ("T", 8, 0, True),      # right arm at col 10
    ("T", 1, 18, False),    # empty bottom shape row may hang below the board
    ("T", 1, 19, True),     # arms reach row 20
    ("T", 4, 18, True),     # arms cover the block at (19, 5)
    ("T", 6, 18, False),
    ("O", 3, 14, False),    # drops into the hole at cols 3-4
    ("O", 2, 14, True),     # col 2 of row 15 is filled
    ("O", 8, 14, True),     # col 9 of row 15 is filled
    ("O", 0, 13, False),
    ("I", 0, -1, False),    # filled row of the bar lands on row 0
    ("I", 0, 18, False),
    ("I", 0, 19, True),
    ("I", 7, 5, True),
    ("I", -1, 5, True),
])
def test_collision_cases(kind, x, y, expected):
    assert collision_board().check_collision(SHAPES[kind], x, y) is expected


def test_rows_above_board_ignore_content():
    b = Board()
    fill_rows(b, [0])
    bar = [[1], [1], [1], [1]]
    assert not b.check_collision(bar, 3, -4)
    assert b.check_collision(bar, 3, -3)
    assert b.check_collision(bar, -1, -4)
    assert b.check_collision(bar, 10, -4)


def test_bottom_is_enforced():
    b = Board()
    assert not b.check_collision(SHAPES["O"], 0, 18)
    assert b.check_collision(SHAPES["O"], 0, 19)


def test_lock_skips_cells_outside():
    b = Board()
    b.lock_shape(SHAPES["O"], 9, -1, "#ff0")
    assert b.grid[0][9] == "#ff0"
    assert sum(cell is not None for row in b.grid for cell in row) == 1


def test_lock_writes_color():
    b = Board()
    b.lock_shape(SHAPES["T"], 2, 5, "#f0f")
    assert b.grid[5][3] == "#f0f"
    assert [b.grid[6][x] for x in (2, 3, 4)] == ["#f0f"] * 3
    assert b.grid[5][2] is None


def test_sweep_two_separate_rows():
    b = Board()
    for y in range(b.rows):
        b.grid[y][y % b.cols] = f"r{y}"
    fill_rows(b, [5, 9], color="full")
    before = [row[:] for row in b.grid]

    assert b.sweep_completed_rows() == 2
    assert len(b.grid) == 20 and all(len(row) == 10 for row in b.grid)
    assert b.grid[0] == [None] * 10 and b.grid[1] == [None] * 10
    for y in range(5):
        assert b.grid[y + 2] == before[y]
    for y in range(6, 9):
        assert b.grid[y + 1] == before[y]
    for y in range(10, 20):
        assert b.grid[y] == before[y]


def test_sweep_adjacent_rows_rechecks_index():
    b = Board()
    fill_rows(b, [16, 17, 18, 19])
    b.grid[15][0] = "top"
    assert b.sweep_completed_rows() == 4
    assert b.grid[19][0] == "top"
    assert sum(cell is not None for row in b.grid for cell in row) == 1


def test_sweep_nothing():
    b = Board()
    fill_rows(b, [19], skip_cols=(4,))
    assert b.sweep_completed_rows() == 0


def test_drop_row():
    b = Board()
    fill_rows(b, [12], skip_cols=())
    assert b.drop_row(SHAPES["O"], 4, 0) == 10
