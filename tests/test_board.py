from __future__ import annotations

import pytest

from conftest import board_from, snapshot
from connect_four.core.board import Board
from connect_four.errors import ColumnFullError, InvalidColumnError, InvalidPositionError


def test_new_board_is_empty():
    b = Board()
    assert (b.rows, b.cols) == (6, 7)
    assert all(cell is None for row in b.grid for cell in row)
    assert not b.is_full()


@pytest.mark.parametrize("col", range(7))
def test_column_fills_bottom_up_then_rejects(col):
    b = Board()
    rows = [b.drop_token(col, i % 2) for i in range(b.rows)]
    assert rows == [5, 4, 3, 2, 1, 0]
    assert all(b.cell_at(r, col) is not None for r in range(b.rows))

    before = snapshot(b)
    with pytest.raises(ColumnFullError) as exc:
        b.drop_token(col, 0)
    assert exc.value.column == col
    assert b.grid == before


def test_drop_records_slot():
    b = Board()
    b.drop_token(3, 1)
    assert b.cell_at(5, 3) == 1
    assert b.cell_at(4, 3) is None


@pytest.mark.parametrize("col", [-1, 7, 100])
def test_drop_out_of_range(col):
    b = Board()
    with pytest.raises(InvalidColumnError):
        b.drop_token(col, 0)
    assert b.grid == Board().grid


@pytest.mark.parametrize("row, col", [(-1, 0), (6, 0), (0, -1), (0, 7)])
def test_cell_at_out_of_range(row, col):
    with pytest.raises(InvalidPositionError):
        Board().cell_at(row, col)


def test_invalid_position_is_an_index_error():
    with pytest.raises(IndexError):
        Board().cell_at(9, 9)


def test_is_full_checks_top_row():
    b = board_from(
        "XOXOXOX",
        "XOXOXOX",
        "OXOXOXO",
        "OXOXOXO",
        "XOXOXOX",
        "XOXOXOX",
    )
    assert b.is_full()


def test_one_open_column_is_not_full():
    b = board_from(
        "XOXOXO.",
        "XOXOXOX",
        "OXOXOXO",
        "OXOXOXO",
        "XOXOXOX",
        "XOXOXOX",
    )
    assert not b.is_full()
    assert b.cell_at(0, 6) is None


def test_grid_with_floating_token_is_rejected():
    with pytest.raises(ValueError):
        board_from(
            ".......",
            ".......",
            ".......",
            "...X...",
            ".......",
            ".......",
        )


def test_grid_with_wrong_shape_is_rejected():
    with pytest.raises(ValueError):
        Board(rows=6, cols=7, grid=[[None] * 7 for _ in range(5)])


def test_smaller_board_is_supported():
    b = Board(rows=4, cols=5)
    assert [b.drop_token(4, 0) for _ in range(4)] == [3, 2, 1, 0]
    with pytest.raises(ColumnFullError):
        b.drop_token(4, 1)
    with pytest.raises(InvalidColumnError):
        b.drop_token(5, 1)


@pytest.mark.parametrize("col", [2.5, 2.0, "3", "a", None, True, False])
def test_drop_non_integer_column(col):
    b = Board()
    with pytest.raises(InvalidColumnError) as exc:
        b.drop_token(col, 0)
    assert exc.value.column == col
    assert b.grid == Board().grid


@pytest.mark.parametrize("row, col", [("a", 0), (0, "a"), (1.0, 0), (None, 0), (0, True)])
def test_cell_at_non_integer_position(row, col):
    b = Board()
    assert not b.in_bounds(row, col)
    with pytest.raises(InvalidPositionError):
        b.cell_at(row, col)


@pytest.mark.parametrize("slot", [2, -1, 5, None, "X", True])
def test_drop_unknown_slot_is_rejected(slot):
    b = Board()
    with pytest.raises(ValueError):
        b.drop_token(0, slot)
    assert b.grid == Board().grid


def test_copy_is_independent():
    b = Board()
    b.drop_token(0, 0)
    dup = b.copy()
    dup.drop_token(0, 1)
    assert b.cell_at(4, 0) is None
    assert dup.cell_at(4, 0) == 1
    assert dup.cell_at(5, 0) == 0
