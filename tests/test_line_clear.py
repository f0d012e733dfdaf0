from __future__ import annotations

from blockfall.board import WIDTH, Board

RED = (255, 0, 0)


def _fill_row(board: Board, y: int, skip: tuple[int, ...] = ()) -> None:
    for x in range(WIDTH):
        if x not in skip:
            board.set_cell(x, y, RED)


def test_split_full_rows_compact_in_one_pass() -> None:
    board = Board()
    _fill_row(board, 0)
    _fill_row(board, 2)
    board.set_cell(0, 1, RED)
    board.set_cell(5, 1, RED)
    board.set_cell(2, 3, RED)
    board.set_cell(7, 5, RED)

    assert board.clear_full_rows() == 2
    assert board.positions() == {(0, 0), (5, 0), (2, 1), (7, 3)}


def test_no_full_rows_leaves_board_untouched() -> None:
    board = Board()
    _fill_row(board, 0, skip=(9,))
    board.set_cell(3, 4, RED)
    before = board.positions()
    assert board.clear_full_rows() == 0
    assert board.positions() == before


def test_four_stacked_rows_clear_together() -> None:
    board = Board()
    for y in range(4):
        _fill_row(board, y)
    board.set_cell(1, 4, RED)
    board.set_cell(1, 25, RED)

    assert board.clear_full_rows() == 4
    assert board.positions() == {(1, 0), (1, 21)}


def test_colours_survive_compaction() -> None:
    board = Board()
    _fill_row(board, 0)
    board.set_cell(3, 1, (0, 0, 255))
    board.clear_full_rows()
    assert board.get_cell(3, 0) == (0, 0, 255)
    assert board.get_cell(3, 1) is None
