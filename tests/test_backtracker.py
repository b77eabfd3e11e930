from copy import deepcopy

import pytest

from sudokusolver.backtracker import Backtracker
from sudokusolver.board import Board
from sudokusolver.common import SolveCancelled

from conftest import is_complete_and_valid


def test_solves_without_propagation(easy, easy_solution):
    board = Board(easy)
    b = Backtracker(board)
    assert b.run()
    assert board.values == easy_solution
    assert b.backtracks > 1


def test_solves_blank_grid(blank):
    board = Board(blank)
    assert Backtracker(board).run()
    assert is_complete_and_valid(board.values)


def test_tries_nine_first(blank):
    board = Board(blank)
    Backtracker(board).run()
    # Nothing constrains the first row, so it's filled 9 down to 1.
    assert board.values[0] == [9, 8, 7, 6, 5, 4, 3, 2, 1]


def test_solved_board_needs_one_step(easy_solution):
    board = Board(easy_solution)
    b = Backtracker(board)
    assert b.run()
    assert b.backtracks == 1
    assert board.values == easy_solution


def test_impossible_puzzle_is_not_an_error(impossible):
    board = Board(impossible)
    b = Backtracker(board)
    assert not b.run()
    assert board.values == impossible


def test_solution_collapses_candidates(easy):
    board = Board(easy)
    Backtracker(board).run()
    for r in range(9):
        for c in range(9):
            assert board.candidates(r, c) == [board.values[r][c]]


def test_cancellation_restores_board(easy):
    board = Board(easy)
    before = deepcopy(board.values)
    calls = []

    def should_stop() -> bool:
        calls.append(1)
        return len(calls) > 20

    b = Backtracker(board, should_stop=should_stop)
    with pytest.raises(SolveCancelled):
        b.run()
    assert b.backtracks == 21
    assert board.values == before
