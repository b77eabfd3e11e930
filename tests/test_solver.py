from copy import deepcopy

import pytest

from sudokusolver import Board, InvalidBoardError, solve
from sudokusolver.common import SolveCancelled

from conftest import is_complete_and_valid


def test_already_solved(easy_solution):
    result = solve(easy_solution)
    assert result.solved
    assert result.grid == easy_solution
    assert result.iterations == 0
    assert result.backtracks == 0
    assert result.status == "solved"


def test_blank_grid(blank):
    result = solve(blank)
    assert result.solved
    assert is_complete_and_valid(result.grid)


def test_duplicate_given_is_rejected_before_solving(easy):
    easy[0][8] = 3  # row 1 already has a 3
    with pytest.raises(InvalidBoardError):
        solve(easy)


def test_single_gap_needs_no_backtracking(easy_solution):
    puzzle = deepcopy(easy_solution)
    puzzle[8][0] = 0
    result = solve(puzzle)
    assert result.solved
    assert result.grid == easy_solution
    assert result.backtracks == 0
    assert result.iterations >= 1


def test_hard_puzzle_needs_search(hard, hard_solution):
    result = solve(hard)
    assert result.solved
    assert result.grid == hard_solution
    assert result.backtracks > 0


def test_repeated_search_is_deterministic(easy, blank):
    for grid in (easy, blank):
        first = solve(grid, use_propagation=False)
        second = solve(grid, use_propagation=False)
        assert first.backtracks > 1
        assert second.grid == first.grid
        assert second.backtracks == first.backtracks


def test_backtracking_alone_is_complete(easy, easy_solution):
    result = solve(easy, use_propagation=False)
    assert result.solved
    assert result.iterations == 0
    assert result.grid == easy_solution


def test_propagation_alone_reports_partial_grid(hard):
    result = solve(hard, use_backtracking=False)
    assert not result.solved
    assert result.status == "not solved"
    assert result.backtracks == 0
    assert Board(result.grid).is_valid()
    assert any(0 in row for row in result.grid)


def test_impossible_puzzle(impossible):
    result = solve(impossible)
    assert not result.solved
    assert result.grid[0][8] == 0
    assert Board(result.grid).is_valid()


def test_input_is_not_modified(easy):
    before = deepcopy(easy)
    solve(easy)
    assert easy == before
    board = Board(easy)
    solve(board)
    assert board.values == before


def test_cancellation(hard):
    with pytest.raises(SolveCancelled):
        solve(hard, should_stop=lambda: True)


def test_summary(easy_solution):
    result = solve(easy_solution)
    assert result.summary().startswith(
        "Sudoku solved with 0 Iterations & 0 backtracks within ")
    assert result.summary().endswith(" ns")
    assert str(result).startswith("+-------+")
