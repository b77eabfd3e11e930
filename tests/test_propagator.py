from copy import deepcopy

from sudokusolver.board import Board
from sudokusolver.propagator import Propagator


def test_single_gap_is_filled_by_propagation(easy_solution):
    puzzle = deepcopy(easy_solution)
    puzzle[4][4] = 0
    board = Board(puzzle)
    p = Propagator(board)
    assert p.run()
    assert board.values == easy_solution
    assert p.iterations == 1
    assert p.promotions == 1


def test_first_pass_eliminates_peer_values(easy):
    board = Board(easy)
    p = Propagator(board)
    assert p.eliminate_possible_values()
    # Row 1 has 5, 3, 7; column 3 has 8; box 1 has 5, 3, 6, 9, 8.
    assert board.candidates(0, 2) == [1, 2, 4]
    # Givens are untouched.
    assert board.candidates(0, 0) == [5]


def test_propagation_preserves_validity(easy, hard):
    for grid in (easy, hard):
        board = Board(grid)
        Propagator(board).run()
        assert board.is_valid()
        for r in range(9):
            for c in range(9):
                if grid[r][c]:
                    assert board.values[r][c] == grid[r][c]


def test_propagation_alone_leaves_hard_puzzle_unsolved(hard):
    board = Board(hard)
    p = Propagator(board)
    assert not p.run()
    assert board.has_empty_cell()
    assert board.is_valid()


def test_propagation_is_idempotent(easy, hard):
    for grid in (easy, hard):
        board = Board(grid)
        Propagator(board).run()
        values = deepcopy(board.values)
        possible = deepcopy(board.possible)
        again = Propagator(board)
        again.run()
        assert again.iterations == 0
        assert again.promotions == 0
        assert board.values == values
        assert board.possible == possible


def test_propagation_is_monotonic(hard):
    board = Board(hard)
    p = Propagator(board)
    previous_values = deepcopy(board.values)
    previous_possible = deepcopy(board.possible)
    while p.eliminate_possible_values():
        p.check_for_single_possible_values()
        for r in range(9):
            for c in range(9):
                if previous_values[r][c]:
                    assert board.values[r][c] == previous_values[r][c]
                for d_zb in range(9):
                    if not previous_possible[r][c][d_zb]:
                        assert not board.possible[r][c][d_zb]
        previous_values = deepcopy(board.values)
        previous_possible = deepcopy(board.possible)


def test_blank_grid_is_a_fixed_point(blank):
    board = Board(blank)
    p = Propagator(board)
    assert not p.run()
    assert p.iterations == 0
    assert board.n_unknown_cells() == 81


def test_impossible_cell_loses_all_candidates(impossible):
    board = Board(impossible)
    Propagator(board).run()
    assert board.values[0][8] == 0
    assert board.candidates(0, 8) == []
    assert board.is_valid()


def test_clashing_singletons_are_not_both_committed(blank):
    # Two cells in row 1 that could each only be 9.
    blank[0] = [1, 2, 3, 4, 5, 6, 7, 0, 0]
    board = Board(blank)
    for c in (7, 8):
        for d in range(1, 9):
            board.remove_candidate(0, c, d)
    p = Propagator(board)
    assert p.check_for_single_possible_values() == 1
    assert board.values[0][7] == 9
    assert board.values[0][8] == 0
    assert board.is_valid()
