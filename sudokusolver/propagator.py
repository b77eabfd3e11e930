#!/usr/bin/env python

"""
sudokusolver/propagator.py

===============================================================================

    Copyright (C) 2019-2019 Rudolf Cardinal (rudolf@pobox.com).

    This is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This software is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this software. If not, see <http://www.gnu.org/licenses/>.

===============================================================================

**Constraint propagation: eliminate the impossible, never guess.**

Tactics:

1.  For each unknown cell, try each remaining candidate in turn. If placing it
    would break the Sudoku rule, it can never go there: remove it.

2.  Where only one candidate is left for a cell, commit it.

3.  Repeat until a full elimination pass removes nothing.

This only narrows things down. It can't tell that a puzzle is impossible, and
it may stop with cells still unknown; that's the backtracker's job.

"""

import logging

from sudokusolver.board import Board
from sudokusolver.common import N, UNKNOWN

log = logging.getLogger(__name__)


class Propagator(object):
    """
    Runs candidate elimination and single-candidate promotion on a board, in
    place.
    """
    def __init__(self, board: Board) -> None:
        self.board = board
        self.iterations = 0
        self.promotions = 0

    def eliminate_possible_values(self) -> bool:
        """
        Removes every candidate that conflicts with the committed values.
        Each candidate is tried tentatively and always taken back out again.

        Returns: anything eliminated?
        """
        board = self.board
        eliminated = False
        for r in range(N):
            for c in range(N):
                if board.values[r][c] != UNKNOWN:
                    continue
                for d in board.candidates(r, c):
                    with board.trial(r, c, d) as t:
                        if not t.acceptable():
                            board.remove_candidate(r, c, d)
                            eliminated = True
                            log.debug(f"Eliminating {d} from "
                                      f"(row={r + 1}, col={c + 1})")
        return eliminated

    def check_for_single_possible_values(self) -> int:
        """
        Commits the value of every unknown cell with exactly one candidate.

        A lone candidate was only checked against values committed before
        this pass. If it clashes with one promoted earlier in this pass, it's
        left uncommitted, and the next elimination pass removes it.

        Returns: the number of cells committed.
        """
        board = self.board
        n_promoted = 0
        for r in range(N):
            for c in range(N):
                if board.values[r][c] != UNKNOWN:
                    continue
                digits = board.candidates(r, c)
                if len(digits) != 1:
                    continue
                d = digits[0]
                with board.trial(r, c, d) as t:
                    if t.acceptable():
                        t.keep()
                if t.kept:
                    board.commit(r, c, d)
                    n_promoted += 1
                    log.debug(f"(row={r + 1}, col={c + 1}) must be {d}")
        self.promotions += n_promoted
        return n_promoted

    def run(self) -> bool:
        """
        Eliminates and promotes until nothing more can be eliminated.

        Returns: solved?
        """
        while self.eliminate_possible_values():
            self.iterations += 1
            n_promoted = self.check_for_single_possible_values()
            log.debug(
                f"Iteration {self.iterations}: promoted {n_promoted} cell(s). "
                f"Unsolved cells: {self.board.n_unknown_cells()}")
            if self.board.is_solved():
                break
        return self.board.is_solved()
