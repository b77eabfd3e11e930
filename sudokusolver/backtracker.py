#!/usr/bin/env python

"""
sudokusolver/backtracker.py

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

**Exhaustive depth-first search.**

Strategy:

1.  If no cell is unknown, we're done.

2.  Otherwise, take the first unknown cell, scanning row by row. Try 9, then
    8, and so on down to 1. For each digit that doesn't conflict with its
    peers, search again from the slightly fuller board.

3.  If a deeper search succeeds, keep the digit. If it fails, take the digit
    back out and try the next one. If no digit works, report failure to the
    level above, which then tries its own next digit.

Every placement is undone unless it's part of the solution, so failure (or
cancellation) leaves the board as it was found.

"""

import logging
from typing import Callable, Optional

from sudokusolver.board import Board, is_acceptable_value
from sudokusolver.common import DIGITS_DESCENDING, N, SolveCancelled, UNKNOWN

log = logging.getLogger(__name__)


class Backtracker(object):
    """
    Searches for a complete assignment for a board, in place.
    """
    def __init__(self, board: Board,
                 should_stop: Optional[Callable[[], bool]] = None) -> None:
        """
        Args:
            board:
                the board to fill in
            should_stop:
                optional function, polled once per step; if it returns
                ``True``, the search raises :exc:`SolveCancelled` (and the
                board is restored)
        """
        self.board = board
        self.should_stop = should_stop
        self.backtracks = 0

    def run(self) -> bool:
        """
        Returns: solved?
        """
        solved = self._backtrack()
        log.debug(f"Backtracking {'succeeded' if solved else 'failed'} "
                  f"after {self.backtracks} steps")
        return solved

    def _backtrack(self, start: int = 0) -> bool:
        """
        One level of the search. Every cell before ``start`` (row-major
        index) is filled.
        """
        self.backtracks += 1
        if self.should_stop is not None and self.should_stop():
            raise SolveCancelled(
                f"Search cancelled after {self.backtracks} steps")
        board = self.board
        cell = board.first_empty_cell(start)
        if cell is None:
            return True
        r, c = cell
        values = board.values
        next_start = r * N + c + 1
        # Same place-check-undo as Board.trial, inlined.
        for d in DIGITS_DESCENDING:
            values[r][c] = d
            kept = False
            try:
                kept = (is_acceptable_value(values, r, c) and
                        self._backtrack(next_start))
            finally:
                if not kept:
                    values[r][c] = UNKNOWN
            if kept:
                board.commit(r, c, d)
                return True
        return False
