#!/usr/bin/env python

"""
sudokusolver/solver.py

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

**Runs the propagator, then the backtracker.**

"""

import logging
import time
from typing import Callable, List, Optional, Sequence, Union

from sudokusolver.backtracker import Backtracker
from sudokusolver.board import Board
from sudokusolver.display import format_grid
from sudokusolver.propagator import Propagator

log = logging.getLogger(__name__)


class SolveResult(object):
    """
    What came out of a solve.
    """
    def __init__(self, grid: List[List[int]], solved: bool,
                 iterations: int = 0, backtracks: int = 0,
                 duration_ns: int = 0) -> None:
        """
        Args:
            grid:
                final grid; the solution, or as far as we got
            solved:
                is ``grid`` complete and valid?
            iterations:
                propagation passes that eliminated something
            backtracks:
                calls to the backtracking search
            duration_ns:
                time spent solving, in nanoseconds
        """
        self.grid = grid
        self.solved = solved
        self.iterations = iterations
        self.backtracks = backtracks
        self.duration_ns = duration_ns

    def __str__(self) -> str:
        return format_grid(self.grid)

    @property
    def status(self) -> str:
        return "solved" if self.solved else "not solved"

    def summary(self) -> str:
        return (
            f"Sudoku {self.status} with {self.iterations} Iterations & "
            f"{self.backtracks} backtracks within {self.duration_ns} ns"
        )


def solve(puzzle: Union[Board, Sequence[Sequence[int]]],
          use_propagation: bool = True,
          use_backtracking: bool = True,
          should_stop: Optional[Callable[[], bool]] = None) -> SolveResult:
    """
    Solves a puzzle.

    Args:
        puzzle:
            a :class:`Board`, or a 9x9 grid of ints (0 for unknown). Neither
            is modified.
        use_propagation:
            run the :class:`Propagator` first?
        use_backtracking:
            if still unsolved, run the :class:`Backtracker`?
        should_stop:
            passed to the :class:`Backtracker`

    Returns:
        a :class:`SolveResult`; an impossible puzzle gives ``solved=False``

    Raises:
        :exc:`sudokusolver.common.InvalidBoardError` if the given values
        already break the rules (before any solving).
    """
    if isinstance(puzzle, Board):
        board = Board(puzzle.values)
    else:
        board = Board(puzzle)
    board.validate()
    board.reset_candidates()

    iterations = 0
    backtracks = 0
    solved = board.is_solved()
    start = time.perf_counter_ns()
    if not solved and use_propagation:
        propagator = Propagator(board)
        solved = propagator.run()
        iterations = propagator.iterations
        log.debug(f"Propagation left {board.n_unknown_cells()} cell(s) "
                  f"unknown:\n{board}")
    if not solved and use_backtracking:
        backtracker = Backtracker(board, should_stop=should_stop)
        solved = backtracker.run()
        backtracks = backtracker.backtracks
    duration_ns = time.perf_counter_ns() - start

    return SolveResult(
        grid=board.grid(),
        solved=solved,
        iterations=iterations,
        backtracks=backtracks,
        duration_ns=duration_ns,
    )
