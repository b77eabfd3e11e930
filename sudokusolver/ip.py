#!/usr/bin/env python

"""
sudokusolver/ip.py

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

**Solving via integer programming, as a cross-check.**

Integer programming is close to magic. You say "here are my constraints; go"
and a few milliseconds later you have a valid answer (or are told there isn't
one). That makes it a good independent referee for the propagate/backtrack
engine.

"""

import logging
from typing import List, Optional, Sequence

from mip import BINARY, Model, OptimizationStatus, xsum

from sudokusolver.common import (
    ALMOST_ONE,
    debug_model_constraints,
    debug_model_vars,
    N,
    RANK,
    UNKNOWN,
)
from sudokusolver.solver import solve

log = logging.getLogger(__name__)


def solve_ip(grid: Sequence[Sequence[int]]) -> Optional[List[List[int]]]:
    """
    Solves a puzzle with a binary integer programming model.

    Args:
        grid: ``grid[row_zb][col_zb]``, 0 for unknown

    Returns:
        the solved grid, or ``None`` if the model is infeasible
    """
    m = Model("Sudoku solver")
    m.verbose = 0

    # -------------------------------------------------------------------------
    # Variables
    # -------------------------------------------------------------------------
    x = [
        [
            [
                m.add_var(f"x(row={r + 1}, col={c + 1}, digit={d + 1})",
                          var_type=BINARY)
                for d in range(N)
            ] for c in range(N)
        ] for r in range(N)
    ]  # index as: x[row_zb][col_zb][digit_zb]

    # -------------------------------------------------------------------------
    # Constraints
    # -------------------------------------------------------------------------
    # One digit per cell
    for r in range(N):
        for c in range(N):
            m += xsum(x[r][c][d] for d in range(N)) == 1
    for d in range(N):
        # One of each digit per row
        for r in range(N):
            m += xsum(x[r][c][d] for c in range(N)) == 1
        # One of each digit per column
        for c in range(N):
            m += xsum(x[r][c][d] for r in range(N)) == 1
    # One of each digit in each 3x3 box:
    for d in range(N):
        for box_row in range(RANK):
            for box_col in range(RANK):
                row_base = box_row * RANK
                col_base = box_col * RANK
                m += xsum(
                    x[row_base + row_offset][col_base + col_offset][d]
                    for row_offset in range(RANK)
                    for col_offset in range(RANK)
                ) == 1
    # Starting values
    for r in range(N):
        for c in range(N):
            if grid[r][c] != UNKNOWN:
                m += x[r][c][grid[r][c] - 1] == 1

    # -------------------------------------------------------------------------
    # Solve
    # -------------------------------------------------------------------------
    debug_model_constraints(m)
    status = m.optimize()
    if status == OptimizationStatus.INFEASIBLE or not m.num_solutions:
        log.debug(f"No integer programming solution (status {status})")
        return None

    # -------------------------------------------------------------------------
    # Read out answers
    # -------------------------------------------------------------------------
    debug_model_vars(m)
    solution = [[UNKNOWN] * N for _ in range(N)]
    for r in range(N):
        for c in range(N):
            for d_zb in range(N):
                if x[r][c][d_zb].x > ALMOST_ONE:
                    solution[r][c] = d_zb + 1
                    break
    return solution


def crosscheck(grid: Sequence[Sequence[int]]) -> bool:
    """
    Solves with the engine and with integer programming.

    Returns: do they agree? They must agree on whether there is a solution,
    and any engine solution must satisfy the integer programming model.
    """
    result = solve(grid)
    ip_solution = solve_ip(grid)
    ip_solved = ip_solution is not None
    if result.solved != ip_solved:
        log.error(f"Disagreement: engine solved = {result.solved}; "
                  f"integer programming solved = {ip_solved}")
        return False
    if result.solved and solve_ip(result.grid) is None:
        log.error("Engine solution rejected by integer programming model")
        return False
    log.info(f"Engine and integer programming agree: {result.status}")
    return True
