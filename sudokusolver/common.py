#!/usr/bin/env python

"""
sudokusolver/common.py

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

Common constants, exceptions and functions for the Sudoku solver.

"""

import logging
import sys
import traceback
from typing import Callable

from mip import Constr, Model, Var

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

RANK = 3
N = RANK ** 2  # 9
N_CELLS = N * N  # 81

UNKNOWN = 0
DIGITS = tuple(range(1, N + 1))  # 1..9
DIGITS_DESCENDING = tuple(range(N, 0, -1))  # 9..1, the backtracking order

NEWLINE = "\n"
SPACE = " "
DISPLAY_UNKNOWN = "_"
ALMOST_ONE = 0.99

EXIT_FAILURE = 1
EXIT_SUCCESS = 0


# =============================================================================
# Exceptions
# =============================================================================

class SudokuError(Exception):
    """
    Base class for our errors.
    """
    pass


class LoadError(SudokuError, ValueError):
    """
    The puzzle text could not be read as a 9x9 grid of digits.
    """
    pass


class InvalidBoardError(SudokuError, ValueError):
    """
    The grid is the wrong shape, holds out-of-range values, or its given
    values already break the row/column/box rule.
    """
    pass


class SolveCancelled(SudokuError):
    """
    The search was asked to stop before it finished.
    """
    pass


# =============================================================================
# Functions for mip models
# =============================================================================

def debug_model_constraints(m: Model) -> None:
    """
    Shows constraints for a model.
    """
    lines = [f"Constraints in model {m.name!r}:"]
    for c in m.constrs:  # type: Constr
        lines.append(f"{c.name} == {c.expr}")
    log.debug("\n".join(lines))


def debug_model_vars(m: Model) -> None:
    """
    Show the names/values of model variables after fitting.
    """
    lines = [f"Variables in model {m.name!r}:"]
    for v in m.vars:  # type: Var
        lines.append(f"{v.name} == {v.x}")
    log.debug("\n".join(lines))


# =============================================================================
# Generic helper functions
# =============================================================================

def run_guard(function: Callable[[], None]) -> None:
    try:
        function()
    except Exception as e:
        log.critical(str(e))
        traceback.print_exc()
        sys.exit(EXIT_FAILURE)
