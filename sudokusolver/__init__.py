"""
Sudoku solving by constraint propagation and backtracking.
"""

from sudokusolver.board import Board, is_acceptable_value  # noqa
from sudokusolver.common import (  # noqa
    InvalidBoardError,
    LoadError,
    SolveCancelled,
    SudokuError,
)
from sudokusolver.solver import SolveResult, solve  # noqa

__version__ = "1.0.0"
