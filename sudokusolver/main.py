#!/usr/bin/env python

"""
sudokusolver/main.py

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

**Solves Sudoku puzzles from the command line.**

"""

import argparse
import logging
import sys
from typing import List, Optional

from cardinal_pythonlib.argparse_func import RawDescriptionArgumentDefaultsHelpFormatter  # noqa
from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from sudokusolver.board import Board
from sudokusolver.common import EXIT_FAILURE, EXIT_SUCCESS, run_guard
from sudokusolver.ip import crosscheck
from sudokusolver.load import load_file, parse_grid
from sudokusolver.memstats import MemStatsReporter
from sudokusolver.solver import solve

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

DEMO_SUDOKU_1 = """
5 3 0  0 7 0  0 0 0
6 0 0  1 9 5  0 0 0
0 9 8  0 0 0  0 6 0

8 0 0  0 6 0  0 0 3
4 0 0  8 0 3  0 0 1
7 0 0  0 2 0  0 0 6

0 6 0  0 0 0  2 8 0
0 0 0  4 1 9  0 0 5
0 0 0  0 8 0  0 7 9
"""

DEFAULT_MATRIX_FILE = "matrix.txt"


# =============================================================================
# Argument types
# =============================================================================

def positive_float(value: str) -> float:
    """
    ``argparse`` argument type that checks that its value is a float greater
    than zero.
    """
    try:
        fvalue = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a number")
    if fvalue <= 0:
        raise argparse.ArgumentTypeError(f"{value!r} is not positive")
    return fvalue


# =============================================================================
# main
# =============================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """
    Command-line entry point.
    """
    cmd_crosscheck = "crosscheck"
    cmd_demo = "demo"
    cmd_solve = "solve"

    help_matrix_file = (
        "Puzzle filename to read. Must contain 81 digits (0 for unknown), "
        "in format as above.")

    parser = argparse.ArgumentParser(
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter,
        description=(
            f"Solve Sudoku puzzles by constraint propagation and "
            f"backtracking. Format is:\n"
            f"{DEMO_SUDOKU_1}"
        )
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Be verbose")
    subparsers = parser.add_subparsers(
        dest="command",
        help="Append --help for more help")

    parser_solve = subparsers.add_parser(cmd_solve, help="Solve from a file")
    parser_solve.add_argument(
        "--matrix-file", type=str, default=DEFAULT_MATRIX_FILE,
        help=help_matrix_file)
    parser_solve.add_argument(
        "--no-propagation", action="store_true",
        help="Skip constraint propagation")
    parser_solve.add_argument(
        "--no-backtracking", action="store_true",
        help="Skip backtracking (the puzzle may be left unsolved)")
    parser_solve.add_argument(
        "--memstats", action="store_true",
        help="Report memory use periodically while solving")
    parser_solve.add_argument(
        "--memstats-interval", type=positive_float, default=1.0,
        help="Seconds between memory reports")

    parser_crosscheck = subparsers.add_parser(
        cmd_crosscheck,
        help="Solve from a file, and check the answer against integer "
             "programming")
    parser_crosscheck.add_argument(
        "--matrix-file", type=str, default=DEFAULT_MATRIX_FILE,
        help=help_matrix_file)

    _parser_demo = subparsers.add_parser(cmd_demo, help="Run demo")

    args = parser.parse_args(argv)
    main_only_quicksetup_rootlogger(level=logging.DEBUG if args.verbose
                                    else logging.INFO)

    if not args.command:
        print("Must specify command")
        sys.exit(EXIT_FAILURE)
    if args.command == cmd_demo:
        grid = parse_grid(DEMO_SUDOKU_1)
    else:
        grid = load_file(args.matrix_file)
    board = Board(grid)
    board.validate()
    log.info(f"Initial Sudoku:\n{board}")

    if args.command == cmd_crosscheck:
        agreed = crosscheck(grid)
        sys.exit(EXIT_SUCCESS if agreed else EXIT_FAILURE)

    use_propagation = True
    use_backtracking = True
    reporter = None  # type: Optional[MemStatsReporter]
    if args.command == cmd_solve:
        use_propagation = not args.no_propagation
        use_backtracking = not args.no_backtracking
        if args.memstats:
            reporter = MemStatsReporter(interval=args.memstats_interval)
            reporter.start()
    try:
        result = solve(board,
                       use_propagation=use_propagation,
                       use_backtracking=use_backtracking)
    finally:
        if reporter is not None:
            reporter.stop()

    log.info(result.summary())
    log.info(f"Answer:\n{result}")
    if not result.solved:
        log.error("Unable to solve!")
    sys.exit(EXIT_SUCCESS)


def entry_point() -> None:
    run_guard(main)


# =============================================================================
# Command-line entry point
# =============================================================================

if __name__ == "__main__":
    entry_point()
