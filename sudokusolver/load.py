#!/usr/bin/env python

"""
sudokusolver/load.py

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

Reads puzzles from text.

The format is 81 single digits, row by row, with ``0`` for an unknown cell.
Whitespace (including newlines) between digits is ignored, so both of these
are the same puzzle:

.. code-block:: none

    530070000600195000098000060800060003400803001700020006060000280000419005000080079

    5 3 0  0 7 0  0 0 0
    6 0 0  1 9 5  0 0 0
    ...

"""

import logging
from typing import List

from sudokusolver.common import LoadError, N, N_CELLS

log = logging.getLogger(__name__)


def parse_grid(text: str) -> List[List[int]]:
    """
    Parses puzzle text into a 9x9 grid of ints.

    Args:
        text: the puzzle text

    Returns:
        ``grid[row_zb][col_zb]``, values 0-9

    Raises:
        :exc:`LoadError` for a non-digit character or too few digits.

    Anything after the 81st digit is ignored.
    """
    digits = []  # type: List[int]
    for pos, char in enumerate(text):
        if len(digits) == N_CELLS:
            break
        if char.isspace():
            continue
        if char not in "0123456789":
            raise LoadError(
                f"Bad character {char!r} at position {pos}; "
                f"only digits 0-9 and whitespace are allowed")
        digits.append(int(char))
    if len(digits) < N_CELLS:
        raise LoadError(
            f"Need {N_CELLS} digits; found only {len(digits)}")
    return [digits[row_zb * N:(row_zb + 1) * N] for row_zb in range(N)]


def load_file(filename: str) -> List[List[int]]:
    """
    Reads a puzzle from a file. See :func:`parse_grid`.
    """
    log.info(f"Reading {filename}")
    try:
        with open(filename, "rt") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Could not read {filename!r}: {e}") from e
    return parse_grid(text)
