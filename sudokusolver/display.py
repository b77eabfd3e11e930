#!/usr/bin/env python

"""
sudokusolver/display.py

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

Text rendering of a grid.

"""

from typing import List

from sudokusolver.common import (
    DISPLAY_UNKNOWN,
    N,
    NEWLINE,
    RANK,
    SPACE,
    UNKNOWN,
)

RULE = "+-------+-------+-------+"


def format_grid(grid: List[List[int]]) -> str:
    """
    Returns a box-drawn version of the grid, with unknown cells shown as
    ``_``:

    .. code-block:: none

        +-------+-------+-------+
        | 5 3 _ | _ 7 _ | _ _ _ |
        ...
        +-------+-------+-------+
    """
    lines = [RULE]
    for row_zb in range(N):
        x = "|"
        for col_zb in range(N):
            value = grid[row_zb][col_zb]
            x += SPACE
            x += DISPLAY_UNKNOWN if value == UNKNOWN else str(value)
            if col_zb % RANK == RANK - 1:
                x += " |"
        lines.append(x)
        if row_zb % RANK == RANK - 1:
            lines.append(RULE)
    return NEWLINE.join(lines)
