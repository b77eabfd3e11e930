#!/usr/bin/env python

"""
sudokusolver/board.py

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

**The Sudoku board: committed values, candidates, and the validity check.**

Two structures are held together:

- the committed grid, ``values[row_zb][col_zb]``, with 0 for unknown;

- the candidates, ``possible[row_zb][col_zb][digit_zb]``, a boolean per
  digit (``digit_zb`` is the digit minus one).

A committed cell has exactly its own digit as a candidate. An unknown cell
starts with all nine, and the propagator removes them.

"""

from contextlib import contextmanager
from copy import deepcopy
import logging
from typing import Generator, List, Optional, Sequence, Tuple

from sudokusolver.common import (
    DIGITS,
    InvalidBoardError,
    N,
    RANK,
    UNKNOWN,
)
from sudokusolver.display import format_grid
from sudokusolver.load import parse_grid

log = logging.getLogger(__name__)


# =============================================================================
# Box
# =============================================================================

class Box(object):
    """
    Represents a 3x3 box within the Sudoku grid.
    """
    def __init__(self, box_zb: int) -> None:
        """
        Boxes are numbered 0-8, left to right, then top to bottom.

        Args:
            box_zb: box number, as above; zero-based
        """
        assert 0 <= box_zb < N, (
            f"box_zb was {box_zb}; must be in range 0 to {N - 1} inclusive"
        )
        self.box_zb = box_zb

    def __str__(self) -> str:
        """
        Coordinate-based description for a 3x3 box.
        """
        return f"{{{self.boxrow + 1},{self.boxcol + 1}}}"

    def __repr__(self) -> str:
        return self.__str__()

    def __eq__(self, other: "Box") -> bool:
        return self.box_zb == other.box_zb

    @property
    def boxrow(self) -> int:
        """
        Zero-based row number of the box (not its cells).
        """
        return self.box_zb // RANK

    @property
    def boxcol(self) -> int:
        """
        Zero-based column number of the box (not its cells).
        """
        return self.box_zb % RANK

    def top_left_cell(self) -> Tuple[int, int]:
        """
        Returns ``row_zb, col_zb`` for the top-left cell in the 3x3 box.
        """
        return self.boxrow * RANK, self.boxcol * RANK

    @classmethod
    def containing(cls, row_zb: int, col_zb: int) -> "Box":
        """
        Returns the box containing this cell.
        """
        assert 0 <= row_zb < N
        assert 0 <= col_zb < N
        return cls(box_zb=(row_zb // RANK) * RANK + col_zb // RANK)

    def gen_cells(self) -> Generator[Tuple[int, int], None, None]:
        """
        Generates ``(row_zb, col_zb)`` tuples for all the cells in this box.
        """
        row_min, col_min = self.top_left_cell()
        for r in range(row_min, row_min + RANK):
            for c in range(col_min, col_min + RANK):
                yield r, c


# =============================================================================
# The validity check
# =============================================================================

def _peers(row_zb: int, col_zb: int) -> Tuple[Tuple[int, int], ...]:
    """
    The 20 other cells sharing a row, column, or box with this one.
    """
    cells = [(row_zb, c) for c in range(N) if c != col_zb]
    cells += [(r, col_zb) for r in range(N) if r != row_zb]
    cells += [
        (r, c) for r, c in Box.containing(row_zb, col_zb).gen_cells()
        if r != row_zb and c != col_zb
    ]
    return tuple(cells)


PEERS = [
    [_peers(r, c) for c in range(N)] for r in range(N)
]  # index as: PEERS[row_zb][col_zb]


def is_acceptable_value(grid: Sequence[Sequence[int]],
                        row_zb: int, col_zb: int) -> bool:
    """
    Is the value in this cell free of conflict with its peers?

    An unknown cell is always acceptable. Otherwise, no other cell in the same
    row, column, or 3x3 box may hold the same digit.

    This is the only definition of "conflict"; the propagator and the
    backtracker both use it.
    """
    value = grid[row_zb][col_zb]
    if value == UNKNOWN:
        return True
    for r, c in PEERS[row_zb][col_zb]:
        if grid[r][c] == value:
            return False
    return True


# =============================================================================
# Trial
# =============================================================================

class Trial(object):
    """
    Handle for a value tentatively placed by :meth:`Board.trial`.
    """
    def __init__(self, board: "Board", row_zb: int, col_zb: int,
                 value: int) -> None:
        self.board = board
        self.row_zb = row_zb
        self.col_zb = col_zb
        self.value = value
        self.kept = False

    def acceptable(self) -> bool:
        """
        Is the tentative value free of conflict?
        """
        return self.board.is_acceptable_value(self.row_zb, self.col_zb)

    def keep(self) -> None:
        """
        Don't undo the value when the trial ends.
        """
        self.kept = True


# =============================================================================
# Board
# =============================================================================

class Board(object):
    """
    A 9x9 Sudoku grid plus the candidates for each cell.
    """

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        """
        Args:
            grid:
                ``grid[row_zb][col_zb]``: 9 rows of 9 ints, 0-9, with 0 for an
                unknown cell. It's copied, not kept.

        Raises:
            :exc:`InvalidBoardError` if the grid is the wrong shape or holds
            values outside 0-9. This does not check the Sudoku rule; see
            :meth:`validate`.
        """
        if len(grid) != N:
            raise InvalidBoardError(f"Must have {N} rows; found {len(grid)}")
        for row_zb, row in enumerate(grid):
            if len(row) != N:
                raise InvalidBoardError(
                    f"Row {row_zb + 1} must have {N} cells; found {len(row)}")
            for col_zb, value in enumerate(row):
                if (not isinstance(value, int) or isinstance(value, bool) or
                        not UNKNOWN <= value <= N):
                    raise InvalidBoardError(
                        f"Bad value {value!r} at "
                        f"(row={row_zb + 1}, col={col_zb + 1}); "
                        f"must be an integer from 0 to {N}")
        self.values = [list(row) for row in grid]  # type: List[List[int]]
        self.possible = []  # type: List[List[List[bool]]]
        # ... index as: self.possible[row_zb][col_zb][digit_zb]
        self.reset_candidates()

    @classmethod
    def from_text(cls, text: str) -> "Board":
        """
        Creates a board from puzzle text; see
        :func:`sudokusolver.load.parse_grid`.
        """
        return cls(parse_grid(text))

    def clone(self) -> "Board":
        b = self.__class__(self.values)
        b.possible = deepcopy(self.possible)
        return b

    def __str__(self) -> str:
        return format_grid(self.values)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.values!r})"

    def grid(self) -> List[List[int]]:
        """
        Returns a copy of the committed values.
        """
        return [list(row) for row in self.values]

    # -------------------------------------------------------------------------
    # Candidates
    # -------------------------------------------------------------------------

    def reset_candidates(self) -> None:
        """
        Rebuilds the candidates from the committed values. A known cell's only
        candidate is its own value; an unknown cell may be anything.
        """
        self.possible = [
            [
                [
                    (value == UNKNOWN or value == d_zb + 1)
                    for d_zb in range(N)
                ] for value in row
            ] for row in self.values
        ]

    def candidates(self, row_zb: int, col_zb: int) -> List[int]:
        """
        Returns the remaining candidate digits (one-based) for a cell, in
        ascending order.
        """
        return [d for d in DIGITS if self.possible[row_zb][col_zb][d - 1]]

    def n_candidates(self, row_zb: int, col_zb: int) -> int:
        """
        Number of possible digits for a cell.
        """
        return sum(self.possible[row_zb][col_zb])

    def remove_candidate(self, row_zb: int, col_zb: int, value: int) -> None:
        self.possible[row_zb][col_zb][value - 1] = False

    def commit(self, row_zb: int, col_zb: int, value: int) -> None:
        """
        Sets a cell's value permanently, collapsing its candidates to that
        value. The caller is responsible for the value being acceptable.
        """
        self.values[row_zb][col_zb] = value
        for d_zb in range(N):
            self.possible[row_zb][col_zb][d_zb] = (d_zb == value - 1)

    # -------------------------------------------------------------------------
    # Checks
    # -------------------------------------------------------------------------

    def is_acceptable_value(self, row_zb: int, col_zb: int) -> bool:
        """
        See :func:`is_acceptable_value`.
        """
        return is_acceptable_value(self.values, row_zb, col_zb)

    def first_conflict(self) -> Optional[Tuple[int, int]]:
        """
        Returns ``row_zb, col_zb`` of the first cell (row by row) whose value
        conflicts with a peer, or ``None``.
        """
        for r in range(N):
            for c in range(N):
                if not self.is_acceptable_value(r, c):
                    return r, c
        return None

    def is_valid(self) -> bool:
        """
        Does every cell pass :meth:`is_acceptable_value`?
        """
        return self.first_conflict() is None

    def validate(self) -> None:
        """
        Raises :exc:`InvalidBoardError` unless :meth:`is_valid`.
        """
        conflict = self.first_conflict()
        if conflict is not None:
            r, c = conflict
            raise InvalidBoardError(
                f"Invalid puzzle: digit {self.values[r][c]} at "
                f"(row={r + 1}, col={c + 1}) is repeated in its row, column, "
                f"or box")

    def first_empty_cell(self,
                         start: int = 0) -> Optional[Tuple[int, int]]:
        """
        Returns ``row_zb, col_zb`` of the first unknown cell, scanning row by
        row, or ``None`` if there isn't one.

        Args:
            start:
                row-major cell index (``row_zb * 9 + col_zb``) to start
                scanning from; the caller knows earlier cells are filled
        """
        values = self.values
        for i in range(start, N * N):
            r, c = divmod(i, N)
            if values[r][c] == UNKNOWN:
                return r, c
        return None

    def has_empty_cell(self) -> bool:
        return self.first_empty_cell() is not None

    def n_unknown_cells(self) -> int:
        """
        Number of unsolved cells. Maximum is 81.
        """
        return sum(
            1 if self.values[r][c] == UNKNOWN else 0
            for r in range(N)
            for c in range(N)
        )

    def is_solved(self) -> bool:
        """
        Are we there yet? (Full, and valid.)
        """
        return not self.has_empty_cell() and self.is_valid()

    # -------------------------------------------------------------------------
    # Tentative placement
    # -------------------------------------------------------------------------

    @contextmanager
    def trial(self, row_zb: int, col_zb: int,
              value: int) -> Generator[Trial, None, None]:
        """
        Places a value tentatively. When the ``with`` block ends, however it
        ends, the cell goes back to its previous value unless
        :meth:`Trial.keep` was called.

        .. code-block:: python

            with board.trial(r, c, 7) as t:
                if t.acceptable():
                    t.keep()

        The board may break the Sudoku rule inside the block, but not outside
        it.
        """
        previous = self.values[row_zb][col_zb]
        t = Trial(self, row_zb, col_zb, value)
        self.values[row_zb][col_zb] = value
        try:
            yield t
        finally:
            if not t.kept:
                self.values[row_zb][col_zb] = previous
