"""
Shared puzzles for the tests.
"""

from typing import List

import pytest

from sudokusolver.load import parse_grid

# https://en.wikipedia.org/wiki/Sudoku
EASY = """
530070000
600195000
098000060
800060003
400803001
700020006
060000280
000419005
000080079
"""

EASY_SOLUTION = """
534678912
672195348
198342567
859761423
426853791
713924856
961537284
287419635
345286179
"""

# Arto Inkala, 2012; needs search.
HARD = """
800000000
003600000
070090200
050007000
000045700
000100030
001000068
008500010
090000400
"""

HARD_SOLUTION = """
812753649
943682175
675491283
154237896
369845721
287169534
521974368
438526917
796318452
"""

# No duplicates, but the top-right cell can only be 9, and there's already a
# 9 below it.
IMPOSSIBLE = """
123456780
000000009
000000000
000000000
000000000
000000000
000000000
000000000
000000000
"""


def is_complete_and_valid(grid: List[List[int]]) -> bool:
    """
    Independent check: every row, column and box is exactly 1-9.
    """
    full = set(range(1, 10))
    for i in range(9):
        if set(grid[i]) != full:
            return False
        if set(grid[r][i] for r in range(9)) != full:
            return False
    for br in range(3):
        for bc in range(3):
            box = set(
                grid[br * 3 + r][bc * 3 + c]
                for r in range(3)
                for c in range(3)
            )
            if box != full:
                return False
    return True


@pytest.fixture
def easy() -> List[List[int]]:
    return parse_grid(EASY)


@pytest.fixture
def easy_solution() -> List[List[int]]:
    return parse_grid(EASY_SOLUTION)


@pytest.fixture
def hard() -> List[List[int]]:
    return parse_grid(HARD)


@pytest.fixture
def hard_solution() -> List[List[int]]:
    return parse_grid(HARD_SOLUTION)


@pytest.fixture
def impossible() -> List[List[int]]:
    return parse_grid(IMPOSSIBLE)


@pytest.fixture
def blank() -> List[List[int]]:
    return [[0] * 9 for _ in range(9)]
