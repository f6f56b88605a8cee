"""Best total of two corner-to-corner walks that share collected cells once."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

_STEPS = (
    ((1, 0), (1, 0)),
    ((1, 0), (0, 1)),
    ((0, 1), (1, 0)),
    ((0, 1), (0, 1)),
)


def max_two_paths(grid: Sequence[Sequence[int]]) -> int:
    """Return the largest sum two walks from the top-left to the bottom-right collect.

    Both walks step down or right together; a cell both walks visit counts once.
    The grid must be square and non-empty.
    """
    n = len(grid)
    if n == 0:
        raise ValueError("grid must not be empty")
    if any(len(row) != n for row in grid):
        raise ValueError("grid must be square")
    if n == 1:
        return grid[0][0]

    @lru_cache(maxsize=None)
    def best(x1: int, y1: int, x2: int, y2: int) -> int:
        result = 0
        for (dx1, dy1), (dx2, dy2) in _STEPS:
            a1, b1, a2, b2 = x1 + dx1, y1 + dy1, x2 + dx2, y2 + dy2
            if max(a1, b1, a2, b2) >= n:
                continue
            gain = grid[a1][b1] + grid[a2][b2]
            if (a1, b1) == (a2, b2):
                gain -= grid[a1][b1]
            result = max(result, best(a1, b1, a2, b2) + gain)
        return result

    return best(0, 0, 0, 0) + grid[0][0]