"""Prefix sums for O(1) range-sum queries, 1-based and inclusive."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, Sequence


class PrefixSums:
    """Sums over ranges ``[left, right]`` of a sequence, 1-based."""

    def __init__(self, values: Iterable[int]) -> None:
        self._sums = list(accumulate(values, initial=0))

    def query(self, left: int, right: int) -> int:
        """Return the sum of elements ``left..right``; an empty range gives 0."""
        size = len(self._sums) - 1
        if left < 1 or right > size or left > right + 1:
            raise IndexError(f"range [{left}, {right}] is outside 1..{size}")
        return self._sums[right] - self._sums[left - 1]


class PrefixSums2D:
    """Sums over sub-rectangles of a grid, 1-based and inclusive."""

    def __init__(self, grid: Iterable[Sequence[int]]) -> None:
        rows = [list(row) for row in grid]
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise ValueError("all rows must have the same length")
        self._height = len(rows)
        self._width = widths.pop() if widths else 0
        sums = [[0] * (self._width + 1)]
        for row in rows:
            running = accumulate(row, initial=0)
            sums.append([above + here for above, here in zip(sums[-1], running)])
        self._sums = sums

    def query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Return the sum over rows ``x1..x2`` and columns ``y1..y2``."""
        if x1 < 1 or x2 > self._height or x1 > x2 + 1:
            raise IndexError(f"rows [{x1}, {x2}] are outside 1..{self._height}")
        if y1 < 1 or y2 > self._width or y1 > y2 + 1:
            raise IndexError(f"columns [{y1}, {y2}] are outside 1..{self._width}")
        s = self._sums
        return s[x2][y2] + s[x1 - 1][y1 - 1] - s[x2][y1 - 1] - s[x1 - 1][y2]