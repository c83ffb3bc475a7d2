"""Dynamic upper envelope of lines for maximum queries."""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from operator import attrgetter

from sortedcontainers import SortedKeyList


@dataclass
class _Line:
    a: int
    b: int
    start: Fraction | float = -math.inf

    def at(self, x: int) -> int:
        return self.a * x + self.b


class DynamicHull:
    """Lines ``y = a*x + b`` answering ``max(a*x + b)`` at any ``x``.

    For minimum queries add ``(-a, -b)`` and negate the answer.
    """

    def __init__(self) -> None:
        self._lines: SortedKeyList = SortedKeyList(key=attrgetter("a"))

    def __len__(self) -> int:
        return len(self._lines)

    def _bad(self, i: int) -> bool:
        """True when line ``i`` never attains the maximum on its own."""
        lines = self._lines
        y = lines[i]
        has_next = i + 1 < len(lines)
        if i == 0:
            if not has_next:
                return False
            z = lines[i + 1]
            return y.a == z.a and y.b <= z.b
        x = lines[i - 1]
        if not has_next:
            return y.a == x.a and y.b <= x.b
        z = lines[i + 1]
        return (x.b - y.b) * (z.a - y.a) >= (y.b - z.b) * (y.a - x.a)

    def add(self, a: int, b: int) -> None:
        """Insert the line ``y = a*x + b``."""
        lines = self._lines
        lines.add(_Line(a, b))
        i = lines.bisect_key_right(a) - 1
        if self._bad(i):
            del lines[i]
            return
        while i + 1 < len(lines) and self._bad(i + 1):
            del lines[i + 1]
        while i > 0 and self._bad(i - 1):
            del lines[i - 1]
            i -= 1
        y = lines[i]
        if i + 1 < len(lines):
            z = lines[i + 1]
            z.start = Fraction(y.b - z.b, z.a - y.a)
        if i > 0:
            x = lines[i - 1]
            y.start = Fraction(y.b - x.b, x.a - y.a)

    def query(self, x: int) -> int:
        """Return the largest ``a*x + b`` over all lines added."""
        lines = self._lines
        if not lines:
            raise ValueError("hull is empty")
        lo, hi = 0, len(lines) - 1
        while lo < hi:
            mid = (lo + hi + 1) // 2
            if lines[mid].start < x:
                lo = mid
            else:
                hi = mid - 1
        return lines[lo].at(x)