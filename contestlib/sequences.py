"""Longest increasing subsequence and longest valid parentheses."""

from __future__ import annotations

from bisect import bisect_left
from typing import Sequence, TypeVar

T = TypeVar("T")


def _lis_table(values: Sequence[T]) -> tuple[list[int], list[int | None]]:
    """For each index: the LIS length ending there and the previous index."""
    lengths: list[int] = []
    previous: list[int | None] = []
    for i, value in enumerate(values):
        best, link = 1, None
        for j in reversed(range(i)):
            if lengths[j] + 1 > best and values[j] < value:
                best, link = lengths[j] + 1, j
        lengths.append(best)
        previous.append(link)
    return lengths, previous


def lis_length_quadratic(values: Sequence[T]) -> int:
    """Length of the longest strictly increasing subsequence, O(n^2)."""
    lengths, _ = _lis_table(values)
    return max(lengths, default=0)


def longest_increasing_subsequence(values: Sequence[T]) -> list[T]:
    """Return one longest strictly increasing subsequence, O(n^2)."""
    lengths, previous = _lis_table(values)
    if not lengths:
        return []
    index: int | None = lengths.index(max(lengths))
    result = []
    while index is not None:
        result.append(values[index])
        index = previous[index]
    result.reverse()
    return result


def lis_length(values: Sequence[T]) -> int:
    """Length of the longest strictly increasing subsequence, O(n log n)."""
    tails: list[T] = []
    for value in values:
        if not tails or value > tails[-1]:
            tails.append(value)
        else:
            tails[bisect_left(tails, value)] = value
    return len(tails)


def longest_valid_parentheses(s: str) -> int:
    """Length of the longest well-formed substring of ``(`` and ``)``."""
    best = 0
    ending = [0] * len(s)
    for i in range(1, len(s)):
        if s[i] != ")":
            continue
        if s[i - 1] == "(":
            ending[i] = (ending[i - 2] if i >= 2 else 0) + 2
        else:
            opening = i - ending[i - 1] - 1
            if opening >= 0 and s[opening] == "(":
                before = ending[opening - 1] if opening >= 1 else 0
                ending[i] = ending[i - 1] + before + 2
        best = max(best, ending[i])
    return best