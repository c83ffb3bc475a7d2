"""String matching: prefix function, KMP search, Z-function and hashing."""

from __future__ import annotations

from itertools import accumulate

_MASK = (1 << 64) - 1


def prefix_function(s: str) -> list[int]:
    """``pi[i]`` is the longest proper border of ``s[:i+1]``."""
    pi = [0] * len(s)
    k = 0
    for i in range(1, len(s)):
        while k > 0 and s[i] != s[k]:
            k = pi[k - 1]
        if s[i] == s[k]:
            k += 1
        pi[i] = k
    return pi


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return every 0-based position where ``pattern`` occurs in ``text``."""
    m = len(pattern)
    if m == 0:
        return list(range(len(text) + 1))
    pi = prefix_function(pattern)
    positions = []
    k = 0
    for i, ch in enumerate(text):
        while k > 0 and (k == m or ch != pattern[k]):
            k = pi[k - 1]
        if ch == pattern[k]:
            k += 1
        if k == m:
            positions.append(i - m + 1)
    return positions


def z_function(s: str) -> list[int]:
    """``z[i]`` is the longest common prefix of ``s`` and ``s[i:]``; ``z[0]`` is 0."""
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i <= right:
            z[i] = min(right - i + 1, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > right:
            left, right = i, i + z[i] - 1
    return z


class PolynomialHash:
    """Forward and reverse polynomial hashes of substrings, modulo 2**64.

    Character ``c`` contributes ``ord(c) + 1``; indices are 0-based and
    ranges inclusive. Hashes are returned as unsigned 64-bit values.
    """

    def __init__(self, text: str, base: int = 257) -> None:
        if not text:
            raise ValueError("text must not be empty")
        self.text = text
        self.base = base
        codes = [ord(c) + 1 for c in text]
        step = lambda h, c: (h * base + c) & _MASK  # noqa: E731
        self._forward = list(accumulate(codes[1:], step, initial=codes[0]))
        self._reverse = list(accumulate(codes[-2::-1], step, initial=codes[-1]))[::-1]
        self._powers = list(accumulate(range(len(codes) - 1), lambda p, _: p * base & _MASK, initial=1))

    def _check(self, left: int, right: int) -> None:
        if left < 0 or right >= len(self.text):
            raise IndexError(f"range [{left}, {right}] is outside the text")

    def front_hash(self, left: int, right: int) -> int:
        """Hash of ``text[left..right]`` read left to right; 0 for an empty range."""
        if left > right:
            return 0
        self._check(left, right)
        if left == 0:
            return self._forward[right]
        return (self._forward[right] - self._forward[left - 1] * self._powers[right - left + 1]) & _MASK

    def reverse_hash(self, left: int, right: int) -> int:
        """Hash of ``text[left..right]`` read right to left; 0 for an empty range."""
        if left > right:
            return 0
        self._check(left, right)
        if right == len(self.text) - 1:
            return self._reverse[left]
        return (self._reverse[left] - self._reverse[right + 1] * self._powers[right - left + 1]) & _MASK