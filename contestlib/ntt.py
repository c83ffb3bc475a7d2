"""Number-theoretic transform over a prime field."""

from __future__ import annotations

from typing import Sequence


class NTT:
    """Polynomial multiplication modulo ``prime`` for lengths up to ``2**log_n``.

    ``prime - 1`` must be divisible by ``2**log_n``. ``root`` is raised to
    ``(prime - 1) / m`` to give the ``m``-th roots of unity, so a primitive
    root of the field works.
    """

    def __init__(self, prime: int = 786433, root: int = 10, log_n: int = 18) -> None:
        if log_n < 0:
            raise ValueError("log_n must be non-negative")
        self.prime = prime
        self.root = root % prime
        self.log_n = log_n
        self.max_size = 1 << log_n
        if (prime - 1) % self.max_size:
            raise ValueError(f"2**{log_n} does not divide {prime} - 1")
        full = pow(self.root, (prime - 1) // self.max_size, prime)
        if pow(full, self.max_size, prime) != 1 or (
            log_n > 0 and pow(full, self.max_size // 2, prime) == 1
        ):
            raise ValueError(f"{root} gives no primitive 2**{log_n}-th root of unity")

    def _unit_root(self, m: int, inverse: bool) -> int:
        w = pow(self.root, (self.prime - 1) // m, self.prime)
        return pow(w, -1, self.prime) if inverse else w

    def transform(self, values: Sequence[int], inverse: bool = False) -> list[int]:
        """Return the transform of ``values``, whose length is a power of two."""
        p = self.prime
        a = [v % p for v in values]
        n = len(a)
        if n == 0 or n & (n - 1):
            raise ValueError("length must be a power of two")
        if n > self.max_size:
            raise ValueError(f"length {n} exceeds {self.max_size}")
        j = 0
        for i in range(1, n):
            bit = n >> 1
            while j & bit:
                j ^= bit
                bit >>= 1
            j ^= bit
            if i < j:
                a[i], a[j] = a[j], a[i]
        length = 2
        while length <= n:
            half = length // 2
            wm = self._unit_root(length, inverse)
            powers = [1]
            for _ in range(half - 1):
                powers.append(powers[-1] * wm % p)
            for start in range(0, n, length):
                low = a[start : start + half]
                high = [x * w % p for x, w in zip(a[start + half : start + length], powers)]
                a[start : start + half] = [(u + v) % p for u, v in zip(low, high)]
                a[start + half : start + length] = [(u - v) % p for u, v in zip(low, high)]
            length <<= 1
        if inverse:
            n_inv = pow(n, -1, p)
            a = [x * n_inv % p for x in a]
        return a

    def multiply(self, a: Sequence[int], b: Sequence[int]) -> list[int]:
        """Return the product of ``a`` and ``b`` with coefficients mod ``prime``."""
        if not a or not b:
            raise ValueError("polynomials must have at least one coefficient")
        need = len(a) + len(b) - 1
        n = 1 << (need - 1).bit_length()
        fa = self.transform(list(a) + [0] * (n - len(a)))
        fb = self.transform(list(b) + [0] * (n - len(b)))
        product = self.transform([x * y % self.prime for x, y in zip(fa, fb)], inverse=True)
        return product[:need]