"""Arbitrary-precision signed integers with truncating division."""

from __future__ import annotations

import math
import random
from functools import total_ordering
from typing import Union

_DIGITS = frozenset("0123456789")

IntLike = Union["BigInt", int]


def _parse(text: str) -> int:
    """Read an optional run of signs followed by decimal digits."""
    text = text.strip()
    stripped = text.lstrip("+-")
    negative = text[: len(text) - len(stripped)].count("-") % 2 == 1
    if not stripped:
        return 0
    if not set(stripped) <= _DIGITS:
        raise ValueError(f"invalid integer literal: {text!r}")
    value = int(stripped)
    return -value if negative else value


def _as_int(value: object) -> int | None:
    if isinstance(value, BigInt):
        return value._value
    if isinstance(value, int):
        return int(value)
    return None


def _truncated_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient rounded toward zero; the remainder takes the dividend's sign."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


@total_ordering
class BigInt:
    """A signed integer of any size.

    Division and remainder truncate toward zero: the quotient's sign is the
    product of the operands' signs and the remainder has the dividend's sign.
    """

    __slots__ = ("_value",)

    def __init__(self, value: IntLike | str = 0) -> None:
        if isinstance(value, str):
            self._value = _parse(value)
            return
        converted = _as_int(value)
        if converted is None:
            raise TypeError(f"cannot make a BigInt from {type(value).__name__}")
        self._value = converted

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"BigInt('{self._value}')"

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    def __eq__(self, other: object) -> bool:
        value = _as_int(other)
        if value is None:
            return NotImplemented
        return self._value == value

    def __lt__(self, other: object) -> bool:
        value = _as_int(other)
        if value is None:
            return NotImplemented
        return self._value < value

    def __neg__(self) -> BigInt:
        return BigInt(-self._value)

    def __abs__(self) -> BigInt:
        return BigInt(abs(self._value))

    def __add__(self, other: object) -> BigInt:
        value = _as_int(other)
        if value is None:
            return NotImplemented
        return BigInt(self._value + value)

    def __radd__(self, other: object) -> BigInt:
        return self.__add__(other)

    def __sub__(self, other: object) -> BigInt:
        value = _as_int(other)
        if value is None:
            return NotImplemented
        return BigInt(self._value - value)

    def __rsub__(self, other: object) -> BigInt:
        value = _as_int(other)
        if value is None:
            return NotImplemented
        return BigInt(value - self._value)

    def __mul__(self, other: object) -> BigInt:
        value = _as_int(other)
        if value is None:
            return NotImplemented
        return BigInt(self._value * value)

    def __rmul__(self, other: object) -> BigInt:
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> BigInt:
        value = _as_int(other)
        if value is None:
            return NotImplemented
        return BigInt(_truncated_divmod(self._value, value)[0])

    def __mod__(self, other: object) -> BigInt:
        value = _as_int(other)
        if value is None:
            return NotImplemented
        return BigInt(_truncated_divmod(self._value, value)[1])

    def __divmod__(self, other: object) -> tuple[BigInt, BigInt]:
        value = _as_int(other)
        if value is None:
            return NotImplemented
        quotient, remainder = _truncated_divmod(self._value, value)
        return BigInt(quotient), BigInt(remainder)

    def is_zero(self) -> bool:
        """Return True when the value is zero."""
        return self._value == 0


def isqrt(value: IntLike) -> BigInt:
    """Return the largest integer whose square does not exceed ``value``."""
    number = int(BigInt(value))
    if number < 0:
        raise ValueError("square root of a negative number")
    return BigInt(math.isqrt(number))


def gcd(a: IntLike, b: IntLike) -> BigInt:
    """Euclid's algorithm with truncating remainders; ``gcd(a, 0)`` is ``a``."""
    a, b = BigInt(a), BigInt(b)
    while not b.is_zero():
        a, b = b, a % b
    return a


def lcm(a: IntLike, b: IntLike) -> BigInt:
    """Return ``a / gcd(a, b) * b``."""
    a, b = BigInt(a), BigInt(b)
    return a // gcd(a, b) * b


def random_bigint(digits: int, rng: random.Random | None = None) -> BigInt:
    """Return a number written with ``digits`` random decimal digits."""
    if digits < 0:
        raise ValueError("digits must be non-negative")
    source = rng if rng is not None else random
    return BigInt("".join(source.choice("0123456789") for _ in range(digits)))