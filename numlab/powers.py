"""Integer powers by repeated squaring and a relative-error measure."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def _check_exponent(exp: int) -> None:
    if exp < 0:
        raise ValueError(f"exponent must be non-negative, got {exp}")


def pow_recursive(base: T, exp: int) -> T:
    """Raise ``base`` to a non-negative integer power, recursively by squaring."""
    _check_exponent(exp)

    def power(b, e):
        if e == 0:
            return 1
        if e % 2:
            return b * power(b * b, (e - 1) // 2)
        return power(b * b, e // 2)

    return power(base, exp)


def pow_iterative(base: T, exp: int) -> T:
    """Raise ``base`` to a non-negative integer power, iteratively by squaring."""
    _check_exponent(exp)
    result = 1
    while exp > 0:
        if exp & 1:
            result *= base
        base *= base
        exp >>= 1
    return result


def rel_error(a: float, b: float) -> float:
    """Relative difference of ``a`` and ``b``; zero when both are zero."""
    if a == 0 and b == 0:
        return 0.0
    return abs(a - b) / max(abs(a), abs(b))