"""Polynomial evaluation strategies and a simple parameter-file parser."""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path

EvalMethod = Callable[[Sequence[float], float], float]

_PARAMETER_PATTERN = re.compile(
    r"(\w+)=(-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+\-]?\d+)?)(\n|\r\n)?",
    re.ASCII,
)


def get_file_contents(filename: str | Path) -> str:
    """Return the whole content of a file as text."""
    return Path(filename).read_bytes().decode("utf-8")


def parse_parameters(text: str) -> dict[str, float]:
    """Extract ``name=number`` pairs; the first occurrence of a name wins."""
    parameters: dict[str, float] = {}
    for match in _PARAMETER_PATTERN.finditer(text):
        parameters.setdefault(match.group(1), float(match.group(2)))
    return parameters


def evaluate_poly(
    points: Sequence[float],
    coeffs: Sequence[float],
    method: EvalMethod,
    parallel: bool = False,
) -> list[float]:
    """Evaluate the polynomial with coefficients ``coeffs`` at every point."""
    compute = partial(method, coeffs)
    if parallel:
        with ThreadPoolExecutor() as pool:
            return list(pool.map(compute, points))
    return [compute(x) for x in points]


def _check_exponent(n: int) -> None:
    if n < 0:
        raise ValueError(f"exponent must be non-negative, got {n}")


def pow_integer(x: float, n: int) -> float:
    """``x`` to the power ``n`` by ``n`` repeated multiplications."""
    _check_exponent(n)
    result = 1.0
    for _ in range(n):
        result *= x
    return result


def pow_squaring(x: float, n: int) -> float:
    """``x`` to the power ``n`` by repeated squaring."""
    _check_exponent(n)
    result = 1.0
    while n > 0:
        if n & 1:
            result *= x
        x *= x
        n >>= 1
    return result


def pow_branchless(x: float, n: int) -> float:
    """``x`` to the power ``n`` by squaring, selecting factors arithmetically."""
    _check_exponent(n)
    result = 1.0
    while n > 0:
        result *= 1 + (n & 1) * (x - 1)
        x *= x
        n >>= 1
    return result


def _require_coeffs(a: Sequence[float]) -> None:
    if not a:
        raise ValueError("a polynomial needs at least one coefficient")


def _eval_with(power: Callable[[float, int], float], a: Sequence[float], x: float) -> float:
    _require_coeffs(a)
    result = a[0]
    for k, coeff in enumerate(a[1:], start=1):
        result += coeff * power(x, k)
    return result


def eval_std(a: Sequence[float], x: float) -> float:
    """Evaluate term by term using the floating-point power function."""
    return _eval_with(math.pow, a, x)


def eval_pow_integer(a: Sequence[float], x: float) -> float:
    """Evaluate term by term using repeated multiplication."""
    return _eval_with(pow_integer, a, x)


def eval_squaring(a: Sequence[float], x: float) -> float:
    """Evaluate term by term using power by squaring."""
    return _eval_with(pow_squaring, a, x)


def eval_branchless(a: Sequence[float], x: float) -> float:
    """Evaluate term by term using branchless power by squaring."""
    return _eval_with(pow_branchless, a, x)


def eval_horner(a: Sequence[float], x: float) -> float:
    """Evaluate with Horner's scheme."""
    _require_coeffs(a)
    result = a[-1]
    for coeff in reversed(a[:-1]):
        result = result * x + coeff
    return result