"""Small container and functional-programming exercises."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

FUNCTIONS: dict[str, Callable[[float], float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "exp": math.exp,
    "sqrt": math.sqrt,
    "tan": math.tan,
}


def sorted_unique(values: Iterable[T]) -> list[T]:
    """The distinct values in ascending order."""
    return sorted(set(values))


def word_count(words: Iterable[K]) -> dict[K, int]:
    """How many times each word occurs, keyed in ascending word order."""
    return dict(sorted(Counter(words).items()))


def evaluate_named(names: Iterable[str], x: float) -> list[float]:
    """Evaluate each named function at ``x``; an unknown name raises ``KeyError``."""
    return [FUNCTIONS[name](x) for name in names]


def even_squares(limit: int) -> list[int]:
    """Squares of the even numbers in ``range(limit)``."""
    return [v * v for v in range(limit) if v % 2 == 0]