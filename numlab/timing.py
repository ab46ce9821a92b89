"""Wall-clock timing and vector formatting helpers."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from typing import Any


def timeit(f: Callable[[], Any]) -> int:
    """Run ``f`` once and return the elapsed wall-clock time in whole milliseconds."""
    start = time.perf_counter_ns()
    f()
    return (time.perf_counter_ns() - start) // 1_000_000


def format_vector(values: Iterable[Any]) -> str:
    """Render values as ``[a, b, c]``; an empty sequence renders as an empty string."""
    items = [str(value) for value in values]
    if not items:
        return ""
    return "[" + ", ".join(items) + "]"