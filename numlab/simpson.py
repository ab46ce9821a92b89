"""Composite Simpson rule, serial and multithreaded, and a quarter-circle driver."""

from __future__ import annotations

import argparse
import math
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from itertools import accumulate


def _check_intervals(n: int) -> None:
    if n < 1:
        raise ValueError(f"the number of intervals must be positive, got {n}")


def _panel_sum(f: Callable[[float], float], a: float, h: float, indices: range) -> float:
    return sum(
        (f(a + i * h) + 4.0 * f(a + (i + 0.5) * h) + f(a + (i + 1.0) * h) for i in indices),
        0.0,
    )


def simpson(f: Callable[[float], float], a: float, b: float, n: int) -> float:
    """Integral of ``f`` on [a, b] by the composite Simpson rule on ``n`` intervals."""
    _check_intervals(n)
    h = (b - a) / n
    return (h / 6.0) * _panel_sum(f, a, h, range(n))


def simpson_threaded(
    f: Callable[[float], float], a: float, b: float, n: int, num_threads: int
) -> float:
    """Like :func:`simpson`, with the intervals shared among ``num_threads`` threads."""
    _check_intervals(n)
    if num_threads < 1:
        raise ValueError(f"the number of threads must be positive, got {num_threads}")
    h = (b - a) / n
    counts = [n // num_threads + (t < n % num_threads) for t in range(num_threads)]
    starts = list(accumulate(counts, initial=0))
    ranges = [range(s, s + c) for s, c in zip(starts, counts)]
    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        total = sum(pool.map(lambda r: _panel_sum(f, a, h, r), ranges), 0.0)
    return (h / 6.0) * total


def _quarter_circle(x: float) -> float:
    return math.sqrt(max(0.0, 1 - x * x))


def integrate_quarter_circle(n: int, size: int, num_threads: int) -> float:
    """Integral of sqrt(1 - x^2) on [0, 1], split into ``size`` equal sub-intervals."""
    if size < 1:
        raise ValueError(f"the number of processes must be positive, got {size}")
    if n < size:
        raise ValueError(f"need at least one interval per process, got {n} for {size}")
    width = 1.0 / size
    total = 0.0
    for rank in range(size):
        n_local = n // size + (n % size > rank)
        a_local = rank * width
        total += simpson_threaded(_quarter_circle, a_local, a_local + width, n_local, num_threads)
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Estimate pi with Simpson's rule.")
    parser.add_argument("intervals", type=int, help="number of intervals")
    parser.add_argument("threads", type=int, help="number of threads")
    parser.add_argument("--size", type=int, default=1, help="number of processes")
    args = parser.parse_args(argv)

    start = time.perf_counter_ns()
    integral = integrate_quarter_circle(args.intervals, args.size, args.threads)
    dt = (time.perf_counter_ns() - start) // 1_000_000
    print(f"Integral value: {integral:.16g}")
    print(f"Error: {abs(integral * 4.0 - math.pi):.16g}")
    print(f"Elapsed:{dt} [ms]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())