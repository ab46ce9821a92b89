"""Central-difference gradients, computed serially or split among workers."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

Field = Callable[[Sequence[float], ], float]


def _partial(f: Field, x: list[float], h: float, i: int) -> float:
    plus = list(x)
    minus = list(x)
    plus[i] += h
    minus[i] -= h
    return (f(plus) - f(minus)) / 2.0 / h


def compute_gradient(f: Field, x: Sequence[float], h: float) -> list[float]:
    """Gradient of ``f`` at ``x`` by central differences with step ``h``."""
    point = list(x)
    return [_partial(f, point, h, i) for i in range(len(point))]


def compute_gradient_partitioned(
    f: Field, x: Sequence[float], h: float, size: int
) -> list[float]:
    """Same as :func:`compute_gradient`, component ``i`` handled by worker ``i % size``."""
    if size < 1:
        raise ValueError(f"the number of workers must be positive, got {size}")
    point = list(x)

    def work(rank: int) -> dict[int, float]:
        return {i: _partial(f, point, h, i) for i in range(rank, len(point), size)}

    merged: dict[int, float] = {}
    with ThreadPoolExecutor(max_workers=size) as pool:
        for part in pool.map(work, range(size)):
            merged.update(part)
    return [merged[i] for i in range(len(point))]


def _field(v: Sequence[float]) -> float:
    return math.sin(v[0]) + math.exp(v[1]) + math.cos(v[2]) + 2 * v[3] * v[3] * v[3]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check a finite-difference gradient.")
    parser.add_argument("--size", type=int, default=1, help="number of workers")
    args = parser.parse_args(argv)

    y = [0.0, 1.0, math.pi, 2.0]
    g_true = [1.0, math.exp(1), 0.0, 24.0]
    g = compute_gradient_partitioned(_field, y, 1e-8, args.size)
    for i, (value, expected) in enumerate(zip(g, g_true)):
        err = abs(value - expected)
        print(f"{i} | {value:.4e}{' PASS' if err < 1e-6 else ' FAIL'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())