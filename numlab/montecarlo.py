"""Monte Carlo integration over [-1, 1], serially or split among processes."""

from __future__ import annotations

import argparse
import math
import random
import time
from collections.abc import Callable

_DOMAIN_MEASURE = 2.0


def _sample(f: Callable[[float], float], count: int, seed: int) -> tuple[float, float]:
    rng = random.Random(seed)
    total = 0.0
    total_sq = 0.0
    for _ in range(count):
        fi = f(rng.uniform(-1.0, 1.0))
        total += fi
        total_sq += fi * fi
    return total, total_sq


def _estimate(total: float, total_sq: float, n: int) -> tuple[float, float]:
    integral = _DOMAIN_MEASURE * total / n
    variance = (total_sq - (total * total) / n) / (n - 1)
    integral_variance = _DOMAIN_MEASURE * _DOMAIN_MEASURE * variance / n
    return integral, integral_variance


def _check_samples(n: int) -> None:
    if n < 2:
        raise ValueError(f"at least two samples are needed, got {n}")


def montecarlo(f: Callable[[float], float], n: int, seed: int = 0) -> tuple[float, float]:
    """Estimate the integral of ``f`` on [-1, 1] and the variance of that estimate."""
    _check_samples(n)
    return _estimate(*_sample(f, n, seed), n)


def local_sample_count(n: int, rank: int, size: int) -> int:
    """How many of ``n`` samples process ``rank`` out of ``size`` draws."""
    if size < 1:
        raise ValueError(f"the number of processes must be positive, got {size}")
    if not 0 <= rank < size:
        raise ValueError(f"rank {rank} is outside 0..{size - 1}")
    return n // size + (rank < n % size)


def montecarlo_partitioned(
    f: Callable[[float], float], n: int, size: int
) -> tuple[float, float]:
    """Like :func:`montecarlo`, with samples drawn by ``size`` independently seeded processes."""
    _check_samples(n)
    if size < 1:
        raise ValueError(f"the number of processes must be positive, got {size}")
    total = 0.0
    total_sq = 0.0
    for rank in range(size):
        part, part_sq = _sample(
            f, local_sample_count(n, rank, size), rank * rank * size * size
        )
        total += part
        total_sq += part_sq
    return _estimate(total, total_sq, n)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Monte Carlo estimate of pi / 2.")
    parser.add_argument("n", nargs="?", type=int, default=100000, help="number of samples")
    parser.add_argument("--size", type=int, default=1, help="number of processes")
    args = parser.parse_args(argv)

    t0 = time.perf_counter()
    integral, variance = montecarlo_partitioned(
        lambda x: math.sqrt(1 - x * x), args.n, args.size
    )
    dt = int((time.perf_counter() - t0) * 1000)
    print(f"Elapsed: {dt} [ms]")
    print(f"Integral: {integral:g}")
    print(f"Error estimator: {math.sqrt(variance):g}")
    print(f"Error: {abs(integral - math.pi / 2):g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())