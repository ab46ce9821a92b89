"""Inner products computed from chunks, as if scattered among processes."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence
from itertools import accumulate


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum((x * y for x, y in zip(a, b)), 0.0)


def _check(a: Sequence[float], b: Sequence[float], size: int) -> None:
    if len(a) != len(b):
        raise ValueError(f"incompatible vector sizes {len(a)} and {len(b)}")
    if size < 1:
        raise ValueError(f"the number of processes must be positive, got {size}")


def chunk_sizes(n: int, size: int) -> list[int]:
    """Balanced chunk lengths: the first ``n % size`` chunks get one extra element."""
    if size < 1:
        raise ValueError(f"the number of processes must be positive, got {size}")
    return [n // size + (n % size > rank) for rank in range(size)]


def inner_product_v1(a: Sequence[float], b: Sequence[float], size: int) -> float:
    """Equal chunks of ``n // size``; the trailing remainder is added by rank 0."""
    _check(a, b, size)
    n = len(a)
    local = n // size
    partials = [
        _dot(a[r * local:(r + 1) * local], b[r * local:(r + 1) * local])
        for r in range(size)
    ]
    start = n - n % size
    partials[0] = _dot(a[start:], b[start:]) + partials[0]
    return sum(partials, 0.0)


def inner_product_v2(a: Sequence[float], b: Sequence[float], size: int) -> float:
    """Balanced chunks from :func:`chunk_sizes`; each rank takes one chunk."""
    _check(a, b, size)
    sizes = chunk_sizes(len(a), size)
    starts = accumulate(sizes, initial=0)
    partials = [_dot(a[s:s + c], b[s:s + c]) for s, c in zip(starts, sizes)]
    return sum(partials, 0.0)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Time chunked inner products.")
    parser.add_argument("--size", type=int, default=1, help="number of processes")
    args = parser.parse_args(argv)

    for n in (5, 6, 7, 100000, 200000):
        x = [float(k) for k in range(1, n + 1)]
        t0 = time.perf_counter()
        xx = inner_product_v1(x, x, args.size)
        dt = int((time.perf_counter() - t0) * 1000)
        error = xx - (n * (n + 1) * (2 * n + 1)) / 6.0
        print(f"Elapsed: {dt} | Error: {error:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())