"""Naive row-by-row matrix multiplication, serial and multithreaded, with a timing driver."""

from __future__ import annotations

import argparse
import os
import time
from collections.abc import Iterable

import numpy as np
from concurrent.futures import ThreadPoolExecutor


def _operands(a, b) -> tuple[np.ndarray, np.ndarray]:
    left = np.asarray(a, dtype=float)
    right = np.asarray(b, dtype=float)
    if left.ndim != 2 or right.ndim != 2:
        raise ValueError("both operands must be two-dimensional")
    if left.shape[1] != right.shape[0]:
        raise ValueError(f"cannot multiply shapes {left.shape} and {right.shape}")
    return left, right


def _rows_product(left: np.ndarray, right: np.ndarray, out: np.ndarray, rows: Iterable[int]) -> None:
    for i in rows:
        row = out[i]
        for k, aik in enumerate(left[i]):
            row += aik * right[k]


def naive_matmul(a, b) -> np.ndarray:
    """The product ``a b`` accumulated in i-k-j order."""
    left, right = _operands(a, b)
    out = np.zeros((left.shape[0], right.shape[1]))
    _rows_product(left, right, out, range(left.shape[0]))
    return out


def naive_matmul_parallel(a, b, num_threads: int | None = None) -> np.ndarray:
    """Like :func:`naive_matmul`, with contiguous blocks of rows given to each thread."""
    if num_threads is not None and num_threads < 1:
        raise ValueError(f"the number of threads must be positive, got {num_threads}")
    left, right = _operands(a, b)
    out = np.zeros((left.shape[0], right.shape[1]))
    workers = num_threads or os.cpu_count() or 1
    blocks = np.array_split(np.arange(left.shape[0]), workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        list(pool.map(lambda rows: _rows_product(left, right, out, rows), blocks))
    return out


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Time a naive parallel matrix product.")
    parser.add_argument("n", type=int, help="matrix size")
    parser.add_argument("--threads", type=int, default=None, help="number of threads")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = np.random.default_rng(args.seed)
    a = rng.uniform(-1.0, 1.0, (args.n, args.n))
    b = rng.uniform(-1.0, 1.0, (args.n, args.n))

    start = time.perf_counter_ns()
    c = naive_matmul_parallel(a, b, args.threads)
    print(f"Elapsed mm naive: {(time.perf_counter_ns() - start) // 1_000_000} [ms]")

    start = time.perf_counter_ns()
    c_true = a @ b
    print(f"Elapsed mm numpy: {(time.perf_counter_ns() - start) // 1_000_000} [ms]")
    error = float(np.abs(c_true - c).max()) if c.size else 0.0
    print(f"Error: {error:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())