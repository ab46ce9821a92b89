"""Power iteration for the dominant eigenpair, serial or with rows split among workers."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class PowerResult:
    """Outcome of a power iteration: the normalised vector and how it got there."""

    vector: np.ndarray
    iterations: int
    error: float
    eigenvalue: float


def tridiagonal(n: int) -> np.ndarray:
    """The ``n`` by ``n`` matrix with 2 on the diagonal and -1 beside it."""
    if n < 1:
        raise ValueError(f"matrix size must be positive, got {n}")
    a = np.zeros((n, n))
    idx = np.arange(n)
    a[idx, idx] = 2.0
    a[idx[1:], idx[:-1]] = -1.0
    a[idx[:-1], idx[1:]] = -1.0
    return a


def _prepare(a: np.ndarray, b: Sequence[float]) -> tuple[np.ndarray, np.ndarray]:
    matrix = np.array(a, dtype=float)
    vector = np.array(b, dtype=float)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"expected a square matrix, got shape {matrix.shape}")
    if vector.shape != (matrix.shape[0],):
        raise ValueError(
            f"vector of shape {vector.shape} does not match matrix of shape {matrix.shape}"
        )
    return matrix, vector


def _rayleigh(a: np.ndarray, v: np.ndarray) -> float:
    return float((v @ a @ v) / (v @ v))


def _iterate(
    product: Callable[[np.ndarray], np.ndarray],
    b: np.ndarray,
    max_iter: int,
    tol: float,
    err: float,
) -> tuple[np.ndarray, int, float]:
    iterations = 0
    while err > tol and iterations < max_iter:
        b_new = product(b)
        b_new /= np.linalg.norm(b_new)
        err = float(np.linalg.norm(b_new - b))
        b = b_new
        iterations += 1
    return b, iterations, err


def power_method(
    a: np.ndarray, b: Sequence[float], max_iter: int = 100000, tol: float = 1e-8
) -> PowerResult:
    """Iterate ``b <- A b / |A b|`` until successive vectors differ by at most ``tol``."""
    matrix, vector = _prepare(a, b)
    vector, iterations, err = _iterate(lambda x: matrix @ x, vector, max_iter, tol, 1.0 + tol)
    return PowerResult(vector, iterations, err, _rayleigh(matrix, vector))


def power_method_partitioned(
    a: np.ndarray, b: Sequence[float], max_iter: int = 100000, tol: float = 1e-8, size: int = 1
) -> PowerResult:
    """Like :func:`power_method`, each of ``size`` workers owning an equal block of rows."""
    if size < 1:
        raise ValueError(f"the number of processes must be positive, got {size}")
    matrix, vector = _prepare(a, b)
    n = matrix.shape[0]
    if n % size:
        raise ValueError(f"{n} rows cannot be split evenly among {size} processes")
    blocks = np.vsplit(matrix, size)

    def product(x: np.ndarray) -> np.ndarray:
        return np.concatenate([block @ x for block in blocks])

    vector, iterations, err = _iterate(product, vector, max_iter, tol, 1.0)
    return PowerResult(vector, iterations, err, _rayleigh(matrix, vector))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dominant eigenpair by power iteration.")
    parser.add_argument("--n", type=int, default=4, help="matrix size")
    parser.add_argument("--size", type=int, default=1, help="number of processes")
    parser.add_argument("--max-iter", type=int, default=100000, help="iteration limit")
    parser.add_argument("--tol", type=float, default=1e-8, help="tolerance")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = np.random.default_rng(args.seed)
    a = tridiagonal(args.n)
    b = rng.uniform(-1.0, 1.0, args.n)
    t0 = time.perf_counter()
    result = power_method_partitioned(a, b, args.max_iter, args.tol, args.size)
    dt = int((time.perf_counter() - t0) * 1000)
    print(f"Iterations: {result.iterations}")
    print(f"Error: {result.error:g}")
    print(f"Elapsed: {dt}")
    print(f"Eigenvalue: {result.eigenvalue:g}")

    values, vectors = np.linalg.eig(a)
    top = int(np.argmax(values.real))
    print(f"The eigenvalue error against numpy is: {result.eigenvalue - values.real[top]:g}")
    vector_error = np.linalg.norm(vectors.real[:, top] - result.vector)
    print(f"The eigenvector error against numpy is: {vector_error:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())