"""Benchmark of polynomial evaluation strategies driven by a parameter file."""

from __future__ import annotations

import argparse
import math
import time
from collections.abc import Callable, Mapping

from numlab.horner import (
    EvalMethod,
    eval_branchless,
    eval_horner,
    eval_pow_integer,
    eval_squaring,
    eval_std,
    evaluate_poly,
    get_file_contents,
    parse_parameters,
)

TESTS: dict[str, EvalMethod] = {
    "standard std::pow": eval_std,
    "standard integer pow": eval_pow_integer,
    "standard pow by squaring": eval_squaring,
    "standard pow branchless squaring": eval_branchless,
    "horner": eval_horner,
}


def _elapsed_ms(f: Callable[[], object]) -> int:
    t0 = time.perf_counter()
    f()
    return int((time.perf_counter() - t0) * 1000)


def sample_points(x0: float, xf: float, n: int) -> list[float]:
    """``n`` equally spaced points from ``x0`` to ``xf`` inclusive."""
    if n < 2:
        raise ValueError(f"at least two points are needed, got {n}")
    h = (xf - x0) / (n - 1)
    return [x0 + i * h for i in range(n)]


def coefficients(degree: int) -> list[float]:
    """Coefficients ``2 sin(2k)`` for ``k = 0 .. degree``."""
    return [2 * math.sin(2.0 * k) for k in range(degree + 1)]


def run_benchmarks(parameters: Mapping[str, float], parallel: bool = False) -> dict[str, int]:
    """Time every evaluation strategy; returns milliseconds per strategy name."""
    x0 = parameters["x_0"]
    xf = parameters["x_f"]
    n = int(parameters["n_points"])
    degree = int(parameters["degree"])
    points = sample_points(x0, xf, n)
    coeffs = coefficients(degree)
    return {
        name: _elapsed_ms(lambda method=method: evaluate_poly(points, coeffs, method, parallel))
        for name, method in TESTS.items()
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark polynomial evaluation.")
    parser.add_argument("params", nargs="?", default="params.dat", help="parameter file")
    args = parser.parse_args(argv)

    parameters = parse_parameters(get_file_contents(args.params))
    print("Parsed parameter are:")
    for key, value in parameters.items():
        print(f"-- {key}: {value:g}")

    n = int(parameters["n_points"])
    rule = "--------------------------------------"
    for parallel in (True, False):
        print(rule)
        print(f"  parallel execution: {'ON' if parallel else 'OFF'}")
        print(rule)
        for name, elapsed in run_benchmarks(parameters, parallel).items():
            print(f"Computing {n} evaluations of polynomial with {name} formula")
            print(f"Elapsed: {elapsed} [ms]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())