"""Newton's method for scalar equations, keeping the history of iterates."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

_EPS = sys.float_info.epsilon


class NewtonSolver:
    """Solve ``f(x) = 0`` by Newton's iteration with residual and step tolerances."""

    def __init__(
        self,
        fun: Callable[[float], float],
        dfun: Callable[[float], float],
        n_max_it: int = 100,
        tol_fun: float = _EPS,
        tol_x: float = _EPS,
    ) -> None:
        self.fun = fun
        self.dfun = dfun
        self.n_max_it = n_max_it
        self.tol_fun = tol_fun
        self.tol_x = tol_x
        self._history: list[float] = []
        self.derivative = 0.0
        self.step = 0.0
        self.residual = 0.0
        self.iterations = 0

    def solve(self, x0: float) -> float:
        """Iterate from ``x0``; returns the last iterate."""
        self._history = [x0]
        self.derivative = 0.0
        self.step = 0.0
        self.residual = 0.0
        for it in range(self.n_max_it):
            self.iterations = it
            current = self._history[-1]
            self.residual = self.fun(current)
            if abs(self.residual) < self.tol_fun:
                break
            self.derivative = self.dfun(current)
            self.step = -self.residual / self.derivative
            self._history.append(current + self.step)
            if abs(self.step) < self.tol_x:
                break
        else:
            self.iterations = self.n_max_it
        return self.result

    @property
    def result(self) -> float:
        """The last computed iterate."""
        if not self._history:
            raise RuntimeError("solve() has not been called")
        return self._history[-1]

    @property
    def history(self) -> tuple[float, ...]:
        """All iterates, starting with the initial guess."""
        return tuple(self._history)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve x^2 - 2 = 0 with Newton's method.")
    parser.add_argument("x0", nargs="?", type=float, default=1.0, help="initial guess")
    args = parser.parse_args(argv)

    solver = NewtonSolver(lambda x: x * x - 2.0, lambda x: 2.0 * x)
    solver.solve(args.x0)
    print(f"x    =    {solver.result:g}")
    print(f"r    =    {solver.residual:g}")
    print(f"dx   =    {solver.step:g}")
    print(f"iter =    {solver.iterations}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())