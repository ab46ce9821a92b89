"""Sparse matrices in coordinate and row-map storage, with a benchmark driver."""

from __future__ import annotations

import argparse
import bisect
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Sequence
from typing import Any

Index = tuple[int, int]


def _check_key(key: Any) -> Index:
    try:
        i, j = key
    except (TypeError, ValueError):
        raise TypeError("matrix indices must be a pair (i, j)") from None
    i, j = int(i), int(j)
    if i < 0 or j < 0:
        raise IndexError(f"matrix indices must be non-negative, got ({i}, {j})")
    return i, j


class SparseMatrix(ABC):
    """A growable sparse matrix: writing an entry extends its dimensions."""

    def __init__(self) -> None:
        self._nnz = 0
        self._nrows = 0
        self._ncols = 0

    @property
    def nrows(self) -> int:
        return self._nrows

    @property
    def ncols(self) -> int:
        return self._ncols

    @property
    def nnz(self) -> int:
        return self._nnz

    def __getitem__(self, key: Index) -> float:
        i, j = _check_key(key)
        return self._lookup(i, j)

    def __setitem__(self, key: Index, value: float) -> None:
        i, j = _check_key(key)
        if self._store(i, j, float(value)):
            self._nnz += 1
            self._nrows = max(self._nrows, i + 1)
            self._ncols = max(self._ncols, j + 1)

    def __contains__(self, key: object) -> bool:
        try:
            self[key]  # type: ignore[index]
        except (KeyError, IndexError, TypeError):
            return False
        return True

    def items(self) -> Iterator[tuple[int, int, float]]:
        """Stored entries as ``(i, j, value)`` in storage order."""
        return self._items()

    def format(self) -> str:
        """A header with the dimensions followed by one ``i,j,value`` line per entry."""
        lines = [f"nrows: {self._nrows} | ncols:{self._ncols} | nnz: {self._nnz}"]
        lines.extend(f"{i},{j},{v:g}" for i, j, v in self._items())
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.format()

    def _check_operand(self, x: Sequence[float]) -> list[float]:
        values = list(x)
        if len(values) != self._ncols:
            raise ValueError(
                f"vector of length {len(values)} does not match {self._ncols} columns"
            )
        return values

    @abstractmethod
    def vmult(self, x: Sequence[float]) -> list[float]:
        """The matrix-vector product with ``x``."""

    @abstractmethod
    def _lookup(self, i: int, j: int) -> float:
        """Return a stored entry or raise ``KeyError``."""

    @abstractmethod
    def _store(self, i: int, j: int, value: float) -> bool:
        """Store an entry; return whether it was not present before."""

    @abstractmethod
    def _items(self) -> Iterator[tuple[int, int, float]]:
        """Iterate over stored entries."""


class CooMatrix(SparseMatrix):
    """Coordinate storage, optionally kept ordered by row and then column."""

    def __init__(self, keep_sorted: bool = True) -> None:
        super().__init__()
        self.keep_sorted = keep_sorted
        self._entries: dict[Index, float] = {}
        self._order: list[Index] = []

    def _lookup(self, i: int, j: int) -> float:
        try:
            return self._entries[i, j]
        except KeyError:
            raise KeyError((i, j)) from None

    def _store(self, i: int, j: int, value: float) -> bool:
        key = (i, j)
        new = key not in self._entries
        self._entries[key] = value
        if new and self.keep_sorted:
            bisect.insort(self._order, key)
        return new

    def _keys(self) -> Iterator[Index]:
        return iter(self._order if self.keep_sorted else self._entries)

    def _items(self) -> Iterator[tuple[int, int, float]]:
        for i, j in self._keys():
            yield i, j, self._entries[i, j]

    def vmult(self, x: Sequence[float]) -> list[float]:
        values = self._check_operand(x)
        result = [0.0] * len(values)
        for i, j, v in self._items():
            result[i] += values[j] * v
        return result


class MapMatrix(SparseMatrix):
    """One column-to-value map per row; columns are ordered unless ``ordered`` is false."""

    def __init__(self, ordered: bool = True) -> None:
        super().__init__()
        self.ordered = ordered
        self._rows: list[dict[int, float]] = []

    def _lookup(self, i: int, j: int) -> float:
        if i >= len(self._rows) or j not in self._rows[i]:
            raise KeyError((i, j))
        return self._rows[i][j]

    def _store(self, i: int, j: int, value: float) -> bool:
        if len(self._rows) < i + 1:
            self._rows.extend({} for _ in range(i + 1 - len(self._rows)))
        row = self._rows[i]
        new = j not in row
        row[j] = value
        return new

    def _row_items(self, row: dict[int, float]) -> Iterator[tuple[int, float]]:
        return iter(sorted(row.items()) if self.ordered else row.items())

    def _items(self) -> Iterator[tuple[int, int, float]]:
        for i, row in enumerate(self._rows):
            for j, v in self._row_items(row):
                yield i, j, v

    def vmult(self, x: Sequence[float]) -> list[float]:
        values = self._check_operand(x)
        result = [0.0] * len(values)
        for i, row in enumerate(self._rows):
            for j, v in self._row_items(row):
                result[i] += values[j] * v
        return result


def fill_tridiagonal(matrix: SparseMatrix, n: int) -> bool:
    """Fill ``-2`` on the diagonal and ``1`` beside it, twice over; report if it reads back."""
    if n < 2:
        raise ValueError(f"a tridiagonal matrix needs at least two rows, got {n}")

    def set_row(i: int) -> None:
        matrix[i, i - 1] = 1
        matrix[i, i] = -2
        matrix[i, i + 1] = 1

    matrix[n - 1, n - 2] = 1
    matrix[n - 1, n - 1] = -2
    for i in range(n - 2, 0, -1):
        set_row(i)
    matrix[0, 0] = -2
    matrix[0, 1] = 1
    # writing every entry a second time must leave the matrix unchanged
    matrix[0, 0] = -2
    matrix[0, 1] = 1
    for i in range(1, n - 1):
        set_row(i)
    matrix[n - 1, n - 2] = 1
    matrix[n - 1, n - 1] = -2

    ends_ok = (
        matrix[n - 1, n - 2] == 1
        and matrix[n - 1, n - 1] == -2
        and matrix[0, 1] == 1
        and matrix[0, 0] == -2
    )
    return ends_ok and all(
        matrix[i, i - 1] == 1 and matrix[i, i] == -2 and matrix[i, i + 1] == 1
        for i in range(n - 2, 0, -1)
    )


def _time_us(f: Callable[[], Any]) -> tuple[int, Any]:
    start = time.perf_counter_ns()
    value = f()
    return (time.perf_counter_ns() - start) // 1000, value


def _result_label(ok: bool, name: str) -> str:
    return f"{name} test: {'PASSED' if ok else 'FAILED'}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Test and time sparse matrix storages.")
    parser.add_argument("--size", type=int, default=20000, help="matrix size")
    parser.add_argument("--print", dest="show", action="store_true", help="print matrices")
    args = parser.parse_args(argv)

    n = args.size
    x = [float(k) for k in range(n)]
    expected = [0.0] * n
    expected[0] = 1.0
    expected[n - 1] = -float(n)

    matrices: list[SparseMatrix] = [
        MapMatrix(ordered=True),
        MapMatrix(ordered=False),
        CooMatrix(keep_sorted=True),
        CooMatrix(keep_sorted=False),
    ]
    rule = "--------------------------"
    for mtx in matrices:
        dt_insert, fill_ok = _time_us(lambda mtx=mtx: fill_tridiagonal(mtx, n))
        print(_result_label(fill_ok, "insert"))
        dims_ok = mtx.nrows == n and mtx.ncols == n and mtx.nnz == 3 * n - 2
        print(_result_label(dims_ok, "dimension"))
        print(f"Elapsed for element access: {dt_insert}[μs]")

        dt_vmult, b = _time_us(lambda mtx=mtx: mtx.vmult(x))
        print(_result_label(b == expected, "vmult"))
        print(f"Elapsed for vmult: {dt_vmult}[μs]")
        print(rule)
        if args.show:
            print(mtx.format(), end="")
        print(rule)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())