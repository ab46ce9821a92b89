"""Balanced k-d trees stored as child-index pairs, built serially or with a thread pool."""

from __future__ import annotations

import argparse
import os
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Tuple

Node = Tuple[Optional[int], Optional[int]]
Point = Tuple[float, ...]


def _points(points: Sequence[Sequence[float]]) -> tuple[list[Point], int]:
    pts = [tuple(float(c) for c in p) for p in points]
    if not pts:
        return pts, 0
    dim = len(pts[0])
    if dim == 0:
        raise ValueError("points must have at least one coordinate")
    if any(len(p) != dim for p in pts):
        raise ValueError("all points must have the same dimension")
    return pts, dim


def _split(points: list[Point], idxs: list[int], depth: int, dim: int):
    axis = depth % dim
    ordered = sorted(idxs, key=lambda k: points[k][axis])
    median = len(ordered) // 2
    return ordered[median], ordered[:median], ordered[median + 1:]


def _build(
    points: list[Point], idxs: list[int], tree: list[Node], depth: int, dim: int
) -> int | None:
    if not idxs:
        return None
    if len(idxs) == 1:
        tree[idxs[0]] = (None, None)
        return idxs[0]
    root, left, right = _split(points, idxs, depth, dim)
    tree[root] = (
        _build(points, left, tree, depth + 1, dim),
        _build(points, right, tree, depth + 1, dim),
    )
    return root


def build_kdtree(points: Sequence[Sequence[float]]) -> list[Node]:
    """For every point, the indices of its left and right children (``None`` if absent)."""
    pts, dim = _points(points)
    tree: list[Node] = [(None, None)] * len(pts)
    _build(pts, list(range(len(pts))), tree, 0, dim)
    return tree


def build_kdtree_parallel(
    points: Sequence[Sequence[float]], max_workers: int | None = None
) -> list[Node]:
    """Same tree as :func:`build_kdtree`; the top levels are split and subtrees built in threads."""
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"the number of workers must be positive, got {max_workers}")
    pts, dim = _points(points)
    tree: list[Node] = [(None, None)] * len(pts)
    workers = max_workers or os.cpu_count() or 1
    levels = (workers - 1).bit_length()
    pending: list[tuple[int, Callable[[], int | None], Callable[[], int | None]]] = []

    with ThreadPoolExecutor(max_workers=workers) as pool:

        def spawn(idxs: list[int], depth: int, level: int) -> Callable[[], int | None]:
            if level == 0 or len(idxs) <= 1:
                return pool.submit(_build, pts, idxs, tree, depth, dim).result
            root, left, right = _split(pts, idxs, depth, dim)
            pending.append(
                (root, spawn(left, depth + 1, level - 1), spawn(right, depth + 1, level - 1))
            )
            return lambda: root

        spawn(list(range(len(pts))), 0, levels)

    for root, left, right in pending:
        tree[root] = (left(), right())
    return tree


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build a k-d tree of a few sample points.")
    parser.add_argument("--workers", type=int, default=None, help="build with a thread pool")
    args = parser.parse_args(argv)

    points = [(7, 2), (5, 4), (9, 6), (4, 7), (8, 1), (2, 3)]
    if args.workers is None:
        tree = build_kdtree(points)
    else:
        tree = build_kdtree_parallel(points, args.workers)
    for left, right in tree:
        print(f"{left} {right}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())