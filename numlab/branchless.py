"""Branching versus branchless versions of small kernels, with a timing driver."""

from __future__ import annotations

import argparse
import random
import string
import time
from collections.abc import Callable

ALPHANUM = string.digits + string.ascii_uppercase + string.ascii_lowercase


def smaller_standard(a: int, b: int) -> int:
    """The smaller of two values, chosen with a branch."""
    if a < b:
        return a
    return b


def smaller_branchless(a: int, b: int) -> int:
    """The smaller of two values, chosen arithmetically."""
    return a * (a < b) + b * (b <= a)


def toupper_standard(data: str) -> str:
    """Upper-case the ASCII letters a-z, leaving everything else untouched."""
    return "".join(chr(ord(c) - 32) if "a" <= c <= "z" else c for c in data)


def toupper_branchless(data: str) -> str:
    """Upper-case the ASCII letters a-z by an arithmetic offset."""
    return "".join(chr(ord(c) - 32 * ("a" <= c <= "z")) for c in data)


def random_alphanum(rng: random.Random, length: int) -> str:
    """A random string of ASCII letters and digits."""
    return "".join(rng.choice(ALPHANUM) for _ in range(length))


def _time_us(func: Callable[[str], str], tests: list[str]) -> int:
    start = time.perf_counter_ns()
    for t in tests:
        func(t)
    return (time.perf_counter_ns() - start) // 1000


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Time branching and branchless toupper.")
    parser.add_argument("--tests", type=int, default=100000, help="number of random strings")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    tests = [random_alphanum(rng, rng.randint(5, 50)) for _ in range(args.tests)]
    for func in (toupper_branchless, toupper_standard):
        print(f"Elapsed: {_time_us(func, tests)} [μs]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())