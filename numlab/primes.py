"""Sieves of Eratosthenes: plain, odd-only, cache-blocked and segmented among processes."""

from __future__ import annotations

import argparse
import time
from bisect import bisect_right
from itertools import accumulate

from numlab.inner import chunk_sizes
from numlab.timing import format_vector

_SEGMENT = 32768 * 8
_ODD_SEGMENT = 32768 * 8 * 2


def _check(n: int) -> None:
    if n < 1:
        raise ValueError(f"the sieve limit must be positive, got {n}")


def _clear_odd(flags: bytearray, numbers: range) -> None:
    """Clear the flags of the odd numbers in ``numbers``; flag ``k`` lives at ``(k - 3) // 2``."""
    if numbers:
        start = (numbers[0] - 3) // 2
        stop = (numbers[-1] - 3) // 2 + 1
        flags[start:stop:numbers.step // 2] = bytes(len(numbers))


def get_primes_v1(n: int) -> list[bool]:
    """Flags for 0..n; sieving stops once the prime's square reaches ``n``."""
    _check(n)
    is_prime = [True] * (n + 1)
    is_prime[0] = is_prime[1] = False
    curr = 2
    while curr * curr < n:
        if is_prime[curr]:
            for i in range(curr * curr, n + 1, curr):
                is_prime[i] = False
        curr += 1
    return is_prime


def get_primes_v2(n: int) -> list[bool]:
    """Same sieve as :func:`get_primes_v1` on a compact byte array."""
    _check(n)
    flags = bytearray(b"\x01") * (n + 1)
    flags[0] = flags[1] = 0
    curr = 2
    while curr * curr < n:
        if flags[curr]:
            flags[curr * curr::curr] = bytes(len(range(curr * curr, n + 1, curr)))
        curr += 1
    return [bool(f) for f in flags]


def get_primes_v3(n: int) -> list[bool]:
    """Odd numbers only: entry ``i`` tells whether ``2 * i + 3`` is prime."""
    _check(n)
    flags = bytearray(b"\x01") * ((n + 1) // 2)
    curr = 3
    while curr * curr < n:
        if flags[(curr - 3) // 2]:
            _clear_odd(flags, range(curr * curr, n + 1, 2 * curr))
        curr += 2
    return [bool(f) for f in flags]


def get_primes_v4(n: int) -> list[bool]:
    """Cache-sized blocks sieved by odd primes only; even entries above 2 are left set."""
    _check(n)
    flags = bytearray(b"\x01") * (n + 1)
    flags[0] = flags[1] = 0
    for i in range(0, n, _SEGMENT):
        end = min(i + _SEGMENT, n)
        curr = 3
        while curr * curr < end:
            if flags[curr]:
                first = curr * curr
                if first <= i:
                    first = i + (-i) % curr
                flags[first:end:curr] = bytes(len(range(first, end, curr)))
            curr += 2
    return [bool(f) for f in flags]


def get_primes_v5(n: int) -> list[bool]:
    """Cache-sized blocks over odd numbers only; layout as in :func:`get_primes_v3`."""
    _check(n)
    flags = bytearray(b"\x01") * ((n + 1) // 2)
    for i in range(0, n, _ODD_SEGMENT):
        end = min(i + _ODD_SEGMENT, n)
        curr = 3
        while curr * curr < end:
            if flags[(curr - 3) // 2]:
                first = curr * curr
                if first <= i:
                    first = i + (-i) % curr
                    first += (1 - first % 2) * curr
                _clear_odd(flags, range(first, end, 2 * curr))
            curr += 2
    return [bool(f) for f in flags]


def get_primes_segmented(n: int, size: int) -> list[bool]:
    """Flags for 0..n-1, the range split in balanced segments among ``size`` processes."""
    if size < 1:
        raise ValueError(f"the number of processes must be positive, got {size}")
    if n < 2:
        raise ValueError(f"the sieve limit must be at least 2, got {n}")
    counts = chunk_sizes(n, size)
    if counts[0] < 2:
        raise ValueError(f"the first segment must hold 0 and 1; {n} is too small for {size}")
    starts = list(accumulate(counts[:-1], initial=0))
    segments = [bytearray(b"\x01") * count for count in counts]
    segments[0][0] = segments[0][1] = 0

    def flag(k: int) -> int:
        rank = bisect_right(starts, k) - 1
        return segments[rank][k - starts[rank]]

    curr = 2
    while curr * curr < n:
        square = curr * curr
        for segment, low in zip(segments, starts):
            first = square - low if square > low else (-low) % curr
            segment[first::curr] = bytes(len(range(first, len(segment), curr)))
        curr += 1
        while curr < n and not flag(curr):
            curr += 1
    return [bool(f) for segment in segments for f in segment]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Time several prime sieves.")
    parser.add_argument("--n", type=int, default=1_000_000, help="sieve limit")
    parser.add_argument("--size", type=int, default=1, help="number of processes")
    args = parser.parse_args(argv)

    variants = [
        (get_primes_v1, "naive"),
        (get_primes_v2, "byte-array"),
        (get_primes_v3, "byte-array+avoid-even"),
        (get_primes_v4, "byte-array+cache-friendly"),
        (get_primes_v5, "byte-array+cache-friendly+avoid-even"),
    ]
    for func, label in variants:
        t0 = time.perf_counter()
        func(args.n)
        dt = int((time.perf_counter() - t0) * 1000)
        print(f"Elapsed: {dt} [ms] for {label}")

    t0 = time.perf_counter()
    flags = get_primes_segmented(100, args.size)
    dt = int((time.perf_counter() - t0) * 1000)
    print(f"Elapsed: {dt} [ms] ")
    print(format_vector(int(f) for f in flags))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())