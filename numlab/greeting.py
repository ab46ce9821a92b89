"""Greetings assembled on every rank and collected, in rank order, by rank 0."""

from __future__ import annotations

import argparse
import os


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError(f"the number of processes must be positive, got {size}")


def greeting_message(greeting: str, rank: int, size: int) -> str:
    """The message that process ``rank`` out of ``size`` sends."""
    _check_size(size)
    if not 0 <= rank < size:
        raise ValueError(f"rank {rank} is outside 0..{size - 1}")
    return f"Hello {greeting}, from rank {rank} of {size}"


def gather_messages(greeting: str, size: int) -> list[str]:
    """The messages of all ranks as rank 0 outputs them: its own first, then 1, 2, ..."""
    _check_size(size)
    return [greeting_message(greeting, rank, size) for rank in range(size)]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print a greeting from every process.")
    parser.add_argument("greeting", nargs="?", default="world", help="who to greet")
    parser.add_argument(
        "--size", type=int, default=os.cpu_count() or 1, help="number of processes"
    )
    args = parser.parse_args(argv)

    for message in gather_messages(args.greeting, args.size):
        print(message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())