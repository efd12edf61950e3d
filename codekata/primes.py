"""Find prime numbers by splitting a range across worker threads."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from itertools import chain

DEFAULT_LIMIT = 30
DEFAULT_WORKERS = 4


def is_prime(num: int) -> bool:
    """Return True if ``num`` is a prime number."""
    if num < 2:
        return False
    return all(num % divisor for divisor in range(2, math.isqrt(num) + 1))


def primes_in_range(start: int, end: int) -> list[int]:
    """Return the primes ``p`` with ``start <= p < end``, in ascending order."""
    return [num for num in range(start, end) if is_prime(num)]


def chunk_bounds(total: int, workers: int) -> list[tuple[int, int]]:
    """Split ``[0, total)`` into ``workers`` half-open ranges.

    Every range has ``total // workers`` numbers except the last, which
    runs up to ``total`` and takes the remainder.
    """
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    if total < 0:
        raise ValueError(f"total must not be negative, got {total}")
    size = total // workers
    bounds = [(i * size, (i + 1) * size) for i in range(workers)]
    last_start, _ = bounds[-1]
    bounds[-1] = (last_start, total)
    return bounds


def parallel_primes(limit: int, workers: int = DEFAULT_WORKERS) -> list[int]:
    """Return every prime below ``limit``, computed on ``workers`` threads."""
    bounds = chunk_bounds(limit, workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        chunks = pool.map(lambda span: primes_in_range(*span), bounds)
        return sorted(chain.from_iterable(chunks))


def _format_list(values: Iterable[int]) -> str:
    return "[" + " ".join(str(value) for value in values) + "]"


def main(argv: list[str] | None = None) -> int:
    """Print the primes below a limit, found in parallel."""
    parser = argparse.ArgumentParser(prog="primes", description=main.__doc__)
    parser.add_argument("limit", nargs="?", type=int, default=DEFAULT_LIMIT)
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS)
    args = parser.parse_args(argv)

    try:
        bounds = chunk_bounds(args.limit, args.workers)
    except ValueError as exc:
        parser.error(str(exc))

    print("Chunk size:", args.limit // args.workers)
    for start, end in bounds:
        print("Start:", start, "End:", end)
    primes = parallel_primes(args.limit, args.workers)
    print("Parallel: prime numbers up to", args.limit, "are:", _format_list(primes))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())