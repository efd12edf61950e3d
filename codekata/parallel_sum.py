"""Sum a list of integers by splitting it across worker threads."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

DEFAULT_VALUES = tuple(range(1, 11))
DEFAULT_WORKERS = 4


def split_chunks(values: Sequence[int], workers: int) -> list[list[int]]:
    """Split ``values`` into ``workers`` chunks of ``len(values) // workers`` items.

    The last chunk takes whatever is left over.
    """
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    items = list(values)
    size = len(items) // workers
    chunks = [items[i * size:(i + 1) * size] for i in range(workers - 1)]
    chunks.append(items[(workers - 1) * size:])
    return chunks


def parallel_sum(values: Sequence[int], workers: int = DEFAULT_WORKERS) -> int:
    """Return the sum of ``values``, adding each chunk on its own thread."""
    chunks = split_chunks(values, workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return sum(pool.map(sum, chunks))


def _format_list(values: Iterable[int]) -> str:
    return "[" + " ".join(str(value) for value in values) + "]"


def main(argv: list[str] | None = None) -> int:
    """Print the sequential and the parallel sum of some integers."""
    parser = argparse.ArgumentParser(prog="parallel-sum", description=main.__doc__)
    parser.add_argument("values", nargs="*", type=int)
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS)
    args = parser.parse_args(argv)
    values = args.values or list(DEFAULT_VALUES)

    try:
        chunks = split_chunks(values, args.workers)
    except ValueError as exc:
        parser.error(str(exc))

    print("sequential sum", sum(values))
    print("Chunk size:", len(values) // args.workers)
    for chunk in chunks:
        print("Chunk:", _format_list(chunk))
    print("Parallel sum:", parallel_sum(values, args.workers))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())