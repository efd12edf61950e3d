"""Check whether web links answer, one by one, concurrently or continuously."""

from __future__ import annotations

import argparse
import queue
import sys
import threading
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TextIO

import requests

DEFAULT_LINKS = (
    "aaa",
    "https://example.com",
    "https://example.org",
    "https://example.net",
)
DEFAULT_DUMP_URL = "http://example.com"
DEFAULT_INTERVAL = 5.0
COPY_CHUNK_SIZE = 32 * 1024


def _get(session: requests.Session | None):
    return session.get if session is not None else requests.get


def check_link(link: str, session: requests.Session | None = None) -> bool:
    """Request ``link`` and report whether it answered at all.

    Any HTTP status counts as up; only a failure to get a response counts as down.
    """
    try:
        _get(session)(link)
    except requests.RequestException:
        print(f"Link {link} might be down!")
        return False
    print(f"Link {link} is OK")
    return True


def check_links_sequential(
    links: Iterable[str], session: requests.Session | None = None
) -> dict[str, bool]:
    """Check each link in turn; map every link to whether it is up."""
    return {link: check_link(link, session) for link in links}


def check_links(
    links: Iterable[str], session: requests.Session | None = None
) -> dict[str, bool]:
    """Check all links at once; the mapping is ordered by completion."""
    links = list(links)
    if not links:
        return {}
    results: dict[str, bool] = {}
    with ThreadPoolExecutor(max_workers=len(links)) as pool:
        futures = {pool.submit(check_link, link, session): link for link in links}
        for future in as_completed(futures):
            results[futures[future]] = future.result()
    return results


def watch_links(
    links: Iterable[str],
    interval: float = DEFAULT_INTERVAL,
    max_checks: int | None = None,
    session: requests.Session | None = None,
) -> Iterator[tuple[str, bool]]:
    """Check links repeatedly, yielding ``(link, up)`` as each check finishes.

    Every link is checked again ``interval`` seconds after its previous check.
    The generator runs forever unless ``max_checks`` bounds the number of checks.
    """
    links = list(links)
    if interval < 0:
        raise ValueError(f"interval must not be negative, got {interval}")
    if max_checks is not None and max_checks < 0:
        raise ValueError(f"max_checks must not be negative, got {max_checks}")
    if not links or max_checks == 0:
        return

    results: queue.Queue[tuple[str, bool]] = queue.Queue()
    stop = threading.Event()

    def run(link: str, delay: float) -> None:
        if stop.wait(delay):
            return
        results.put((link, check_link(link, session)))

    pool = ThreadPoolExecutor(max_workers=len(links))
    pending = 0
    produced = 0
    try:
        for link in links:
            if max_checks is not None and pending >= max_checks:
                break
            pool.submit(run, link, 0)
            pending += 1
        while pending:
            link, up = results.get()
            pending -= 1
            produced += 1
            yield link, up
            if max_checks is None or produced + pending < max_checks:
                pool.submit(run, link, interval)
                pending += 1
    finally:
        stop.set()
        pool.shutdown(wait=True, cancel_futures=True)


def dump_response(
    url: str,
    stream: TextIO | None = None,
    session: requests.Session | None = None,
) -> int:
    """Write the body of ``url`` to ``stream`` chunk by chunk; return the byte count.

    Each chunk is followed by a line telling how many bytes it held.
    Raises ``requests.RequestException`` if no response arrives.
    """
    out = stream if stream is not None else sys.stdout
    total = 0
    with _get(session)(url, stream=True) as response:
        for chunk in response.iter_content(chunk_size=COPY_CHUNK_SIZE):
            if not chunk:
                continue
            print(chunk.decode("utf-8", errors="replace"), file=out)
            print("Just wrote this many bytes:", len(chunk), file=out)
            total += len(chunk)
    return total


def main(argv: list[str] | None = None) -> int:
    """Check links, or dump the body of one URL."""
    parser = argparse.ArgumentParser(prog="linkcheck", description=main.__doc__)
    parser.add_argument(
        "mode",
        nargs="?",
        choices=("sequential", "concurrent", "watch", "dump"),
        default="concurrent",
    )
    parser.add_argument("links", nargs="*")
    parser.add_argument("--interval", type=float, default=DEFAULT_INTERVAL)
    args = parser.parse_args(argv)

    if args.mode == "dump":
        url = args.links[0] if args.links else DEFAULT_DUMP_URL
        try:
            dump_response(url)
        except requests.RequestException as exc:
            print("Error:", exc)
            return 1
        return 0

    links = args.links or list(DEFAULT_LINKS)
    if args.mode == "sequential":
        check_links_sequential(links)
    elif args.mode == "concurrent":
        for up in check_links(links).values():
            print("up" if up else "down")
    else:
        try:
            for _ in watch_links(links, interval=args.interval):
                pass
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())