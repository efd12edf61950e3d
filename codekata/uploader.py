"""An upload server that forwards posted files to the storage server, with retries."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable

import requests
from werkzeug.serving import run_simple
from werkzeug.wrappers import Request, Response

from codekata import logger

UPLOAD_PATH = "/upload"
DEFAULT_TARGET_URL = "http://localhost:8181/store"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_MAX_RETRIES = 5
DEFAULT_BACKOFF_FACTOR = 1.0

_REQUEST_HEADERS_SKIPPED = frozenset({"host", "content-length", "transfer-encoding", "connection"})
_RESPONSE_HEADERS_SKIPPED = frozenset(
    {"content-length", "transfer-encoding", "connection", "content-encoding"}
)


def backoff_delay(
    attempt: int,
    factor: float = DEFAULT_BACKOFF_FACTOR,
    rng: random.Random | None = None,
) -> float:
    """Seconds to wait after failed ``attempt`` (from 0): exponential, plus jitter.

    The result lies in ``[factor * 2**attempt, 2 * factor * 2**attempt)``.
    """
    if attempt < 0:
        raise ValueError(f"attempt must not be negative, got {attempt}")
    if factor < 0:
        raise ValueError(f"factor must not be negative, got {factor}")
    rng = rng if rng is not None else random.Random()
    base = factor * (1 << attempt)
    return base + rng.random() * base


def _plain_error(message: str, status: int) -> Response:
    return Response(
        message + "\n",
        status=status,
        mimetype="text/plain",
        headers={"X-Content-Type-Options": "nosniff"},
    )


def _remote(environ: dict) -> str:
    address = environ.get("REMOTE_ADDR", "")
    port = environ.get("REMOTE_PORT")
    return f"{address}:{port}" if port else address


class UploadApp:
    """WSGI application relaying POSTs on ``/upload`` to ``target_url``.

    Connection failures and 5xx answers are retried with exponential backoff;
    once ``max_retries`` attempts have failed the client gets a 502.
    """

    def __init__(
        self,
        target_url: str = DEFAULT_TARGET_URL,
        max_retries: int = DEFAULT_MAX_RETRIES,
        backoff_factor: float = DEFAULT_BACKOFF_FACTOR,
        session: requests.Session | None = None,
        sleep: Callable[[float], object] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {max_retries}")
        self.target_url = target_url
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.session = session if session is not None else requests.Session()
        self.sleep = sleep if sleep is not None else time.sleep
        self.rng = rng if rng is not None else random.Random()

    def __call__(self, environ, start_response):
        request = Request(environ)
        if request.path != UPLOAD_PATH:
            response = _plain_error("404 page not found", 404)
        else:
            response = self._forward(request)
        return response(environ, start_response)

    def _forward(self, request: Request) -> Response:
        logger.info.info(
            "received request %s %s %s", request.method, request.path, _remote(request.environ)
        )
        if request.method != "POST":
            message = f"Method {request.method} not allowed"
            logger.error.error(message)
            return _plain_error(message, 405)

        body = request.get_data(cache=False)
        headers = {
            name: value
            for name, value in request.headers.items()
            if name.lower() not in _REQUEST_HEADERS_SKIPPED
        }

        for attempt in range(self.max_retries):
            try:
                upstream = self.session.post(self.target_url, data=body, headers=headers)
            except requests.RequestException as exc:
                logger.error.error("Error forwarding request: %s", exc)
            else:
                if upstream.status_code < 500:
                    return self._relay(upstream)
                logger.error.error("Received 5xx status %d, retrying...", upstream.status_code)
                upstream.close()

            if attempt == self.max_retries - 1:
                break
            self.sleep(backoff_delay(attempt, self.backoff_factor, self.rng))

        message = f"Max retries reached for request to {self.target_url}"
        logger.error.error(message)
        return _plain_error(message, 502)

    @staticmethod
    def _relay(upstream: requests.Response) -> Response:
        with upstream:
            if upstream.status_code != 200:
                logger.warn.warning(
                    "request to storage NOT successful %d", upstream.status_code
                )
            headers = [
                (name, value)
                for name, value in upstream.headers.items()
                if name.lower() not in _RESPONSE_HEADERS_SKIPPED
            ]
            return Response(upstream.content, status=upstream.status_code, headers=headers)


def create_app(target_url: str = DEFAULT_TARGET_URL) -> UploadApp:
    """Return an upload application forwarding to ``target_url``."""
    return UploadApp(target_url)


def main(argv: list[str] | None = None) -> int:
    """Run the upload server."""
    parser = argparse.ArgumentParser(prog="uploader", description=main.__doc__)
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--target-url", default=DEFAULT_TARGET_URL)
    args = parser.parse_args(argv)

    logger.configure()
    app = create_app(args.target_url)
    logger.info.info("Upload Server listening on :%d", args.port)
    run_simple(args.host, args.port, app)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())