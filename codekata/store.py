"""A storage server that saves files posted as multipart form data."""

from __future__ import annotations

import argparse
import shutil
from pathlib import Path, PurePosixPath

from werkzeug.exceptions import RequestEntityTooLarge
from werkzeug.formparser import parse_form_data
from werkzeug.serving import run_simple
from werkzeug.wrappers import Request, Response

from codekata import logger

STORE_PATH = "/store"
FORM_FIELD = "file"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8181
DEFAULT_UPLOAD_DIR = "./uploads"


class _HandlerError(Exception):
    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


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


class StoreApp:
    """WSGI application storing the file posted to ``/store`` in ``upload_dir``."""

    def __init__(self, upload_dir: str | Path = DEFAULT_UPLOAD_DIR) -> None:
        self.upload_dir = Path(upload_dir)

    def __call__(self, environ, start_response):
        request = Request(environ)
        if request.path != STORE_PATH:
            response = _plain_error("404 page not found", 404)
        else:
            response = self._handle(request)
        return response(environ, start_response)

    def _handle(self, request: Request) -> Response:
        logger.info.info(
            "received request %s %s %s", request.method, request.path, _remote(request.environ)
        )
        try:
            name = self._store(request)
        except _HandlerError as exc:
            logger.error.error(exc.message)
            return _plain_error(exc.message, exc.status)
        message = f"File stored successfully: {name}\n"
        logger.info.info(message.rstrip("\n"))
        return Response(message, mimetype="text/plain")

    def _store(self, request: Request) -> str:
        if request.method != "POST":
            raise _HandlerError(f"Method {request.method} not allowed", 405)
        files = self._parse_files(request)
        storage = files.get(FORM_FIELD)
        name = PurePosixPath(storage.filename or "").name if storage is not None else ""
        if not name:
            raise _HandlerError("Error retrieving the file: http: no such file", 400)
        try:
            destination = open(self.upload_dir / name, "wb")
        except OSError as exc:
            raise _HandlerError(f"Unable to create the file: {exc}", 500) from exc
        with destination:
            try:
                shutil.copyfileobj(storage.stream, destination)
            except OSError as exc:
                raise _HandlerError(f"Error saving the file: {exc}", 500) from exc
        return name

    @staticmethod
    def _parse_files(request: Request):
        prefix = "Error parsing form data: "
        if request.mimetype != "multipart/form-data":
            raise _HandlerError(prefix + "request Content-Type isn't multipart/form-data", 400)
        if not request.mimetype_params.get("boundary"):
            raise _HandlerError(prefix + "no multipart boundary param in Content-Type", 400)
        try:
            _, _, files = parse_form_data(request.environ, silent=False)
        except (ValueError, RequestEntityTooLarge) as exc:
            raise _HandlerError(f"{prefix}{exc}", 400) from exc
        return files


def create_app(upload_dir: str | Path = DEFAULT_UPLOAD_DIR) -> StoreApp:
    """Make sure ``upload_dir`` exists and return a store application using it."""
    Path(upload_dir).mkdir(parents=True, exist_ok=True)
    return StoreApp(upload_dir)


def main(argv: list[str] | None = None) -> int:
    """Run the storage server."""
    parser = argparse.ArgumentParser(prog="store", description=main.__doc__)
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--upload-dir", default=DEFAULT_UPLOAD_DIR)
    args = parser.parse_args(argv)

    logger.configure()
    app = create_app(args.upload_dir)
    logger.info.info("Storage Server listening on :%d", args.port)
    run_simple(args.host, args.port, app)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())