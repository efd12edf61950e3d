"""Upload a file as multipart form data to the upload server."""

from __future__ import annotations

import argparse
import os

import requests

DEFAULT_URL = "http://localhost:8080/upload"
DEFAULT_FIELD = "file"


def upload_file(
    path: str | os.PathLike[str],
    url: str = DEFAULT_URL,
    field_name: str = DEFAULT_FIELD,
    session: requests.Session | None = None,
) -> bytes:
    """Post the file at ``path`` under ``field_name`` to ``url``; return the response body.

    Raises ``OSError`` if the file cannot be opened and
    ``requests.RequestException`` if the request fails.
    """
    post = session.post if session is not None else requests.post
    with open(path, "rb") as handle:
        response = post(
            url,
            files={field_name: (os.fspath(path), handle, "application/octet-stream")},
        )
    with response:
        return response.content


def main(argv: list[str] | None = None) -> int:
    """Upload one file and print the server's answer."""
    parser = argparse.ArgumentParser(prog="upload-client", description=main.__doc__)
    parser.add_argument("path")
    parser.add_argument("--url", default=DEFAULT_URL)
    parser.add_argument("--field", default=DEFAULT_FIELD)
    args = parser.parse_args(argv)

    try:
        body = upload_file(args.path, args.url, args.field)
    except requests.RequestException as exc:
        print("Error sending request:", exc)
        return 1
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print(f"Response: {body.decode('utf-8', errors='replace')}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())