"""Shared loggers for the upload services: info, warn and error."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_FORMAT = "%(asctime)s %(filename)s:%(lineno)d: %(message)s"
_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

info = logging.getLogger("codekata.info")
warn = logging.getLogger("codekata.warn")
error = logging.getLogger("codekata.error")


def configure(out_stream: TextIO | None = None, err_stream: TextIO | None = None) -> None:
    """Send info and warn records to ``out_stream`` and error records to ``err_stream``.

    Each line carries a level prefix, the date, the time and the calling file and line.
    Calling it again replaces the previous destinations.
    """
    out = out_stream if out_stream is not None else sys.stdout
    err = err_stream if err_stream is not None else sys.stderr
    for target, prefix, stream in (
        (info, "[INFO] ", out),
        (warn, "[WARN] ", out),
        (error, "[ERROR] ", err),
    ):
        for handler in list(target.handlers):
            target.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(prefix + _FORMAT, _DATE_FORMAT))
        target.addHandler(handler)
        target.setLevel(logging.DEBUG)
        target.propagate = False