"""Example programs: logging to a file, to stdout, and with a custom format."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from log2 import logger as log2
from log2.levels import Level, _from_logging, _to_logging
from log2.logger import _CLOSE, _OPEN, _paint, _timestamp

_LOG = logging.getLogger(__name__)
_TRACE = _to_logging(Level.TRACE)

_TEXT = """On either side the river lie
Long fields of barley and of rye,
That clothe the wold and meet the sky;
And thro' the field the road runs by
To many-tower'd Camelot;
And up and down the people go,
Gazing where the lilies blow
Round an island there below,
The island of Shalott."""


def custom_format(record: logging.LogRecord, tee: bool) -> str:
    """Format a record with a ``CUSTOM`` prefix, coloured for stdout."""
    module = record.name or "unknown"
    line = "" if record.lineno is None else str(record.lineno)
    origin = f"[{module}:{line}]"
    level = _from_logging(record.levelno)
    if tee:
        return (
            f"CUSTOM {_OPEN}{_timestamp()}{_CLOSE} {_OPEN}{_paint(level)}{_CLOSE} "
            f"{origin}{record.getMessage()}"
        )
    return f"CUSTOM [{_timestamp()}] [{level.name}] {origin}{record.getMessage()}\n"


def _emit_samples() -> None:
    _LOG.log(_TRACE, "send order request to server")
    _LOG.debug("receive order response")
    _LOG.info("order was executed")
    _LOG.warning("network speed is slow")
    _LOG.error("network connection was broken")


def run_file(path: str = "log.txt") -> None:
    """Log a poem repeatedly to small, rotated, compressed files."""
    with log2.open(path).size(1024).rotate(10).compress(True).start():
        for index in range(15):
            _LOG.info("current test id = %s", index)
            _LOG.log(_TRACE, "%s", _TEXT)
            _LOG.debug("%s", _TEXT)
            _LOG.info("%s", _TEXT)
            _LOG.error("%s", _TEXT)
            _LOG.warning("%s", _TEXT)


def run_format(path: str = "custom.txt") -> None:
    """Log to a file and stdout with :func:`custom_format`."""
    with (
        log2.open(path)
        .tee(True)
        .level("trace")
        .module(False)
        .module_with_line(True)
        .module_filter(lambda module: module != "")
        .format(custom_format)
        .start()
    ):
        _emit_samples()


def run_stdout() -> None:
    """Log to stdout at trace level with module and line."""
    with (
        log2.stdout()
        .level("trace")
        .module(False)
        .module_with_line(True)
        .module_filter(lambda module: module != "")
        .start()
    ):
        _emit_samples()


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the examples."""
    parser = argparse.ArgumentParser(prog="log2-demo", description=__doc__)
    parser.add_argument("example", choices=("stdout", "file", "format"))
    parser.add_argument("--path", help="output file for the file examples")
    args = parser.parse_args(argv)
    if args.example == "stdout":
        run_stdout()
    elif args.example == "file":
        run_file(args.path or "log.txt")
    else:
        run_format(args.path or "custom.txt")
    return 0