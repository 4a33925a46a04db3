"""Logger configuration, installation on the standard logging tree and handles."""

from __future__ import annotations

import contextlib
import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Callable

from log2.levels import Level, _from_logging, _to_logging, get_level, set_level
from log2.worker import Worker

_UNLIMITED = 2**64 - 1
_RESET = "\x1b[0m"
_LEVEL_COLORS = {
    Level.OFF: "\x1b[30m",
    Level.ERROR: "\x1b[91m",
    Level.WARN: "\x1b[33m",
    Level.INFO: "\x1b[32m",
    Level.DEBUG: "\x1b[94m",
    Level.TRACE: "\x1b[36m",
}
_GREY = "\x1b[38;2;135;135;135m"

ModuleFilter = Callable[[str], bool]
Formatter = Callable[[logging.LogRecord, bool], str]


def _timestamp() -> str:
    now = datetime.now()
    return now.strftime("%Y-%m-%d %H:%M:%S") + f".{now.microsecond // 1000:03d}"


def _paint(level: Level) -> str:
    return f"{_LEVEL_COLORS[level]}{level.name}{_RESET}"


_OPEN = f"{_GREY}[{_RESET}"
_CLOSE = f"{_GREY}]{_RESET}"


def _ensure_file(path: str) -> None:
    with contextlib.suppress(OSError):
        Path(path).parent.mkdir(parents=True, exist_ok=True)
    with Path(path).open("ab"):
        pass


class _Bridge(logging.Handler):
    def __init__(self, owner: Log2) -> None:
        super().__init__()
        self._owner = owner

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._owner.emit(record)
        except Exception:
            self.handleError(record)

    def flush(self) -> None:
        worker = self._owner._worker
        if worker is not None:
            worker.flush()


_install_lock = threading.Lock()
_installed: _Bridge | None = None


class Log2:
    """Builder and sink for log output to stdout and/or a rotating file."""

    def __init__(self) -> None:
        self._path = ""
        self._tee = False
        self._module = True
        self._line = True
        self._filesize = 100 * 1024 * 1024
        self._count = 10
        self._level = ""
        self._compression = False
        self._module_filter: ModuleFilter | None = None
        self._formatter: Formatter | None = None
        self._worker: Worker | None = None

    def module(self, show: bool) -> Log2:
        """Show the module (logger name) without its line number."""
        self._module = show
        self._line = False
        return self

    def module_with_line(self, show: bool) -> Log2:
        """Show the module together with the line number."""
        self._module = show
        self._line = show
        return self

    def tee(self, stdout: bool) -> Log2:
        """Also send output to stdout."""
        self._tee = stdout
        return self

    def size(self, filesize: int) -> Log2:
        """Set the maximum size of each file."""
        self._filesize = _UNLIMITED if self._count <= 1 else filesize
        return self

    def rotate(self, count: int) -> Log2:
        """Set how many files are kept."""
        self._count = count
        if self._count <= 1:
            self._filesize = _UNLIMITED
        return self

    def module_filter(self, predicate: ModuleFilter) -> Log2:
        """Keep only records whose module the predicate accepts."""
        self._module_filter = predicate
        return self

    def format(self, formatter: Formatter) -> Log2:
        """Use a custom formatter called as ``formatter(record, tee)``."""
        self._formatter = formatter
        return self

    def level(self, name: object) -> Log2:
        """Set the level applied on start."""
        self._level = str(name) if not isinstance(name, Level) else name.name
        return self

    def compress(self, on: bool) -> Log2:
        """Gzip aged files."""
        self._compression = on
        return self

    def start(self) -> Handle:
        """Install this logger and start its worker."""
        name = self._level
        handle = _install(self)
        if name:
            set_level(name)
        return handle

    def enabled(self, level: Level) -> bool:
        """Tell whether ``level`` passes the configured level."""
        return level >= get_level(self._level)

    def emit(self, record: logging.LogRecord) -> None:
        """Format ``record`` and queue it for stdout and/or the file."""
        if self._worker is None:
            raise RuntimeError("log2 is not started")
        module = record.name or "unknown"
        if self._module_filter is not None and not self._module_filter(module):
            return

        origin = ""
        if self._module:
            marker = module
            if self._line:
                number = "" if record.lineno is None else str(record.lineno)
                marker = f"{marker}:{number}"
            origin = f"[{marker}] "

        level = _from_logging(record.levelno)
        if self._tee:
            if self._formatter is not None:
                content = self._formatter(record, True)
            else:
                content = (
                    f"{_OPEN}{_timestamp()}{_CLOSE} {_OPEN}{_paint(level)}{_CLOSE} "
                    f"{origin}{record.getMessage()}\n"
                )
            self._worker.tee(content)

        if self._path:
            if self._formatter is not None:
                content = self._formatter(record, False)
            else:
                content = f"[{_timestamp()}] [{level.name}] {origin}{record.getMessage()}\n"
            self._worker.write(content)


class Handle:
    """Running log2 instance; stop it or use it as a context manager."""

    def __init__(self, worker: Worker, bridge: _Bridge) -> None:
        self._worker = worker
        self._bridge: _Bridge | None = bridge

    def stop(self) -> None:
        """Flush the output, stop the worker and detach the logger."""
        bridge, self._bridge = self._bridge, None
        if bridge is None:
            return
        self._worker.stop()
        _uninstall(bridge)

    def set_level(self, level: object) -> None:
        """Set the maximum level."""
        set_level(level)

    def redirect(self, path: str) -> None:
        """Send file output to ``path`` from now on."""
        _ensure_file(path)
        self._worker.redirect(path)

    def __enter__(self) -> Handle:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


def _install(logger: Log2) -> Handle:
    global _installed
    with _install_lock:
        if _installed is not None:
            raise RuntimeError("error to initialize log2")
        worker = Worker(
            logger._path, logger._filesize, logger._count, logger._compression
        ).start()
        logger._worker = worker
        bridge = _Bridge(logger)
        root = logging.getLogger()
        root.addHandler(bridge)
        root.setLevel(_to_logging(Level.TRACE))
        _installed = bridge
    return Handle(worker, bridge)


def _uninstall(bridge: _Bridge) -> None:
    global _installed
    with _install_lock:
        logging.getLogger().removeHandler(bridge)
        if _installed is bridge:
            _installed = None


def start() -> Handle:
    """Start logging to stdout with the defaults."""
    return stdout().start()


def stdout() -> Log2:
    """Create a logger that writes to stdout."""
    logger = Log2()
    logger._tee = True
    return logger


def open(path: str) -> Log2:
    """Create a logger that writes to ``path``, creating it if needed."""
    _ensure_file(path)
    logger = Log2()
    logger._path = path
    return logger