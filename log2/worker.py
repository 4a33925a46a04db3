"""Background thread that writes log lines to a file and to stdout."""

from __future__ import annotations

import enum
import os
import queue
import sys
import threading
import time
from typing import BinaryIO, TextIO

from log2.rotation import rotate


class _Action(enum.Enum):
    WRITE = enum.auto()
    TEE = enum.auto()
    FLUSH = enum.auto()
    EXIT = enum.auto()
    REDIRECT = enum.auto()


class Worker:
    """Consumes queued output on its own thread.

    ``error`` holds the exception that ended the thread, if any.
    """

    def __init__(
        self,
        path: str = "",
        size: int = 100 * 1024 * 1024,
        count: int = 10,
        compression: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        self._path = path
        self._size = size
        self._count = count
        self._compression = compression
        self._stream = stream
        self._queue: queue.Queue[tuple[_Action, str]] = queue.Queue()
        self._thread: threading.Thread | None = None
        self.error: Exception | None = None

    def start(self) -> Worker:
        """Start the background thread."""
        self._thread = threading.Thread(target=self._run, name="log2", daemon=True)
        self._thread.start()
        return self

    def write(self, line: str) -> None:
        """Queue a line for the log file."""
        self._queue.put((_Action.WRITE, line))

    def tee(self, line: str) -> None:
        """Queue a line for stdout."""
        self._queue.put((_Action.TEE, line))

    def flush(self) -> None:
        """Queue a flush of the log file."""
        self._queue.put((_Action.FLUSH, ""))

    def redirect(self, path: str) -> None:
        """Queue a switch to another, already existing, log file."""
        self._queue.put((_Action.REDIRECT, path))

    def stop(self) -> None:
        """Flush, end the thread and wait for it."""
        thread, self._thread = self._thread, None
        if thread is not None:
            self._queue.put((_Action.EXIT, ""))
            thread.join()

    def _out(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _open(self) -> tuple[BinaryIO, int]:
        target = rotate(self._path, self._size, self._count, self._compression)
        return target, os.fstat(target.fileno()).st_size

    def _run(self) -> None:
        try:
            self._loop()
        except (OSError, RuntimeError) as exc:
            self.error = exc
            out = self._out()
            out.write(f"error: {exc}\n")
            out.flush()

    def _loop(self) -> None:
        target: BinaryIO | None = None
        size = 0
        last = size
        try:
            if self._path:
                target, size = self._open()
            stamp = int(time.time())
            while True:
                try:
                    action, payload = self._queue.get(timeout=1.0)
                except queue.Empty:
                    pass
                else:
                    match action:
                        case _Action.WRITE:
                            if target is None:
                                raise RuntimeError("no log file to write to")
                            data = payload.encode("utf-8")
                            target.write(data)
                            size += len(data)
                            if size >= self._size:
                                target.close()
                                target = None
                                target, size = self._open()
                        case _Action.TEE:
                            out = self._out()
                            out.write(payload)
                            out.flush()
                        case _Action.FLUSH:
                            if target is not None:
                                target.flush()
                        case _Action.EXIT:
                            if target is not None:
                                target.flush()
                            return
                        case _Action.REDIRECT:
                            self._path = payload
                            if target is not None:
                                target.close()
                                target = None
                            target, size = self._open()
                if size > last and target is not None:
                    now = int(time.time())
                    if now - stamp >= 1:
                        stamp = now
                        target.flush()
                        last = size
        finally:
            if target is not None:
                target.close()