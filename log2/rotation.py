"""Size-based rotation of log files, with optional gzip compression."""

from __future__ import annotations

import contextlib
import gzip
import os
import shutil
from typing import BinaryIO


def split_path(path: str) -> tuple[str, str]:
    """Split ``path`` at its last dot into a prefix and a dotted suffix."""
    dot = path.rfind(".")
    if dot > 0:
        return path[:dot], path[dot:]
    return path, ""


def compress_file(source: str, target: str) -> None:
    """Gzip ``source`` into ``target``, adding ``.gz`` if it is missing."""
    if not target.endswith(".gz"):
        target = f"{target}.gz"
    with open(source, "rb") as infile, gzip.open(target, "wb") as outfile:
        shutil.copyfileobj(infile, outfile, 8192)


def maintain(source: str, target: str, index: int, compression: bool) -> None:
    """Move one aged file up a slot; failures are ignored."""
    if compression:
        if index == 0:
            try:
                compress_file(source, target)
            except OSError:
                return
            with contextlib.suppress(OSError):
                os.remove(source)
        else:
            with contextlib.suppress(OSError):
                os.replace(f"{source}.gz", f"{target}.gz")
    else:
        with contextlib.suppress(OSError):
            os.replace(source, target)


def rotate(path: str, size: int, count: int, compression: bool) -> BinaryIO:
    """Rotate ``path`` if it has reached ``size`` and open it for appending."""
    current = os.path.getsize(path)
    prefix, suffix = split_path(path)
    if current >= size:
        for index in reversed(range(count - 1)):
            source = path if index == 0 else f"{prefix}.{index}{suffix}"
            target = f"{prefix}.{index + 1}{suffix}"
            maintain(source, target, index, compression)
    return open(path, "ab")