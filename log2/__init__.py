"""Logging to stdout or to size-rotated, optionally gzip-compressed files."""

__version__ = "0.2.0"

__all__ = ["levels", "rotation", "worker", "logger", "demo"]