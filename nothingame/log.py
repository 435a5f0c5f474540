"""Severity-tagged messages on standard error."""

from __future__ import annotations

import sys


def _log(severity: str, fmt: str, args: tuple) -> int:
    message = fmt % args if args else fmt
    text = f"[{severity}] {message}"
    sys.stderr.write(text)
    return len(text)


def log_fail(fmt: str, *args: object) -> int:
    """Write a failure message; returns the number of characters written."""
    return _log("FAIL", fmt, args)


def log_warn(fmt: str, *args: object) -> int:
    """Write a warning message; returns the number of characters written."""
    return _log("WARN", fmt, args)


def log_info(fmt: str, *args: object) -> int:
    """Write an informational message; returns the number of characters written."""
    return _log("INFO", fmt, args)