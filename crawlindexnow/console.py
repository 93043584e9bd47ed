"""Prefixed console output used by the commands."""

from __future__ import annotations

import sys
from typing import TextIO

INFO_PREFIX = "[-]"
ERROR_PREFIX = "[❗]"


def _write_line(stream: TextIO, *parts: object) -> None:
    """Write the parts separated by spaces and followed by a newline."""
    stream.write(" ".join(str(part) for part in parts) + "\n")


def cprint(*args) -> None:
    """Print the arguments to stdout after the info prefix."""
    _write_line(sys.stdout, INFO_PREFIX, *args)


def print_blank_line() -> None:
    """Print an empty line to stdout."""
    _write_line(sys.stdout)


def cprint_error(*args) -> None:
    """Print the arguments to stderr after the error prefix.

    Exits with status 1 if stderr cannot be written to.
    """
    try:
        _write_line(sys.stderr, ERROR_PREFIX, *args)
    except OSError as exc:
        _write_line(sys.stdout, f"error writing to STDERR: {exc}")
        raise SystemExit(1) from exc