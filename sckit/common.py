"""Shared helpers: error base class, byte order, console pause, time strings."""

from __future__ import annotations

import sys
import time

__all__ = [
    "ScError",
    "PAUSE_MESSAGE",
    "FLOAT_ZERO",
    "DOUBLE_ZERO",
    "is_big_endian",
    "pause",
    "now_string",
    "isspace",
    "eq_float",
    "eq_double",
]

PAUSE_MESSAGE = "请按任意键继续. . ."

FLOAT_ZERO = 0.000001
DOUBLE_ZERO = 0.000000000001


class ScError(Exception):
    """Base class for errors raised by this package."""


def is_big_endian() -> bool:
    """Return True when the host stores integers most significant byte first."""
    return sys.byteorder == "big"


def pause(prompt: str = PAUSE_MESSAGE) -> None:
    """Print *prompt* and wait until a line is read from standard input."""
    sys.stdout.write(prompt)
    sys.stdout.flush()
    sys.stdin.readline()


def now_string() -> str:
    """Return the local time as ``YYYY-MM-DD HH:MM:SS``."""
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())


def isspace(c: str | int) -> bool:
    """Return True for a space or any character from tab to carriage return."""
    if isinstance(c, int):
        c = chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c == " " or "\t" <= c <= "\r"


def _within(diff: float, zero: float) -> bool:
    return -zero < diff < zero


def eq_float(x: float, y: float) -> bool:
    """Return True when *x* and *y* differ by less than the float tolerance."""
    return _within(x - y, FLOAT_ZERO)


def eq_double(x: float, y: float) -> bool:
    """Return True when *x* and *y* differ by less than the double tolerance."""
    return _within(x - y, DOUBLE_ZERO)