"""Text helpers: a growable text buffer, string hashing and file shortcuts."""

from __future__ import annotations

from os import PathLike
from typing import Union

__all__ = [
    "TextBuffer",
    "str_hash",
    "str_icmp",
    "read_file",
    "write_file",
    "append_file",
]

_MASK = 0xFFFFFFFF
PathType = Union[str, "PathLike[str]"]


class TextBuffer:
    """A text buffer that grows by single characters or whole strings."""

    def __init__(self, text: str | None = None) -> None:
        self._parts: list[str] = []
        self._length = 0
        if text:
            self.extend(text)

    def append(self, c: str | int) -> None:
        """Add one character, given as a string or a code point."""
        if isinstance(c, int):
            c = chr(c)
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        self._parts.append(c)
        self._length += 1

    def extend(self, text: str) -> None:
        """Add a non-empty string."""
        if not text:
            raise ValueError("cannot extend with an empty string")
        self._parts.append(text)
        self._length += len(text)

    def _flatten(self) -> str:
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def __str__(self) -> str:
        return self._flatten()

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"TextBuffer({self._flatten()!r})"


def str_hash(text: str) -> int:
    """Return a non-zero 32-bit JS-style hash of *text* (UTF-8 bytes)."""
    data = text.encode("utf-8")
    h = len(data) & _MASK
    step = (h >> 5) + 1
    for i in range(len(data), step - 1, -step):
        h ^= ((h << 5) + (h >> 2) + data[i - 1]) & _MASK
    return h or 1


def _upper(c: str) -> int:
    code = ord(c)
    return code - 32 if ord("a") <= code <= ord("z") else code


def str_icmp(left: str | None, right: str | None) -> int:
    """Compare two strings ignoring ASCII case; negative, zero or positive."""
    if left is None or right is None:
        if left is None and right is None:
            return 0
        return -1 if left is None else 1
    for lc, rc in zip(left, right):
        diff = _upper(lc) - _upper(rc)
        if diff:
            return diff
    if len(left) == len(right):
        return 0
    if len(left) > len(right):
        return _upper(left[len(right)])
    return -_upper(right[len(left)])


def read_file(path: PathType) -> str:
    """Return the whole text content of the file at *path*."""
    with open(path, "r", encoding="utf-8") as handle:
        return handle.read()


def write_file(path: PathType, text: str) -> None:
    """Replace the content of the file at *path* with *text*."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)


def append_file(path: PathType, text: str) -> None:
    """Append *text* to the file at *path*, creating it when missing."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(text)