"""Reader for ``$key = "value"`` configuration files."""

from __future__ import annotations

import threading
from os import PathLike
from typing import Iterator, Optional, Union

from sckit.common import isspace

__all__ = ["DEFAULT_CONFIG_PATH", "Config", "parse_config"]

DEFAULT_CONFIG_PATH = "module/schead/config/config.ini"

PathType = Union[str, "PathLike[str]"]


def _to_line_end(c: Optional[str], chars: Iterator[str]) -> Optional[str]:
    while c is not None and c != "\n":
        c = next(chars, None)
    return c


def parse_config(text: str) -> dict[str, str]:
    """Parse configuration text into a mapping of keys to values.

    Only lines starting (after blanks) with ``$`` directly followed by a key
    are entries. Blanks inside the key are dropped; non-blank characters
    between ``=`` and the opening quote are kept at the front of the value.
    A backslash before a quote keeps the quote inside the value. The first
    occurrence of a key wins. A malformed entry ends the parse, keeping the
    entries read before it.
    """
    entries: dict[str, str] = {}
    chars = iter(text)
    while (c := next(chars, None)) is not None:
        while c is not None and isspace(c):
            c = next(chars, None)
        if c != "$":
            _to_line_end(c, chars)
            continue
        c = next(chars, None)
        if c is not None and isspace(c):
            _to_line_end(c, chars)
            continue

        key: list[str] = []
        while c is not None and c != "=":
            if not isspace(c):
                key.append(c)
            c = next(chars, None)
        if c != "=":
            break

        value: list[str] = []
        c = next(chars, None)
        while c is not None and c != '"':
            if not isspace(c):
                value.append(c)
            c = next(chars, None)
        if c != '"':
            break

        previous = c
        closed = False
        while (c := next(chars, None)) is not None:
            if c == '"' and previous != "\\":
                closed = True
                break
            value.append(c)
            previous = c
        if not closed:
            break

        entries.setdefault("".join(key), "".join(value))

        if _to_line_end(c, chars) != "\n":
            break
    return entries


class Config:
    """Configuration loaded from a file; ``reload`` reads it again."""

    def __init__(self, path: PathType = DEFAULT_CONFIG_PATH) -> None:
        self.path = path
        self._lock = threading.Lock()
        self._entries: dict[str, str] = {}
        self.reload()

    def reload(self) -> None:
        """Read the file again and replace every entry."""
        with open(self.path, "r", encoding="utf-8") as handle:
            entries = parse_config(handle.read())
        with self._lock:
            self._entries = entries

    def get(self, key: str) -> Optional[str]:
        """Return the value stored under *key*, or None when absent or *key* is empty."""
        if not key:
            return None
        with self._lock:
            return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)