"""A simple CSV reader producing a fixed-width table of strings."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterator, Union

from sckit.common import ScError

__all__ = ["CsvError", "CsvTable", "parse_csv", "read_csv"]

PathType = Union[str, "PathLike[str]"]


class CsvError(ScError):
    """Raised when CSV text is malformed."""


@dataclass(frozen=True)
class CsvTable:
    """Cells stored row after row; ``rows`` times ``cols`` of them."""

    rows: int
    cols: int
    cells: tuple[str, ...]

    def get(self, row: int, col: int) -> str:
        """Return the cell at *row*, *col*; raise IndexError when out of range."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) outside {self.rows}x{self.cols} table")
        return self.cells[row * self.cols + col]

    def __iter__(self) -> Iterator[tuple[str, ...]]:
        for start in range(0, self.rows * self.cols, self.cols):
            yield self.cells[start:start + self.cols]


def parse_csv(text: str) -> CsvTable:
    """Split *text* into a table.

    Fields end at ``,`` or a newline; ``\\r`` is dropped. Quoted parts may hold
    commas, newlines and doubled quotes. Only fields closed by a separator
    count; the column count is the number of fields divided by the number of
    lines, which must divide evenly.
    """
    fields: list[str] = []
    current: list[str] = []
    lines = 0
    pos = 0
    end = len(text)
    while pos < end:
        c = text[pos]
        pos += 1
        if c == '"':
            closed = False
            while pos < end:
                c = text[pos]
                pos += 1
                if c == '"':
                    if pos >= end:
                        raise CsvError("quoted field closes at the end of input")
                    if text[pos] != '"':
                        closed = True
                        break
                    pos += 1
                current.append(c)
            if not closed:
                raise CsvError("unterminated quoted field")
        elif c == ",":
            fields.append("".join(current))
            current = []
        elif c == "\r":
            continue
        elif c == "\n":
            fields.append("".join(current))
            current = []
            lines += 1
        else:
            current.append(c)
    if lines == 0:
        raise CsvError("no complete line in CSV input")
    if len(fields) % lines:
        raise CsvError(f"{len(fields)} fields do not fill {lines} lines evenly")
    return CsvTable(lines, len(fields) // lines, tuple(fields))


def read_csv(path: PathType) -> CsvTable:
    """Read and parse the CSV file at *path*."""
    with open(path, "r", encoding="utf-8", newline="") as handle:
        return parse_csv(handle.read())