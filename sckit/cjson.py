"""A small JSON tree: parser, printer, builders and a comment-stripping minifier."""

from __future__ import annotations

import enum
import math
import sys
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, Iterator, Optional, Union

from sckit.common import ScError, isspace
from sckit.textutil import read_file, str_icmp

__all__ = [
    "JsonType",
    "JsonError",
    "JsonNode",
    "parse",
    "to_string",
    "minify",
    "parse_file",
    "new_null",
    "new_bool",
    "new_number",
    "new_string",
    "new_array",
    "new_object",
    "new_typed_array",
]

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
_EPSILON = sys.float_info.epsilon
_DIGITS = frozenset("0123456789")
_HEX = frozenset("0123456789abcdefABCDEF")
_ESCAPES = {"b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t"}
_PRINT_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class JsonType(enum.IntEnum):
    """Kinds of JSON values."""

    FALSE = 0
    TRUE = 1
    NULL = 2
    NUMBER = 3
    STRING = 4
    ARRAY = 5
    OBJECT = 6


class JsonError(ScError):
    """Raised when JSON text cannot be parsed or a tree cannot be printed."""


@dataclass
class JsonNode:
    """One JSON value; arrays and objects keep their members in ``children``."""

    type: JsonType
    key: Optional[str] = None
    string: Optional[str] = None
    number: float = 0.0
    children: list[JsonNode] = field(default_factory=list)

    def __bool__(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[JsonNode]:
        return iter(self.children)

    def item(self, index: int) -> JsonNode:
        """Return the child at *index*; raise IndexError when out of range."""
        if not 0 <= index < len(self.children):
            raise IndexError(f"index {index} out of range for length {len(self.children)}")
        return self.children[index]

    def _position(self, key: str) -> int:
        if not key:
            raise ValueError("key must be a non-empty string")
        for position, child in enumerate(self.children):
            if str_icmp(key, child.key) == 0:
                return position
        raise KeyError(key)

    def member(self, key: str) -> JsonNode:
        """Return the first member whose key matches *key* ignoring ASCII case."""
        return self.children[self._position(key)]

    def detach_item(self, index: int) -> JsonNode:
        """Remove and return the child at *index*."""
        self.item(index)
        return self.children.pop(index)

    def detach_member(self, key: str) -> JsonNode:
        """Remove and return the first member matching *key* ignoring ASCII case."""
        return self.children.pop(self._position(key))

    def __int__(self) -> int:
        return int(self.number)


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def fail(self, what: str) -> JsonError:
        return JsonError(f"{what} at offset {self.pos}")

    def skip(self) -> None:
        end = len(self.text)
        while self.pos < end and ord(self.text[self.pos]) <= 32:
            self.pos += 1

    def value(self) -> JsonNode:
        c = self.peek()
        if c == "n":
            self.pos += 4
            return JsonNode(JsonType.NULL)
        if c == "f":
            self.pos += 5
            return JsonNode(JsonType.FALSE)
        if c == "t":
            self.pos += 4
            return JsonNode(JsonType.TRUE, number=1.0)
        if c == '"':
            return JsonNode(JsonType.STRING, string=self.string())
        if c in _DIGITS or c in ("+", "-"):
            return JsonNode(JsonType.NUMBER, number=self.number())
        if c == "[":
            return self.array()
        if c == "{":
            return self.object()
        raise self.fail("unexpected value")

    def _hex4(self, start: int) -> int:
        digits = self.text[start:start + 4]
        if len(digits) < 4 or not all(d in _HEX for d in digits):
            return 0
        return int(digits, 16)

    def _unicode(self) -> str:
        end = len(self.text)
        uc = self._hex4(self.pos)
        self.pos = min(self.pos + 4, end)
        if uc == 0 or 0xDC00 <= uc <= 0xDFFF:
            return ""
        if 0xD800 <= uc <= 0xDBFF:
            if self.text[self.pos:self.pos + 2] != "\\u":
                return ""
            low = self._hex4(self.pos + 2)
            self.pos = min(self.pos + 6, end)
            if not 0xDC00 <= low <= 0xDFFF:
                return ""
            uc = 0x10000 + (((uc & 0x3FF) << 10) | (low & 0x3FF))
        return chr(uc)

    def string(self) -> str:
        if self.peek() != '"':
            raise self.fail("expected a string")
        self.pos += 1
        out: list[str] = []
        end = len(self.text)
        while self.pos < end:
            c = self.text[self.pos]
            if c == '"':
                self.pos += 1
                break
            if c != "\\":
                out.append(c)
                self.pos += 1
                continue
            escape = self.peek(1)
            if not escape:
                self.pos += 1
                break
            self.pos += 2
            if escape == "u":
                out.append(self._unicode())
            else:
                out.append(_ESCAPES.get(escape, escape))
        return "".join(out)

    def _digits(self) -> Iterator[int]:
        while self.peek() in _DIGITS and self.peek():
            yield ord(self.peek()) - ord("0")
            self.pos += 1

    def number(self) -> float:
        sign = 1.0
        if self.peek() in ("+", "-"):
            sign = -1.0 if self.peek() == "-" else 1.0
            self.pos += 1
        value = 0.0
        for digit in self._digits():
            value = value * 10 + digit
        scale = 0
        if self.peek() == ".":
            self.pos += 1
            for digit in self._digits():
                value = value * 10 + digit
                scale -= 1
        if self.peek() in ("e", "E") and self.peek():
            self.pos += 1
            exp_sign = 1
            if self.peek() == "+":
                self.pos += 1
            elif self.peek() == "-":
                exp_sign = -1
                self.pos += 1
            exponent = 0
            for digit in self._digits():
                exponent = exponent * 10 + digit
            scale += exp_sign * exponent
        try:
            factor = 10.0 ** scale
        except OverflowError:
            factor = math.inf
        return sign * value * factor

    def _items(self, closing: str, member: bool) -> list[JsonNode]:
        self.pos += 1
        self.skip()
        if self.peek() == closing:
            self.pos += 1
            return []
        children: list[JsonNode] = []
        while True:
            self.skip()
            if member:
                key = self.string()
                self.skip()
                if self.peek() != ":":
                    raise self.fail("expected ':'")
                self.pos += 1
                self.skip()
                child = self.value()
                child.key = key
            else:
                child = self.value()
            children.append(child)
            self.skip()
            if self.peek() != ",":
                break
            self.pos += 1
        if self.peek() != closing:
            raise self.fail(f"expected '{closing}'")
        self.pos += 1
        return children

    def array(self) -> JsonNode:
        return JsonNode(JsonType.ARRAY, children=self._items("]", member=False))

    def object(self) -> JsonNode:
        return JsonNode(JsonType.OBJECT, children=self._items("}", member=True))


def parse(text: str) -> JsonNode:
    """Parse the first JSON value in *text*; trailing text is ignored."""
    parser = _Parser(text)
    parser.skip()
    return parser.value()


def parse_file(path: Union[str, "PathLike[str]"]) -> JsonNode:
    """Read the file at *path* and parse it."""
    return parse(read_file(path))


def _format_number(d: float) -> str:
    if d == 0:
        return "0"
    if not math.isfinite(d):
        return ("%e" if math.isinf(d) else "%f") % d
    if _INT_MIN <= d <= _INT_MAX and abs(d - int(d)) <= _EPSILON:
        return "%d" % int(d)
    magnitude = abs(d)
    if abs(math.floor(d) - d) <= _EPSILON and magnitude < 1.0e60:
        return "%.0f" % d
    if magnitude < 1.0e-6 or magnitude > 1.0e9:
        return "%e" % d
    return "%f" % d


def _format_string(text: Optional[str]) -> str:
    if not text:
        return '""'
    pieces = []
    for c in text:
        if c in _PRINT_ESCAPES:
            pieces.append(_PRINT_ESCAPES[c])
        elif ord(c) < 32:
            pieces.append("\\u%04x" % ord(c))
        else:
            pieces.append(c)
    return '"' + "".join(pieces) + '"'


def _render(node: JsonNode) -> Iterator[str]:
    kind = node.type
    if kind == JsonType.FALSE:
        yield "false"
    elif kind == JsonType.TRUE:
        yield "true"
    elif kind == JsonType.NULL:
        yield "null"
    elif kind == JsonType.NUMBER:
        yield _format_number(node.number)
    elif kind == JsonType.STRING:
        yield _format_string(node.string)
    elif kind == JsonType.ARRAY:
        yield "["
        for position, child in enumerate(node.children):
            if position:
                yield ","
            yield from _render(child)
        yield "]"
    elif kind == JsonType.OBJECT:
        yield "{"
        for position, child in enumerate(node.children):
            if position:
                yield ","
            yield _format_string(child.key)
            yield ":"
            yield from _render(child)
        yield "}"
    else:
        raise JsonError(f"unknown node type {kind!r}")


def to_string(node: JsonNode) -> str:
    """Return compact JSON text for *node*."""
    if node is None:
        raise JsonError("cannot print a missing node")
    return "".join(_render(node))


def minify(text: str) -> str:
    """Drop whitespace and ``//`` and ``/* */`` comments outside strings."""
    out: list[str] = []
    pos = 0
    end = len(text)
    while pos < end:
        c = text[pos]
        following = text[pos + 1] if pos + 1 < end else ""
        if isspace(c):
            pos += 1
        elif c == "/" and following == "/":
            newline = text.find("\n", pos + 1)
            pos = end if newline < 0 else newline
        elif c == "/" and following == "*":
            close = text.find("*/", pos + 1)
            pos = end if close < 0 else close + 2
        elif c == '"':
            out.append(c)
            pos += 1
            while pos < end and (text[pos] != '"' or text[pos - 1] == "\\"):
                out.append(text[pos])
                pos += 1
            if pos < end:
                out.append('"')
                pos += 1
        else:
            out.append(c)
            pos += 1
    return "".join(out)


def new_null() -> JsonNode:
    """Return a null node."""
    return JsonNode(JsonType.NULL)


def new_bool(value: object) -> JsonNode:
    """Return a true or false node according to the truth of *value*."""
    if value:
        return JsonNode(JsonType.TRUE, number=1.0)
    return JsonNode(JsonType.FALSE, number=0.0)


def new_number(value: float) -> JsonNode:
    """Return a number node."""
    return JsonNode(JsonType.NUMBER, number=float(value))


def new_string(value: str) -> JsonNode:
    """Return a string node."""
    if value is None:
        raise ValueError("string value must not be None")
    return JsonNode(JsonType.STRING, string=str(value))


def new_array() -> JsonNode:
    """Return an empty array node."""
    return JsonNode(JsonType.ARRAY)


def new_object() -> JsonNode:
    """Return an empty object node."""
    return JsonNode(JsonType.OBJECT)


def new_typed_array(kind: JsonType, values: Union[int, Iterable[object]]) -> JsonNode:
    """Build an array of one scalar kind.

    For NULL, FALSE and TRUE *values* may be a count: nulls, all-false or
    all-true elements. Otherwise it is an iterable; booleans follow the truth
    of each value whichever of FALSE or TRUE is given.
    """
    kind = JsonType(kind)
    if kind in (JsonType.ARRAY, JsonType.OBJECT):
        raise ValueError(f"typed arrays cannot hold {kind.name}")
    if isinstance(values, int) and not isinstance(values, bool):
        if kind in (JsonType.NUMBER, JsonType.STRING):
            raise TypeError(f"{kind.name} arrays need a sequence of values")
        items: list[object] = [kind == JsonType.TRUE] * max(values, 0)
    else:
        items = list(values)
    if not items:
        raise ValueError("typed arrays need at least one element")
    array = new_array()
    for value in items:
        if kind == JsonType.NULL:
            node = new_null()
        elif kind in (JsonType.FALSE, JsonType.TRUE):
            node = new_bool(value)
        elif kind == JsonType.NUMBER:
            node = new_number(value)  # type: ignore[arg-type]
        else:
            node = new_string(value)  # type: ignore[arg-type]
        array.children.append(node)
    return array