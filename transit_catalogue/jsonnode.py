"""JSON document model: a tagged node value, a strict reader and a pretty printer."""

from __future__ import annotations

import io
import math
import string
from dataclasses import dataclass, field
from typing import Any, TextIO

__all__ = [
    "ParsingError",
    "Node",
    "Document",
    "load",
    "loads",
    "dump",
    "dumps",
]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\r\v\f"
_DIGITS = "0123456789"
_LETTERS = string.ascii_letters
_INDENT_STEP = 4


class ParsingError(ValueError):
    """Raised when JSON text cannot be parsed."""


def _wrap(value: Any) -> Any:
    """Normalise a Python value into the form a Node stores."""
    if isinstance(value, Node):
        return value.value
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (list, tuple)):
        return [item if isinstance(item, Node) else Node(item) for item in value]
    if isinstance(value, dict):
        result = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be strings, got {type(key).__name__}")
            result[key] = item if isinstance(item, Node) else Node(item)
        return result
    raise TypeError(f"Cannot store {type(value).__name__} in a JSON node")


def _kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "double"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "map"


class Node:
    """A single JSON value: null, array, map, bool, int, double or string."""

    __slots__ = ("_value",)

    def __init__(self, value: Any = None) -> None:
        self._value = _wrap(value)

    @property
    def value(self) -> Any:
        """The stored value; arrays hold Nodes, maps map strings to Nodes."""
        return self._value

    @property
    def kind(self) -> str:
        """Name of the stored alternative."""
        return _kind(self._value)

    def is_array(self) -> bool:
        return self.kind == "array"

    def is_map(self) -> bool:
        return self.kind == "map"

    def is_bool(self) -> bool:
        return self.kind == "bool"

    def is_int(self) -> bool:
        return self.kind == "int"

    def is_double(self) -> bool:
        return self.kind in ("int", "double")

    def is_pure_double(self) -> bool:
        return self.kind == "double"

    def is_string(self) -> bool:
        return self.kind == "string"

    def is_null(self) -> bool:
        return self.kind == "null"

    def as_array(self) -> list[Node]:
        if not self.is_array():
            raise TypeError("Is not Array")
        return self._value

    def as_map(self) -> dict[str, Node]:
        if not self.is_map():
            raise TypeError("Is not Map")
        return self._value

    def as_bool(self) -> bool:
        if not self.is_bool():
            raise TypeError("Is not Bool")
        return self._value

    def as_int(self) -> int:
        if not self.is_int():
            raise TypeError("Is not Int")
        return self._value

    def as_double(self) -> float:
        if not self.is_double():
            raise TypeError("Is not Double")
        return float(self._value)

    def as_string(self) -> str:
        if not self.is_string():
            raise TypeError("Is not String")
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.kind == other.kind and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Node({self._value!r})"


@dataclass
class Document:
    """A JSON document with a single root node."""

    root: Node = field(default_factory=Node)

    def __post_init__(self) -> None:
        if not isinstance(self.root, Node):
            self.root = Node(self.root)


class _Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _get(self) -> str:
        ch = self._peek()
        if ch:
            self._pos += 1
        return ch

    def _unget(self) -> None:
        self._pos -= 1

    def _next_token(self) -> str:
        while self._peek() and self._peek() in _WHITESPACE:
            self._pos += 1
        return self._get()

    def parse_node(self) -> Node:
        ch = self._next_token()
        if not ch:
            raise ParsingError("Unexpected end of input")
        if ch == "[":
            return self._parse_array()
        if ch == "{":
            return self._parse_dict()
        if ch == '"':
            return Node(self._parse_string())
        self._unget()
        if ch == "n":
            return self._parse_null()
        if ch in "tf":
            return self._parse_bool()
        return self._parse_number()

    def _read_word(self) -> str:
        start = self._pos
        while self._peek() and self._peek() in _LETTERS:
            self._pos += 1
        return self._text[start:self._pos]

    def _parse_null(self) -> Node:
        if self._read_word() == "null":
            return Node(None)
        raise ParsingError("Failed to read null Node from stream")

    def _parse_bool(self) -> Node:
        word = self._read_word()
        if word == "true":
            return Node(True)
        if word == "false":
            return Node(False)
        raise ParsingError("Failed to read bool Node from stream")

    def _parse_array(self) -> Node:
        result = []
        while True:
            ch = self._next_token()
            if not ch:
                raise ParsingError("Failed to read Node in array from stream")
            if ch == "]":
                break
            if ch != ",":
                self._unget()
            result.append(self.parse_node())
        return Node(result)

    def _parse_dict(self) -> Node:
        result: dict[str, Node] = {}
        while True:
            ch = self._next_token()
            if not ch:
                raise ParsingError("Failed to read Node in Map from stream")
            if ch == "}":
                break
            if ch != '"':
                continue
            key = self._parse_string()
            if self._next_token() != ":":
                raise ParsingError("Failed to read Map Node from stream (can't parse : )")
            result.setdefault(key, self.parse_node())
        return Node(result)

    def _parse_string(self) -> str:
        escapes = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}
        chars = []
        while True:
            ch = self._get()
            if not ch:
                raise ParsingError("String parsing error")
            if ch == '"':
                break
            if ch == "\\":
                escaped = self._get()
                if not escaped:
                    raise ParsingError("String parsing error")
                if escaped not in escapes:
                    raise ParsingError(f"Unrecognized escape sequence \\{escaped}")
                chars.append(escapes[escaped])
            elif ch in "\n\r":
                raise ParsingError("Unexpected end of line")
            else:
                chars.append(ch)
        return "".join(chars)

    def _read_digits(self, buffer: list[str]) -> None:
        if not self._peek() or self._peek() not in _DIGITS:
            raise ParsingError("A digit is expected")
        while self._peek() and self._peek() in _DIGITS:
            buffer.append(self._get())

    def _parse_number(self) -> Node:
        buffer: list[str] = []
        if self._peek() == "-":
            buffer.append(self._get())
        if self._peek() == "0":
            buffer.append(self._get())
        else:
            self._read_digits(buffer)

        is_int = True
        if self._peek() == ".":
            buffer.append(self._get())
            self._read_digits(buffer)
            is_int = False

        mantissa_end = len(buffer)
        if self._peek() in ("e", "E") and self._peek():
            buffer.append(self._get())
            if self._peek() in ("+", "-") and self._peek():
                buffer.append(self._get())
            self._read_digits(buffer)
            is_int = False

        text = "".join(buffer)
        if is_int:
            number = int(text)
            if _INT_MIN <= number <= _INT_MAX:
                return Node(number)
        result = float(text)
        mantissa = "".join(buffer[:mantissa_end])
        underflow = result == 0.0 and any(d in mantissa for d in "123456789")
        if math.isinf(result) or underflow:
            raise ParsingError(f"Failed to convert {text} to number")
        return Node(result)


def loads(text: str) -> Document:
    """Parse the first JSON value in ``text``."""
    return Document(_Parser(text).parse_node())


def load(stream: TextIO) -> Document:
    """Parse the first JSON value read from a text stream."""
    return loads(stream.read())


def _format_string(text: str) -> str:
    escapes = {"\n": "\\n", "\t": "\\t", "\r": "\\r", '"': '\\"', "\\": "\\\\"}
    return '"' + "".join(escapes.get(ch, ch) for ch in text) + '"'


def _format_node(node: Node, indent: int) -> str:
    value = node.value
    kind = node.kind
    if kind == "null":
        return "null"
    if kind == "bool":
        return "true" if value else "false"
    if kind == "int":
        return str(value)
    if kind == "double":
        return f"{value:g}"
    if kind == "string":
        return _format_string(value)

    inner = " " * (indent + _INDENT_STEP)
    if kind == "array":
        items = [inner + _format_node(item, indent + _INDENT_STEP) for item in value]
        opening, closing = "[", "]"
    else:
        items = [
            inner + _format_string(key) + ": " + _format_node(value[key], indent + _INDENT_STEP)
            for key in sorted(value)
        ]
        opening, closing = "{", "}"
    return opening + "\n" + ",\n".join(items) + "\n" + " " * indent + closing


def dumps(document: Document) -> str:
    """Render a document as indented JSON text."""
    return _format_node(document.root, 0)


def dump(document: Document, out: TextIO) -> None:
    """Write a document as indented JSON text to ``out``."""
    out.write(dumps(document))


def _roundtrip(text: str) -> Document:
    return loads(dumps(loads(text)))


_ = io  # kept for stream-based callers' type hints