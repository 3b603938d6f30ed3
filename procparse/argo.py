"""A small JSON-like reader for integers, strings and objects."""

from __future__ import annotations

import io
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO, Union

__all__ = ["ParseError", "argo", "parse", "serialize", "main"]

Value = Union[int, str, dict]

_DIGITS = "0123456789"


class ParseError(ValueError):
    """Raised when the input is not a valid document."""


class _Reader:
    """Character reader with one character of look-ahead."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: str | None = None

    def peek(self) -> str:
        """Return the next character without consuming it, or '' at the end."""
        if self._pending is None:
            self._pending = self._stream.read(1)
        return self._pending

    def take(self) -> str:
        """Consume and return the next character, or '' at the end."""
        char = self.peek()
        self._pending = None
        return char

    def unexpected(self) -> ParseError:
        char = self.peek()
        if char:
            return ParseError(f"unexpected token '{char}'")
        return ParseError("unexpected end of input")

    def expect(self, char: str) -> None:
        if self.peek() != char:
            raise self.unexpected()
        self.take()


def _read_value(reader: _Reader) -> Value:
    char = reader.peek()
    if char and char in _DIGITS:
        return _read_integer(reader)
    if char == '"':
        return _read_string(reader)
    if char == "{":
        return _read_map(reader)
    raise reader.unexpected()


def _read_integer(reader: _Reader) -> int:
    digits = []
    while reader.peek() and reader.peek() in _DIGITS:
        digits.append(reader.take())
    return int("".join(digits))


def _read_string(reader: _Reader) -> str:
    reader.take()  # opening quote
    chars = []
    while True:
        char = reader.take()
        if char == '"':
            return "".join(chars)
        if char == "\\":
            char = reader.take()
        if not char:
            raise reader.unexpected()
        chars.append(char)


def _read_map(reader: _Reader) -> dict:
    reader.take()  # opening brace
    result: dict = {}
    if reader.peek() == "}":
        reader.take()
        return result
    while True:
        if reader.peek() != '"':
            raise reader.unexpected()
        key = _read_string(reader)
        reader.expect(":")
        result[key] = _read_value(reader)
        char = reader.peek()
        if char == "}":
            reader.take()
            return result
        if char != ",":
            raise reader.unexpected()
        reader.take()


def argo(stream: TextIO) -> Value:
    """Read one value from a text stream.

    Integers are unsigned runs of digits, strings are double-quoted with
    backslash taking the next character literally, and objects map strings
    to values.  No whitespace is allowed and input after the value is not
    looked at.  Raises ParseError on malformed input.
    """
    return _read_value(_Reader(stream))


def parse(text: str) -> Value:
    """Read one value from ``text``; see :func:`argo`."""
    return argo(io.StringIO(text))


def _quote(text: str) -> str:
    escaped = "".join("\\" + c if c in '\\"' else c for c in text)
    return f'"{escaped}"'


def _serialize_parts(value: Value) -> Iterator[str]:
    if isinstance(value, bool):
        raise TypeError("booleans cannot be serialized")
    if isinstance(value, int):
        yield str(value)
    elif isinstance(value, str):
        yield _quote(value)
    elif isinstance(value, dict):
        yield "{"
        for position, (key, item) in enumerate(value.items()):
            if not isinstance(key, str):
                raise TypeError(f"object keys must be strings, not {type(key).__name__}")
            if position:
                yield ","
            yield _quote(key)
            yield ":"
            yield from _serialize_parts(item)
        yield "}"
    else:
        raise TypeError(f"cannot serialize {type(value).__name__}")


def serialize(value: Value) -> str:
    """Write ``value`` in the same compact format :func:`argo` reads."""
    return "".join(_serialize_parts(value))


def main(argv: Sequence[str] | None = None) -> int:
    """Read the file named on the command line and print it back compactly."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    try:
        with open(args[0], encoding="utf-8", newline="") as stream:
            value = argo(stream)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    except ParseError as exc:
        print(exc)
        return 1
    print(serialize(value))
    return 0