"""Parse and evaluate arithmetic on single digits with ``+``, ``*`` and parentheses."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["ParseError", "Node", "parse_expr", "main"]

_DIGITS = "0123456789"


class ParseError(ValueError):
    """Raised when an expression is malformed."""


def _unexpected(char: str) -> ParseError:
    if char:
        return ParseError(f"Unexpected token '{char}'")
    return ParseError("Unexpected end of file")


@dataclass(frozen=True)
class Node:
    """Expression tree node: a digit when ``op`` is None, else ``+`` or ``*``."""

    op: str | None = None
    value: int = 0
    left: Node | None = None
    right: Node | None = None

    def evaluate(self) -> int:
        """Compute the value of the expression rooted at this node."""
        if self.op is None:
            return self.value
        assert self.left is not None and self.right is not None
        if self.op == "+":
            return self.left.evaluate() + self.right.evaluate()
        if self.op == "*":
            return self.left.evaluate() * self.right.evaluate()
        raise ValueError(f"unknown operator {self.op!r}")


class _Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def current(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def advance(self) -> None:
        self._pos += 1

    def parse_add(self) -> Node:
        left = self.parse_multi()
        while self.current == "+":
            self.advance()
            left = Node(op="+", left=left, right=self.parse_multi())
        return left

    def parse_multi(self) -> Node:
        left = self.parse_primary()
        while self.current == "*":
            self.advance()
            left = Node(op="*", left=left, right=self.parse_primary())
        return left

    def parse_primary(self) -> Node:
        char = self.current
        if char == "(":
            self.advance()
            node = self.parse_add()
            if self.current != ")":
                raise _unexpected(self.current)
            self.advance()
            return node
        if char and char in _DIGITS:
            self.advance()
            return Node(value=int(char))
        raise _unexpected(char)


def _check_numbers(text: str) -> None:
    for char, following in zip(text, text[1:]):
        if char in _DIGITS and following in _DIGITS:
            raise _unexpected(following)


def _check_parentheses(text: str) -> None:
    balance = 0
    for char in text:
        if char == "(":
            balance += 1
        elif char == ")":
            balance -= 1
            if balance < 0:
                raise _unexpected(")")
    if balance:
        raise _unexpected("(")


def parse_expr(text: str) -> Node:
    """Parse ``text`` into an expression tree.

    Numbers are single digits; ``*`` binds tighter than ``+``, both group to
    the left.  No whitespace is allowed.  Raises ParseError naming the
    offending token.
    """
    _check_numbers(text)
    _check_parentheses(text)
    parser = _Parser(text)
    tree = parser.parse_add()
    if parser.current:
        raise _unexpected(parser.current)
    return tree


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate the expression given as the only argument and print it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    try:
        tree = parse_expr(args[0])
    except ParseError as exc:
        print(exc)
        return 1
    print(tree.evaluate())
    return 0