"""Parse trees of prefix arithmetic expressions such as ``( * ( + 1 1 ) 2 )``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


class ExpressionError(ValueError):
    """Raised for a malformed expression or an unknown operation."""


@dataclass(frozen=True)
class Number:
    """A leaf holding an integer."""

    value: int


@dataclass(frozen=True)
class Operation:
    """An inner node applying ``operator`` to two subtrees."""

    operator: str
    left: "Node"
    right: "Node"


Node = Union[Number, Operation]


class _Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_spaces(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def _next_char(self) -> str:
        self._skip_spaces()
        if self._pos >= len(self._text):
            raise ExpressionError("unexpected end of expression")
        char = self._text[self._pos]
        self._pos += 1
        return char

    def parse(self) -> Node:
        token = self._next_char()
        if "0" <= token <= "9":
            start = self._pos - 1
            while self._pos < len(self._text) and "0" <= self._text[self._pos] <= "9":
                self._pos += 1
            return Number(int(self._text[start:self._pos]))
        if token == "(":
            operator = self._next_char()
            left = self.parse()
            right = self.parse()
            self._skip_spaces()
            if self._pos < len(self._text) and self._text[self._pos] == ")":
                self._pos += 1
            return Operation(operator, left, right)
        raise ExpressionError(f"unexpected character {token!r}")


def parse_expression(text: str) -> Node:
    """Build the parse tree of the first expression in ``text``."""
    return _Parser(text).parse()


def _truncating_divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def evaluate(node: Node) -> int:
    """Compute the value of the tree; division truncates toward zero."""
    if isinstance(node, Number):
        return node.value
    left = evaluate(node.left)
    right = evaluate(node.right)
    if node.operator == "+":
        return left + right
    if node.operator == "-":
        return left - right
    if node.operator == "*":
        return left * right
    if node.operator == "/":
        if right == 0:
            raise ZeroDivisionError("division by zero")
        return _truncating_divide(left, right)
    raise ExpressionError(f"incorrect operation {node.operator!r}")


def format_tree(node: Node) -> str:
    """Return the tree in the bracketed prefix form the parser reads."""
    if isinstance(node, Number):
        return str(node.value)
    return f"( {node.operator} {format_tree(node.left)} {format_tree(node.right)} )"