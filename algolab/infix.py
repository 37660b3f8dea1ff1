"""Conversion of infix expressions over single digits to postfix notation."""

from __future__ import annotations


class UnbalancedParenthesesError(ValueError):
    """Raised when the parentheses of an infix expression do not match."""


def is_operator(char: str) -> bool:
    """Return True for the four arithmetic operators."""
    return char in ("+", "-", "*", "/")


def priority(char: str) -> int:
    """Return the precedence of ``char`` on the operator stack."""
    if char == "(":
        return 0
    if char in ("+", "-"):
        return 1
    if char in ("*", "/"):
        return 2
    return 100


def to_postfix(expression: str) -> str:
    """Return ``expression`` in postfix form, tokens separated by single spaces.

    Only an operator of strictly higher precedence is popped before a new one
    is pushed; characters other than digits, operators and parentheses are ignored.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if "0" <= char <= "9":
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while True:
                if not stack:
                    raise UnbalancedParenthesesError("unmatched ')'")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        elif is_operator(char):
            while stack and priority(char) < priority(stack[-1]):
                output.append(stack.pop())
            stack.append(char)
    while stack:
        top = stack.pop()
        if top == "(":
            raise UnbalancedParenthesesError("unmatched '('")
        output.append(top)
    return " ".join(output)