"""Evaluation of postfix expressions over single-digit operands."""

from __future__ import annotations


class PostfixError(ValueError):
    """Base class for malformed postfix expressions."""


class StackEmptyError(PostfixError):
    """An operator or the final result found too few operands."""


class StackNotEmptyError(PostfixError):
    """Operands were left over once the expression was consumed."""


class InvalidCharacterError(PostfixError):
    """The expression holds a character that is neither digit, operator nor space."""


def _truncating_divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def evaluate_postfix(expression: str) -> int:
    """Evaluate ``expression``, whose operands are single digits.

    Division truncates toward zero and raises ZeroDivisionError on a zero divisor.
    """
    stack: list[int] = []
    invalid: str | None = None
    for char in expression:
        if "0" <= char <= "9":
            stack.append(int(char))
        elif char in "+-*/":
            if len(stack) < 2:
                raise StackEmptyError(f"operator {char!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            if char == "+":
                stack.append(left + right)
            elif char == "-":
                stack.append(left - right)
            elif char == "*":
                stack.append(left * right)
            else:
                if right == 0:
                    raise ZeroDivisionError("division by zero")
                stack.append(_truncating_divide(left, right))
        elif char != " " and invalid is None:
            invalid = char
    if invalid is not None:
        raise InvalidCharacterError(f"unexpected character {invalid!r}")
    if not stack:
        raise StackEmptyError("expression yields no value")
    if len(stack) > 1:
        raise StackNotEmptyError("operands left over")
    return stack[0]