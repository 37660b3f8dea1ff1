"""Finite automaton that recognises real numbers written with an exponent."""

from __future__ import annotations

from enum import Enum, auto


class State(Enum):
    """States of the recogniser."""

    START = auto()
    AFTER_DIGIT = auto()
    AFTER_POINT = auto()
    AFTER_EXPONENT = auto()
    AFTER_EXP_SIGN = auto()
    AFTER_EXP_DIGIT = auto()


def _step(state: State, char: str) -> State | None:
    digit = "0" <= char <= "9"
    exponent = char in "Ee"
    if state is State.START:
        return State.AFTER_DIGIT if digit else None
    if state is State.AFTER_DIGIT:
        if digit:
            return State.AFTER_DIGIT
        if char == ".":
            return State.AFTER_POINT
        return State.AFTER_EXPONENT if exponent else None
    if state is State.AFTER_POINT:
        if digit:
            return State.AFTER_POINT
        return State.AFTER_EXPONENT if exponent else None
    if state is State.AFTER_EXPONENT:
        if char in "+-":
            return State.AFTER_EXP_SIGN
        return State.AFTER_EXP_DIGIT if digit else None
    # AFTER_EXP_SIGN and AFTER_EXP_DIGIT both accept only digits.
    return State.AFTER_EXP_DIGIT if digit else None


def is_real_number(text: str) -> bool:
    """Return True if ``text`` is digits, an optional fraction, and an exponent with digits.

    Only strings that end inside the exponent's digits are accepted.
    """
    state = State.START
    for char in text:
        next_state = _step(state, char)
        if next_state is None:
            return False
        state = next_state
    return state is State.AFTER_EXP_DIGIT