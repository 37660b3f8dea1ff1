"""Arithmetic on 32-bit integers held as lists of bits, most significant bit first."""

from __future__ import annotations

from collections.abc import Sequence

WIDTH = 32
_MASK = (1 << WIDTH) - 1


def _check(bits: Sequence[int]) -> None:
    if len(bits) != WIDTH:
        raise ValueError(f"expected {WIDTH} bits, got {len(bits)}")
    if any(bit not in (0, 1) for bit in bits):
        raise ValueError("bits must be 0 or 1")


def _to_unsigned(bits: Sequence[int]) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def to_bits(number: int) -> list[int]:
    """Return the 32-bit two's complement pattern of ``number``, most significant bit first."""
    return [(number >> shift) & 1 for shift in range(WIDTH - 1, -1, -1)]


def negate_bits(bits: Sequence[int]) -> list[int]:
    """Return the two's complement negation of a 32-bit pattern."""
    _check(bits)
    return to_bits(-_to_unsigned(bits) & _MASK)


def add_bits(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Add two 32-bit patterns, dropping the carry out of the top bit."""
    _check(first)
    _check(second)
    result = [0] * WIDTH
    carry = 0
    for position in range(WIDTH - 1, -1, -1):
        total = first[position] + second[position] + carry
        carry, result[position] = divmod(total, 2)
    return result


def from_bits(bits: Sequence[int]) -> int:
    """Read a 32-bit pattern as a sign bit followed by a 31-bit magnitude."""
    _check(bits)
    magnitude = _to_unsigned(bits[1:])
    return -magnitude if bits[0] == 1 else magnitude