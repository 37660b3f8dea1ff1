"""Small numeric and string routines: counting, division, primes, powers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import product


def count_zeros(values: Iterable[int]) -> int:
    """Return how many elements of ``values`` are equal to zero."""
    return sum(1 for value in values if value == 0)


def integer_quotient(a: int, b: int) -> int:
    """Return the incomplete quotient of ``a`` by ``b``.

    The remainder ``a - b * q`` always lies in ``[0, |b|)``.
    """
    if b == 0:
        raise ZeroDivisionError("division by zero")
    abs_a, abs_b = abs(a), abs(b)
    quotient = abs_a // abs_b
    if a < 0 and abs_a > quotient * abs_b:
        quotient += 1
    if (a > 0) != (b > 0):
        quotient = -quotient
    return quotient


def count_lucky_tickets() -> int:
    """Return the number of six-digit tickets whose two halves have equal digit sums."""
    sums = [0] * 28
    for digits in product(range(10), repeat=3):
        sums[sum(digits)] += 1
    return sum(count * count for count in sums)


def is_balanced(text: str) -> bool:
    """Return True if the round brackets in ``text`` are balanced."""
    balance = 0
    for char in text:
        if char == "(":
            balance += 1
        elif char == ")":
            balance -= 1
            if balance < 0:
                return False
    return balance == 0


def is_prime(number: int) -> bool:
    """Return True if ``number`` has no divisor between 2 and its square root.

    Numbers below 1 are not prime; 1 is treated as prime.
    """
    if number < 1:
        return False
    divisor = 2
    while divisor * divisor <= number:
        if number % divisor == 0:
            return False
        divisor += 1
    return True


def primes_up_to(number: int) -> list[int]:
    """Return 1 followed by every prime from 2 up to ``number`` inclusive."""
    return [1] + [candidate for candidate in range(2, number + 1) if is_prime(candidate)]


def count_occurrences(haystack: str, needle: str) -> int:
    """Count occurrences of ``needle`` in ``haystack``, overlaps included."""
    width = len(needle)
    return sum(
        1
        for start in range(len(haystack) - width + 1)
        if haystack[start:start + width] == needle
    )


def swap_segments(values: Sequence[int], m: int, n: int) -> list[int]:
    """Return a copy of ``values`` whose first ``m`` and next ``n`` items trade places."""
    if m < 0 or n < 0 or m + n > len(values):
        raise ValueError("segment lengths do not fit the sequence")
    items = list(values)
    return items[m:m + n] + items[:m] + items[m + n:]


def fibonacci_recursive(number: int) -> int:
    """Return the ``number``-th Fibonacci number by plain recursion."""
    if number <= 1:
        return number
    return fibonacci_recursive(number - 1) + fibonacci_recursive(number - 2)


def fibonacci_iterative(number: int) -> int:
    """Return the ``number``-th Fibonacci number by iteration."""
    if number <= 1:
        return number
    previous, current = 0, 1
    for _ in range(2, number + 1):
        previous, current = current, previous + current
    return current


def power_linear(number: float, degree: int) -> float:
    """Raise ``number`` to an integer ``degree`` with one multiplication per step."""
    if degree == 0:
        return 1.0
    if degree < 0:
        number = 1 / number
        degree = -degree
    result = 1.0
    for _ in range(degree):
        result *= number
    return result


def power_log(number: float, degree: int) -> float:
    """Raise ``number`` to an integer ``degree`` by repeated squaring."""
    if degree == 0:
        return 1.0
    if degree < 0:
        number = 1 / number
        degree = -degree
    result = 1.0
    while degree > 0:
        if degree % 2 == 1:
            result *= number
        number *= number
        degree //= 2
    return result