"""The Josephus counting-out problem."""

from __future__ import annotations

from collections import deque


def find_survivor(n: int, m: int) -> int:
    """Return the position, counted from 1, of the last of ``n`` warriors standing.

    The warriors stand in a circle and every ``m``-th one is removed until one is left.
    """
    if n < 1:
        raise ValueError("there must be at least one warrior")
    if m < 1:
        raise ValueError("the counting step must be positive")
    circle = deque(range(1, n + 1))
    while len(circle) > 1:
        circle.rotate(-(m - 1))
        circle.popleft()
    return circle[0]