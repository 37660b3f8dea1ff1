"""Sorting and searching routines over lists of integers."""

from __future__ import annotations

from collections.abc import Sequence


def bubble_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``values`` made by bubble sort."""
    items = list(values)
    for _ in range(len(items) - 1):
        for j in range(len(items) - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def counting_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``values`` made by counting sort."""
    if not values:
        return []
    low, high = min(values), max(values)
    counts = [0] * (high - low + 1)
    for value in values:
        counts[value - low] += 1
    return [low + offset for offset, count in enumerate(counts) for _ in range(count)]


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if ``values`` is in non-decreasing order."""
    return all(left <= right for left, right in zip(values, values[1:]))


def partition(values: list[int], first: int, last: int) -> int:
    """Partition ``values[first:last + 1]`` in place around its first element.

    Smaller elements end up before the pivot; the pivot's new index is returned.
    """
    pivot = values[first]
    boundary = first + 1
    for j in range(first + 1, last + 1):
        if values[j] < pivot:
            values[boundary], values[j] = values[j], values[boundary]
            boundary += 1
    values[first], values[boundary - 1] = values[boundary - 1], values[first]
    return boundary - 1


def insertion_sort(values: list[int], low: int, high: int) -> None:
    """Sort ``values[low:high + 1]`` in place by insertion."""
    for i in range(low + 1, high + 1):
        key = values[i]
        j = i - 1
        while j >= low and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key


def _hybrid(values: list[int], low: int, high: int) -> None:
    if low >= high:
        return
    if high - low + 1 < 10:
        insertion_sort(values, low, high)
        return
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[high] = values[high], values[i + 1]
    pivot_index = i + 1
    _hybrid(values, low, pivot_index - 1)
    _hybrid(values, pivot_index + 1, high)


def hybrid_quick_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy: quicksort that switches to insertion sort below ten items."""
    items = list(values)
    _hybrid(items, 0, len(items) - 1)
    return items


def _hoare(values: list[int], low: int, high: int) -> None:
    i, j = low, high
    pivot = values[low + (high - low) // 2]
    while True:
        while values[i] < pivot:
            i += 1
        while values[j] > pivot:
            j -= 1
        if i <= j:
            if values[i] > values[j]:
                values[i], values[j] = values[j], values[i]
            i += 1
            if j > 0:
                j -= 1
        if i > j:
            break
    if i < high:
        _hoare(values, i, high)
    if j > low:
        _hoare(values, low, j)


def hoare_quick_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy made by quicksort with a middle pivot."""
    items = list(values)
    if items:
        _hoare(items, 0, len(items) - 1)
    return items


def most_frequent(values: Sequence[int]) -> int:
    """Return the most frequent value; the smallest wins ties, -1 for an empty input."""
    if not values:
        return -1
    items = hoare_quick_sort(values)
    best, best_count, current_count = items[0], 1, 1
    for previous, value in zip(items, items[1:]):
        if value == previous:
            current_count += 1
            if current_count > best_count:
                best_count = current_count
                best = value
        else:
            current_count = 1
    return best


def linear_search(values: Sequence[int], target: int) -> bool:
    """Return True if ``target`` occurs anywhere in ``values``."""
    return any(value == target for value in values)


def binary_search(values: Sequence[int], target: int) -> bool:
    """Return True if ``target`` occurs in the sorted sequence ``values``."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if values[mid] == target:
            return True
        if values[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return False