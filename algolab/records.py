"""Name and phone records read from text and sorted by a stable merge sort."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Record:
    """A name with its phone number."""

    name: str
    phone: str

    def __str__(self) -> str:
        return f"{self.name} - {self.phone}"


def merge_sort(items: Sequence[T], key: Callable[[T], Any]) -> list[T]:
    """Return a stably sorted copy of ``items`` ordered by ``key``."""
    if len(items) <= 1:
        return list(items)
    middle = (len(items) + 1) // 2
    left = merge_sort(items[:middle], key)
    right = merge_sort(items[middle:], key)
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if key(left[i]) <= key(right[j]):
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def parse_records(lines: Iterable[str]) -> list[Record]:
    """Parse lines of the form ``name - phone``; blank lines are skipped."""
    records = []
    for line in lines:
        if not line.strip():
            continue
        name, separator, phone = line.rstrip("\n").partition("-")
        if not separator:
            raise ValueError(f"line lacks a '-' separator: {line!r}")
        records.append(Record(name.strip(), phone.strip()))
    return records


def read_records(path: str | Path) -> list[Record]:
    """Read records from the text file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_records(handle)


_KEYS: dict[str, Callable[[Record], str]] = {
    "name": lambda record: record.name,
    "phone": lambda record: record.phone,
}


def sort_records(records: Sequence[Record], by: str) -> list[Record]:
    """Return ``records`` sorted by ``"name"`` or by ``"phone"``."""
    try:
        key = _KEYS[by]
    except KeyError:
        raise ValueError(f"cannot sort by {by!r}") from None
    return merge_sort(records, key)