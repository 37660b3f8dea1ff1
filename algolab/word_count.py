"""Word frequencies kept in a hash table with separate chaining."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SIZE = 100
MAX_WORD_LENGTH = 99
_MASK = 0xFFFFFFFF


def string_hash(key: str, size: int) -> int:
    """Return the bucket of ``key`` in a table of ``size`` buckets.

    The hash multiplies by 31 and adds each UTF-8 byte read as a signed
    8-bit value, wrapping at 32 bits.
    """
    if size <= 0:
        raise ValueError("table size must be positive")
    value = 0
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = (value * 31 + signed) & _MASK
    return value % size


@dataclass
class _Entry:
    word: str
    count: int = 1


@dataclass
class WordCounter:
    """Counts words; every bucket holds a chain with the newest word first."""

    size: int = DEFAULT_SIZE
    _buckets: list[list[_Entry]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("table size must be positive")
        self._buckets = [[] for _ in range(self.size)]

    def add(self, word: str) -> None:
        """Count one more occurrence of ``word``."""
        chain = self._buckets[string_hash(word, self.size)]
        for entry in chain:
            if entry.word == word:
                entry.count += 1
                return
        chain.insert(0, _Entry(word))

    def update(self, words: Iterable[str]) -> None:
        """Count every word of ``words``."""
        for word in words:
            self.add(word)

    def count(self, word: str) -> int:
        """Return how many times ``word`` was added; 0 if never."""
        chain = self._buckets[string_hash(word, self.size)]
        return next((entry.count for entry in chain if entry.word == word), 0)

    def frequencies(self) -> Iterator[tuple[str, int]]:
        """Yield ``(word, count)`` bucket by bucket, each chain newest first."""
        for chain in self._buckets:
            for entry in chain:
                yield entry.word, entry.count

    def fill_factor(self) -> float:
        """Return the share of buckets that hold at least one word."""
        return sum(1 for chain in self._buckets if chain) / self.size

    def max_chain_length(self) -> int:
        """Return the length of the longest chain."""
        return max(len(chain) for chain in self._buckets)

    def average_chain_length(self) -> float:
        """Return the mean chain length over all buckets, empty ones included."""
        return sum(len(chain) for chain in self._buckets) / self.size


def _words(text: str) -> Iterator[str]:
    for word in text.split():
        for start in range(0, len(word), MAX_WORD_LENGTH):
            yield word[start:start + MAX_WORD_LENGTH]


def main(argv: list[str] | None = None) -> int:
    """Print word frequencies and table statistics for a text file."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "9.txt"
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as error:
        print(f"Failed to open file: {error}", file=sys.stderr)
        return 1
    counter = WordCounter()
    counter.update(_words(text))
    for word, count in counter.frequencies():
        print(f"{word}: {count}")
    print(f"Коэффициент заполнения: {counter.fill_factor():.2f}")
    print(f"Максимальная длина списка: {counter.max_chain_length()}")
    print(f"Средняя длина списка: {counter.average_chain_length():.2f}")
    return 0