"""A bounded phone book kept in a whitespace-separated text file."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

MAX_ENTRIES = 100


class PhoneBookFullError(Exception):
    """Raised when an entry is added to a phone book that is already full."""


class PhoneBook:
    """An ordered list of (phone, name) pairs with a fixed capacity."""

    def __init__(self, capacity: int = MAX_ENTRIES) -> None:
        self.capacity = capacity
        self._entries: list[tuple[str, str]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._entries)

    def add(self, phone: str, name: str) -> None:
        """Append an entry; raise PhoneBookFullError when the book is full."""
        if len(self._entries) >= self.capacity:
            raise PhoneBookFullError(f"phone book holds at most {self.capacity} entries")
        self._entries.append((phone, name))

    def search_by_name(self, name: str) -> str | None:
        """Return the phone of the first entry with ``name``, or None."""
        return next((phone for phone, entry_name in self._entries if entry_name == name), None)

    def search_by_phone(self, phone: str) -> str | None:
        """Return the name of the first entry with ``phone``, or None."""
        return next((name for entry_phone, name in self._entries if entry_phone == phone), None)

    def format(self) -> str:
        """Return every entry as a line ``phone name``."""
        return "".join(f"{phone} {name}\n" for phone, name in self._entries)

    @classmethod
    def load(cls, path: str | Path) -> PhoneBook:
        """Read pairs of words from ``path``; a missing file gives an empty book."""
        book = cls()
        try:
            tokens = Path(path).read_text(encoding="utf-8").split()
        except FileNotFoundError:
            return book
        for phone, name in zip(tokens[::2], tokens[1::2]):
            book.add(phone, name)
        return book

    def save(self, path: str | Path) -> None:
        """Write the book to ``path`` in the format :meth:`load` reads."""
        Path(path).write_text(self.format(), encoding="utf-8")


_MENU = (
    "Выберите операцию: \n"
    "0 - выйти \n"
    "1 - добавить запись в справочник \n"
    "2 - вывести справочник \n"
    "3 - найти по номеру телефона \n"
    "4 - найти по имени "
)


def _ask(prompt: str) -> str | None:
    try:
        return input(prompt).strip()
    except EOFError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Run the interactive phone book; the file path may be given as an argument."""
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else _ask("Введите адрес для считывания телефонных номеров: ")
    if not path:
        print("ошибка открытия файла")
        return 1
    book = PhoneBook.load(path)
    while True:
        print(_MENU)
        choice = _ask("")
        if choice is None or choice == "0":
            book.save(path)
            return 0
        if choice == "1":
            phone = _ask("Введите телефон: ")
            name = _ask("Введите имя: ") if phone else None
            if not phone or not name:
                print("ошибка ввода")
                continue
            try:
                book.add(phone, name)
            except PhoneBookFullError:
                print("справочник заполнен")
        elif choice == "2":
            print(book.format(), end="")
        elif choice == "3":
            phone = _ask("Введите телефон: ")
            if not phone:
                print("ошибка ввода")
                continue
            name = book.search_by_phone(phone)
            print("такого телефона нет" if name is None else f"имя: {name}")
        elif choice == "4":
            name = _ask("Введите имя: ")
            if not name:
                print("ошибка ввода")
                continue
            phone = book.search_by_name(name)
            print("такого имени нет" if phone is None else f"телефон: {phone}")