import io

import pytest

from algolab.phonebook import PhoneBook, PhoneBookFullError, main


def _book(*entries):
    book = PhoneBook()
    for phone, name in entries:
        book.add(phone, name)
    return book


def test_search_by_name_and_phone():
    book = _book(("101", "alice"), ("202", "bob"))
    assert book.search_by_name("bob") == "202"
    assert book.search_by_phone("101") == "alice"


def test_search_missing_returns_none():
    book = _book(("101", "alice"))
    assert book.search_by_name("carol") is None
    assert book.search_by_phone("999") is None


def test_first_match_wins():
    book = _book(("101", "alice"), ("303", "alice"))
    assert book.search_by_name("alice") == "101"


def test_format_lines():
    book = _book(("101", "alice"), ("202", "bob"))
    assert book.format() == "101 alice\n202 bob\n"


def test_capacity_is_one_hundred():
    book = PhoneBook()
    for number in range(100):
        book.add(str(number), f"name{number}")
    assert len(book) == 100
    with pytest.raises(PhoneBookFullError):
        book.add("extra", "extra")


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "book.txt"
    book = _book(("101", "alice"), ("202", "bob"))
    book.save(path)
    assert list(PhoneBook.load(path)) == list(book)


def test_load_missing_file_gives_empty_book(tmp_path):
    assert len(PhoneBook.load(tmp_path / "absent.txt")) == 0


def test_load_ignores_unpaired_trailing_word(tmp_path):
    path = tmp_path / "book.txt"
    path.write_text("101 alice\n202", encoding="utf-8")
    assert list(PhoneBook.load(path)) == [("101", "alice")]


def test_main_adds_and_saves(tmp_path, monkeypatch, capsys):
    path = tmp_path / "book.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n101\nalice\n3\n101\n0\n"))
    assert main([str(path)]) == 0
    assert path.read_text(encoding="utf-8") == "101 alice\n"
    assert "имя: alice" in capsys.readouterr().out


def test_main_reports_missing_name(tmp_path, monkeypatch, capsys):
    path = tmp_path / "book.txt"
    path.write_text("101 alice\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("4\nbob\n"))
    assert main([str(path)]) == 0
    assert "такого имени нет" in capsys.readouterr().out