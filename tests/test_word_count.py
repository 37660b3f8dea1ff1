import pytest

from algolab.word_count import WordCounter, main, string_hash


def test_hash_of_empty_string_is_zero():
    assert string_hash("", 100) == 0


def test_hash_of_single_ascii_character_is_its_code():
    assert string_hash("a", 100) == 97


@pytest.mark.parametrize("word", ["hello", "world", "я", "слово", "x" * 200])
def test_hash_lies_in_table(word):
    assert 0 <= string_hash(word, 100) < 100


def test_hash_rejects_non_positive_size():
    with pytest.raises(ValueError):
        string_hash("a", 0)


def test_counter_rejects_non_positive_size():
    with pytest.raises(ValueError):
        WordCounter(0)


def test_counts_words():
    counter = WordCounter()
    counter.update(["cat", "dog", "cat", "cat"])
    assert counter.count("cat") == 3
    assert counter.count("dog") == 1
    assert counter.count("bird") == 0


def test_single_bucket_chain_is_newest_first():
    counter = WordCounter(1)
    counter.update(["a", "b", "a", "c"])
    assert list(counter.frequencies()) == [("c", 1), ("b", 1), ("a", 2)]


def test_statistics_with_single_bucket():
    counter = WordCounter(1)
    counter.update(["a", "b", "a", "c"])
    assert counter.fill_factor() == 1.0
    assert counter.max_chain_length() == 3
    assert counter.average_chain_length() == 3.0


def test_statistics_of_empty_table():
    counter = WordCounter()
    assert counter.fill_factor() == 0.0
    assert counter.max_chain_length() == 0
    assert counter.average_chain_length() == 0.0
    assert list(counter.frequencies()) == []


def test_average_is_distinct_words_over_size():
    counter = WordCounter(10)
    counter.update(["one", "two", "three", "two", "four"])
    assert counter.average_chain_length() == pytest.approx(4 / 10)
    assert sum(count for _, count in counter.frequencies()) == 5


def test_main_prints_frequencies(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_text("ab ab\ncd\n", encoding="utf-8")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "ab: 2" in lines
    assert "cd: 1" in lines
    assert lines[-3] == "Коэффициент заполнения: 0.02"
    assert lines[-2] == "Максимальная длина списка: 1"
    assert lines[-1] == "Средняя длина списка: 0.02"


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1