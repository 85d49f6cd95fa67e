import pytest

from scrabble.dictionary import Dictionary


def test_words_are_stored_in_upper_case():
    dictionary = Dictionary(["cat", "Dog", "BIRD"])
    assert dictionary.is_valid("CAT")
    assert dictionary.is_valid("DOG")
    assert dictionary.is_valid("BIRD")
    assert len(dictionary) == 3


def test_lookup_is_exact():
    dictionary = Dictionary(["cat"])
    assert not dictionary.is_valid("cat")
    assert not dictionary.is_valid("CATS")


def test_empty_lines_and_duplicates_are_ignored():
    dictionary = Dictionary(["", "word", "WORD", "\r"])
    assert len(dictionary) == 1
    assert "WORD" in dictionary


def test_contains_rejects_non_strings():
    dictionary = Dictionary(["cat"])
    assert "CAT" in dictionary
    assert 5 not in dictionary


def test_from_file_handles_windows_line_endings(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"apple\r\nbanana\r\n\r\ncherry\n")
    dictionary = Dictionary.from_file(path)
    assert len(dictionary) == 3
    assert {"APPLE", "BANANA", "CHERRY"} == {
        word for word in ("APPLE", "BANANA", "CHERRY", "DATE") if word in dictionary
    }
    assert not dictionary.is_valid("APPLE\r")


def test_from_file_without_trailing_newline(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("zebra", encoding="utf-8")
    assert Dictionary.from_file(path).is_valid("ZEBRA")


def test_from_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Dictionary.from_file(tmp_path / "missing.txt")


def test_empty_dictionary_accepts_nothing():
    dictionary = Dictionary()
    assert len(dictionary) == 0
    assert not dictionary.is_valid("A")