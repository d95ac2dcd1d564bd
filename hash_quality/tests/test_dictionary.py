import pytest

from hash_quality.common import DictionaryNotFound
from hash_quality.dictionary import load_dictionary
from hash_quality.hash_functions import sanitize


def test_load_dictionary(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text("apple\nbanana\n\ncherry")
    assert load_dictionary(str(path)) == ["apple", "banana", "", "cherry"]


def test_keeps_other_whitespace(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_bytes(b"a\r\n b \n")
    assert load_dictionary(str(path)) == ["a\r", " b "]


def test_keeps_raw_bytes(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_bytes(b"caf\xe9\n\xc3\xa9t\xc3\xa9\n")
    words = load_dictionary(str(path))
    assert sanitize(words[0]) == b"caf\xe9"
    assert words[1] == "été"


def test_empty_file(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text("")
    assert load_dictionary(str(path)) == []


def test_missing_dictionary(tmp_path):
    with pytest.raises(DictionaryNotFound, match="Could not open dictionary file"):
        load_dictionary(str(tmp_path / 'missing.txt'))


def test_directory_is_not_a_dictionary(tmp_path):
    with pytest.raises(DictionaryNotFound):
        load_dictionary(str(tmp_path))
