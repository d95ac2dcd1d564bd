import hashlib

import pytest

from hash_quality.hash_functions import HASH_FUNCTIONS, BUCKET_COUNT, sanitize, string_length_hash, \
    first_character_hash, additive_checksum_hash, remainder_hash, multiplicative_hash, standard_library_hash

WORDS = ["", "a", "abc", "zebra", "Mississippi", "naïve", "\udcff\udcfe", "x" * 5000]


def test_sanitize():
    assert sanitize("abc") == b"abc"
    assert sanitize("é") == b"\xc3\xa9"
    # Undecodable bytes survive the round trip through the dictionary reader.
    assert sanitize(b"\xff".decode('utf-8', errors='surrogateescape')) == b"\xff"


def test_string_length_hash():
    assert string_length_hash("") == 0
    assert string_length_hash("abc") == 3
    # Length is counted in bytes
    assert string_length_hash("é") == 2
    assert string_length_hash("a" * (BUCKET_COUNT + 5)) == 5


def test_first_character_hash():
    assert first_character_hash("") == 0
    assert first_character_hash("a") == 97
    assert first_character_hash("apple") == first_character_hash("avocado")
    assert first_character_hash("\udcff") == 255


def test_additive_checksum_hash():
    assert additive_checksum_hash("") == 0
    assert additive_checksum_hash("abc") == 97 + 98 + 99
    # Anagrams collide
    assert additive_checksum_hash("listen") == additive_checksum_hash("silent")


def test_remainder_hash():
    assert remainder_hash("") == 0
    assert remainder_hash("a") == 97
    assert remainder_hash("ab") == 97 * 31 + 98
    assert remainder_hash("listen") != remainder_hash("silent")


def test_multiplicative_hash():
    # Whole character codes leave no fraction behind, so every word lands in bucket zero.
    assert multiplicative_hash("") == 0
    assert multiplicative_hash("hello") == 0
    assert multiplicative_hash("Mississippi") == 0


def test_standard_library_hash():
    assert standard_library_hash("abc") == int(hashlib.md5(b"abc").hexdigest(), 16) % BUCKET_COUNT
    assert standard_library_hash("abc") == standard_library_hash("abc")


def test_registry_order():
    assert [name for name, _ in HASH_FUNCTIONS] == [
        "String Length",
        "First Character",
        "Additive Checksum",
        "Remainder",
        "Multiplicative",
        "Standard Library",
    ]


@pytest.mark.parametrize("name,hash_fn", HASH_FUNCTIONS)
def test_registered_hashes_in_range(name, hash_fn):
    for word in WORDS:
        h = hash_fn(word)
        assert isinstance(h, int)
        assert 0 <= h < BUCKET_COUNT
