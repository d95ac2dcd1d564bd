import hashlib
import math
from typing import Callable, List, Tuple

__all__ = [
    'HashFunction',
    'HASH_FUNCTIONS',
    'BUCKET_COUNT',
    'sanitize',
    'string_length_hash',
    'first_character_hash',
    'additive_checksum_hash',
    'remainder_hash',
    'multiplicative_hash',
    'standard_library_hash',
]

HashFunction = Callable[[str], int]

BUCKET_COUNT = 65536  # 16-bit hash space
REMAINDER_MODULUS = 65413  # prime-like, distinct from the bucket count
GOLDEN_RATIO_FRACTION = 0.6180339887


def sanitize(word: str) -> bytes:
    """
    The raw bytes of a word. Each byte is an unsigned character code in [0, 255].

    Undecodable bytes that were read from the dictionary with `surrogateescape` are restored exactly.
    """
    return word.encode('utf-8', errors='surrogateescape')


def string_length_hash(word: str) -> int:
    return len(sanitize(word)) % BUCKET_COUNT


def first_character_hash(word: str) -> int:
    data = sanitize(word)
    if not data:
        return 0
    return data[0] % BUCKET_COUNT


def additive_checksum_hash(word: str) -> int:
    h = 0
    for c in sanitize(word):
        h = (h + c) % BUCKET_COUNT
    return h


def remainder_hash(word: str) -> int:
    h = 0
    for c in sanitize(word):
        h = (h * 31 + c) % REMAINDER_MODULUS
    return h


def multiplicative_hash(word: str) -> int:
    """
    Accumulates each character onto the golden ratio multiple of the running value, keeping only the fractional
    part, then scales the fraction into the bucket range.
    """
    h = 0.0
    for c in sanitize(word):
        h = math.fmod(h * GOLDEN_RATIO_FRACTION + c, 1.0)
    return int(h * BUCKET_COUNT)


def standard_library_hash(word: str) -> int:
    """
    Baseline general purpose hash. The builtin hash() is salted per process, so MD5 is used to keep runs
    reproducible.
    """
    return int(hashlib.md5(sanitize(word)).hexdigest(), 16) % BUCKET_COUNT


# Tested in this order. Every function reduces into BUCKET_COUNT buckets, whatever the configured bucket count.
HASH_FUNCTIONS: List[Tuple[str, HashFunction]] = [
    ("String Length", string_length_hash),
    ("First Character", first_character_hash),
    ("Additive Checksum", additive_checksum_hash),
    ("Remainder", remainder_hash),
    ("Multiplicative", multiplicative_hash),
    ("Standard Library", standard_library_hash),
]
