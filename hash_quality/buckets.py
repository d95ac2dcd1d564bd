import logging
import numbers
from typing import Sequence

import numpy as np

from hash_quality.common import HashOutOfRange
from hash_quality.hash_functions import HashFunction, BUCKET_COUNT

__all__ = [
    'accumulate'
]

logger = logging.getLogger(__name__)


def accumulate(words: Sequence[str], hash_fn: HashFunction, bucket_count: int = BUCKET_COUNT) -> np.ndarray:
    """
    Hash every word into a bucket and count the words per bucket.

    Args:
        words: words to hash
        hash_fn: maps a word to a bucket index in [0, bucket_count)
        bucket_count: number of buckets

    Returns:
        int64 array of length bucket_count, entry i counting the words that hash to i

    Raises:
        HashOutOfRange if a hash falls outside [0, bucket_count)
        TypeError if a hash is not an integer
    """
    hashes = np.empty(len(words), dtype=np.int64)
    for i, word in enumerate(words):
        h = hash_fn(word)
        if not isinstance(h, numbers.Integral):
            raise TypeError(f"Hash of {word!r} is {type(h).__name__}, expected an integer.")
        if h < 0 or h >= bucket_count:
            raise HashOutOfRange(f"Hash {h} is outside [0, {bucket_count}).")
        hashes[i] = h
    counts = np.bincount(hashes, minlength=bucket_count)
    logger.debug(f"Accumulated {hashes.size} words into {np.count_nonzero(counts)} occupied buckets.")
    return counts
