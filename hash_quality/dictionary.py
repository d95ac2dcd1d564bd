import logging
from typing import List

from hash_quality.common import DictionaryNotFound

__all__ = [
    'load_dictionary',
    'DICTIONARY_PATH',
]

logger = logging.getLogger(__name__)

DICTIONARY_PATH = './words.txt'


def load_dictionary(path: str = DICTIONARY_PATH) -> List[str]:
    """
    Read a word list, one word per line.

    Only the line terminator is removed, so words keep any other whitespace. Bytes that are not valid UTF-8 are
    kept via surrogateescape, so hashing sees the file's bytes.

    Args:
        path: path to the dictionary file

    Returns:
        list of words in file order

    Raises:
        DictionaryNotFound if the file can not be opened
    """
    try:
        with open(path, 'r', encoding='utf-8', errors='surrogateescape', newline='\n') as f:
            words = [line[:-1] if line.endswith('\n') else line for line in f]
    except OSError as e:
        raise DictionaryNotFound(f"Could not open dictionary file {path}: {e.strerror}") from e
    logger.info(f"Loaded {len(words)} words from {path}.")
    return words
