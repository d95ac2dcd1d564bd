import logging
import sys

from hash_quality.common import DictionaryNotFound, EmptyDictionary, TesterConfig
from hash_quality.dictionary import load_dictionary
from hash_quality.tester import HashFunctionTester

__all__ = [
    'run',
    'main',
    'main_no_histogram',
]

logger = logging.getLogger(__name__)


def run(config: TesterConfig) -> int:
    """
    Load the dictionary and test every registered hash function.

    Args:
        config: run configuration

    Returns:
        process exit code, 0 on success and 1 if the dictionary is missing or empty

    Raises:
        HashOutOfRange, ValueError or OSError from the trials or from writing the JSON report. Only dictionary
        errors are turned into an exit code, no trial has run when they occur.
    """
    try:
        words = load_dictionary(config.dictionary_path)
        tester = HashFunctionTester(words, config=config)
    except (DictionaryNotFound, EmptyDictionary) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    tester.run_all_tests()
    return 0


def main() -> int:
    logging.basicConfig(level=logging.WARNING)
    return run(TesterConfig())


def main_no_histogram() -> int:
    logging.basicConfig(level=logging.WARNING)
    return run(TesterConfig(show_histogram=False))


if __name__ == '__main__':
    sys.exit(main())
