import logging
import sys
from typing import List, Sequence, TextIO, Tuple

from hash_quality.buckets import accumulate
from hash_quality.chi_square import compute_chi_square, compute_p_value, compute_upper_tail
from hash_quality.common import EmptyDictionary, TesterConfig, TrialReport
from hash_quality.hash_functions import BUCKET_COUNT, HASH_FUNCTIONS, HashFunction
from hash_quality.histogram import compute_segments, horizontal_line, render_histogram

__all__ = [
    'HashFunctionTester'
]

logger = logging.getLogger(__name__)


class HashFunctionTester:
    """
    Tests the distribution of hash functions over a fixed word list. Each trial hashes every word into buckets,
    measures the deviation from uniform with a chi-square test, and writes a report to the sink.
    """

    def __init__(self, words: Sequence[str], config: TesterConfig | None = None, sink: TextIO | None = None):
        if len(words) == 0:
            raise EmptyDictionary("Dictionary contains no words.")
        self._words = tuple(words)
        self._config = config if config is not None else TesterConfig()
        self._sink = sink if sink is not None else sys.stdout

    @property
    def config(self) -> TesterConfig:
        return self._config

    @property
    def num_words(self) -> int:
        return len(self._words)

    def _print(self, text: str = ''):
        print(text, file=self._sink)

    def test_hash_function(self, name: str, hash_fn: HashFunction) -> TrialReport:
        """
        Run a single trial and write its report.

        Args:
            name: display name of the hash function
            hash_fn: maps a word to a bucket in [0, bucket_count)

        Returns:
            the trial report

        Raises:
            HashOutOfRange if hash_fn returns a value outside the bucket range
        """
        config = self._config
        counts = accumulate(self._words, hash_fn, config.bucket_count)
        chi_square = compute_chi_square(counts, self.num_words)
        p_value = compute_p_value(chi_square, config.degrees_of_freedom)
        segments = None
        if config.show_histogram:
            segments = compute_segments(counts, config.segment_count, config.histogram_height)
        report = TrialReport(
            name=name,
            num_words=self.num_words,
            chi_square=chi_square,
            degrees_of_freedom=config.degrees_of_freedom,
            p_value=p_value,
            upper_tail=compute_upper_tail(chi_square, config.degrees_of_freedom),
            segments=segments
        )
        logger.info(f"Tested {name}: chi-square {chi_square:g}, p-value {p_value:g}.")
        self._write_report(report)
        return report

    def _write_report(self, report: TrialReport):
        width = self._config.histogram_width
        self._print(horizontal_line(width))
        self._print(f"{report.name} Hash:")
        self._print(horizontal_line(width // 2))
        self._print(f"Chi-Square: {report.chi_square:g}")
        self._print(f"P-Value: {report.p_value:g}")
        if report.segments is not None:
            self._print(render_histogram(report.segments, self._config.histogram_height, width))

    def run_all_tests(self, hash_functions: Sequence[Tuple[str, HashFunction]] = HASH_FUNCTIONS) -> List[TrialReport]:
        """
        Test every hash function, in order.

        Args:
            hash_functions: (display name, hash function) pairs

        Returns:
            one report per hash function

        Raises:
            ValueError if the registered hash functions are run against a bucket count other than theirs
        """
        if hash_functions is HASH_FUNCTIONS and self._config.bucket_count != BUCKET_COUNT:
            raise ValueError(f"Registered hash functions produce {BUCKET_COUNT} buckets, "
                             f"configured bucket_count is {self._config.bucket_count}.")
        reports = [self.test_hash_function(name, hash_fn) for name, hash_fn in hash_functions]
        if self._config.report_path is not None:
            with open(self._config.report_path, 'w') as f:
                for report in reports:
                    f.write(report.to_json() + '\n')
            logger.info(f"Wrote {len(reports)} reports to {self._config.report_path}.")
        return reports
