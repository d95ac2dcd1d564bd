import logging

import numpy as np
from scipy.stats import chi2

from hash_quality.common import EmptyDictionary
from hash_quality.hash_functions import BUCKET_COUNT

__all__ = [
    'compute_chi_square',
    'compute_p_value',
    'compute_upper_tail',
    'DEGREES_OF_FREEDOM',
]

logger = logging.getLogger(__name__)

DEGREES_OF_FREEDOM = BUCKET_COUNT - 1


def compute_chi_square(counts: np.ndarray, total_words: int) -> float:
    """
    Compute Pearson's chi-square statistic of the bucket counts against a uniform distribution.

    Args:
        counts: observed count per bucket
        total_words: number of hashed words

    Returns:
        sum over buckets of (observed - expected)^2 / expected, with expected = total_words / len(counts)

    Raises:
        EmptyDictionary if total_words is zero, since there is no expected count to compare against.
    """
    if total_words <= 0:
        raise EmptyDictionary("Cannot compute chi-square of an empty word list.")
    expected = total_words / len(counts)
    observed = np.asarray(counts, dtype=np.float64)
    return float(np.sum((observed - expected) ** 2 / expected))


def compute_p_value(chi_square: float, degrees_of_freedom: int = DEGREES_OF_FREEDOM) -> float:
    """
    Chi-squared CDF at the statistic, i.e. the proportion of the distribution's mass at or below it.

    Close to 1 means more skewed than chance allows, close to 0 means implausibly smooth. No threshold is applied.
    """
    return float(chi2.cdf(chi_square, degrees_of_freedom))


def compute_upper_tail(chi_square: float, degrees_of_freedom: int = DEGREES_OF_FREEDOM) -> float:
    """
    Probability, under a uniform null hypothesis, of a distribution at least as skewed as the observed one.
    """
    return float(chi2.sf(chi_square, degrees_of_freedom))
