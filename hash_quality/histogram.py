import logging

import numpy as np

__all__ = [
    'compute_segments',
    'render_histogram',
    'horizontal_line',
    'SEGMENT_COUNT',
    'HISTOGRAM_HEIGHT',
    'HISTOGRAM_WIDTH',
]

logger = logging.getLogger(__name__)

SEGMENT_COUNT = 16
HISTOGRAM_HEIGHT = 10
HISTOGRAM_WIDTH = 70


def compute_segments(counts: np.ndarray, segment_count: int = SEGMENT_COUNT,
                     height: int = HISTOGRAM_HEIGHT) -> np.ndarray:
    """
    Condense bucket counts into segment heights.

    The buckets are split into contiguous equal slices, each represented by its largest count, which is then
    scaled linearly from [global min, global max] onto [0, height - 1] and rounded half away from zero.

    If every bucket holds the same count there is no range to scale over, and every segment is given the full
    height.

    Args:
        counts: count per bucket
        segment_count: number of slices, must divide len(counts)
        height: number of display rows

    Returns:
        int array of segment_count heights in [0, height - 1]

    Raises:
        ValueError if the buckets can not be split evenly
    """
    counts = np.asarray(counts)
    if counts.size == 0 or counts.size % segment_count != 0:
        raise ValueError(f"Can not split {counts.size} buckets into {segment_count} equal segments.")
    min_count = counts.min()
    max_count = counts.max()
    if max_count == min_count:
        logger.warning(f"All buckets hold {min_count} words, histogram range is degenerate.")
        return np.full(segment_count, height - 1, dtype=np.int64)
    segment_max = counts.reshape(segment_count, -1).max(axis=1)
    scaled = (segment_max - min_count) / float(max_count - min_count) * (height - 1)
    return np.floor(scaled + 0.5).astype(np.int64)


def horizontal_line(length: int = HISTOGRAM_WIDTH) -> str:
    return '-' * (length - 1)


def render_histogram(segments: np.ndarray, height: int = HISTOGRAM_HEIGHT, width: int = HISTOGRAM_WIDTH) -> str:
    """
    Render segment heights as a text bar chart, one column per segment, labelled beneath.

    Args:
        segments: segment heights in [0, height - 1]
        height: number of rows
        width: width of the frame lines

    Returns:
        the chart, lines joined by newlines, without a trailing newline
    """
    lines = ["Histogram (Hashes Distribution):", horizontal_line(width)]
    for row in range(height - 1, -1, -1):
        cells = ''.join("   #" if segment >= row else "    " for segment in segments)
        lines.append(f"|{cells}   |")
    lines.append(horizontal_line(width))
    lines.append(" " + ''.join(f"{i:4d}" for i in range(len(segments))))
    return '\n'.join(lines)
