"""
Row overlap scoring using sum of absolute differences (SAD).
"""

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view


class OverlapScorer:
    """
    Dissimilarity between a row of one image and a row of another.

    Lower is better; identical rows score 0.
    """

    def score(self, row_a, row_b, compare_length):
        """
        Sum of absolute differences over the first compare_length pairs.

        Args:
            row_a: First row segment (already offset by the caller)
            row_b: Second row segment
            compare_length: Number of paired elements to compare

        Returns:
            score: Non-negative integer
        """
        a = np.asarray(row_a[:compare_length], dtype=np.int64)
        b = np.asarray(row_b[:compare_length], dtype=np.int64)

        return int(np.abs(a - b).sum())

    def score_offsets(self, row_a, row_b, compare_length):
        """
        Score row_b against every window of row_a at once.

        Args:
            row_a: Longer row, slid over (length >= compare_length)
            row_b: Row compared from index 0
            compare_length: Number of paired elements to compare

        Returns:
            scores: int64 array where scores[j] equals
                    score(row_a[j:], row_b, compare_length)
        """
        # int16 holds any difference of two uint8 values
        windows = sliding_window_view(np.asarray(row_a, dtype=np.int16), compare_length)
        segment = np.asarray(row_b[:compare_length], dtype=np.int16)

        return np.abs(windows - segment).sum(axis=1, dtype=np.int64)
