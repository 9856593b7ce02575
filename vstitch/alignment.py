"""
Brute-force search for the vertical cut and horizontal offset that best
match the bottom of one image against the top of another.
"""

import concurrent.futures
import time
from dataclasses import dataclass

import numpy as np

from .buffer import as_buffer
from .errors import NoCandidateError
from .scorer import OverlapScorer


@dataclass(frozen=True)
class AlignmentCandidate:
    """
    One (cut_index, offset) pair and its overlap score.

    cut_index: row of the first image below which the second image begins
    offset: horizontal shift of the second image relative to the first
    score: sum of absolute differences over the compared row segment
    """
    cut_index: int
    offset: int
    score: int

    def to_dict(self):
        return {
            'cut_index': int(self.cut_index),
            'offset': int(self.offset),
            'score': int(self.score),
        }


# The winning candidate of a search
BestAlignment = AlignmentCandidate


class AlignmentSearch:
    """
    Exhaustive alignment search over (cut_index, offset) pairs.

    Candidates are visited in canonical scan order: cut_index from
    first.height - 1 down to 1, and for each cut the offsets from 0 up to
    first.width - min_width. The minimum score wins; on ties the candidate
    visited first is kept.
    """

    def __init__(self, workers=1, stop_threshold=None, time_limit=None):
        """
        Initialize Alignment Search.

        Args:
            workers: Number of threads scoring cut rows in parallel
            stop_threshold: Optional score at or below which the search stops.
                The result is then the first candidate in scan order reaching
                the threshold rather than the global minimum.
            time_limit: Optional number of seconds after which the search is
                abandoned with NoCandidateError
        """
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        if stop_threshold is not None and stop_threshold < 0:
            raise ValueError(f"stop_threshold must be >= 0, got {stop_threshold}")
        if time_limit is not None and time_limit < 0:
            raise ValueError(f"time_limit must be >= 0, got {time_limit}")

        self.workers = workers
        self.stop_threshold = stop_threshold
        self.time_limit = time_limit
        self.scorer = OverlapScorer()

    def search(self, first, second, return_debug_info=False):
        """
        Find the best alignment of second below first.

        Args:
            first: Top image (GrayscaleBuffer or 2D uint8 array)
            second: Bottom image (GrayscaleBuffer or 2D uint8 array)
            return_debug_info: If True, also return search statistics

        Returns:
            best: AlignmentCandidate with the minimum score
            debug_info: (Optional) Dictionary with search statistics
        """
        first = as_buffer(first, 'first')
        second = as_buffer(second, 'second')

        # Both buffers are at least 1x1, so min_width >= 1
        min_width = min(first.width, second.width)

        if first.height < 2:
            raise NoCandidateError(
                f"First image needs at least 2 rows to search, got {first.height}"
            )

        leading_row = second.row(0)[:min_width]
        cut_indices = range(first.height - 1, 0, -1)

        def scan_row(cut_index):
            return cut_index, self.scorer.score_offsets(
                first.row(cut_index), leading_row, min_width
            )

        start = time.monotonic()
        best = None
        candidates_evaluated = 0
        early_stopped = False

        executor = None
        if self.workers > 1:
            executor = concurrent.futures.ThreadPoolExecutor(max_workers=self.workers)
            rows = executor.map(scan_row, cut_indices)
        else:
            rows = map(scan_row, cut_indices)

        try:
            # Rows arrive in scan order regardless of which thread scored them
            for cut_index, scores in rows:
                if self.time_limit is not None and time.monotonic() - start >= self.time_limit:
                    raise NoCandidateError(
                        f"No alignment found within {self.time_limit} seconds"
                    )

                candidates_evaluated += len(scores)

                if self.stop_threshold is not None:
                    hits = np.flatnonzero(scores <= self.stop_threshold)
                    if hits.size:
                        offset = int(hits[0])
                        best = AlignmentCandidate(cut_index, offset, int(scores[offset]))
                        early_stopped = True
                        break

                # argmin returns the lowest offset among equal scores
                offset = int(np.argmin(scores))
                if best is None or scores[offset] < best.score:
                    best = AlignmentCandidate(cut_index, offset, int(scores[offset]))
        finally:
            if executor is not None:
                executor.shutdown(wait=True, cancel_futures=True)

        if best is None:
            raise NoCandidateError("Search range is empty")

        if return_debug_info:
            debug_info = {
                'min_width': min_width,
                'candidates_evaluated': candidates_evaluated,
                'early_stopped': early_stopped,
                'elapsed': time.monotonic() - start,
            }
            return best, debug_info

        return best


def find_best_alignment(first, second, workers=1, stop_threshold=None, time_limit=None):
    """
    Find the best alignment of second below first.

    Raises:
        InvalidBufferError: If either buffer is unusable
        NoCandidateError: If no candidate could be evaluated
    """
    searcher = AlignmentSearch(
        workers=workers,
        stop_threshold=stop_threshold,
        time_limit=time_limit,
    )
    return searcher.search(first, second)
