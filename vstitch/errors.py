"""
Error types raised by the alignment and composition core.
"""


class AlignmentError(ValueError):
    """Base class for all stitching core errors."""


class InvalidBufferError(AlignmentError):
    """A buffer is empty, not two-dimensional or holds out-of-range values."""


class NoCandidateError(AlignmentError):
    """No alignment candidate could be evaluated (or the search was aborted)."""


class CompositionOverflowError(AlignmentError):
    """An alignment does not fit the pair of buffers it is applied to."""
