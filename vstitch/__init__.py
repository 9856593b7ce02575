"""
Vertical stitching of overlapping grayscale image strips.

This package aligns two grayscale images that overlap vertically, such as
scanned strips of one longer document, and combines them into one image
using only NumPy and Pillow.

Main components:
- GrayscaleBuffer: 8-bit single-channel pixel buffer
- OverlapScorer: Sum of absolute differences between two rows
- AlignmentSearch: Exhaustive search for the best cut row and offset
- Compositor: Stacks the second image below the cut of the first

Example usage:
    from vstitch.image_io import read_images, write_image
    from vstitch.vertical_stitcher import VerticalStitcher

    images = read_images(['top.png', 'bottom.png'])
    stitcher = VerticalStitcher(search_params={'workers': 4})
    stitched = stitcher.stitch_multiple(images)
    write_image('stitched.png', stitched)
"""

__version__ = '1.0.0'

from .errors import (
    AlignmentError,
    InvalidBufferError,
    NoCandidateError,
    CompositionOverflowError,
)
from .buffer import GrayscaleBuffer, as_buffer
from .scorer import OverlapScorer
from .alignment import AlignmentCandidate, BestAlignment, AlignmentSearch, find_best_alignment
from .compositor import Compositor, composite
from .vertical_stitcher import VerticalStitcher
from .image_io import read_image, read_buffer, write_image, read_images

__all__ = [
    'AlignmentError',
    'InvalidBufferError',
    'NoCandidateError',
    'CompositionOverflowError',
    'GrayscaleBuffer',
    'as_buffer',
    'OverlapScorer',
    'AlignmentCandidate',
    'BestAlignment',
    'AlignmentSearch',
    'find_best_alignment',
    'Compositor',
    'composite',
    'VerticalStitcher',
    'read_image',
    'read_buffer',
    'write_image',
    'read_images',
]
