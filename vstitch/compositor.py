"""
Composition of two vertically overlapping images into one canvas.
"""

import numpy as np

from .buffer import GrayscaleBuffer, as_buffer
from .errors import CompositionOverflowError


class Compositor:
    """
    Stacks the second image below the cut of the first.

    The second image's pixels replace everything of the first image from
    cut_index downwards; no blending is performed in the seam.
    """

    def combine(self, first, second, alignment):
        """
        Build the combined image for an alignment.

        Args:
            first: Top image (GrayscaleBuffer or 2D uint8 array)
            second: Bottom image (GrayscaleBuffer or 2D uint8 array)
            alignment: AlignmentCandidate with cut_index and offset

        Returns:
            output: GrayscaleBuffer of height cut_index + second.height and
                    width max(first.width, second.width)
        """
        first = as_buffer(first, 'first')
        second = as_buffer(second, 'second')

        cut_index = int(alignment.cut_index)
        offset = int(alignment.offset)

        canvas_height, canvas_width = self.canvas_shape(first, second, cut_index, offset)

        # Unwritten cells stay black
        canvas = np.zeros((canvas_height, canvas_width), dtype=np.uint8)

        # Place first image down to the cut
        canvas[:cut_index, :first.width] = first.pixels[:cut_index]

        # Place second image shifted by offset, dropping columns past the edge
        visible = min(second.width, canvas_width - offset)
        canvas[cut_index:, offset:offset + visible] = second.pixels[:, :visible]

        return GrayscaleBuffer(canvas)

    def canvas_shape(self, first, second, cut_index, offset):
        """
        Validate an alignment against a buffer pair and size the canvas.

        Returns:
            (height, width) of the output canvas
        """
        canvas_width = max(first.width, second.width)

        if not 1 <= cut_index <= first.height:
            raise CompositionOverflowError(
                f"cut_index {cut_index} outside [1, {first.height}] of first image"
            )

        if not 0 <= offset < canvas_width:
            raise CompositionOverflowError(
                f"offset {offset} outside [0, {canvas_width}) of output width"
            )

        return cut_index + second.height, canvas_width


def composite(first, second, alignment):
    """Combine first and second at the given alignment."""
    return Compositor().combine(first, second, alignment)
