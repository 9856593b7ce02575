"""
Vertical stitching pipeline: alignment search followed by composition.
"""

import numpy as np

from .alignment import AlignmentSearch
from .buffer import GrayscaleBuffer, as_buffer
from .compositor import Compositor
from .errors import InvalidBufferError


class VerticalStitcher:
    """
    Complete vertical stitching pipeline.

    This class coordinates all components:
    1. Grayscale conversion of the inputs
    2. Alignment search (cut row and horizontal offset)
    3. Composition of both strips into one canvas
    """

    def __init__(self,
                 search_params=None,
                 verbose=True):
        """
        Initialize Vertical Stitcher.

        Args:
            search_params: Parameters for AlignmentSearch
                (workers, stop_threshold, time_limit)
            verbose: Print progress for each step
        """
        search_params = search_params or {}
        self.searcher = AlignmentSearch(**search_params)

        self.compositor = Compositor()

        self.verbose = verbose

    def stitch_pair(self, img1, img2, return_debug_info=False):
        """
        Stitch two vertically overlapping images together.

        Args:
            img1: Top image
            img2: Bottom image
            return_debug_info: If True, return additional debug information

        Returns:
            result: Stitched image (uint8 array)
            debug_info: (Optional) Dictionary with debug information
        """
        first = as_buffer(self._to_grayscale(img1), 'top')
        second = as_buffer(self._to_grayscale(img2), 'bottom')

        self._log(f"  Searching for best alignment "
                  f"({first.width}x{first.height} over {second.width}x{second.height})...")
        alignment, search_info = self.searcher.search(first, second, return_debug_info=True)
        self._log(f"    Found best fit at index {alignment.cut_index} of top image "
                  f"(offset {alignment.offset}, score {alignment.score})")
        if search_info['early_stopped']:
            self._log("    Stopped early at the score threshold")

        self._log("  Combining images...")
        output = self.compositor.combine(first, second, alignment)
        self._log("  Done!")

        result = output.pixels

        if return_debug_info:
            debug_info = {
                'alignment': alignment,
                'min_width': search_info['min_width'],
                'candidates_evaluated': search_info['candidates_evaluated'],
                'early_stopped': search_info['early_stopped'],
                'output_shape': result.shape,
            }
            return result, debug_info

        return result

    def stitch_multiple(self, images, return_debug_info=False):
        """
        Stitch multiple strips into one image.

        Args:
            images: List of images (ordered top to bottom)
            return_debug_info: If True, return debug information

        Returns:
            result: Stitched image
            debug_info: (Optional) List of debug info for each seam
        """
        if len(images) == 0:
            raise ValueError("No images provided")

        if len(images) == 1:
            return images[0]

        self._log(f"\nStitching {len(images)} images...")

        debug_infos = []

        result = images[0]

        for i in range(1, len(images)):
            self._log(f"\nStitching image {i+1} below current result...")

            if return_debug_info:
                result, debug = self.stitch_pair(result, images[i], return_debug_info=True)
                debug_infos.append(debug)
            else:
                result = self.stitch_pair(result, images[i])

        if return_debug_info:
            return result, debug_infos

        return result

    def _to_grayscale(self, image):
        """Convert image to grayscale if needed."""
        if isinstance(image, GrayscaleBuffer):
            return image
        image = np.asarray(image)
        if image.ndim == 3:
            if image.shape[2] < 3:
                raise InvalidBufferError(
                    f"Expected RGB or RGBA channels, got shape {image.shape}"
                )
            # RGB to grayscale using standard weights
            gray = np.dot(image[..., :3], [0.299, 0.587, 0.114])
            return np.clip(np.rint(gray), 0, 255).astype(np.uint8)
        return image

    def _log(self, message):
        if self.verbose:
            print(message)
