"""
Grayscale pixel buffer shared by the scorer, search and compositor.
"""

import numpy as np

from .errors import InvalidBufferError


class GrayscaleBuffer:
    """
    Two-dimensional array of 8-bit intensities.

    Pixels are stored row-major in a (height x width) uint8 array.
    Access is by (row, col) with 0 <= row < height and 0 <= col < width.
    """

    def __init__(self, pixels):
        """
        Initialize buffer.

        Args:
            pixels: 2D array-like of integer values in [0, 255]
        """
        try:
            array = np.asarray(pixels)
        except ValueError as e:
            raise InvalidBufferError(f"Pixels do not form a rectangular array: {e}") from e

        if array.ndim != 2:
            raise InvalidBufferError(
                f"Expected a 2D grayscale array, got shape {array.shape}"
            )

        if array.shape[0] < 1 or array.shape[1] < 1:
            raise InvalidBufferError(
                f"Buffer must be at least 1x1, got {array.shape[1]}x{array.shape[0]}"
            )

        if array.dtype != np.uint8:
            if not np.issubdtype(array.dtype, np.integer):
                raise InvalidBufferError(f"Expected integer pixels, got {array.dtype}")
            if array.min() < 0 or array.max() > 255:
                raise InvalidBufferError("Pixel values must lie in [0, 255]")
            array = array.astype(np.uint8)
        else:
            # Never share memory with the caller's array
            array = array.copy()

        self.pixels = array

    @classmethod
    def from_pixels(cls, width, height, pixels):
        """
        Build buffer from a flat row-major pixel sequence.

        Args:
            width: Number of columns
            height: Number of rows
            pixels: Sequence of width * height values

        Returns:
            GrayscaleBuffer
        """
        try:
            flat = np.asarray(pixels).ravel()
        except ValueError as e:
            raise InvalidBufferError(f"Pixels do not form a flat sequence: {e}") from e

        if width < 1 or height < 1:
            raise InvalidBufferError(f"Buffer must be at least 1x1, got {width}x{height}")

        if flat.size != width * height:
            raise InvalidBufferError(
                f"Expected {width * height} pixels for {width}x{height}, got {flat.size}"
            )

        return cls(flat.reshape(height, width))

    @classmethod
    def zeros(cls, width, height):
        """Create a black buffer of the given size."""
        if width < 1 or height < 1:
            raise InvalidBufferError(f"Buffer must be at least 1x1, got {width}x{height}")
        return cls(np.zeros((height, width), dtype=np.uint8))

    @property
    def width(self):
        return self.pixels.shape[1]

    @property
    def height(self):
        return self.pixels.shape[0]

    def row(self, r):
        """Return row r as a read-only view."""
        view = self.pixels[r]
        view.flags.writeable = False
        return view

    def pixel(self, row, col):
        return int(self.pixels[row, col])

    def __eq__(self, other):
        if not isinstance(other, GrayscaleBuffer):
            return NotImplemented
        return np.array_equal(self.pixels, other.pixels)

    def __repr__(self):
        return f"GrayscaleBuffer(width={self.width}, height={self.height})"


def as_buffer(image, name='image'):
    """
    Wrap an array as a GrayscaleBuffer.

    Args:
        image: GrayscaleBuffer or 2D array-like
        name: Name used in error messages

    Returns:
        GrayscaleBuffer
    """
    if isinstance(image, GrayscaleBuffer):
        return image

    try:
        return GrayscaleBuffer(image)
    except InvalidBufferError as e:
        raise InvalidBufferError(f"Invalid {name} buffer: {e}") from e
