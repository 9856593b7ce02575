"""
Image I/O utilities using PIL (Pillow)
Images are always decoded to and encoded from 8-bit grayscale.
"""

import numpy as np
from PIL import Image

from .buffer import GrayscaleBuffer


def read_image(filepath):
    """
    Read image from file as grayscale.

    Args:
        filepath: Path to image file

    Returns:
        Image as uint8 numpy array (H x W)
    """
    try:
        img = Image.open(filepath)

        # Collapse any color mode to luminance
        if img.mode != 'L':
            img = img.convert('L')

        return np.array(img)

    except Exception as e:
        raise IOError(f"Failed to read image from {filepath}: {str(e)}")


def read_buffer(filepath):
    """Read image from file into a GrayscaleBuffer."""
    return GrayscaleBuffer(read_image(filepath))


def write_image(filepath, image):
    """
    Write grayscale image to file.

    Args:
        filepath: Path to save image
        image: GrayscaleBuffer or 2D numpy array
    """
    if isinstance(image, GrayscaleBuffer):
        image = image.pixels

    try:
        # Ensure image is in correct format
        if image.dtype != np.uint8:
            image = np.clip(image, 0, 255).astype(np.uint8)

        # 2D uint8 arrays map to mode 'L'
        img = Image.fromarray(image)
        img.save(filepath)

    except Exception as e:
        raise IOError(f"Failed to write image to {filepath}: {str(e)}")


def read_images(filepaths):
    """
    Read multiple images.

    Args:
        filepaths: List of image file paths

    Returns:
        List of images as numpy arrays
    """
    images = []

    for filepath in filepaths:
        img = read_image(filepath)
        images.append(img)

    return images
