#!/usr/bin/env python3
"""
Vertical Image Stitching CLI
Command-line interface for stitching vertically overlapping strips.

Usage:
    python -m vstitch.stitch_cli top.png bottom.png -o stitched.png [options]
"""

import sys
import os
import argparse
import json
import time

from . import __version__
from .errors import AlignmentError
from .image_io import read_images, write_image
from .vertical_stitcher import VerticalStitcher


def print_banner():
    """Print banner."""
    banner = f"""
 __     __        _   _           _   ____  _   _ _       _
 \\ \\   / /__ _ __| |_(_) ___ __ _| | / ___|| |_(_) |_ ___| |__
  \\ \\ / / _ \\ '__| __| |/ __/ _` | | \\___ \\| __| | __/ __| '_ \\
   \\ V /  __/ |  | |_| | (_| (_| | |  ___) | |_| | || (__| | | |
    \\_/ \\___|_|   \\__|_|\\___\\__,_|_| |____/ \\__|_|\\__\\___|_| |_|

Vertical Image Stitching v{__version__}
    """
    print(banner)


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description='Stitch vertically overlapping grayscale images into one image'
    )

    parser.add_argument(
        'images',
        nargs='+',
        help='Input images (top to bottom order)'
    )

    parser.add_argument(
        '-o', '--output',
        default='outputs/stitched_image.png',
        help='Output image path (default: outputs/stitched_image.png)'
    )

    parser.add_argument(
        '-t', '--threads',
        type=int,
        default=1,
        help='Number of threads to use, capped at the CPU count (default: 1)'
    )

    parser.add_argument(
        '--threshold',
        type=int,
        default=None,
        help='Stop searching once a score at or below this value is found '
             '(faster, may not be the best fit)'
    )

    parser.add_argument(
        '--time-limit',
        type=float,
        default=None,
        help='Give up searching after this many seconds'
    )

    parser.add_argument(
        '--alignment-output',
        default=None,
        help='Write the alignment of each seam to this JSON file'
    )

    return parser


def resolve_threads(requested):
    """Clamp the requested thread count to [1, CPU count]."""
    max_threads = os.cpu_count() or 1
    return max(1, min(requested, max_threads))


def write_alignments(filepath, image_paths, debug_infos):
    """
    Write per-seam alignments as JSON.

    Args:
        filepath: Destination JSON path
        image_paths: Input image paths (top to bottom)
        debug_infos: Debug info dictionaries from stitch_multiple
    """
    seams = []
    for i, debug in enumerate(debug_infos):
        seam = {
            'index': i,
            'bottom_image': os.path.basename(image_paths[i + 1]),
            'min_width': int(debug['min_width']),
            'candidates_evaluated': int(debug['candidates_evaluated']),
            'early_stopped': bool(debug['early_stopped']),
        }
        seam.update(debug['alignment'].to_dict())
        seams.append(seam)

    data = {
        'images': [os.path.basename(p) for p in image_paths],
        'seams': seams,
    }

    output_dir = os.path.dirname(filepath)
    if output_dir and not os.path.exists(output_dir):
        os.makedirs(output_dir)

    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)


def main(argv=None):
    """Main function for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Print banner
    print_banner()

    # Check input files
    if len(args.images) < 2:
        print("Error: Need at least 2 images to stitch")
        return 1

    for img_path in args.images:
        if not os.path.exists(img_path):
            print(f"Error: Image not found: {img_path}")
            return 1

    if args.threads < 1:
        print("Error: --threads must be at least 1")
        return 1

    threads = resolve_threads(args.threads)

    # Create output directory
    output_dir = os.path.dirname(args.output)
    if output_dir and not os.path.exists(output_dir):
        os.makedirs(output_dir)

    print(f"\nInitializing...")
    print(f"Input images: {len(args.images)}")
    print(f"Threads: {threads}")

    # Read images
    print("\nReading images...")
    try:
        images = read_images(args.images)
        print(f"  Loaded {len(images)} images")
        for i, img in enumerate(images):
            print(f"  Image {i+1}: {img.shape}")
    except IOError as e:
        print(f"Error reading images: {str(e)}")
        return 1

    # Initialize stitcher
    try:
        stitcher = VerticalStitcher(
            search_params={
                'workers': threads,
                'stop_threshold': args.threshold,
                'time_limit': args.time_limit,
            }
        )
    except ValueError as e:
        print(f"Error: {str(e)}")
        return 1

    # Stitch images
    start_time = time.time()

    try:
        result, debug_infos = stitcher.stitch_multiple(images, return_debug_info=True)
    except AlignmentError as e:
        print(f"\nError during stitching: {str(e)}")
        return 1

    elapsed_time = time.time() - start_time

    # Save result
    print(f"\nSaving result...")
    try:
        write_image(args.output, result)
    except IOError as e:
        print(f"Error writing output: {str(e)}")
        return 1

    if args.alignment_output:
        try:
            write_alignments(args.alignment_output, args.images, debug_infos)
        except IOError as e:
            print(f"Error writing alignment data: {str(e)}")
            return 1
        print(f"  Alignment data saved to: {args.alignment_output}")

    print(f"\n✓ Success!")
    print(f"  Wrote results to file {args.output}")
    print(f"  Final size: {result.shape}")
    print(f"  Processing time: {elapsed_time:.2f} seconds")

    return 0


if __name__ == '__main__':
    sys.exit(main())
