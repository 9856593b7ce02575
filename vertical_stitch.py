#!/usr/bin/env python3
"""
Wrapper script for vertical image stitching.
Makes it easier to run without the -m flag.

Usage:
    python vertical_stitch.py top.png bottom.png -o stitched.png
"""

import sys
from vstitch.stitch_cli import main

if __name__ == '__main__':
    sys.exit(main())
