"""
Utility wrapper around the pybresenham library.

This module provides:
    • bres_line(x1, y1, x2, y2)

Returns lists of (x, y) integer pixel coordinates.
"""

from typing import List, Tuple

import pybresenham as bres


# -----------------------------------------------------------
#   Line rasterization
# -----------------------------------------------------------

def bres_line(x1: int, y1: int, x2: int, y2: int) -> List[Tuple[int, int]]:
    """
    Returns a list of integer pixel coordinates forming a Bresenham line,
    both endpoints included.
    """
    return [(int(x), int(y)) for x, y in bres.line(x1, y1, x2, y2)]
