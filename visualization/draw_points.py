"""
Visualization utilities for rendering input points.

This module provides:
    • new_canvas(size, color)
    • draw_points(img, points)

Used by:
    - main.py
    - save_outputs.py
"""

import cv2
import numpy as np
from typing import List, Tuple

from models.point import Point
from utils.geometry import to_canvas
from config import get_active_params, COLOR_BACKGROUND, COLOR_POINT, POINT_RADIUS


# ---------------------------------------------------------------------
#  Blank canvas
# ---------------------------------------------------------------------

def new_canvas(size: int = None, color: Tuple[int, int, int] = COLOR_BACKGROUND):
    """
    Returns a square BGR canvas filled with `color`.
    """
    if size is None:
        size = get_active_params()["CANVAS_SIZE"]
    canvas = np.empty((size, size, 3), dtype=np.uint8)
    canvas[:] = color
    return canvas


# ---------------------------------------------------------------------
#  Draw points as small filled dots
# ---------------------------------------------------------------------

def draw_points(
    image,
    points: List[Point],
    color: Tuple[int, int, int] = COLOR_POINT,
    radius: int = POINT_RADIUS
):
    """
    Plots each point onto the canvas (modified in-place).
    The plane [0, COORD_MAX]^2 is scaled to the canvas, y up.
    """
    size = image.shape[0]
    for pt in points:
        cv2.circle(
            image,
            to_canvas(pt, canvas_size=size),
            radius,
            color,
            thickness=-1
        )
    return image
