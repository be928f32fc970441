"""
Visualization utilities for rendering collinear segments.

This module provides:
    • draw_segments(img, segments, color, thickness)
    • build_segment_id_map(segments, size)

It is used by:
    - main.py
    - visualization.save_outputs
"""

import cv2
import numpy as np
from typing import List, Tuple

from models.collinear_group import CollinearGroup
from utils.bresenham_utils import bres_line
from utils.geometry import to_canvas
from config import get_active_params, COLOR_SEGMENT, SEGMENT_THICKNESS


# ---------------------------------------------------------------------
#  Draw each group as one line from its first to its last point
# ---------------------------------------------------------------------

def draw_segments(
    image,
    segments: List[CollinearGroup],
    color: Tuple[int, int, int] = COLOR_SEGMENT,
    thickness: int = SEGMENT_THICKNESS
):
    """
    Draws one straight line per group, between its smallest and largest
    point. Assumes each group is sorted (the deduplicator guarantees it).

    Args:
        image: BGR numpy array (modified in-place)
        segments: list of CollinearGroup objects
        color: (B, G, R)
        thickness: pixel width
    """
    size = image.shape[0]
    for seg in segments:
        first, last = seg.endpoints()
        cv2.line(
            image,
            to_canvas(first, canvas_size=size),
            to_canvas(last, canvas_size=size),
            color,
            thickness
        )
    return image


# ---------------------------------------------------------------------
#  Pixel map of segment ids
# ---------------------------------------------------------------------

def build_segment_id_map(segments: List[CollinearGroup], size: int = None):
    """
    Builds a pixel-wise map of segment ids on the canvas grid.

    Every pixel on a segment's Bresenham line receives that segment's id
    (its 1-based position in `segments` when no id was assigned).
    Where segments cross, later ids overwrite earlier ones.

    Returns
    -------
    np.ndarray
        (size, size) int32 map, 0 where no segment passes.
    """
    if size is None:
        size = get_active_params()["CANVAS_SIZE"]

    id_map = np.zeros((size, size), dtype=np.int32)

    for idx, seg in enumerate(segments, start=1):
        seg_id = seg.id if seg.id is not None else idx
        x1, y1 = to_canvas(seg.first, canvas_size=size)
        x2, y2 = to_canvas(seg.last, canvas_size=size)

        for x, y in bres_line(x1, y1, x2, y2):
            if 0 <= x < size and 0 <= y < size:
                id_map[y, x] = seg_id

    return id_map
