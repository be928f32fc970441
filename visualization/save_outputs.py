"""
Centralized output-saving utilities for the collinear-points pipeline.

This module provides:
    • save_all_outputs(...)
    • save_points(...)
    • save_segments(...)
    • save_segment_id_map(...)
    • save_report(...)

Uses draw modules to visualize and utils.points_io for filesystem handling.
"""

import numpy as np
from typing import List, Optional

from models.point import Point
from models.collinear_group import CollinearGroup

from visualization.draw_points import new_canvas, draw_points
from visualization.draw_segments import draw_segments, build_segment_id_map
from visualization.report import build_report
from utils.points_io import save_image, save_text, ensure_output_dir


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_points(path: str, points: List[Point], size: int = None):
    """
    Plot the input points on a blank canvas and save to disk.
    """
    vis = new_canvas(size)
    draw_points(vis, points)
    save_image(path, vis)


def save_segments(path: str, points: List[Point], segments: List[CollinearGroup], size: int = None):
    """
    Draw the segments over the plotted points and save the result.
    """
    vis = new_canvas(size)
    draw_segments(vis, segments)
    draw_points(vis, points)
    save_image(path, vis)


def save_segment_id_map(path: str, segments: List[CollinearGroup], size: int = None):
    """
    Writes the segment id map, binarized to 0/255 so it is viewable.
    """
    id_map = build_segment_id_map(segments, size)
    binary = np.where(id_map > 0, 255, 0).astype(np.uint8)
    save_image(path, binary)


def save_report(path: str, segments: List[CollinearGroup], elapsed_ms: Optional[float] = None):
    save_text(path, build_report(segments, elapsed_ms))


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    set_id: str,
    points: List[Point],
    segments: List[CollinearGroup],
    elapsed_ms: Optional[float] = None,
    size: int = None
):
    """
    Saves every output artifact for one processed point set.

    Example output:
        <id>_points.png
        <id>_segments.png
        <id>_segmentmap.png
        <id>_segments.txt
    """

    ensure_output_dir(output_dir)

    # 1) Input points
    save_points(f"{output_dir}/{set_id}_points.png", points, size)

    # 2) Segments over points
    save_segments(f"{output_dir}/{set_id}_segments.png", points, segments, size)

    # 3) Segment id map
    save_segment_id_map(f"{output_dir}/{set_id}_segmentmap.png", segments, size)

    # 4) Text report
    save_report(f"{output_dir}/{set_id}_segments.txt", segments, elapsed_ms)
