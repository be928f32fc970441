"""
Visualization Tools

Provides drawing and reporting utilities for:
- Input points
- Collinear segments
- Text reports
"""

from .draw_points import new_canvas, draw_points
from .draw_segments import draw_segments, build_segment_id_map
from .report import format_segment, build_report, print_report
from .save_outputs import (
    save_all_outputs,
    save_points,
    save_segments,
    save_segment_id_map,
    save_report,
)

__all__ = [
    "new_canvas",
    "draw_points",
    "draw_segments",
    "build_segment_id_map",
    "format_segment",
    "build_report",
    "print_report",
    "save_all_outputs",
    "save_points",
    "save_segments",
    "save_segment_id_map",
    "save_report",
]
