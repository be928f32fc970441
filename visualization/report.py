"""
Text reporting for found segments.

This module provides:
    • format_segment(group)
    • build_report(segments, elapsed_ms)
    • print_report(segments, elapsed_ms)
"""

from typing import List, Optional

from models.collinear_group import CollinearGroup


def format_segment(group: CollinearGroup) -> str:
    """'(x1, y1) -> (x2, y2) -> ... -> (xk, yk)'"""
    return str(group)


def build_report(segments: List[CollinearGroup], elapsed_ms: Optional[float] = None) -> str:
    """
    One line per segment, then the segment count and, when given,
    the elapsed time in milliseconds.
    """
    lines = [format_segment(seg) for seg in segments]
    lines.append(f"No. of line segments (minus any duplicates): {len(segments)}")
    if elapsed_ms is not None:
        lines.append(f"Elapsed time: {elapsed_ms:.0f} ms")
    return "\n".join(lines) + "\n"


def print_report(segments: List[CollinearGroup], elapsed_ms: Optional[float] = None):
    print(build_report(segments, elapsed_ms), end="")
