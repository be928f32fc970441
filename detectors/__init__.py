"""
Detectors Package

Contains the detection modules used in the collinear-points pipeline:
- Per-anchor slope sort & run scan
- Segment deduplication
- Brute-force reference search
"""

from .collinear_scanner import scan_anchor, find_candidate_groups
from .brute_force import find_groups_brute
from .segment_deduplicator import (
    SegmentDeduplicator,
    check_distinct_points,
    find_segments,
)

__all__ = [
    "scan_anchor",
    "find_candidate_groups",
    "find_groups_brute",
    "SegmentDeduplicator",
    "check_distinct_points",
    "find_segments",
]
