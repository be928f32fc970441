"""
Segment deduplication for CollinearGroup objects.

This module provides:
    • SegmentDeduplicator      (the set of unique maximal segments)
    • check_distinct_points(points)
    • find_segments(points, params)
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from models.point import Point
from models.collinear_group import CollinearGroup
from detectors.collinear_scanner import find_candidate_groups
from detectors.brute_force import find_groups_brute
from config import get_active_params


# ========================================================================
# 1. SEGMENT SET
# ========================================================================

class SegmentDeduplicator:
    """
    Collects unique segments discovered from every anchor.

    Two groups are duplicates when one contains the other, or when they
    overlap along one line (CollinearGroup.overlaps). Only the first of a
    duplicate pair is kept; later ones are discarded, never merged.

    Duplicates always lie on the same line, so candidates are looked up by
    the canonical line identity first and verified with the containment
    test. With use_line_index=False every retained group is checked.
    """

    def __init__(self, use_line_index: Optional[bool] = None):
        if use_line_index is None:
            use_line_index = get_active_params()["USE_LINE_INDEX"]

        self.use_line_index = use_line_index
        self._segments: List[CollinearGroup] = []
        self._by_line: Dict[tuple, List[CollinearGroup]] = defaultdict(list)

    # -------------------------------------------------------------
    #   Membership
    # -------------------------------------------------------------

    def _candidates(self, group: CollinearGroup) -> List[CollinearGroup]:
        if self.use_line_index:
            return self._by_line.get(group.lineKey(), [])
        return self._segments

    def contains(self, group: CollinearGroup) -> bool:
        """True if a retained segment overlap-equals `group`."""
        return any(seg.overlaps(group) for seg in self._candidates(group))

    def __contains__(self, group):
        return self.contains(group)

    # -------------------------------------------------------------
    #   Insertion
    # -------------------------------------------------------------

    def submit(self, group: CollinearGroup) -> bool:
        """
        Sorts the group's points, then keeps it unless a retained segment
        overlap-equals it.

        Returns True when the group was inserted.
        """
        group.sortPoints()

        if self.contains(group):
            return False

        group.id = len(self._segments) + 1
        self._segments.append(group)
        self._by_line[group.lineKey()].append(group)
        return True

    def submit_all(self, groups: Iterable[CollinearGroup]) -> int:
        """Submits every group in order; returns how many were inserted."""
        return sum(1 for g in groups if self.submit(g))

    # -------------------------------------------------------------
    #   Output
    # -------------------------------------------------------------

    def segments(self) -> List[CollinearGroup]:
        """Retained segments in insertion order."""
        return list(self._segments)

    def sorted_segments(self) -> List[CollinearGroup]:
        """Retained segments ordered by first point, then last point."""
        return sorted(self._segments, key=lambda g: (g.first, g.last))

    def __len__(self):
        return len(self._segments)

    def __iter__(self):
        return iter(self._segments)


# ========================================================================
# 2. INPUT PRECONDITION
# ========================================================================

def check_distinct_points(points: Iterable[Point]):
    """
    Raises ValueError naming the first point that appears twice.
    """
    seen = set()
    for i, pt in enumerate(points):
        if pt in seen:
            raise ValueError(f"Duplicate input point {pt} at index {i}")
        seen.add(pt)


# ========================================================================
# 3. FULL PIPELINE (scan every anchor + deduplicate)
# ========================================================================

def find_segments(
    points: Iterable[Point],
    params: Optional[Dict] = None,
) -> List[CollinearGroup]:
    """
    Finds every maximal segment of 4+ collinear points.

    Steps:
        - reject duplicate points (REJECT_DUPLICATES)
        - collect candidate groups from every anchor (METHOD = "fast"),
          or from the brute-force search (METHOD = "brute")
        - deduplicate in discovery order

    Returns:
        List[CollinearGroup] in discovery order, each sorted by location.
    """
    if params is None:
        params = get_active_params()

    points = list(points)
    if params["REJECT_DUPLICATES"]:
        check_distinct_points(points)

    method = params["METHOD"]
    if method == "fast":
        candidates = find_candidate_groups(points, params)
    elif method == "brute":
        candidates = find_groups_brute(points, params)
    else:
        raise ValueError(f"Unknown METHOD {method!r}, expected 'fast' or 'brute'")

    dedup = SegmentDeduplicator(params["USE_LINE_INDEX"])
    dedup.submit_all(candidates)
    return dedup.segments()
