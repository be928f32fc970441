from concurrent.futures import ProcessPoolExecutor
from typing import Dict, List, Optional, Sequence

from models.point import Point
from models.slope_order import SlopeOrder
from models.collinear_group import CollinearGroup
from config import get_active_params


# ----------------------------------------------------------------------
# 1. ONE ANCHOR: SLOPE SORT + RUN SCAN
# ----------------------------------------------------------------------

def scan_anchor(
    points: Sequence[Point],
    anchor_index: int,
    params: Optional[Dict] = None,
) -> List[CollinearGroup]:
    """
    Finds every group of 4+ collinear points that contains the anchor.

      - every other point is sorted by the slope it makes with the anchor
      - runs of MIN_RUN_LENGTH or more equal slopes are collinear with it
      - one group per maximal run (run + anchor), sorted by location

    Parameters
    ----------
    points : sequence[Point]
        The full point set. Not modified.
    anchor_index : int
        Index of the anchor point in `points`.
    params : dict, optional
        Active parameters; read from config when omitted.

    Returns
    -------
    list[CollinearGroup]
        Candidate groups, in slope order.
    """
    if params is None:
        params = get_active_params()
    min_run = params["MIN_RUN_LENGTH"]

    anchor = points[anchor_index]

    # fresh list for this anchor only
    others = [pt for i, pt in enumerate(points) if i != anchor_index]
    if len(others) < min_run:
        return []

    order = SlopeOrder(anchor, params["SLOPE_ARITHMETIC"])
    others.sort(key=order.key())
    slopes = [order.slope(pt) for pt in others]

    groups: List[CollinearGroup] = []

    run_start = 0
    for j in range(1, len(others) + 1):
        # a run closes on a slope change or at the end of the list
        if j < len(others) and slopes[j] == slopes[j - 1]:
            continue

        if j - run_start >= min_run:
            group = CollinearGroup()
            for pt in others[run_start:j]:
                group.addPoint(pt)
            group.addPoint(anchor)
            group.sortPoints()
            groups.append(group)

        run_start = j

    return groups


def _scan_chunk(points, anchor_indices, params):
    """Worker body for the process pool: scan a contiguous block of anchors."""
    groups = []
    for i in anchor_indices:
        groups.extend(scan_anchor(points, i, params))
    return groups


# ----------------------------------------------------------------------
# 2. ALL ANCHORS
# ----------------------------------------------------------------------

def find_candidate_groups(
    points: Sequence[Point],
    params: Optional[Dict] = None,
) -> List[CollinearGroup]:
    """
    Runs scan_anchor for every point, in input order.

    With PARALLEL_WORKERS > 1 the anchors are split into chunks of
    PARALLEL_CHUNK_SIZE and scanned in worker processes. Chunk results are
    concatenated in anchor order, so the output matches the serial run.
    """
    if params is None:
        params = get_active_params()

    points = list(points)
    n = len(points)
    workers = params["PARALLEL_WORKERS"]

    if workers <= 1 or n <= params["PARALLEL_CHUNK_SIZE"]:
        return _scan_chunk(points, range(n), params)

    chunk = params["PARALLEL_CHUNK_SIZE"]
    chunks = [range(start, min(start + chunk, n)) for start in range(0, n, chunk)]

    groups: List[CollinearGroup] = []
    with ProcessPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_scan_chunk, points, c, params) for c in chunks]
        for fut in futures:
            groups.extend(fut.result())

    return groups
