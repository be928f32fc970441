from itertools import combinations
from typing import Dict, List, Optional, Sequence

from models.point import Point
from models.collinear_group import CollinearGroup
from utils.geometry import are_collinear, line_key
from config import get_active_params


def find_groups_brute(
    points: Sequence[Point],
    params: Optional[Dict] = None,
) -> List[CollinearGroup]:
    """
    Reference search examining 4 points at a time (N^4).

      - every 4-combination is tested with exact integer cross products
      - collinear quadruples are pooled by the line they lie on
      - each line's pooled points form one maximal group

    Used to cross-check the slope-sort scanner; far too slow for large
    inputs.

    Returns
    -------
    list[CollinearGroup]
        One sorted group per line, in order of first discovery.
    """
    if params is None:
        params = get_active_params()
    min_points = params["MIN_SEGMENT_POINTS"]

    lines: Dict[tuple, set] = {}

    for quad in combinations(points, min_points):
        if not are_collinear(quad):
            continue
        lines.setdefault(line_key(quad[0], quad[1]), set()).update(quad)

    groups: List[CollinearGroup] = []
    for members in lines.values():
        group = CollinearGroup(points=sorted(members))
        groups.append(group)

    return groups
