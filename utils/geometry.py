"""
This module provides:
    - cross
    - are_collinear
    - line_key
    - to_canvas

All predicates work on integer coordinates, so they are exact.
"""

import math

from config import get_active_params


# ----------------------------------------------------------------------
#  CROSS PRODUCT / COLLINEARITY
# ----------------------------------------------------------------------

def cross(o, a, b):
    """
    z-component of (a - o) x (b - o).

    Zero iff o, a and b are collinear.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def are_collinear(points):
    """
    Returns True if every point lies on the line through the first two.
    Sequences of fewer than 3 points are trivially collinear.
    """
    if len(points) < 3:
        return True
    p, q = points[0], points[1]
    return all(cross(p, q, r) == 0 for r in points[2:])


# ----------------------------------------------------------------------
#  CANONICAL LINE IDENTITY
# ----------------------------------------------------------------------

def line_key(p, q):
    """
    Canonical identity of the infinite line through p and q:

        a*x + b*y = c   with gcd(a, b, c) == 1
                        and (a, b) sign-normalized so that a > 0,
                        or a == 0 and b > 0

    Any two distinct points on the same line give the same key.
    """
    if p == q:
        raise ValueError(f"Line through {p} is undefined, points coincide")

    a = q.y - p.y
    b = p.x - q.x
    c = a * p.x + b * p.y

    g = math.gcd(math.gcd(a, b), c)
    a, b, c = a // g, b // g, c // g

    if a < 0 or (a == 0 and b < 0):
        a, b, c = -a, -b, -c

    return (a, b, c)


# ----------------------------------------------------------------------
#  PLANE -> CANVAS MAPPING
# ----------------------------------------------------------------------

def to_canvas(point, canvas_size=None, coord_max=None, margin=None):
    """
    Maps a plane point in [0, COORD_MAX]^2 to integer pixel coordinates on a
    square canvas. The y axis is flipped so larger y is drawn higher up.
    """
    if canvas_size is None or coord_max is None or margin is None:
        params = get_active_params()
        canvas_size = params["CANVAS_SIZE"] if canvas_size is None else canvas_size
        coord_max = params["COORD_MAX"] if coord_max is None else coord_max
        margin = params["CANVAS_MARGIN"] if margin is None else margin

    usable = canvas_size - 1 - 2 * margin
    px = margin + round(point.x * usable / coord_max)
    py = margin + round((coord_max - point.y) * usable / coord_max)
    return int(px), int(py)
