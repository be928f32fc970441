from config import get_active_params


class SlopeOrder:
    """
    Orders points by the slope they make with a fixed anchor point.

    A point (x1, y1) is smaller than (x2, y2) iff its slope to the anchor is
    smaller. COINCIDENT sorts below every real slope and VERTICAL above, so
    the order is total over any set of distinct points.

    Usage:
        order = SlopeOrder(anchor)
        order.compare(a, b)        # -1, 0, 1
        sorted(others, key=order.key())
    """

    def __init__(self, anchor, arithmetic: str = None):
        if anchor is None:
            raise ValueError("SlopeOrder needs an anchor point")
        if arithmetic is None:
            arithmetic = get_active_params()["SLOPE_ARITHMETIC"]

        self.anchor = anchor
        self.arithmetic = arithmetic

    def slope(self, point):
        """Slope from `point` to the anchor."""
        if point is None:
            raise ValueError("Cannot order a missing point by slope")
        return point.slopeTo(self.anchor, self.arithmetic)

    def compare(self, pt1, pt2) -> int:
        if pt1 is None or pt2 is None:
            raise ValueError("Cannot order a missing point by slope")

        s1 = self.slope(pt1)
        s2 = self.slope(pt2)
        if s1 < s2:
            return -1
        if s1 > s2:
            return 1
        return 0

    def __call__(self, pt1, pt2) -> int:
        return self.compare(pt1, pt2)

    def key(self):
        """
        Sort key equivalent to compare(): slopes are plain comparable numbers
        (infinities included), so each slope is computed once per sort.
        """
        return self.slope

    def __repr__(self):
        return f"SlopeOrder(anchor={self.anchor}, arithmetic={self.arithmetic!r})"
