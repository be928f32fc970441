from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from models.point import Point
from utils.geometry import line_key


@dataclass
class CollinearGroup:
    """
    Represents 4 or more collinear points that form one line segment.

    Handles:
      • collecting points discovered around an anchor
      • sorting them by location so the first and last points are the
        segment's endpoints
      • the overlap test used to drop sub-segments of a known segment
      • the "P1 -> P2 -> ... -> Pk" rendering used in reports
    """

    points: List[Point] = field(default_factory=list)

    # Optional id assigned by the deduplicator once the group is retained
    id: Optional[int] = None

    # -------------------------------------------------------------
    #   Build
    # -------------------------------------------------------------

    def addPoint(self, pt: Point):
        self.points.append(pt)

    def sortPoints(self):
        """
        Sort points from smallest to largest location (y, then x).
        """
        self.points.sort()

    # -------------------------------------------------------------
    #   Geometry
    # -------------------------------------------------------------

    @property
    def first(self) -> Point:
        return self.points[0]

    @property
    def last(self) -> Point:
        return self.points[-1]

    def endpoints(self) -> Tuple[Point, Point]:
        """
        Assumes the points are sorted (see sortPoints).
        """
        return self.first, self.last

    def lineKey(self):
        """Canonical identity of the line this group lies on."""
        return line_key(self.first, self.last)

    # -------------------------------------------------------------
    #   Overlap equality
    # -------------------------------------------------------------

    def contains(self, other: "CollinearGroup") -> bool:
        """
        True if the larger of the two groups contains every point of the
        smaller one, whatever their lengths.
        """
        if self is other:
            return True

        if len(self.points) < len(other.points):
            smaller, larger = self.points, other.points
        else:
            smaller, larger = other.points, self.points

        larger_set = set(larger)
        return all(pt in larger_set for pt in smaller)

    def overlaps(self, other: "CollinearGroup") -> bool:
        """
        Two groups describe the same segment if one contains the other, or
        if they are sub-runs of one line sharing at least two points
        (e.g. {A,B,C,D} and {B,C,D,E}).

        Two shared points pin both groups to the same line.
        """
        if self.contains(other):
            return True
        shared = set(self.points).intersection(other.points)
        return len(shared) >= 2

    # -------------------------------------------------------------
    #   Sizes & rendering
    # -------------------------------------------------------------

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def as_tuples(self):
        return [pt.as_tuple() for pt in self.points]

    def __str__(self):
        return " -> ".join(str(pt) for pt in self.points)
