"""
Data Models

Defines the core data structures:
- Point
- SlopeOrder
- CollinearGroup
"""

from .slope_order import SlopeOrder
from .point import Point, VERTICAL, COINCIDENT
from .collinear_group import CollinearGroup

__all__ = ["Point", "SlopeOrder", "CollinearGroup", "VERTICAL", "COINCIDENT"]
