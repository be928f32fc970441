"""
Utility Functions

Exact geometry helpers are exported here. Point-file I/O
(utils.points_io, OpenCV) and the Bresenham wrapper
(utils.bresenham_utils, pybresenham) are imported from their own
modules so the core models load without the rendering libraries.
"""

from .geometry import cross, are_collinear, line_key, to_canvas

__all__ = [
    "cross",
    "are_collinear",
    "line_key",
    "to_canvas",
]
