"""
Collinear Points Package

This package finds every maximal line segment through 4 or more
collinear points of a point set, including:

- Point model & slope ordering
- Per-anchor slope sort & run scan
- Segment deduplication
- Point-file I/O
- Output visualization & reporting utilities
"""
__all__ = [
    "config",
    "main",
    "detectors",
    "models",
    "utils",
    "visualization",
]
