"""Shared fixtures for the collinear-points tests."""

import pytest

from config import get_active_params
from models.point import Point


INPUT8_TEXT = """8
10000      0
    0  10000
 3000   7000
 7000   3000
20000  21000
 3000   4000
14000  15000
 6000   7000
"""


def pts(*coords):
    """pts((0, 0), (1, 1)) -> [Point(0, 0), Point(1, 1)]"""
    return [Point(x, y) for x, y in coords]


def as_tuple_set(segments):
    """Order-independent view of a segment list."""
    return {tuple(seg.as_tuples()) for seg in segments}


@pytest.fixture
def params():
    """Fresh copy of the active parameters, safe to override per test."""
    return dict(get_active_params())


@pytest.fixture
def input8_points():
    return pts(
        (10000, 0), (0, 10000), (3000, 7000), (7000, 3000),
        (20000, 21000), (3000, 4000), (14000, 15000), (6000, 7000),
    )


@pytest.fixture
def input8_file(tmp_path):
    path = tmp_path / "input8.txt"
    path.write_text(INPUT8_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def grid_points():
    """4x4 integer grid: 4 rows, 4 columns and 2 diagonals of 4 points."""
    return [Point(x, y) for y in range(4) for x in range(4)]


@pytest.fixture
def parabola_points():
    """No three points on y = x^2 are collinear."""
    return [Point(i, i * i) for i in range(10)]
