"""
Point-file and output I/O utilities for the collinear-points pipeline.

This module provides:
    • read_points(path)
    • list_point_files(path_pattern)
    • load_point_sets(path_pattern)
    • extract_numeric_id(filename)
    • ensure_output_dir(path)
    • save_image(path, image)
    • save_text(path, text)

Handles all filesystem interaction in a consistent, testable way.
"""

import os
import re
import glob
from typing import List, Tuple

import cv2
import numpy as np

from models.point import Point


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def extract_numeric_id(filename: str) -> str:
    """
    Extract the first integer found in the file's base name, or the
    base name without extension when it holds no digits.

    Example:
        'input/mystery10089.txt' → '10089'
        'input/points.txt'       → 'points'
    """
    base = os.path.basename(filename)
    m = re.search(r'\d+', base)
    return m.group(0) if m else os.path.splitext(base)[0]


# -------------------------------------------------------------------------
#  POINT LOADING
# -------------------------------------------------------------------------

def read_points(path: str) -> List[Point]:
    """
    Reads a point file:

        N
        x1 y1
        x2 y2
        ...

    Tokens may be separated by any whitespace. Tokens after the N-th pair
    are ignored.

    Raises:
        FileNotFoundError  if the file does not exist
        ValueError         if a token is not an integer or fewer than N
                           pairs are present
    """
    if not os.path.exists(path):
        raise FileNotFoundError(path)

    with open(path, "r", encoding="utf-8") as f:
        tokens = f.read().split()

    if not tokens:
        raise ValueError(f"{path}: empty point file")

    try:
        n = int(tokens[0])
    except ValueError:
        raise ValueError(f"{path}: point count {tokens[0]!r} is not an integer") from None
    if n < 0:
        raise ValueError(f"{path}: negative point count {n}")

    coords = tokens[1:1 + 2 * n]
    if len(coords) < 2 * n:
        raise ValueError(
            f"{path}: expected {n} points, found {len(coords) // 2} complete pairs"
        )

    points = []
    for i in range(n):
        xs, ys = coords[2 * i], coords[2 * i + 1]
        try:
            points.append(Point(int(xs), int(ys)))
        except ValueError:
            raise ValueError(f"{path}: point {i} ({xs}, {ys}) is not an integer pair") from None

    return points


def list_point_files(path_pattern: str) -> List[str]:
    """
    Sorted list of files matching the given glob pattern.
    """
    return sorted(glob.glob(path_pattern))


def load_point_sets(path_pattern: str) -> Tuple[List[List[Point]], List[str]]:
    """
    Loads all point files matching the given glob pattern.
    Malformed files are reported and skipped.

    Returns:
        point_sets:  list of point lists
        names:       list of numeric identifiers extracted from filenames

    Example:
        point_sets, names = load_point_sets('input/*.txt')
    """

    point_sets = []
    names = []

    for fname in list_point_files(path_pattern):
        try:
            points = read_points(fname)
        except ValueError as exc:
            print(f"[WARN] {exc}. Skipping.")
            continue
        point_sets.append(points)
        names.append(extract_numeric_id(fname))

    return point_sets, names


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    cv2.imwrite(path, image)


def save_text(path: str, text: str):
    """
    Save a text report to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
