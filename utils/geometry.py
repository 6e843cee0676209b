"""
This module provides:
    - distance
    - distance_to_segment
    - orientation  (+ is_left_segment / is_right_segment)
    - in_x_span / in_y_span
    - leftmost
    - sort_points

Segments are any object exposing `start` and `end` points (Segment, Edge).
"""

import math
from typing import Iterable, List

import numpy as np

from models.point import Point


# ----------------------------------------------------------------------
#  DISTANCES
# ----------------------------------------------------------------------

def distance(p: Point, q: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p.x - q.x, p.y - q.y)


def distance_to_segment(p: Point, s) -> float:
    """
    Perpendicular distance from p to the infinite line through s.

        |(x2 - x1)(y1 - py) - (x1 - px)(y2 - y1)| / |s|

    Not clamped to the finite extent of s. A zero-length segment falls back
    to the point-to-point distance.
    """
    x1, y1 = s.start.x, s.start.y
    x2, y2 = s.end.x, s.end.y
    length = math.hypot(x2 - x1, y2 - y1)
    if length == 0:
        return distance(p, s.start)
    return abs((x2 - x1) * (y1 - p.y) - (x1 - p.x) * (y2 - y1)) / length


# ----------------------------------------------------------------------
#  ORIENTATION
# ----------------------------------------------------------------------

def orientation(s, p: Point) -> float:
    """
    Signed determinant

        | end.x    end.y    1 |
        | start.x  start.y  1 |
        | p.x      p.y      1 |

    Positive: the segment lies to the left of p (for an upward segment, p is
    on its larger-x side). Negative: the segment lies to the right of p.
    Zero: p is on the line through s.

    Vertical segments are resolved by comparing x-coordinates directly.
    """
    a, b = s.end, s.start

    if a.x == b.x:
        direction = 1 if a.y > b.y else -1 if a.y < b.y else 0
        return (p.x - a.x) * direction

    return (b.x - a.x) * (p.y - a.y) - (b.y - a.y) * (p.x - a.x)


def is_left_segment(s, p: Point) -> bool:
    """True when s lies strictly to the left of p."""
    return orientation(s, p) > 0


def is_right_segment(s, p: Point) -> bool:
    """True when s lies strictly to the right of p."""
    return orientation(s, p) < 0


# ----------------------------------------------------------------------
#  SPAN TESTS (closed intervals)
# ----------------------------------------------------------------------

def in_x_span(s, p: Point) -> bool:
    return min(s.start.x, s.end.x) <= p.x <= max(s.start.x, s.end.x)


def in_y_span(s, p: Point) -> bool:
    return min(s.start.y, s.end.y) <= p.y <= max(s.start.y, s.end.y)


# ----------------------------------------------------------------------
#  DIRECTIONAL SELECTION
# ----------------------------------------------------------------------

def leftmost(candidates: Iterable[Point], pivot: Point) -> Point:
    """
    Pick the candidate that bears furthest to the left as seen from pivot.

    Each candidate is scored by the cosine of its direction against the
    negative x-axis:

        cos = (pivot.x - c.x) / |c - pivot|

    Candidates strictly left of pivot score > 0 and the largest one wins.
    When none is left of pivot the largest score is the one with the
    smallest cosine against the positive x-axis, i.e. the steepest one.

    Equal scores only happen for collinear candidates on the same ray; they
    are resolved by the smallest y, then the smallest x.

    Raises ValueError on an empty candidate set.
    """
    candidates = list(candidates)
    if not candidates:
        raise ValueError(f"leftmost() needs at least one candidate around {pivot!r}")

    xy = np.array([(c.x, c.y) for c in candidates], dtype=float)
    dx = pivot.x - xy[:, 0]
    dy = pivot.y - xy[:, 1]
    dist = np.hypot(dx, dy)
    if np.any(dist == 0):
        raise ValueError(f"pivot {pivot!r} cannot be its own candidate")

    cosines = dx / dist
    # lexsort: last key is primary
    order = np.lexsort((xy[:, 0], xy[:, 1], -cosines))
    return candidates[int(order[0])]


# ----------------------------------------------------------------------
#  TOTAL ORDER
# ----------------------------------------------------------------------

def sort_points(points: Iterable[Point]) -> List[Point]:
    """Sort points by ascending y, then ascending x."""
    return sorted(points, key=lambda p: p.order_key)
