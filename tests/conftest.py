"""
Shared fixtures for the point-location tests.

All geometry here is in the y-up space the pipeline works in.
"""

import pytest

from models.point import Point, Segment
from subdivision.locate import build_graph


def seg(a, b):
    return Segment(Point(*a), Point(*b))


@pytest.fixture
def triangle():
    """A(0,0), B(10,0), C(5,10) joined as a closed triangle."""
    a, b, c = Point(0, 0), Point(10, 0), Point(5, 10)
    points = [a, b, c]
    segments = [Segment(a, b), Segment(b, c), Segment(c, a)]
    return points, segments


@pytest.fixture
def subdivision():
    """
    Seven vertices forming two faces and one dangling vertex (s3 has no
    way up), so the graph needs regularization and balancing.

        s6 (320, -60)
        s5 (150, -160)   s4 (420, -220)
        s3 (260, -300)
        s2 (480, -400)
        s1 (120, -420)
        s0 (300, -550)
    """
    s = {
        0: Point(300, -550),
        1: Point(120, -420),
        2: Point(480, -400),
        3: Point(260, -300),
        4: Point(420, -220),
        5: Point(150, -160),
        6: Point(320, -60),
    }
    pairs = [(0, 1), (0, 2), (1, 3), (2, 3), (2, 4), (1, 5), (5, 6), (4, 6)]
    segments = [Segment(s[i], s[j]) for i, j in pairs]
    return s, list(s.values()), segments


@pytest.fixture
def subdivision_graph(subdivision):
    _, points, segments = subdivision
    return build_graph(points, segments)
