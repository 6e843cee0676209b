"""
Geometry Predicate Tests
========================

Distances, orientation, span tests and the leftmost selector.
"""

import pytest

from models.edge import Edge
from models.point import Point, Segment
from utils.geometry import (
    distance,
    distance_to_segment,
    in_x_span,
    in_y_span,
    is_left_segment,
    is_right_segment,
    leftmost,
    orientation,
    sort_points,
)


class TestDistances:

    def test_point_distance(self):
        assert distance(Point(0, 0), Point(3, 4)) == 5.0

    def test_distance_to_segment_is_perpendicular(self):
        s = Segment(Point(-1, 0), Point(1, 0))
        assert distance_to_segment(Point(0, 5), s) == pytest.approx(5.0)

    def test_distance_to_segment_uses_infinite_line(self):
        """Beyond the segment end the distance is still to the line."""
        s = Segment(Point(0, 0), Point(1, 0))
        assert distance_to_segment(Point(10, 3), s) == pytest.approx(3.0)

    def test_zero_length_segment(self):
        s = Segment(Point(1, 1), Point(1, 1))
        assert distance_to_segment(Point(4, 5), s) == pytest.approx(5.0)


class TestOrientation:

    def test_segment_left_of_point(self):
        """A(0,0) -> C(5,10) passes x=2.5 at y=5, left of (5,5)."""
        s = Edge(Point(0, 0), Point(5, 10))
        assert orientation(s, Point(5, 5)) > 0
        assert is_left_segment(s, Point(5, 5))
        assert not is_right_segment(s, Point(5, 5))

    def test_segment_right_of_point(self):
        s = Edge(Point(10, 0), Point(5, 10))
        assert orientation(s, Point(5, 5)) < 0
        assert is_right_segment(s, Point(5, 5))

    def test_reversed_segment_flips_sign(self):
        up = Segment(Point(0, 0), Point(5, 10))
        down = Segment(Point(5, 10), Point(0, 0))
        p = Point(5, 5)
        assert orientation(up, p) == -orientation(down, p)

    def test_point_on_line(self):
        s = Edge(Point(0, 0), Point(5, 10))
        assert orientation(s, Point(2.5, 5)) == 0
        assert not is_left_segment(s, Point(2.5, 5))
        assert not is_right_segment(s, Point(2.5, 5))

    def test_vertical_segment_compares_x(self):
        s = Edge(Point(0, 0), Point(0, 10))
        assert is_left_segment(s, Point(3, 5))
        assert is_right_segment(s, Point(-3, 5))
        assert orientation(s, Point(0, 20)) == 0

    def test_vertical_segment_pointing_down(self):
        s = Segment(Point(0, 10), Point(0, 0))
        assert is_right_segment(s, Point(3, 5))


class TestSpans:

    def test_closed_x_span(self):
        s = Segment(Point(4, 0), Point(0, 3))
        assert in_x_span(s, Point(0, 100))
        assert in_x_span(s, Point(4, -100))
        assert in_x_span(s, Point(2, 7))
        assert not in_x_span(s, Point(4.5, 1))

    def test_closed_y_span(self):
        s = Segment(Point(4, 0), Point(0, 3))
        assert in_y_span(s, Point(50, 0))
        assert in_y_span(s, Point(50, 3))
        assert not in_y_span(s, Point(1, -0.1))


class TestLeftmost:

    def test_prefers_candidates_left_of_pivot(self):
        pivot = Point(0, 0)
        candidates = [Point(4, 3), Point(0, 5), Point(-3, 4)]
        assert leftmost(candidates, pivot) == Point(-3, 4)

    def test_steepest_when_nothing_is_left(self):
        """Triangle apex C bears further left than B seen from A."""
        pivot = Point(0, 0)
        assert leftmost([Point(10, 0), Point(5, 10)], pivot) == Point(5, 10)

    def test_horizontal_neighbour_loses_to_any_upward_one(self):
        assert leftmost([Point(5, 0), Point(5, 5)], Point(0, 0)) == Point(5, 5)

    def test_below_pivot(self):
        """In-neighbours lie below the pivot; the most leftward still wins."""
        pivot = Point(0, 10)
        candidates = [Point(5, 0), Point(0, 0), Point(-5, 0)]
        assert leftmost(candidates, pivot) == Point(-5, 0)

    def test_collinear_tie_prefers_lowest(self):
        pivot = Point(0, 0)
        assert leftmost([Point(2, 2), Point(1, 1)], pivot) == Point(1, 1)

    def test_single_candidate(self):
        assert leftmost([Point(7, 1)], Point(0, 0)) == Point(7, 1)

    def test_empty_candidates(self):
        with pytest.raises(ValueError):
            leftmost([], Point(0, 0))

    def test_deterministic(self):
        pivot = Point(1, 1)
        candidates = [Point(3, 4), Point(-1, 6), Point(2, 9), Point(-4, 2)]
        picks = {leftmost(list(reversed(candidates)), pivot), leftmost(candidates, pivot)}
        assert len(picks) == 1


class TestTotalOrder:

    def test_sort_points_by_y_then_x(self):
        pts = [Point(5, 1), Point(0, 2), Point(-1, 1), Point(3, 0)]
        assert sort_points(pts) == [Point(3, 0), Point(-1, 1), Point(5, 1), Point(0, 2)]

    def test_precedes(self):
        assert Point(9, 0).precedes(Point(0, 1))
        assert Point(0, 1).precedes(Point(1, 1))
        assert not Point(1, 1).precedes(Point(1, 1))

    def test_identity_is_exact(self):
        assert Point(1, 2) == Point(1.0, 2.0)
        assert Point(1, 2) != Point(1, 2 + 1e-12)
