"""
Coordinate Transform Tests
==========================
"""

from models.chain import Chain
from models.edge import Edge
from models.point import Point, Segment
from utils.transform import flip_chain, flip_edge, flip_point, flip_points, flip_segments


class TestFlip:

    def test_flip_point(self):
        assert flip_point(Point(3, 4)) == Point(3, -4)

    def test_flip_is_an_involution(self):
        pts = [Point(0, 0), Point(-2, 7.5), Point(4, -1)]
        assert flip_points(flip_points(pts)) == pts

    def test_flip_segments_keeps_direction(self):
        flipped = flip_segments([Segment(Point(1, 2), Point(3, 4))])
        assert flipped == [Segment(Point(1, -2), Point(3, -4))]

    def test_flip_edge_keeps_weight(self):
        assert flip_edge(Edge(Point(1, 1), Point(2, 5), 3)) == Edge(Point(1, -1), Point(2, -5), 3)

    def test_flip_chain_keeps_multiplicity(self):
        chain = Chain([Edge(Point(0, 0), Point(1, 1), 1)], multiplicity=2)

        flipped = flip_chain(chain)

        assert flipped.multiplicity == 2
        assert flipped.edges == [Edge(Point(0, 0), Point(1, -1), 1)]
        assert chain.edges == [Edge(Point(0, 0), Point(1, 1), 1)]
