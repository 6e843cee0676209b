"""
Coordinate transforms between screen space (y grows downward) and the
y-up space the subdivision pipeline works in.

Mirroring is its own inverse, so the same helpers convert both ways.
"""

from typing import List

from models.chain import Chain
from models.edge import Edge
from models.point import Point, Segment


def flip_point(p: Point) -> Point:
    return Point(p.x, -p.y)


def flip_points(points: List[Point]) -> List[Point]:
    return [flip_point(p) for p in points]


def flip_segments(segments: List[Segment]) -> List[Segment]:
    return [Segment(flip_point(s.start), flip_point(s.end)) for s in segments]


def flip_edge(e: Edge) -> Edge:
    """
    Mirror an edge. Endpoints keep their roles so that weight labels and
    chain order survive the round trip; the result is only meant for output.
    """
    return Edge(flip_point(e.start), flip_point(e.end), e.weight)


def flip_edges(edges: List[Edge]) -> List[Edge]:
    return [flip_edge(e) for e in edges]


def flip_chain(chain: Chain) -> Chain:
    return Chain(flip_edges(chain.edges), chain.multiplicity)


def flip_chains(chains: List[Chain]) -> List[Chain]:
    return [flip_chain(c) for c in chains]
