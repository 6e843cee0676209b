"""
Monotone-chain point location entry point.

This module provides:
    • build_graph(points, segments)
    • build_chains(points, segments)
    • locate(query, points, segments)
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from models.chain import Chain
from models.edge import Edge
from models.errors import InsufficientPointsError, InvalidGeometryError
from models.graph import DirectedWeightedGraph
from models.point import Point, Segment
from subdivision.balancer import balance
from subdivision.chain_extractor import extract_chains
from subdivision.locator import locate_enclosing_chains
from subdivision.regularizer import is_regular, regularize


@dataclass
class LocateResult:
    """
    Everything a caller needs to redisplay a query:

      • enclosing_chains: the (left, right) pair around the query point
      • chains:           the full left-to-right chain decomposition
      • edges:            edges of the regularized and balanced graph,
                          captured before extraction drained them
      • location:         which locator rule produced enclosing_chains
    """

    enclosing_chains: Tuple[Chain, Chain]
    chains: List[Chain]
    edges: List[Edge]
    location: str

    def to_dict(self):
        return {
            "enclosingChains": [c.to_dict() for c in self.enclosing_chains],
            "chains": [c.to_dict() for c in self.chains],
            "edges": [e.to_dict() for e in self.edges],
            "location": self.location,
        }


# ========================================================================
# 1. GRAPH CONSTRUCTION
# ========================================================================

def build_graph(points: Iterable[Point], segments: Iterable[Segment]) -> DirectedWeightedGraph:
    """
    Adds every point as a vertex and every segment as a weight-1 edge
    directed along the total order. Repeated segments accumulate weight.

    Raises:
        InvalidGeometryError for a zero-length segment or a segment whose
        endpoint is not one of the points
    """
    graph = DirectedWeightedGraph()

    for p in points:
        graph.add_vertex(p)

    for s in segments:
        if s.is_degenerate():
            raise InvalidGeometryError(f"segment {s.start!r} -> {s.end!r} has zero length")
        for endpoint in (s.start, s.end):
            if not graph.has_vertex(endpoint):
                raise InvalidGeometryError(f"segment endpoint {endpoint!r} is not one of the points")

        lower, upper = s.canonical()
        graph.add_edge(lower, upper, 1)

    return graph


# ========================================================================
# 2. DECOMPOSITION
# ========================================================================

def build_chains(
    points: Iterable[Point], segments: Iterable[Segment]
) -> Tuple[List[Chain], List[Edge]]:
    """
    Regularizes and balances the graph of (points, segments), then extracts
    its monotone chains.

    Returns:
        (chains, edges) where edges is the balanced edge list

    Raises:
        InsufficientPointsError for fewer than two distinct points
        InvalidGeometryError when regularization or extraction fails
    """
    graph = build_graph(points, segments)
    if graph.vertex_count() < 2:
        raise InsufficientPointsError(
            f"need at least 2 distinct points, got {graph.vertex_count()}"
        )

    sorted_vertices = graph.sorted_vertices()

    if not is_regular(graph, sorted_vertices):
        regularize(graph, sorted_vertices)

    balance(graph, sorted_vertices)

    edges = list(graph.edges())
    chains = extract_chains(graph, sorted_vertices)
    return chains, edges


# ========================================================================
# 3. QUERY
# ========================================================================

def locate(query: Point, points: Iterable[Point], segments: Iterable[Segment]) -> LocateResult:
    """
    Rebuilds the chain decomposition of (points, segments) and finds the two
    chains enclosing query. The query point does not need to be one of the
    points. No state is kept between calls.
    """
    chains, edges = build_chains(points, segments)
    enclosure = locate_enclosing_chains(query, chains)

    return LocateResult(
        enclosing_chains=enclosure.as_pair(),
        chains=chains,
        edges=edges,
        location=enclosure.location,
    )
