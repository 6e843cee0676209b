"""
Graph regularization.

This module provides:
    • is_regular(graph, sorted_vertices)
    • nearest_edges(graph, vertex)
    • nearest_half_plane_vertex(graph, vertex, upward)
    • regularize(graph, sorted_vertices)

A graph is regular when the global minimum has an outgoing edge, the global
maximum has an incoming edge and every other vertex has both.
"""

import math
from typing import List, Optional, Tuple

from models.edge import Edge
from models.errors import InvalidGeometryError
from models.graph import DirectedWeightedGraph
from models.point import Point
from utils.geometry import distance, distance_to_segment, in_x_span, orientation


# ========================================================================
# 1. REGULARITY CHECK
# ========================================================================

def is_regular(graph: DirectedWeightedGraph, sorted_vertices: List[Point]) -> bool:
    lowest, highest = sorted_vertices[0], sorted_vertices[-1]

    if graph.out_degree(lowest) == 0 or graph.in_degree(highest) == 0:
        return False

    for v in sorted_vertices[1:-1]:
        if graph.in_degree(v) == 0 or graph.out_degree(v) == 0:
            return False

    return True


# ========================================================================
# 2. CORRIDOR AROUND A VERTEX
# ========================================================================

def nearest_edges(
    graph: DirectedWeightedGraph, vertex: Point
) -> Tuple[Optional[Edge], Optional[Edge]]:
    """
    Nearest bounding edges on each side of vertex.

    Only edges whose x-span covers the vertex are considered. Edges touching
    the vertex, and edges whose line passes through it, cannot separate
    anything and are skipped. Distance is measured to the infinite line.

    Returns:
        (nearest_left_edge, nearest_right_edge), either may be None
    """
    nearest_left, left_dist = None, math.inf
    nearest_right, right_dist = None, math.inf

    for edge in graph.edges():
        if vertex in (edge.start, edge.end):
            continue
        if not in_x_span(edge, vertex):
            continue

        side = orientation(edge, vertex)
        if side == 0:
            continue

        d = distance_to_segment(vertex, edge)
        if side > 0 and d < left_dist:
            nearest_left, left_dist = edge, d
        elif side < 0 and d < right_dist:
            nearest_right, right_dist = edge, d

    return nearest_left, nearest_right


def in_corridor(left: Optional[Edge], right: Optional[Edge], p: Point) -> bool:
    """
    True when p lies between the two bounding edges. Points on a bounding
    line count as inside, so the endpoints of the walls stay reachable.
    """
    if left is not None and orientation(left, p) < 0:
        return False
    if right is not None and orientation(right, p) > 0:
        return False
    return True


# ========================================================================
# 3. NEAREST VERTEX IN THE CORRIDOR
# ========================================================================

def nearest_half_plane_vertex(
    graph: DirectedWeightedGraph, vertex: Point, upward: bool
) -> Point:
    """
    Closest vertex above (upward=True) or below vertex in the total order
    that lies inside the corridor of its nearest bounding edges.

    Ties on distance keep the vertex that comes first in the total order.

    Raises:
        InvalidGeometryError if the corridor holds no candidate
    """
    left, right = nearest_edges(graph, vertex)

    best = None
    best_dist = math.inf

    for p in graph.sorted_vertices():
        if p == vertex:
            continue
        if p.precedes(vertex) == upward:
            continue
        if not in_corridor(left, right, p):
            continue

        d = distance(p, vertex)
        if d < best_dist:
            best, best_dist = p, d

    if best is None:
        side = "above" if upward else "below"
        raise InvalidGeometryError(
            f"no vertex {side} {vertex!r} lies inside its corridor "
            f"(left wall: {left!r}, right wall: {right!r})"
        )
    return best


# ========================================================================
# 4. REGULARIZATION SWEEPS
# ========================================================================

def regularize(graph: DirectedWeightedGraph, sorted_vertices: List[Point]) -> List[Edge]:
    """
    Synthesizes weight-1 edges until the graph is regular:

        - downward sweep (top to bottom, max excluded):
              a vertex without an outgoing edge is joined to the nearest
              vertex above it
        - upward sweep (bottom to top, min excluded):
              a vertex without an incoming edge is joined from the nearest
              vertex below it

    The graph is modified in place. Edges added by the downward sweep are
    visible to the corridor search of later vertices.

    Returns:
        the synthesized edges, in creation order
    """
    added = []

    for v in reversed(sorted_vertices[:-1]):
        if graph.out_degree(v) == 0:
            target = nearest_half_plane_vertex(graph, v, upward=True)
            graph.add_edge(v, target, 1)
            added.append(Edge(v, target, 1))

    for v in sorted_vertices[1:]:
        if graph.in_degree(v) == 0:
            source = nearest_half_plane_vertex(graph, v, upward=False)
            graph.add_edge(source, v, 1)
            added.append(Edge(source, v, 1))

    return added
