"""
Weight balancing of a regular graph.

This module provides:
    • balance_down_up(graph, sorted_vertices)
    • balance_up_down(graph, sorted_vertices)
    • balance(graph, sorted_vertices)

After balance() every vertex other than the global min/max carries as much
weight in as it carries out, so the graph decomposes into monotone chains.
"""

from typing import List

from models.errors import InvalidGeometryError
from models.graph import DirectedWeightedGraph
from models.point import Point
from utils.geometry import leftmost


def balance_down_up(graph: DirectedWeightedGraph, sorted_vertices: List[Point]) -> DirectedWeightedGraph:
    """
    Bottom-up pass: where in-weight exceeds out-weight, the surplus is added
    to the edge leading to the leftmost out-neighbour.
    """
    for v in sorted_vertices[1:-1]:
        surplus = graph.in_weight(v) - graph.out_weight(v)
        if surplus <= 0:
            continue

        targets = graph.out_neighbors(v)
        if not targets:
            raise InvalidGeometryError(f"{v!r} has incoming flow but no outgoing edge")

        target = leftmost(targets, v)
        graph.set_edge_weight(v, target, graph.edge_weight(v, target) + surplus)

    return graph


def balance_up_down(graph: DirectedWeightedGraph, sorted_vertices: List[Point]) -> DirectedWeightedGraph:
    """
    Top-down pass: where out-weight exceeds in-weight, the deficit is added
    to the edge coming from the leftmost in-neighbour.
    """
    for v in reversed(sorted_vertices[1:-1]):
        deficit = graph.out_weight(v) - graph.in_weight(v)
        if deficit <= 0:
            continue

        sources = graph.in_neighbors(v)
        if not sources:
            raise InvalidGeometryError(f"{v!r} has outgoing flow but no incoming edge")

        source = leftmost(sources, v)
        graph.set_edge_weight(source, v, graph.edge_weight(source, v) + deficit)

    return graph


def balance(graph: DirectedWeightedGraph, sorted_vertices: List[Point]) -> DirectedWeightedGraph:
    """
    Runs the bottom-up pass to completion, then the top-down pass.

    The bottom-up pass leaves every internal vertex with in <= out; the
    top-down pass then only raises in-weights, pushing any new deficit to
    vertices it has not visited yet.
    """
    graph = balance_down_up(graph, sorted_vertices)
    graph = balance_up_down(graph, sorted_vertices)
    return graph
