"""
Chain extraction from a balanced graph.

This module provides:
    • walk_chain(graph, lowest, highest)
    • extract_chains(graph, sorted_vertices)
"""

from typing import List

from models.chain import Chain
from models.errors import InvalidGeometryError
from models.graph import DirectedWeightedGraph
from models.point import Point
from utils.geometry import leftmost


def walk_chain(graph: DirectedWeightedGraph, lowest: Point, highest: Point) -> Chain:
    """
    Drains one unit of flow along the leftmost path from lowest to highest.

    Every traversed edge loses one unit of weight and disappears when it
    reaches zero.

    Raises:
        InvalidGeometryError if the walk reaches a vertex with no way up
    """
    chain = Chain()
    current = lowest

    while current != highest:
        targets = graph.out_neighbors(current)
        if not targets:
            raise InvalidGeometryError(
                f"chain walk stalled at {current!r} before reaching {highest!r}"
            )

        nxt = leftmost(targets, current)
        chain.append(current, nxt)
        graph.decrease_edge_weight(current, nxt)
        current = nxt

    return chain


def extract_chains(graph: DirectedWeightedGraph, sorted_vertices: List[Point]) -> List[Chain]:
    """
    Repeatedly drains leftmost paths until the global minimum has no outgoing
    capacity left.

    A path identical to the previously extracted chain is not appended again;
    it raises that chain's multiplicity instead. Because each walk takes the
    leftmost path of what remains and capacity only shrinks, an abandoned path
    never comes back, so repeats can only follow each other.

    Returns:
        chains ordered from left to right
    """
    lowest, highest = sorted_vertices[0], sorted_vertices[-1]
    chains: List[Chain] = []

    while graph.out_degree(lowest) > 0:
        chain = walk_chain(graph, lowest, highest)

        if chains and chain.same_path(chains[-1]):
            chains[-1].multiplicity += 1
            continue

        chains.append(chain)

    return chains
