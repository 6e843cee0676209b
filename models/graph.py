from typing import Dict, Iterator, List, Tuple

from models.edge import Edge
from models.errors import GraphError
from models.point import Point

Key = Tuple[float, float]


class DirectedWeightedGraph:
    """
    Mutable directed graph whose vertices are points keyed by exact coordinates.

    Supports:
      - vertex insertion (idempotent)
      - weighted edges that accumulate when added twice
      - weight updates, decrements and removal
      - degree (edge count) and weight (sum of edge weights) queries
      - neighbour and edge enumeration in insertion order

    Invariants:
      • an edge only joins two distinct vertices already in the graph
      • a stored weight is always >= 1; reducing it to 0 removes the edge
    """

    def __init__(self):
        self._vertices: Dict[Key, Point] = {}
        self._out: Dict[Key, Dict[Key, int]] = {}
        self._in: Dict[Key, Dict[Key, int]] = {}

    # ------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------
    def add_vertex(self, point: Point) -> Point:
        if point.key not in self._vertices:
            self._vertices[point.key] = point
            self._out[point.key] = {}
            self._in[point.key] = {}
        return self._vertices[point.key]

    def has_vertex(self, point: Point) -> bool:
        return point.key in self._vertices

    def vertices(self) -> List[Point]:
        return list(self._vertices.values())

    def sorted_vertices(self) -> List[Point]:
        """Vertices in the total order (ascending y, then x)."""
        return sorted(self._vertices.values(), key=lambda p: p.order_key)

    def vertex_count(self) -> int:
        return len(self._vertices)

    def _require(self, point: Point) -> Key:
        if point.key not in self._vertices:
            raise GraphError(f"{point!r} is not a vertex of the graph")
        return point.key

    # ------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------
    def _check_endpoints(self, start: Point, end: Point) -> Tuple[Key, Key]:
        a = self._require(start)
        b = self._require(end)
        if a == b:
            raise GraphError(f"self-loop at {start!r} is not allowed")
        return a, b

    def add_edge(self, start: Point, end: Point, weight: int = 1):
        """
        Add `weight` units of capacity to start -> end. Adding an edge that
        already exists merges into its weight, so duplicated segments
        accumulate instead of being dropped.
        """
        if weight < 1:
            raise GraphError(f"edge weight must be >= 1, got {weight}")
        a, b = self._check_endpoints(start, end)
        current = self._out[a].get(b, 0)
        self._out[a][b] = current + weight
        self._in[b][a] = current + weight

    def set_edge_weight(self, start: Point, end: Point, weight: int):
        """Overwrite the weight of start -> end; 0 or less removes the edge."""
        a, b = self._check_endpoints(start, end)
        if weight <= 0:
            self._out[a].pop(b, None)
            self._in[b].pop(a, None)
            return
        self._out[a][b] = weight
        self._in[b][a] = weight

    def remove_edge(self, start: Point, end: Point):
        a, b = self._check_endpoints(start, end)
        if b not in self._out[a]:
            raise GraphError(f"no edge {start!r} -> {end!r}")
        del self._out[a][b]
        del self._in[b][a]

    def decrease_edge_weight(self, start: Point, end: Point, amount: int = 1) -> int:
        """
        Subtract `amount` from the edge weight, removing the edge when it hits
        zero. Returns the remaining weight.
        """
        remaining = self.edge_weight(start, end) - amount
        if remaining < 0:
            raise GraphError(f"edge {start!r} -> {end!r} has less than {amount} capacity")
        self.set_edge_weight(start, end, remaining)
        return remaining

    def has_edge(self, start: Point, end: Point) -> bool:
        return end.key in self._out.get(start.key, {})

    def edge_weight(self, start: Point, end: Point) -> int:
        a, b = self._check_endpoints(start, end)
        if b not in self._out[a]:
            raise GraphError(f"no edge {start!r} -> {end!r}")
        return self._out[a][b]

    def edges(self) -> Iterator[Edge]:
        for a, targets in self._out.items():
            for b, weight in targets.items():
                yield Edge(self._vertices[a], self._vertices[b], weight)

    def edge_count(self) -> int:
        return sum(len(t) for t in self._out.values())

    # ------------------------------------------------------------
    # Degrees, weights & neighbours
    # ------------------------------------------------------------
    def out_degree(self, point: Point) -> int:
        return len(self._out[self._require(point)])

    def in_degree(self, point: Point) -> int:
        return len(self._in[self._require(point)])

    def out_weight(self, point: Point) -> int:
        return sum(self._out[self._require(point)].values())

    def in_weight(self, point: Point) -> int:
        return sum(self._in[self._require(point)].values())

    def out_neighbors(self, point: Point) -> List[Point]:
        return [self._vertices[k] for k in self._out[self._require(point)]]

    def in_neighbors(self, point: Point) -> List[Point]:
        return [self._vertices[k] for k in self._in[self._require(point)]]

    def __repr__(self):
        return f"DirectedWeightedGraph(vertices={self.vertex_count()}, edges={self.edge_count()})"
