from dataclasses import dataclass, field
from typing import List, Optional

from models.edge import Edge
from models.point import Point


@dataclass
class Chain:
    """
    Monotone path from the global minimum vertex to the global maximum one.

    Handles:
      • ordered edge storage (each edge carries weight 1)
      • path identity, used to suppress repeated extractions
      • lookup of the edge spanning a given height (used by the locator)

    `multiplicity` counts how many units of flow were drained along this
    exact path during extraction.
    """

    edges: List[Edge] = field(default_factory=list)
    multiplicity: int = 1

    # -------------------------------------------------------------
    #   Construction
    # -------------------------------------------------------------

    def append(self, start: Point, end: Point):
        if self.edges and self.edges[-1].end != start:
            raise ValueError(
                f"chain edge {start!r} -> {end!r} does not continue from {self.edges[-1].end!r}"
            )
        self.edges.append(Edge(start, end, 1))

    # -------------------------------------------------------------
    #   Geometry
    # -------------------------------------------------------------

    @property
    def start(self) -> Point:
        return self.edges[0].start

    @property
    def end(self) -> Point:
        return self.edges[-1].end

    def vertices(self) -> List[Point]:
        if not self.edges:
            return []
        return [self.edges[0].start] + [e.end for e in self.edges]

    def edge_at_height(self, point: Point) -> Optional[Edge]:
        """
        First edge (from the bottom) whose closed y-span contains point.y.
        Edges are stored bottom-up, so start.y <= end.y.
        """
        for edge in self.edges:
            if edge.start.y <= point.y <= edge.end.y:
                return edge
        return None

    # -------------------------------------------------------------
    #   Identity
    # -------------------------------------------------------------

    @property
    def path_key(self):
        return tuple(e.key for e in self.edges)

    def same_path(self, other: "Chain") -> bool:
        return self.path_key == other.path_key

    def to_dict(self):
        return {
            "edges": [e.to_dict() for e in self.edges],
            "multiplicity": self.multiplicity,
        }

    def __len__(self):
        return len(self.edges)

    def __iter__(self):
        return iter(self.edges)

    def __repr__(self):
        path = " -> ".join(repr(p) for p in self.vertices())
        return f"Chain({path}, x{self.multiplicity})"
