from dataclasses import dataclass

from models.point import Point


@dataclass(frozen=True)
class Edge:
    """
    Directed, weighted arc between two graph vertices.

    `start` always precedes `end` in the total order (y, then x). The weight
    is the number of chains that may run along the same geometric edge.
    """

    start: Point
    end: Point
    weight: int = 1

    @property
    def key(self):
        return (self.start.key, self.end.key)

    def to_dict(self):
        return {
            "from": self.start.to_dict(),
            "to": self.end.to_dict(),
            "value": self.weight,
        }

    def __repr__(self):
        return f"Edge({self.start!r} -> {self.end!r}, w={self.weight})"
