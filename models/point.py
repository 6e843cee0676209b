from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point.

    Two points with identical coordinates are the same vertex: equality and
    hashing use the exact (x, y) values, no tolerance is applied.
    """

    x: float
    y: float

    # ------------------------------------------------------------
    # Identity & ordering
    # ------------------------------------------------------------
    @property
    def key(self) -> Tuple[float, float]:
        """Graph lookup key."""
        return (self.x, self.y)

    @property
    def order_key(self) -> Tuple[float, float]:
        """
        Sort key of the total order: ascending y, ties broken by ascending x.
        """
        return (self.y, self.x)

    def precedes(self, other: "Point") -> bool:
        return self.order_key < other.order_key

    # ------------------------------------------------------------
    # Conversion helpers
    # ------------------------------------------------------------
    @classmethod
    def from_dict(cls, data) -> "Point":
        return cls(float(data["x"]), float(data["y"]))

    def to_dict(self):
        return {"x": self.x, "y": self.y}

    def __repr__(self):
        return f"Point({self.x:g}, {self.y:g})"


@dataclass(frozen=True)
class Segment:
    """
    Unordered pair of points as presented by the caller.

    The orientation of (start, end) is arbitrary; use canonical() to get the
    endpoints in total order.
    """

    start: Point
    end: Point

    def canonical(self) -> Tuple[Point, Point]:
        if self.end.precedes(self.start):
            return self.end, self.start
        return self.start, self.end

    def is_degenerate(self) -> bool:
        return self.start == self.end

    @classmethod
    def from_dict(cls, data) -> "Segment":
        return cls(Point.from_dict(data["from"]), Point.from_dict(data["to"]))

    def to_dict(self):
        return {"from": self.start.to_dict(), "to": self.end.to_dict()}
