from dataclasses import dataclass, field
from typing import List, Optional

from models.point import Point, Segment


@dataclass
class Session:
    """
    A saved editing session: the points and segments a user placed on the
    canvas, the canvas size they were placed on, and optional query points.

    Coordinates are stored exactly as recorded (screen space for sessions
    coming from the interactive editor).
    """

    points: List[Point] = field(default_factory=list)
    segments: List[Segment] = field(default_factory=list)
    width: Optional[int] = None
    height: Optional[int] = None
    queries: List[Point] = field(default_factory=list)

    def resolved_queries(self) -> List[Point]:
        """
        Explicit queries, or the first placed point when none were saved.
        """
        if self.queries:
            return list(self.queries)
        return self.points[:1]
