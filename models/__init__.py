"""
Data Models

Defines the core data structures:
- Point / Segment
- Edge
- Chain
- DirectedWeightedGraph
- Session
- error types
"""

from .point import Point, Segment
from .edge import Edge
from .chain import Chain
from .graph import DirectedWeightedGraph
from .session import Session
from .errors import (
    GraphError,
    SubdivisionError,
    InvalidGeometryError,
    InsufficientPointsError,
)

__all__ = [
    "Point",
    "Segment",
    "Edge",
    "Chain",
    "DirectedWeightedGraph",
    "Session",
    "GraphError",
    "SubdivisionError",
    "InvalidGeometryError",
    "InsufficientPointsError",
]
