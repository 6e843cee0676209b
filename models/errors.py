"""
Exceptions raised by the graph layer and the subdivision pipeline.
"""


class GraphError(ValueError):
    """Operation would break a DirectedWeightedGraph invariant."""


class SubdivisionError(Exception):
    """Base class for faults that abort a locate() call."""


class InvalidGeometryError(SubdivisionError):
    """
    The input geometry cannot be decomposed, e.g. a vertex has no candidate
    inside its corridor during regularization.
    """


class InsufficientPointsError(SubdivisionError, ValueError):
    """Fewer than two distinct points were supplied."""
