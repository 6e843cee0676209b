"""
Utility Functions

Provides geometry predicates, coordinate transforms, session I/O and image
output helpers used across the pipeline.
"""

from .geometry import (
    distance,
    distance_to_segment,
    orientation,
    is_left_segment,
    is_right_segment,
    in_x_span,
    in_y_span,
    leftmost,
    sort_points,
)
from .transform import flip_point, flip_points, flip_segments, flip_edges, flip_chains
from .image_io import ensure_output_dir, save_image
from .session_io import (
    load_session,
    load_sessions,
    save_session,
    save_result,
    session_name,
)

__all__ = [
    "distance",
    "distance_to_segment",
    "orientation",
    "is_left_segment",
    "is_right_segment",
    "in_x_span",
    "in_y_span",
    "leftmost",
    "sort_points",
    "flip_point",
    "flip_points",
    "flip_segments",
    "flip_edges",
    "flip_chains",
    "ensure_output_dir",
    "save_image",
    "load_session",
    "load_sessions",
    "save_session",
    "save_result",
    "session_name",
]
