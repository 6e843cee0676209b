"""
Visualization utilities for rendering points and weighted edges.

This module provides:
    • draw_points(img, points, viewport, color, radius)
    • draw_edges(img, edges, viewport, color, thickness, show_weights)

It is used by:
    - visualization.draw_chains
    - visualization.save_outputs
"""

from typing import List, Tuple

import cv2

from config import get_active_params, COLOR_EDGE, COLOR_LABEL, COLOR_POINT
from models.edge import Edge
from models.point import Point
from visualization.viewport import Viewport


# ---------------------------------------------------------------------
#  Points
# ---------------------------------------------------------------------

def draw_points(
    image,
    points: List[Point],
    viewport: Viewport,
    color: Tuple[int, int, int] = COLOR_POINT,
    radius: int = None
):
    """
    Draws filled circles for every point.
    """
    if radius is None:
        radius = get_active_params()["POINT_RADIUS"]

    for p in points:
        cv2.circle(image, viewport.to_pixel(p), radius, color, thickness=-1)
    return image


# ---------------------------------------------------------------------
#  Edges with weight labels
# ---------------------------------------------------------------------

def draw_edges(
    image,
    edges: List[Edge],
    viewport: Viewport,
    color: Tuple[int, int, int] = COLOR_EDGE,
    thickness: int = None,
    show_weights: bool = True
):
    """
    Draws edges as line segments. With show_weights, each edge weight is
    written next to the edge midpoint.
    """
    params = get_active_params()
    if thickness is None:
        thickness = params["LINE_WIDTH"]
    shift = params["LABEL_SHIFT"]
    scale = params["LABEL_SCALE"]

    for e in edges:
        a = viewport.to_pixel(e.start)
        b = viewport.to_pixel(e.end)
        cv2.line(image, a, b, color, thickness, lineType=cv2.LINE_AA)

    if show_weights:
        for e in edges:
            a = viewport.to_pixel(e.start)
            b = viewport.to_pixel(e.end)
            mid = ((a[0] + b[0]) // 2 + shift, (a[1] + b[1]) // 2 + shift)
            cv2.putText(
                image,
                str(e.weight),
                mid,
                cv2.FONT_HERSHEY_SIMPLEX,
                scale,
                COLOR_LABEL,
                1,
                cv2.LINE_AA
            )

    return image
