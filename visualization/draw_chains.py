"""
Visualization utilities for rendering monotone chains and query results.

This module provides:
    • chain_color(idx)
    • draw_chains(img, chains, viewport)
    • draw_query(img, query, viewport, enclosing)

Used by:
    - save_outputs.py
"""

from typing import List, Sequence

import cv2

from config import get_active_params, CHAIN_COLORS, COLOR_QUERY
from models.chain import Chain
from models.point import Point
from visualization.draw_edges import draw_edges
from visualization.viewport import Viewport


def chain_color(idx: int):
    return CHAIN_COLORS[idx % len(CHAIN_COLORS)]


def draw_chains(image, chains: List[Chain], viewport: Viewport):
    """
    Draws every chain in its palette color. Chains overlap on shared edges,
    so earlier (more leftward) chains are drawn wider and first, leaving the
    later ones visible on top.
    """
    params = get_active_params()
    n = len(chains)

    for idx, chain in enumerate(chains):
        width = params["BASIC_LINE_WIDTH"] + (n - idx) * params["LINE_WIDTH_SHIFT"]
        draw_edges(image, chain.edges, viewport, chain_color(idx), width, show_weights=False)

    return image


def draw_query(image, query: Point, viewport: Viewport, enclosing: Sequence[Chain] = ()):
    """
    Draws the enclosing chains in the query color and marks the query point.
    """
    params = get_active_params()

    for chain in enclosing:
        draw_edges(image, chain.edges, viewport, COLOR_QUERY, params["BASIC_LINE_WIDTH"], show_weights=False)

    center = viewport.to_pixel(query)
    cv2.circle(image, center, params["POINT_RADIUS"] + 3, COLOR_QUERY, thickness=2)
    cv2.drawMarker(image, center, COLOR_QUERY, cv2.MARKER_CROSS, params["POINT_RADIUS"] * 2, 1)
    return image
