"""
Centralized output-saving utilities for the point-location driver.

This module provides:
    • save_all_outputs(...)
    • save_graph(...)
    • save_chains(...)
    • save_located(...)
    • save_result_json(...)

Uses draw modules to visualize and utils for filesystem handling. All
geometry passed in is expected in the y-up space of the pipeline.
"""

from typing import List

import numpy as np

from config import get_active_params, COLOR_BACKGROUND
from models.point import Point
from subdivision.locate import LocateResult
from utils.image_io import ensure_output_dir, save_image
from utils.session_io import save_result
from utils.transform import flip_chains, flip_edges
from visualization.draw_chains import draw_chains, draw_query
from visualization.draw_edges import draw_edges, draw_points
from visualization.viewport import Viewport


# -------------------------------------------------------------------------
#   Rendering helpers
# -------------------------------------------------------------------------

def make_viewport(points: List[Point], width: int, height: int) -> Viewport:
    params = get_active_params()
    return Viewport(width, height).fit_points(points, padding=params["PADDING"])


def render_graph(viewport: Viewport, points: List[Point], result: LocateResult) -> np.ndarray:
    vis = viewport.blank(COLOR_BACKGROUND)
    draw_edges(vis, result.edges, viewport)
    draw_points(vis, points, viewport)
    return vis


def render_chains(viewport: Viewport, points: List[Point], result: LocateResult) -> np.ndarray:
    vis = viewport.blank(COLOR_BACKGROUND)
    draw_chains(vis, result.chains, viewport)
    draw_points(vis, points, viewport)
    return vis


def render_located(viewport: Viewport, points: List[Point], query: Point, result: LocateResult) -> np.ndarray:
    vis = render_chains(viewport, points, result)
    draw_query(vis, query, viewport, result.enclosing_chains)
    return vis


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_graph(path: str, viewport: Viewport, points: List[Point], result: LocateResult):
    """
    Balanced graph with edge weights.
    """
    save_image(path, render_graph(viewport, points, result))


def save_chains(path: str, viewport: Viewport, points: List[Point], result: LocateResult):
    """
    Chain decomposition, one palette color per chain.
    """
    save_image(path, render_chains(viewport, points, result))


def save_located(path: str, viewport: Viewport, points: List[Point], query: Point, result: LocateResult):
    """
    Chain decomposition with the query point and its enclosing chains.
    """
    save_image(path, render_located(viewport, points, query, result))


def save_result_json(path: str, query: Point, result: LocateResult, flip_y: bool = False):
    """
    Writes the query result as JSON, mirrored back to screen space when the
    session was recorded there.
    """
    if flip_y:
        payload = LocateResult(
            enclosing_chains=tuple(flip_chains(list(result.enclosing_chains))),
            chains=flip_chains(result.chains),
            edges=flip_edges(result.edges),
            location=result.location,
        ).to_dict()
        payload["query"] = {"x": query.x, "y": -query.y}
    else:
        payload = result.to_dict()
        payload["query"] = query.to_dict()

    save_result(path, payload)


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    output_id: str,
    points: List[Point],
    query: Point,
    result: LocateResult,
    width: int,
    height: int,
    flip_y: bool = False
):
    """
    Saves every output artifact for one query.

    Example output:
        <id>_graph.png
        <id>_chains.png
        <id>_located.png
        <id>_result.json
    """

    ensure_output_dir(output_dir)
    viewport = make_viewport(list(points) + [query], width, height)

    # 1) Balanced graph
    save_graph(f"{output_dir}/{output_id}_graph.png", viewport, points, result)

    # 2) Chains
    save_chains(f"{output_dir}/{output_id}_chains.png", viewport, points, result)

    # 3) Query location
    save_located(f"{output_dir}/{output_id}_located.png", viewport, points, query, result)

    # 4) Raw result
    save_result_json(f"{output_dir}/{output_id}_result.json", query, result, flip_y)
