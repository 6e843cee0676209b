"""
Visualization Tools

Provides drawing utilities for:
- Points and weighted edges
- Monotone chains
- Query points and their enclosing chains
"""

from .viewport import Viewport
from .draw_edges import draw_points, draw_edges
from .draw_chains import chain_color, draw_chains, draw_query
from .save_outputs import (
    save_all_outputs,
    save_graph,
    save_chains,
    save_located,
    save_result_json,
)

__all__ = [
    "Viewport",
    "draw_points",
    "draw_edges",
    "chain_color",
    "draw_chains",
    "draw_query",
    "save_all_outputs",
    "save_graph",
    "save_chains",
    "save_located",
    "save_result_json",
]
