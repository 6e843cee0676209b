"""
Subdivision Package

Contains the stages of the monotone-chain point-location pipeline:
- Regularization
- Weight balancing
- Chain extraction
- Point location among chains
"""

from .regularizer import is_regular, nearest_edges, nearest_half_plane_vertex, regularize
from .balancer import balance, balance_down_up, balance_up_down
from .chain_extractor import extract_chains, walk_chain
from .locator import Enclosure, locate_enclosing_chains, side_of_chain
from .locate import LocateResult, build_chains, build_graph, locate

__all__ = [
    "is_regular",
    "nearest_edges",
    "nearest_half_plane_vertex",
    "regularize",
    "balance",
    "balance_down_up",
    "balance_up_down",
    "extract_chains",
    "walk_chain",
    "Enclosure",
    "locate_enclosing_chains",
    "side_of_chain",
    "LocateResult",
    "build_chains",
    "build_graph",
    "locate",
]
