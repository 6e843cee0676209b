"""
Point location among ordered monotone chains.

This module provides:
    • side_of_chain(chain, p)
    • locate_enclosing_chains(p, chains)
"""

from dataclasses import dataclass
from typing import List

from models.chain import Chain
from models.point import Point, Segment
from utils.geometry import in_y_span, orientation


# Which rule produced an Enclosure
SINGLE = "single"        # only one chain exists
OUTSIDE = "outside"      # p is above or below every chain
BETWEEN = "between"      # p is strictly between two adjacent chains
FALLBACK = "fallback"    # p could not be classified, extreme chains returned


@dataclass(frozen=True)
class Enclosure:
    left: Chain
    right: Chain
    location: str

    def as_pair(self):
        return (self.left, self.right)


# ========================================================================
# 1. POINT vs. CHAIN
# ========================================================================

def side_of_chain(chain: Chain, p: Point) -> int:
    """
    Classifies p against the first chain edge whose y-span contains p.y:

         1  chain is left of p
        -1  chain is right of p
         0  p lies on that edge's line, or no edge spans p.y
    """
    edge = chain.edge_at_height(p)
    if edge is None:
        return 0

    side = orientation(edge, p)
    if side > 0:
        return 1
    if side < 0:
        return -1
    return 0


def _relative_position(p: Point, left: Chain, right: Chain):
    """
        left - p - right   =>  0
        left - right - p   => -1  (search further right)
        p - left - right   =>  1  (search further left)
        anything else      =>  None
    """
    l_side = side_of_chain(left, p)
    r_side = side_of_chain(right, p)

    if l_side > 0 and r_side < 0:
        return 0
    if l_side > 0 and r_side > 0:
        return -1
    if l_side < 0 and r_side < 0:
        return 1
    return None


# ========================================================================
# 2. BINARY SEARCH
# ========================================================================

def locate_enclosing_chains(p: Point, chains: List[Chain]) -> Enclosure:
    """
    Finds the two adjacent chains enclosing p.

      1. a single chain is returned as both boundaries
      2. p outside the y-span of the chains => (first, last)
      3. binary search over adjacent pairs (mid, mid + 1); when the interval
         cannot shrink any further, or p sits on a chain, => (first, last)

    Chains must be ordered left to right and share their end vertices.
    """
    if not chains:
        raise ValueError("cannot locate a point among zero chains")

    first, last = chains[0], chains[-1]

    if len(chains) == 1:
        return Enclosure(first, first, SINGLE)

    if not in_y_span(Segment(first.start, first.end), p):
        return Enclosure(first, last, OUTSIDE)

    lo, hi = 0, len(chains) - 1

    while True:
        mid = (lo + hi) // 2
        position = _relative_position(p, chains[mid], chains[mid + 1])

        if position == 0:
            return Enclosure(chains[mid], chains[mid + 1], BETWEEN)
        if position is None:
            return Enclosure(first, last, FALLBACK)

        if position < 0:
            if mid + 1 == hi:
                return Enclosure(first, last, FALLBACK)
            lo = mid + 1
        else:
            if mid == lo:
                return Enclosure(first, last, FALLBACK)
            hi = mid

