"""Pool records and the liquidity graph built from them."""

from .graph import LiquidityGraph, build_graph
from .types import Direction, Edge, Pool

__all__ = [
    "LiquidityGraph",
    "build_graph",
    "Pool",
    "Edge",
    "Direction",
]
