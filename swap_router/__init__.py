"""Multi-hop swap route discovery and quote simulation."""

from swap_router.engine import (
    best_route,
    browse_paths,
    build_graph,
    compute_quote,
    find_paths,
    path_summaries,
)
from swap_router.errors import (
    ErrorKind,
    InsufficientLiquidity,
    InvalidAmount,
    PoolDataInconsistent,
    RoutingError,
)
from swap_router.handoff import SwapPlan
from swap_router.models.types import SwapMode
from swap_router.pools import Direction, Edge, LiquidityGraph, Pool
from swap_router.routing.types import HopQuote, NoRoute, PathFailure, PathSummary, Quote

__version__ = "0.1.0"
__all__ = [
    "Direction",
    "Edge",
    "ErrorKind",
    "HopQuote",
    "InsufficientLiquidity",
    "InvalidAmount",
    "LiquidityGraph",
    "NoRoute",
    "PathFailure",
    "PathSummary",
    "Pool",
    "PoolDataInconsistent",
    "Quote",
    "RoutingError",
    "SwapMode",
    "SwapPlan",
    "__version__",
    "best_route",
    "browse_paths",
    "build_graph",
    "compute_quote",
    "find_paths",
    "path_summaries",
]
