"""Route discovery and quoting.

Module structure:
- types.py: HopQuote, Quote, PathSummary, PathFailure and NoRoute
- pathfinding.py: PathEnumerator, depth-bounded simple-path search
- quoter.py: Quoter, chained constant-product quotes in both modes
- selector.py: RouteSelector, best-route ranking
"""

from swap_router.routing.pathfinding import PathEnumerator, find_paths
from swap_router.routing.quoter import Quoter, compute_quote, price_impact_bps
from swap_router.routing.selector import RouteSelector, best_route
from swap_router.routing.types import HopQuote, NoRoute, PathFailure, PathSummary, Quote

__all__ = [
    "HopQuote",
    "NoRoute",
    "PathEnumerator",
    "PathFailure",
    "PathSummary",
    "Quote",
    "Quoter",
    "RouteSelector",
    "best_route",
    "compute_quote",
    "find_paths",
    "price_impact_bps",
]
