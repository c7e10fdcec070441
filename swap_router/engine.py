"""Public entry points of the routing engine.

These are the functions surrounding collaborators call. Each one is a
bounded synchronous computation over an immutable graph, safe to call
concurrently against the same graph.
"""

from __future__ import annotations

from collections.abc import Iterable

from swap_router.constants import DEFAULT_MAX_HOPS
from swap_router.models.types import Path, SwapMode, Token
from swap_router.pools.graph import LiquidityGraph, build_graph
from swap_router.routing.pathfinding import find_paths
from swap_router.routing.quoter import compute_quote
from swap_router.routing.selector import best_route
from swap_router.routing.types import PathSummary


def path_summaries(paths: Iterable[Path]) -> list[PathSummary]:
    """Summaries of every enumerated path, selected or not."""
    return [PathSummary.from_path(path) for path in paths]


def browse_paths(
    graph: LiquidityGraph,
    token_in: Token,
    token_out: Token,
    max_hops: int = DEFAULT_MAX_HOPS,
    max_paths: int | None = None,
) -> list[PathSummary]:
    """Enumerate paths and summarise them for a presentation layer."""
    return path_summaries(find_paths(graph, token_in, token_out, max_hops, max_paths))


__all__ = [
    "SwapMode",
    "best_route",
    "browse_paths",
    "build_graph",
    "compute_quote",
    "find_paths",
    "path_summaries",
]
