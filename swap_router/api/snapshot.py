"""Current graph snapshot held by the HTTP service."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from swap_router.config import DEFAULT_ROUTING_CONFIG, RoutingConfig
from swap_router.errors import PoolDataInconsistent
from swap_router.pools.graph import LiquidityGraph, build_graph
from swap_router.pools.types import Pool

logger = structlog.get_logger()


class GraphSnapshot:
    """Holds the graph requests are served from.

    Replacing the pool set builds a complete new graph first and then swaps
    the reference in one assignment. A request reads `graph` once and keeps
    that snapshot for its whole computation, so it never observes a partial
    update and no lock is needed.
    """

    def __init__(
        self,
        graph: LiquidityGraph | None = None,
        config: RoutingConfig = DEFAULT_ROUTING_CONFIG,
    ) -> None:
        self._graph = graph if graph is not None else build_graph(())
        self.config = config

    @property
    def graph(self) -> LiquidityGraph:
        return self._graph

    def replace(self, pools: Sequence[Pool]) -> LiquidityGraph:
        """Rebuild from a new pool set and swap it in.

        On failure the previous graph stays in place.

        Raises:
            PoolDataInconsistent: If the pool set is too large or invalid
        """
        if len(pools) > self.config.max_pools:
            raise PoolDataInconsistent(
                f"Snapshot of {len(pools)} pools exceeds limit of {self.config.max_pools}"
            )
        graph = build_graph(pools)
        self._graph = graph
        logger.info("graph_replaced", pool_count=graph.pool_count, token_count=graph.token_count)
        return graph


_default_snapshot: GraphSnapshot | None = None


def get_default_snapshot() -> GraphSnapshot:
    """Process-wide snapshot, configured from the environment on first use."""
    global _default_snapshot
    if _default_snapshot is None:
        _default_snapshot = GraphSnapshot(config=RoutingConfig.from_env())
    return _default_snapshot


__all__ = ["GraphSnapshot", "get_default_snapshot"]
