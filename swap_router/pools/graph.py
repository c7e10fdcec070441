"""Liquidity graph built from a pool snapshot.

The graph is immutable once constructed. A topology change means building a
new graph and swapping the reference the caller holds, so readers never see a
partially built graph and need no locking.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping
from types import MappingProxyType

import structlog

from swap_router.errors import PoolDataInconsistent
from swap_router.models.types import Token
from swap_router.pools.types import Direction, Edge, Pool

logger = structlog.get_logger()


class LiquidityGraph:
    """Graph of tokens connected by constant-product pools.

    Adjacency is stored as token -> tuple of directed edges. Each pool
    contributes exactly two edges (A->B and B->A) and edges keep pool
    insertion order, so neighbor iteration is reproducible.

    Build instances with from_pools() (or swap_router.build_graph).
    """

    __slots__ = ("_adjacency", "_pools", "_pools_by_id", "_pools_by_pair")

    def __init__(
        self,
        adjacency: Mapping[Token, tuple[Edge, ...]],
        pools: tuple[Pool, ...],
    ) -> None:
        self._adjacency: Mapping[Token, tuple[Edge, ...]] = MappingProxyType(dict(adjacency))
        self._pools = pools
        self._pools_by_id: Mapping[str, Pool] = MappingProxyType({p.pool_id: p for p in pools})
        self._pools_by_pair: Mapping[frozenset[Token], Pool] = MappingProxyType(
            {frozenset(p.tokens): p for p in pools}
        )

    @classmethod
    def from_pools(cls, pools: Iterable[Pool]) -> LiquidityGraph:
        """Validate pools and build the graph.

        Args:
            pools: Pool snapshot, in the order edges should be visited

        Returns:
            LiquidityGraph with two directed edges per pool

        Raises:
            PoolDataInconsistent: If a pool is not a Pool, has a non-positive
                reserve, trades a token against itself, or repeats the id or
                token pair of an earlier pool
        """
        adjacency: dict[Token, list[Edge]] = {}
        accepted: list[Pool] = []
        seen_ids: set[str] = set()
        seen_pairs: dict[frozenset[Token], str] = {}

        for pool in pools:
            if not isinstance(pool, Pool):
                raise PoolDataInconsistent(f"Expected Pool, got {type(pool).__name__}")
            if pool.reserve_a <= 0 or pool.reserve_b <= 0:
                raise PoolDataInconsistent(
                    f"Pool {pool.pool_id!r} has a non-positive reserve "
                    f"({pool.reserve_a}, {pool.reserve_b})"
                )
            if pool.token_a == pool.token_b:
                raise PoolDataInconsistent(
                    f"Pool {pool.pool_id!r} references {pool.token_a!r} on both sides"
                )
            if pool.pool_id in seen_ids:
                raise PoolDataInconsistent(f"Duplicate pool id {pool.pool_id!r}")
            pair = frozenset(pool.tokens)
            if pair in seen_pairs:
                raise PoolDataInconsistent(
                    f"Pool {pool.pool_id!r} duplicates pair {pool.token_a}/{pool.token_b} "
                    f"already served by {seen_pairs[pair]!r}"
                )

            seen_ids.add(pool.pool_id)
            seen_pairs[pair] = pool.pool_id
            accepted.append(pool)
            adjacency.setdefault(pool.token_a, []).append(
                Edge(counterparty=pool.token_b, pool=pool, direction=Direction.A_TO_B)
            )
            adjacency.setdefault(pool.token_b, []).append(
                Edge(counterparty=pool.token_a, pool=pool, direction=Direction.B_TO_A)
            )

        graph = cls(
            {token: tuple(edges) for token, edges in adjacency.items()},
            tuple(accepted),
        )
        logger.debug("graph_built", pool_count=graph.pool_count, token_count=graph.token_count)
        return graph

    def neighbors(self, token: Token) -> tuple[Edge, ...]:
        """Get the directed edges leaving a token, in pool insertion order.

        An unknown token has no liquidity and yields an empty tuple.
        """
        return self._adjacency.get(token, ())

    def pool(self, pool_id: str) -> Pool | None:
        """Look up a pool by id."""
        return self._pools_by_id.get(pool_id)

    def pool_between(self, token_a: Token, token_b: Token) -> Pool | None:
        """Get the pool joining two tokens (order independent)."""
        return self._pools_by_pair.get(frozenset((token_a, token_b)))

    def has_token(self, token: Token) -> bool:
        """Check if a token exists in the graph."""
        return token in self._adjacency

    def hop_distances(self, token: Token) -> dict[Token, int]:
        """Fewest pools between each reachable token and the given one.

        Tokens in another component are absent from the result. An unknown
        token yields an empty dict.
        """
        if token not in self._adjacency:
            return {}

        distances = {token: 0}
        queue: deque[Token] = deque([token])
        while queue:
            current = queue.popleft()
            for edge in self._adjacency[current]:
                if edge.counterparty not in distances:
                    distances[edge.counterparty] = distances[current] + 1
                    queue.append(edge.counterparty)
        return distances

    @property
    def pools(self) -> tuple[Pool, ...]:
        """Pools in insertion order."""
        return self._pools

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Tokens in first-seen order."""
        return tuple(self._adjacency)

    @property
    def token_count(self) -> int:
        """Number of unique tokens in the graph."""
        return len(self._adjacency)

    @property
    def pool_count(self) -> int:
        return len(self._pools)

    def __repr__(self) -> str:
        return f"LiquidityGraph(pools={self.pool_count}, tokens={self.token_count})"


def build_graph(pools: Iterable[Pool]) -> LiquidityGraph:
    """Build an immutable LiquidityGraph from a pool snapshot.

    Raises:
        PoolDataInconsistent: If any pool cannot be placed in the graph
    """
    return LiquidityGraph.from_pools(pools)


__all__ = ["LiquidityGraph", "build_graph"]
