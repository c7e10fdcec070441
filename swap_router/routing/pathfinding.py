"""Path enumeration over the liquidity graph.

Enumeration is a depth-first search bounded by hop count. Each stack frame
owns an immutable partial path and visited set, so no buffer is shared across
branches and concurrent enumerations over one graph never interfere.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from swap_router.constants import DEFAULT_MAX_HOPS
from swap_router.errors import InvalidAmount
from swap_router.models.types import Path, Token
from swap_router.pools.graph import LiquidityGraph

logger = structlog.get_logger()


@dataclass(frozen=True)
class _Frame:
    token: Token
    path: Path
    visited: frozenset[Token]


class PathEnumerator:
    """Enumerates simple paths between two tokens.

    Usage:
        enumerator = PathEnumerator(graph)
        paths = enumerator.enumerate("HTS-ABC", "HBAR", max_hops=3)
    """

    def __init__(self, graph: LiquidityGraph) -> None:
        self._graph = graph

    @property
    def graph(self) -> LiquidityGraph:
        return self._graph

    def enumerate(
        self,
        token_in: Token,
        token_out: Token,
        max_hops: int = DEFAULT_MAX_HOPS,
        max_paths: int | None = None,
    ) -> list[Path]:
        """Find loop-free paths from token_in to token_out.

        Paths come out in depth-first pre-order: neighbors are visited in the
        graph's stored edge order and a path is emitted the moment token_out
        is reached (token_out is never expanded further). Two calls with the
        same arguments return the same list in the same order.

        Args:
            token_in: Starting token
            token_out: Target token
            max_hops: Maximum number of pools per path (>= 1)
            max_paths: Stop after this many paths (None for no cap)

        Returns:
            Paths as token tuples, each of length 2..max_hops+1.
            Empty list if the tokens are not connected within max_hops.

        Raises:
            InvalidAmount: If token_in == token_out, or a bound is < 1
        """
        if token_in == token_out:
            raise InvalidAmount(f"Source and destination are the same token: {token_in!r}")
        if isinstance(max_hops, bool) or not isinstance(max_hops, int) or max_hops < 1:
            raise InvalidAmount(f"max_hops must be a positive integer, got {max_hops!r}")
        if max_paths is not None and (
            isinstance(max_paths, bool) or not isinstance(max_paths, int) or max_paths < 1
        ):
            raise InvalidAmount(f"max_paths must be a positive integer, got {max_paths!r}")

        paths: list[Path] = []
        # Branches that cannot reach token_out within the remaining hops are
        # never expanded
        distances = self._graph.hop_distances(token_out)
        if distances.get(token_in, max_hops + 1) > max_hops:
            self._log_result(token_in, token_out, max_hops, paths, max_paths)
            return paths

        stack = [_Frame(token_in, (token_in,), frozenset((token_in,)))]

        while stack:
            frame = stack.pop()
            if frame.token == token_out:
                paths.append(frame.path)
                if max_paths is not None and len(paths) >= max_paths:
                    break
                continue

            # Hops left once a child is appended
            remaining = max_hops - len(frame.path)
            children = [
                _Frame(
                    edge.counterparty,
                    frame.path + (edge.counterparty,),
                    frame.visited | {edge.counterparty},
                )
                for edge in self._graph.neighbors(frame.token)
                if edge.counterparty not in frame.visited
                and distances.get(edge.counterparty, remaining + 1) <= remaining
            ]
            # Reversed so the first stored edge is popped first
            stack.extend(reversed(children))

        self._log_result(token_in, token_out, max_hops, paths, max_paths)
        return paths

    @staticmethod
    def _log_result(
        token_in: Token,
        token_out: Token,
        max_hops: int,
        paths: list[Path],
        max_paths: int | None,
    ) -> None:
        logger.debug(
            "paths_enumerated",
            token_in=token_in,
            token_out=token_out,
            max_hops=max_hops,
            path_count=len(paths),
            capped=max_paths is not None and len(paths) >= max_paths,
        )


def find_paths(
    graph: LiquidityGraph,
    token_in: Token,
    token_out: Token,
    max_hops: int = DEFAULT_MAX_HOPS,
    max_paths: int | None = None,
) -> list[Path]:
    """Enumerate simple paths; see PathEnumerator.enumerate."""
    return PathEnumerator(graph).enumerate(token_in, token_out, max_hops, max_paths)


__all__ = ["PathEnumerator", "find_paths"]
