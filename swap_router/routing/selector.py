"""Best-route selection across enumerated paths."""

from __future__ import annotations

import structlog

from swap_router.constants import DEFAULT_MAX_HOPS
from swap_router.errors import InsufficientLiquidity, InvalidAmount
from swap_router.models.types import Path, SwapMode, Token, require_positive_amount
from swap_router.pools.graph import LiquidityGraph
from swap_router.routing.pathfinding import PathEnumerator
from swap_router.routing.quoter import Quoter
from swap_router.routing.types import NoRoute, PathFailure, Quote

logger = structlog.get_logger()


def _rank(quote: Quote, order: int) -> tuple[int, int, int, int]:
    """Sort key: lower is better.

    Primary criterion depends on mode (more output for SPEND, less input for
    RECEIVE), then fewer hops, lower price impact, earlier enumeration.
    """
    primary = -quote.amount_out if quote.mode is SwapMode.SPEND else quote.amount_in
    return primary, quote.hop_count, quote.price_impact_bps, order


class RouteSelector:
    """Picks the best quoted route between two tokens.

    Paths that cannot carry the size are dropped; if none survive the result
    is a NoRoute value rather than an exception.
    """

    def __init__(self, graph: LiquidityGraph, quoter: Quoter | None = None) -> None:
        self._graph = graph
        self._enumerator = PathEnumerator(graph)
        self._quoter = quoter if quoter is not None else Quoter(graph)

    def best_route(
        self,
        token_in: Token,
        token_out: Token,
        amount: int,
        max_hops: int = DEFAULT_MAX_HOPS,
        mode: SwapMode = SwapMode.SPEND,
        max_paths: int | None = None,
    ) -> Quote | NoRoute:
        """Find the best route for a trade.

        Args:
            token_in: Token to spend
            token_out: Token to receive
            amount: Input amount for SPEND, desired output for RECEIVE
            max_hops: Maximum pools per route
            mode: SPEND (maximise output) or RECEIVE (minimise input)
            max_paths: Optional cap on enumerated candidates

        Returns:
            Winning Quote, or NoRoute if no path can carry the amount

        Raises:
            InvalidAmount: If the amount, mode or query is invalid
        """
        mode = self.validate_query(amount, mode)
        paths = self._enumerator.enumerate(token_in, token_out, max_hops, max_paths)
        return self.select(paths, amount, mode)

    @staticmethod
    def validate_query(amount: int, mode: SwapMode | str) -> SwapMode:
        """Reject a bad amount or mode before any enumeration work.

        Raises:
            InvalidAmount: If amount is not a positive integer or mode is unknown
        """
        require_positive_amount(amount)
        try:
            return SwapMode(mode)
        except ValueError as err:
            raise InvalidAmount(f"Unknown swap mode: {mode!r}") from err

    def select(self, paths: list[Path], amount: int, mode: SwapMode) -> Quote | NoRoute:
        """Quote each candidate path and return the best one."""
        if not paths:
            logger.info("no_route", reason="no_paths", paths_considered=0)
            return NoRoute(reason="No path connects the tokens within the hop limit")

        best: Quote | None = None
        best_rank: tuple[int, int, int, int] | None = None
        failures: list[PathFailure] = []

        for order, path in enumerate(paths):
            try:
                quote = self._quoter.quote(path, amount, mode)
            except InsufficientLiquidity as err:
                logger.debug(
                    "path_skipped",
                    path=list(path),
                    pool_id=err.pool_id,
                    reason=str(err),
                )
                failures.append(
                    PathFailure(path=path, kind=err.kind, message=str(err), pool_id=err.pool_id)
                )
                continue

            rank = _rank(quote, order)
            if best_rank is None or rank < best_rank:
                best, best_rank = quote, rank

        if best is None:
            logger.info(
                "no_route",
                reason="insufficient_liquidity",
                paths_considered=len(paths),
            )
            return NoRoute(
                reason="No path can carry the requested amount",
                paths_considered=len(paths),
                failures=tuple(failures),
            )

        logger.info(
            "route_selected",
            path=list(best.path),
            mode=mode.value,
            amount_in=best.amount_in,
            amount_out=best.amount_out,
            price_impact_bps=best.price_impact_bps,
            paths_considered=len(paths),
            paths_skipped=len(failures),
        )
        return best


def best_route(
    graph: LiquidityGraph,
    token_in: Token,
    token_out: Token,
    amount: int,
    max_hops: int = DEFAULT_MAX_HOPS,
    mode: SwapMode = SwapMode.SPEND,
    max_paths: int | None = None,
) -> Quote | NoRoute:
    """Select the best route; see RouteSelector.best_route."""
    return RouteSelector(graph).best_route(token_in, token_out, amount, max_hops, mode, max_paths)


__all__ = ["RouteSelector", "best_route"]
