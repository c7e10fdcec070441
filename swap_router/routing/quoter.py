"""Quote computation along a path.

A quote is a read-only projection over the graph snapshot: every hop prices
against its own pool's snapshot reserves and nothing in the graph changes.
Paths are loop-free, so no pool is visited twice within one quote.
"""

from __future__ import annotations

from collections.abc import Sequence

from swap_router.amm.constant_product import ConstantProduct, constant_product
from swap_router.constants import BPS_DENOMINATOR
from swap_router.errors import InvalidAmount
from swap_router.models.types import Path, SwapMode, Token, require_positive_amount
from swap_router.pools.graph import LiquidityGraph
from swap_router.pools.types import Pool
from swap_router.routing.types import HopQuote, Quote


class Quoter:
    """Chains constant-product hops into a path quote.

    Supports both exact-input (SPEND) and exact-output (RECEIVE) quotes.
    """

    def __init__(self, graph: LiquidityGraph, amm: ConstantProduct | None = None) -> None:
        self._graph = graph
        self.amm = amm if amm is not None else constant_product

    def quote(self, path: Sequence[Token], amount: int, mode: SwapMode = SwapMode.SPEND) -> Quote:
        """Quote a path.

        Args:
            path: Tokens from source to destination
            amount: Input amount for SPEND, desired output for RECEIVE
            mode: SPEND (exact input) or RECEIVE (exact output)

        Returns:
            Quote with per-hop amounts and price impact

        Raises:
            InvalidAmount: If amount is not a positive integer, or the path is
                not a loop-free sequence of pooled pairs in this graph
            InsufficientLiquidity: If any hop cannot carry the size
        """
        amount = require_positive_amount(amount)
        try:
            mode = SwapMode(mode)
        except ValueError as err:
            raise InvalidAmount(f"Unknown swap mode: {mode!r}") from err
        token_path = tuple(path)
        pools = self.resolve_pools(token_path)

        if mode is SwapMode.SPEND:
            hops = self._quote_exact_input(token_path, pools, amount)
        else:
            hops = self._quote_exact_output(token_path, pools, amount)

        amount_in = hops[0].amount_in
        amount_out = hops[-1].amount_out
        return Quote(
            path=token_path,
            mode=mode,
            amount_in=amount_in,
            amount_out=amount_out,
            hops=hops,
            price_impact_bps=price_impact_bps(token_path, pools, amount_in, amount_out),
        )

    def resolve_pools(self, path: Path) -> list[Pool]:
        """Resolve the pool joining each consecutive pair of the path.

        Raises:
            InvalidAmount: If the path is too short, repeats a token, or has a
                hop with no pool in the graph
        """
        if len(path) < 2:
            raise InvalidAmount(f"Path needs at least two tokens, got {list(path)}")
        if len(set(path)) != len(path):
            raise InvalidAmount(f"Path repeats a token: {list(path)}")

        pools: list[Pool] = []
        for token_in, token_out in zip(path, path[1:]):
            pool = self._graph.pool_between(token_in, token_out)
            if pool is None:
                raise InvalidAmount(f"No pool joins {token_in!r} and {token_out!r}")
            pools.append(pool)
        return pools

    def _quote_exact_input(
        self, path: Path, pools: list[Pool], amount_in: int
    ) -> tuple[HopQuote, ...]:
        hops: list[HopQuote] = []
        current_amount = amount_in

        for i, pool in enumerate(pools):
            result = self.amm.simulate_swap(pool, path[i], current_amount)
            hops.append(
                HopQuote(
                    pool_id=pool.pool_id,
                    token_in=path[i],
                    token_out=path[i + 1],
                    amount_in=current_amount,
                    amount_out=result.amount_out,
                )
            )
            current_amount = result.amount_out

        return tuple(hops)

    def _quote_exact_output(
        self, path: Path, pools: list[Pool], amount_out: int
    ) -> tuple[HopQuote, ...]:
        # Work backwards: amounts[i] is the amount entering hop i
        amounts: list[int] = [0] * (len(pools) + 1)
        amounts[-1] = amount_out

        for i in range(len(pools) - 1, -1, -1):
            result = self.amm.simulate_swap_exact_output(pools[i], path[i], amounts[i + 1])
            amounts[i] = result.amount_in

        return tuple(
            HopQuote(
                pool_id=pool.pool_id,
                token_in=path[i],
                token_out=path[i + 1],
                amount_in=amounts[i],
                amount_out=amounts[i + 1],
            )
            for i, pool in enumerate(pools)
        )


def price_impact_bps(
    path: Path,
    pools: Sequence[Pool],
    amount_in: int,
    amount_out: int,
) -> int:
    """Shortfall of the realized price against the zero-size spot price.

    spot     = prod(reserve_out_i) / prod(reserve_in_i)
    realized = amount_out / amount_in
    impact   = floor(10000 * (spot - realized) / spot), at least 0

    Computed in exact integer arithmetic; the fee skim counts toward impact.
    """
    spot_num = 1
    spot_den = 1
    for token_in, pool in zip(path, pools):
        reserve_in, reserve_out = pool.get_reserves(token_in)
        spot_num *= reserve_out
        spot_den *= reserve_in

    ideal = amount_in * spot_num
    realized = amount_out * spot_den
    if realized >= ideal:
        return 0
    return (BPS_DENOMINATOR * (ideal - realized)) // ideal


def compute_quote(
    graph: LiquidityGraph,
    path: Sequence[Token],
    amount: int,
    mode: SwapMode = SwapMode.SPEND,
) -> Quote:
    """Quote a path against a graph; see Quoter.quote."""
    return Quoter(graph).quote(path, amount, mode)


__all__ = ["Quoter", "compute_quote", "price_impact_bps"]
