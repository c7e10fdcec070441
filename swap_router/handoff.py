"""Swap plan handed to the external transaction builder.

The engine stops at a Quote. Whoever builds the transaction needs the pool
ids in trade order, the amount in, and a slippage-bounded limit. SwapPlan is
an immutable snapshot of exactly that, so the builder takes no dependency on
engine internals or on any shared wallet state.
"""

from __future__ import annotations

from dataclasses import dataclass

from swap_router.constants import BPS_DENOMINATOR
from swap_router.errors import InvalidAmount
from swap_router.models.types import Path, SwapMode
from swap_router.routing.types import Quote
from swap_router.safe_int import S


@dataclass(frozen=True)
class SwapPlan:
    """Everything a transaction builder needs from a winning route.

    Attributes:
        path: Tokens from source to destination
        pool_ids: Pools in trade order
        mode: SPEND (exact input) or RECEIVE (exact output)
        amount_in: Quoted input amount
        amount_out: Quoted output amount
        amount_out_minimum: Lowest acceptable output (exact input trades)
        amount_in_maximum: Highest acceptable input (exact output trades)
        slippage_bps: Tolerance applied to derive the bound
    """

    path: Path
    pool_ids: tuple[str, ...]
    mode: SwapMode
    amount_in: int
    amount_out: int
    amount_out_minimum: int
    amount_in_maximum: int
    slippage_bps: int

    @classmethod
    def from_quote(cls, quote: Quote, slippage_bps: int) -> SwapPlan:
        """Derive a plan from a quote and a slippage tolerance.

        For SPEND quotes the output bound is rounded down and the input is
        fixed; for RECEIVE quotes the input bound is rounded up and the output
        is fixed.

        Raises:
            InvalidAmount: If slippage_bps is not an integer in [0, 10000]
        """
        if isinstance(slippage_bps, bool) or not isinstance(slippage_bps, int):
            raise InvalidAmount(f"slippage_bps must be an integer, got {slippage_bps!r}")
        if not 0 <= slippage_bps <= BPS_DENOMINATOR:
            raise InvalidAmount(f"slippage_bps must be within [0, {BPS_DENOMINATOR}]")

        if quote.mode is SwapMode.SPEND:
            amount_out_minimum = (
                S(quote.amount_out) * S(BPS_DENOMINATOR - slippage_bps) // S(BPS_DENOMINATOR)
            ).value
            amount_in_maximum = quote.amount_in
        else:
            amount_out_minimum = quote.amount_out
            amount_in_maximum = (
                (S(quote.amount_in) * S(BPS_DENOMINATOR + slippage_bps))
                .ceiling_div(S(BPS_DENOMINATOR))
                .value
            )

        return cls(
            path=quote.path,
            pool_ids=quote.pool_ids,
            mode=quote.mode,
            amount_in=quote.amount_in,
            amount_out=quote.amount_out,
            amount_out_minimum=amount_out_minimum,
            amount_in_maximum=amount_in_maximum,
            slippage_bps=slippage_bps,
        )


__all__ = ["SwapPlan"]
