"""Constant-product AMM math.

Pricing holds reserve_in * reserve_out invariant up to the fee skim:

    after_fee  = amount_in * (10000 - fee_bps) // 10000
    amount_out = reserve_out * after_fee // (reserve_in + after_fee)

The reverse direction rounds up at both steps so the required input never
undershoots what the forward formula needs:

    after_fee = ceil(reserve_in * amount_out / (reserve_out - amount_out))
    amount_in = ceil(after_fee * 10000 / (10000 - fee_bps))

All functions are pure and read reserves from an unmodified snapshot.
"""

from __future__ import annotations

from swap_router.amm.base import SwapResult
from swap_router.constants import BPS_DENOMINATOR
from swap_router.errors import InsufficientLiquidity
from swap_router.pools.types import Pool
from swap_router.safe_int import S


class ConstantProduct:
    """Constant-product swap math with a per-pool fee in basis points."""

    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        fee_bps: int,
        pool_id: str | None = None,
    ) -> int:
        """Calculate output amount for an exact input.

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool
            fee_bps: Pool fee in basis points
            pool_id: Pool identifier, carried on errors

        Returns:
            Output token amount, rounded down

        Raises:
            InsufficientLiquidity: If the fee-adjusted input reaches reserve_in,
                or the output would reach reserve_out
        """
        after_fee = S(amount_in) * S(BPS_DENOMINATOR - fee_bps) // S(BPS_DENOMINATOR)
        if after_fee >= reserve_in:
            raise InsufficientLiquidity(
                f"Input {after_fee.value} after fee exhausts reserve {reserve_in}",
                pool_id=pool_id,
            )

        amount_out = S(reserve_out) * after_fee // (S(reserve_in) + after_fee)
        if amount_out >= reserve_out:
            raise InsufficientLiquidity(
                f"Output {amount_out.value} exhausts reserve {reserve_out}",
                pool_id=pool_id,
            )
        return amount_out.value

    def get_amount_in(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
        fee_bps: int,
        pool_id: str | None = None,
    ) -> int:
        """Calculate required input for an exact output.

        Args:
            amount_out: Desired output token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool
            fee_bps: Pool fee in basis points
            pool_id: Pool identifier, carried on errors

        Returns:
            Required input token amount, rounded up

        Raises:
            InsufficientLiquidity: If amount_out reaches reserve_out, the fee
                keeps the whole input, or the required input after fee would
                reach reserve_in
        """
        if amount_out >= reserve_out:
            raise InsufficientLiquidity(
                f"Requested {amount_out} exhausts reserve {reserve_out}",
                pool_id=pool_id,
            )
        fee_multiplier = BPS_DENOMINATOR - fee_bps
        if fee_multiplier <= 0:
            raise InsufficientLiquidity(
                f"Fee of {fee_bps} bps leaves nothing to trade", pool_id=pool_id
            )

        after_fee = (S(reserve_in) * S(amount_out)).ceiling_div(S(reserve_out) - S(amount_out))
        # Same capacity rule as the forward pass
        if after_fee >= reserve_in:
            raise InsufficientLiquidity(
                f"Required input {after_fee.value} after fee exhausts reserve {reserve_in}",
                pool_id=pool_id,
            )

        return (after_fee * S(BPS_DENOMINATOR)).ceiling_div(S(fee_multiplier)).value

    def simulate_swap(self, pool: Pool, token_in: str, amount_in: int) -> SwapResult:
        """Simulate a swap through a pool (exact input)."""
        reserve_in, reserve_out = pool.get_reserves(token_in)
        amount_out = self.get_amount_out(
            amount_in, reserve_in, reserve_out, pool.fee_bps, pool_id=pool.pool_id
        )
        return SwapResult(
            amount_in=amount_in,
            amount_out=amount_out,
            pool_id=pool.pool_id,
            token_in=token_in,
            token_out=pool.get_token_out(token_in),
        )

    def simulate_swap_exact_output(
        self, pool: Pool, token_in: str, amount_out: int
    ) -> SwapResult:
        """Simulate a swap that must deliver exactly amount_out."""
        reserve_in, reserve_out = pool.get_reserves(token_in)
        amount_in = self.get_amount_in(
            amount_out, reserve_in, reserve_out, pool.fee_bps, pool_id=pool.pool_id
        )
        return SwapResult(
            amount_in=amount_in,
            amount_out=amount_out,
            pool_id=pool.pool_id,
            token_in=token_in,
            token_out=pool.get_token_out(token_in),
        )


# Singleton instance
constant_product = ConstantProduct()


__all__ = ["ConstantProduct", "constant_product"]
