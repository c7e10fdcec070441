"""Pool and edge records.

A Pool is a fixed-shape record validated at construction, so malformed data
is rejected at the boundary instead of flowing into the swap math.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from swap_router.constants import DEFAULT_FEE_BPS, MAX_FEE_BPS, MIN_FEE_BPS
from swap_router.errors import PoolDataInconsistent
from swap_router.models.types import Token


def _require_int(pool_id: str, name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise PoolDataInconsistent(
            f"Pool {pool_id!r}: {name} must be an integer, got {type(value).__name__}"
        )


def _require_id(name: str, value: Any) -> None:
    if not isinstance(value, str) or not value:
        raise PoolDataInconsistent(f"{name} must be a non-empty string, got {value!r}")


@dataclass(frozen=True)
class Pool:
    """A constant-product liquidity pool over an unordered token pair.

    Reserves are in each token's smallest denomination unit. A zero reserve is
    representable here but such a pool is unusable and build_graph rejects it.
    """

    pool_id: str
    token_a: Token
    token_b: Token
    reserve_a: int
    reserve_b: int
    # Fee in basis points (30 = 0.3%)
    fee_bps: int = DEFAULT_FEE_BPS

    def __post_init__(self) -> None:
        _require_id("pool_id", self.pool_id)
        _require_id(f"Pool {self.pool_id!r}: token_a", self.token_a)
        _require_id(f"Pool {self.pool_id!r}: token_b", self.token_b)
        for name in ("reserve_a", "reserve_b", "fee_bps"):
            _require_int(self.pool_id, name, getattr(self, name))
        if self.reserve_a < 0 or self.reserve_b < 0:
            raise PoolDataInconsistent(
                f"Pool {self.pool_id!r}: reserves cannot be negative "
                f"({self.reserve_a}, {self.reserve_b})"
            )
        if not MIN_FEE_BPS <= self.fee_bps <= MAX_FEE_BPS:
            raise PoolDataInconsistent(
                f"Pool {self.pool_id!r}: fee_bps {self.fee_bps} outside "
                f"[{MIN_FEE_BPS}, {MAX_FEE_BPS}]"
            )

    @property
    def tokens(self) -> tuple[Token, Token]:
        return self.token_a, self.token_b

    def get_reserves(self, token_in: Token) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        if token_in == self.token_a:
            return self.reserve_a, self.reserve_b
        elif token_in == self.token_b:
            return self.reserve_b, self.reserve_a
        else:
            raise ValueError(f"Token {token_in} not in pool {self.pool_id}")

    def get_token_out(self, token_in: Token) -> Token:
        """Get the output token for a given input token."""
        if token_in == self.token_a:
            return self.token_b
        elif token_in == self.token_b:
            return self.token_a
        else:
            raise ValueError(f"Token {token_in} not in pool {self.pool_id}")


class Direction(str, Enum):
    """Which way an edge trades through its pool."""

    A_TO_B = "A_TO_B"
    B_TO_A = "B_TO_A"


@dataclass(frozen=True)
class Edge:
    """Directed edge of the liquidity graph."""

    counterparty: Token
    pool: Pool
    direction: Direction


__all__ = ["Pool", "Direction", "Edge"]
