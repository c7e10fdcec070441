"""Base types for AMM implementations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SwapResult:
    """Result of simulating one swap through one pool."""

    amount_in: int
    amount_out: int
    pool_id: str
    token_in: str
    token_out: str
