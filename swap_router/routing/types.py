"""Type definitions for routing module."""

from __future__ import annotations

from dataclasses import dataclass, field

from swap_router.errors import ErrorKind
from swap_router.models.types import Path, SwapMode, Token


@dataclass(frozen=True)
class HopQuote:
    """Amounts through a single pool of a quoted path."""

    pool_id: str
    token_in: Token
    token_out: Token
    amount_in: int
    amount_out: int


@dataclass(frozen=True)
class Quote:
    """Result of evaluating a path against an amount.

    For SPEND quotes amount_in is the caller's amount; for RECEIVE quotes
    amount_out is. Hops are ordered from source to destination.
    """

    path: Path
    mode: SwapMode
    amount_in: int
    amount_out: int
    hops: tuple[HopQuote, ...]
    # Shortfall of the realized price against the zero-size spot price
    price_impact_bps: int

    @property
    def hop_count(self) -> int:
        return len(self.hops)

    @property
    def pool_ids(self) -> tuple[str, ...]:
        """Pool identifiers along the path, in trade order."""
        return tuple(hop.pool_id for hop in self.hops)

    @property
    def is_multihop(self) -> bool:
        return self.hop_count > 1


@dataclass(frozen=True)
class PathSummary:
    """A candidate path as shown to someone browsing alternatives."""

    tokens: Path
    hop_count: int

    @classmethod
    def from_path(cls, path: Path) -> PathSummary:
        return cls(tokens=tuple(path), hop_count=len(path) - 1)


@dataclass(frozen=True)
class PathFailure:
    """Why one candidate path could not be quoted."""

    path: Path
    kind: ErrorKind
    message: str
    pool_id: str | None = None


@dataclass(frozen=True)
class NoRoute:
    """No enumerated path can carry the requested amount.

    This is an expected outcome, returned rather than raised.
    """

    reason: str
    paths_considered: int = 0
    failures: tuple[PathFailure, ...] = field(default_factory=tuple)

    kind = ErrorKind.NO_ROUTE


__all__ = ["HopQuote", "Quote", "PathSummary", "PathFailure", "NoRoute"]
