"""Routing error classes.

Every failure the engine can produce maps to an ErrorKind so callers can
report it as a typed value. NoRoute is a result, not an exception; see
swap_router.routing.types.
"""

from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    """Machine-readable failure category."""

    POOL_DATA_INCONSISTENT = "PoolDataInconsistent"
    INVALID_AMOUNT = "InvalidAmount"
    INSUFFICIENT_LIQUIDITY = "InsufficientLiquidity"
    NO_ROUTE = "NoRoute"


class RoutingError(Exception):
    """Base error for graph construction, enumeration and quoting."""

    kind: ClassVar[ErrorKind]


class PoolDataInconsistent(RoutingError):
    """A pool record is malformed or cannot be placed in the graph."""

    kind = ErrorKind.POOL_DATA_INCONSISTENT


class InvalidAmount(RoutingError):
    """Non-positive or non-integer amount, or a degenerate query."""

    kind = ErrorKind.INVALID_AMOUNT


class InsufficientLiquidity(RoutingError):
    """A hop cannot carry the requested size."""

    kind = ErrorKind.INSUFFICIENT_LIQUIDITY

    def __init__(self, message: str, pool_id: str | None = None) -> None:
        super().__init__(message)
        self.pool_id = pool_id


__all__ = [
    "ErrorKind",
    "RoutingError",
    "PoolDataInconsistent",
    "InvalidAmount",
    "InsufficientLiquidity",
]
