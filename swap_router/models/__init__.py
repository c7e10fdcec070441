"""Data models shared by the engine and the HTTP service."""

from swap_router.models.types import (
    Path,
    SwapMode,
    Token,
    TokenAmount,
    TokenId,
    parse_token_amount,
    require_positive_amount,
)

__all__ = [
    "Path",
    "SwapMode",
    "Token",
    "TokenAmount",
    "TokenId",
    "parse_token_amount",
    "require_positive_amount",
]
