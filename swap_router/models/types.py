"""Shared type definitions for the routing engine and its HTTP models."""

from enum import Enum
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from swap_router.errors import InvalidAmount

# Tokens are opaque identifiers (a symbol or a chain-specific address).
# Equality is by identifier; no case folding is applied.
Token = str

# Ordered token sequence from source to destination
Path = tuple[Token, ...]


class SwapMode(str, Enum):
    """Which side of the trade the caller fixes."""

    SPEND = "SPEND"  # exact input, maximise output
    RECEIVE = "RECEIVE"  # exact output, minimise input


def require_positive_amount(amount: Any, name: str = "amount") -> int:
    """Validate an engine amount.

    Args:
        amount: Candidate amount in the token's smallest unit
        name: Parameter name for the error message

    Returns:
        The amount, unchanged

    Raises:
        InvalidAmount: If amount is not an int (bools excluded) or is <= 0
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmount(f"{name} must be an integer, got {type(amount).__name__}")
    if amount <= 0:
        raise InvalidAmount(f"{name} must be positive, got {amount}")
    return amount


def parse_token_amount(value: Any) -> int:
    """Parse a JSON amount given as a decimal string or integer.

    Amounts travel as decimal strings so large values survive JSON clients
    that use doubles.

    Raises:
        ValueError: If value is not a non-negative decimal integer
    """
    if isinstance(value, bool):
        raise ValueError("Amount must be a decimal integer, got bool")
    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        try:
            int_value = int(value)
        except ValueError as err:
            raise ValueError(f"Amount must be a decimal integer string: '{value}'") from err
    else:
        raise ValueError(f"Amount must be string or int, got {type(value).__name__}")

    if int_value < 0:
        raise ValueError(f"Amount cannot be negative: {value}")
    return int_value


# Non-negative integer amount, accepted as decimal string or int
TokenAmount = Annotated[
    int,
    BeforeValidator(parse_token_amount),
    Field(description="Amount in the token's smallest unit, as a decimal string"),
]

# Non-empty token identifier
TokenId = Annotated[str, Field(min_length=1, max_length=128)]


__all__ = [
    "Token",
    "Path",
    "SwapMode",
    "require_positive_amount",
    "parse_token_amount",
    "TokenAmount",
    "TokenId",
]
