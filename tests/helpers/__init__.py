"""Test helpers module for shared test utilities.

- constants: Token identifiers
- factories: Pool factory functions and the standard scenario
"""

from tests.helpers.constants import (
    HBAR,
    HTS_ABC,
    HTS_DEF,
    TOKEN_A,
    TOKEN_B,
    TOKEN_C,
    TOKEN_D,
    TOKEN_E,
    USDC,
)
from tests.helpers.factories import make_pool, scenario_pools

__all__ = [
    # Constants
    "HTS_ABC",
    "HTS_DEF",
    "HBAR",
    "USDC",
    "TOKEN_A",
    "TOKEN_B",
    "TOKEN_C",
    "TOKEN_D",
    "TOKEN_E",
    # Factories
    "make_pool",
    "scenario_pools",
]
