"""Pytest configuration and fixtures."""

import pytest

from swap_router.pools import LiquidityGraph, Pool, build_graph
from tests.helpers import TOKEN_A, TOKEN_B, TOKEN_C, TOKEN_D, make_pool, scenario_pools


@pytest.fixture
def scenario() -> list[Pool]:
    """HTS-ABC / HBAR / USDC triangle pools."""
    return scenario_pools()


@pytest.fixture
def scenario_graph(scenario: list[Pool]) -> LiquidityGraph:
    """Graph over the HTS-ABC / HBAR / USDC triangle."""
    return build_graph(scenario)


@pytest.fixture
def diamond_graph() -> LiquidityGraph:
    """A -> {B, C} -> D plus a direct A/D pool, all deep and equal.

    Pools in insertion order: A/B, A/C, B/D, C/D, A/D.
    """
    return build_graph(
        [
            make_pool(TOKEN_A, TOKEN_B, pool_id="ab"),
            make_pool(TOKEN_A, TOKEN_C, pool_id="ac"),
            make_pool(TOKEN_B, TOKEN_D, pool_id="bd"),
            make_pool(TOKEN_C, TOKEN_D, pool_id="cd"),
            make_pool(TOKEN_A, TOKEN_D, pool_id="ad"),
        ]
    )
