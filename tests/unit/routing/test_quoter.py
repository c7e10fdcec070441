"""Tests for path quoting in both modes."""

import pytest

from swap_router import SwapMode, compute_quote
from swap_router.errors import InsufficientLiquidity, InvalidAmount
from swap_router.pools import LiquidityGraph
from swap_router.routing import Quoter, price_impact_bps
from tests.helpers import HBAR, HTS_ABC, HTS_DEF, USDC

DIRECT = (HTS_ABC, HBAR)
TWO_HOP = (HTS_ABC, USDC, HBAR)


class TestSpendQuotes:
    """Exact input: amounts flow forward, floored at every hop."""

    def test_direct(self, scenario_graph: LiquidityGraph) -> None:
        quote = compute_quote(scenario_graph, DIRECT, 1000, SwapMode.SPEND)

        assert quote.amount_in == 1000
        assert quote.amount_out == 4
        assert quote.price_impact_bps == 2000
        assert quote.pool_ids == ("abc-hbar",)
        assert not quote.is_multihop

    def test_two_hop(self, scenario_graph: LiquidityGraph) -> None:
        quote = compute_quote(scenario_graph, TWO_HOP, 1000, SwapMode.SPEND)

        assert [h.amount_out for h in quote.hops] == [2266, 3685]
        assert quote.amount_out == 3685
        assert quote.price_impact_bps == 2630
        assert quote.pool_ids == ("abc-usdc", "hbar-usdc")
        assert quote.hop_count == 2

    def test_hops_chain(self, scenario_graph: LiquidityGraph) -> None:
        quote = compute_quote(scenario_graph, TWO_HOP, 5000)

        first, second = quote.hops
        assert first.token_in == HTS_ABC
        assert first.token_out == USDC == second.token_in
        assert second.token_out == HBAR
        assert first.amount_out == second.amount_in

    def test_mode_accepts_string(self, scenario_graph: LiquidityGraph) -> None:
        assert compute_quote(scenario_graph, DIRECT, 1000, "SPEND").mode is SwapMode.SPEND

    def test_input_too_large_for_first_hop(self, scenario_graph: LiquidityGraph) -> None:
        with pytest.raises(InsufficientLiquidity) as exc_info:
            compute_quote(scenario_graph, TWO_HOP, 200_000)
        assert exc_info.value.pool_id == "abc-usdc"

    def test_dust_quotes_zero(self, scenario_graph: LiquidityGraph) -> None:
        assert compute_quote(scenario_graph, DIRECT, 10).amount_out == 0


class TestReceiveQuotes:
    """Exact output: amounts flow backward, rounded up at every hop."""

    def test_direct(self, scenario_graph: LiquidityGraph) -> None:
        quote = compute_quote(scenario_graph, DIRECT, 4, SwapMode.RECEIVE)
        assert quote.amount_in == 810
        assert quote.amount_out == 4
        assert quote.mode is SwapMode.RECEIVE

    def test_two_hop(self, scenario_graph: LiquidityGraph) -> None:
        quote = compute_quote(scenario_graph, TWO_HOP, 3685, SwapMode.RECEIVE)

        assert quote.amount_in == 1000
        assert [h.amount_in for h in quote.hops] == [1000, 2266]
        assert [h.amount_out for h in quote.hops] == [2266, 3685]

    def test_small_target_prefers_cheap_path(self, scenario_graph: LiquidityGraph) -> None:
        assert compute_quote(scenario_graph, TWO_HOP, 4, SwapMode.RECEIVE).amount_in == 3

    @pytest.mark.parametrize("target", [1, 4, 17, 100, 3685])
    def test_required_input_delivers_target(
        self, scenario_graph: LiquidityGraph, target: int
    ) -> None:
        receive = compute_quote(scenario_graph, TWO_HOP, target, SwapMode.RECEIVE)
        spend = compute_quote(scenario_graph, TWO_HOP, receive.amount_in, SwapMode.SPEND)
        assert spend.amount_out >= target

    def test_target_exhausts_reserve(self, scenario_graph: LiquidityGraph) -> None:
        with pytest.raises(InsufficientLiquidity) as exc_info:
            compute_quote(scenario_graph, DIRECT, 500, SwapMode.RECEIVE)
        assert exc_info.value.pool_id == "abc-hbar"

    def test_backward_failure_names_last_hop_first(self, scenario_graph: LiquidityGraph) -> None:
        with pytest.raises(InsufficientLiquidity) as exc_info:
            compute_quote(scenario_graph, TWO_HOP, 20_000, SwapMode.RECEIVE)
        assert exc_info.value.pool_id == "hbar-usdc"


class TestInvalidInput:
    @pytest.mark.parametrize("amount", [0, -1, 1.5, True, "1000", None])
    def test_bad_amount(self, scenario_graph: LiquidityGraph, amount) -> None:
        with pytest.raises(InvalidAmount):
            compute_quote(scenario_graph, DIRECT, amount)

    def test_bad_mode(self, scenario_graph: LiquidityGraph) -> None:
        with pytest.raises(InvalidAmount, match="mode"):
            compute_quote(scenario_graph, DIRECT, 1000, "BUY")

    def test_short_path(self, scenario_graph: LiquidityGraph) -> None:
        with pytest.raises(InvalidAmount, match="two tokens"):
            compute_quote(scenario_graph, (HTS_ABC,), 1000)

    def test_repeated_token(self, scenario_graph: LiquidityGraph) -> None:
        with pytest.raises(InvalidAmount, match="repeats"):
            compute_quote(scenario_graph, (HTS_ABC, USDC, HTS_ABC), 1000)

    def test_unpooled_hop(self, scenario_graph: LiquidityGraph) -> None:
        with pytest.raises(InvalidAmount, match="No pool"):
            compute_quote(scenario_graph, (HTS_ABC, HTS_DEF), 1000)


class TestSnapshotIsolation:
    def test_quoting_leaves_pools_untouched(self, scenario_graph: LiquidityGraph) -> None:
        before = list(scenario_graph.pools)
        quoter = Quoter(scenario_graph)
        quoter.quote(TWO_HOP, 1000)
        quoter.quote(TWO_HOP, 4, SwapMode.RECEIVE)

        assert list(scenario_graph.pools) == before

    def test_repeat_quotes_agree(self, scenario_graph: LiquidityGraph) -> None:
        quoter = Quoter(scenario_graph)
        assert quoter.quote(TWO_HOP, 1000) == quoter.quote(TWO_HOP, 1000)


class TestPriceImpact:
    def test_no_shortfall_is_zero(self, scenario_graph: LiquidityGraph) -> None:
        pools = Quoter(scenario_graph).resolve_pools(DIRECT)
        # 100000 ABC : 500 HBAR, so 200 in at spot would give exactly 1
        assert price_impact_bps(DIRECT, pools, 200, 1) == 0

    def test_surplus_clamps_to_zero(self, scenario_graph: LiquidityGraph) -> None:
        pools = Quoter(scenario_graph).resolve_pools(DIRECT)
        assert price_impact_bps(DIRECT, pools, 200, 5) == 0

    def test_nothing_out_is_full_impact(self, scenario_graph: LiquidityGraph) -> None:
        pools = Quoter(scenario_graph).resolve_pools(DIRECT)
        assert price_impact_bps(DIRECT, pools, 10, 0) == 10_000


class TestQuoteProperties:
    """Properties that hold for any path over valid pools."""

    AMOUNTS = (50, 200, 1000, 2500, 5000, 9000)

    def test_output_never_decreases_with_input(self, scenario_graph: LiquidityGraph) -> None:
        outputs = [compute_quote(scenario_graph, TWO_HOP, a).amount_out for a in self.AMOUNTS]
        assert outputs == sorted(outputs)
        assert outputs[0] < outputs[-1]

    @pytest.mark.parametrize("amount_in", AMOUNTS)
    def test_reverse_quote_never_overshoots(
        self, scenario_graph: LiquidityGraph, amount_in: int
    ) -> None:
        spend = compute_quote(scenario_graph, TWO_HOP, amount_in)
        receive = compute_quote(scenario_graph, TWO_HOP, spend.amount_out, SwapMode.RECEIVE)
        assert receive.amount_in <= amount_in

    @pytest.mark.parametrize("amount_in", AMOUNTS)
    def test_no_phantom_liquidity(self, scenario_graph: LiquidityGraph, amount_in: int) -> None:
        quote = compute_quote(scenario_graph, TWO_HOP, amount_in)
        for hop in quote.hops:
            _, reserve_out = scenario_graph.pool(hop.pool_id).get_reserves(hop.token_in)
            assert hop.amount_out < reserve_out
