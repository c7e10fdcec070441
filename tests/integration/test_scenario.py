"""End-to-end runs of the engine over the HTS-ABC / HBAR / USDC triangle."""

from swap_router import (
    NoRoute,
    Quote,
    SwapMode,
    best_route,
    browse_paths,
    build_graph,
    compute_quote,
    find_paths,
)
from tests.helpers import HBAR, HTS_ABC, USDC, scenario_pools


class TestTriangleScenario:
    def test_walkthrough(self) -> None:
        graph = build_graph(scenario_pools())

        paths = find_paths(graph, HTS_ABC, HBAR, max_hops=3)
        assert paths == [(HTS_ABC, HBAR), (HTS_ABC, USDC, HBAR)]

        direct = compute_quote(graph, paths[0], 1000)
        two_hop = compute_quote(graph, paths[1], 1000)
        assert (direct.amount_out, direct.price_impact_bps) == (4, 2000)
        assert (two_hop.amount_out, two_hop.price_impact_bps) == (3685, 2630)

        best = best_route(graph, HTS_ABC, HBAR, 1000, max_hops=3)
        assert isinstance(best, Quote)
        assert best == two_hop

        # Every alternative stays browsable after selection
        assert [s.hop_count for s in browse_paths(graph, HTS_ABC, HBAR)] == [1, 2]

    def test_receive_walkthrough(self) -> None:
        graph = build_graph(scenario_pools())

        assert compute_quote(graph, (HTS_ABC, HBAR), 4, SwapMode.RECEIVE).amount_in == 810
        assert compute_quote(graph, (HTS_ABC, USDC, HBAR), 3685, SwapMode.RECEIVE).amount_in == 1000

        best = best_route(graph, HTS_ABC, HBAR, 4, mode=SwapMode.RECEIVE)
        assert best.amount_in == 3

    def test_oversized_trade(self) -> None:
        graph = build_graph(scenario_pools())

        result = best_route(graph, HTS_ABC, HBAR, 200_000)
        assert isinstance(result, NoRoute)
        assert len(result.failures) == 2

    def test_reverse_direction(self) -> None:
        graph = build_graph(scenario_pools())

        assert find_paths(graph, HBAR, HTS_ABC) == [(HBAR, HTS_ABC), (HBAR, USDC, HTS_ABC)]
        result = best_route(graph, HBAR, HTS_ABC, 10)
        assert isinstance(result, Quote)
        assert result.amount_in == 10
