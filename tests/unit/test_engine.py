"""Tests for the engine entry points."""

import swap_router
from swap_router import browse_paths, path_summaries
from swap_router.pools import LiquidityGraph
from swap_router.routing import PathSummary
from tests.helpers import HBAR, HTS_ABC, TOKEN_A, TOKEN_D, USDC


class TestPathSummaries:
    def test_summaries_keep_order(self, scenario_graph: LiquidityGraph) -> None:
        summaries = browse_paths(scenario_graph, HTS_ABC, HBAR)
        assert summaries == [
            PathSummary(tokens=(HTS_ABC, HBAR), hop_count=1),
            PathSummary(tokens=(HTS_ABC, USDC, HBAR), hop_count=2),
        ]

    def test_path_cap(self, diamond_graph: LiquidityGraph) -> None:
        summaries = browse_paths(diamond_graph, TOKEN_A, TOKEN_D, max_paths=1)
        assert [s.hop_count for s in summaries] == [2]

    def test_from_plain_paths(self) -> None:
        assert path_summaries([]) == []
        assert path_summaries([(TOKEN_A, TOKEN_D)])[0].hop_count == 1


class TestPublicSurface:
    def test_exports(self) -> None:
        for name in ("build_graph", "find_paths", "compute_quote", "best_route"):
            assert callable(getattr(swap_router, name))
        assert swap_router.__version__
