"""API endpoints for the quote service."""

import asyncio

import structlog
from fastapi import APIRouter, Depends

from swap_router.api.snapshot import GraphSnapshot, get_default_snapshot
from swap_router.config import RoutingConfig
from swap_router.errors import InvalidAmount
from swap_router.handoff import SwapPlan
from swap_router.models.api import (
    NoRouteModel,
    PathsRequest,
    PathsResponse,
    PathSummaryModel,
    PoolsUpdate,
    PoolsUpdated,
    QuoteModel,
    QuoteRequest,
    RouteRequest,
    RouteResponse,
    SwapPlanModel,
)
from swap_router.pools.graph import LiquidityGraph
from swap_router.routing.pathfinding import PathEnumerator
from swap_router.routing.quoter import Quoter
from swap_router.routing.selector import RouteSelector
from swap_router.routing.types import NoRoute, PathSummary

logger = structlog.get_logger()

router = APIRouter()


def get_snapshot() -> GraphSnapshot:
    """Dependency provider for the graph snapshot.

    Override this in tests to serve from a fixed graph:
        app.dependency_overrides[get_snapshot] = lambda: snapshot
    """
    return get_default_snapshot()


def search_bounds(
    request: PathsRequest | RouteRequest, config: RoutingConfig
) -> tuple[int, int | None]:
    """Resolve a request's search bounds against the service limits.

    Omitted bounds take the configured values, which are also ceilings.

    Raises:
        InvalidAmount: If the request asks for more than the service allows
    """
    max_hops = request.max_hops or config.max_hops
    if max_hops > config.max_hops:
        raise InvalidAmount(f"maxHops {max_hops} exceeds service limit of {config.max_hops}")

    max_paths = request.max_paths or config.max_paths
    if config.max_paths is not None and max_paths is not None and max_paths > config.max_paths:
        raise InvalidAmount(
            f"maxPaths {max_paths} exceeds service limit of {config.max_paths}"
        )
    return max_hops, max_paths


@router.put("/pools")
async def replace_pools(
    update: PoolsUpdate,
    snapshot: GraphSnapshot = Depends(get_snapshot),
) -> PoolsUpdated:
    """Replace the pool set. In-flight requests keep the previous graph."""
    pools = [pool.to_pool() for pool in update.pools]
    graph = snapshot.replace(pools)
    return PoolsUpdated(pool_count=graph.pool_count, token_count=graph.token_count)


def _paths(
    graph: LiquidityGraph,
    request: PathsRequest | RouteRequest,
    max_hops: int,
    max_paths: int | None,
):
    return PathEnumerator(graph).enumerate(
        request.token_in, request.token_out, max_hops, max_paths
    )


@router.post("/paths")
async def list_paths(
    request: PathsRequest,
    snapshot: GraphSnapshot = Depends(get_snapshot),
) -> PathsResponse:
    """Enumerate candidate paths for browsing."""
    graph = snapshot.graph
    max_hops, max_paths = search_bounds(request, snapshot.config)

    loop = asyncio.get_running_loop()
    paths = await loop.run_in_executor(None, _paths, graph, request, max_hops, max_paths)
    return PathsResponse(
        paths=[PathSummaryModel.from_summary(PathSummary.from_path(p)) for p in paths]
    )


@router.post("/quote")
async def quote_path(
    request: QuoteRequest,
    snapshot: GraphSnapshot = Depends(get_snapshot),
) -> QuoteModel:
    """Quote one explicit path."""
    quoter = Quoter(snapshot.graph)

    loop = asyncio.get_running_loop()
    quote = await loop.run_in_executor(
        None, quoter.quote, request.path, request.amount, request.mode
    )
    return QuoteModel.from_quote(quote)


def _route(graph: LiquidityGraph, request: RouteRequest, max_hops: int, max_paths: int | None):
    paths = _paths(graph, request, max_hops, max_paths)
    return paths, RouteSelector(graph).select(paths, request.amount, request.mode)


@router.post("/route", response_model_exclude_none=True)
async def route(
    request: RouteRequest,
    snapshot: GraphSnapshot = Depends(get_snapshot),
) -> RouteResponse:
    """Find the best route and list every enumerated alternative.

    Error Handling:
        - Invalid request schema: 422 (Pydantic)
        - InvalidAmount: 400 with an error body
        - No viable path: 200 with `noRoute` instead of `route`
    """
    graph = snapshot.graph
    max_hops, max_paths = search_bounds(request, snapshot.config)

    logger.info(
        "received_route_request",
        token_in=request.token_in,
        token_out=request.token_out,
        mode=request.mode.value,
        max_hops=max_hops,
    )

    # Validate before spending executor time on enumeration
    RouteSelector.validate_query(request.amount, request.mode)

    loop = asyncio.get_running_loop()
    paths, result = await loop.run_in_executor(
        None, _route, graph, request, max_hops, max_paths
    )

    summaries = [PathSummaryModel.from_summary(PathSummary.from_path(p)) for p in paths]
    if isinstance(result, NoRoute):
        return RouteResponse(no_route=NoRouteModel.from_no_route(result), paths=summaries)

    plan = None
    if request.slippage_bps is not None:
        plan = SwapPlanModel.from_plan(SwapPlan.from_quote(result, request.slippage_bps))

    return RouteResponse(route=QuoteModel.from_quote(result), paths=summaries, plan=plan)
