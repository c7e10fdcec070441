"""Pydantic models for the HTTP quote service.

JSON uses camelCase keys and carries amounts as decimal strings.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from swap_router.constants import DEFAULT_FEE_BPS, MAX_FEE_BPS
from swap_router.errors import ErrorKind
from swap_router.handoff import SwapPlan
from swap_router.models.types import SwapMode, TokenAmount, TokenId
from swap_router.pools.types import Pool
from swap_router.routing.types import NoRoute, PathFailure, PathSummary, Quote


class PoolData(BaseModel):
    """A constant-product pool as supplied by the caller."""

    id: str = Field(min_length=1, description="Pool identifier, passed through to hops.")
    token_a: TokenId = Field(alias="tokenA")
    token_b: TokenId = Field(alias="tokenB")
    reserve_a: TokenAmount = Field(alias="reserveA")
    reserve_b: TokenAmount = Field(alias="reserveB")
    fee_bps: int = Field(default=DEFAULT_FEE_BPS, alias="feeBps", ge=0, le=MAX_FEE_BPS)

    model_config = {"populate_by_name": True}

    def to_pool(self) -> Pool:
        return Pool(
            pool_id=self.id,
            token_a=self.token_a,
            token_b=self.token_b,
            reserve_a=self.reserve_a,
            reserve_b=self.reserve_b,
            fee_bps=self.fee_bps,
        )


class PoolsUpdate(BaseModel):
    """Replacement pool set for the service's graph snapshot."""

    pools: list[PoolData]


class PoolsUpdated(BaseModel):
    pool_count: int = Field(alias="poolCount")
    token_count: int = Field(alias="tokenCount")

    model_config = {"populate_by_name": True}


class PathsRequest(BaseModel):
    """Enumerate candidate paths between two tokens."""

    token_in: TokenId = Field(alias="tokenIn")
    token_out: TokenId = Field(alias="tokenOut")
    max_hops: int | None = Field(default=None, alias="maxHops", ge=1)
    max_paths: int | None = Field(default=None, alias="maxPaths", ge=1)

    model_config = {"populate_by_name": True}


class QuoteRequest(BaseModel):
    """Quote one explicit path."""

    path: list[TokenId] = Field(min_length=2)
    amount: TokenAmount = Field(description="Input for SPEND, desired output for RECEIVE.")
    mode: SwapMode = SwapMode.SPEND


class RouteRequest(BaseModel):
    """Find the best route between two tokens."""

    token_in: TokenId = Field(alias="tokenIn")
    token_out: TokenId = Field(alias="tokenOut")
    amount: TokenAmount = Field(description="Input for SPEND, desired output for RECEIVE.")
    mode: SwapMode = SwapMode.SPEND
    max_hops: int | None = Field(default=None, alias="maxHops", ge=1)
    max_paths: int | None = Field(default=None, alias="maxPaths", ge=1)
    slippage_bps: int | None = Field(
        default=None,
        alias="slippageBps",
        ge=0,
        le=MAX_FEE_BPS,
        description="If set, the response includes a swap plan with this tolerance.",
    )

    model_config = {"populate_by_name": True}


class PathSummaryModel(BaseModel):
    tokens: list[str]
    hop_count: int = Field(alias="hopCount")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_summary(cls, summary: PathSummary) -> PathSummaryModel:
        return cls(tokens=list(summary.tokens), hop_count=summary.hop_count)


class PathsResponse(BaseModel):
    paths: list[PathSummaryModel]


class HopModel(BaseModel):
    pool_id: str = Field(alias="poolId")
    token_in: str = Field(alias="tokenIn")
    token_out: str = Field(alias="tokenOut")
    amount_in: str = Field(alias="amountIn")
    amount_out: str = Field(alias="amountOut")

    model_config = {"populate_by_name": True}


class QuoteModel(BaseModel):
    """A quoted path."""

    path: list[str]
    mode: SwapMode
    amount_in: str = Field(alias="amountIn")
    amount_out: str = Field(alias="amountOut")
    hops: list[HopModel]
    price_impact_bps: int = Field(alias="priceImpactBps")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_quote(cls, quote: Quote) -> QuoteModel:
        return cls(
            path=list(quote.path),
            mode=quote.mode,
            amount_in=str(quote.amount_in),
            amount_out=str(quote.amount_out),
            hops=[
                HopModel(
                    pool_id=hop.pool_id,
                    token_in=hop.token_in,
                    token_out=hop.token_out,
                    amount_in=str(hop.amount_in),
                    amount_out=str(hop.amount_out),
                )
                for hop in quote.hops
            ],
            price_impact_bps=quote.price_impact_bps,
        )


class SwapPlanModel(BaseModel):
    """Hand-off for the transaction builder."""

    pool_ids: list[str] = Field(alias="poolIds")
    amount_in: str = Field(alias="amountIn")
    amount_out: str = Field(alias="amountOut")
    amount_out_minimum: str = Field(alias="amountOutMinimum")
    amount_in_maximum: str = Field(alias="amountInMaximum")
    slippage_bps: int = Field(alias="slippageBps")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_plan(cls, plan: SwapPlan) -> SwapPlanModel:
        return cls(
            pool_ids=list(plan.pool_ids),
            amount_in=str(plan.amount_in),
            amount_out=str(plan.amount_out),
            amount_out_minimum=str(plan.amount_out_minimum),
            amount_in_maximum=str(plan.amount_in_maximum),
            slippage_bps=plan.slippage_bps,
        )


class PathFailureModel(BaseModel):
    path: list[str]
    kind: ErrorKind
    message: str
    pool_id: str | None = Field(default=None, alias="poolId")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_failure(cls, failure: PathFailure) -> PathFailureModel:
        return cls(
            path=list(failure.path),
            kind=failure.kind,
            message=failure.message,
            pool_id=failure.pool_id,
        )


class NoRouteModel(BaseModel):
    reason: str
    paths_considered: int = Field(alias="pathsConsidered")
    failures: list[PathFailureModel] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @classmethod
    def from_no_route(cls, no_route: NoRoute) -> NoRouteModel:
        return cls(
            reason=no_route.reason,
            paths_considered=no_route.paths_considered,
            failures=[PathFailureModel.from_failure(f) for f in no_route.failures],
        )


class RouteResponse(BaseModel):
    """Best route plus every enumerated alternative.

    Exactly one of route / no_route is set.
    """

    route: QuoteModel | None = None
    no_route: NoRouteModel | None = Field(default=None, alias="noRoute")
    paths: list[PathSummaryModel] = Field(default_factory=list)
    plan: SwapPlanModel | None = None

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    error: ErrorKind
    message: str


__all__ = [
    "PoolData",
    "PoolsUpdate",
    "PoolsUpdated",
    "PathsRequest",
    "QuoteRequest",
    "RouteRequest",
    "PathSummaryModel",
    "PathsResponse",
    "HopModel",
    "QuoteModel",
    "SwapPlanModel",
    "PathFailureModel",
    "NoRouteModel",
    "RouteResponse",
    "ErrorResponse",
]
