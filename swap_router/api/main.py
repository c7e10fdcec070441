"""FastAPI application for the swap route quote service.

The service is a thin shell around the engine: it holds the current graph
snapshot and turns engine errors into JSON bodies.
"""

import logging
import os

import structlog
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from swap_router import __version__
from swap_router.api.endpoints import get_snapshot, router
from swap_router.api.snapshot import GraphSnapshot
from swap_router.errors import ErrorKind, RoutingError
from swap_router.models.api import ErrorResponse

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("ROUTER_HOST", "0.0.0.0")
PORT = int(os.environ.get("ROUTER_PORT", "8000"))
DEBUG = os.environ.get("ROUTER_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (10 MB)
MAX_REQUEST_SIZE = 10 * 1024 * 1024

ERROR_STATUS = {
    ErrorKind.POOL_DATA_INCONSISTENT: 400,
    ErrorKind.INVALID_AMOUNT: 400,
    ErrorKind.INSUFFICIENT_LIQUIDITY: 422,
}

logger = structlog.get_logger()

app = FastAPI(
    title="Swap Router",
    description="Multi-hop swap route discovery and quote simulation",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


@app.exception_handler(RoutingError)
async def routing_error_handler(request: Request, exc: RoutingError) -> JSONResponse:
    """Report engine failures as typed JSON errors."""
    logger.warning(
        "request_rejected",
        path=request.url.path,
        error=exc.kind.value,
        message=str(exc),
    )
    body = ErrorResponse(error=exc.kind, message=str(exc))
    return JSONResponse(
        status_code=ERROR_STATUS.get(exc.kind, 400),
        content=body.model_dump(mode="json"),
    )


app.include_router(router)


@app.get("/health")
async def health(snapshot: GraphSnapshot = Depends(get_snapshot)) -> dict[str, object]:
    """Health check endpoint."""
    graph = snapshot.graph
    return {"status": "ok", "poolCount": graph.pool_count, "tokenCount": graph.token_count}


def configure_logging(debug: bool = DEBUG) -> None:
    """Configure structlog console output for the service process."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.INFO
        ),
    )


def run() -> None:
    """Run the quote service.

    Configuration via environment variables:
    - ROUTER_HOST: Host to bind to (default: 0.0.0.0)
    - ROUTER_PORT: Port to bind to (default: 8000)
    - ROUTER_DEBUG: Enable debug logging and reload mode (default: false)
    - ROUTER_MAX_HOPS / ROUTER_MAX_PATHS / ROUTER_MAX_POOLS: search bounds
    """
    configure_logging()
    uvicorn.run(
        "swap_router.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
