"""Routing configuration."""

import os
from dataclasses import dataclass

from swap_router.constants import DEFAULT_MAX_HOPS, DEFAULT_MAX_PATHS, DEFAULT_MAX_POOLS


@dataclass(frozen=True)
class RoutingConfig:
    """Search bounds applied when a caller does not supply its own.

    Attributes:
        max_hops: Maximum number of pools a route may traverse (default: 3)
        max_paths: Cap on enumerated paths per query, None for no cap (default: 64)
        max_pools: Maximum pools accepted into one graph snapshot (default: 10,000)
    """

    max_hops: int = DEFAULT_MAX_HOPS
    max_paths: int | None = DEFAULT_MAX_PATHS
    max_pools: int = DEFAULT_MAX_POOLS

    @classmethod
    def from_env(cls) -> "RoutingConfig":
        """Build a config from ROUTER_* environment variables.

        - ROUTER_MAX_HOPS: Maximum hops per route
        - ROUTER_MAX_PATHS: Path cap per query ("0" or "none" disables the cap)
        - ROUTER_MAX_POOLS: Maximum pools per snapshot
        """
        max_paths_raw = os.environ.get("ROUTER_MAX_PATHS", str(DEFAULT_MAX_PATHS))
        max_paths: int | None
        if max_paths_raw.strip().lower() in ("0", "none", ""):
            max_paths = None
        else:
            max_paths = int(max_paths_raw)

        return cls(
            max_hops=int(os.environ.get("ROUTER_MAX_HOPS", str(DEFAULT_MAX_HOPS))),
            max_paths=max_paths,
            max_pools=int(os.environ.get("ROUTER_MAX_POOLS", str(DEFAULT_MAX_POOLS))),
        )


# Default configuration instance
DEFAULT_ROUTING_CONFIG = RoutingConfig()
