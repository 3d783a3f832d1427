"""
Application factory.

Builds the store, origin client and coordinator for one cache directory
and attaches the coordinator to app.state.
"""

from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI

from .config import CacheServerConfig
from .coordinator import CacheCoordinator
from .origin import OriginClient, build_http_client
from .routes_fastapi import register_routes
from .storage import FileImageStore


def create_app(
    config: CacheServerConfig,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """
    Create the cache application.

    Args:
        config: Server configuration
        http_client: Client for origin requests (built from config if omitted)
    """
    store = FileImageStore(config.cache_dir)
    origin = OriginClient(
        config.origin_base_url,
        http_client or build_http_client(config.origin_timeout),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await origin.aclose()

    app = FastAPI(
        title="Status Image Cache",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config
    app.state.coordinator = CacheCoordinator(store, origin)
    register_routes(app)
    return app
