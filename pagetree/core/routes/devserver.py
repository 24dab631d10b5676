"""
Development server exposing the compiled route tree

Serves the router tree and its flat routes over HTTP so a running client
build (or a developer) can inspect what the pages directory compiles to.
Handlers that compile the pages directory are plain functions so Starlette
runs them in its threadpool instead of on the event loop.
"""

import logging
from typing import Optional

import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from .constants import DEV_SERVER_HOST, DEFAULT_DEV_PORT, DEFAULT_ROUTER_BASE, ROUTES_INFO_PATH
from .resolver import PagesResolver
from .segments import RouteCompileError
from .utils import url_join

logger = logging.getLogger(__name__)


class DevServer:
    """Starlette application serving route tree introspection endpoints"""

    def __init__(
        self,
        resolver: PagesResolver,
        host: str = DEV_SERVER_HOST,
        port: int = DEFAULT_DEV_PORT,
        base: str = DEFAULT_ROUTER_BASE
    ):
        self.resolver = resolver
        self.host = host
        self.port = port
        self.base = base
        self.app: Optional[Starlette] = None

    def create_application(self) -> Starlette:
        """Create the Starlette application"""
        routes = [
            Route("/health", self._health_check),
            Route(ROUTES_INFO_PATH, self._routes_info),
            Route(f"{ROUTES_INFO_PATH}/flat", self._flat_routes),
            Route(f"{ROUTES_INFO_PATH}/invalidate", self._invalidate, methods=["POST"]),
        ]
        self.app = Starlette(debug=False, routes=routes)
        return self.app

    async def _health_check(self, request: Request):
        """Health check endpoint."""
        return JSONResponse({
            "status": "healthy",
            "app": "pagetree dev server",
            "pages_dir": str(self.resolver.pages_dir),
        })

    def _routes_info(self, request: Request):
        """Return the compiled router tree."""
        try:
            routes = self.resolver.resolve_routes()
        except RouteCompileError as e:
            logger.error(f"Failed to compile routes: {e}")
            return JSONResponse({"error": str(e)}, status_code=500)

        return JSONResponse({
            "base": self.base,
            "routes": [route.to_dict() for route in routes],
            "stats": self.resolver.get_stats(),
        })

    def _flat_routes(self, request: Request):
        """Return flat paths, optionally only the static ones."""
        static_only = request.query_params.get("static", "").lower() in {"1", "true", "yes"}
        try:
            paths = self.resolver.static_routes() if static_only else self.resolver.flat_routes()
        except RouteCompileError as e:
            logger.error(f"Failed to compile routes: {e}")
            return JSONResponse({"error": str(e)}, status_code=500)

        return JSONResponse({
            "static": static_only,
            "routes": [url_join(self.base, path) for path in paths],
        })

    async def _invalidate(self, request: Request):
        """Drop the cached tree so the next request recompiles."""
        self.resolver.invalidate_cache()
        return JSONResponse({"status": "invalidated"})

    def start(self) -> None:
        """Run the application with uvicorn (blocks until shutdown)."""
        app = self.app or self.create_application()
        logger.info(f"Serving routes of {self.resolver.pages_dir} on http://{self.host}:{self.port}")
        uvicorn.run(app, host=self.host, port=self.port, log_level="info")

