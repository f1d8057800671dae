"""
FastAPI surface serving the organization graph to the browser map.
"""

import logging
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, load_settings
from .errors import SourceUnavailable
from .notion_client import NotionClient
from .phases.assembly import utc_timestamp
from .service import build_graph

logger = logging.getLogger(__name__)

SERVICE_NAME = "VdL Farm OrgMap API"

ClientFactory = Callable[[Settings], NotionClient]


def create_app(
    settings: Optional[Settings] = None,
    client_factory: Optional[ClientFactory] = None,
) -> FastAPI:
    settings = settings or load_settings()
    client_factory = client_factory or NotionClient

    app = FastAPI(title=SERVICE_NAME)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET"],
    )

    @app.get("/")
    async def index() -> dict:
        return {
            "service": SERVICE_NAME,
            "status": "running",
            "endpoints": {
                "/api/graph": "GET - graph data",
                "/api/health": "GET - health check",
            },
        }

    @app.get("/api/graph")
    async def get_graph() -> JSONResponse:
        try:
            async with client_factory(settings) as client:
                graph = await build_graph(client, settings)
        except SourceUnavailable as exc:
            logger.error("Graph build failed: %s", exc)
            return JSONResponse(
                status_code=500,
                content={"error": "Failed to fetch graph data", "message": str(exc)},
            )
        return JSONResponse(
            content=graph,
            headers={"Cache-Control": f"public, max-age={settings.cache_max_age}"},
        )

    @app.get("/api/health")
    async def health() -> JSONResponse:
        try:
            async with client_factory(settings) as client:
                connected = await client.check_health()
        except SourceUnavailable as exc:
            logger.warning("Health check failed: %s", exc)
            return JSONResponse(status_code=500, content={"status": "unhealthy", "error": str(exc)})
        return JSONResponse(
            content={
                "status": "healthy",
                "notion": "connected" if connected else "error",
                "timestamp": utc_timestamp(),
            }
        )

    return app
