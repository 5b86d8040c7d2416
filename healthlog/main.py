from __future__ import annotations

import logging
from typing import Any, Dict

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .platform.security import verify_api_key
from .routes.aggregates import router as aggregates_router
from .routes.analytics import router as analytics_router
from .routes.goals import router as goals_router
from .routes.logs import router as logs_router
from .routes.nutrition import router as nutrition_router

logger = logging.getLogger(__name__)

app: FastAPI = FastAPI(
    title="HealthLog Insights",
    version="2.0.0",
    description=(
        "Stores daily health logs and serves nutrition, streak, pattern and "
        "aggregate analytics derived from them"
    ),
)


@app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
@app.api_route("/healthz", methods=["GET", "HEAD"], include_in_schema=False)
async def healthz() -> dict[str, str]:
    """Lightweight endpoint used for health checks."""
    return {"status": "ok"}


@app.get("/v2/api-schema")
async def get_api_schema(request: Request, _: Any = Depends(verify_api_key)) -> JSONResponse:
    """Return the OpenAPI schema for this API version."""
    openapi_schema: Dict[str, Any] = request.app.openapi()
    return JSONResponse(openapi_schema)


@app.exception_handler(httpx.ConnectError)
@app.exception_handler(httpx.TimeoutException)
async def upstream_unavailable(request: Request, exc: httpx.TransportError) -> JSONResponse:
    """Turn an unreachable storage backend into a friendly 503."""

    try:
        host = exc.request.url.host
    except RuntimeError:
        host = None
    logger.exception(
        "Upstream %s unreachable while serving %s", host, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=503,
        content={
            "error": "UPSTREAM_CONNECTION_FAILED",
            "message": (
                "Could not connect to an upstream dependency service. "
                "Please try again shortly."
            ),
            "upstream_host": host,
        },
    )


for router in (
    logs_router,
    goals_router,
    nutrition_router,
    aggregates_router,
    analytics_router,
):
    app.include_router(router, prefix="/v2", dependencies=[Depends(verify_api_key)])
