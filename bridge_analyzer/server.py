"""HTTP front end: Starlette app served by Uvicorn."""

from __future__ import annotations

import json
import logging

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from .graph import analyze
from .models import AnalysisRequest, InvalidRequestError

logger = logging.getLogger(__name__)

ANALYZE_PATH = "/api/bridge/analyze"
HEALTH_PATH = "/api/health"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def analyze_endpoint(request: Request) -> Response:
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    try:
        payload = await request.json()
        analysis_request = AnalysisRequest.from_dict(payload)
    except (json.JSONDecodeError, UnicodeDecodeError, InvalidRequestError) as exc:
        logger.debug("Rejected analyze request: %s", exc)
        return JSONResponse({"error": "Invalid request body"}, status_code=400, headers=CORS_HEADERS)

    result = await run_in_threadpool(analyze, analysis_request)
    return JSONResponse(result.to_dict(), headers=CORS_HEADERS)


async def health_endpoint(request: Request) -> Response:
    return JSONResponse({"status": "ok"})


def create_app() -> Starlette:
    """Create the Starlette ASGI application."""
    return Starlette(
        routes=[
            Route(ANALYZE_PATH, analyze_endpoint, methods=["POST", "OPTIONS"]),
            Route(HEALTH_PATH, health_endpoint, methods=["GET"]),
        ],
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=["*"],
                allow_methods=["POST", "OPTIONS"],
                allow_headers=["Content-Type"],
            ),
        ],
    )


def run(host: str, port: int, log_level: str = "info") -> None:
    import uvicorn

    logger.info("Bridge analyzer server starting on %s:%d", host, port)
    uvicorn.run(create_app(), host=host, port=port, log_level=log_level)
