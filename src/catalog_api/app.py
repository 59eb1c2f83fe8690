"""
catalog_api.app - FastAPI application for running the catalog outside Lambda.

Same validation, services and envelopes as the Lambda handlers; only the
transport differs.
"""

from __future__ import annotations

import time

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api.artists.router import router as artists_router
from catalog_api.config import Settings, get_settings
from catalog_api.errors import ApiError
from catalog_api.genres.router import router as genres_router
from catalog_api.http import CORS_ALLOW_METHODS, allowed_request_headers
from catalog_api.web import (
    REQUEST_ID_HEADER,
    AccessLogMiddleware,
    RequestIdMiddleware,
    UnhandledErrorMiddleware,
    api_error_handler,
    not_found_handler,
    unexpected_error_handler,
)

HEALTH_PATH = "/health"


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    started = time.monotonic()

    app = FastAPI(title=settings.app_name)

    # Starlette runs the last added middleware first.
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(AccessLogMiddleware, exclude_paths={HEALTH_PATH})
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=CORS_ALLOW_METHODS.split(","),
        allow_headers=allowed_request_headers(settings),
        expose_headers=[REQUEST_ID_HEADER],
    )

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    @app.get(HEALTH_PATH)
    def health() -> dict:
        return {
            "status": "ok",
            "uptime": round(time.monotonic() - started, 3),
            "timestamp": int(time.time() * 1000),
            "service": settings.app_name,
        }

    app.include_router(genres_router, prefix=settings.api_root)
    app.include_router(artists_router, prefix=settings.api_root)
    return app


app = create_app()
