"""
catalog_api.web - FastAPI plumbing: dependencies, middleware, exception handlers.

Mirrors catalog_api.http for the long-running HTTP server so both surfaces
produce the same envelopes.
"""

from __future__ import annotations

import json
import time
import uuid
from typing import Any

from aws_lambda_powertools import Logger
from fastapi import Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from catalog_api.config import get_settings
from catalog_api.context import RequestContext, resolve_locale, resolve_tenant_id
from catalog_api.envelope import ApiResponse, dumps, error_response, unexpected_error_response
from catalog_api.errors import ApiError
from catalog_api.messages import CommonMessages

logger = Logger(service="catalog-api")

REQUEST_ID_HEADER = "X-Request-Id"


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def render(response: ApiResponse) -> Response:
    return Response(
        content=dumps(response.body),
        status_code=response.status_code,
        media_type="application/json",
        headers=response.headers or None,
    )


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------


def request_context(request: Request) -> RequestContext:
    """Resolve locale, tenant and request id. Raises ApiError(TENANT_REQUIRED)."""
    locale = resolve_locale(request.headers)
    tenant_id = resolve_tenant_id(request.headers, locale, get_settings())
    return RequestContext(tenant_id=tenant_id, locale=locale, request_id=_request_id(request))


async def json_body(request: Request) -> Any:
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise ApiError(CommonMessages.INVALID_JSON, resolve_locale(request.headers)) from exc


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------


class RequestIdMiddleware(BaseHTTPMiddleware):
    """
    Accepts an inbound X-Request-Id (if present) or generates a UUIDv4,
    stores it in request.state.request_id and echoes it on the response.
    """

    async def dispatch(self, request: Request, call_next):
        inbound = request.headers.get("x-request-id")
        request_id = (inbound.strip() if inbound else "") or str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """
    Renders the generic 500 envelope for exceptions escaping the routes.

    Runs inside RequestIdMiddleware and CORSMiddleware so the 500 still
    carries X-Request-Id and the CORS headers.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unexpected error while handling request", path=request.url.path)
            return render(unexpected_error_response(_request_id(request)))


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Structured access log line for every request."""

    def __init__(self, app, *, exclude_paths: set[str] | None = None):
        super().__init__(app)
        self._exclude = exclude_paths or set()

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if path in self._exclude:
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "request",
            http_method=request.method.upper(),
            path=path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000.0, 2),
            request_id=_request_id(request),
        )
        return response


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------


async def api_error_handler(request: Request, exc: ApiError) -> Response:
    return render(error_response(exc, _request_id(request)))


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code != 404:
        return await http_exception_handler(request, exc)
    error = ApiError(
        CommonMessages.ROUTE_NOT_FOUND,
        resolve_locale(request.headers),
        {"path": request.url.path},
    )
    return render(error_response(error, _request_id(request)))


async def unexpected_error_handler(request: Request, exc: Exception) -> Response:
    """Last resort for failures raised by the middleware itself."""
    logger.exception("Unexpected error while handling request", path=request.url.path)
    return render(unexpected_error_response(_request_id(request)))
