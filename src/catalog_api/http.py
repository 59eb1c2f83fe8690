"""
catalog_api.http - API Gateway (HTTP API, payload v2) handler plumbing.

create_handler wraps a handler's logic with:
  - locale / tenant / request id resolution,
  - ApiError -> error envelope, anything else -> logged generic 500,
  - Content-Type and CORS headers on every response.

REST API (payload v1) events are tolerated: headers, pathParameters,
queryStringParameters and requestContext.requestId have the same shape.
"""

from __future__ import annotations

import base64
import binascii
import json
from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from typing import Any

from aws_lambda_powertools import Logger
from aws_lambda_powertools.logging import correlation_paths

from catalog_api.config import Settings, get_settings
from catalog_api.context import get_header, resolve_locale, resolve_tenant_id
from catalog_api.envelope import (
    ApiResponse,
    dumps,
    error_response,
    unexpected_error_response,
)
from catalog_api.errors import ApiError
from catalog_api.messages import CommonMessages

CORS_ALLOW_METHODS = "GET,POST,PUT,PATCH,DELETE,OPTIONS"


@dataclass(frozen=True)
class HandlerContext:
    event: dict[str, Any]
    tenant_id: str
    locale: str
    request_id: str | None = None

    @property
    def path_id(self) -> Any:
        path_params = self.event.get("pathParameters") or {}
        if not isinstance(path_params, dict):
            return None
        return path_params.get("id")

    @property
    def query(self) -> dict[str, Any]:
        params = self.event.get("queryStringParameters") or {}
        return dict(params) if isinstance(params, dict) else {}


HandlerLogic = Callable[[HandlerContext], ApiResponse]
LambdaHandler = Callable[[dict[str, Any], Any], dict[str, Any]]


def _request_id(event: dict[str, Any]) -> str | None:
    request_context = event.get("requestContext") or {}
    if not isinstance(request_context, dict):
        return None
    value = request_context.get("requestId")
    return str(value) if value else None


def parse_json_body(event: dict[str, Any], locale: str) -> Any:
    """Return the decoded JSON body, or None when the request has no body.

    Raises ApiError(INVALID_JSON) for undecodable payloads.
    """
    raw_body = event.get("body")
    if not raw_body:
        return None
    try:
        if event.get("isBase64Encoded"):
            raw_body = base64.b64decode(raw_body).decode("utf-8")
        return json.loads(raw_body) if raw_body else None
    except (binascii.Error, UnicodeDecodeError, ValueError) as exc:
        raise ApiError(CommonMessages.INVALID_JSON, locale) from exc


def cors_headers(headers: dict[str, Any] | None, settings: Settings) -> dict[str, str]:
    allowed_origins = settings.allowed_origins
    request_origin = get_header(headers, "origin")
    result = {
        "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
        "Access-Control-Allow-Headers": ",".join(allowed_request_headers(settings)),
        "Access-Control-Allow-Credentials": "true",
    }
    if "*" in allowed_origins:
        result["Access-Control-Allow-Origin"] = request_origin or "*"
    elif request_origin and request_origin in allowed_origins:
        result["Access-Control-Allow-Origin"] = request_origin
    return result


def allowed_request_headers(settings: Settings) -> list[str]:
    return ["Content-Type", "Authorization", settings.tenant_header_name, "x-culture"]


def format_result(event: dict[str, Any], response: ApiResponse) -> dict[str, Any]:
    headers = {
        "Content-Type": "application/json",
        **cors_headers(event.get("headers"), get_settings()),
        **response.headers,
    }
    return {
        "statusCode": response.status_code,
        "headers": headers,
        "body": dumps(response.body),
    }


def create_handler(logger: Logger) -> Callable[[HandlerLogic], LambdaHandler]:
    """Decorator turning handler logic into a Lambda entry point."""

    def decorator(logic: HandlerLogic) -> LambdaHandler:
        @wraps(logic)
        @logger.inject_lambda_context(
            correlation_id_path=correlation_paths.API_GATEWAY_HTTP,
            clear_state=True,
        )
        def handler(event: dict[str, Any], _context: Any) -> dict[str, Any]:
            request_id = _request_id(event)
            headers = event.get("headers")
            try:
                locale = resolve_locale(headers)
                tenant_id = resolve_tenant_id(headers, locale, get_settings())
                logger.append_keys(tenant_id=tenant_id)
                response = logic(
                    HandlerContext(
                        event=event,
                        tenant_id=tenant_id,
                        locale=locale,
                        request_id=request_id,
                    )
                )
                response.body["requestId"] = response.body.get("requestId") or request_id
            except ApiError as exc:
                logger.info(
                    "Request rejected",
                    code=exc.code,
                    class_id=exc.class_id,
                    status_code=exc.status_code,
                )
                response = error_response(exc, request_id)
            except Exception:
                logger.exception("Unexpected error while handling request")
                response = unexpected_error_response(request_id)
            return format_result(event, response)

        return handler

    return decorator
