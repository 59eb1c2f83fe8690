"""
catalog_api.envelope - Success and error response envelopes.

Success: {success, code, message, classId, locale, requestId, data}
Error:   {success, code, message, classId, locale, requestId, details}

Both the Lambda handlers and the HTTP app render through this module so the
two surfaces stay byte-compatible.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from catalog_data import json_default

from catalog_api.errors import ApiError
from catalog_api.messages import MessageDefinition
from catalog_api.translator import DEFAULT_LOCALE, translate

UNEXPECTED_ERROR_CODE = 9999


@dataclass
class ApiResponse:
    status_code: int
    body: dict[str, Any]
    headers: dict[str, str] = field(default_factory=dict)


def ok(
    definition: MessageDefinition,
    locale: str,
    data: Any = None,
    request_id: str | None = None,
    headers: dict[str, str] | None = None,
) -> ApiResponse:
    body: dict[str, Any] = {
        "success": True,
        "code": definition.code,
        "message": translate(definition.i18n_key, locale),
        "classId": definition.class_id,
        "locale": locale,
        "requestId": request_id,
    }
    if data is not None:
        body["data"] = data
    return ApiResponse(status_code=definition.http_status, body=body, headers=dict(headers or {}))


def error_response(exc: ApiError, request_id: str | None) -> ApiResponse:
    body: dict[str, Any] = {
        "success": False,
        "code": exc.code,
        "message": exc.message,
        "classId": exc.class_id,
        "locale": exc.locale,
        "requestId": request_id,
    }
    if exc.details is not None:
        body["details"] = exc.details
    return ApiResponse(status_code=exc.status_code, body=body)


def unexpected_error_response(request_id: str | None) -> ApiResponse:
    """Generic 500. Never carries the underlying exception text."""
    return ApiResponse(
        status_code=500,
        body={
            "success": False,
            "code": UNEXPECTED_ERROR_CODE,
            "message": "Internal server error",
            "classId": "Unknown",
            "locale": DEFAULT_LOCALE,
            "requestId": request_id,
        },
    )


def dumps(body: dict[str, Any]) -> str:
    return json.dumps(body, default=json_default, ensure_ascii=False)
