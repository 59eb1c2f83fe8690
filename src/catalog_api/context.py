"""
catalog_api.context - Per-request tenant, locale and request id.

Shared by the Lambda handlers and the HTTP app so both resolve the caller
identically.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from catalog_api.config import Settings
from catalog_api.errors import ApiError
from catalog_api.messages import CommonMessages
from catalog_api.translator import DEFAULT_LOCALE

LOCALE_HEADER = "x-culture"


@dataclass(frozen=True)
class RequestContext:
    tenant_id: str
    locale: str
    request_id: str | None = None


def get_header(headers: Mapping[str, Any] | None, name: str) -> str | None:
    """Case-insensitive header lookup. Empty values count as absent."""
    if not headers:
        return None
    wanted = name.lower()
    for key, value in headers.items():
        if str(key).lower() == wanted:
            return str(value) if value else None
    return None


def resolve_locale(headers: Mapping[str, Any] | None) -> str:
    locale = get_header(headers, LOCALE_HEADER)
    return locale.strip() if locale and locale.strip() else DEFAULT_LOCALE


def resolve_tenant_id(headers: Mapping[str, Any] | None, locale: str, settings: Settings) -> str:
    """Tenant from the tenant header, else the configured default tenant.

    Raises ApiError(TENANT_REQUIRED) when neither yields a non-blank id.
    """
    header_name = settings.tenant_header_name
    tenant_id = (get_header(headers, header_name) or settings.default_tenant_id or "").strip()
    if not tenant_id:
        raise ApiError(CommonMessages.TENANT_REQUIRED, locale, {"header": header_name})
    return tenant_id
