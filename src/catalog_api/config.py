"""
catalog_api.config - Environment-driven settings.

Read once per cold start; tests call get_settings.cache_clear() after
changing the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


def _split_csv(value: str | None) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(part.strip() for part in value.split(",") if part.strip())


def _api_root(value: str) -> str:
    path = value.strip().strip("/")
    return f"/{path}" if path else ""


def _str_or_none(value: str | None) -> str | None:
    if value is None:
        return None
    text = value.strip()
    return text or None


@dataclass(frozen=True)
class Settings:
    app_name: str
    api_root: str
    cors_origins: tuple[str, ...]
    log_level: str
    aws_region: str
    dynamodb_endpoint: str | None
    catalog_table: str
    default_tenant_id: str | None
    tenant_header_name: str

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            app_name=os.environ.get("APP_NAME", "catalog-api"),
            api_root=_api_root(os.environ.get("API_ROOT", "/api/v1")),
            cors_origins=_split_csv(os.environ.get("CORS_ORIGINS", "*")),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            aws_region=os.environ.get("AWS_REGION", "us-east-1"),
            dynamodb_endpoint=_str_or_none(os.environ.get("AWS_DYNAMODB_ENDPOINT")),
            catalog_table=os.environ.get("CATALOG_TABLE_NAME", "media-catalog"),
            default_tenant_id=_str_or_none(os.environ.get("DEFAULT_TENANT_ID")),
            tenant_header_name=os.environ.get("TENANT_HEADER_NAME", "x-tenant-id"),
        )

    @property
    def allowed_origins(self) -> tuple[str, ...]:
        return self.cors_origins or ("*",)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
