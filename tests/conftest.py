"""Shared fixtures: AWS test env, a moto catalog table, API Gateway event builders."""

from __future__ import annotations

import json
from collections.abc import Iterator
from datetime import UTC, datetime
from typing import Any

import boto3
import pytest
from moto import mock_aws

from catalog_api import clients
from catalog_api.artists import service as artist_service_module
from catalog_api.config import get_settings
from catalog_api.genres import service as genre_service_module
from catalog_data.models import DISPLAY_ORDER_INDEX

REGION = "us-east-1"
TABLE_NAME = "media-catalog-test"
TENANT_ID = "tenant-a"
OTHER_TENANT_ID = "tenant-b"
FIXED_NOW = datetime(2026, 3, 1, 9, 30, 0, 123000, tzinfo=UTC)


@pytest.fixture(autouse=True)
def aws_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Minimal AWS env for moto plus a clean settings/client cache per test."""
    monkeypatch.setenv("AWS_REGION", REGION)
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("CATALOG_TABLE_NAME", TABLE_NAME)
    monkeypatch.setenv("POWERTOOLS_SERVICE_NAME", "catalog-tests")
    for name in (
        "DEFAULT_TENANT_ID",
        "TENANT_HEADER_NAME",
        "AWS_DYNAMODB_ENDPOINT",
        "API_ROOT",
        "PORT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(genre_service_module, "_default_service", None)
    monkeypatch.setattr(artist_service_module, "_default_service", None)
    get_settings.cache_clear()
    clients.reset_clients()
    yield
    get_settings.cache_clear()
    clients.reset_clients()


def create_catalog_table(dynamodb: Any, table_name: str = TABLE_NAME) -> Any:
    return dynamodb.create_table(
        TableName=table_name,
        KeySchema=[
            {"AttributeName": "PK", "KeyType": "HASH"},
            {"AttributeName": "SK", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "PK", "AttributeType": "S"},
            {"AttributeName": "SK", "AttributeType": "S"},
            {"AttributeName": "DisplayOrder", "AttributeType": "N"},
        ],
        LocalSecondaryIndexes=[
            {
                "IndexName": DISPLAY_ORDER_INDEX,
                "KeySchema": [
                    {"AttributeName": "PK", "KeyType": "HASH"},
                    {"AttributeName": "DisplayOrder", "KeyType": "RANGE"},
                ],
                "Projection": {"ProjectionType": "ALL"},
            }
        ],
        BillingMode="PAY_PER_REQUEST",
    )


@pytest.fixture
def dynamodb() -> Iterator[Any]:
    """A moto DynamoDB resource holding an empty catalog table."""
    with mock_aws():
        resource = boto3.resource("dynamodb", region_name=REGION)
        create_catalog_table(resource)
        yield resource


@pytest.fixture
def fixed_clock() -> Any:
    return lambda: FIXED_NOW


class FakeLambdaContext:
    function_name = "catalog-api"
    memory_limit_in_mb = 256
    invoked_function_arn = "arn:aws:lambda:us-east-1:111111111111:function:catalog-api"
    aws_request_id = "lambda-req-1"


def api_event(
    *,
    method: str = "GET",
    path: str = "/",
    tenant_id: str | None = TENANT_ID,
    locale: str | None = None,
    path_id: str | None = None,
    query: dict[str, str] | None = None,
    body: Any = None,
    raw_body: str | None = None,
    request_id: str = "req-123",
    headers: dict[str, str] | None = None,
) -> dict[str, Any]:
    """API Gateway HTTP API (payload v2) event."""
    event_headers: dict[str, str] = {"content-type": "application/json"}
    if tenant_id is not None:
        event_headers["x-tenant-id"] = tenant_id
    if locale is not None:
        event_headers["x-culture"] = locale
    event_headers.update(headers or {})

    if raw_body is None and body is not None:
        raw_body = json.dumps(body)

    return {
        "version": "2.0",
        "routeKey": f"{method} {path}",
        "rawPath": path,
        "headers": event_headers,
        "queryStringParameters": query,
        "pathParameters": {"id": path_id} if path_id is not None else None,
        "body": raw_body,
        "isBase64Encoded": False,
        "requestContext": {
            "requestId": request_id,
            "http": {"method": method, "path": path},
        },
    }


def response_body(response: dict[str, Any]) -> dict[str, Any]:
    return json.loads(response["body"])
