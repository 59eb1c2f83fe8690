"""
catalog_api.clients - Lazily created boto3 clients.

Module-level globals give connection reuse across warm Lambda starts.
"""

from __future__ import annotations

from typing import Any

import boto3

from catalog_api.config import get_settings

_dynamodb_resource = None
_cloudwatch_client = None


def get_dynamodb() -> Any:
    """Lazy initialization of the DynamoDB resource.

    AWS_DYNAMODB_ENDPOINT points the resource at DynamoDB Local.
    """
    global _dynamodb_resource
    if _dynamodb_resource is None:
        settings = get_settings()
        _dynamodb_resource = boto3.resource(
            "dynamodb",
            region_name=settings.aws_region,
            endpoint_url=settings.dynamodb_endpoint,
        )
    return _dynamodb_resource


def get_cloudwatch() -> Any:
    global _cloudwatch_client
    if _cloudwatch_client is None:
        _cloudwatch_client = boto3.client("cloudwatch", region_name=get_settings().aws_region)
    return _cloudwatch_client


def reset_clients() -> None:
    global _dynamodb_resource, _cloudwatch_client
    _dynamodb_resource = None
    _cloudwatch_client = None
