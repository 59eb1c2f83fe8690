"""
setup_catalog_table.py - Create the catalog table with its display-order index.

Idempotent: an existing table is left untouched.

Usage:
    python scripts/setup_catalog_table.py [--table media-catalog]

Honours AWS_REGION and AWS_DYNAMODB_ENDPOINT (DynamoDB Local).
"""

from __future__ import annotations

import argparse
import logging
from typing import Any

import boto3
from botocore.exceptions import ClientError

from catalog_api.config import get_settings
from catalog_data.models import DISPLAY_ORDER_INDEX

logger = logging.getLogger("setup_catalog_table")
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)


def table_exists(client: Any, table_name: str) -> bool:
    try:
        client.describe_table(TableName=table_name)
    except ClientError as exc:
        if (exc.response.get("Error") or {}).get("Code") == "ResourceNotFoundException":
            return False
        raise
    return True


def ensure_table(client: Any, table_name: str) -> bool:
    """Create the table unless it exists. Returns True when it was created."""
    if table_exists(client, table_name):
        logger.info("Table %s already exists, skipping creation", table_name)
        return False

    client.create_table(
        TableName=table_name,
        AttributeDefinitions=[
            {"AttributeName": "PK", "AttributeType": "S"},
            {"AttributeName": "SK", "AttributeType": "S"},
            {"AttributeName": "DisplayOrder", "AttributeType": "N"},
        ],
        KeySchema=[
            {"AttributeName": "PK", "KeyType": "HASH"},
            {"AttributeName": "SK", "KeyType": "RANGE"},
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
    logger.info("Table %s created with %s", table_name, DISPLAY_ORDER_INDEX)
    return True


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create the catalog DynamoDB table")
    parser.add_argument("--table", default=None, help="Table name (default: CATALOG_TABLE_NAME)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    client = boto3.client(
        "dynamodb",
        region_name=settings.aws_region,
        endpoint_url=settings.dynamodb_endpoint,
    )
    try:
        ensure_table(client, args.table or settings.catalog_table)
    except ClientError as exc:
        logger.error("Failed to create catalog table: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
