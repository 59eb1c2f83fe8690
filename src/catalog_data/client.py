"""
catalog_data.client - TenantScopedDynamoDB.

Enforces the tenant partition on every DynamoDB operation against the
catalog table. Raises TenantAccessViolation on any cross-tenant access attempt.

Security guarantees:
  - Any PK prefixed with TENANT# must equal TENANT#{tenant_id}.
  - Query partition keys are always forced to the caller's partition.
  - A query's ExclusiveStartKey (decoded from a client cursor) is checked
    like any other key.
  - On violation: log with tenant ids, emit CW metric, raise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import ConditionBase, Key

from catalog_data.exceptions import TenantAccessViolation
from catalog_data.models import TENANT_PREFIX, TenantContext, tenant_pk

logger = Logger(service="catalog-data")

_METRIC_NAMESPACE = "catalog/security"


# ---------------------------------------------------------------------------
# Internal helper - metric emission
# ---------------------------------------------------------------------------


def _emit_tenant_violation_metric(
    cloudwatch_client: Any,
    *,
    caller_tenant_id: str,
    target_tenant_id: str,
) -> None:
    """Publish a TenantAccessViolation count metric to CloudWatch.

    Never raises. Metric emission failure must not suppress the exception.
    """
    if cloudwatch_client is None:
        return
    try:
        cloudwatch_client.put_metric_data(
            Namespace=_METRIC_NAMESPACE,
            MetricData=[
                {
                    "MetricName": "TenantAccessViolation",
                    "Value": 1,
                    "Unit": "Count",
                    "Dimensions": [
                        {"Name": "caller_tenant_id", "Value": caller_tenant_id},
                        {"Name": "target_tenant_id", "Value": target_tenant_id},
                    ],
                }
            ],
        )
    except Exception:
        logger.exception(
            "Failed to emit TenantAccessViolation metric",
            caller_tenant_id=caller_tenant_id,
            target_tenant_id=target_tenant_id,
        )


@dataclass(frozen=True)
class QueryPage:
    """One page of query results plus the store's pagination token."""

    items: list[dict[str, Any]] = field(default_factory=list)
    last_evaluated_key: dict[str, Any] | None = None


# ---------------------------------------------------------------------------
# TenantScopedDynamoDB
# ---------------------------------------------------------------------------


class TenantScopedDynamoDB:
    """
    DynamoDB client scoped to a single tenant partition of one table.

    The table uses "PK"/"SK" key attributes (single-table design). Conditional
    write failures are not translated here; callers receive botocore's
    ClientError with code ConditionalCheckFailedException.
    """

    def __init__(
        self,
        context: TenantContext,
        table_name: str,
        *,
        dynamodb_resource: Any,
        cloudwatch_client: Any = None,
    ) -> None:
        self._tenant_id = context.tenant_id
        self._table = dynamodb_resource.Table(table_name)
        self._cloudwatch = cloudwatch_client

    @property
    def tenant_id(self) -> str:
        return self._tenant_id

    @property
    def partition_key(self) -> str:
        return tenant_pk(self._tenant_id)

    def _validate_pk(self, key: dict[str, Any]) -> None:
        """Raise TenantAccessViolation if a TENANT#-prefixed PK doesn't match caller."""
        pk = key.get("PK", "")
        if isinstance(pk, str) and pk.startswith(TENANT_PREFIX):
            if pk != self.partition_key:
                self._raise_violation(
                    target_tenant_id=pk.removeprefix(TENANT_PREFIX),
                    attempted_key=repr(key),
                )

    def _raise_violation(self, *, target_tenant_id: str, attempted_key: str) -> None:
        """Log, emit metric, then raise TenantAccessViolation. Never returns."""
        logger.error(
            "TenantAccessViolation: cross-tenant DynamoDB access attempt",
            tenant_id=self._tenant_id,
            caller_tenant_id=self._tenant_id,
            target_tenant_id=target_tenant_id,
            attempted_key=attempted_key,
        )
        _emit_tenant_violation_metric(
            self._cloudwatch,
            caller_tenant_id=self._tenant_id,
            target_tenant_id=target_tenant_id,
        )
        raise TenantAccessViolation(
            tenant_id=target_tenant_id,
            caller_tenant_id=self._tenant_id,
            attempted_key=attempted_key,
        )

    def get_item(self, key: dict[str, Any]) -> dict[str, Any] | None:
        """Get a single item, enforcing tenant partition on PK.

        Returns the item dict, or None if the item does not exist.
        """
        self._validate_pk(key)
        response = self._table.get_item(Key=key)
        return response.get("Item")

    def put_item(self, item: dict[str, Any], *, condition_expression: str | None = None) -> None:
        """Write an item, enforcing tenant partition on PK."""
        self._validate_pk(item)
        kwargs: dict[str, Any] = {"Item": item}
        if condition_expression is not None:
            kwargs["ConditionExpression"] = condition_expression
        self._table.put_item(**kwargs)

    def update_item(
        self,
        key: dict[str, Any],
        update_expression: str,
        expression_attribute_values: dict[str, Any],
        *,
        expression_attribute_names: dict[str, str] | None = None,
        condition_expression: str | None = None,
    ) -> dict[str, Any]:
        """Update an item, enforcing tenant partition on PK.

        Returns the updated item (ReturnValues=ALL_NEW).
        """
        self._validate_pk(key)
        kwargs: dict[str, Any] = {
            "Key": key,
            "UpdateExpression": update_expression,
            "ExpressionAttributeValues": expression_attribute_values,
            "ReturnValues": "ALL_NEW",
        }
        if expression_attribute_names is not None:
            kwargs["ExpressionAttributeNames"] = expression_attribute_names
        if condition_expression is not None:
            kwargs["ConditionExpression"] = condition_expression
        response = self._table.update_item(**kwargs)
        return response.get("Attributes", {})

    def delete_item(self, key: dict[str, Any], *, condition_expression: str | None = None) -> None:
        """Delete an item, enforcing tenant partition on PK."""
        self._validate_pk(key)
        kwargs: dict[str, Any] = {"Key": key}
        if condition_expression is not None:
            kwargs["ConditionExpression"] = condition_expression
        self._table.delete_item(**kwargs)

    def query(
        self,
        *,
        sk_condition: ConditionBase | None = None,
        filter_expression: ConditionBase | None = None,
        index_name: str | None = None,
        limit: int | None = None,
        scan_index_forward: bool = True,
        exclusive_start_key: dict[str, Any] | None = None,
    ) -> QueryPage:
        """Query the caller's tenant partition.

        The PK is always forced to TENANT#{tenant_id}. An optional sort key
        condition is ANDed onto the key condition; on an index it applies to
        the index's range key.
        """
        pk_condition = Key("PK").eq(self.partition_key)
        key_condition = pk_condition & sk_condition if sk_condition is not None else pk_condition

        kwargs: dict[str, Any] = {
            "KeyConditionExpression": key_condition,
            "ScanIndexForward": scan_index_forward,
        }
        if filter_expression is not None:
            kwargs["FilterExpression"] = filter_expression
        if index_name is not None:
            kwargs["IndexName"] = index_name
        if limit is not None:
            kwargs["Limit"] = limit
        if exclusive_start_key is not None:
            self._validate_pk(exclusive_start_key)
            kwargs["ExclusiveStartKey"] = exclusive_start_key

        response = self._table.query(**kwargs)
        return QueryPage(
            items=response.get("Items", []),
            last_evaluated_key=response.get("LastEvaluatedKey"),
        )
