"""
catalog_data.exceptions - Tenant isolation and cursor exceptions.
"""

from __future__ import annotations

from botocore.exceptions import ClientError

CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"


class TenantAccessViolation(Exception):
    """
    Raised when an operation attempts to access data outside the caller's tenant partition.

    Every TenantAccessViolation is logged with tenant_id and caller_tenant_id and
    emits a CloudWatch metric: namespace=catalog/security, name=TenantAccessViolation.

    Attributes:
        tenant_id:        Tenant whose data was protected (the access target).
        caller_tenant_id: Tenant that attempted the cross-tenant access.
        attempted_key:    The DynamoDB key dict repr that was attempted.
    """

    def __init__(self, *, tenant_id: str, caller_tenant_id: str, attempted_key: str) -> None:
        self.tenant_id = tenant_id
        self.caller_tenant_id = caller_tenant_id
        self.attempted_key = attempted_key
        super().__init__(
            f"Tenant {caller_tenant_id!r} attempted to access {attempted_key!r} "
            f"belonging to tenant {tenant_id!r}"
        )


class InvalidCursorError(ValueError):
    """Raised when a pagination cursor cannot be decoded."""


def is_conditional_check_failure(exc: BaseException) -> bool:
    """True if exc is a DynamoDB conditional write rejection."""
    if not isinstance(exc, ClientError):
        return False
    return exc.response.get("Error", {}).get("Code") == CONDITIONAL_CHECK_FAILED
