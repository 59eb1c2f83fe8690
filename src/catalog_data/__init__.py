"""
catalog_data - Tenant-scoped DynamoDB access for the media catalog table.

The only permitted way for handlers and repositories to touch the catalog
table. Every key is checked against the caller's tenant partition.
"""

from catalog_data.client import QueryPage, TenantScopedDynamoDB
from catalog_data.cursor import CursorCodec, json_default
from catalog_data.exceptions import (
    InvalidCursorError,
    TenantAccessViolation,
    is_conditional_check_failure,
)
from catalog_data.models import ArtistRecord, GenreRecord, TenantContext

__all__ = [
    "ArtistRecord",
    "CursorCodec",
    "GenreRecord",
    "InvalidCursorError",
    "QueryPage",
    "TenantAccessViolation",
    "TenantContext",
    "TenantScopedDynamoDB",
    "is_conditional_check_failure",
    "json_default",
]
