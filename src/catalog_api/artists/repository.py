"""Artist persistence over the tenant-scoped catalog table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from boto3.dynamodb.conditions import Attr, Key
from catalog_data import ArtistRecord, TenantContext, TenantScopedDynamoDB
from catalog_data.expressions import UpdateField, build_update_expression
from catalog_data.models import ARTIST_PREFIX, artist_sk, iso_timestamp, now_utc, tenant_pk

from catalog_api.artists.schemas import ArtistCreate, ArtistUpdate


@dataclass(frozen=True)
class ArtistPage:
    items: list[ArtistRecord] = field(default_factory=list)
    last_evaluated_key: dict[str, Any] | None = None


class ArtistRepository:
    def __init__(
        self,
        *,
        table_name: str,
        dynamodb_resource: Any,
        cloudwatch_client: Any = None,
        clock: Callable[[], datetime] = now_utc,
    ) -> None:
        self._table_name = table_name
        self._dynamodb = dynamodb_resource
        self._cloudwatch = cloudwatch_client
        self._clock = clock

    def _db(self, tenant_id: str) -> TenantScopedDynamoDB:
        return TenantScopedDynamoDB(
            TenantContext(tenant_id=tenant_id),
            self._table_name,
            dynamodb_resource=self._dynamodb,
            cloudwatch_client=self._cloudwatch,
        )

    @staticmethod
    def _key(tenant_id: str, artist_id: str) -> dict[str, str]:
        return {"PK": tenant_pk(tenant_id), "SK": artist_sk(artist_id)}

    def list_artists(
        self,
        tenant_id: str,
        *,
        limit: int | None = None,
        exclusive_start_key: dict[str, Any] | None = None,
        is_active: bool | None = None,
    ) -> ArtistPage:
        """Artists of a tenant in sort-key (id) order, optionally filtered on IsActive.

        The filter runs after Limit is applied, so a page may hold fewer
        than limit items while a next cursor is still returned.
        """
        filter_expression = None
        if is_active is not None:
            filter_expression = Attr("IsActive").eq(is_active)
        page = self._db(tenant_id).query(
            sk_condition=Key("SK").begins_with(ARTIST_PREFIX),
            filter_expression=filter_expression,
            limit=limit,
            exclusive_start_key=exclusive_start_key,
        )
        return ArtistPage(
            items=[ArtistRecord.from_item(item) for item in page.items],
            last_evaluated_key=page.last_evaluated_key,
        )

    def find_by_id(self, tenant_id: str, artist_id: str) -> ArtistRecord | None:
        item = self._db(tenant_id).get_item(self._key(tenant_id, artist_id))
        return ArtistRecord.from_item(item) if item else None

    def create_artist(self, tenant_id: str, payload: ArtistCreate) -> ArtistRecord:
        now = iso_timestamp(self._clock())
        record = ArtistRecord(
            artist_id=payload.id,
            tenant_id=tenant_id,
            first_name=payload.first_name,
            last_name=payload.last_name,
            is_active=payload.is_active,
            created_at=now,
            updated_at=now,
        )
        self._db(tenant_id).put_item(
            record.to_item(),
            condition_expression="attribute_not_exists(PK)",
        )
        return record

    def update_artist(self, tenant_id: str, artist_id: str, payload: ArtistUpdate) -> ArtistRecord:
        update = build_update_expression(
            [
                UpdateField("firstName", "FirstName", payload.first_name),
                UpdateField("lastName", "LastName", payload.last_name),
                UpdateField("isActive", "IsActive", payload.is_active),
            ],
            updated_at=iso_timestamp(self._clock()),
        )
        attributes = self._db(tenant_id).update_item(
            self._key(tenant_id, artist_id),
            update.expression,
            update.values,
            expression_attribute_names=update.names,
            condition_expression="attribute_exists(PK)",
        )
        return ArtistRecord.from_item(attributes)

    def delete_artist(self, tenant_id: str, artist_id: str) -> None:
        self._db(tenant_id).delete_item(
            self._key(tenant_id, artist_id),
            condition_expression="attribute_exists(PK)",
        )
