"""Genre persistence over the tenant-scoped catalog table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from boto3.dynamodb.conditions import Attr
from catalog_data import GenreRecord, TenantContext, TenantScopedDynamoDB
from catalog_data.expressions import UpdateField, build_update_expression
from catalog_data.models import (
    DISPLAY_ORDER_INDEX,
    EntityType,
    genre_sk,
    iso_timestamp,
    now_utc,
    tenant_pk,
)

from catalog_api.genres.schemas import GenreCreate, GenreUpdate


@dataclass(frozen=True)
class GenrePage:
    items: list[GenreRecord] = field(default_factory=list)
    last_evaluated_key: dict[str, Any] | None = None


class GenreRepository:
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
    def _key(tenant_id: str, genre_id: str) -> dict[str, str]:
        return {"PK": tenant_pk(tenant_id), "SK": genre_sk(genre_id)}

    def list_genres(
        self,
        tenant_id: str,
        *,
        limit: int | None = None,
        exclusive_start_key: dict[str, Any] | None = None,
    ) -> GenrePage:
        """Genres of a tenant in ascending displayOrder."""
        page = self._db(tenant_id).query(
            index_name=DISPLAY_ORDER_INDEX,
            filter_expression=Attr("EntityType").eq(EntityType.GENRE.value),
            limit=limit,
            exclusive_start_key=exclusive_start_key,
        )
        return GenrePage(
            items=[GenreRecord.from_item(item) for item in page.items],
            last_evaluated_key=page.last_evaluated_key,
        )

    def find_by_id(self, tenant_id: str, genre_id: str) -> GenreRecord | None:
        item = self._db(tenant_id).get_item(self._key(tenant_id, genre_id))
        return GenreRecord.from_item(item) if item else None

    def create_genre(self, tenant_id: str, payload: GenreCreate) -> GenreRecord:
        now = iso_timestamp(self._clock())
        record = GenreRecord(
            genre_id=payload.id,
            tenant_id=tenant_id,
            texts=payload.texts,
            display_order=payload.display_order,
            created_at=now,
            updated_at=now,
        )
        self._db(tenant_id).put_item(
            record.to_item(),
            condition_expression="attribute_not_exists(PK)",
        )
        return record

    def update_genre(self, tenant_id: str, genre_id: str, payload: GenreUpdate) -> GenreRecord:
        update = build_update_expression(
            [
                UpdateField("texts", "Texts", payload.texts),
                UpdateField("displayOrder", "DisplayOrder", payload.display_order),
            ],
            updated_at=iso_timestamp(self._clock()),
        )
        attributes = self._db(tenant_id).update_item(
            self._key(tenant_id, genre_id),
            update.expression,
            update.values,
            expression_attribute_names=update.names,
            condition_expression="attribute_exists(PK)",
        )
        return GenreRecord.from_item(attributes)

    def delete_genre(self, tenant_id: str, genre_id: str) -> None:
        self._db(tenant_id).delete_item(
            self._key(tenant_id, genre_id),
            condition_expression="attribute_exists(PK)",
        )
