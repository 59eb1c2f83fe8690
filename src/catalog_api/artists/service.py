"""Artist use cases: cursor handling and store-error translation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from botocore.exceptions import ClientError
from catalog_data import ArtistRecord, CursorCodec, TenantAccessViolation
from catalog_data.cursor import is_artist_start_key
from catalog_data.exceptions import is_conditional_check_failure

from catalog_api.artists.repository import ArtistRepository
from catalog_api.artists.schemas import ArtistCreate, ArtistListQuery, ArtistUpdate
from catalog_api.clients import get_cloudwatch, get_dynamodb
from catalog_api.config import get_settings
from catalog_api.errors import ApiError
from catalog_api.messages import ArtistMessages, CommonMessages


@dataclass(frozen=True)
class ArtistListResult:
    items: list[ArtistRecord] = field(default_factory=list)
    next_cursor: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": [artist.to_dict() for artist in self.items],
            "nextCursor": self.next_cursor,
        }


class ArtistService:
    def __init__(
        self,
        repository: ArtistRepository,
        cursor_codec: CursorCodec | None = None,
    ) -> None:
        self._repository = repository
        self._cursor_codec = cursor_codec or CursorCodec()

    def list_artists(self, tenant_id: str, query: ArtistListQuery, locale: str) -> ArtistListResult:
        start_key = self._cursor_codec.decode(
            query.cursor,
            lambda: ApiError(CommonMessages.INVALID_CURSOR, locale),
            accept=is_artist_start_key,
        )
        try:
            page = self._repository.list_artists(
                tenant_id,
                limit=query.limit,
                exclusive_start_key=start_key,
                is_active=query.is_active,
            )
        except TenantAccessViolation as exc:
            raise ApiError(CommonMessages.INVALID_CURSOR, locale) from exc
        return ArtistListResult(
            items=page.items,
            next_cursor=self._cursor_codec.encode(page.last_evaluated_key),
        )

    def get_artist(self, tenant_id: str, artist_id: str, locale: str) -> ArtistRecord:
        artist = self._repository.find_by_id(tenant_id, artist_id)
        if artist is None:
            raise ApiError(ArtistMessages.NOT_FOUND, locale, {"id": artist_id})
        return artist

    def create_artist(self, tenant_id: str, payload: ArtistCreate, locale: str) -> ArtistRecord:
        try:
            return self._repository.create_artist(tenant_id, payload)
        except ClientError as exc:
            if is_conditional_check_failure(exc):
                raise ApiError(ArtistMessages.ALREADY_EXISTS, locale, {"id": payload.id}) from exc
            raise

    def update_artist(
        self,
        tenant_id: str,
        artist_id: str,
        payload: ArtistUpdate,
        locale: str,
    ) -> ArtistRecord:
        try:
            return self._repository.update_artist(tenant_id, artist_id, payload)
        except ClientError as exc:
            if is_conditional_check_failure(exc):
                raise ApiError(ArtistMessages.NOT_FOUND, locale, {"id": artist_id}) from exc
            raise

    def delete_artist(self, tenant_id: str, artist_id: str, locale: str) -> None:
        try:
            self._repository.delete_artist(tenant_id, artist_id)
        except ClientError as exc:
            if is_conditional_check_failure(exc):
                raise ApiError(ArtistMessages.NOT_FOUND, locale, {"id": artist_id}) from exc
            raise


_default_service: ArtistService | None = None


def default_artist_service() -> ArtistService:
    """Process-wide service bound to the configured table."""
    global _default_service
    if _default_service is None:
        settings = get_settings()
        _default_service = ArtistService(
            ArtistRepository(
                table_name=settings.catalog_table,
                dynamodb_resource=get_dynamodb(),
                cloudwatch_client=get_cloudwatch(),
            )
        )
    return _default_service
