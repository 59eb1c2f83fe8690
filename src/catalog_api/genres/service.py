"""Genre use cases: cursor handling and store-error translation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from botocore.exceptions import ClientError
from catalog_data import CursorCodec, GenreRecord, TenantAccessViolation
from catalog_data.cursor import is_genre_start_key
from catalog_data.exceptions import is_conditional_check_failure

from catalog_api.clients import get_cloudwatch, get_dynamodb
from catalog_api.config import get_settings
from catalog_api.errors import ApiError
from catalog_api.genres.repository import GenreRepository
from catalog_api.genres.schemas import GenreCreate, GenreListQuery, GenreUpdate
from catalog_api.messages import CommonMessages, GenreMessages


@dataclass(frozen=True)
class GenreListResult:
    items: list[GenreRecord] = field(default_factory=list)
    next_cursor: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": [genre.to_dict() for genre in self.items],
            "nextCursor": self.next_cursor,
        }


class GenreService:
    def __init__(
        self,
        repository: GenreRepository,
        cursor_codec: CursorCodec | None = None,
    ) -> None:
        self._repository = repository
        self._cursor_codec = cursor_codec or CursorCodec()

    def list_genres(self, tenant_id: str, query: GenreListQuery, locale: str) -> GenreListResult:
        start_key = self._cursor_codec.decode(
            query.cursor,
            lambda: ApiError(CommonMessages.INVALID_CURSOR, locale),
            accept=is_genre_start_key,
        )
        try:
            page = self._repository.list_genres(
                tenant_id,
                limit=query.limit,
                exclusive_start_key=start_key,
            )
        except TenantAccessViolation as exc:
            # A cursor minted for another tenant's partition.
            raise ApiError(CommonMessages.INVALID_CURSOR, locale) from exc
        return GenreListResult(
            items=page.items,
            next_cursor=self._cursor_codec.encode(page.last_evaluated_key),
        )

    def get_genre(self, tenant_id: str, genre_id: str, locale: str) -> GenreRecord:
        genre = self._repository.find_by_id(tenant_id, genre_id)
        if genre is None:
            raise ApiError(GenreMessages.NOT_FOUND, locale, {"id": genre_id})
        return genre

    def create_genre(self, tenant_id: str, payload: GenreCreate, locale: str) -> GenreRecord:
        try:
            return self._repository.create_genre(tenant_id, payload)
        except ClientError as exc:
            if is_conditional_check_failure(exc):
                raise ApiError(GenreMessages.ALREADY_EXISTS, locale, {"id": payload.id}) from exc
            raise

    def update_genre(
        self,
        tenant_id: str,
        genre_id: str,
        payload: GenreUpdate,
        locale: str,
    ) -> GenreRecord:
        try:
            return self._repository.update_genre(tenant_id, genre_id, payload)
        except ClientError as exc:
            if is_conditional_check_failure(exc):
                raise ApiError(GenreMessages.NOT_FOUND, locale, {"id": genre_id}) from exc
            raise

    def delete_genre(self, tenant_id: str, genre_id: str, locale: str) -> None:
        try:
            self._repository.delete_genre(tenant_id, genre_id)
        except ClientError as exc:
            if is_conditional_check_failure(exc):
                raise ApiError(GenreMessages.NOT_FOUND, locale, {"id": genre_id}) from exc
            raise


_default_service: GenreService | None = None


def default_genre_service() -> GenreService:
    """Process-wide service bound to the configured table."""
    global _default_service
    if _default_service is None:
        settings = get_settings()
        _default_service = GenreService(
            GenreRepository(
                table_name=settings.catalog_table,
                dynamodb_resource=get_dynamodb(),
                cloudwatch_client=get_cloudwatch(),
            )
        )
    return _default_service
