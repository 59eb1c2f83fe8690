"""
catalog_data.models - Single-table key design and catalog records.

Table: media-catalog
    PK: TENANT#{tenantId}
    SK: GENRE#{genreId} | ARTIST#{artistId}
    LSI DisplayOrderIndex: PK + DisplayOrder (N), projection ALL

Records are stored with PascalCase attribute names and exposed through the
API in camelCase (see to_dict).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

TENANT_PREFIX = "TENANT#"
GENRE_PREFIX = "GENRE#"
ARTIST_PREFIX = "ARTIST#"

DISPLAY_ORDER_INDEX = "DisplayOrderIndex"


class EntityType(StrEnum):
    GENRE = "GENRE"
    ARTIST = "ARTIST"


def tenant_pk(tenant_id: str) -> str:
    return f"{TENANT_PREFIX}{tenant_id}"


def genre_sk(genre_id: str) -> str:
    return f"{GENRE_PREFIX}{genre_id}"


def artist_sk(artist_id: str) -> str:
    return f"{ARTIST_PREFIX}{artist_id}"


def now_utc() -> datetime:
    return datetime.now(UTC)


def iso_timestamp(dt: datetime) -> str:
    """ISO 8601 UTC with millisecond precision and a Z suffix."""
    return dt.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ---------------------------------------------------------------------------
# Genre
# PK: TENANT#{tenantId}  SK: GENRE#{genreId}
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GenreRecord:
    """Genre catalog record.

    texts maps a lowercase locale code to the display text for that locale
    and always holds at least one entry.
    """

    genre_id: str
    tenant_id: str
    texts: dict[str, str]
    display_order: int
    created_at: str  # ISO 8601 UTC
    updated_at: str  # ISO 8601 UTC

    @property
    def pk(self) -> str:
        return tenant_pk(self.tenant_id)

    @property
    def sk(self) -> str:
        return genre_sk(self.genre_id)

    def to_item(self) -> dict[str, Any]:
        return {
            "PK": self.pk,
            "SK": self.sk,
            "EntityType": EntityType.GENRE.value,
            "GenreId": self.genre_id,
            "Texts": dict(self.texts),
            "DisplayOrder": self.display_order,
            "TenantId": self.tenant_id,
            "CreatedAt": self.created_at,
            "UpdatedAt": self.updated_at,
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> GenreRecord:
        return cls(
            genre_id=str(item["GenreId"]),
            tenant_id=str(item["TenantId"]),
            texts={str(k): str(v) for k, v in (item.get("Texts") or {}).items()},
            display_order=int(item["DisplayOrder"]),
            created_at=str(item["CreatedAt"]),
            updated_at=str(item["UpdatedAt"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.genre_id,
            "texts": dict(self.texts),
            "displayOrder": self.display_order,
            "tenantId": self.tenant_id,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


# ---------------------------------------------------------------------------
# Artist
# PK: TENANT#{tenantId}  SK: ARTIST#{artistId}
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ArtistRecord:
    artist_id: str
    tenant_id: str
    first_name: str
    last_name: str
    is_active: bool
    created_at: str  # ISO 8601 UTC
    updated_at: str  # ISO 8601 UTC

    @property
    def pk(self) -> str:
        return tenant_pk(self.tenant_id)

    @property
    def sk(self) -> str:
        return artist_sk(self.artist_id)

    def to_item(self) -> dict[str, Any]:
        return {
            "PK": self.pk,
            "SK": self.sk,
            "EntityType": EntityType.ARTIST.value,
            "ArtistId": self.artist_id,
            "FirstName": self.first_name,
            "LastName": self.last_name,
            "IsActive": self.is_active,
            "TenantId": self.tenant_id,
            "CreatedAt": self.created_at,
            "UpdatedAt": self.updated_at,
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> ArtistRecord:
        return cls(
            artist_id=str(item["ArtistId"]),
            tenant_id=str(item["TenantId"]),
            first_name=str(item["FirstName"]),
            last_name=str(item["LastName"]),
            is_active=bool(item.get("IsActive", True)),
            created_at=str(item["CreatedAt"]),
            updated_at=str(item["UpdatedAt"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.artist_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "isActive": self.is_active,
            "tenantId": self.tenant_id,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


# ---------------------------------------------------------------------------
# TenantContext - identity the scoped client is bound to
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TenantContext:
    """
    Tenant identity resolved from the request (tenant header or the
    configured default tenant).

    Passed to TenantScopedDynamoDB to scope all data access to the caller's
    partition.
    """

    tenant_id: str
