"""
tests/unit/test_models.py - Key design and record mapping for catalog_data.models.

Validates:
- PK/SK key patterns of the single-table design
- PascalCase item <-> record <-> camelCase API dict mapping
- Timestamp format
- Frozen dataclass immutability
"""

import dataclasses
from datetime import UTC, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from catalog_data.models import (
    ARTIST_PREFIX,
    DISPLAY_ORDER_INDEX,
    GENRE_PREFIX,
    TENANT_PREFIX,
    ArtistRecord,
    EntityType,
    GenreRecord,
    TenantContext,
    artist_sk,
    genre_sk,
    iso_timestamp,
    tenant_pk,
)

NOW = "2026-03-01T09:30:00.123Z"


def _genre() -> GenreRecord:
    return GenreRecord(
        genre_id="drama",
        tenant_id="tenant-a",
        texts={"en": "Drama", "tr": "Dram"},
        display_order=1,
        created_at=NOW,
        updated_at=NOW,
    )


def _artist() -> ArtistRecord:
    return ArtistRecord(
        artist_id="artist-emma-stone",
        tenant_id="tenant-a",
        first_name="Emma",
        last_name="Stone",
        is_active=True,
        created_at=NOW,
        updated_at=NOW,
    )


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------


class TestKeys:
    def test_prefixes(self) -> None:
        assert TENANT_PREFIX == "TENANT#"
        assert GENRE_PREFIX == "GENRE#"
        assert ARTIST_PREFIX == "ARTIST#"
        assert DISPLAY_ORDER_INDEX == "DisplayOrderIndex"

    def test_key_builders(self) -> None:
        assert tenant_pk("tenant-a") == "TENANT#tenant-a"
        assert genre_sk("drama") == "GENRE#drama"
        assert artist_sk("Artist_1") == "ARTIST#Artist_1"

    def test_entity_type_values(self) -> None:
        assert EntityType.GENRE == "GENRE"
        assert EntityType.ARTIST == "ARTIST"


class TestIsoTimestamp:
    def test_millisecond_precision_with_z_suffix(self) -> None:
        dt = datetime(2026, 3, 1, 9, 30, 0, 123456, tzinfo=UTC)
        assert iso_timestamp(dt) == NOW

    def test_converts_offsets_to_utc(self) -> None:
        dt = datetime(2026, 3, 1, 12, 30, 0, 123000, tzinfo=timezone(timedelta(hours=3)))
        assert iso_timestamp(dt) == NOW


# ---------------------------------------------------------------------------
# GenreRecord
# ---------------------------------------------------------------------------


class TestGenreRecord:
    def test_keys(self) -> None:
        genre = _genre()
        assert genre.pk == "TENANT#tenant-a"
        assert genre.sk == "GENRE#drama"

    def test_to_item_uses_pascal_case(self) -> None:
        item = _genre().to_item()
        assert item == {
            "PK": "TENANT#tenant-a",
            "SK": "GENRE#drama",
            "EntityType": "GENRE",
            "GenreId": "drama",
            "Texts": {"en": "Drama", "tr": "Dram"},
            "DisplayOrder": 1,
            "TenantId": "tenant-a",
            "CreatedAt": NOW,
            "UpdatedAt": NOW,
        }

    def test_from_item_converts_decimal_display_order(self) -> None:
        item = _genre().to_item()
        item["DisplayOrder"] = Decimal("7")
        genre = GenreRecord.from_item(item)
        assert genre.display_order == 7
        assert isinstance(genre.display_order, int)

    def test_to_dict_is_camel_case(self) -> None:
        assert _genre().to_dict() == {
            "id": "drama",
            "texts": {"en": "Drama", "tr": "Dram"},
            "displayOrder": 1,
            "tenantId": "tenant-a",
            "createdAt": NOW,
            "updatedAt": NOW,
        }

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            _genre().display_order = 2  # type: ignore[misc]


# ---------------------------------------------------------------------------
# ArtistRecord
# ---------------------------------------------------------------------------


class TestArtistRecord:
    def test_keys(self) -> None:
        artist = _artist()
        assert artist.pk == "TENANT#tenant-a"
        assert artist.sk == "ARTIST#artist-emma-stone"

    def test_item_round_trip(self) -> None:
        item = _artist().to_item()
        assert item["EntityType"] == "ARTIST"
        assert item["FirstName"] == "Emma"
        assert item["IsActive"] is True
        assert ArtistRecord.from_item(item) == _artist()

    def test_missing_is_active_defaults_to_true(self) -> None:
        item = _artist().to_item()
        del item["IsActive"]
        assert ArtistRecord.from_item(item).is_active is True

    def test_to_dict_is_camel_case(self) -> None:
        assert _artist().to_dict() == {
            "id": "artist-emma-stone",
            "firstName": "Emma",
            "lastName": "Stone",
            "isActive": True,
            "tenantId": "tenant-a",
            "createdAt": NOW,
            "updatedAt": NOW,
        }


def test_tenant_context_frozen() -> None:
    ctx = TenantContext(tenant_id="tenant-a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        ctx.tenant_id = "tenant-b"  # type: ignore[misc]
