"""Request models for the artist endpoints."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from catalog_api.validation import (
    coerce_bool,
    coerce_cursor,
    coerce_limit,
    invalid,
    non_empty_string,
    validate_id,
)

# Unlike genre ids, artist ids keep their case.
ARTIST_ID_PATTERN = re.compile(r"^[a-z0-9_-]+$", re.IGNORECASE)


def artist_id(value: Any) -> str:
    return validate_id(
        value,
        pattern=ARTIST_ID_PATTERN,
        lowercase=False,
        pattern_message="id may include letters, numbers, underscores, or hyphens",
    )


class ArtistCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    is_active: bool = Field(default=True, alias="isActive")

    @field_validator("id", mode="before")
    @classmethod
    def _check_id(cls, value: Any) -> str:
        return artist_id(value)

    @field_validator("first_name", mode="before")
    @classmethod
    def _check_first_name(cls, value: Any) -> str:
        return non_empty_string(value, field="firstName")

    @field_validator("last_name", mode="before")
    @classmethod
    def _check_last_name(cls, value: Any) -> str:
        return non_empty_string(value, field="lastName")

    @field_validator("is_active", mode="before")
    @classmethod
    def _check_is_active(cls, value: Any) -> bool:
        return coerce_bool(value, message="isActive must be a boolean")


class ArtistUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    is_active: bool | None = Field(default=None, alias="isActive")

    @model_validator(mode="before")
    @classmethod
    def _reject_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and "id" in data:
            raise invalid("id cannot be updated")
        return data

    @field_validator("first_name", mode="before")
    @classmethod
    def _check_first_name(cls, value: Any) -> str:
        return non_empty_string(value, field="firstName")

    @field_validator("last_name", mode="before")
    @classmethod
    def _check_last_name(cls, value: Any) -> str:
        return non_empty_string(value, field="lastName")

    @field_validator("is_active", mode="before")
    @classmethod
    def _check_is_active(cls, value: Any) -> bool:
        return coerce_bool(value, message="isActive must be a boolean")

    @model_validator(mode="after")
    def _require_change(self) -> ArtistUpdate:
        if self.first_name is None and self.last_name is None and self.is_active is None:
            raise invalid("At least one field must be provided to update an artist")
        return self


class ArtistIdParams(BaseModel):
    id: str

    @field_validator("id", mode="before")
    @classmethod
    def _check_id(cls, value: Any) -> str:
        return artist_id(value)


class ArtistListQuery(BaseModel):
    model_config = ConfigDict(extra="ignore")

    limit: int | None = None
    cursor: str | None = None
    is_active: bool | None = Field(default=None, alias="isActive")

    @field_validator("limit", mode="before")
    @classmethod
    def _check_limit(cls, value: Any) -> int | None:
        return coerce_limit(value)

    @field_validator("cursor", mode="before")
    @classmethod
    def _check_cursor(cls, value: Any) -> str | None:
        return coerce_cursor(value)

    @field_validator("is_active", mode="before")
    @classmethod
    def _check_is_active(cls, value: Any) -> bool | None:
        if value is None:
            return None
        return coerce_bool(value, message="isActive must be true or false")
