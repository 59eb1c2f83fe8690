"""Request models for the genre endpoints."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from catalog_api.validation import (
    coerce_cursor,
    coerce_int,
    coerce_limit,
    invalid,
    validate_id,
)

GENRE_ID_PATTERN = re.compile(r"^[a-z0-9_-]+$")

_TEXTS_SHAPE = "texts must be an object of locale -> text values"
_DISPLAY_ORDER = "displayOrder must be a non-negative integer"


def genre_id(value: Any) -> str:
    return validate_id(
        value,
        pattern=GENRE_ID_PATTERN,
        lowercase=True,
        pattern_message="id may contain lowercase letters, numbers, underscores, or hyphens",
    )


def genre_texts(value: Any) -> dict[str, str]:
    """Normalize texts: locale keys trimmed and lowercased, values trimmed."""
    if not isinstance(value, dict):
        raise invalid(_TEXTS_SHAPE)
    entries: dict[str, str] = {}
    for locale, text in value.items():
        if not isinstance(locale, str) or not locale.strip():
            raise invalid("texts keys must be non-empty locale codes")
        if not isinstance(text, str) or not text.strip():
            raise invalid(f"texts.{locale} must be a non-empty string")
        entries[locale.strip().lower()] = text.strip()
    if not entries:
        raise invalid("texts must contain at least one locale entry")
    return entries


def display_order(value: Any) -> int:
    return coerce_int(value, message=_DISPLAY_ORDER, minimum=0)


class GenreCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    texts: dict[str, str]
    display_order: int = Field(alias="displayOrder")

    @field_validator("id", mode="before")
    @classmethod
    def _check_id(cls, value: Any) -> str:
        return genre_id(value)

    @field_validator("texts", mode="before")
    @classmethod
    def _check_texts(cls, value: Any) -> dict[str, str]:
        return genre_texts(value)

    @field_validator("display_order", mode="before")
    @classmethod
    def _check_display_order(cls, value: Any) -> int:
        return display_order(value)


class GenreUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    texts: dict[str, str] | None = None
    display_order: int | None = Field(default=None, alias="displayOrder")

    @model_validator(mode="before")
    @classmethod
    def _reject_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and "id" in data:
            raise invalid("id cannot be updated")
        return data

    @field_validator("texts", mode="before")
    @classmethod
    def _check_texts(cls, value: Any) -> dict[str, str]:
        return genre_texts(value)

    @field_validator("display_order", mode="before")
    @classmethod
    def _check_display_order(cls, value: Any) -> int:
        return display_order(value)

    @model_validator(mode="after")
    def _require_change(self) -> GenreUpdate:
        if self.texts is None and self.display_order is None:
            raise invalid("At least one field must be provided to update a genre")
        return self


class GenreIdParams(BaseModel):
    id: str

    @field_validator("id", mode="before")
    @classmethod
    def _check_id(cls, value: Any) -> str:
        return genre_id(value)


class GenreListQuery(BaseModel):
    model_config = ConfigDict(extra="ignore")

    limit: int | None = None
    cursor: str | None = None

    @field_validator("limit", mode="before")
    @classmethod
    def _check_limit(cls, value: Any) -> int | None:
        return coerce_limit(value)

    @field_validator("cursor", mode="before")
    @classmethod
    def _check_cursor(cls, value: Any) -> str | None:
        return coerce_cursor(value)
