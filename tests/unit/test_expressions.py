"""Unit tests for catalog_data.expressions.build_update_expression."""

from __future__ import annotations

import pytest
from catalog_data.expressions import UpdateField, build_update_expression

NOW = "2026-03-01T09:30:00.123Z"


def test_sets_updated_at_and_every_present_field() -> None:
    update = build_update_expression(
        [
            UpdateField("firstName", "FirstName", "Al"),
            UpdateField("isActive", "IsActive", False),
        ],
        updated_at=NOW,
    )

    assert update.expression == (
        "SET #updatedAt = :updatedAt, #firstName = :firstName, #isActive = :isActive"
    )
    assert update.names == {
        "#updatedAt": "UpdatedAt",
        "#firstName": "FirstName",
        "#isActive": "IsActive",
    }
    assert update.values == {":updatedAt": NOW, ":firstName": "Al", ":isActive": False}


def test_none_values_are_skipped() -> None:
    update = build_update_expression(
        [
            UpdateField("texts", "Texts", None),
            UpdateField("displayOrder", "DisplayOrder", 0),
        ],
        updated_at=NOW,
    )
    assert "#texts" not in update.names
    assert update.values[":displayOrder"] == 0


def test_no_fields_raises() -> None:
    with pytest.raises(ValueError, match="Nothing to change"):
        build_update_expression(
            [UpdateField("texts", "Texts", None)],
            updated_at=NOW,
            error_message="Nothing to change",
        )
