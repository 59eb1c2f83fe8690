"""
catalog_data.expressions - DynamoDB UpdateExpression builder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UpdateField:
    key: str  # placeholder stem, e.g. "firstName" -> #firstName / :firstName
    attribute_name: str
    value: Any


@dataclass(frozen=True)
class UpdateExpression:
    expression: str
    names: dict[str, str]
    values: dict[str, Any]


def build_update_expression(
    fields: list[UpdateField],
    *,
    updated_at: str,
    error_message: str = "No updates provided",
) -> UpdateExpression:
    """Build a SET expression for every field with a value, plus UpdatedAt.

    Fields whose value is None are skipped. Raises ValueError if no field
    remains, since touching only UpdatedAt is never a meaningful update.
    """
    set_parts = ["#updatedAt = :updatedAt"]
    names: dict[str, str] = {"#updatedAt": "UpdatedAt"}
    values: dict[str, Any] = {":updatedAt": updated_at}

    for update in fields:
        if update.value is None:
            continue
        name_key = f"#{update.key}"
        value_key = f":{update.key}"
        set_parts.append(f"{name_key} = {value_key}")
        names[name_key] = update.attribute_name
        values[value_key] = update.value

    if len(set_parts) == 1:
        raise ValueError(error_message)

    return UpdateExpression(
        expression="SET " + ", ".join(set_parts),
        names=names,
        values=values,
    )
