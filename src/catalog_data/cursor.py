"""
catalog_data.cursor - Opaque pagination cursors.

A cursor is the standard base64 encoding of the JSON form of DynamoDB's
LastEvaluatedKey. Clients treat it as opaque and echo it back unchanged,
so a decoded cursor is checked against the key shape of the query it
resumes before it reaches DynamoDB.
"""

from __future__ import annotations

import base64
import binascii
import json
from collections.abc import Callable
from decimal import Decimal
from typing import Any

from catalog_data.exceptions import InvalidCursorError
from catalog_data.models import ARTIST_PREFIX, GENRE_PREFIX

StartKeyCheck = Callable[[dict[str, Any]], bool]


def json_default(value: Any) -> Any:
    """json.dumps default for boto3 Decimals: whole numbers as int, the rest as float."""
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


# ---------------------------------------------------------------------------
# Start key shapes
# ---------------------------------------------------------------------------


def _is_table_key(key: dict[str, Any], sk_prefix: str) -> bool:
    pk, sk = key.get("PK"), key.get("SK")
    return isinstance(pk, str) and isinstance(sk, str) and sk.startswith(sk_prefix)


def is_genre_start_key(key: dict[str, Any]) -> bool:
    """LastEvaluatedKey of a DisplayOrderIndex query: PK, SK and an integer DisplayOrder."""
    order = key.get("DisplayOrder")
    return (
        set(key) == {"PK", "SK", "DisplayOrder"}
        and _is_table_key(key, GENRE_PREFIX)
        and isinstance(order, int)
        and not isinstance(order, bool)
    )


def is_artist_start_key(key: dict[str, Any]) -> bool:
    """LastEvaluatedKey of a base-table artist query: PK and an ARTIST# SK only."""
    return set(key) == {"PK", "SK"} and _is_table_key(key, ARTIST_PREFIX)


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------


class CursorCodec:
    def encode(self, key: dict[str, Any] | None) -> str | None:
        if not key:
            return None
        payload = json.dumps(key, default=json_default, separators=(",", ":"))
        return base64.b64encode(payload.encode("utf-8")).decode("ascii")

    def decode(
        self,
        cursor: str | None,
        on_invalid: Callable[[], Exception] | None = None,
        accept: StartKeyCheck | None = None,
    ) -> dict[str, Any] | None:
        """Decode a cursor back into an ExclusiveStartKey.

        Floats decode as Decimal so the key can be handed straight to boto3.
        When ``accept`` is given, a decoded key it rejects is an invalid cursor.
        """
        if not cursor:
            return None
        try:
            raw = base64.b64decode(cursor, validate=True)
            value = json.loads(raw.decode("utf-8"), parse_float=Decimal)
        except (binascii.Error, UnicodeDecodeError, ValueError) as exc:
            raise self._invalid(on_invalid) from exc
        if not isinstance(value, dict) or not value:
            raise self._invalid(on_invalid)
        if accept is not None and not accept(value):
            raise self._invalid(on_invalid)
        return value

    @staticmethod
    def _invalid(on_invalid: Callable[[], Exception] | None) -> Exception:
        if on_invalid is not None:
            return on_invalid()
        return InvalidCursorError("Invalid cursor token")
