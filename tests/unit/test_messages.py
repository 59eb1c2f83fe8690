"""Message catalog, translations, ApiError and the response envelopes."""

from __future__ import annotations

import json
from decimal import Decimal

import pytest
from catalog_api.envelope import (
    UNEXPECTED_ERROR_CODE,
    dumps,
    error_response,
    ok,
    unexpected_error_response,
)
from catalog_api.errors import ApiError
from catalog_api.messages import (
    ArtistMessages,
    CommonMessages,
    GenreMessages,
    MessageDefinition,
    MessageKind,
)
from catalog_api.translator import _TRANSLATIONS, DEFAULT_LOCALE, translate


def _definitions() -> list[MessageDefinition]:
    found = []
    for holder in (CommonMessages, GenreMessages, ArtistMessages):
        found.extend(v for v in vars(holder).values() if isinstance(v, MessageDefinition))
    return found


# ---------------------------------------------------------------------------
# Codes
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("definition", "code", "status"),
    [
        (GenreMessages.LIST_SUCCESS, 1001, 200),
        (GenreMessages.GET_SUCCESS, 1002, 200),
        (GenreMessages.CREATED, 1003, 201),
        (GenreMessages.UPDATED, 1004, 200),
        (GenreMessages.DELETED, 1005, 200),
        (GenreMessages.NOT_FOUND, 3404, 404),
        (GenreMessages.ALREADY_EXISTS, 3409, 409),
        (ArtistMessages.LIST_SUCCESS, 1101, 200),
        (ArtistMessages.GET_SUCCESS, 1102, 200),
        (ArtistMessages.CREATED, 1103, 201),
        (ArtistMessages.UPDATED, 1104, 200),
        (ArtistMessages.DELETED, 1105, 200),
        (ArtistMessages.NOT_FOUND, 3504, 404),
        (ArtistMessages.ALREADY_EXISTS, 3509, 409),
        (CommonMessages.INVALID_CURSOR, 3000, 400),
        (CommonMessages.ROUTE_NOT_FOUND, 3001, 404),
        (CommonMessages.INVALID_JSON, 3002, 400),
        (CommonMessages.TENANT_REQUIRED, 3003, 400),
        (CommonMessages.INVALID_INPUT, 3004, 400),
    ],
)
def test_codes_and_statuses_are_stable(
    definition: MessageDefinition, code: int, status: int
) -> None:
    assert definition.code == code
    assert definition.http_status == status


def test_codes_are_unique() -> None:
    codes = [d.code for d in _definitions()]
    assert len(codes) == len(set(codes))


def test_i18n_key() -> None:
    assert GenreMessages.CREATED.kind is MessageKind.SUCCESS
    assert GenreMessages.CREATED.i18n_key == "Successes.Genre.CREATED"
    assert ArtistMessages.NOT_FOUND.i18n_key == "Errors.Artist.NOT_FOUND"


# ---------------------------------------------------------------------------
# Translations
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("locale", sorted(_TRANSLATIONS))
def test_every_definition_is_translated(locale: str) -> None:
    missing = [d.i18n_key for d in _definitions() if d.i18n_key not in _TRANSLATIONS[locale]]
    assert missing == []


def test_translate_turkish() -> None:
    assert translate("Successes.Genre.CREATED", "tr-TR") == "Tür başarıyla oluşturuldu."


def test_unknown_locale_falls_back_to_default() -> None:
    assert translate("Errors.Genre.NOT_FOUND", "de-DE") == translate(
        "Errors.Genre.NOT_FOUND", DEFAULT_LOCALE
    )


def test_unknown_key_returns_key() -> None:
    assert translate("Errors.Nope.MISSING", "en-US") == "Errors.Nope.MISSING"


# ---------------------------------------------------------------------------
# ApiError and envelopes
# ---------------------------------------------------------------------------


def test_api_error_translates_once() -> None:
    exc = ApiError(ArtistMessages.NOT_FOUND, "tr-TR", {"id": "x"})
    assert exc.message == "İstenen sanatçı bulunamadı."
    assert exc.status_code == 404
    assert exc.code == 3504
    assert exc.class_id == "Artist"
    assert str(exc) == exc.message


def test_ok_envelope() -> None:
    response = ok(GenreMessages.CREATED, "en-US", {"id": "drama"}, "req-1")
    assert response.status_code == 201
    assert response.body == {
        "success": True,
        "code": 1003,
        "message": "Genre created successfully.",
        "classId": "Genre",
        "locale": "en-US",
        "requestId": "req-1",
        "data": {"id": "drama"},
    }


def test_ok_envelope_without_data_omits_key() -> None:
    assert "data" not in ok(GenreMessages.DELETED, "en-US").body


def test_error_envelope() -> None:
    response = error_response(ApiError(GenreMessages.ALREADY_EXISTS, "fr-FR", {"id": "x"}), "r")
    assert response.status_code == 409
    assert response.body == {
        "success": False,
        "code": 3409,
        "message": "A genre with the same id already exists.",
        "classId": "Genre",
        "locale": "fr-FR",
        "requestId": "r",
        "details": {"id": "x"},
    }


def test_error_envelope_without_details_omits_key() -> None:
    body = error_response(ApiError(CommonMessages.INVALID_CURSOR, "en-US"), None).body
    assert "details" not in body
    assert body["requestId"] is None


def test_unexpected_error_envelope() -> None:
    response = unexpected_error_response("req-9")
    assert response.status_code == 500
    assert response.body == {
        "success": False,
        "code": UNEXPECTED_ERROR_CODE,
        "message": "Internal server error",
        "classId": "Unknown",
        "locale": "en-US",
        "requestId": "req-9",
    }


def test_dumps_handles_decimals_and_unicode() -> None:
    text = dumps({"n": Decimal("2"), "f": Decimal("1.5"), "s": "Dram ü"})
    assert json.loads(text) == {"n": 2, "f": 1.5, "s": "Dram ü"}
    assert "ü" in text
