"""
catalog_api.translator - en-US / tr-TR message tables.
"""

from __future__ import annotations

DEFAULT_LOCALE = "en-US"

_TRANSLATIONS: dict[str, dict[str, str]] = {
    "en-US": {
        "Successes.Genre.LIST_SUCCESS": "Genres retrieved successfully.",
        "Successes.Genre.GET_SUCCESS": "Genre retrieved successfully.",
        "Successes.Genre.CREATED": "Genre created successfully.",
        "Successes.Genre.UPDATED": "Genre updated successfully.",
        "Successes.Genre.DELETED": "Genre deleted successfully.",
        "Errors.Genre.NOT_FOUND": "Requested genre could not be found.",
        "Errors.Genre.ALREADY_EXISTS": "A genre with the same id already exists.",
        "Successes.Artist.LIST_SUCCESS": "Artists retrieved successfully.",
        "Successes.Artist.GET_SUCCESS": "Artist retrieved successfully.",
        "Successes.Artist.CREATED": "Artist created successfully.",
        "Successes.Artist.UPDATED": "Artist updated successfully.",
        "Successes.Artist.DELETED": "Artist deleted successfully.",
        "Errors.Artist.NOT_FOUND": "Requested artist could not be found.",
        "Errors.Artist.ALREADY_EXISTS": "An artist with the same id already exists.",
        "Errors.Common.INVALID_CURSOR": "Cursor token is invalid.",
        "Errors.Common.ROUTE_NOT_FOUND": "Requested route could not be found.",
        "Errors.Common.INVALID_JSON": "Request body must be valid JSON.",
        "Errors.Common.TENANT_REQUIRED": "Tenant identifier header is required.",
        "Errors.Common.INVALID_INPUT": "One or more fields failed validation.",
    },
    "tr-TR": {
        "Successes.Genre.LIST_SUCCESS": "Türler başarıyla getirildi.",
        "Successes.Genre.GET_SUCCESS": "Tür başarıyla getirildi.",
        "Successes.Genre.CREATED": "Tür başarıyla oluşturuldu.",
        "Successes.Genre.UPDATED": "Tür başarıyla güncellendi.",
        "Successes.Genre.DELETED": "Tür başarıyla silindi.",
        "Errors.Genre.NOT_FOUND": "İstenen tür bulunamadı.",
        "Errors.Genre.ALREADY_EXISTS": "Aynı kimliğe sahip bir tür zaten mevcut.",
        "Successes.Artist.LIST_SUCCESS": "Sanatçılar başarıyla getirildi.",
        "Successes.Artist.GET_SUCCESS": "Sanatçı başarıyla getirildi.",
        "Successes.Artist.CREATED": "Sanatçı başarıyla oluşturuldu.",
        "Successes.Artist.UPDATED": "Sanatçı başarıyla güncellendi.",
        "Successes.Artist.DELETED": "Sanatçı başarıyla silindi.",
        "Errors.Artist.NOT_FOUND": "İstenen sanatçı bulunamadı.",
        "Errors.Artist.ALREADY_EXISTS": "Aynı kimliğe sahip bir sanatçı zaten mevcut.",
        "Errors.Common.INVALID_CURSOR": "Cursor değeri geçersiz.",
        "Errors.Common.ROUTE_NOT_FOUND": "İstenen adres bulunamadı.",
        "Errors.Common.INVALID_JSON": "İstek gövdesi geçerli JSON olmalıdır.",
        "Errors.Common.TENANT_REQUIRED": "Tenant kimliği başlığı gereklidir.",
        "Errors.Common.INVALID_INPUT": "Bir veya daha fazla alan doğrulamadan geçemedi.",
    },
}


def translate(key: str, locale: str) -> str:
    """Look up key for locale, falling back to en-US, then to the key itself."""
    table = _TRANSLATIONS.get(locale) or _TRANSLATIONS[DEFAULT_LOCALE]
    return table.get(key, key)
