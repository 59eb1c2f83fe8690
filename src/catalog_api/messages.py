"""
catalog_api.messages - Numbered, localizable response messages.

Every envelope carries a numeric code and a classId taken from one of the
definitions below. Codes are part of the public API contract: never renumber.

    1xxx  success   (10xx genre, 11xx artist)
    30xx  common client errors
    34xx  genre errors
    35xx  artist errors
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class MessageKind(StrEnum):
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


@dataclass(frozen=True)
class MessageDefinition:
    kind: MessageKind
    class_id: str
    short_name: str
    code: int
    http_status: int

    @property
    def i18n_key(self) -> str:
        root = "Successes" if self.kind is MessageKind.SUCCESS else "Errors"
        return f"{root}.{self.class_id}.{self.short_name}"


def _success(class_id: str, short_name: str, code: int, http_status: int) -> MessageDefinition:
    return MessageDefinition(MessageKind.SUCCESS, class_id, short_name, code, http_status)


def _error(class_id: str, short_name: str, code: int, http_status: int) -> MessageDefinition:
    return MessageDefinition(MessageKind.ERROR, class_id, short_name, code, http_status)


class CommonMessages:
    INVALID_CURSOR = _error("Common", "INVALID_CURSOR", 3000, 400)
    ROUTE_NOT_FOUND = _error("Common", "ROUTE_NOT_FOUND", 3001, 404)
    INVALID_JSON = _error("Common", "INVALID_JSON", 3002, 400)
    TENANT_REQUIRED = _error("Common", "TENANT_REQUIRED", 3003, 400)
    INVALID_INPUT = _error("Common", "INVALID_INPUT", 3004, 400)


class GenreMessages:
    LIST_SUCCESS = _success("Genre", "LIST_SUCCESS", 1001, 200)
    GET_SUCCESS = _success("Genre", "GET_SUCCESS", 1002, 200)
    CREATED = _success("Genre", "CREATED", 1003, 201)
    UPDATED = _success("Genre", "UPDATED", 1004, 200)
    DELETED = _success("Genre", "DELETED", 1005, 200)
    NOT_FOUND = _error("Genre", "NOT_FOUND", 3404, 404)
    ALREADY_EXISTS = _error("Genre", "ALREADY_EXISTS", 3409, 409)


class ArtistMessages:
    LIST_SUCCESS = _success("Artist", "LIST_SUCCESS", 1101, 200)
    GET_SUCCESS = _success("Artist", "GET_SUCCESS", 1102, 200)
    CREATED = _success("Artist", "CREATED", 1103, 201)
    UPDATED = _success("Artist", "UPDATED", 1104, 200)
    DELETED = _success("Artist", "DELETED", 1105, 200)
    NOT_FOUND = _error("Artist", "NOT_FOUND", 3504, 404)
    ALREADY_EXISTS = _error("Artist", "ALREADY_EXISTS", 3509, 409)
