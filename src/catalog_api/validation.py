"""
catalog_api.validation - Request validation on top of pydantic.

Field validators raise PydanticCustomError so the message a client sees is
exactly the text written here. Only the first failing field is reported,
as ApiError(INVALID_INPUT, details={"message": ...}).
"""

from __future__ import annotations

import re
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError

from catalog_api.errors import ApiError
from catalog_api.messages import CommonMessages

ModelT = TypeVar("ModelT", bound=BaseModel)

BODY_NOT_OBJECT = "Request body must be a JSON object"
ID_REQUIRED = "id is required and must be a non-empty string"
LIMIT_RANGE = "limit must be an integer between 1 and 100"
MAX_PAGE_SIZE = 100


def invalid(message: str) -> PydanticCustomError:
    return PydanticCustomError("invalid_field", message)


def validate_id(
    value: Any,
    *,
    pattern: re.Pattern[str],
    lowercase: bool,
    pattern_message: str,
) -> str:
    if not isinstance(value, str) or not value.strip():
        raise invalid(ID_REQUIRED)
    text = value.strip()
    if lowercase:
        text = text.lower()
    if not pattern.fullmatch(text):
        raise invalid(pattern_message)
    return text


def non_empty_string(value: Any, *, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise invalid(f"{field} must be a non-empty string")
    return value.strip()


def coerce_bool(value: Any, *, message: str) -> bool:
    """Accept JSON booleans and the strings "true"/"false" in any case."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    raise invalid(message)


def coerce_int(
    value: Any,
    *,
    message: str,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    """Accept integers, integral floats and integer strings. Booleans are rejected."""
    if isinstance(value, bool):
        raise invalid(message)
    if isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str):
        try:
            number = int(value.strip())
        except ValueError:
            raise invalid(message) from None
    else:
        raise invalid(message)
    if minimum is not None and number < minimum:
        raise invalid(message)
    if maximum is not None and number > maximum:
        raise invalid(message)
    return number


def coerce_limit(value: Any) -> int | None:
    if value is None:
        return None
    return coerce_int(value, message=LIMIT_RANGE, minimum=1, maximum=MAX_PAGE_SIZE)


def coerce_cursor(value: Any) -> str | None:
    """Blank cursors mean "first page"."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise invalid("cursor must be a string")
    return value.strip() or None


def _first_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Validation failed"
    first = errors[0]
    if first["type"] == "missing" and first["loc"]:
        return f"{first['loc'][0]} is required"
    if first["type"] in {"model_type", "model_attributes_type", "dict_type"} and not first["loc"]:
        return BODY_NOT_OBJECT
    return str(first["msg"])


def validate_model(model_cls: type[ModelT], payload: Any, locale: str) -> ModelT:
    """Validate payload against model_cls or raise ApiError(INVALID_INPUT)."""
    if not isinstance(payload, dict):
        raise ApiError(CommonMessages.INVALID_INPUT, locale, {"message": BODY_NOT_OBJECT})
    try:
        return model_cls.model_validate(payload)
    except ValidationError as exc:
        raise ApiError(
            CommonMessages.INVALID_INPUT, locale, {"message": _first_message(exc)}
        ) from exc
