"""
catalog_api.errors - ApiError, the only exception handlers turn into a 4xx.
"""

from __future__ import annotations

from typing import Any

from catalog_api.messages import MessageDefinition
from catalog_api.translator import translate


class ApiError(Exception):
    """
    A client-facing failure described by a MessageDefinition.

    The message is translated once, at construction, into the caller's locale.

    Attributes:
        definition:  The message definition (code, classId, http status).
        locale:      Locale the message was rendered in.
        details:     Optional structured context (e.g. {"id": "drama"}).
    """

    def __init__(
        self,
        definition: MessageDefinition,
        locale: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.definition = definition
        self.locale = locale
        self.details = details
        self.message = translate(definition.i18n_key, locale)
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.definition.http_status

    @property
    def code(self) -> int:
        return self.definition.code

    @property
    def class_id(self) -> str:
        return self.definition.class_id
