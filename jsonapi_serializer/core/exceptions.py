"""Exceptions raised while building JSON:API documents."""

from __future__ import annotations

from typing import Any


class JSONAPIError(Exception):
    """Base error. Carries ``message`` and ``status`` so it is itself error-like."""

    message: str = "JSON:API error"
    status: Any = None

    def __init__(self, message: str | None = None, *, status: Any = None) -> None:
        if message is not None:
            self.message = message
        if status is not None:
            self.status = status
        super().__init__(self.message)


class MissingIdentifierError(JSONAPIError, ValueError):
    """An instance that must carry an ``id`` property has none."""

    message = 'Expected an "id" property.'


class UnregisteredModelError(JSONAPIError, LookupError):
    """No model schema is registered for an instance's class."""

    def __init__(self, model: type) -> None:
        self.model = model
        super().__init__(f"No JSON:API schema registered for {model.__qualname__!r}.")
